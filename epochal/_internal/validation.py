"""Validation utilities for Epochal.

This module provides validation decorators and utilities for
ensuring values are within valid ranges.

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import inspect
from typing import Callable, TypeVar, ParamSpec

from epochal._internal.constants import U64_MAX
from epochal.errors import ValidationError

P = ParamSpec("P")
T = TypeVar("T")


def validate_range(
    **limits: tuple[int, int],
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Decorator to validate that parameters are within specified ranges.

    Args:
        **limits: Mapping of parameter names to (min, max) tuples.
                  Both min and max are inclusive.

    Returns:
        A decorator function.

    Examples:
        >>> @validate_range(milliseconds=(0, 999))
        ... def make(seconds: int, milliseconds: int) -> None:
        ...     pass

        >>> make(0, 1000)
        Traceback (most recent call last):
        ...
        ValidationError: milliseconds must be between 0 and 999, got 1000
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        param_names = list(inspect.signature(func).parameters.keys())

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            all_args = dict(zip(param_names, args))
            all_args.update(kwargs)

            for param_name, (min_val, max_val) in limits.items():
                if param_name in all_args:
                    value = all_args[param_name]
                    validate_int(param_name, value)
                    if value < min_val or value > max_val:
                        raise ValidationError(
                            f"{param_name} must be between {min_val} and {max_val}, "
                            f"got {value}"
                        )

            return func(*args, **kwargs)

        return wrapper

    return decorator


def validate_int(name: str, value: object) -> None:
    """Validate that value is an int (bool is rejected).

    Raises:
        ValidationError: If value is not an int.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(
            f"{name} must be an integer, got {type(value).__name__}"
        )


def validate_u64(name: str, value: object) -> None:
    """Validate that value is an int in the unsigned 64-bit range.

    Raises:
        ValidationError: If value is not an int or is out of range.
    """
    validate_int(name, value)
    if value < 0 or value > U64_MAX:  # type: ignore[operator]
        raise ValidationError(
            f"{name} must be between 0 and {U64_MAX}, got {value}"
        )


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Raises:
        ValidationError: If month is outside 1-12.
    """
    if month < 1 or month > 12:
        raise ValidationError(f"month must be between 1 and 12, got {month}")


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Raises:
        ValidationError: If day is invalid for the month.
    """
    from epochal._internal.calendar import days_in_month

    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise ValidationError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )


def validate_clock(hour: int, minute: int, second: int) -> None:
    """Validate hour, minute and second of a wall-clock time.

    Raises:
        ValidationError: If any field is out of range.
    """
    if hour < 0 or hour > 23:
        raise ValidationError(f"hour must be between 0 and 23, got {hour}")
    if minute < 0 or minute > 59:
        raise ValidationError(f"minute must be between 0 and 59, got {minute}")
    if second < 0 or second > 59:
        raise ValidationError(f"second must be between 0 and 59, got {second}")


__all__ = [
    "validate_range",
    "validate_int",
    "validate_u64",
    "validate_month",
    "validate_day",
    "validate_clock",
]
