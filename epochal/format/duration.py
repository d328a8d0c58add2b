"""Elapsed-time pretty printing."""

from __future__ import annotations

from epochal._internal.constants import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    SECONDS_PER_WEEK,
)
from epochal._internal.validation import validate_int
from epochal.errors import ValidationError


def ts_print(total_seconds: int) -> str:
    """Render an elapsed number of seconds as ``"Ww Dd Hh Mm Ss"``.

    Raises:
        ValidationError: If total_seconds is not a non-negative integer.

    Examples:
        >>> ts_print(3600)
        '0w 0d 1h 0m 0s'

        >>> ts_print(63158400)
        '104w 3d 0h 0m 0s'
    """
    validate_int("total_seconds", total_seconds)
    if total_seconds < 0:
        raise ValidationError(f"total_seconds must be non-negative, got {total_seconds}")

    weeks, rem = divmod(total_seconds, SECONDS_PER_WEEK)
    days, rem = divmod(rem, SECONDS_PER_DAY)
    hours, rem = divmod(rem, SECONDS_PER_HOUR)
    minutes, seconds = divmod(rem, SECONDS_PER_MINUTE)
    return f"{weeks}w {days}d {hours}h {minutes}m {seconds}s"


__all__ = ["ts_print"]
