"""Arithmetic on Instants.

This module provides the canonical implementations of Instant
arithmetic. The methods on Instant delegate here.

Functions:
    diff: Absolute elapsed time between two instants in a given unit.
    diff_ms: Absolute elapsed milliseconds between two instants.
    shift: Move an instant by a signed number of seconds/milliseconds.
    past_future: Classify one instant relative to another.

Instants from different time sources can be mixed freely; the source
tag plays no part in any of these operations.

Examples:
    >>> from epochal.convert import from_unix
    >>> a = from_unix(1483228800)
    >>> b = from_unix(1514764800)
    >>> diff(b, a)
    31536000
    >>> diff(a, b, TimeUnit.DAY)
    365
"""

from __future__ import annotations

from enum import Enum

from epochal._internal.constants import MILLIS_PER_SECOND, U64_MAX
from epochal._internal.validation import validate_int
from epochal.core.instant import Instant
from epochal.errors import OverflowError
from epochal.units.timeunit import TimeUnit


class RelativeTime(Enum):
    """Whether an instant lies in the past, present or future of another."""

    PAST = "past"
    PRESENT = "present"
    FUTURE = "future"

    def __str__(self) -> str:
        return self.value


def diff(a: Instant, b: Instant, unit: TimeUnit = TimeUnit.SECOND) -> int:
    """Return ``|a - b|`` expressed in ``unit``.

    The difference is taken in whole milliseconds and then scaled with
    exact integer arithmetic (truncating for units coarser than a
    millisecond).

    Args:
        a: First instant.
        b: Second instant.
        unit: Unit of the result.

    Returns:
        A non-negative integer.

    Examples:
        >>> diff(Instant(10, 900), Instant(12, 100))
        1
        >>> diff(Instant(10, 900), Instant(12, 100), TimeUnit.MILLISECOND)
        1200
    """
    return unit.from_millis(diff_ms(a, b))


def diff_ms(a: Instant, b: Instant) -> int:
    """Return ``|a - b|`` in milliseconds."""
    return abs(a.total_milliseconds - b.total_milliseconds)


def shift(instant: Instant, seconds: int = 0, *, milliseconds: int = 0) -> Instant:
    """Move an instant by a signed amount.

    Args:
        instant: The starting instant.
        seconds: Seconds to add (negative to subtract).
        milliseconds: Additional milliseconds to add (negative to subtract).

    Returns:
        A new Instant with the same source and display offset.

    Raises:
        OverflowError: If the result would fall before 1601-01-01 or past
            the largest representable instant.

    Examples:
        >>> shift(Instant(10), 5).seconds
        15
        >>> shift(Instant(10), milliseconds=-1)
        Instant(seconds=9, milliseconds=999, source=system)
    """
    validate_int("seconds", seconds)
    validate_int("milliseconds", milliseconds)

    total = instant.total_milliseconds + seconds * MILLIS_PER_SECOND + milliseconds
    new_seconds, new_millis = divmod(total, MILLIS_PER_SECOND)
    if new_seconds < 0:
        raise OverflowError("result would precede 1601-01-01 00:00:00")
    if new_seconds > U64_MAX:
        raise OverflowError("result exceeds the largest representable instant")
    return Instant._from_internal(
        new_seconds, new_millis, instant.source, instant.utc_offset
    )


def past_future(a: Instant, b: Instant) -> RelativeTime:
    """Classify ``a`` relative to ``b``.

    Examples:
        >>> past_future(Instant(1), Instant(2))
        <RelativeTime.PAST: 'past'>
    """
    if a < b:
        return RelativeTime.PAST
    if a > b:
        return RelativeTime.FUTURE
    return RelativeTime.PRESENT


__all__ = [
    "RelativeTime",
    "diff",
    "diff_ms",
    "shift",
    "past_future",
]
