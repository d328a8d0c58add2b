"""TimeUnit enumeration for exact integer time units.

This module provides the TimeUnit enum used by epoch conversions and
differences. Every unit is defined by its length in nanoseconds, so
scaling between units is exact integer arithmetic.
"""

from __future__ import annotations

from enum import Enum

from epochal._internal.constants import NANOS_PER_MILLISECOND


class TimeUnit(Enum):
    """Units a timestamp or elapsed time can be expressed in.

    The value of each member is the unit's length in nanoseconds.

    Examples:
        >>> TimeUnit.HUNDRED_NANOSECONDS.nanos
        100

        >>> TimeUnit.SECOND.from_millis(1_500)
        1

        >>> TimeUnit.MICROSECOND.to_millis(2_500)
        2
    """

    NANOSECOND = 1
    HUNDRED_NANOSECONDS = 100
    MICROSECOND = 1_000
    MILLISECOND = 1_000_000
    SECOND = 1_000_000_000
    MINUTE = 60 * 1_000_000_000
    HOUR = 3_600 * 1_000_000_000
    DAY = 86_400 * 1_000_000_000
    WEEK = 604_800 * 1_000_000_000

    @property
    def nanos(self) -> int:
        """Length of one unit in nanoseconds."""
        return self.value

    def from_millis(self, millis: int) -> int:
        """Express a millisecond count in this unit.

        Scaling to a coarser unit truncates; scaling to a finer unit is
        exact.
        """
        return millis * NANOS_PER_MILLISECOND // self.value

    def to_millis(self, count: int) -> int:
        """Express a count of this unit in whole milliseconds.

        Sub-millisecond remainders are truncated.
        """
        return count * self.value // NANOS_PER_MILLISECOND


__all__ = ["TimeUnit"]
