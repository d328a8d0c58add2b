"""Calendar utilities for Epochal.

This module provides the calendar capability the text codec relies on:
proleptic Gregorian conversions between canonical seconds (counted from
1601-01-01 00:00:00, which is day 0) and broken-down date/time fields.

All arithmetic is integer-only and unbounded, so the conversions stay
correct across the whole unsigned 64-bit range of canonical seconds.

This module is not part of the public API.
"""

from __future__ import annotations

from typing import NamedTuple

from epochal._internal.constants import (
    DAYS_IN_MONTH,
    REFERENCE_YEAR,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)


class CalendarFields(NamedTuple):
    """Broken-down calendar representation of a canonical second count."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    weekday: int  # Monday=0
    yday: int  # 1-366


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def _days_before_month(year: int, month: int) -> int:
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal (days since year 1).

    The ordinal for 0001-01-01 is 1.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day (1-31).

    Returns:
        The ordinal day number.
    """
    y = year - 1

    # Python's // floors toward negative infinity, which keeps this valid
    # for years before 1 as well
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400

    return days_before_year + _days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert a positive ordinal (days since year 1) to year, month, day.

    Args:
        ordinal: The ordinal day number (ordinal 1 = 0001-01-01).

    Returns:
        Tuple of (year, month, day).

    Raises:
        ValueError: If ordinal is less than 1.
    """
    if ordinal < 1:
        raise ValueError(f"ordinal must be at least 1, got {ordinal}")

    # n is 0-indexed (n=0 means ordinal=1)
    n = ordinal - 1

    # 400-year cycles: each has 146097 days
    n400, n = divmod(n, 146097)

    # 100-year cycles within the 400: each has 36524 days (except last which has 36525)
    n100, n = divmod(n, 36524)

    # 4-year cycles within the 100: each has 1461 days
    n4, n = divmod(n, 1461)

    # Years within the 4-year cycle: each has 365 days (except leap year)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a cycle ending in a leap year
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    month, day = _doy_to_md(year, n + 1)
    return (year, month, day)


def _doy_to_md(year: int, doy: int) -> tuple[int, int]:
    for month in range(1, 13):
        dim = days_in_month(year, month)
        if doy <= dim:
            return (month, doy)
        doy -= dim

    raise ValueError(f"Invalid day of year: {doy} for year {year}")


# Day 0 of the canonical calendar
_REFERENCE_ORDINAL = ymd_to_ordinal(REFERENCE_YEAR, 1, 1)


def ymd_to_days(year: int, month: int, day: int) -> int:
    """Convert year, month, day to days since 1601-01-01.

    The result is negative for dates before the reference epoch.
    """
    return ymd_to_ordinal(year, month, day) - _REFERENCE_ORDINAL


def days_to_ymd(days: int) -> tuple[int, int, int]:
    """Convert days since 1601-01-01 to year, month, day."""
    return ordinal_to_ymd(days + _REFERENCE_ORDINAL)


def day_of_week(days: int) -> int:
    """Return the weekday (Monday=0) of a day count.

    1601-01-01 was a Monday.
    """
    return days % 7


def to_fields(seconds: int) -> CalendarFields:
    """Break canonical seconds down into calendar fields.

    Args:
        seconds: Seconds since 1601-01-01 00:00:00 (may be shifted by a
            display offset, but must not be negative).

    Returns:
        The corresponding CalendarFields.

    Examples:
        >>> to_fields(0)
        CalendarFields(year=1601, month=1, day=1, hour=0, minute=0, second=0, weekday=0, yday=1)
    """
    days, rem = divmod(seconds, SECONDS_PER_DAY)
    hour, rem = divmod(rem, SECONDS_PER_HOUR)
    minute, second = divmod(rem, SECONDS_PER_MINUTE)
    year, month, day = days_to_ymd(days)
    yday = _days_before_month(year, month) + day
    return CalendarFields(year, month, day, hour, minute, second, day_of_week(days), yday)


def from_fields(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
) -> int:
    """Inverse of to_fields: seconds since 1601-01-01 00:00:00.

    No range checking is done here; callers validate first. The result is
    negative for moments before the reference epoch.
    """
    days = ymd_to_days(year, month, day)
    return (
        days * SECONDS_PER_DAY
        + hour * SECONDS_PER_HOUR
        + minute * SECONDS_PER_MINUTE
        + second
    )


def yday_to_md(year: int, yday: int) -> tuple[int, int]:
    """Convert a 1-based day of year to (month, day).

    Raises:
        ValueError: If yday is outside the year.
    """
    if yday < 1 or yday > days_in_year(year):
        raise ValueError(f"day of year must be 1-{days_in_year(year)}, got {yday}")
    return _doy_to_md(year, yday)


__all__ = [
    "CalendarFields",
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "ymd_to_days",
    "days_to_ymd",
    "day_of_week",
    "to_fields",
    "from_fields",
    "yday_to_md",
]
