"""strftime-style formatting and parsing.

This module provides strftime-style formatting and strptime-style
parsing for Instants. Directives are rendered in English regardless of
locale.

Supported Directives:
    %Y - Year, at least 4 digits (e.g., 2024)
    %C - Century (20)
    %y - 2-digit year (24); parsed as 1969-2068
    %m - 2-digit month (01-12)
    %d - 2-digit day (01-31)
    %e - Space-padded day ( 1-31)
    %H - 2-digit hour, 24-hour (00-23)
    %I - 2-digit hour, 12-hour (01-12)
    %p - AM/PM
    %M - 2-digit minute (00-59)
    %S - 2-digit second (00-59)
    %f - Milliseconds (000-999); parsing accepts 1-9 fraction digits
    %j - Day of year (001-366)
    %a, %A - Weekday name (Mon, Monday)
    %b, %h, %B - Month name (Jan, January)
    %u - ISO weekday (1-7, Monday=1)
    %w - Weekday (0-6, Sunday=0)
    %z - UTC offset (+0000, -0530); parsing also accepts +05:30 and Z
    %Z - Offset name (UTC, +05:30)
    %s - Unix timestamp in seconds
    %F - Same as %Y-%m-%d
    %T - Same as %H:%M:%S
    %D - Same as %m/%d/%y
    %R - Same as %H:%M
    %n, %t - Newline, tab (formatting only)
    %% - Literal %

Functions:
    strftime: Format an Instant using a strftime-style pattern.
    strptime: Parse a string into an Instant using a strftime-style pattern.

Examples:
    >>> from epochal.format import strftime, strptime

    >>> instant = strptime("2017-01-01 00:00:00", "%Y-%m-%d %H:%M:%S")
    >>> instant.unix()
    1483228800

    >>> strftime(instant, "%A %d %B %Y")
    'Sunday 01 January 2017'
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from epochal._internal.calendar import CalendarFields, from_fields, yday_to_md
from epochal._internal.constants import (
    MONTH_NAMES,
    OFFSET_UNIX,
    U64_MAX,
    WEEKDAY_NAMES,
)
from epochal._internal.validation import validate_clock, validate_day, validate_month
from epochal.errors import ParseError, TimezoneError, ValidationError
from epochal.units.source import Source
from epochal.units.timezone import format_offset, parse_offset

if TYPE_CHECKING:
    from epochal.core.instant import Instant


# Composite directives, expanded before formatting or parsing
_COMPOSITES: dict[str, str] = {
    "%F": "%Y-%m-%d",
    "%T": "%H:%M:%S",
    "%D": "%m/%d/%y",
    "%R": "%H:%M",
}

# Mapping of format directives to (group name, pattern) for parsing
_PARSE_PATTERNS: dict[str, tuple[str, str]] = {
    "%Y": ("year", r"\d{4,}"),
    "%y": ("short_year", r"\d{2}"),
    "%m": ("month", r"\d{2}"),
    "%d": ("day", r"\d{2}"),
    "%e": ("day_padded", r"[ \d]\d"),
    "%H": ("hour", r"\d{2}"),
    "%I": ("hour12", r"\d{2}"),
    "%p": ("ampm", r"[AaPp][Mm]"),
    "%M": ("minute", r"\d{2}"),
    "%S": ("second", r"\d{2}"),
    "%f": ("fraction", r"\d{1,9}"),
    "%j": ("yday", r"\d{3}"),
    "%a": ("weekday_name", r"[A-Za-z]{3}"),
    "%A": ("weekday_name", r"[A-Za-z]+"),
    "%b": ("month_name", r"[A-Za-z]{3}"),
    "%h": ("month_name", r"[A-Za-z]{3}"),
    "%B": ("month_name", r"[A-Za-z]+"),
    "%z": ("tz_offset", r"[+-]\d{2}:?\d{2}|[Zz]"),
    "%Z": ("tz_name", r"UTC|GMT|Z|[+-]\d{2}:\d{2}"),
    "%s": ("timestamp", r"-?\d+"),
}

_SUPPORTED_FORMAT = (
    "%Y, %C, %y, %m, %d, %e, %H, %I, %p, %M, %S, %f, %j, %a, %A, %b, %h, "
    "%B, %u, %w, %z, %Z, %s, %F, %T, %D, %R, %n, %t, %%"
)
_SUPPORTED_PARSE = ", ".join([*_PARSE_PATTERNS, *_COMPOSITES, "%%"])


def _expand(pattern: str) -> str:
    """Replace composite directives with their expansions."""
    result = []
    i = 0
    while i < len(pattern):
        if pattern[i] == "%" and i + 1 < len(pattern):
            directive = pattern[i : i + 2]
            result.append(_COMPOSITES.get(directive, directive))
            i += 2
        else:
            result.append(pattern[i])
            i += 1
    return "".join(result)


def strftime(instant: Instant, pattern: str) -> str:
    """Format an Instant using a strftime-style pattern.

    Calendar fields are taken at the instant's display offset.

    Args:
        instant: The Instant to format.
        pattern: Format string with %-directives.

    Returns:
        Formatted string.

    Raises:
        ValueError: If the pattern contains unsupported directives.

    Examples:
        >>> from epochal.convert import from_mac_os
        >>> strftime(from_mac_os(3787310789), "%Y-%m-%d %H:%M:%S")
        '2024-01-05 14:46:29'

        >>> strftime(from_mac_os(3787310789), "%I:%M %p, %a %b %e")
        '02:46 PM, Fri Jan  5'
    """
    pattern = _expand(pattern)
    fields = instant.fields()

    result = []
    i = 0
    while i < len(pattern):
        if pattern[i] == "%" and i + 1 < len(pattern):
            result.append(_format_directive(instant, fields, pattern[i : i + 2]))
            i += 2
        else:
            result.append(pattern[i])
            i += 1

    return "".join(result)


def _format_directive(instant: Instant, fields: CalendarFields, directive: str) -> str:
    """Format a single directive.

    Raises:
        ValueError: If directive is unsupported.
    """
    if directive == "%%":
        return "%"
    elif directive == "%Y":
        return f"{fields.year:04d}"
    elif directive == "%C":
        return f"{fields.year // 100:02d}"
    elif directive == "%y":
        return f"{fields.year % 100:02d}"
    elif directive == "%m":
        return f"{fields.month:02d}"
    elif directive == "%d":
        return f"{fields.day:02d}"
    elif directive == "%e":
        return f"{fields.day:2d}"
    elif directive == "%H":
        return f"{fields.hour:02d}"
    elif directive == "%I":
        return f"{(fields.hour % 12) or 12:02d}"
    elif directive == "%p":
        return "AM" if fields.hour < 12 else "PM"
    elif directive == "%M":
        return f"{fields.minute:02d}"
    elif directive == "%S":
        return f"{fields.second:02d}"
    elif directive == "%f":
        return f"{instant.milliseconds:03d}"
    elif directive == "%j":
        return f"{fields.yday:03d}"
    elif directive == "%a":
        return WEEKDAY_NAMES[fields.weekday][:3]
    elif directive == "%A":
        return WEEKDAY_NAMES[fields.weekday]
    elif directive in ("%b", "%h"):
        return MONTH_NAMES[fields.month][:3]
    elif directive == "%B":
        return MONTH_NAMES[fields.month]
    elif directive == "%u":
        return str(fields.weekday + 1)
    elif directive == "%w":
        return str((fields.weekday + 1) % 7)
    elif directive == "%z":
        return format_offset(instant.utc_offset, colon=False)
    elif directive == "%Z":
        if instant.utc_offset == 0:
            return "UTC"
        return format_offset(instant.utc_offset)
    elif directive == "%s":
        # Signed: instants before 1970 render as negative timestamps
        return str(instant.seconds - OFFSET_UNIX)
    elif directive == "%n":
        return "\n"
    elif directive == "%t":
        return "\t"
    else:
        raise ValueError(
            f"unsupported strftime directive: {directive}. "
            f"Supported: {_SUPPORTED_FORMAT}"
        )


def strptime(s: str, pattern: str, *, source: Source = Source.SYSTEM) -> Instant:
    """Parse a string into an Instant using a strftime-style pattern.

    The whole string must match the pattern. Year, month and day are
    required unless the date comes from %j (with %Y) or %s. Missing time
    fields default to 0. A parsed %z/%Z offset is removed to obtain UTC
    and kept as the instant's display offset.

    Args:
        s: The string to parse.
        pattern: Format string with %-directives.
        source: Source tag for the resulting Instant.

    Returns:
        The parsed Instant.

    Raises:
        ParseError: If the string does not match the pattern or a field is
            out of range.
        ValueError: If the pattern contains unsupported directives.

    Examples:
        >>> strptime("2021-01-01 00:00:00 +0000", "%Y-%m-%d %H:%M:%S %z").unix()
        1609459200

        >>> strptime("2021-01-01 05:30:00 +05:30", "%F %T %z").unix()
        1609459200

        >>> strptime("2021/01/01", "%Y-%m-%d")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ParseError: string '2021/01/01' does not match format '%Y-%m-%d'
    """
    from epochal.core.instant import Instant

    if not isinstance(s, str):
        raise ParseError(f"expected string, got {type(s).__name__}")

    match = _format_to_regex(pattern).fullmatch(s)
    if not match:
        raise ParseError(f"string {s!r} does not match format {pattern!r}")

    groups = {k: v for k, v in match.groupdict().items() if v is not None}

    try:
        offset = _parse_offset_groups(groups)
        millis = int(groups["fraction"].ljust(3, "0")[:3]) if "fraction" in groups else 0

        if "timestamp" in groups:
            local_seconds = int(groups["timestamp"]) + OFFSET_UNIX + offset
        else:
            local_seconds = _local_seconds(groups)
    except (ValidationError, TimezoneError, ValueError) as exc:
        raise ParseError(f"string {s!r} does not match format {pattern!r}: {exc}") from exc

    seconds = local_seconds - offset
    if seconds < 0 or seconds > U64_MAX:
        raise ParseError(f"{s!r} is outside the representable range")

    return Instant._from_internal(seconds, millis, source, offset)


def _parse_offset_groups(groups: dict[str, str]) -> int:
    if "tz_offset" in groups:
        return parse_offset(groups["tz_offset"])
    if "tz_name" in groups:
        name = groups["tz_name"].upper()
        if name in ("UTC", "GMT"):
            return 0
        return parse_offset(name)
    return 0


def _local_seconds(groups: dict[str, str]) -> int:
    """Resolve parsed date/time groups into local seconds since 1601.

    Raises:
        ValidationError: If a field is missing or out of range.
    """
    if "year" in groups:
        year = int(groups["year"])
    elif "short_year" in groups:
        short = int(groups["short_year"])
        year = 1900 + short if short >= 69 else 2000 + short
    else:
        raise ValidationError("a year (%Y or %y) is required")

    month = None
    if "month" in groups:
        month = int(groups["month"])
    if "month_name" in groups:
        named = _lookup_name(groups["month_name"], MONTH_NAMES[1:], "month") + 1
        if month is not None and month != named:
            raise ValidationError(f"month name {groups['month_name']!r} contradicts month {month}")
        month = named

    day = int(groups["day"]) if "day" in groups else None
    if "day_padded" in groups:
        padded = int(groups["day_padded"].strip())
        if day is not None and day != padded:
            raise ValidationError(f"day {padded} contradicts day {day}")
        day = padded

    if month is None and day is None and "yday" in groups:
        month, day = yday_to_md(year, int(groups["yday"]))
    if month is None or day is None:
        raise ValidationError(
            "year, month, and day are required. "
            f"Got: year={year}, month={month}, day={day}"
        )

    validate_month(month)
    validate_day(year, month, day)

    if "hour12" in groups:
        if "ampm" not in groups:
            raise ValidationError("%I requires %p")
        hour12 = int(groups["hour12"])
        if hour12 < 1 or hour12 > 12:
            raise ValidationError(f"12-hour clock hour must be 1-12, got {hour12}")
        hour = hour12 % 12 + (12 if groups["ampm"].upper() == "PM" else 0)
    else:
        hour = int(groups.get("hour", 0))
    minute = int(groups.get("minute", 0))
    second = int(groups.get("second", 0))
    validate_clock(hour, minute, second)

    local = from_fields(year, month, day, hour, minute, second)

    if "weekday_name" in groups:
        weekday = _lookup_name(groups["weekday_name"], WEEKDAY_NAMES, "weekday")
        if (local // 86400) % 7 != weekday:
            raise ValidationError(
                f"weekday {groups['weekday_name']!r} does not match "
                f"{year:04d}-{month:02d}-{day:02d}"
            )

    return local


def _lookup_name(text: str, names: tuple[str, ...], kind: str) -> int:
    """Index of a full or 3-letter abbreviated name, case-insensitive."""
    lowered = text.lower()
    for index, name in enumerate(names):
        if lowered in (name.lower(), name[:3].lower()):
            return index
    raise ValidationError(f"unknown {kind} name: {text!r}")


def _format_to_regex(pattern: str) -> re.Pattern[str]:
    """Convert a strftime pattern to a compiled regex.

    A directive that appears more than once must match the same text at
    every occurrence.

    Raises:
        ValueError: If pattern contains unsupported directives.
    """
    pattern = _expand(pattern)
    result = []
    seen: set[str] = set()
    i = 0
    while i < len(pattern):
        if pattern[i] == "%" and i + 1 < len(pattern):
            directive = pattern[i : i + 2]
            if directive == "%%":
                result.append("%")
            elif directive in _PARSE_PATTERNS:
                name, regex = _PARSE_PATTERNS[directive]
                if name in seen:
                    result.append(f"(?P={name})")
                else:
                    seen.add(name)
                    result.append(f"(?P<{name}>{regex})")
            else:
                raise ValueError(
                    f"unsupported strptime directive: {directive}. "
                    f"Supported: {_SUPPORTED_PARSE}"
                )
            i += 2
        else:
            result.append(re.escape(pattern[i]))
            i += 1

    return re.compile("".join(result))


__all__ = ["strftime", "strptime"]
