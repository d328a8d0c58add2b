"""RFC 3339 formatting and parsing.

RFC 3339 is a profile of ISO 8601 for internet protocols. Key differences
from the plain ISO 8601 pattern:

1. Date and time must be separated by 'T'
2. An offset designator is required: 'Z' or '+/-HH:MM'
3. Fractional seconds are optional on input

Parsed values are normalized to UTC; the parsed offset is kept as the
instant's display offset.

Functions:
    parse_rfc3339: Parse an RFC 3339 string into an Instant.
    format_rfc3339: Format an Instant as an RFC 3339 string.

Examples:
    >>> from epochal.format import format_rfc3339, parse_rfc3339

    >>> instant = parse_rfc3339("2017-01-01T00:00:00.000Z")
    >>> instant.unix()
    1483228800

    >>> format_rfc3339(instant)
    '2017-01-01T00:00:00.000Z'
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from epochal._internal.calendar import from_fields
from epochal._internal.constants import U64_MAX
from epochal._internal.validation import validate_clock, validate_day, validate_month
from epochal.errors import ParseError, TimezoneError, ValidationError
from epochal.format.strftime import strftime
from epochal.units.source import Source
from epochal.units.timezone import format_offset, parse_offset

if TYPE_CHECKING:
    from epochal.core.instant import Instant


# YYYY-MM-DDTHH:MM:SS[.fraction]Z or YYYY-MM-DDTHH:MM:SS[.fraction]+/-HH:MM
_RFC3339_PATTERN = re.compile(
    r"^(\d{4,})-(\d{2})-(\d{2})"  # Date: YYYY-MM-DD
    r"[Tt]"  # T separator (case insensitive)
    r"(\d{2}):(\d{2}):(\d{2})"  # Time: HH:MM:SS
    r"(?:\.(\d{1,9}))?"  # Optional fractional seconds
    r"([Zz]|[+-]\d{2}:\d{2})$"  # Required offset
)


def parse_rfc3339(s: str, *, source: Source = Source.SYSTEM) -> Instant:
    """Parse an RFC 3339 datetime string.

    Args:
        s: The RFC 3339 datetime string to parse.
        source: Source tag for the resulting Instant.

    Returns:
        The Instant, normalized to UTC.

    Raises:
        ParseError: If the string is not valid RFC 3339.

    Examples:
        >>> parse_rfc3339("2017-01-01T01:00:00+01:00").unix()
        1483228800

        >>> parse_rfc3339("2017-01-01 00:00:00Z")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ParseError: Invalid RFC 3339 format...
    """
    from epochal.core.instant import Instant

    if not isinstance(s, str):
        raise ParseError(f"expected string, got {type(s).__name__}")

    s = s.strip()
    if not s:
        raise ParseError("empty string")

    match = _RFC3339_PATTERN.match(s)
    if not match:
        raise ParseError(
            f"Invalid RFC 3339 format: {s!r}. "
            "Expected YYYY-MM-DDTHH:MM:SS[.fraction]Z or "
            "YYYY-MM-DDTHH:MM:SS[.fraction]+/-HH:MM"
        )

    year, month, day, hour, minute, second = (int(match.group(i)) for i in range(1, 7))
    frac_str = match.group(7)
    millis = int(frac_str.ljust(3, "0")[:3]) if frac_str else 0

    try:
        validate_month(month)
        validate_day(year, month, day)
        validate_clock(hour, minute, second)
        offset = parse_offset(match.group(8))
    except (ValidationError, TimezoneError) as exc:
        raise ParseError(f"Invalid RFC 3339 value {s!r}: {exc}") from exc

    seconds = from_fields(year, month, day, hour, minute, second) - offset
    if seconds < 0 or seconds > U64_MAX:
        raise ParseError(f"{s!r} is outside the representable range")

    return Instant._from_internal(seconds, millis, source, offset)


def format_rfc3339(value: Instant) -> str:
    """Format an Instant as an RFC 3339 string with millisecond precision.

    The offset designator is ``Z`` for a zero display offset and
    ``+HH:MM``/``-HH:MM`` otherwise.

    Raises:
        TypeError: If value is not an Instant.

    Examples:
        >>> from epochal.convert import from_unix
        >>> format_rfc3339(from_unix(1483228800).change_tz("-05:00"))
        '2016-12-31T19:00:00.000-05:00'
    """
    from epochal.core.instant import Instant

    if not isinstance(value, Instant):
        raise TypeError(f"expected Instant, got {type(value).__name__}")

    designator = "Z" if value.utc_offset == 0 else format_offset(value.utc_offset)
    return strftime(value, "%Y-%m-%dT%H:%M:%S.%f") + designator


__all__ = ["parse_rfc3339", "format_rfc3339"]
