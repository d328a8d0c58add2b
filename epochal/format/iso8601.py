"""ISO 8601 formatting and parsing.

This module binds the strftime codec to the fixed ISO 8601 pattern
``YYYY-MM-DDTHH:MM:SS.fff`` (no offset designator; the fields are those
of the instant's display offset).

Functions:
    parse_iso8601: Parse an ISO 8601 string into an Instant.
    format_iso8601: Format an Instant as an ISO 8601 string.

Examples:
    >>> from epochal.format import format_iso8601, parse_iso8601

    >>> instant = parse_iso8601("2017-01-01T00:00:00.000")
    >>> instant.unix()
    1483228800

    >>> format_iso8601(instant)
    '2017-01-01T00:00:00.000'
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from epochal.errors import ParseError
from epochal.format.strftime import strftime, strptime
from epochal.units.source import Source

if TYPE_CHECKING:
    from epochal.core.instant import Instant

ISO8601_PATTERN = "%Y-%m-%dT%H:%M:%S.%f"


def parse_iso8601(s: str, *, source: Source = Source.SYSTEM) -> Instant:
    """Parse an ISO 8601 string of the form ``YYYY-MM-DDTHH:MM:SS.f``.

    The fraction may have 1-9 digits and is truncated to milliseconds.
    The result is taken to be UTC.

    Raises:
        ParseError: If the string does not match the pattern.

    Examples:
        >>> parse_iso8601("2024-01-05T14:46:29.5").milliseconds
        500
    """
    if not isinstance(s, str):
        raise ParseError(f"expected string, got {type(s).__name__}")
    s = s.strip()
    if not s:
        raise ParseError("empty string")
    return strptime(s, ISO8601_PATTERN, source=source)


def format_iso8601(value: Instant) -> str:
    """Format an Instant as ``YYYY-MM-DDTHH:MM:SS.fff``.

    Raises:
        TypeError: If value is not an Instant.
    """
    from epochal.core.instant import Instant

    if not isinstance(value, Instant):
        raise TypeError(f"expected Instant, got {type(value).__name__}")
    return strftime(value, ISO8601_PATTERN)


__all__ = ["ISO8601_PATTERN", "parse_iso8601", "format_iso8601"]
