"""Formatting and parsing.

This module provides functions for converting Instants to and from
string representations:
    - strftime/strptime with a pattern
    - ISO 8601 and RFC 3339 fixed patterns
    - Elapsed-time pretty printing

Functions:
    strftime: Format an Instant using a strftime pattern.
    strptime: Parse a string using a strftime pattern.
    parse_time: Parse a string into an Instant for a given source.
    strp_iso8601: Parse ``YYYY-MM-DDTHH:MM:SS.fff`` for a given source.
    strp_rfc3339: Parse an RFC 3339 string for a given source.
    format_iso8601 / parse_iso8601: ISO 8601 codec.
    format_rfc3339 / parse_rfc3339: RFC 3339 codec.
    ts_print: Render elapsed seconds as ``"Ww Dd Hh Mm Ss"``.

Examples:
    >>> from epochal.format import parse_time, strp_rfc3339
    >>> from epochal.units import Source

    >>> parse_time("2017-01-01 00:00:00", "%Y-%m-%d %H:%M:%S").unix()
    1483228800

    >>> strp_rfc3339("2017-01-01T00:00:00.000Z", Source.NTP).source
    <Source.NTP: 'ntp'>
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from epochal.format.duration import ts_print
from epochal.format.iso8601 import format_iso8601, parse_iso8601
from epochal.format.rfc3339 import format_rfc3339, parse_rfc3339
from epochal.format.strftime import strftime, strptime
from epochal.units.source import Source

if TYPE_CHECKING:
    from epochal.core.instant import Instant


def parse_time(s: str, pattern: str, source: Source = Source.SYSTEM) -> Instant:
    """Parse ``s`` with a strftime pattern into an Instant tagged ``source``."""
    return strptime(s, pattern, source=source)


def strp_iso8601(s: str, source: Source = Source.SYSTEM) -> Instant:
    """Parse ``YYYY-MM-DDTHH:MM:SS.fff`` into an Instant tagged ``source``."""
    return parse_iso8601(s, source=source)


def strp_rfc3339(s: str, source: Source = Source.SYSTEM) -> Instant:
    """Parse an RFC 3339 string into an Instant tagged ``source``."""
    return parse_rfc3339(s, source=source)


__all__: list[str] = [
    # strftime
    "strftime",
    "strptime",
    "parse_time",
    # ISO 8601
    "parse_iso8601",
    "format_iso8601",
    "strp_iso8601",
    # RFC 3339
    "parse_rfc3339",
    "format_rfc3339",
    "strp_rfc3339",
    # Durations
    "ts_print",
]
