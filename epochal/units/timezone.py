"""Named UTC offsets and offset string handling.

Epochal does not carry a timezone database. An instant holds a fixed
display offset in seconds east of UTC; this module provides the table of
common named offsets and the helpers to parse and render offset strings.
"""

from __future__ import annotations

import re
from enum import Enum

from epochal._internal.constants import MAX_UTC_OFFSET_SECONDS
from epochal.errors import TimezoneError

_OFFSET_PATTERN = re.compile(r"^([+-])(\d{1,2})(?::?(\d{2}))?$")


class Tz(Enum):
    """Common timezones as fixed UTC offsets (seconds east of UTC).

    Some abbreviations clash (Arabia Standard Time and Atlantic Standard
    Time are both AST), so members that share an offset are grouped under
    one combined name.

    Examples:
        >>> Tz.IST.offset
        19800

        >>> Tz.PST.offset_str()
        '-08:00'

        >>> Tz.from_name("JST/KST")
        <Tz.JST_KST: 32400>
    """

    UTC_WET = 0
    BST_CET = 3600
    CEST_EET = 7200
    EEST_AST = 10800
    IST = 19800
    ICT_WIB = 25200
    CST_AWST_SST_HKT = 28800
    JST_KST = 32400
    ACST = 34200
    AEST_CHST = 36000
    LWST = 37800
    NZST_FJT = 43200
    SAST = -39600
    HAST = -36000
    ALST = -32400
    PST = -28800
    MST = -25200
    CENST = -21600
    EST = -18000
    ATST_CLT = -14400
    NST = -12600
    BT_AT = -10800

    @property
    def offset(self) -> int:
        """UTC offset in seconds."""
        return self.value

    @property
    def label(self) -> str:
        """Display name, e.g. ``"CST/AWST/SST/HKT"``."""
        return self.name.replace("_", "/")

    def offset_str(self) -> str:
        """Return the offset formatted as ``+HH:MM``."""
        return format_offset(self.value)

    @classmethod
    def from_name(cls, name: str) -> Tz | None:
        """Look up a timezone by its display name."""
        for tz in cls:
            if tz.label == name:
                return tz
        return None

    @classmethod
    def from_offset(cls, offset: int) -> Tz | None:
        """Look up a timezone by its offset in seconds."""
        try:
            return cls(offset)
        except ValueError:
            return None

    @classmethod
    def from_offset_str(cls, offset: str) -> Tz | None:
        """Look up a timezone by an offset string such as ``"+05:30"``.

        Raises:
            TimezoneError: If the string is not a valid offset.
        """
        return cls.from_offset(parse_offset(offset))

    def __str__(self) -> str:
        return self.label


def parse_offset(s: str) -> int:
    """Parse a UTC offset string into seconds east of UTC.

    Supported formats:
        - "Z", "z" or "UTC": zero offset
        - "+HH:MM" or "-HH:MM"
        - "+HHMM" or "-HHMM"
        - "+HH" or "-HH"

    Raises:
        TimezoneError: If the string cannot be parsed or is a day or more.

    Examples:
        >>> parse_offset("+05:30")
        19800

        >>> parse_offset("-0500")
        -18000

        >>> parse_offset("Z")
        0
    """
    if not isinstance(s, str):
        raise TimezoneError(f"Expected string, got {type(s).__name__}")

    s = s.strip()
    if s.upper() in ("Z", "UTC"):
        return 0

    match = _OFFSET_PATTERN.match(s)
    if not match:
        raise TimezoneError(f"Cannot parse timezone string: {s!r}")

    sign_str, hours_str, minutes_str = match.groups()
    hours = int(hours_str)
    minutes = int(minutes_str) if minutes_str else 0
    if minutes > 59:
        raise TimezoneError(f"Offset minutes out of range: {s!r}")

    offset = hours * 3600 + minutes * 60
    if offset > MAX_UTC_OFFSET_SECONDS:
        raise TimezoneError(f"Offset out of range: {s!r}")
    return offset if sign_str == "+" else -offset


def format_offset(offset_seconds: int, *, colon: bool = True) -> str:
    """Render an offset in seconds as ``+HH:MM`` (or ``+HHMM``).

    Examples:
        >>> format_offset(-12600)
        '-03:30'

        >>> format_offset(3600, colon=False)
        '+0100'
    """
    sign = "-" if offset_seconds < 0 else "+"
    total_minutes = abs(offset_seconds) // 60
    hours, minutes = divmod(total_minutes, 60)
    separator = ":" if colon else ""
    return f"{sign}{hours:02d}{separator}{minutes:02d}"


def validate_offset(offset_seconds: object) -> int:
    """Check a display offset given in seconds.

    Raises:
        TimezoneError: If the offset is not an int, is a day or more, or
            is not a whole number of minutes.
    """
    if isinstance(offset_seconds, bool) or not isinstance(offset_seconds, int):
        raise TimezoneError(
            f"offset_seconds must be an integer, got {type(offset_seconds).__name__}"
        )
    if abs(offset_seconds) > MAX_UTC_OFFSET_SECONDS:
        raise TimezoneError(
            f"offset_seconds {offset_seconds} is outside valid range "
            f"[-{MAX_UTC_OFFSET_SECONDS}, {MAX_UTC_OFFSET_SECONDS}]"
        )
    if offset_seconds % 60:
        raise TimezoneError(
            f"offset_seconds must be a whole number of minutes, got {offset_seconds}"
        )
    return offset_seconds


__all__ = ["Tz", "parse_offset", "format_offset", "validate_offset"]
