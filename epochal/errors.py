"""Epochal exception hierarchy.

All Epochal-specific exceptions inherit from EpochalError.
"""

from __future__ import annotations


class EpochalError(Exception):
    """Base exception for all Epochal errors."""

    pass


class ValidationError(EpochalError):
    """Invalid input values.

    Raised when a value handed to a constructor or converter is out of
    range or of the wrong type.

    Examples:
        - Negative raw timestamp
        - Milliseconds outside 0-999
        - Month value outside 1-12
    """

    pass


class ParseError(EpochalError):
    """Failed to parse string representation.

    Raised when a string does not conform to the pattern it is parsed with.

    Examples:
        - Wrong separator between fields
        - Month or day out of range
        - Trailing characters after the last directive
    """

    pass


class OverflowError(EpochalError):
    """Arithmetic operation exceeded representable range.

    Raised when a result cannot be represented as an unsigned 64-bit
    count, instead of letting it wrap.

    Examples:
        - Adding seconds past the largest representable instant
        - Converting a far-future instant to 100ns ticks
    """

    pass


class EpochUnderflowError(EpochalError):
    """Instant predates the reference date of the requested epoch.

    Examples:
        - Asking an 1850 instant for its Mac OS (1904) timestamp
        - Asking a 1999 instant for its Mac OS Absolute (2001) timestamp
    """

    pass


class TimezoneError(EpochalError):
    """Invalid or unknown UTC offset.

    Examples:
        - Malformed offset string
        - Offset of a day or more
    """

    pass


class NtpQueryError(EpochalError):
    """An NTP round trip did not produce a usable time.

    Raised on timeout, unreachable server or malformed response. The
    query is never retried.
    """

    pass


class ClockReadError(EpochalError):
    """The operating system clock could not be read."""

    pass


__all__ = [
    "EpochalError",
    "ValidationError",
    "ParseError",
    "OverflowError",
    "EpochUnderflowError",
    "TimezoneError",
    "NtpQueryError",
    "ClockReadError",
]
