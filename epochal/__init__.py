"""Epochal: timestamps across epochs, from the system clock or NTP.

Every value is an Instant, a count of seconds and milliseconds since
1601-01-01 00:00:00 UTC. Instants convert exactly to and from the common
epoch systems and units, render and parse text, and can be read from the
local clock or from an NTP server.

Core Types:
    Instant: The canonical time value

Units:
    Epoch: Unix, Windows, Mac OS, Mac OS Absolute, SAS 4GL, WebKit, NTP
    TimeUnit: Exact integer time units
    Source: SYSTEM or NTP
    Tz: Common named UTC offsets

Time Sources:
    SystemClock: The operating system's wall clock
    NtpClient: A network time server (configured with NtpConfig)
    now: Current Unix seconds, read from NTP by default

Exceptions:
    EpochalError: Base exception
    ValidationError: Invalid input values
    ParseError: Failed to parse string
    OverflowError: Result outside the representable range
    EpochUnderflowError: Instant predates the requested epoch
    TimezoneError: Invalid UTC offset
    NtpQueryError: NTP round trip failed
    ClockReadError: System clock unreadable

Example:
    >>> from epochal import Epoch, from_windows_ns
    >>> instant = from_windows_ns(131277024000000000)
    >>> instant.unix()
    1483228800
    >>> instant.to_epoch(Epoch.MAC_OS)
    3566073600
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from epochal.core.instant import Instant

# Units
from epochal.units.epoch import EPOCHS, Epoch, EpochDescriptor
from epochal.units.source import Source
from epochal.units.timeunit import TimeUnit
from epochal.units.timezone import Tz

# Arithmetic
from epochal.arithmetic.ops import RelativeTime, diff, diff_ms

# Exceptions
from epochal.errors import (
    ClockReadError,
    EpochalError,
    EpochUnderflowError,
    NtpQueryError,
    OverflowError,
    ParseError,
    TimezoneError,
    ValidationError,
)

# Conversion functions
from epochal.convert import (
    from_epoch,
    from_json,
    from_mac_os,
    from_mac_os_cfa,
    from_sas_4gl,
    from_unix,
    from_unix_ms,
    from_webkit,
    from_windows_ns,
    to_epoch,
    to_json,
)

# Format functions
from epochal.format import (
    format_iso8601,
    format_rfc3339,
    parse_iso8601,
    parse_rfc3339,
    parse_time,
    strp_iso8601,
    strp_rfc3339,
    ts_print,
)

# Time sources
from epochal.sources import NtpClient, NtpConfig, SystemClock, clock_for, now

__all__: list[str] = [
    "__version__",
    # Core types
    "Instant",
    # Units
    "EPOCHS",
    "Epoch",
    "EpochDescriptor",
    "Source",
    "TimeUnit",
    "Tz",
    # Arithmetic
    "RelativeTime",
    "diff",
    "diff_ms",
    # Exceptions
    "EpochalError",
    "ValidationError",
    "ParseError",
    "OverflowError",
    "EpochUnderflowError",
    "TimezoneError",
    "NtpQueryError",
    "ClockReadError",
    # Conversion functions
    "to_epoch",
    "from_epoch",
    "from_unix",
    "from_unix_ms",
    "from_windows_ns",
    "from_webkit",
    "from_mac_os",
    "from_mac_os_cfa",
    "from_sas_4gl",
    "to_json",
    "from_json",
    # Format functions
    "parse_time",
    "strp_iso8601",
    "strp_rfc3339",
    "parse_iso8601",
    "format_iso8601",
    "parse_rfc3339",
    "format_rfc3339",
    "ts_print",
    # Time sources
    "SystemClock",
    "NtpClient",
    "NtpConfig",
    "clock_for",
    "now",
]
