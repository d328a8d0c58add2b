"""Internal constants for Epochal.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
NANOS_PER_MILLISECOND: int = 1_000_000
NANOS_PER_SECOND: int = 1_000_000_000
MILLIS_PER_SECOND: int = 1_000

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400
SECONDS_PER_WEEK: int = 7 * SECONDS_PER_DAY  # 604_800

# Canonical counters are unsigned 64-bit
U64_MAX: int = 2**64 - 1

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

MONTH_NAMES: tuple[str, ...] = (
    "",
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Monday=0
WEEKDAY_NAMES: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

# Reference epoch: 1601-01-01 00:00:00 UTC. Every offset below is the
# number of seconds from the reference epoch to the named epoch.
REFERENCE_YEAR: int = 1601
OFFSET_UNIX: int = 11_644_473_600  # 1970-01-01
OFFSET_NTP: int = OFFSET_UNIX - 2_208_988_800  # 1900-01-01
OFFSET_MAC_OS: int = OFFSET_UNIX - 2_082_844_800  # 1904-01-01
OFFSET_SAS_4GL: int = OFFSET_UNIX - 315_619_200  # 1960-01-01
OFFSET_MAC_OS_CFA: int = OFFSET_UNIX + 978_307_200  # 2001-01-01

# Display offsets must stay strictly inside one day
MAX_UTC_OFFSET_SECONDS: int = SECONDS_PER_DAY - 1

# NTP client defaults
NTP_DEFAULT_SERVER: str = "pool.ntp.org"
NTP_DEFAULT_PORT: int = 123
NTP_DEFAULT_TIMEOUT: float = 5.0
NTP_DEFAULT_VERSION: int = 3
NTP_PACKET_SIZE: int = 48
NTP_MODE_CLIENT: int = 3
NTP_MODE_SERVER: int = 4
NTP_LEAP_UNSYNCHRONIZED: int = 3
# NTP era 0 ends 2036-02-07; timestamps with the top bit clear are era 1
NTP_ERA_PIVOT: int = 0x8000_0000
NTP_ERA_SECONDS: int = 2**32


__all__ = [
    "NANOS_PER_MILLISECOND",
    "NANOS_PER_SECOND",
    "MILLIS_PER_SECOND",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "SECONDS_PER_WEEK",
    "U64_MAX",
    "DAYS_IN_MONTH",
    "MONTH_NAMES",
    "WEEKDAY_NAMES",
    "REFERENCE_YEAR",
    "OFFSET_UNIX",
    "OFFSET_NTP",
    "OFFSET_MAC_OS",
    "OFFSET_SAS_4GL",
    "OFFSET_MAC_OS_CFA",
    "MAX_UTC_OFFSET_SECONDS",
    "NTP_DEFAULT_SERVER",
    "NTP_DEFAULT_PORT",
    "NTP_DEFAULT_TIMEOUT",
    "NTP_DEFAULT_VERSION",
    "NTP_PACKET_SIZE",
    "NTP_MODE_CLIENT",
    "NTP_MODE_SERVER",
    "NTP_LEAP_UNSYNCHRONIZED",
    "NTP_ERA_PIVOT",
    "NTP_ERA_SECONDS",
]
