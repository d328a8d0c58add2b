"""Time sources.

Classes:
    SystemClock: Reads the operating system's wall clock.
    NtpClient: Queries an NTP server over UDP.
    NtpConfig: Server, port, timeout and version for NtpClient.
    NtpPacket / NtpTimestamp: NTP wire format.

Functions:
    clock_for: Pick the time source for a Source tag.
    now: Current Unix seconds from a time source.
"""

from __future__ import annotations

from epochal.sources.base import TimeSource, clock_for, now
from epochal.sources.ntp import (
    NtpClient,
    NtpConfig,
    NtpPacket,
    NtpTimestamp,
    Transport,
    UdpTransport,
)
from epochal.sources.system import SystemClock

__all__: list[str] = [
    "TimeSource",
    "clock_for",
    "now",
    "SystemClock",
    "NtpClient",
    "NtpConfig",
    "NtpPacket",
    "NtpTimestamp",
    "Transport",
    "UdpTransport",
]
