"""Time source selection.

A time source is anything with a ``now()`` method returning an Instant.
Two are provided: SystemClock (the local wall clock) and NtpClient (a
network time server). The Source tag picks between them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from epochal.errors import ValidationError
from epochal.sources.ntp import NtpClient, NtpConfig
from epochal.sources.system import SystemClock
from epochal.units.source import Source

if TYPE_CHECKING:
    from epochal.core.instant import Instant


@runtime_checkable
class TimeSource(Protocol):
    """Anything that can report the current instant."""

    source: Source

    def now(self) -> Instant: ...


def clock_for(source: Source, *, ntp_config: NtpConfig | None = None) -> TimeSource:
    """Return the time source implementing ``source``.

    Args:
        source: Which source to read from.
        ntp_config: Server settings, used only for Source.NTP.

    Raises:
        ValidationError: If source is not a Source member.

    Examples:
        >>> clock_for(Source.SYSTEM)
        SystemClock(clock=<built-in function time_ns>)
    """
    if source is Source.SYSTEM:
        return SystemClock()
    if source is Source.NTP:
        return NtpClient(ntp_config)
    raise ValidationError(f"unknown time source {source!r}")


def now(source: Source = Source.NTP, *, ntp_config: NtpConfig | None = None) -> int:
    """Return the current Unix time in seconds.

    Reads the network time unless another source is given.

    Raises:
        NtpQueryError: If the NTP server cannot be reached (Source.NTP).
        ClockReadError: If the system clock cannot be read (Source.SYSTEM).
    """
    return clock_for(source, ntp_config=ntp_config).now().unix()


__all__ = ["TimeSource", "clock_for", "now"]
