"""Epoch conversion engine.

This module converts between Instants and raw integer timestamps in any
of the supported epochs and units.

Functions:
    to_epoch: Express an Instant as a raw timestamp in an epoch.
    from_epoch: Create an Instant from a raw timestamp in an epoch.
    from_unix: Instant from Unix seconds.
    from_unix_ms: Instant from Unix milliseconds.
    from_windows_ns: Instant from Windows/LDAP 100ns ticks.
    from_webkit: Instant from WebKit/Chromium microseconds.
    from_mac_os: Instant from Mac OS (1904) seconds.
    from_mac_os_cfa: Instant from Mac OS Absolute (2001) seconds.
    from_sas_4gl: Instant from SAS 4GL (1960) seconds.

All arithmetic is exact integer arithmetic. Converting to a unit coarser
than a millisecond truncates; converting from a unit finer than a
millisecond drops the sub-millisecond remainder. Results that would not
fit in an unsigned 64-bit count raise instead of wrapping.

Examples:
    >>> from epochal.convert import from_mac_os, to_epoch
    >>> from epochal.units import Epoch

    >>> from_mac_os(3787310789).pretty()
    '2024-01-05 14:46:29'

    >>> to_epoch(from_mac_os(3787310789), Epoch.UNIX)
    1704465989
"""

from __future__ import annotations

from epochal._internal.constants import MILLIS_PER_SECOND, U64_MAX
from epochal._internal.validation import validate_u64
from epochal.core.instant import Instant
from epochal.errors import EpochUnderflowError, OverflowError, ValidationError
from epochal.units.epoch import Epoch
from epochal.units.source import Source
from epochal.units.timeunit import TimeUnit


def to_epoch(instant: Instant, epoch: Epoch, unit: TimeUnit | None = None) -> int:
    """Convert an Instant to a raw timestamp in the given epoch.

    Args:
        instant: The Instant to convert.
        epoch: Target epoch.
        unit: Target unit; defaults to the epoch's native unit.

    Returns:
        A non-negative integer timestamp.

    Raises:
        EpochUnderflowError: If the instant predates the epoch.
        OverflowError: If the timestamp exceeds 2**64-1.

    Examples:
        >>> to_epoch(Instant(11_644_473_600, 250), Epoch.UNIX, TimeUnit.MILLISECOND)
        250

        >>> to_epoch(Instant(1), Epoch.WINDOWS)
        10000000
    """
    descriptor = epoch.descriptor
    target = unit if unit is not None else descriptor.native_unit

    if instant.seconds < descriptor.offset_seconds:
        raise EpochUnderflowError(
            f"instant {instant.pretty()} predates the {epoch.value} epoch "
            f"({descriptor.reference_date})"
        )

    elapsed_ms = (
        (instant.seconds - descriptor.offset_seconds) * MILLIS_PER_SECOND
        + instant.milliseconds
    )
    result = target.from_millis(elapsed_ms)
    if result > U64_MAX:
        raise OverflowError(
            f"{epoch.value} timestamp in {target.name.lower()} units exceeds 64 bits"
        )
    return result


def from_epoch(
    raw: int,
    epoch: Epoch,
    unit: TimeUnit | None = None,
    *,
    source: Source = Source.SYSTEM,
) -> Instant:
    """Create an Instant from a raw timestamp in the given epoch.

    Args:
        raw: Unsigned timestamp (0 to 2**64-1).
        epoch: The epoch the timestamp is counted from.
        unit: The timestamp's unit; defaults to the epoch's native unit.
        source: Source tag for the resulting Instant.

    Returns:
        The corresponding Instant.

    Raises:
        ValidationError: If raw is not an unsigned 64-bit integer.
        OverflowError: If the instant lies beyond the representable range.

    Examples:
        >>> from_epoch(0, Epoch.UNIX).seconds
        11644473600

        >>> from_epoch(1_500, Epoch.UNIX, TimeUnit.MILLISECOND).milliseconds
        500
    """
    validate_u64("raw", raw)
    if not isinstance(source, Source):
        raise ValidationError(f"source must be a Source, got {source!r}")

    descriptor = epoch.descriptor
    native = unit if unit is not None else descriptor.native_unit

    seconds, millis = divmod(native.to_millis(raw), MILLIS_PER_SECOND)
    seconds += descriptor.offset_seconds
    if seconds > U64_MAX:
        raise OverflowError(
            f"{epoch.value} timestamp {raw} lies beyond the representable range"
        )
    return Instant._from_internal(seconds, millis, source, 0)


def from_unix(value: int, source: Source = Source.SYSTEM) -> Instant:
    """Create an Instant from seconds since 1970-01-01.

    Examples:
        >>> from_unix(1483228800).pretty()
        '2017-01-01 00:00:00'
    """
    return from_epoch(value, Epoch.UNIX, source=source)


def from_unix_ms(value: int, source: Source = Source.SYSTEM) -> Instant:
    """Create an Instant from milliseconds since 1970-01-01."""
    return from_epoch(value, Epoch.UNIX, TimeUnit.MILLISECOND, source=source)


def from_windows_ns(value: int, source: Source = Source.SYSTEM) -> Instant:
    """Create an Instant from 100-nanosecond ticks since 1601-01-01.

    Examples:
        >>> from_windows_ns(131277024000000000).pretty()
        '2017-01-01 00:00:00'
    """
    return from_epoch(value, Epoch.WINDOWS, source=source)


def from_webkit(value: int, source: Source = Source.SYSTEM) -> Instant:
    """Create an Instant from microseconds since 1601-01-01."""
    return from_epoch(value, Epoch.WEBKIT, source=source)


def from_mac_os(value: int, source: Source = Source.SYSTEM) -> Instant:
    """Create an Instant from seconds since 1904-01-01."""
    return from_epoch(value, Epoch.MAC_OS, source=source)


def from_mac_os_cfa(value: int, source: Source = Source.SYSTEM) -> Instant:
    """Create an Instant from seconds since 2001-01-01.

    Examples:
        >>> from_mac_os_cfa(726158877).pretty()
        '2024-01-05 14:47:57'
    """
    return from_epoch(value, Epoch.MAC_OS_CFA, source=source)


def from_sas_4gl(value: int, source: Source = Source.SYSTEM) -> Instant:
    """Create an Instant from seconds since 1960-01-01."""
    return from_epoch(value, Epoch.SAS_4GL, source=source)


__all__ = [
    "to_epoch",
    "from_epoch",
    "from_unix",
    "from_unix_ms",
    "from_windows_ns",
    "from_webkit",
    "from_mac_os",
    "from_mac_os_cfa",
    "from_sas_4gl",
]
