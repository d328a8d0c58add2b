"""Epoch table.

This module defines the named epochs Epochal converts to and from, and
the fixed descriptor for each: its distance from the canonical reference
epoch (1601-01-01 00:00:00 UTC) and the unit its timestamps are
natively counted in.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from epochal._internal.constants import (
    OFFSET_MAC_OS,
    OFFSET_MAC_OS_CFA,
    OFFSET_NTP,
    OFFSET_SAS_4GL,
    OFFSET_UNIX,
)
from epochal.units.timeunit import TimeUnit


class Epoch(Enum):
    """Named epoch systems.

    Examples:
        >>> Epoch.UNIX.descriptor.offset_seconds
        11644473600

        >>> Epoch.WINDOWS.native_unit
        <TimeUnit.HUNDRED_NANOSECONDS: 100>
    """

    UNIX = "unix"
    WINDOWS = "windows"
    MAC_OS = "mac_os"
    MAC_OS_CFA = "mac_os_cfa"
    SAS_4GL = "sas_4gl"
    WEBKIT = "webkit"
    NTP = "ntp"

    @property
    def descriptor(self) -> EpochDescriptor:
        return EPOCHS[self]

    @property
    def offset_seconds(self) -> int:
        return EPOCHS[self].offset_seconds

    @property
    def native_unit(self) -> TimeUnit:
        return EPOCHS[self].native_unit


@dataclass(frozen=True)
class EpochDescriptor:
    """Fixed description of one epoch.

    Attributes:
        name: The epoch this describes.
        reference_date: The epoch's day zero, as YYYY-MM-DD.
        offset_seconds: Seconds from 1601-01-01 to the epoch's day zero.
        native_unit: The unit timestamps in this epoch are counted in.
    """

    name: Epoch
    reference_date: str
    offset_seconds: int
    native_unit: TimeUnit


EPOCHS: Mapping[Epoch, EpochDescriptor] = MappingProxyType(
    {
        Epoch.WINDOWS: EpochDescriptor(
            Epoch.WINDOWS, "1601-01-01", 0, TimeUnit.HUNDRED_NANOSECONDS
        ),
        Epoch.WEBKIT: EpochDescriptor(
            Epoch.WEBKIT, "1601-01-01", 0, TimeUnit.MICROSECOND
        ),
        Epoch.NTP: EpochDescriptor(
            Epoch.NTP, "1900-01-01", OFFSET_NTP, TimeUnit.SECOND
        ),
        Epoch.MAC_OS: EpochDescriptor(
            Epoch.MAC_OS, "1904-01-01", OFFSET_MAC_OS, TimeUnit.SECOND
        ),
        Epoch.SAS_4GL: EpochDescriptor(
            Epoch.SAS_4GL, "1960-01-01", OFFSET_SAS_4GL, TimeUnit.SECOND
        ),
        Epoch.UNIX: EpochDescriptor(
            Epoch.UNIX, "1970-01-01", OFFSET_UNIX, TimeUnit.SECOND
        ),
        Epoch.MAC_OS_CFA: EpochDescriptor(
            Epoch.MAC_OS_CFA, "2001-01-01", OFFSET_MAC_OS_CFA, TimeUnit.SECOND
        ),
    }
)


__all__ = ["Epoch", "EpochDescriptor", "EPOCHS"]
