"""Units, epochs and enumerations.

This module provides:
    - TimeUnit: Exact integer time units (100ns ticks, seconds, weeks, ...)
    - Epoch: Named epoch systems and their fixed descriptors
    - Source: Time source tag (SYSTEM or NTP)
    - Tz: Common named UTC offsets
"""

from __future__ import annotations

from epochal.units.epoch import EPOCHS, Epoch, EpochDescriptor
from epochal.units.source import Source
from epochal.units.timeunit import TimeUnit
from epochal.units.timezone import Tz, format_offset, parse_offset

__all__: list[str] = [
    "EPOCHS",
    "Epoch",
    "EpochDescriptor",
    "Source",
    "TimeUnit",
    "Tz",
    "format_offset",
    "parse_offset",
]
