"""Conversion utilities.

This module provides functions for converting Instants to and from
other representations:
    - Raw integer timestamps in any supported epoch and unit
    - JSON serialization and deserialization

Examples:
    >>> from epochal.convert import from_windows_ns, to_epoch
    >>> from epochal.units import Epoch, TimeUnit

    >>> instant = from_windows_ns(131277024000000000)
    >>> to_epoch(instant, Epoch.UNIX)
    1483228800
    >>> to_epoch(instant, Epoch.WEBKIT, TimeUnit.SECOND)
    13127702400
"""

from __future__ import annotations

from epochal.convert.epoch import (
    from_epoch,
    from_mac_os,
    from_mac_os_cfa,
    from_sas_4gl,
    from_unix,
    from_unix_ms,
    from_webkit,
    from_windows_ns,
    to_epoch,
)
from epochal.convert.json import from_json, to_json

__all__ = [
    # Epoch
    "to_epoch",
    "from_epoch",
    "from_unix",
    "from_unix_ms",
    "from_windows_ns",
    "from_webkit",
    "from_mac_os",
    "from_mac_os_cfa",
    "from_sas_4gl",
    # JSON
    "to_json",
    "from_json",
]
