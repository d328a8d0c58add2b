"""Source tag for instants."""

from __future__ import annotations

from enum import Enum


class Source(Enum):
    """Which time source an instant is attributed to.

    The tag is provenance only: it never changes how an instant converts,
    compares or formats, and instants from different sources can be
    diffed freely.
    """

    SYSTEM = "system"
    NTP = "ntp"


__all__ = ["Source"]
