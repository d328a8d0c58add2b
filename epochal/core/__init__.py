"""Core temporal types.

This module provides the canonical value type:
    - Instant: Seconds + milliseconds since 1601-01-01 00:00:00 UTC
"""

from __future__ import annotations

from epochal.core.instant import Instant

__all__: list[str] = [
    "Instant",
]
