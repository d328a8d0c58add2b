"""Instant arithmetic.

This module provides functions for arithmetic on Instants:
    - diff, diff_ms: Absolute elapsed time between two instants
    - shift: Move an instant by a signed amount, never wrapping
    - past_future: Past/present/future classification

The functions in this module serve as the canonical implementations;
the corresponding Instant methods delegate here.
"""

from __future__ import annotations

from epochal.arithmetic.ops import (
    RelativeTime,
    diff,
    diff_ms,
    past_future,
    shift,
)

__all__: list[str] = [
    "RelativeTime",
    "diff",
    "diff_ms",
    "past_future",
    "shift",
]
