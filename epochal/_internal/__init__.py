"""Internal utilities for Epochal.

This module contains private implementation details:
    - Validation helpers
    - Constants and magic numbers
    - Calendar calculus

Note: This module is not part of the public API.
"""

from __future__ import annotations

from epochal._internal.validation import (
    validate_clock,
    validate_day,
    validate_int,
    validate_month,
    validate_range,
    validate_u64,
)

__all__: list[str] = [
    "validate_clock",
    "validate_day",
    "validate_int",
    "validate_month",
    "validate_range",
    "validate_u64",
]
