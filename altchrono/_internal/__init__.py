"""Internal utilities for altchrono.

This module contains private implementation details:
    - Validation decorators and range checks
    - Constants and epoch offsets
    - The proleptic ISO kernel and integer helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from altchrono._internal.validation import (
    check_valid_value,
    validate_day,
    validate_range,
)

__all__: list[str] = [
    "check_valid_value",
    "validate_day",
    "validate_range",
]
