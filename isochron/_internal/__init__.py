"""Internal utilities for Isochron.

This module contains private implementation details:
    - Validation helpers
    - Constants and magic numbers
    - Calendar arithmetic

Note: This module is not part of the public API.
"""

from __future__ import annotations

from isochron._internal.validation import (
    check_field,
    require,
    validate_day,
    validate_month,
    validate_year,
)

__all__: list[str] = [
    "check_field",
    "require",
    "validate_day",
    "validate_month",
    "validate_year",
]
