"""Internal utilities for EasyDate.

This module contains private implementation details:
    - Calendar arithmetic (leap years, ordinals, week numbering)
    - Strict field validation
    - Constants and magic numbers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from easydate._internal.validation import (
    validate_day,
    validate_fields,
    validate_month,
    validate_time,
    validate_year,
)

__all__: list[str] = [
    "validate_day",
    "validate_fields",
    "validate_month",
    "validate_time",
    "validate_year",
]
