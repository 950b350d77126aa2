"""Calendar arithmetic for EasyDate.

The ``EasyDate.add_*`` methods delegate to these functions, which work on
epoch milliseconds so they can be reused without constructing values.

Examples:
    >>> from easydate.arithmetic import add_months
    >>> from easydate.convert.epoch import fields_to_millis, millis_to_fields
    >>> millis_to_fields(add_months(fields_to_millis(2013, 3, 31), -1))[:3]
    (2013, 2, 28)
"""

from __future__ import annotations

from easydate.arithmetic.ops import (
    add_days,
    add_hours,
    add_millis,
    add_minutes,
    add_months,
    add_seconds,
    add_years,
    apply_offset,
)

__all__ = [
    "add_years",
    "add_months",
    "add_days",
    "add_hours",
    "add_minutes",
    "add_seconds",
    "add_millis",
    "apply_offset",
]
