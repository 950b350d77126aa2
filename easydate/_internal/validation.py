"""Validation utilities for EasyDate.

Strict (non-lenient) field validation: out-of-range values are rejected
with InvalidFieldValueError instead of rolling over into the next period.

This module is not part of the public API.
"""

from __future__ import annotations

from easydate._internal.calendar import days_in_month
from easydate._internal.constants import MAX_YEAR, MIN_YEAR
from easydate.errors import InvalidFieldValueError

# Inclusive (min, max) limits of the time-of-day fields
_TIME_LIMITS: dict[str, tuple[int, int]] = {
    "hour": (0, 23),
    "minute": (0, 59),
    "second": (0, 59),
    "millisecond": (0, 999),
}


def _check_range(name: str, value: int, low: int, high: int, where: str = "") -> None:
    if not low <= value <= high:
        raise InvalidFieldValueError(
            f"{name} must be between {low} and {high}{where}, got {value}"
        )


def validate_year(year: int) -> None:
    """Reject years outside MIN_YEAR to MAX_YEAR."""
    _check_range("year", year, MIN_YEAR, MAX_YEAR)


def validate_month(month: int) -> None:
    """Reject months outside 1-12."""
    _check_range("month", month, 1, 12)


def validate_day(year: int, month: int, day: int) -> None:
    """Reject days that do not exist in the given month.

    Raises:
        InvalidFieldValueError: If day is outside the month.
    """
    _check_range("day", day, 1, days_in_month(year, month), f" for {year}-{month:02d}")


def validate_time(
    hour: int,
    minute: int,
    second: int,
    millisecond: int = 0,
) -> None:
    """Validate the time-of-day fields.

    Raises:
        InvalidFieldValueError: If any field is out of range.
    """
    for value, (name, (low, high)) in zip(
        (hour, minute, second, millisecond), _TIME_LIMITS.items()
    ):
        _check_range(name, value, low, high)


def validate_fields(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
) -> None:
    """Validate a complete set of calendar fields.

    Raises:
        InvalidFieldValueError: If any field is out of range.
    """
    for name, value in (
        ("year", year),
        ("month", month),
        ("day", day),
        ("hour", hour),
        ("minute", minute),
        ("second", second),
        ("millisecond", millisecond),
    ):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidFieldValueError(
                f"{name} must be an int, got {type(value).__name__}"
            )

    validate_year(year)
    validate_month(month)
    validate_day(year, month, day)
    validate_time(hour, minute, second, millisecond)


__all__ = [
    "validate_year",
    "validate_month",
    "validate_day",
    "validate_time",
    "validate_fields",
]
