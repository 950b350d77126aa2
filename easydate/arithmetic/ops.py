"""Calendar-field arithmetic on epoch milliseconds.

This module is the canonical implementation of the ``add_*`` operations
of EasyDate. Every function takes epoch milliseconds and a signed delta
and returns new epoch milliseconds.

Clamping behavior:
    Year and month additions keep the day of month when the target month
    has it, and otherwise clamp it to the last day of that month. Time of
    day is preserved.

Examples:
    2012-01-31 + 1 month  -> 2012-02-29  # leap year
    2013-01-31 + 1 month  -> 2013-02-28
    2012-12-31 + 1 month  -> 2013-01-31
    2012-02-29 + 1 year   -> 2013-02-28

Day, hour, minute, second and millisecond additions are exact shifts
that roll over into larger fields.
"""

from __future__ import annotations

from easydate._internal.calendar import days_in_month
from easydate._internal.constants import (
    MAX_YEAR,
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
    MIN_YEAR,
)
from easydate.convert.epoch import check_millis, fields_to_millis, millis_to_fields
from easydate.errors import InvalidFieldValueError


def add_months(millis: int, months: int) -> int:
    """Add a signed number of months, clamping the day if necessary.

    Examples:
        >>> from easydate.convert.epoch import fields_to_millis, millis_to_fields
        >>> millis_to_fields(add_months(fields_to_millis(2012, 1, 31), 1))[:3]
        (2012, 2, 29)
    """
    if months == 0:
        return millis

    year, month, day, hour, minute, second, ms = millis_to_fields(millis)

    total_months = year * 12 + (month - 1) + months
    year, month_index = divmod(total_months, 12)
    month = month_index + 1

    if year < MIN_YEAR or year > MAX_YEAR:
        raise InvalidFieldValueError(
            f"adding {months} months leaves years {MIN_YEAR} to {MAX_YEAR} (got {year})"
        )

    day = min(day, days_in_month(year, month))
    return fields_to_millis(year, month, day, hour, minute, second, ms)


def add_years(millis: int, years: int) -> int:
    """Add a signed number of years, clamping February 29 if necessary.

    Examples:
        >>> from easydate.convert.epoch import fields_to_millis, millis_to_fields
        >>> millis_to_fields(add_years(fields_to_millis(2012, 2, 29), 1))[:3]
        (2013, 2, 28)
    """
    return add_months(millis, years * 12)


def _shift(millis: int, delta: int, unit: int) -> int:
    return check_millis(millis + delta * unit)


def add_days(millis: int, days: int) -> int:
    """Add a signed number of days, rolling over month and year."""
    return _shift(millis, days, MILLIS_PER_DAY)


def add_hours(millis: int, hours: int) -> int:
    """Add a signed number of hours."""
    return _shift(millis, hours, MILLIS_PER_HOUR)


def add_minutes(millis: int, minutes: int) -> int:
    """Add a signed number of minutes."""
    return _shift(millis, minutes, MILLIS_PER_MINUTE)


def add_seconds(millis: int, seconds: int) -> int:
    """Add a signed number of seconds."""
    return _shift(millis, seconds, MILLIS_PER_SECOND)


def add_millis(millis: int, delta: int) -> int:
    """Add a signed number of milliseconds."""
    return _shift(millis, delta, 1)


def apply_offset(millis: int, years: int = 0, months: int = 0, days: int = 0) -> int:
    """Apply year, month and day offsets in that order.

    Each offset is skipped when it is zero, so a month offset clamps the
    day after the year offset has been applied.

    Examples:
        >>> from easydate.convert.epoch import fields_to_millis, millis_to_fields
        >>> millis_to_fields(apply_offset(fields_to_millis(2012, 12, 31), months=1))[:3]
        (2013, 1, 31)
    """
    if years:
        millis = add_years(millis, years)
    if months:
        millis = add_months(millis, months)
    if days:
        millis = add_days(millis, days)
    return millis


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
