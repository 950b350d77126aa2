"""Calendar utilities for EasyDate.

Pure functions over the proleptic Gregorian calendar: leap years, month
lengths, ordinal day numbers (ordinal 1 is 0001-01-01), weekdays and
week numbering for a configurable first weekday and minimal first-week
length.

This module is not part of the public API.
"""

from __future__ import annotations

from itertools import accumulate

from easydate._internal.constants import (
    DAYS_IN_MONTH,
    FIRST_DAY_OF_WEEK,
    MINIMAL_DAYS_IN_FIRST_WEEK,
)

DAYS_PER_400_YEARS: int = 146097

# Days before the 1st of each month in a common year, index 1 = January
_DAYS_BEFORE_MONTH: tuple[int, ...] = (0, *accumulate(DAYS_IN_MONTH[1:12], initial=0))


def is_leap_year(year: int) -> bool:
    """Return True for Gregorian leap years.

    Examples:
        >>> is_leap_year(2012), is_leap_year(1900), is_leap_year(2000)
        (True, False, True)
    """
    if year % 4:
        return False
    return year % 100 != 0 or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    """Return the length of ``month`` in ``year``.

    Raises:
        ValueError: If month is outside 1-12.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"month must be 1-12, got {month}")
    return DAYS_IN_MONTH[month] + (month == 2 and is_leap_year(year))


def days_in_year(year: int) -> int:
    return 365 + is_leap_year(year)


def days_before_month(year: int, month: int) -> int:
    """Return the number of days in ``year`` before the 1st of ``month``."""
    return _DAYS_BEFORE_MONTH[month] + (month > 2 and is_leap_year(year))


def day_of_year(year: int, month: int, day: int) -> int:
    """Return the 1-based day of the year."""
    return days_before_month(year, month) + day


def _days_before_year(year: int) -> int:
    prior = year - 1
    return prior * 365 + prior // 4 - prior // 100 + prior // 400


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Return the ordinal day number of a date (0001-01-01 is 1)."""
    return _days_before_year(year) + days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Return (year, month, day) for an ordinal day number.

    Examples:
        >>> ordinal_to_ymd(719163)
        (1970, 1, 1)
    """
    # Average-length estimate; off by at most one year either way
    year = (ordinal - 1) * 400 // DAYS_PER_400_YEARS + 1
    while _days_before_year(year) >= ordinal:
        year -= 1
    while _days_before_year(year + 1) < ordinal:
        year += 1

    doy = ordinal - _days_before_year(year)
    month = 12
    while days_before_month(year, month) >= doy:
        month -= 1
    return (year, month, doy - days_before_month(year, month))


def ordinal_to_weekday(ordinal: int) -> int:
    """Return the weekday of an ordinal day (1=Monday, 7=Sunday).

    0001-01-01 was a Monday.
    """
    return (ordinal - 1) % 7 + 1


def _week_offset(ordinal: int, first_day_of_week: int) -> int:
    """Return the 0-based position of a day within its week."""
    return (ordinal_to_weekday(ordinal) - first_day_of_week) % 7


def _first_week_start(year: int, first_day_of_week: int, minimal_days: int) -> int:
    """Return the ordinal of the first day of week 1 of ``year``."""
    jan1 = ymd_to_ordinal(year, 1, 1)
    offset = _week_offset(jan1, first_day_of_week)
    start = jan1 - offset
    if 7 - offset < minimal_days:
        start += 7
    return start


def week_of_year(
    year: int,
    month: int,
    day: int,
    *,
    first_day_of_week: int = FIRST_DAY_OF_WEEK,
    minimal_days: int = MINIMAL_DAYS_IN_FIRST_WEEK,
) -> int:
    """Return the week of the year for a date.

    Week 1 is the first week (starting on ``first_day_of_week``) holding
    at least ``minimal_days`` days of the year. Days before week 1 belong
    to the last week of the previous year; days in a week that already
    counts as week 1 of the next year return 1.

    Examples:
        >>> week_of_year(2012, 1, 1)  # Sunday, week holding Jan 1
        1
        >>> week_of_year(2012, 1, 2)  # Monday
        2
        >>> week_of_year(2013, 12, 31)  # Same week as 2014-01-01
        1
    """
    ordinal = ymd_to_ordinal(year, month, day)

    next_start = _first_week_start(year + 1, first_day_of_week, minimal_days)
    if ordinal >= next_start:
        return 1

    start = _first_week_start(year, first_day_of_week, minimal_days)
    if ordinal < start:
        start = _first_week_start(year - 1, first_day_of_week, minimal_days)
    return (ordinal - start) // 7 + 1


def week_of_month(
    year: int,
    month: int,
    day: int,
    *,
    first_day_of_week: int = FIRST_DAY_OF_WEEK,
    minimal_days: int = MINIMAL_DAYS_IN_FIRST_WEEK,
) -> int:
    """Return the week of the month for a date.

    Week 1 is the week holding the 1st when that partial week has at
    least ``minimal_days`` days; otherwise the leading days are week 0.

    Examples:
        >>> week_of_month(2012, 9, 2)  # Saturday the 1st starts week 1
        1
        >>> week_of_month(2012, 9, 3)  # Monday
        2
    """
    first = ymd_to_ordinal(year, month, 1)
    offset = _week_offset(first, first_day_of_week)
    week = (day - 1 + offset) // 7
    if 7 - offset >= minimal_days:
        week += 1
    return week


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "days_before_month",
    "day_of_year",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "ordinal_to_weekday",
    "week_of_year",
    "week_of_month",
]
