"""Internal constants for EasyDate.

These constants define the limits, the week-numbering convention and the
fixed English names used throughout the library. This module is not part
of the public API.
"""

from __future__ import annotations

# Time unit conversions
MILLIS_PER_SECOND: int = 1_000
MILLIS_PER_MINUTE: int = 60 * MILLIS_PER_SECOND
MILLIS_PER_HOUR: int = 60 * MILLIS_PER_MINUTE
MILLIS_PER_DAY: int = 24 * MILLIS_PER_HOUR  # 86_400_000

# Year limits (same range as the datetime module)
MIN_YEAR: int = 1
MAX_YEAR: int = 9999

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Ordinal (0001-01-01 == 1) of 1970-01-01
UNIX_EPOCH_ORDINAL: int = 719163

# Week numbering: weeks start on Monday (ISO weekday 1) and week 1 is the
# first week holding at least this many days of the year or month.
FIRST_DAY_OF_WEEK: int = 1
MINIMAL_DAYS_IN_FIRST_WEEK: int = 1

# Two-digit years resolve into [now - 80, now + 20)
TWO_DIGIT_YEAR_LOOKBACK: int = 80

MONTH_NAMES: tuple[str, ...] = (
    "",
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Index 1 is Monday, 7 is Sunday
WEEKDAY_NAMES: tuple[str, ...] = (
    "",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


__all__ = [
    "MILLIS_PER_SECOND",
    "MILLIS_PER_MINUTE",
    "MILLIS_PER_HOUR",
    "MILLIS_PER_DAY",
    "MIN_YEAR",
    "MAX_YEAR",
    "DAYS_IN_MONTH",
    "UNIX_EPOCH_ORDINAL",
    "FIRST_DAY_OF_WEEK",
    "MINIMAL_DAYS_IN_FIRST_WEEK",
    "TWO_DIGIT_YEAR_LOOKBACK",
    "MONTH_NAMES",
    "WEEKDAY_NAMES",
]
