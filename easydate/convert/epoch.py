"""Epoch conversion utilities.

This module converts between calendar fields and epoch milliseconds
(milliseconds since 1970-01-01 00:00:00, fields taken as UTC).

Functions:
    fields_to_millis: Convert validated calendar fields to epoch milliseconds.
    millis_to_fields: Decompose epoch milliseconds into calendar fields.
    check_millis: Ensure epoch milliseconds fall within the supported years.

Examples:
    >>> fields_to_millis(1970, 1, 1)
    0
    >>> millis_to_fields(1356998400000)
    (2013, 1, 1, 0, 0, 0, 0)
"""

from __future__ import annotations

from easydate._internal.calendar import ordinal_to_ymd, ymd_to_ordinal
from easydate._internal.constants import (
    MAX_YEAR,
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
    MIN_YEAR,
    UNIX_EPOCH_ORDINAL,
)
from easydate.errors import InvalidFieldValueError

# Supported instant range: 0001-01-01T00:00:00.000 .. 9999-12-31T23:59:59.999
MIN_MILLIS: int = (ymd_to_ordinal(MIN_YEAR, 1, 1) - UNIX_EPOCH_ORDINAL) * MILLIS_PER_DAY
MAX_MILLIS: int = (
    (ymd_to_ordinal(MAX_YEAR, 12, 31) + 1 - UNIX_EPOCH_ORDINAL) * MILLIS_PER_DAY - 1
)


def fields_to_millis(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
) -> int:
    """Convert calendar fields to epoch milliseconds.

    The fields are assumed to be valid; see
    ``easydate._internal.validation.validate_fields``.
    """
    days = ymd_to_ordinal(year, month, day) - UNIX_EPOCH_ORDINAL
    return (
        days * MILLIS_PER_DAY
        + hour * MILLIS_PER_HOUR
        + minute * MILLIS_PER_MINUTE
        + second * MILLIS_PER_SECOND
        + millisecond
    )


def millis_to_fields(millis: int) -> tuple[int, int, int, int, int, int, int]:
    """Decompose epoch milliseconds into calendar fields.

    Returns:
        Tuple of (year, month, day, hour, minute, second, millisecond).
    """
    # divmod floors, so negative millis land on the previous day
    days, ms_of_day = divmod(millis, MILLIS_PER_DAY)
    year, month, day = ordinal_to_ymd(days + UNIX_EPOCH_ORDINAL)
    hour, rest = divmod(ms_of_day, MILLIS_PER_HOUR)
    minute, rest = divmod(rest, MILLIS_PER_MINUTE)
    second, millisecond = divmod(rest, MILLIS_PER_SECOND)
    return (year, month, day, hour, minute, second, millisecond)


def check_millis(millis: int) -> int:
    """Return ``millis`` unchanged if it lies in the supported year range.

    Raises:
        InvalidFieldValueError: If the instant falls outside years
            MIN_YEAR to MAX_YEAR.
    """
    if millis < MIN_MILLIS or millis > MAX_MILLIS:
        raise InvalidFieldValueError(
            f"instant {millis} ms is outside years {MIN_YEAR} to {MAX_YEAR}"
        )
    return millis


__all__ = [
    "MIN_MILLIS",
    "MAX_MILLIS",
    "fields_to_millis",
    "millis_to_fields",
    "check_millis",
]
