"""Conversions between EasyDate instants and native Python values.

The accepted reference kinds form a closed union, validated here once at
the boundary:

    Instant = int | datetime.datetime | datetime.date | time.struct_time | EasyDate

``int`` is epoch milliseconds. Naive datetimes are read as UTC wall-clock
values; aware datetimes and struct_time values with a ``tm_gmtoff`` (as
returned by time.localtime) are converted to UTC first.
Any other kind raises InvalidReferenceTypeError.

Functions:
    to_epoch_millis: Epoch milliseconds of any Instant.
    millis_to_datetime: Naive datetime for epoch milliseconds.
    millis_to_struct_time: struct_time for epoch milliseconds.
"""

from __future__ import annotations

import datetime as _datetime
import logging
import time as _time
from typing import TYPE_CHECKING, Union

from easydate._internal.constants import MILLIS_PER_SECOND
from easydate._internal.validation import validate_fields
from easydate.convert.epoch import check_millis, fields_to_millis, millis_to_fields
from easydate.errors import InvalidReferenceTypeError

if TYPE_CHECKING:
    from easydate.core.easydate import EasyDate

logger = logging.getLogger(__name__)

Instant = Union[int, _datetime.datetime, _datetime.date, _time.struct_time, "EasyDate"]


def to_epoch_millis(value: Instant) -> int:
    """Return the epoch milliseconds of an Instant.

    Args:
        value: Epoch milliseconds, a datetime, a date, a struct_time
            or an EasyDate.

    Returns:
        Milliseconds since 1970-01-01 00:00:00 UTC.

    Raises:
        InvalidReferenceTypeError: If value is not an accepted kind.
        InvalidFieldValueError: If the instant is outside the supported years.

    Examples:
        >>> to_epoch_millis(1000)
        1000
        >>> import datetime
        >>> to_epoch_millis(datetime.date(1970, 1, 2))
        86400000
    """
    from easydate.core.easydate import EasyDate

    if isinstance(value, EasyDate):
        return value.millis
    if isinstance(value, bool):
        # bool is an int subclass but never an instant
        logger.debug("rejected bool reference %r", value)
        raise InvalidReferenceTypeError(value)
    if isinstance(value, int):
        return check_millis(value)
    if isinstance(value, _datetime.datetime):
        return _datetime_to_millis(value)
    if isinstance(value, _datetime.date):
        return fields_to_millis(value.year, value.month, value.day)
    if isinstance(value, _time.struct_time):
        return _struct_time_to_millis(value)

    logger.debug("rejected reference of type %s", type(value).__name__)
    raise InvalidReferenceTypeError(value)


def _datetime_to_millis(value: _datetime.datetime) -> int:
    offset = value.utcoffset()
    millis = fields_to_millis(
        value.year,
        value.month,
        value.day,
        value.hour,
        value.minute,
        value.second,
        value.microsecond // 1000,
    )
    if offset is not None:
        millis -= offset // _datetime.timedelta(milliseconds=1)
    return check_millis(millis)


def _struct_time_to_millis(value: _time.struct_time) -> int:
    fields = (
        value.tm_year,
        value.tm_mon,
        value.tm_mday,
        value.tm_hour,
        value.tm_min,
        value.tm_sec,
    )
    validate_fields(*fields)
    millis = fields_to_millis(*fields)
    # localtime() values carry their UTC offset; gmtime() carries 0
    if value.tm_gmtoff is not None:
        millis -= value.tm_gmtoff * MILLIS_PER_SECOND
    return check_millis(millis)


def millis_to_datetime(millis: int) -> _datetime.datetime:
    """Return the naive datetime (UTC wall clock) for epoch milliseconds."""
    year, month, day, hour, minute, second, ms = millis_to_fields(millis)
    return _datetime.datetime(year, month, day, hour, minute, second, ms * 1000)


def millis_to_struct_time(millis: int) -> _time.struct_time:
    """Return a struct_time (as produced by time.gmtime) for epoch milliseconds."""
    value = millis_to_datetime(millis)
    return value.utctimetuple()


__all__ = [
    "Instant",
    "to_epoch_millis",
    "millis_to_datetime",
    "millis_to_struct_time",
]
