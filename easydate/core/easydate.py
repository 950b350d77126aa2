"""EasyDate: a calendar instant with field access, arithmetic and parsing.

This module provides the EasyDate class, an immutable value holding one
instant with millisecond precision. Fields are decomposed from epoch
milliseconds in the proleptic Gregorian calendar (UTC, no timezone
engine), with weeks starting on Monday.
"""

from __future__ import annotations

import datetime as _datetime
import time as _time
from typing import Any

from easydate._internal import calendar as _calendar
from easydate._internal.constants import (
    FIRST_DAY_OF_WEEK,
    MILLIS_PER_SECOND,
    MINIMAL_DAYS_IN_FIRST_WEEK,
    UNIX_EPOCH_ORDINAL,
    MILLIS_PER_DAY,
)
from easydate._internal.validation import validate_fields
from easydate.arithmetic import ops as _ops
from easydate.convert.epoch import check_millis, fields_to_millis, millis_to_fields
from easydate.convert.native import (
    Instant,
    millis_to_datetime,
    millis_to_struct_time,
    to_epoch_millis,
)
from easydate.errors import FormatMismatchError, InvalidReferenceTypeError, NullInputError
from easydate.format.pattern import (
    DATETIME,
    GMT_DATE,
    GMT_NET_DATE,
    SHORT_DATE,
    PatternLike,
    as_pattern,
    compile_pattern,
)
from easydate.format import smart as _smart
from easydate.result import Result


class EasyDate:
    """An immutable calendar instant with millisecond precision.

    EasyDate stores a single integer, the milliseconds since 1970-01-01
    00:00:00 (UTC). Calendar fields are derived from it on access. All
    construction is strict: out-of-range fields raise
    InvalidFieldValueError instead of rolling over.

    Field "setters" are the ``with_*`` methods and ``replace()``; they and
    every ``add_*`` method return a new EasyDate.

    Attributes:
        year: The year (1-9999).
        month: The month (1-12).
        day: The day of the month (1-31).
        hour: The hour of day (0-23).
        minute: The minute (0-59).
        second: The second (0-59).
        millisecond: The millisecond (0-999).
        weekday: The weekday (1=Monday, 7=Sunday).

    Examples:
        >>> d = EasyDate(2012, 12, 31)
        >>> d.add_months(1)
        EasyDate(2013, 1, 31, 0, 0, 0, millisecond=0)

        >>> str(EasyDate(2012, 1, 2))
        '2012-1-2'

        >>> EasyDate(2012, 13, 1)
        Traceback (most recent call last):
        ...
        easydate.errors.InvalidFieldValueError: month must be between 1 and 12, got 13
    """

    __slots__ = ("_millis",)

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
    ) -> None:
        """Create an EasyDate from calendar fields.

        Args:
            year: The year, e.g. 2012.
            month: The month (1-12).
            day: The day of the month.
            hour: The hour (0-23).
            minute: The minute (0-59).
            second: The second (0-59).
            millisecond: The millisecond (0-999).

        Raises:
            InvalidFieldValueError: If any field is out of range.
        """
        validate_fields(year, month, day, hour, minute, second, millisecond)
        self._millis: int = fields_to_millis(
            year, month, day, hour, minute, second, millisecond
        )

    @classmethod
    def _from_internal(cls, millis: int) -> EasyDate:
        """Create an EasyDate from already-checked epoch milliseconds."""
        instance = object.__new__(cls)
        instance._millis = millis
        return instance

    # Factories

    @classmethod
    def from_millis(cls, millis: int) -> EasyDate:
        """Create an EasyDate from epoch milliseconds.

        Raises:
            InvalidReferenceTypeError: If millis is not an int.
            InvalidFieldValueError: If the instant is outside years 1-9999.

        Examples:
            >>> EasyDate.from_millis(0)
            EasyDate(1970, 1, 1, 0, 0, 0, millisecond=0)
        """
        if isinstance(millis, bool) or not isinstance(millis, int):
            raise InvalidReferenceTypeError(millis)
        return cls._from_internal(check_millis(millis))

    @classmethod
    def now(cls) -> EasyDate:
        """Return the current instant."""
        return cls._from_internal(_time.time_ns() // 1_000_000)

    @classmethod
    def from_datetime(cls, value: _datetime.date) -> EasyDate:
        """Create an EasyDate from a datetime or date.

        Naive values are read as UTC; aware values are converted to UTC.
        A plain date means midnight.

        Examples:
            >>> import datetime
            >>> EasyDate.from_datetime(datetime.datetime(2012, 1, 2, 13, 22, 56))
            EasyDate(2012, 1, 2, 13, 22, 56, millisecond=0)
        """
        if not isinstance(value, _datetime.date):
            raise InvalidReferenceTypeError(value)
        return cls._from_internal(to_epoch_millis(value))

    @classmethod
    def from_struct_time(cls, value: _time.struct_time) -> EasyDate:
        """Create an EasyDate from a struct_time.

        Values from time.localtime are shifted to UTC by their ``tm_gmtoff``;
        values without an offset are read as UTC, like time.gmtime.
        """
        if not isinstance(value, _time.struct_time):
            raise InvalidReferenceTypeError(value)
        return cls._from_internal(to_epoch_millis(value))

    @classmethod
    def from_offset(
        cls,
        reference: Instant | None = None,
        years: int = 0,
        months: int = 0,
        days: int = 0,
    ) -> EasyDate:
        """Create an EasyDate offset from a reference instant.

        Offsets are applied in order years, months, days; each is skipped
        when zero. Year and month offsets clamp the day of month.

        Args:
            reference: The reference instant; None means now.
            years: Signed year offset.
            months: Signed month offset.
            days: Signed day offset.

        Raises:
            InvalidReferenceTypeError: If reference is not an accepted kind.
            InvalidFieldValueError: If the result leaves years 1-9999.

        Examples:
            >>> EasyDate.from_offset(EasyDate(2012, 10, 10), years=1)
            EasyDate(2013, 10, 10, 0, 0, 0, millisecond=0)
            >>> EasyDate.from_offset(EasyDate(2012, 10, 10), years=-1, months=-2)
            EasyDate(2011, 8, 10, 0, 0, 0, millisecond=0)
        """
        if reference is None:
            base = cls.now()._millis
        else:
            base = to_epoch_millis(reference)
        return cls._from_internal(_ops.apply_offset(base, years, months, days))

    @classmethod
    def value_of(cls, value: Instant | str | None) -> EasyDate | None:
        """Convert a native value or a date string to an EasyDate.

        Returns None for None. Strings go through smart_parse.

        Raises:
            InvalidReferenceTypeError: If value is not an accepted kind.
            ParseError: If a string cannot be parsed.

        Examples:
            >>> EasyDate.value_of("2012-01-02")
            EasyDate(2012, 1, 2, 0, 0, 0, millisecond=0)
            >>> EasyDate.value_of(None) is None
            True
        """
        if value is None:
            return None
        if isinstance(value, str):
            return cls.smart_parse(value)
        if isinstance(value, EasyDate):
            return value.clone()
        return cls._from_internal(to_epoch_millis(value))

    @classmethod
    def smart_parse(cls, text: str) -> EasyDate:
        """Parse a string, inferring the pattern from its length.

        Lengths 6, 8, 10 and 19 map to yyyyMM, yyyyMMdd, yyyy-MM-dd and
        yyyy-MM-dd HH:mm:ss.

        Raises:
            NullInputError: If text is None.
            UnsupportedLengthError: If the length maps to no pattern.
            FormatMismatchError: If text does not match the pattern.
            InvalidFieldValueError: If a parsed field is out of range.

        Examples:
            >>> EasyDate.smart_parse("201206")
            EasyDate(2012, 6, 1, 0, 0, 0, millisecond=0)
        """
        return _smart.smart_parse(text)

    @classmethod
    def parse(cls, pattern: PatternLike, text: str) -> EasyDate:
        """Parse a string with an explicit pattern.

        Args:
            pattern: A pattern string such as "yyyy-MM-dd" or a DatePattern.
            text: The date string.

        Raises:
            NullInputError: If text is None.
            InvalidPatternError: If the pattern is malformed.
            FormatMismatchError: If text does not match the pattern.
            InvalidFieldValueError: If a parsed field is out of range.

        Examples:
            >>> EasyDate.parse("dd/MM/yyyy", "02/01/2012")
            EasyDate(2012, 1, 2, 0, 0, 0, millisecond=0)
        """
        if text is None:
            raise NullInputError("date string must not be None")
        return cls._from_internal(as_pattern(pattern).parse_millis(text))

    @classmethod
    def try_parse(cls, pattern: PatternLike, text: str) -> Result[EasyDate]:
        """Like parse(), but return a Result instead of raising."""
        return Result.capture(cls.parse, pattern, text)

    @classmethod
    def try_smart_parse(cls, text: str) -> Result[EasyDate]:
        """Like smart_parse(), but return a Result instead of raising."""
        return Result.capture(cls.smart_parse, text)

    # Field accessors

    def _fields(self) -> tuple[int, int, int, int, int, int, int]:
        return millis_to_fields(self._millis)

    @property
    def millis(self) -> int:
        """Return the epoch milliseconds."""
        return self._millis

    @property
    def year(self) -> int:
        """Return the year, e.g. 2012."""
        return self._fields()[0]

    @property
    def month(self) -> int:
        """Return the month (1=January, 12=December)."""
        return self._fields()[1]

    @property
    def day(self) -> int:
        """Return the day of the month (the first day is 1)."""
        return self._fields()[2]

    @property
    def hour(self) -> int:
        """Return the hour of day (0-23)."""
        return self._fields()[3]

    @property
    def minute(self) -> int:
        """Return the minute (0-59)."""
        return self._fields()[4]

    @property
    def second(self) -> int:
        """Return the second (0-59)."""
        return self._fields()[5]

    @property
    def millisecond(self) -> int:
        """Return the millisecond within the second (0-999)."""
        return self._millis % MILLIS_PER_SECOND

    @property
    def weekday(self) -> int:
        """Return the weekday (1=Monday, 7=Sunday)."""
        ordinal = self._millis // MILLIS_PER_DAY + UNIX_EPOCH_ORDINAL
        return _calendar.ordinal_to_weekday(ordinal)

    @property
    def day_of_year(self) -> int:
        """Return the day of the year (1-366)."""
        year, month, day = self._fields()[:3]
        return _calendar.day_of_year(year, month, day)

    @property
    def week_of_month(self) -> int:
        """Return the week of the month (weeks start on Monday)."""
        year, month, day = self._fields()[:3]
        return _calendar.week_of_month(
            year,
            month,
            day,
            first_day_of_week=FIRST_DAY_OF_WEEK,
            minimal_days=MINIMAL_DAYS_IN_FIRST_WEEK,
        )

    @property
    def week_of_year(self) -> int:
        """Return the week of the year (weeks start on Monday).

        The last days of December return 1 when their week holds the next
        January 1st.
        """
        year, month, day = self._fields()[:3]
        return _calendar.week_of_year(
            year,
            month,
            day,
            first_day_of_week=FIRST_DAY_OF_WEEK,
            minimal_days=MINIMAL_DAYS_IN_FIRST_WEEK,
        )

    def is_leap_year(self, year: int | None = None) -> bool:
        """Return True if ``year`` (default: this date's year) is a leap year.

        Examples:
            >>> EasyDate(2012, 1, 1).is_leap_year()
            True
            >>> EasyDate(2012, 1, 1).is_leap_year(1900)
            False
        """
        if year is None:
            year = self.year
        return _calendar.is_leap_year(year)

    # Replacement

    def replace(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
        hour: int | None = None,
        minute: int | None = None,
        second: int | None = None,
        millisecond: int | None = None,
    ) -> EasyDate:
        """Return a new EasyDate with the given fields replaced.

        The result is validated strictly; a field that does not fit (for
        example day 31 in April) raises InvalidFieldValueError.

        Examples:
            >>> EasyDate(2012, 1, 31).replace(month=3)
            EasyDate(2012, 3, 31, 0, 0, 0, millisecond=0)
        """
        fields = list(self._fields())
        for index, value in enumerate(
            (year, month, day, hour, minute, second, millisecond)
        ):
            if value is not None:
                fields[index] = value
        return EasyDate(*fields)

    def with_year(self, year: int) -> EasyDate:
        return self.replace(year=year)

    def with_month(self, month: int) -> EasyDate:
        return self.replace(month=month)

    def with_day(self, day: int) -> EasyDate:
        return self.replace(day=day)

    def with_hour(self, hour: int) -> EasyDate:
        return self.replace(hour=hour)

    def with_minute(self, minute: int) -> EasyDate:
        return self.replace(minute=minute)

    def with_second(self, second: int) -> EasyDate:
        return self.replace(second=second)

    def with_millisecond(self, millisecond: int) -> EasyDate:
        return self.replace(millisecond=millisecond)

    # Arithmetic

    def add_years(self, years: int) -> EasyDate:
        """Return this date shifted by ``years`` (clamps February 29).

        Examples:
            >>> EasyDate(2012, 5, 12).add_years(2)
            EasyDate(2014, 5, 12, 0, 0, 0, millisecond=0)
        """
        return EasyDate._from_internal(_ops.add_years(self._millis, years))

    def add_months(self, months: int) -> EasyDate:
        """Return this date shifted by ``months``, clamping the day.

        Examples:
            >>> EasyDate(2012, 5, 12).add_months(2)
            EasyDate(2012, 7, 12, 0, 0, 0, millisecond=0)
            >>> EasyDate(2012, 1, 31).add_months(1)
            EasyDate(2012, 2, 29, 0, 0, 0, millisecond=0)
        """
        return EasyDate._from_internal(_ops.add_months(self._millis, months))

    def add_days(self, days: int) -> EasyDate:
        """Return this date shifted by ``days``.

        Examples:
            >>> EasyDate(2012, 5, 12).add_days(2)
            EasyDate(2012, 5, 14, 0, 0, 0, millisecond=0)
            >>> EasyDate(2012, 12, 31).add_days(1)
            EasyDate(2013, 1, 1, 0, 0, 0, millisecond=0)
        """
        return EasyDate._from_internal(_ops.add_days(self._millis, days))

    def add_hours(self, hours: int) -> EasyDate:
        """Return this date shifted by ``hours``."""
        return EasyDate._from_internal(_ops.add_hours(self._millis, hours))

    def add_minutes(self, minutes: int) -> EasyDate:
        """Return this date shifted by ``minutes``.

        Examples:
            >>> EasyDate(2012, 5, 12, 9, 12, 56).add_minutes(3)
            EasyDate(2012, 5, 12, 9, 15, 56, millisecond=0)
        """
        return EasyDate._from_internal(_ops.add_minutes(self._millis, minutes))

    def add_seconds(self, seconds: int) -> EasyDate:
        """Return this date shifted by ``seconds``."""
        return EasyDate._from_internal(_ops.add_seconds(self._millis, seconds))

    def add_millis(self, millis: int) -> EasyDate:
        """Return this date shifted by ``millis`` milliseconds."""
        return EasyDate._from_internal(_ops.add_millis(self._millis, millis))

    # Comparison

    def compare_to(self, other: Instant) -> int:
        """Compare with another instant.

        Args:
            other: Epoch milliseconds, a datetime, a date, a struct_time
                or an EasyDate.

        Returns:
            -1, 0 or 1 as this instant is before, equal to or after other.

        Raises:
            NullInputError: If other is None.
            InvalidReferenceTypeError: If other is not an accepted kind.
        """
        if other is None:
            raise NullInputError("date to compare with must not be None")
        if other is self:
            return 0
        other_millis = to_epoch_millis(other)
        return (self._millis > other_millis) - (self._millis < other_millis)

    def after(self, other: Instant) -> bool:
        """Return True if this instant is after ``other``."""
        return self.compare_to(other) > 0

    def before(self, other: Instant) -> bool:
        """Return True if this instant is before ``other``."""
        return self.compare_to(other) < 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EasyDate):
            return NotImplemented
        return self._millis == other._millis

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, EasyDate):
            return NotImplemented
        return self._millis < other._millis

    def __le__(self, other: object) -> bool:
        if not isinstance(other, EasyDate):
            return NotImplemented
        return self._millis <= other._millis

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, EasyDate):
            return NotImplemented
        return self._millis > other._millis

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, EasyDate):
            return NotImplemented
        return self._millis >= other._millis

    def __hash__(self) -> int:
        """Hash over the instant and the week configuration."""
        return hash((self._millis, FIRST_DAY_OF_WEEK, MINIMAL_DAYS_IN_FIRST_WEEK))

    # Copying

    def clone(self) -> EasyDate:
        """Return an independent copy of this date."""
        return EasyDate._from_internal(self._millis)

    def __copy__(self) -> EasyDate:
        return self.clone()

    def __deepcopy__(self, memo: dict[int, Any]) -> EasyDate:
        return self.clone()

    def __reduce__(self) -> tuple[Any, tuple[int]]:
        return (EasyDate.from_millis, (self._millis,))

    # Conversions

    def format(self, pattern: PatternLike) -> str:
        """Format with a pattern string or DatePattern.

        Examples:
            >>> EasyDate(2012, 1, 2).format("dd.MM.yyyy")
            '02.01.2012'
        """
        return as_pattern(pattern).format(self)

    def to_default_string(self) -> str:
        """Return the unpadded ``yyyy-M-d`` form, e.g. '2012-1-2'."""
        year, month, day = self._fields()[:3]
        return f"{year}-{month}-{day}"

    def to_datetime_string(self) -> str:
        """Return the ``yyyy-MM-dd HH:mm:ss`` form."""
        return compile_pattern(DATETIME).format(self)

    def to_compact_string(self) -> str:
        """Return the ``yyyyMMdd`` form."""
        return compile_pattern(SHORT_DATE).format(self)

    def to_gmt_string(self) -> str:
        """Return the GMT form, e.g. '1 Dec 2012 15:05:00 GMT'."""
        return compile_pattern(GMT_DATE).format(self)

    def to_gmt_net_string(self) -> str:
        """Return the Internet GMT form, e.g. 'Sat, 1 Dec 2012 15:05:00 GMT'."""
        return compile_pattern(GMT_NET_DATE).format(self)

    def to_datetime(self) -> _datetime.datetime:
        """Return a naive datetime holding the UTC wall-clock fields."""
        return millis_to_datetime(self._millis)

    def to_date(self) -> _datetime.date:
        """Return the date part as a datetime.date."""
        return self.to_datetime().date()

    def to_time(self) -> _datetime.time:
        """Return the time of day as a datetime.time."""
        return self.to_datetime().time()

    def to_timestamp(self) -> float:
        """Return POSIX seconds as a float."""
        return self._millis / MILLIS_PER_SECOND

    def to_struct_time(self) -> _time.struct_time:
        """Return a struct_time in the form produced by time.gmtime."""
        return millis_to_struct_time(self._millis)

    def to_json(self) -> dict:
        """Return a JSON-serializable dictionary.

        Examples:
            >>> EasyDate(2012, 1, 2, 13, 22, 56).to_json()
            {'_type': 'EasyDate', 'value': '2012-01-02 13:22:56', 'millis': 1325510576000}
        """
        return {
            "_type": "EasyDate",
            "value": self.to_datetime_string(),
            "millis": self._millis,
        }

    @classmethod
    def from_json(cls, data: dict) -> EasyDate:
        """Create an EasyDate from a to_json() dictionary.

        ``millis`` wins when present; otherwise ``value`` is smart parsed.

        Raises:
            FormatMismatchError: If the data is not a to_json() dictionary.
            InvalidReferenceTypeError: If ``millis`` is not an int.
        """
        if not isinstance(data, dict):
            raise FormatMismatchError(f"expected dict, got {type(data).__name__}")

        millis = data.get("millis")
        if millis is not None:
            return cls.from_millis(millis)

        value = data.get("value")
        if not value or not isinstance(value, str):
            raise FormatMismatchError(
                f"missing or invalid 'value' field for EasyDate: {value!r}"
            )
        return cls.smart_parse(value)

    def __repr__(self) -> str:
        year, month, day, hour, minute, second, ms = self._fields()
        return (
            f"EasyDate({year}, {month}, {day}, {hour}, {minute}, {second}, "
            f"millisecond={ms})"
        )

    def __str__(self) -> str:
        """Return the default ``yyyy-M-d`` form."""
        return self.to_default_string()


__all__ = ["EasyDate"]
