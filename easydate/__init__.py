"""EasyDate: a calendar instant value type for Python.

EasyDate wraps one instant with millisecond precision and offers field
access, calendar-correct arithmetic, length-based smart parsing,
pattern formatting, comparison and conversion to native values.

Core Types:
    EasyDate: Immutable calendar instant (proleptic Gregorian, UTC fields)
    DatePattern: Compiled yyyy-MM-dd style pattern
    Result: Value-or-error returned by the try_* parse methods

Named Patterns:
    DATE, DATETIME, SHORT_DATE, YM_DATE, GMT_DATE, GMT_NET_DATE

Exceptions:
    EasyDateError: Base exception
    NullInputError: None given where text or a date is required
    ParseError: Base for parsing failures
    UnsupportedLengthError: Smart parsing found no pattern for the length
    FormatMismatchError: Text does not match the pattern
    InvalidPatternError: Malformed pattern string
    InvalidReferenceTypeError: Unsupported instant kind
    InvalidFieldValueError: Out-of-range calendar field

Example:
    >>> from easydate import EasyDate
    >>> d = EasyDate.smart_parse("2012-12-31")
    >>> d.add_months(1).to_datetime_string()
    '2013-01-31 00:00:00'
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from easydate.core.easydate import EasyDate
from easydate.format.pattern import DatePattern
from easydate.result import Result

# Named patterns
from easydate.format.pattern import (
    DATE,
    DATETIME,
    GMT_DATE,
    GMT_NET_DATE,
    SHORT_DATE,
    YM_DATE,
)

# Exceptions
from easydate.errors import (
    EasyDateError,
    ErrorKind,
    FormatMismatchError,
    InvalidFieldValueError,
    InvalidPatternError,
    InvalidReferenceTypeError,
    NullInputError,
    ParseError,
    UnsupportedLengthError,
)

# Functions
from easydate._internal.calendar import is_leap_year
from easydate.format.smart import smart_parse

__all__: list[str] = [
    "__version__",
    # Core types
    "EasyDate",
    "DatePattern",
    "Result",
    # Named patterns
    "DATE",
    "DATETIME",
    "SHORT_DATE",
    "YM_DATE",
    "GMT_DATE",
    "GMT_NET_DATE",
    # Exceptions
    "EasyDateError",
    "ErrorKind",
    "NullInputError",
    "ParseError",
    "UnsupportedLengthError",
    "FormatMismatchError",
    "InvalidPatternError",
    "InvalidReferenceTypeError",
    "InvalidFieldValueError",
    # Functions
    "is_leap_year",
    "smart_parse",
]
