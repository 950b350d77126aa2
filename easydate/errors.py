"""EasyDate exception hierarchy.

All EasyDate-specific exceptions inherit from EasyDateError. Every
exception carries a ``kind`` attribute so callers can branch on the
failure category without inspecting the class hierarchy.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Category of an EasyDate failure."""

    NULL_INPUT = "null_input"
    UNSUPPORTED_LENGTH = "unsupported_length"
    FORMAT_MISMATCH = "format_mismatch"
    INVALID_PATTERN = "invalid_pattern"
    INVALID_REFERENCE_TYPE = "invalid_reference_type"
    INVALID_FIELD_VALUE = "invalid_field_value"


class EasyDateError(Exception):
    """Base exception for all EasyDate errors."""

    kind: ErrorKind | None = None


class NullInputError(EasyDateError):
    """A required input was None.

    Examples:
        - smart_parse(None)
        - compare_to(None)
    """

    kind = ErrorKind.NULL_INPUT


class ParseError(EasyDateError):
    """Failed to parse a string representation."""

    pass


class UnsupportedLengthError(ParseError):
    """Smart parsing found no pattern for the input length.

    Examples:
        - "12" (no pattern for length 2)
        - "2012-01-02T13" (no pattern for length 13)
    """

    kind = ErrorKind.UNSUPPORTED_LENGTH


class FormatMismatchError(ParseError):
    """Text does not conform to the chosen pattern.

    Examples:
        - "2012/01/02" parsed with "yyyy-MM-dd"
        - "2012-01-02x" parsed with "yyyy-MM-dd"
    """

    kind = ErrorKind.FORMAT_MISMATCH


class InvalidPatternError(ParseError):
    """A pattern string could not be compiled.

    Examples:
        - Unterminated quote: "yyyy 'at"
        - Reserved letter: "yyyy-MM-dd Q"
    """

    kind = ErrorKind.INVALID_PATTERN


class InvalidReferenceTypeError(EasyDateError, TypeError):
    """A reference value is not one of the accepted instant kinds.

    Accepted kinds are epoch milliseconds (int), datetime.datetime,
    datetime.date, time.struct_time and EasyDate.
    """

    kind = ErrorKind.INVALID_REFERENCE_TYPE

    def __init__(self, value: object) -> None:
        super().__init__(f"value is not a date: {value!r}")
        self.value = value


class InvalidFieldValueError(EasyDateError, ValueError):
    """A calendar field is out of range.

    Raised instead of rolling the value over into the next period.

    Examples:
        - Month value outside 1-12
        - Day 32, or February 30
        - Hour value outside 0-23
    """

    kind = ErrorKind.INVALID_FIELD_VALUE


__all__ = [
    "ErrorKind",
    "EasyDateError",
    "NullInputError",
    "ParseError",
    "UnsupportedLengthError",
    "FormatMismatchError",
    "InvalidPatternError",
    "InvalidReferenceTypeError",
    "InvalidFieldValueError",
]
