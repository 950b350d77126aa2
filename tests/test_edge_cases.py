"""Edge case tests for EasyDate.

This module tests boundary conditions, the internal decorators and
validators, the exception hierarchy and debug logging.
"""

from __future__ import annotations

import logging

import pytest

import easydate
from easydate import EasyDate
from easydate._internal.constants import MAX_YEAR, MIN_YEAR
from easydate._internal.decorators import memoize
from easydate._internal.validation import (
    validate_day,
    validate_month,
    validate_time,
    validate_year,
)
from easydate.errors import (
    EasyDateError,
    ErrorKind,
    InvalidFieldValueError,
    InvalidReferenceTypeError,
    ParseError,
)


# ============================================================================
# Test @memoize Decorator
# ============================================================================


class TestMemoizeDecorator:
    """Tests for the @memoize decorator."""

    def test_memoize_caches_results(self) -> None:
        """Repeated calls reuse the cached value."""
        calls: list[int] = []

        @memoize
        def square(x: int) -> int:
            calls.append(x)
            return x * x

        assert square(4) == 16
        assert square(4) == 16
        assert calls == [4]

    def test_memoize_distinguishes_kwargs(self) -> None:
        """Keyword arguments are part of the cache key."""

        @memoize
        def join(a: str, sep: str = "-") -> str:
            return sep.join(a)

        assert join("ab") == "a-b"
        assert join("ab", sep="+") == "a+b"

    def test_memoize_does_not_cache_errors(self) -> None:
        """A failing call is retried."""
        attempts: list[int] = []

        @memoize
        def flaky(x: int) -> int:
            attempts.append(x)
            if len(attempts) == 1:
                raise RuntimeError("first call fails")
            return x

        with pytest.raises(RuntimeError):
            flaky(1)
        assert flaky(1) == 1
        assert len(attempts) == 2

    def test_memoize_clear_cache(self) -> None:
        """The cache can be cleared."""

        @memoize
        def ident(x: int) -> int:
            return x

        ident(1)
        assert ident.cache  # type: ignore[attr-defined]
        ident.cache_clear()  # type: ignore[attr-defined]
        assert not ident.cache  # type: ignore[attr-defined]

    def test_memoize_maxsize_evicts_least_recent(self) -> None:
        """A bounded cache drops the least recently used entry."""
        calls: list[int] = []

        @memoize(maxsize=2)
        def ident(x: int) -> int:
            calls.append(x)
            return x

        ident(1)
        ident(2)
        ident(1)
        ident(3)
        assert list(ident.cache) == [(1,), (3,)]  # type: ignore[attr-defined]
        ident(1)
        assert calls == [1, 2, 3]
        ident(2)
        assert calls == [1, 2, 3, 2]

    @pytest.mark.parametrize("size", [0, -1])
    def test_memoize_rejects_non_positive_maxsize(self, size: int) -> None:
        """maxsize must be at least 1."""
        with pytest.raises(ValueError):
            memoize(maxsize=size)


# ============================================================================
# Test Validators
# ============================================================================


class TestValidators:
    """Tests for the strict field validators."""

    def test_year_bounds(self) -> None:
        """Years MIN_YEAR and MAX_YEAR are the limits."""
        validate_year(MIN_YEAR)
        validate_year(MAX_YEAR)
        with pytest.raises(InvalidFieldValueError, match="year must be between"):
            validate_year(MAX_YEAR + 1)

    def test_month_message(self) -> None:
        """Messages name the field, the range and the value."""
        with pytest.raises(InvalidFieldValueError, match="month must be between 1 and 12, got 13"):
            validate_month(13)

    def test_day_depends_on_month(self) -> None:
        """Day limits follow the month and leap year."""
        validate_day(2012, 2, 29)
        with pytest.raises(InvalidFieldValueError, match="day must be between 1 and 28"):
            validate_day(2013, 2, 29)

    def test_time(self) -> None:
        """Time limits are inclusive."""
        validate_time(23, 59, 59, 999)
        with pytest.raises(InvalidFieldValueError, match="second"):
            validate_time(0, 0, 60)


# ============================================================================
# Test Exception Hierarchy
# ============================================================================


class TestExceptionHierarchy:
    """Tests for the exception classes."""

    def test_parse_errors(self) -> None:
        """Parse failures share ParseError."""
        assert issubclass(easydate.UnsupportedLengthError, ParseError)
        assert issubclass(easydate.FormatMismatchError, ParseError)
        assert issubclass(easydate.InvalidPatternError, ParseError)
        assert issubclass(ParseError, EasyDateError)

    def test_builtin_bases(self) -> None:
        """Reference and field errors are also TypeError and ValueError."""
        assert issubclass(InvalidReferenceTypeError, TypeError)
        assert issubclass(InvalidFieldValueError, ValueError)

    def test_reference_error_keeps_value(self) -> None:
        """The rejected value is available on the exception."""
        error = InvalidReferenceTypeError(3.5)
        assert error.value == 3.5
        assert "3.5" in str(error)
        assert error.kind is ErrorKind.INVALID_REFERENCE_TYPE

    def test_catch_all(self) -> None:
        """EasyDateError catches every library failure."""
        for action in (
            lambda: EasyDate.smart_parse("x"),
            lambda: EasyDate(2012, 2, 30),
            lambda: EasyDate(2012, 1, 1).compare_to("x"),  # type: ignore[arg-type]
            lambda: EasyDate.parse("yyyy 'x", "2012"),
        ):
            with pytest.raises(EasyDateError):
                action()


# ============================================================================
# Test Logging
# ============================================================================


class TestLogging:
    """Tests for debug logging."""

    def test_smart_parse_logs_pattern(self, caplog: pytest.LogCaptureFixture) -> None:
        """Smart parsing logs the chosen pattern at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="easydate"):
            EasyDate.smart_parse("20120126")
        assert any("yyyyMMdd" in record.getMessage() for record in caplog.records)

    def test_rejected_reference_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Rejected reference kinds are logged at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="easydate"):
            with pytest.raises(InvalidReferenceTypeError):
                EasyDate.from_offset(1.5, days=1)  # type: ignore[arg-type]
        assert any("float" in record.getMessage() for record in caplog.records)

    def test_no_handlers_installed(self) -> None:
        """The library leaves handler configuration to applications."""
        assert not logging.getLogger("easydate").handlers


# ============================================================================
# Test Boundaries
# ============================================================================


class TestBoundaries:
    """Tests for the ends of the supported range."""

    def test_first_day(self) -> None:
        """0001-01-01 is a Monday."""
        d = EasyDate(1, 1, 1)
        assert d.weekday == 1
        assert d.format("yyyy-MM-dd") == "0001-01-01"

    def test_last_day(self) -> None:
        """9999-12-31 is a Friday."""
        d = EasyDate(9999, 12, 31, 23, 59, 59, 999)
        assert d.weekday == 5
        assert d.day_of_year == 365

    def test_century_non_leap(self) -> None:
        """1900-02-29 does not exist."""
        with pytest.raises(InvalidFieldValueError):
            EasyDate(1900, 2, 29)
        assert EasyDate(2000, 2, 29).day == 29
