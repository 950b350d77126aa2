"""Tests for smart parsing, explicit-pattern parsing and Result values."""

from __future__ import annotations

import pytest

from easydate import EasyDate, ErrorKind, Result
from easydate.errors import (
    EasyDateError,
    FormatMismatchError,
    InvalidFieldValueError,
    InvalidPatternError,
    InvalidReferenceTypeError,
    NullInputError,
    ParseError,
    UnsupportedLengthError,
)
from easydate.format import (
    DATE,
    DATETIME,
    GMT_DATE,
    GMT_NET_DATE,
    SHORT_DATE,
    YM_DATE,
    DatePattern,
    pattern_for,
    resolve_two_digit_year,
)


class TestSmartParse:
    """Tests for length-based parsing."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("201206", EasyDate(2012, 6, 1)),
            ("20120126", EasyDate(2012, 1, 26)),
            ("2012-01-02", EasyDate(2012, 1, 2)),
            ("2012-01-02 13:22:56", EasyDate(2012, 1, 2, 13, 22, 56)),
        ],
    )
    def test_supported_lengths(self, text: str, expected: EasyDate) -> None:
        """Each supported length maps to its pattern."""
        assert EasyDate.smart_parse(text) == expected

    @pytest.mark.parametrize(
        ("text", "pattern"),
        [
            ("201206", YM_DATE),
            ("20120126", SHORT_DATE),
            ("2012-01-02", DATE),
            ("2012-01-02 13:22:56", DATETIME),
        ],
    )
    def test_pattern_for(self, text: str, pattern: str) -> None:
        """pattern_for reports the inferred pattern."""
        assert pattern_for(text) == pattern

    @pytest.mark.parametrize("text", ["", "2012", "2012-01", "12", "2012-01-02T13"])
    def test_unsupported_length(self, text: str) -> None:
        """Other lengths fail with UnsupportedLengthError."""
        with pytest.raises(UnsupportedLengthError) as info:
            EasyDate.smart_parse(text)
        assert info.value.kind is ErrorKind.UNSUPPORTED_LENGTH
        assert isinstance(info.value, ParseError)

    def test_none(self) -> None:
        """None fails with NullInputError."""
        with pytest.raises(NullInputError):
            EasyDate.smart_parse(None)  # type: ignore[arg-type]

    @pytest.mark.parametrize("text", ["2012/01/02", "2012-01-0x", "abcdef", "2012-01-02T13:22:56"])
    def test_supported_length_wrong_shape(self, text: str) -> None:
        """A known length with the wrong shape fails with FormatMismatchError."""
        with pytest.raises(FormatMismatchError) as info:
            EasyDate.smart_parse(text)
        assert info.value.kind is ErrorKind.FORMAT_MISMATCH

    @pytest.mark.parametrize(
        "text",
        [
            "٢٠١٢٠٦",
            "٢٠١٢-٠١-٠٢",
            "２０１２０１２６",
        ],
    )
    def test_non_ascii_digits(self, text: str) -> None:
        """Only ASCII digits are read as numbers."""
        with pytest.raises(FormatMismatchError):
            EasyDate.smart_parse(text)
        assert not EasyDate.try_smart_parse(text).ok

    @pytest.mark.parametrize("text", ["2012-13-01", "2012-02-30", "20120230", "201200"])
    def test_invalid_fields(self, text: str) -> None:
        """Well-shaped text with impossible fields fails strictly."""
        with pytest.raises(InvalidFieldValueError):
            EasyDate.smart_parse(text)

    def test_value_of_uses_smart_parse(self) -> None:
        """value_of parses strings the same way."""
        assert EasyDate.value_of("20120126") == EasyDate.smart_parse("20120126")


class TestExplicitParse:
    """Tests for parsing with an explicit pattern."""

    def test_custom_separators(self) -> None:
        """Literal characters must match exactly."""
        assert EasyDate.parse("dd/MM/yyyy", "02/01/2012") == EasyDate(2012, 1, 2)

    def test_unpadded_fields(self) -> None:
        """Non-adjacent numeric fields accept fewer digits."""
        assert EasyDate.parse("yyyy-M-d", "2012-1-2") == EasyDate(2012, 1, 2)
        assert EasyDate.parse("yyyy-MM-dd", "2012-1-2") == EasyDate(2012, 1, 2)

    def test_adjacent_fields_fixed_width(self) -> None:
        """Adjacent numeric fields use their letter count."""
        assert EasyDate.parse("yyyyMMddHHmm", "201201021322") == EasyDate(2012, 1, 2, 13, 22)
        with pytest.raises(FormatMismatchError):
            EasyDate.parse("yyyyMMdd", "20120")

    def test_milliseconds(self) -> None:
        """S parses milliseconds."""
        d = EasyDate.parse("yyyy-MM-dd HH:mm:ss.SSS", "2012-01-02 13:22:56.789")
        assert d == EasyDate(2012, 1, 2, 13, 22, 56, 789)

    def test_missing_fields_default(self) -> None:
        """Fields absent from the pattern take epoch defaults."""
        assert EasyDate.parse("HH:mm", "13:22") == EasyDate(1970, 1, 1, 13, 22)
        assert EasyDate.parse("yyyy", "2012") == EasyDate(2012, 1, 1)

    def test_two_digit_year(self) -> None:
        """yy resolves within an 80/20 window around the current year."""
        d = EasyDate.parse("dd.MM.yy", "02.01.12")
        assert d.year == resolve_two_digit_year(12)
        assert (d.month, d.day) == (1, 2)

    @pytest.mark.parametrize(
        ("yy", "current", "expected"),
        [
            (12, 2026, 2012),
            (45, 2026, 2045),
            (46, 2026, 1946),
            (99, 2026, 1999),
            (0, 2026, 2000),
            (50, 2000, 1950),
            (19, 2000, 2019),
            (20, 2000, 1920),
        ],
    )
    def test_two_digit_year_window(self, yy: int, current: int, expected: int) -> None:
        """The window spans 80 years back and 20 years ahead."""
        assert resolve_two_digit_year(yy, current_year=current) == expected

    def test_quoted_literal(self) -> None:
        """Quoted text is matched literally, '' is a single quote."""
        assert EasyDate.parse("yyyy-MM-dd'T'HH:mm", "2012-01-02T13:22") == EasyDate(
            2012, 1, 2, 13, 22
        )
        assert EasyDate.parse("H 'o''clock'", "15 o'clock") == EasyDate(1970, 1, 1, 15)

    def test_month_names(self) -> None:
        """MMM and MMMM accept English names in any case."""
        assert EasyDate.parse("d MMM yyyy", "1 Dec 2012") == EasyDate(2012, 12, 1)
        assert EasyDate.parse("d MMMM yyyy", "1 december 2012") == EasyDate(2012, 12, 1)

    def test_unknown_month_name(self) -> None:
        """An unknown name is a format mismatch."""
        with pytest.raises(FormatMismatchError):
            EasyDate.parse("d MMM yyyy", "1 Foo 2012")

    def test_gmt_forms(self) -> None:
        """Both GMT forms parse back to the same instant."""
        expected = EasyDate(2012, 12, 1, 15, 5)
        assert EasyDate.parse(GMT_DATE, "1 Dec 2012 15:05:00 GMT") == expected
        assert EasyDate.parse(GMT_NET_DATE, "Sat, 1 Dec 2012 15:05:00 GMT") == expected

    def test_weekday_must_match(self) -> None:
        """A weekday that disagrees with the date fails."""
        with pytest.raises(InvalidFieldValueError, match="Monday"):
            EasyDate.parse(GMT_NET_DATE, "Mon, 1 Dec 2012 15:05:00 GMT")

    def test_trailing_text_rejected(self) -> None:
        """The whole string must match."""
        with pytest.raises(FormatMismatchError):
            EasyDate.parse(DATE, "2012-01-02 extra")

    def test_none_text(self) -> None:
        """None text fails with NullInputError."""
        with pytest.raises(NullInputError):
            EasyDate.parse(DATE, None)  # type: ignore[arg-type]

    def test_compiled_pattern(self) -> None:
        """A DatePattern may be passed instead of a string."""
        pattern = DatePattern("yyyy/MM/dd")
        assert EasyDate.parse(pattern, "2012/01/02") == EasyDate(2012, 1, 2)
        assert pattern.parse("2012/01/02") == EasyDate(2012, 1, 2)

    @pytest.mark.parametrize(
        "pattern",
        [DATE, DATETIME, SHORT_DATE, GMT_DATE, GMT_NET_DATE, "yyyy-MM-dd HH:mm:ss.SSS"],
    )
    def test_format_then_parse(self, pattern: str) -> None:
        """Formatting and parsing with the same pattern keeps the covered fields."""
        d = EasyDate(2012, 12, 1, 15, 5, 9, 123)
        parsed = EasyDate.parse(pattern, d.format(pattern))
        assert parsed.format(pattern) == d.format(pattern)
        assert (parsed.year, parsed.month, parsed.day) == (2012, 12, 1)


class TestInvalidPatterns:
    """Tests for pattern compilation errors."""

    @pytest.mark.parametrize("pattern", ["", "yyyy-MM-dd 'T", "yyyy-ww", "hh:mm", "yyyy Z"])
    def test_invalid(self, pattern: str) -> None:
        """Malformed patterns fail with InvalidPatternError."""
        with pytest.raises(InvalidPatternError) as info:
            EasyDate.parse(pattern, "2012")
        assert info.value.kind is ErrorKind.INVALID_PATTERN

    def test_non_string(self) -> None:
        """Patterns must be strings."""
        with pytest.raises(InvalidPatternError):
            DatePattern(42)  # type: ignore[arg-type]


class TestResult:
    """Tests for the non-raising parse entry points."""

    def test_success(self) -> None:
        """A successful parse carries the value."""
        result = EasyDate.try_smart_parse("2012-01-02")
        assert result.ok
        assert result.error is None
        assert result.unwrap() == EasyDate(2012, 1, 2)

    @pytest.mark.parametrize(
        ("text", "kind"),
        [
            (None, ErrorKind.NULL_INPUT),
            ("2012-01", ErrorKind.UNSUPPORTED_LENGTH),
            ("2012/01/02", ErrorKind.FORMAT_MISMATCH),
            ("2012-13-02", ErrorKind.INVALID_FIELD_VALUE),
        ],
    )
    def test_smart_parse_failures(self, text: str | None, kind: ErrorKind) -> None:
        """Each failure category is reported by kind."""
        result = EasyDate.try_smart_parse(text)  # type: ignore[arg-type]
        assert not result.ok
        assert result.error is kind
        assert result.value is None
        assert result.message

    def test_try_parse_bad_pattern(self) -> None:
        """Pattern errors are reported too."""
        result = EasyDate.try_parse("yyyy 'x", "2012 x")
        assert result.error is ErrorKind.INVALID_PATTERN

    def test_try_parse_success(self) -> None:
        """try_parse mirrors parse."""
        assert EasyDate.try_parse("dd/MM/yyyy", "02/01/2012").value == EasyDate(2012, 1, 2)

    def test_unwrap_failure(self) -> None:
        """unwrap raises ValueError on failure."""
        with pytest.raises(ValueError, match="unsupported_length|UNSUPPORTED_LENGTH"):
            EasyDate.try_smart_parse("2012-01").unwrap()

    def test_capture_passes_other_errors(self) -> None:
        """Only EasyDateError is captured."""

        def boom() -> None:
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            Result.capture(boom)

    def test_every_error_has_a_kind(self) -> None:
        """Every concrete error class carries a distinct kind."""
        concrete = (
            NullInputError,
            UnsupportedLengthError,
            FormatMismatchError,
            InvalidPatternError,
            InvalidReferenceTypeError,
            InvalidFieldValueError,
        )
        for cls in concrete:
            assert issubclass(cls, EasyDateError)
            assert isinstance(cls.kind, ErrorKind)
        assert {cls.kind for cls in concrete} == set(ErrorKind)

    @pytest.mark.parametrize(
        "data",
        [{}, [], {"value": ""}, {"value": 20120102}, {"_type": "EasyDate"}],
    )
    def test_from_json_failure_is_reported(self, data: object) -> None:
        """A rejected to_json() dictionary is a failed Result, never a success."""
        result = Result.capture(EasyDate.from_json, data)
        assert not result.ok
        assert result.error is ErrorKind.FORMAT_MISMATCH
        assert result.value is None

    def test_capture_refuses_kindless_errors(self) -> None:
        """Errors without a kind propagate instead of reading as success."""

        def fail() -> None:
            raise ParseError("no kind")

        with pytest.raises(ParseError):
            Result.capture(fail)
