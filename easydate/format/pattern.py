"""Pattern-based formatting and parsing.

This module compiles ``yyyy-MM-dd``-style patterns (the SimpleDateFormat
letter convention) into DatePattern objects that format EasyDate values
and parse strings back into them. Month and weekday names are fixed
English names; there is no locale support.

Supported Letters:
    y    - Year (yy: two-digit year, anything else: full year)
    M    - Month (M/MM: number, MMM: "Jan", MMMM: "January")
    d    - Day of month
    H    - Hour of day (0-23)
    m    - Minute
    s    - Second
    S    - Millisecond
    E    - Weekday (E/EE/EEE: "Mon", EEEE: "Monday")
    '..' - Quoted literal text ('' is a single quote)

Any other ASCII letter is reserved and rejected with InvalidPatternError.
Other characters are literals.

Parsing Rules:
    - The whole text must match; otherwise FormatMismatchError.
    - Digits are ASCII 0-9 only.
    - A numeric field directly followed by another numeric field must
      use exactly its letter count in digits (yyyyMMdd). Otherwise it
      accepts one digit up to the field's maximum width.
    - Missing fields default to 1970-01-01 00:00:00.000.
    - Parsed fields are validated strictly (InvalidFieldValueError), and
      a parsed weekday must agree with the date.

Examples:
    >>> from easydate import EasyDate
    >>> pattern = DatePattern("yyyy/MM/dd HH:mm")
    >>> pattern.format(EasyDate(2024, 1, 15, 14, 30))
    '2024/01/15 14:30'

    >>> pattern.parse("2024/01/15 14:30")
    EasyDate(2024, 1, 15, 14, 30, 0, millisecond=0)
"""

from __future__ import annotations

import datetime as _datetime
import logging
import re
from typing import TYPE_CHECKING, NamedTuple, Union

from easydate._internal.calendar import ymd_to_ordinal, ordinal_to_weekday
from easydate._internal.constants import (
    MONTH_NAMES,
    TWO_DIGIT_YEAR_LOOKBACK,
    WEEKDAY_NAMES,
)
from easydate._internal.decorators import memoize
from easydate._internal.validation import validate_fields
from easydate.convert.epoch import fields_to_millis
from easydate.errors import (
    FormatMismatchError,
    InvalidFieldValueError,
    InvalidPatternError,
    NullInputError,
)

if TYPE_CHECKING:
    from easydate.core.easydate import EasyDate

logger = logging.getLogger(__name__)

# yyyy-MM-dd
DATE: str = "yyyy-MM-dd"
# yyyy-MM-dd HH:mm:ss
DATETIME: str = "yyyy-MM-dd HH:mm:ss"
# yyyyMMdd
SHORT_DATE: str = "yyyyMMdd"
# yyyyMM
YM_DATE: str = "yyyyMM"
# 1 Dec 2012 15:05:00 GMT
GMT_DATE: str = "d MMM yyyy HH:mm:ss 'GMT'"
# Sat, 1 Dec 2012 15:05:00 GMT
GMT_NET_DATE: str = "EEE, d MMM yyyy HH:mm:ss 'GMT'"

# Numeric letters: field name and maximum digits when not adjacent
_NUMERIC_FIELDS: dict[str, tuple[str, int]] = {
    "y": ("year", 4),
    "M": ("month", 2),
    "d": ("day", 2),
    "H": ("hour", 2),
    "m": ("minute", 2),
    "s": ("second", 2),
    "S": ("millisecond", 3),
}

_TEXT_LETTERS = frozenset("E")

_FIELD_DEFAULTS: dict[str, int] = {
    "year": 1970,
    "month": 1,
    "day": 1,
    "hour": 0,
    "minute": 0,
    "second": 0,
    "millisecond": 0,
}

_MONTHS_BY_NAME: dict[str, int] = {}
for _index, _name in enumerate(MONTH_NAMES[1:], start=1):
    _MONTHS_BY_NAME[_name.lower()] = _index
    _MONTHS_BY_NAME[_name[:3].lower()] = _index

_WEEKDAYS_BY_NAME: dict[str, int] = {}
for _index, _name in enumerate(WEEKDAY_NAMES[1:], start=1):
    _WEEKDAYS_BY_NAME[_name.lower()] = _index
    _WEEKDAYS_BY_NAME[_name[:3].lower()] = _index


class _Token(NamedTuple):
    """One compiled pattern element: a literal (letter "") or a field."""

    letter: str
    count: int
    text: str = ""

    @property
    def is_numeric(self) -> bool:
        if self.letter == "M":
            return self.count <= 2
        return self.letter in _NUMERIC_FIELDS


def _tokenize(pattern: str) -> list[_Token]:
    """Split a pattern into literal and field tokens.

    Raises:
        InvalidPatternError: On reserved letters or an unterminated quote.
    """
    tokens: list[_Token] = []
    literal: list[str] = []

    def flush() -> None:
        if literal:
            tokens.append(_Token("", 0, "".join(literal)))
            literal.clear()

    i = 0
    n = len(pattern)
    while i < n:
        c = pattern[i]
        if c == "'":
            if i + 1 < n and pattern[i + 1] == "'":
                literal.append("'")
                i += 2
                continue
            j = i + 1
            while True:
                if j >= n:
                    raise InvalidPatternError(
                        f"unterminated quote at index {i} in pattern {pattern!r}"
                    )
                if pattern[j] == "'":
                    if j + 1 < n and pattern[j + 1] == "'":
                        literal.append("'")
                        j += 2
                        continue
                    break
                literal.append(pattern[j])
                j += 1
            i = j + 1
        elif c.isascii() and c.isalpha():
            j = i
            while j < n and pattern[j] == c:
                j += 1
            if c not in _NUMERIC_FIELDS and c not in _TEXT_LETTERS:
                raise InvalidPatternError(
                    f"unsupported pattern letter {c!r} in pattern {pattern!r}"
                )
            flush()
            tokens.append(_Token(c, j - i))
            i = j
        else:
            literal.append(c)
            i += 1

    flush()
    return tokens


def resolve_two_digit_year(yy: int, current_year: int | None = None) -> int:
    """Resolve a two-digit year into [current_year - 80, current_year + 20).

    Examples:
        >>> resolve_two_digit_year(12, current_year=2026)
        2012
        >>> resolve_two_digit_year(50, current_year=2026)
        1950
    """
    if current_year is None:
        current_year = _datetime.date.today().year
    start = current_year - TWO_DIGIT_YEAR_LOOKBACK
    year = start - start % 100 + yy
    if year < start:
        year += 100
    return year


class DatePattern:
    """A compiled date pattern such as ``yyyy-MM-dd HH:mm:ss``.

    Instances are immutable and may be shared; ``compile_pattern``
    caches them by pattern string.

    Examples:
        >>> DatePattern("yyyyMMdd").parse("20120126")
        EasyDate(2012, 1, 26, 0, 0, 0, millisecond=0)

        >>> DatePattern("yyyy 'at")
        Traceback (most recent call last):
        ...
        easydate.errors.InvalidPatternError: unterminated quote at index 5 in pattern "yyyy 'at"
    """

    __slots__ = ("_pattern", "_tokens", "_regex", "_groups")

    def __init__(self, pattern: str) -> None:
        """Compile a pattern string.

        Raises:
            InvalidPatternError: If the pattern is empty or malformed.
        """
        if not isinstance(pattern, str):
            raise InvalidPatternError(
                f"pattern must be a string, got {type(pattern).__name__}"
            )
        if not pattern:
            raise InvalidPatternError("pattern must not be empty")

        self._pattern = pattern
        self._tokens = _tokenize(pattern)
        self._groups: list[_Token] = []
        self._regex = re.compile(self._build_regex(), re.ASCII)
        logger.debug("compiled pattern %r to %s", pattern, self._regex.pattern)

    def _build_regex(self) -> str:
        parts = []
        for index, token in enumerate(self._tokens):
            if not token.letter:
                parts.append(re.escape(token.text))
                continue

            self._groups.append(token)
            if not token.is_numeric:
                parts.append(r"([A-Za-z]+)")
            elif token.letter == "y" and token.count == 2:
                parts.append(r"(\d{2})")
            else:
                following = self._tokens[index + 1] if index + 1 < len(self._tokens) else None
                if following is not None and following.letter and following.is_numeric:
                    parts.append(rf"(\d{{{token.count}}})")
                else:
                    width = max(token.count, _NUMERIC_FIELDS[token.letter][1])
                    parts.append(rf"(\d{{1,{width}}})")
        return "".join(parts)

    @property
    def pattern(self) -> str:
        """Return the source pattern string."""
        return self._pattern

    def format(self, value: EasyDate) -> str:
        """Format an EasyDate with this pattern.

        Examples:
            >>> from easydate import EasyDate
            >>> DatePattern(GMT_NET_DATE).format(EasyDate(2012, 12, 1, 15, 5))
            'Sat, 1 Dec 2012 15:05:00 GMT'
        """
        return "".join(self._format_token(value, token) for token in self._tokens)

    @staticmethod
    def _format_token(value: EasyDate, token: _Token) -> str:
        if not token.letter:
            return token.text
        if token.letter == "E":
            name = WEEKDAY_NAMES[value.weekday]
            return name if token.count >= 4 else name[:3]
        if token.letter == "M" and token.count >= 3:
            name = MONTH_NAMES[value.month]
            return name if token.count >= 4 else name[:3]
        if token.letter == "y" and token.count == 2:
            return f"{value.year % 100:02d}"

        field_value = getattr(value, _NUMERIC_FIELDS[token.letter][0])
        return f"{field_value:0{token.count}d}"

    def parse_fields(self, text: str) -> tuple[int, int, int, int, int, int, int]:
        """Parse text into validated calendar fields.

        Returns:
            Tuple of (year, month, day, hour, minute, second, millisecond).

        Raises:
            NullInputError: If text is None.
            FormatMismatchError: If text does not match the pattern.
            InvalidFieldValueError: If a field is out of range.
        """
        if text is None:
            raise NullInputError("date string must not be None")

        match = self._regex.fullmatch(text)
        if match is None:
            raise FormatMismatchError(
                f"cannot parse date string {text!r} with pattern {self._pattern!r}"
            )

        fields = dict(_FIELD_DEFAULTS)
        weekday = None
        for token, raw in zip(self._groups, match.groups()):
            if token.letter == "E":
                weekday = _lookup_name(_WEEKDAYS_BY_NAME, raw, text, self._pattern)
            elif token.letter == "M" and token.count >= 3:
                fields["month"] = _lookup_name(_MONTHS_BY_NAME, raw, text, self._pattern)
            elif token.letter == "y" and token.count == 2:
                fields["year"] = resolve_two_digit_year(int(raw))
            else:
                fields[_NUMERIC_FIELDS[token.letter][0]] = int(raw)

        result = (
            fields["year"],
            fields["month"],
            fields["day"],
            fields["hour"],
            fields["minute"],
            fields["second"],
            fields["millisecond"],
        )
        validate_fields(*result)

        if weekday is not None:
            actual = ordinal_to_weekday(ymd_to_ordinal(*result[:3]))
            if actual != weekday:
                raise InvalidFieldValueError(
                    f"weekday {WEEKDAY_NAMES[weekday]} does not match "
                    f"{result[0]}-{result[1]:02d}-{result[2]:02d} "
                    f"({WEEKDAY_NAMES[actual]})"
                )
        return result

    def parse_millis(self, text: str) -> int:
        """Parse text into epoch milliseconds."""
        return fields_to_millis(*self.parse_fields(text))

    def parse(self, text: str) -> EasyDate:
        """Parse text into an EasyDate.

        Raises:
            NullInputError: If text is None.
            FormatMismatchError: If text does not match the pattern.
            InvalidFieldValueError: If a field is out of range.
        """
        from easydate.core.easydate import EasyDate

        return EasyDate.from_millis(self.parse_millis(text))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DatePattern):
            return NotImplemented
        return self._pattern == other._pattern

    def __hash__(self) -> int:
        return hash(("DatePattern", self._pattern))

    def __repr__(self) -> str:
        return f"DatePattern({self._pattern!r})"

    def __str__(self) -> str:
        return self._pattern


def _lookup_name(names: dict[str, int], raw: str, text: str, pattern: str) -> int:
    try:
        return names[raw.lower()]
    except KeyError:
        raise FormatMismatchError(
            f"unknown name {raw!r} in date string {text!r} for pattern {pattern!r}"
        ) from None


PatternLike = Union[str, DatePattern]


_PATTERN_CACHE_SIZE = 128


@memoize(maxsize=_PATTERN_CACHE_SIZE)
def compile_pattern(pattern: str) -> DatePattern:
    """Return the cached DatePattern for a pattern string.

    Raises:
        InvalidPatternError: If the pattern is empty or malformed.
    """
    return DatePattern(pattern)


def as_pattern(pattern: PatternLike) -> DatePattern:
    """Return ``pattern`` as a DatePattern, compiling strings on demand."""
    if isinstance(pattern, DatePattern):
        return pattern
    if not isinstance(pattern, str):
        raise InvalidPatternError(
            f"pattern must be a string or DatePattern, got {type(pattern).__name__}"
        )
    return compile_pattern(pattern)


__all__ = [
    "DATE",
    "DATETIME",
    "SHORT_DATE",
    "YM_DATE",
    "GMT_DATE",
    "GMT_NET_DATE",
    "DatePattern",
    "PatternLike",
    "compile_pattern",
    "as_pattern",
    "resolve_two_digit_year",
]
