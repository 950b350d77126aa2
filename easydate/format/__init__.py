"""Date formatting and parsing.

This module provides conversion between EasyDate values and strings:
    - Pattern-based formatting and parsing (DatePattern)
    - Length-based format inference (smart_parse)

Examples:
    >>> from easydate.format import DatePattern, smart_parse
    >>> smart_parse("20120126").day
    26
    >>> DatePattern("yyyy.MM.dd").format(smart_parse("20120126"))
    '2012.01.26'
"""

from __future__ import annotations

from easydate.format.pattern import (
    DATE,
    DATETIME,
    GMT_DATE,
    GMT_NET_DATE,
    SHORT_DATE,
    YM_DATE,
    DatePattern,
    as_pattern,
    compile_pattern,
    resolve_two_digit_year,
)
from easydate.format.smart import pattern_for, smart_parse

__all__: list[str] = [
    # Named patterns
    "DATE",
    "DATETIME",
    "SHORT_DATE",
    "YM_DATE",
    "GMT_DATE",
    "GMT_NET_DATE",
    # Patterns
    "DatePattern",
    "as_pattern",
    "compile_pattern",
    "resolve_two_digit_year",
    # Smart parsing
    "pattern_for",
    "smart_parse",
]
