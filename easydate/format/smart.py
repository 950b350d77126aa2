"""Length-based format inference.

``smart_parse`` picks the parsing pattern purely from the length of the
input string:

    ======  =======================
    length  pattern
    ======  =======================
    6       yyyyMM (201206)
    8       yyyyMMdd (20120126)
    10      yyyy-MM-dd (2012-01-02)
    19      yyyy-MM-dd HH:mm:ss (2012-01-02 13:22:56)
    ======  =======================

Any other length raises UnsupportedLengthError.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from easydate.errors import NullInputError, UnsupportedLengthError
from easydate.format.pattern import (
    DATE,
    DATETIME,
    SHORT_DATE,
    YM_DATE,
    compile_pattern,
)

if TYPE_CHECKING:
    from easydate.core.easydate import EasyDate

logger = logging.getLogger(__name__)

PATTERNS_BY_LENGTH: dict[int, str] = {
    len("201206"): YM_DATE,
    len("20120126"): SHORT_DATE,
    len("2012-01-02"): DATE,
    len("2012-01-02 13:22:56"): DATETIME,
}


def pattern_for(text: str) -> str:
    """Return the pattern string smart parsing would use for ``text``.

    Raises:
        NullInputError: If text is None.
        UnsupportedLengthError: If no pattern has the length of text.

    Examples:
        >>> pattern_for("201206")
        'yyyyMM'
        >>> pattern_for("2012-01-02 13:22:56")
        'yyyy-MM-dd HH:mm:ss'
    """
    if text is None:
        raise NullInputError("date string must not be None")

    try:
        return PATTERNS_BY_LENGTH[len(text)]
    except KeyError:
        supported = ", ".join(str(length) for length in sorted(PATTERNS_BY_LENGTH))
        raise UnsupportedLengthError(
            f"no date pattern for {text!r} of length {len(text)} "
            f"(supported lengths: {supported})"
        ) from None


def smart_parse(text: str) -> EasyDate:
    """Parse a date string, inferring the pattern from its length.

    Args:
        text: The date string.

    Returns:
        The parsed EasyDate.

    Raises:
        NullInputError: If text is None.
        UnsupportedLengthError: If the length maps to no pattern.
        FormatMismatchError: If text does not match the inferred pattern.
        InvalidFieldValueError: If a parsed field is out of range.

    Examples:
        >>> smart_parse("201206")
        EasyDate(2012, 6, 1, 0, 0, 0, millisecond=0)
        >>> smart_parse("2012-01-02 13:22:56")
        EasyDate(2012, 1, 2, 13, 22, 56, millisecond=0)
    """
    pattern = pattern_for(text)
    logger.debug("smart parsing %r with pattern %r", text, pattern)
    return compile_pattern(pattern).parse(text)


__all__ = ["PATTERNS_BY_LENGTH", "pattern_for", "smart_parse"]
