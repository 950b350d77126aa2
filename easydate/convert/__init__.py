"""Conversion utilities.

This module provides functions for converting EasyDate values to and
from other representations:
    - JSON encoding and decoding (the json façade)
    - Epoch milliseconds
    - Native datetime, date, time and struct_time values

Examples:
    >>> from easydate import EasyDate
    >>> from easydate.convert import encode, parse_object

    >>> text = encode(EasyDate(2012, 1, 2))
    >>> parse_object(text, EasyDate) == EasyDate(2012, 1, 2)
    True
"""

from __future__ import annotations

from easydate.convert.epoch import fields_to_millis, millis_to_fields
from easydate.convert.json import (
    encode,
    encode_with_date_format,
    encode_with_exclude,
    encode_with_include,
    parse,
    parse_array,
    parse_object,
)
from easydate.convert.native import Instant, to_epoch_millis

__all__ = [
    # JSON
    "encode",
    "encode_with_exclude",
    "encode_with_include",
    "encode_with_date_format",
    "parse",
    "parse_object",
    "parse_array",
    # Epoch
    "fields_to_millis",
    "millis_to_fields",
    # Native
    "Instant",
    "to_epoch_millis",
]
