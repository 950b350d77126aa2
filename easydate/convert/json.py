"""JSON encoding and decoding façade.

This module forwards to the standard ``json`` module. It adds no wire
format of its own; it only turns Python objects into JSON-compatible
trees before encoding and rebuilds typed objects after decoding.

Functions:
    encode: Encode any object as JSON text.
    encode_with_exclude: Encode, dropping the named properties at every level.
    encode_with_include: Encode, keeping only the named properties.
    encode_with_date_format: Encode, formatting dates with a pattern.
    parse: Decode JSON text into dicts, lists and scalars.
    parse_object: Decode a JSON object, optionally into a given type.
    parse_array: Decode a JSON array, optionally into a given element type.

Object trees:
    - EasyDate becomes its ``to_json()`` dictionary
      ({"_type": "EasyDate", "value": ..., "millis": ...}), or a formatted
      string with encode_with_date_format.
    - datetime and date values become ISO 8601 strings (or formatted strings).
    - Objects with a ``to_json()`` method use it, even when iterable.
    - Dataclasses become dictionaries of their fields.
    - bytes and bytearray are rejected rather than encoded as lists of ints.
    - Other objects use their public instance attributes.

Examples:
    >>> from easydate import EasyDate
    >>> encode({"when": EasyDate(2012, 1, 2)})
    '{"when": {"_type": "EasyDate", "value": "2012-01-02 00:00:00", "millis": 1325462400000}}'

    >>> encode_with_date_format({"when": EasyDate(2012, 1, 2)}, "yyyy-MM-dd")
    '{"when": "2012-01-02"}'

    >>> parse_object('{"_type": "EasyDate", "millis": 0}', EasyDate)
    EasyDate(1970, 1, 1, 0, 0, 0, millisecond=0)
"""

from __future__ import annotations

import dataclasses
import datetime as _datetime
import json as _json
from collections.abc import Iterable, Mapping
from typing import Any, Callable, TypeVar

from easydate.errors import FormatMismatchError

T = TypeVar("T")

_SCALARS = (str, int, float, bool, type(None))


def _to_tree(value: Any, date_format: Callable[[Any], str] | None = None) -> Any:
    """Convert an object to a JSON-compatible tree of dicts, lists and scalars."""
    from easydate.core.easydate import EasyDate

    if isinstance(value, _SCALARS):
        return value
    if isinstance(value, EasyDate):
        if date_format is not None:
            return date_format(value)
        return value.to_json()
    if isinstance(value, (_datetime.date, _datetime.time)):
        if date_format is not None and isinstance(value, _datetime.date):
            return date_format(EasyDate.from_datetime(value))
        return value.isoformat()
    to_json = getattr(value, "to_json", None)
    if callable(to_json):
        return _to_tree(to_json(), date_format)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            field.name: _to_tree(getattr(value, field.name), date_format)
            for field in dataclasses.fields(value)
        }
    if isinstance(value, Mapping):
        return {str(key): _to_tree(item, date_format) for key, item in value.items()}
    if isinstance(value, (bytes, bytearray)):
        raise TypeError(f"object of type {type(value).__name__} is not JSON serializable")
    if isinstance(value, Iterable):
        return [_to_tree(item, date_format) for item in value]
    if hasattr(value, "__dict__"):
        return {
            key: _to_tree(item, date_format)
            for key, item in vars(value).items()
            if not key.startswith("_")
        }
    raise TypeError(f"object of type {type(value).__name__} is not JSON serializable")


def _filter_tree(
    tree: Any,
    *,
    include: frozenset[str] | None = None,
    exclude: frozenset[str] = frozenset(),
) -> Any:
    """Drop properties by name at every nesting level."""
    if isinstance(tree, dict):
        return {
            key: _filter_tree(item, include=include, exclude=exclude)
            for key, item in tree.items()
            if key not in exclude and (include is None or key in include)
        }
    if isinstance(tree, list):
        return [_filter_tree(item, include=include, exclude=exclude) for item in tree]
    return tree


def encode(value: Any) -> str:
    """Encode any object as JSON text.

    Raises:
        TypeError: If part of the object cannot be represented.
    """
    return _json.dumps(_to_tree(value))


def encode_with_exclude(value: Any, *exclude: str) -> str:
    """Encode, dropping the named properties wherever they occur.

    Examples:
        >>> encode_with_exclude({"name": "a", "secret": "b"}, "secret")
        '{"name": "a"}'
    """
    return _json.dumps(_filter_tree(_to_tree(value), exclude=frozenset(exclude)))


def encode_with_include(value: Any, *include: str) -> str:
    """Encode, keeping only the named properties of every object.

    Examples:
        >>> encode_with_include({"name": "a", "secret": "b"}, "name")
        '{"name": "a"}'
    """
    return _json.dumps(_filter_tree(_to_tree(value), include=frozenset(include)))


def encode_with_date_format(value: Any, pattern: str) -> str:
    """Encode, formatting every date value with a pattern such as "yyyy-MM-dd".

    Raises:
        InvalidPatternError: If the pattern is malformed.
    """
    from easydate.format.pattern import compile_pattern

    compiled = compile_pattern(pattern)
    return _json.dumps(_to_tree(value, compiled.format))


def parse(text: str) -> Any:
    """Decode JSON text into dicts, lists and scalars.

    Raises:
        json.JSONDecodeError: If text is not valid JSON.
    """
    return _json.loads(text)


def _build(data: Any, cls: type[T] | None) -> T | Any:
    """Rebuild an instance of ``cls`` from a decoded tree."""
    if cls is None:
        return data
    if isinstance(data, cls):
        return data
    if not isinstance(data, dict):
        raise FormatMismatchError(f"cannot build {cls.__name__} from {type(data).__name__}")
    from_json = getattr(cls, "from_json", None)
    if callable(from_json):
        return from_json(data)
    try:
        return cls(**data)
    except TypeError as e:
        raise FormatMismatchError(f"cannot build {cls.__name__} from {data!r}: {e}") from e


def parse_object(text: str, cls: type[T] | None = None) -> T | dict[str, Any]:
    """Decode a JSON object, optionally into an instance of ``cls``.

    Types with a ``from_json(dict)`` classmethod use it; other types are
    called with the object's members as keyword arguments.

    Raises:
        FormatMismatchError: If the text is not an object or cls cannot be built.
        json.JSONDecodeError: If text is not valid JSON.
    """
    data = parse(text)
    if not isinstance(data, dict):
        raise FormatMismatchError(f"expected JSON object, got {type(data).__name__}")
    return _build(data, cls)


def parse_array(text: str, cls: type[T] | None = None) -> list[T] | list[Any]:
    """Decode a JSON array, optionally building each element as ``cls``.

    Raises:
        FormatMismatchError: If the text is not an array or an element cannot be built.
        json.JSONDecodeError: If text is not valid JSON.

    Examples:
        >>> parse_array("[1, 2, 3]")
        [1, 2, 3]
    """
    data = parse(text)
    if not isinstance(data, list):
        raise FormatMismatchError(f"expected JSON array, got {type(data).__name__}")
    return [_build(item, cls) for item in data]


__all__ = [
    "encode",
    "encode_with_exclude",
    "encode_with_include",
    "encode_with_date_format",
    "parse",
    "parse_object",
    "parse_array",
]
