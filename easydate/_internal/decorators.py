"""Custom decorators for EasyDate.

This module provides decorator utilities for the library:
    - @memoize / @memoize(maxsize=N): Result cache for pure functions

This module is not part of the public API.
"""

from __future__ import annotations

import functools
from collections import OrderedDict
from typing import Callable, ParamSpec, TypeVar, overload

P = ParamSpec("P")
T = TypeVar("T")

_MISSING = object()


@overload
def memoize(func: Callable[P, T], *, maxsize: int | None = None) -> Callable[P, T]: ...


@overload
def memoize(
    func: None = None, *, maxsize: int | None = None
) -> Callable[[Callable[P, T]], Callable[P, T]]: ...


def memoize(func=None, *, maxsize=None):
    """Cache the results of a pure function by its (hashable) arguments.

    With ``maxsize`` the cache keeps at most that many entries and evicts
    the least recently used one; without it the cache is unbounded.
    Exceptions are not cached, so a failing call is retried on the next
    invocation. The wrapper exposes ``cache`` and ``cache_clear``.

    Examples:
        >>> @memoize(maxsize=128)
        ... def compile_pattern(pattern: str) -> DatePattern:
        ...     return DatePattern(pattern)
    """
    if maxsize is not None and maxsize < 1:
        raise ValueError(f"maxsize must be positive, got {maxsize}")

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        cache: OrderedDict[object, T] = OrderedDict()

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            key = (args, frozenset(kwargs.items())) if kwargs else args
            result = cache.get(key, _MISSING)
            if result is not _MISSING:
                cache.move_to_end(key)
                return result  # type: ignore[return-value]

            result = cache[key] = func(*args, **kwargs)
            if maxsize is not None and len(cache) > maxsize:
                cache.popitem(last=False)
            return result

        wrapper.cache = cache  # type: ignore[attr-defined]
        wrapper.cache_clear = cache.clear  # type: ignore[attr-defined]
        return wrapper

    if func is None:
        return decorator
    return decorator(func)


__all__ = [
    "memoize",
]
