"""Result values for the non-raising parse entry points.

``EasyDate.try_parse`` and ``EasyDate.try_smart_parse`` return a Result
instead of raising, so callers can branch on ``ErrorKind``:

    >>> from easydate import EasyDate, ErrorKind
    >>> result = EasyDate.try_smart_parse("2012-01")
    >>> result.ok
    False
    >>> result.error is ErrorKind.UNSUPPORTED_LENGTH
    True
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from easydate.errors import EasyDateError, ErrorKind

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a value or an error kind with its message."""

    value: T | None = None
    error: ErrorKind | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, or raise ValueError if this is a failure."""
        if self.error is not None:
            raise ValueError(f"{self.error.value}: {self.message}")
        return self.value  # type: ignore[return-value]

    @classmethod
    def capture(cls, func: Callable[..., T], *args: object) -> Result[T]:
        """Call ``func`` and wrap its value or its EasyDateError.

        Errors without a kind propagate, since a Result with no error
        reads as success.
        """
        try:
            return cls(value=func(*args))
        except EasyDateError as e:
            if e.kind is None:
                raise
            return cls(error=e.kind, message=str(e))


__all__ = ["Result"]
