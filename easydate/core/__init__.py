"""Core value types for EasyDate.

Exports:
    EasyDate: An immutable calendar instant with millisecond precision.
"""

from __future__ import annotations

from easydate.core.easydate import EasyDate

__all__: list[str] = [
    "EasyDate",
]
