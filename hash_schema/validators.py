"""
Built-in leaf validators for hash_schema validation.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Number as _Numeric
from typing import Any

from .core import Schema, to_schema
from .literals import inspect_value, join_alternatives, same_value
from .types import CLEAN, ErrorNode
from .void import VOID


@dataclass(frozen=True, slots=True)
class String(Schema):
    """Accepts `str` values."""

    def validate(self, data: Any) -> ErrorNode:
        if isinstance(data, str):
            return CLEAN
        return self.error(data)


@dataclass(frozen=True, slots=True)
class Number(Schema):
    """Accepts ints, floats and other numbers, but not booleans."""

    def validate(self, data: Any) -> ErrorNode:
        if isinstance(data, _Numeric) and not isinstance(data, bool):
            return CLEAN
        return self.error(data)


@dataclass(frozen=True, slots=True)
class Boolean(Schema):
    """Accepts `True` and `False`."""

    def validate(self, data: Any) -> ErrorNode:
        if isinstance(data, bool):
            return CLEAN
        return self.error(data)


@dataclass(frozen=True, slots=True)
class Optional(Schema):
    """
    Allow a field to be absent, validate it if present.

    Usage:
        Optional()             # absent or None
        Optional(1)            # absent or exactly 1
        Optional(String())     # absent or a string
    """

    inner: Any = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "inner", to_schema(self.inner))

    def validate(self, data: Any) -> ErrorNode:
        if data is VOID:
            return CLEAN
        return self.inner.validate(data)


@dataclass(frozen=True, slots=True, init=False)
class Enum(Schema):
    """
    Validate value is one of a fixed list of literals.

    Usage:
        Enum("active", "inactive", "pending")
        Enum(1, "a", True)
    """

    values: tuple[Any, ...]

    def __init__(self, *values: Any) -> None:
        if not values:
            raise ValueError("Enum requires at least one value")
        object.__setattr__(self, "values", values)

    def validate(self, data: Any) -> ErrorNode:
        if any(same_value(value, data) for value in self.values):
            return CLEAN
        return self.error(data)

    def describe(self) -> str:
        return join_alternatives([inspect_value(value) for value in self.values])
