"""
Core schema classes for hash_schema validation.

Provides the Schema base, the Literal wrapper for bare comparison values and
the composite Array, Hash and Or schemas.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from .context import resolve_strict
from .interpret import interpret_errors, pretty_errors
from .literals import expect, inspect_value, join_alternatives, same_value, unexpected
from .types import CLEAN, ErrorNode, Message, Record, Sequence
from .void import VOID

logger = logging.getLogger(__name__)


class Schema:
    """
    Base of every schema node.

    Subclasses implement `validate`, which must return an error tree for any
    input, and may override `describe`, the label used in messages.
    """

    __slots__ = ()

    def validate(self, data: Any) -> ErrorNode:
        raise NotImplementedError

    def describe(self) -> str:
        return type(self).__name__

    def interpret(self, data: Any) -> list[str]:
        """Validate and flatten the errors into `root > ... > message` lines."""
        return interpret_errors(self.validate(data))

    def pretty_validate(self, data: Any) -> str:
        """Validate and render the error tree as indented JSON."""
        return pretty_errors(self.validate(data))

    def error(self, data: Any) -> Message:
        return Message(expect(self.describe(), data))

    def __or__(self, other: Schema | Any) -> Or:
        """
        Combine with OR logic: the first passing alternative wins.

        Usage:
            String() | Number()
            Array(String()) | Hash(name=String())
        """
        return Or(self, other)

    def __ror__(self, other: Any) -> Or:
        """Support `None | String()` where the literal comes first."""
        return Or(other, self)


@dataclass(frozen=True, slots=True)
class Literal(Schema):
    """A bare value the data must equal."""

    value: Any

    def validate(self, data: Any) -> ErrorNode:
        if same_value(self.value, data):
            return CLEAN
        return self.error(data)

    def describe(self) -> str:
        return inspect_value(self.value)


@dataclass(frozen=True, slots=True)
class Array(Schema):
    """Validator applying one element schema to every item of a list."""

    element: Schema

    def __post_init__(self) -> None:
        object.__setattr__(self, "element", to_schema(self.element))

    def validate(self, data: Any) -> ErrorNode:
        if not is_sequence(data):
            return self.error(data)
        return Sequence(tuple(self.element.validate(item) for item in data))

    def describe(self) -> str:
        return f"[{self.element.describe()}]"


@dataclass(frozen=True, slots=True, init=False)
class Hash(Schema):
    """
    Validator for mappings with named field schemas.

    Fields can be given as keywords, as a positional dict, or both (keywords
    win). A field that is literally called "strict" has to go through the
    positional dict:

        Hash(name=String(), age=Number())
        Hash({"strict": Boolean()}, strict=True)

    `strict=None` defers to `validation_context()` at validation time.

    Keys are matched with Python equality, so `1`, `1.0` and `True` name the
    same field: a strict `Hash({1: ...})` treats a data key `True` as
    declared and validates its value.
    """

    fields: Mapping[Any, Schema]
    strict: bool | None

    def __init__(
        self,
        fields: Mapping[Any, Any] | None = None,
        /,
        *,
        strict: bool | None = None,
        **keywords: Any,
    ) -> None:
        declared = dict(fields or {})
        declared.update(keywords)
        object.__setattr__(
            self,
            "fields",
            MappingProxyType({key: to_schema(v) for key, v in declared.items()}),
        )
        object.__setattr__(self, "strict", strict)

    def validate(self, data: Any) -> ErrorNode:
        if not is_mapping(data):
            return self.error(data)

        output: dict[Any, ErrorNode] = {}
        for key, schema in self.fields.items():
            output[key] = schema.validate(_lookup(data, key))

        if self.strict_enabled():
            known = set(self.fields) | {str(key) for key in self.fields}
            extra = [key for key in data if key not in known]
            if extra:
                logger.debug("Unexpected keys in strict hash: %r", extra)
            for key in extra:
                output[key] = Message(unexpected(key))

        return Record(output)

    def strict_enabled(self) -> bool:
        return resolve_strict(self.strict)


@dataclass(frozen=True, slots=True, init=False)
class Or(Schema):
    """
    Validator accepting data that passes any of its alternatives.

    Array alternatives are only tried on lists and Hash alternatives only on
    mappings. The result of the first clean alternative is returned as is;
    when every candidate fails the error names all alternatives.
    """

    alternatives: tuple[Schema, ...]

    def __init__(self, *alternatives: Any) -> None:
        if not alternatives:
            raise ValueError("Or requires at least one alternative")
        object.__setattr__(
            self, "alternatives", tuple(to_schema(a) for a in alternatives)
        )

    def validate(self, data: Any) -> ErrorNode:
        for schema in self.alternatives:
            if not _matches_data_type(schema, data):
                continue
            errors = schema.validate(data)
            if errors.is_empty():
                logger.debug("Or matched alternative %r", schema)
                return errors

        logger.debug("Or exhausted all alternatives for %s", type(data).__name__)
        return self.error(data)

    def describe(self) -> str:
        return join_alternatives([schema.describe() for schema in self.alternatives])

    def __or__(self, other: Schema | Any) -> Or:
        return Or(*self.alternatives, other)


def is_sequence(data: Any) -> bool:
    return isinstance(data, (list, tuple))


def is_mapping(data: Any) -> bool:
    return isinstance(data, Mapping)


def _lookup(data: Mapping[Any, Any], key: Any) -> Any:
    """Find `key` in data, falling back to its text form, else VOID."""
    if key in data:
        return data[key]
    text = str(key)
    if text in data:
        return data[text]
    return VOID


def _matches_data_type(schema: Schema, data: Any) -> bool:
    if isinstance(schema, Array):
        return is_sequence(data)
    if isinstance(schema, Hash):
        return is_mapping(data)
    return True


def to_schema(value: Any) -> Schema:
    """
    Coerce a value to a schema.

    Conversion rules:
        Schema -> pass through
        anything else -> Literal(value)
    """
    if isinstance(value, Schema):
        return value

    if isinstance(value, type) and issubclass(value, Schema):
        raise TypeError(
            f"Expected a schema instance, got the class {value.__name__}; "
            f"use {value.__name__}() instead"
        )

    return Literal(value)
