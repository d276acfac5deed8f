"""
Schema operations for hash_schema validation.

Provides validate(), interpret(), describe(), pretty_validate() and
to_pydantic() functions.
"""

from __future__ import annotations

import logging
from typing import Any
from typing import Literal as TypingLiteral
from typing import Optional as TypingOptional
from typing import Union

from pydantic import BaseModel, ConfigDict, create_model

from .core import Array, Hash, Literal, Or, Schema, to_schema
from .interpret import interpret_errors, pretty_errors
from .types import ErrorNode
from .validators import Boolean, Enum, Number, Optional, String

logger = logging.getLogger(__name__)


def validate(schema: Schema | Any, data: Any) -> ErrorNode:
    """
    Validate data against a schema.

    Args:
        schema: The schema tree (a bare value is compared literally)
        data: The value to check; never modified

    Returns:
        An error tree shaped like `data`: CLEAN where the data passes,
        Message at failing leaves, Sequence for lists, Record for mappings.

    Usage:
        schema = Hash(name=String(), tags=Array(String()))
        errors = validate(schema, {"name": "Alice", "tags": ["a", 1]})
        errors["tags"][1]   # Message("Expected String but got 1")
    """
    return to_schema(schema).validate(data)


def interpret(schema: Schema | Any, data: Any) -> list[str]:
    """
    Validate data and flatten the errors into readable lines.

    Usage:
        interpret(Hash(name=String()), {"name": 5})
        # ['root:{} > .name > Expected String but got 5']
    """
    return interpret_errors(validate(schema, data))


def describe(schema: Schema | Any) -> str:
    """Human readable label of what the schema accepts."""
    return to_schema(schema).describe()


def pretty_validate(schema: Schema | Any, data: Any) -> str:
    """Validate data and render the error tree as indented JSON."""
    return pretty_errors(validate(schema, data))


def to_pydantic(name: str, schema: Hash) -> type[BaseModel]:
    """
    Compile a Hash schema to a Pydantic model.

    Args:
        name: Name of the generated model class
        schema: Hash schema definition; nested hashes become nested models

    Returns:
        A Pydantic BaseModel subclass

    Usage:
        User = to_pydantic("User", Hash(
            name=String(),
            email=Optional(String()),
        ))
        user = User(name="Alice")
    """
    if not isinstance(schema, Hash):
        raise TypeError("Schema must be a Hash")
    return _model_from_hash(name, schema)


def _model_from_hash(name: str, schema: Hash) -> type[BaseModel]:
    fields: dict[str, Any] = {}

    for key, v in schema.fields.items():
        fields[str(key)] = _extract_pydantic_field(f"{name}_{key}", v)

    extra = "forbid" if schema.strict_enabled() else "ignore"
    logger.debug("Compiling model %s with fields %s", name, list(fields))
    return create_model(name, __config__=ConfigDict(extra=extra), **fields)


def _extract_pydantic_field(name: str, v: Schema) -> tuple[Any, Any]:
    """Extract Pydantic field type and default from a schema."""
    match v:
        case Optional(inner=Literal(value=None)):
            return (type(None), None)
        case Optional(inner=inner):
            return (TypingOptional[_annotation(name, inner)], None)

    return (_annotation(name, v), ...)


def _annotation(name: str, v: Schema) -> Any:
    """Python type annotation accepting what the schema accepts."""
    match v:
        case String():
            return str
        case Number():
            return Union[int, float]
        case Boolean():
            return bool
        case Literal(value=value):
            return _literal_type((value,))
        case Enum(values=values):
            return _literal_type(values)
        case Array(element=element):
            return list[_annotation(name, element)]  # type: ignore[misc]
        case Hash():
            return _model_from_hash(name, v)
        case Or(alternatives=alternatives):
            return Union[tuple(_annotation(name, a) for a in alternatives)]
        case Optional(inner=inner):
            return TypingOptional[_annotation(name, inner)]

    return Any


def _literal_type(values: tuple[Any, ...]) -> Any:
    if all(value is None or isinstance(value, (str, int, bool)) for value in values):
        return TypingLiteral[values]
    return Any
