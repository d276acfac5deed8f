"""
hash_schema - composable structural validation for JSON-like data.

Usage:
    from hash_schema import Array, Hash, Number, Optional, String, interpret

    schema = Hash(
        name=String(),
        age=Optional(Number()),
        tags=Array(String()),
    )

    errors = schema.validate(data)      # error tree shaped like data
    lines = interpret(schema, data)     # ['root:{} > .name > Expected String but got 5']
    Model = to_pydantic("Person", schema)
"""

from .context import is_strict, resolve_strict, validation_context
from .core import Array, Hash, Literal, Or, Schema, to_schema
from .interpret import interpret_errors, pretty_errors
from .schema import describe, interpret, pretty_validate, to_pydantic, validate
from .types import CLEAN, Clean, ErrorNode, Message, Record, Sequence
from .validators import Boolean, Enum, Number, Optional, String
from .void import VOID, Void

__all__ = [
    # Error tree
    "CLEAN",
    "Clean",
    "Message",
    "Sequence",
    "Record",
    "ErrorNode",
    # Sentinel
    "VOID",
    "Void",
    # Core
    "Schema",
    "Literal",
    "Array",
    "Hash",
    "Or",
    "to_schema",
    # Validators
    "String",
    "Number",
    "Boolean",
    "Optional",
    "Enum",
    # Operations
    "validate",
    "interpret",
    "describe",
    "pretty_validate",
    "to_pydantic",
    "interpret_errors",
    "pretty_errors",
    # Configuration
    "validation_context",
    "is_strict",
    "resolve_strict",
]
