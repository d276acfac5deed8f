"""
Consumers of error trees: path interpretation and pretty printing.
"""

from __future__ import annotations

import json
from typing import Any

from .types import Clean, ErrorNode, Message, Record, Sequence

ROOT = "root"


def interpret_errors(errors: ErrorNode, root: str = ROOT) -> list[str]:
    """
    Flatten an error tree into one line per violation.

    Each line is the path to the failing value joined with " > ", followed by
    the message. Mapping levels render as `key:{}`, list levels as `key:[]`,
    list positions as `#index` and failing leaves as `.key`.

    Usage:
        errors = Hash(tags=Array(String())).validate({"tags": ["a", 1]})
        interpret_errors(errors)
        # ['root:{} > tags:[] > #1 > Expected String but got 1']
    """
    interpretations: list[str] = []
    if not isinstance(errors, Clean):
        _interpret(errors, (), root, False, interpretations)
    return interpretations


def _interpret(
    errors: ErrorNode,
    prefixes: tuple[str, ...],
    name: Any,
    positional: bool,
    interpretations: list[str],
) -> None:
    prefixes = (*prefixes, _format(errors, name, positional))

    match errors:
        case Record(fields=fields):
            for key, value in fields.items():
                if isinstance(value, Clean):
                    continue
                _interpret(value, prefixes, key, False, interpretations)
        case Sequence(items=items):
            for index, value in enumerate(items):
                if isinstance(value, Clean):
                    continue
                _interpret(value, prefixes, index, True, interpretations)
        case Message(text=text):
            interpretations.append(" > ".join((*prefixes, text)))


def _format(errors: ErrorNode, name: Any, positional: bool) -> str:
    """Path segment for one node."""
    if positional:
        name = f"#{name}"
        if isinstance(errors, Message):
            return name

    match errors:
        case Record():
            return f"{name}:{{}}"
        case Sequence():
            return f"{name}:[]"
        case Message():
            return f".{name}"

    return str(name)


def pretty_errors(errors: ErrorNode, indent: int = 2) -> str:
    """
    Serialize an error tree as indented JSON.

    CLEAN positions render as null and messages as their text.
    """
    return json.dumps(_jsonable(errors.to_plain()), indent=indent, ensure_ascii=False)


def _jsonable(plain: Any) -> Any:
    if isinstance(plain, dict):
        return {
            key if isinstance(key, str) else str(key): _jsonable(value)
            for key, value in plain.items()
        }
    if isinstance(plain, list):
        return [_jsonable(item) for item in plain]
    return plain
