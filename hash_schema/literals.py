"""
Rendering of data values inside error messages.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from .void import VOID

# Containers nested deeper than this render as [...] or {...}
MAX_DEPTH = 32


def inspect_value(value: Any) -> str:
    """
    Render a value the way it reads in JSON-like data.

    Examples:
        inspect_value("a")          # '"a"'
        inspect_value(True)         # 'true'
        inspect_value([1, None])    # '[1, null]'
        inspect_value(VOID)         # 'Nothing'
    """
    return _inspect(value, set(), 0)


def _inspect(value: Any, seen: set[int], depth: int) -> str:
    if value is VOID:
        return "Nothing"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)

    if isinstance(value, (list, tuple)):
        if id(value) in seen or depth >= MAX_DEPTH:
            return "[...]"
        seen.add(id(value))
        try:
            items = (_inspect(item, seen, depth + 1) for item in value)
            return "[" + ", ".join(items) + "]"
        finally:
            seen.discard(id(value))

    if isinstance(value, Mapping):
        if id(value) in seen or depth >= MAX_DEPTH:
            return "{...}"
        seen.add(id(value))
        try:
            pairs = (
                f"{_inspect(key, seen, depth + 1)}: {_inspect(item, seen, depth + 1)}"
                for key, item in value.items()
            )
            return "{" + ", ".join(pairs) + "}"
        finally:
            seen.discard(id(value))

    return repr(value)


def join_alternatives(names: list[str]) -> str:
    """Join names as `a, b or c`."""
    *head, last = names
    if not head:
        return last
    return ", ".join(head) + f" or {last}"


def expect(wanted: str, unwanted: Any) -> str:
    return f"Expected {wanted} but got {inspect_value(unwanted)}"


def unexpected(key: Any) -> str:
    return f"Unexpected key: {inspect_value(str(key))}"


def same_value(expected: Any, actual: Any) -> bool:
    """
    Value equality for literal comparisons.

    Booleans only match booleans, so `1` is not accepted where `True` is
    declared (and the other way around), also inside lists, tuples and
    mappings. A comparison that raises counts as a mismatch.
    """
    return _same(expected, actual, 0)


def _same(expected: Any, actual: Any, depth: int) -> bool:
    if isinstance(expected, bool) or isinstance(actual, bool):
        return type(expected) is type(actual) and expected == actual

    if depth < MAX_DEPTH:
        if isinstance(expected, list) and isinstance(actual, list) or (
            isinstance(expected, tuple) and isinstance(actual, tuple)
        ):
            return len(expected) == len(actual) and all(
                _same(e, a, depth + 1) for e, a in zip(expected, actual)
            )
        if isinstance(expected, Mapping) and isinstance(actual, Mapping):
            return expected.keys() == actual.keys() and all(
                _same(item, actual[key], depth + 1) for key, item in expected.items()
            )

    try:
        return bool(expected == actual)
    except Exception:
        return False
