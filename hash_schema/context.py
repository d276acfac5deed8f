"""
Ambient validation settings, scoped with `validation_context()`.
"""

from contextlib import contextmanager
from contextvars import ContextVar

# Strictness used by Hash schemas that leave `strict=None`
_default_strict: ContextVar[bool] = ContextVar("default_strict", default=False)


def is_strict() -> bool:
    """Ambient strictness for the current thread or task."""
    return _default_strict.get()


def resolve_strict(explicit: bool | None) -> bool:
    """An explicit `strict=` wins; `None` falls back to the ambient setting."""
    if explicit is None:
        return is_strict()
    return explicit


@contextmanager
def validation_context(*, strict: bool = False):
    """
    Scope the default strictness of Hash schemas.

    Only hashes built with `strict=None` follow the context, and they read it
    when they validate, not when they are built:

        schema = Hash(x=Number())
        schema.interpret({"x": 0, "y": 1})      # []

        with validation_context(strict=True):
            schema.interpret({"x": 0, "y": 1})  # ['root:{} > .y > Unexpected key: "y"']

    Contexts nest, and the previous setting comes back on exit, even when the
    block raises.
    """
    token = _default_strict.set(strict)
    try:
        yield
    finally:
        _default_strict.reset(token)
