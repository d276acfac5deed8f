"""
Error tree types for hash_schema validation.

A validation result mirrors the shape of the validated data: CLEAN where
nothing is wrong, a Message at each failing leaf, a Sequence for lists and
a Record for mappings.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Union


@dataclass(frozen=True, slots=True)
class Clean:
    """No violation at this position."""

    def is_empty(self) -> bool:
        return True

    def to_plain(self) -> None:
        return None


CLEAN = Clean()


@dataclass(frozen=True, slots=True)
class Message:
    """A leaf violation."""

    text: str

    def is_empty(self) -> bool:
        return False

    def to_plain(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class Sequence:
    """One error node per element of the validated list."""

    items: tuple[ErrorNode, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[ErrorNode]:
        return iter(self.items)

    def __getitem__(self, index: int) -> ErrorNode:
        return self.items[index]

    def is_empty(self) -> bool:
        return all(item.is_empty() for item in self.items)

    def to_plain(self) -> list[Any]:
        return [item.to_plain() for item in self.items]


@dataclass(frozen=True, slots=True)
class Record:
    """One error node per schema field, in declaration order."""

    fields: Mapping[Any, ErrorNode]

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def __len__(self) -> int:
        return len(self.fields)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.fields)

    def __getitem__(self, key: Any) -> ErrorNode:
        return self.fields[key]

    def is_empty(self) -> bool:
        return all(value.is_empty() for value in self.fields.values())

    def to_plain(self) -> dict[Any, Any]:
        return {key: value.to_plain() for key, value in self.fields.items()}


# Type aliases
ErrorNode = Union[Clean, Message, Sequence, Record]
