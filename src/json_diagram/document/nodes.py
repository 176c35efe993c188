"""Concrete syntax tree for parsed JSON documents.

The CST is a closed set of four node classes. ``DocumentNode`` is the union of
the three value kinds; ``PropertyNode`` only ever appears inside an
``ObjectNode``. Consumers dispatch with ``match`` over these classes.

Object properties keep document order and duplicate keys, which a plain
``dict`` would lose.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

__all__ = [
    "ArrayNode",
    "DocumentNode",
    "ObjectNode",
    "PropertyNode",
    "ScalarNode",
    "ScalarValue",
]

ScalarValue = str | int | float | bool | None


@dataclass(slots=True)
class ScalarNode:
    """A string, number, boolean or null literal."""

    value: ScalarValue

    @property
    def type(self) -> str:
        # bool before int/float: bool subclasses int
        if isinstance(self.value, bool):
            return "boolean"
        if self.value is None:
            return "null"
        if isinstance(self.value, str):
            return "string"
        return "number"

    def to_python(self) -> ScalarValue:
        return self.value


@dataclass(slots=True)
class PropertyNode:
    """A ``key: value`` member of an object."""

    key: str
    value: DocumentNode


@dataclass(slots=True)
class ObjectNode:
    """A JSON object with its properties in document order."""

    properties: list[PropertyNode] = field(default_factory=list)

    @property
    def type(self) -> str:
        return "object"

    def __len__(self) -> int:
        return len(self.properties)

    def to_python(self) -> dict[str, Any]:
        """Return a fresh plain ``dict``; duplicate keys resolve to the last one."""
        return {prop.key: prop.value.to_python() for prop in self.properties}


@dataclass(slots=True)
class ArrayNode:
    """A JSON array."""

    items: list[DocumentNode] = field(default_factory=list)

    @property
    def type(self) -> str:
        return "array"

    def __len__(self) -> int:
        return len(self.items)

    def to_python(self) -> list[Any]:
        return [item.to_python() for item in self.items]


DocumentNode = ObjectNode | ArrayNode | ScalarNode
