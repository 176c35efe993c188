"""Graph data model: rendered nodes, structural edges, and the graph container.

A ``Graph`` built from a document is a tree: every node except the root has
exactly one incoming ``Edge``. Node ids are decimal strings assigned from a
counter in discovery order and are never reused within one build, so they stay
stable through compression, reordering and filtering.

Group nodes carry their inline rows as ``list[tuple[key, value]]``; a value is
a scalar, a plain nested ``dict``/``list`` shown inline, or a ``Collapsed``
summary standing in for a nested value that has its own pointer node.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

__all__ = [
    "ROOT_PATH",
    "Collapsed",
    "Edge",
    "Graph",
    "Node",
    "NodeData",
    "NodeKind",
    "NodeText",
    "Row",
]

ROOT_PATH = "{Root}"


class NodeKind(StrEnum):
    """The four kinds of rendered box.

    - GROUP     -> "group"     : an object shown as key/value rows
    - POINTER   -> "pointer"   : a key whose value is an object or array
    - LEAF      -> "leaf"      : a scalar array element
    - ROOT_LEAF -> "root-leaf" : a scalar document
    """

    GROUP = "group"
    POINTER = "pointer"
    LEAF = "leaf"
    ROOT_LEAF = "root-leaf"


@dataclass(frozen=True, slots=True)
class Collapsed:
    """Summary of a nested value: ``{object: N}`` or ``{array: N}``."""

    kind: str
    count: int

    def __str__(self) -> str:
        return f"{{{self.kind}: {self.count}}}"

    def to_dict(self) -> dict[str, int]:
        return {self.kind: self.count}


Row = tuple[str, Any]
NodeText = str | int | float | bool | None | list[Row]


@dataclass(slots=True)
class NodeData:
    """Renderer hints attached to every node.

    Attributes:
        type:        Value type: "object", "array", "string", "number",
                     "boolean" or "null".
        child_count: Immediate structural children (pointer nodes only).
        is_parent:   True for pointer nodes.
        is_empty:    True for group nodes of an empty object.
    """

    type: str
    child_count: int = 0
    is_parent: bool = False
    is_empty: bool = False


@dataclass(slots=True)
class Node:
    """A rendered box."""

    id: str
    kind: NodeKind
    text: NodeText
    path: str | None
    data: NodeData
    width: float = 0.0
    height: float = 0.0

    @property
    def rows(self) -> list[Row]:
        """Inline rows of a group node; empty for every other kind."""
        return self.text if isinstance(self.text, list) else []

    def to_dict(self) -> dict[str, Any]:
        if isinstance(self.text, list):
            text: Any = [
                [key, value.to_dict() if isinstance(value, Collapsed) else value]
                for key, value in self.text
            ]
        else:
            text = self.text
        return {
            "id": self.id,
            "text": text,
            "path": self.path,
            "width": self.width,
            "height": self.height,
            "data": {
                "type": self.data.type,
                "childrenCount": self.data.child_count,
                "isParent": self.data.is_parent,
                "isEmpty": self.data.is_empty,
            },
        }


@dataclass(frozen=True, slots=True)
class Edge:
    """Directed structural link ``source -> target`` between node ids."""

    source: str
    target: str

    @property
    def id(self) -> str:
        return f"e{self.source}-{self.target}"

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "from": self.source, "to": self.target}


@dataclass(slots=True)
class Graph:
    """Nodes and edges handed to the layout engine."""

    nodes: list[Node] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.nodes)

    def node(self, node_id: str) -> Node | None:
        return next((n for n in self.nodes if n.id == node_id), None)

    def incoming(self) -> set[str]:
        """Ids of nodes that are the target of at least one edge."""
        return {edge.target for edge in self.edges}

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": [node.to_dict() for node in self.nodes],
            "edges": [edge.to_dict() for edge in self.edges],
        }
