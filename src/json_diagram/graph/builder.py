"""GraphBuilder: converts a document CST into a raw node/edge tree.

Traversal is breadth-first over a work queue of ``(parent_id, path, node)``
entries seeded with ``(-1, "{Root}", root)``. Dispatch is an exhaustive
``match`` over the CST classes:

- ObjectNode: one GROUP node whose rows are every property in document order.
  Scalar properties keep their value; structural properties keep a fresh deep
  copy of the nested value for the compressor to decide on. Each structural
  property also gets a POINTER node (edge group -> pointer) whose value is
  queued under the pointer's path.
- ArrayNode:  no node of its own. Elements are queued with the same parent
  and the index appended to the path, so they splice into the parent's path.
- ScalarNode: a LEAF node (ROOT_LEAF when the whole document is a scalar).

A root-level array is treated as a property named ``{Root}``: it gets a
POINTER node at ``{Root}`` so that the result is a single tree.

Node ids are the length of the node list at the time of the push, so before
any reordering id order equals BFS discovery order.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

from json_diagram.document.nodes import (
    ArrayNode,
    DocumentNode,
    ObjectNode,
    ScalarNode,
)
from json_diagram.graph.labels import render_rows, render_text, summarize
from json_diagram.graph.model import (
    ROOT_PATH,
    Edge,
    Graph,
    Node,
    NodeData,
    NodeKind,
)
from json_diagram.measure.static import StaticMeasurer

if TYPE_CHECKING:
    from json_diagram.protocols import TextMeasurer

__all__ = ["GraphBuilder"]

_NO_PARENT = -1


class GraphBuilder:
    """Builds a ``Graph`` from a ``DocumentNode`` tree.

    Args:
        measurer: Sizes each node from its rendered label. Defaults to
            ``StaticMeasurer()``.

    Example::

        builder = GraphBuilder()
        graph = builder.build(DocumentParser().parse('{"a": {"b": 1}}'))
        [(n.id, n.kind, n.path) for n in graph.nodes]
        # [("0", "group", "{Root}"), ("1", "pointer", "{Root}.a"),
        #  ("2", "group", "{Root}.a")]
    """

    def __init__(self, measurer: TextMeasurer | None = None) -> None:
        self._measurer: TextMeasurer = (
            measurer if measurer is not None else StaticMeasurer()
        )

    def build(self, document: DocumentNode) -> Graph:
        """Convert ``document`` into a tree of nodes and edges.

        Args:
            document: Root of a parsed document.

        Returns:
            A new ``Graph`` with nodes in BFS discovery order.
        """
        graph = Graph()
        queue: deque[tuple[int, str, DocumentNode]] = deque()

        if isinstance(document, ArrayNode):
            self._add_pointer(
                graph, queue, _NO_PARENT, ROOT_PATH, ROOT_PATH, document
            )
        else:
            queue.append((_NO_PARENT, ROOT_PATH, document))

        while queue:
            parent_id, path, node = queue.popleft()
            match node:
                case ObjectNode():
                    self._add_group(graph, queue, parent_id, path, node)
                case ArrayNode():
                    for index, item in enumerate(node.items):
                        queue.append((parent_id, f"{path}.{index}", item))
                case ScalarNode():
                    self._add_leaf(graph, parent_id, path, node)

        return graph

    # ------------------------------------------------------------------
    # Node emitters
    # ------------------------------------------------------------------

    def _push(self, graph: Graph, parent_id: int, node: Node) -> int:
        node_id = int(node.id)
        graph.nodes.append(node)
        if parent_id != _NO_PARENT:
            graph.edges.append(Edge(str(parent_id), node.id))
        return node_id

    def _add_group(
        self,
        graph: Graph,
        queue: deque[tuple[int, str, DocumentNode]],
        parent_id: int,
        path: str,
        obj: ObjectNode,
    ) -> None:
        rows = [(prop.key, prop.value.to_python()) for prop in obj.properties]
        has_parent = parent_id != _NO_PARENT
        # Sized with nested values summarised; the compressor sets the final width.
        size = self._measurer.measure(
            render_rows([(key, summarize(value)) for key, value in rows]), has_parent
        )
        group_id = self._push(
            graph,
            parent_id,
            Node(
                id=str(len(graph.nodes)),
                kind=NodeKind.GROUP,
                text=rows,
                path=path,
                data=NodeData(type="object", is_empty=not obj.properties),
                width=size.width,
                height=size.height,
            ),
        )
        for prop in obj.properties:
            if isinstance(prop.value, (ObjectNode, ArrayNode)):
                self._add_pointer(
                    graph, queue, group_id, f"{path}.{prop.key}", prop.key, prop.value
                )

    def _add_pointer(
        self,
        graph: Graph,
        queue: deque[tuple[int, str, DocumentNode]],
        parent_id: int,
        path: str,
        key: str,
        value: ObjectNode | ArrayNode,
    ) -> None:
        size = self._measurer.measure(key, parent_id != _NO_PARENT)
        pointer_id = self._push(
            graph,
            parent_id,
            Node(
                id=str(len(graph.nodes)),
                kind=NodeKind.POINTER,
                text=key,
                path=path,
                data=NodeData(type=value.type, child_count=len(value), is_parent=True),
                width=size.width,
                height=size.height,
            ),
        )
        queue.append((pointer_id, path, value))

    def _add_leaf(
        self, graph: Graph, parent_id: int, path: str, scalar: ScalarNode
    ) -> None:
        has_parent = parent_id != _NO_PARENT
        size = self._measurer.measure(render_text(scalar.value), has_parent)
        self._push(
            graph,
            parent_id,
            Node(
                id=str(len(graph.nodes)),
                kind=NodeKind.LEAF if has_parent else NodeKind.ROOT_LEAF,
                text=scalar.value,
                path=path,
                data=NodeData(type=scalar.type),
                width=size.width,
                height=size.height,
            ),
        )
