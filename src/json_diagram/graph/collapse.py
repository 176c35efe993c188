"""Subtree collapse/expand over a built graph.

``CollapseState`` records which nodes and edges are hidden and which nodes
were collapsed by the user. It is immutable: every operation returns a new
state, and ``visible()`` derives the graph to hand to the layout engine.

Expanding a node reveals its descendants down to, but not past, any node that
is itself collapsed; the collapsed node becomes visible again and its own
subtree stays hidden.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Collection, Iterable
from dataclasses import dataclass, field

from json_diagram.graph.model import Edge, Graph, Node

__all__ = ["CollapseState", "children_edges", "outgoers"]


def _adjacency(graph: Graph) -> dict[str, list[str]]:
    children: dict[str, list[str]] = {}
    for edge in graph.edges:
        children.setdefault(edge.source, []).append(edge.target)
    return children


def outgoers(
    graph: Graph,
    node_id: str,
    collapsed_parents: Collection[str] = (),
) -> tuple[list[Node], list[str]]:
    """Collect the descendants of ``node_id``.

    Traversal does not descend into nodes listed in ``collapsed_parents``.

    Args:
        graph:             The full graph.
        node_id:           Node whose subtree is walked.
        collapsed_parents: Ids of collapsed nodes that stop the walk.

    Returns:
        ``(descendants, stopped_at)``: descendant nodes in BFS order (the start
        node is included first when it is itself collapsed), and the ids of the
        collapsed nodes the walk reached but did not enter.
    """
    by_id = {node.id: node for node in graph.nodes}
    children = _adjacency(graph)
    found: list[Node] = []
    stopped_at: list[str] = []

    if node_id in collapsed_parents and node_id in by_id:
        found.append(by_id[node_id])

    queue = deque([node_id])
    seen = {node_id}
    while queue:
        current = queue.popleft()
        for child_id in children.get(current, []):
            if child_id in seen or child_id not in by_id:
                continue
            seen.add(child_id)
            if child_id in collapsed_parents:
                stopped_at.append(child_id)
                continue
            found.append(by_id[child_id])
            queue.append(child_id)
    return found, stopped_at


def children_edges(graph: Graph, nodes: Iterable[Node]) -> list[Edge]:
    """Edges that touch any of ``nodes``."""
    ids = {node.id for node in nodes}
    return [edge for edge in graph.edges if edge.source in ids or edge.target in ids]


@dataclass(frozen=True, slots=True)
class CollapseState:
    """Hidden nodes/edges plus the nodes the user collapsed."""

    collapsed_parents: frozenset[str] = field(default_factory=frozenset)
    collapsed_nodes: frozenset[str] = field(default_factory=frozenset)
    collapsed_edges: frozenset[str] = field(default_factory=frozenset)

    @property
    def graph_collapsed(self) -> bool:
        return bool(self.collapsed_nodes)

    def collapse(self, graph: Graph, node_id: str) -> CollapseState:
        """Hide every descendant of ``node_id``."""
        descendants, _ = outgoers(graph, node_id)
        edges = children_edges(graph, descendants)
        return CollapseState(
            collapsed_parents=self.collapsed_parents | {node_id},
            collapsed_nodes=self.collapsed_nodes | {n.id for n in descendants},
            collapsed_edges=self.collapsed_edges | {e.id for e in edges},
        )

    def expand(self, graph: Graph, node_id: str) -> CollapseState:
        """Reveal the subtree of ``node_id`` down to nested collapsed nodes."""
        parents = self.collapsed_parents
        descendants, stopped_at = outgoers(graph, node_id, parents)
        edges = children_edges(graph, descendants)

        revealed = {n.id for n in descendants} | set(stopped_at)
        return CollapseState(
            collapsed_parents=parents - {node_id},
            collapsed_nodes=self.collapsed_nodes - revealed,
            collapsed_edges=self.collapsed_edges - {e.id for e in edges},
        )

    @classmethod
    def collapse_all(cls, graph: Graph) -> CollapseState:
        """Collapse the graph down to the roots and their direct children."""
        targets = graph.incoming()
        roots = {node.id for node in graph.nodes if node.id not in targets}
        second = {edge.target for edge in graph.edges if edge.source in roots}
        return cls(
            collapsed_parents=frozenset(
                node.id
                for node in graph.nodes
                if node.id not in roots and node.data.is_parent
            ),
            collapsed_nodes=frozenset(
                node.id
                for node in graph.nodes
                if node.id not in roots and node.id not in second
            ),
            collapsed_edges=frozenset(
                edge.id for edge in graph.edges if edge.source not in roots
            ),
        )

    @classmethod
    def expand_all(cls) -> CollapseState:
        return cls()

    def visible(self, graph: Graph) -> Graph:
        """The graph with hidden nodes and edges removed."""
        return Graph(
            nodes=[n for n in graph.nodes if n.id not in self.collapsed_nodes],
            edges=[e for e in graph.edges if e.id not in self.collapsed_edges],
        )
