"""Depth reorder: present nodes deepest-first to the layout engine.

Construction order is breadth-first; tree layout engines route fewer crossing
edges when deeper nodes come first. The sort is stable, so nodes at equal
depth keep their discovery order, and nodes without a path sort last.
"""

from __future__ import annotations

from json_diagram.graph.model import Graph, Node
from json_diagram.graph.paths import path_depth

__all__ = ["reorder_by_depth"]


def _depth_key(node: Node) -> tuple[int, int]:
    if node.path is None:
        return (1, 0)
    return (0, -path_depth(node.path))


def reorder_by_depth(graph: Graph) -> Graph:
    """Return a copy of ``graph`` with nodes sorted by descending path depth."""
    return Graph(nodes=sorted(graph.nodes, key=_depth_key), edges=list(graph.edges))
