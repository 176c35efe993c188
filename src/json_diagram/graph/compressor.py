"""Node compression: bound group-node width by collapsing wide nested rows.

For each GROUP node the width budget is the width of the node with every
nested value summarised as ``{object: N}`` / ``{array: N}``, floored at
``min_width``. Each nested row is then judged alone:

- if the row, rendered with its full value, is wider than the budget, the
  row shows the summary and the pointer node for that key stays the place to
  see the content;
- otherwise the full value stays inline and the row's path is recorded for
  removal, because its pointer subtree now duplicates what the row shows.

Once every group has been judged, nodes at or below a removed path are
dropped together with every edge that touches them. The decision is made
once per row; an inline value is never re-compressed internally.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from json_diagram.graph.labels import render_rows, summarize
from json_diagram.graph.model import Graph, Node, NodeKind, Row
from json_diagram.graph.paths import is_under

if TYPE_CHECKING:
    from json_diagram.protocols import TextMeasurer

__all__ = ["MIN_GROUP_WIDTH", "compress", "compress_rows"]

MIN_GROUP_WIDTH = 200.0


def compress_rows(
    rows: list[Row],
    path: str,
    has_parent: bool,
    measurer: TextMeasurer,
    min_width: float = MIN_GROUP_WIDTH,
) -> tuple[list[Row], list[str], float]:
    """Decide inline-vs-summary for each nested row of one group node.

    Args:
        rows:       The group's ``(key, value)`` rows.
        path:       The group's path; removal paths are ``path + "." + key``.
        has_parent: Whether the group has an incoming edge.
        measurer:   Measurement collaborator.
        min_width:  Hard minimum box width.

    Returns:
        ``(new_rows, removed_paths, budget_width)``.
    """
    all_compressed = [(key, summarize(value)) for key, value in rows]
    budget = max(
        min_width, measurer.measure(render_rows(all_compressed), has_parent).width
    )

    new_rows: list[Row] = []
    removed: list[str] = []
    for (key, value), (_, summary) in zip(rows, all_compressed, strict=True):
        if summary is value:
            new_rows.append((key, value))
            continue
        alone = measurer.measure(render_rows([(key, value)]), has_parent).width
        if alone > budget:
            new_rows.append((key, summary))
        else:
            new_rows.append((key, value))
            removed.append(f"{path}.{key}")
    return new_rows, removed, budget


def compress(
    graph: Graph,
    measurer: TextMeasurer,
    min_width: float = MIN_GROUP_WIDTH,
) -> Graph:
    """Return a compressed copy of ``graph``; the input is left untouched.

    Args:
        graph:     A graph produced by ``GraphBuilder``.
        measurer:  Measurement collaborator.
        min_width: Hard minimum width of every group node.

    Returns:
        A new ``Graph``: every group node has width ``>= min_width`` and no
        node remains at or below a path that was inlined.
    """
    has_parent = graph.incoming()
    nodes: list[Node] = []
    removed: set[str] = set()

    for node in graph.nodes:
        if node.kind is not NodeKind.GROUP or node.path is None:
            nodes.append(node)
            continue
        rows, inlined, width = compress_rows(
            node.rows, node.path, node.id in has_parent, measurer, min_width
        )
        removed.update(inlined)
        nodes.append(replace(node, text=rows, width=width))

    kept = [node for node in nodes if not is_under(node.path, removed)]
    kept_ids = {node.id for node in kept}
    edges = [
        edge
        for edge in graph.edges
        if edge.source in kept_ids and edge.target in kept_ids
    ]
    return Graph(nodes=kept, edges=edges)
