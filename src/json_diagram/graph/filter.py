"""Path filter engine: regex whitelist/blacklist over dotted paths.

Both a node's path and each group row's derived path (``node.path + "." +
key``) are tested. Paths are normalized before matching: the leading
``{Root}.`` is stripped and ``{Root}`` itself always matches.

Whitelist keeps a node when its path matches, when one of its rows matches,
or when it is a dot-segment ancestor of any match, so every survivor stays
connected to the root. Blacklist is a plain per-node, per-row exclusion with
no ancestor closure; the root is never excluded.

Surviving group nodes keep only the rows that pass the same test and are
re-measured when rows were dropped; only the width is recomputed and the
height is left as built. The input graph is never modified.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import replace
from enum import StrEnum
from typing import TYPE_CHECKING

from json_diagram.graph.labels import render_rows
from json_diagram.graph.model import ROOT_PATH, Graph, Node
from json_diagram.graph.paths import normalize_path, path_prefixes

if TYPE_CHECKING:
    from json_diagram.protocols import TextMeasurer

__all__ = ["FilterMode", "PathMatcher", "PathPredicate", "apply_filter"]

PathPredicate = Callable[[str], bool]


class FilterMode(StrEnum):
    """Whether matching paths are kept or removed."""

    WHITELIST = "whitelist"
    BLACKLIST = "blacklist"


class PathMatcher:
    """Regex predicate over normalized paths.

    The pattern is searched for anywhere in the path, not anchored.

    Example::

        matcher = PathMatcher(r"config\\.port")
        matcher("{Root}.config.port")   # True
        matcher("{Root}.config")        # False
        matcher("{Root}")               # True
    """

    def __init__(self, pattern: str | re.Pattern[str]) -> None:
        self.regex = re.compile(pattern)

    def __call__(self, path: str) -> bool:
        if path == ROOT_PATH:
            return True
        return self.regex.search(normalize_path(path)) is not None

    def __repr__(self) -> str:
        return f"PathMatcher({self.regex.pattern!r})"


def _whitelist_paths(graph: Graph, predicate: PathPredicate) -> set[str]:
    retained = {ROOT_PATH}
    for node in graph.nodes:
        if node.path is None:
            continue
        if predicate(node.path):
            retained.update(path_prefixes(node.path))
        for key, _ in node.rows:
            row_path = f"{node.path}.{key}"
            if predicate(row_path):
                retained.update(path_prefixes(row_path))
    return retained


def apply_filter(
    graph: Graph,
    predicate: PathPredicate | None,
    mode: FilterMode,
    measurer: TextMeasurer,
) -> Graph:
    """Return the part of ``graph`` selected by ``predicate`` under ``mode``.

    Args:
        graph:     Source graph; not modified.
        predicate: Path test, usually a ``PathMatcher``. ``None`` means no
                   active filter and returns ``graph`` itself.
        mode:      ``FilterMode.WHITELIST`` or ``FilterMode.BLACKLIST``.
        measurer:  Used to re-measure group nodes that lost rows.

    Returns:
        A derived ``Graph`` whose edges only reference surviving nodes.
    """
    if predicate is None:
        return graph
    matches: PathPredicate = predicate

    if mode is FilterMode.WHITELIST:
        retained = _whitelist_paths(graph, matches)

        def keep_node(path: str | None) -> bool:
            return path in retained

        def keep_row(row_path: str) -> bool:
            return matches(row_path)

    else:

        def keep_node(path: str | None) -> bool:
            return path is None or path == ROOT_PATH or not matches(path)

        def keep_row(row_path: str) -> bool:
            return not matches(row_path)

    has_parent = graph.incoming()
    nodes: list[Node] = []
    for node in graph.nodes:
        if not keep_node(node.path):
            continue
        if isinstance(node.text, list):
            rows = [row for row in node.text if keep_row(f"{node.path}.{row[0]}")]
            if len(rows) != len(node.text):
                label = render_rows(rows)
                width = measurer.measure(label, node.id in has_parent).width
                node = replace(node, text=rows, width=width)
        nodes.append(node)

    kept_ids = {node.id for node in nodes}
    edges = [
        edge
        for edge in graph.edges
        if edge.source in kept_ids and edge.target in kept_ids
    ]
    return Graph(nodes=nodes, edges=edges)
