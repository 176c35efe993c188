"""Graph subpackage: the document-to-diagram transforms.

Re-exports:
- Graph, Node, Edge, NodeData, NodeKind, Collapsed: the data model
- GraphBuilder: CST -> raw tree graph
- compress: inline narrow nested values, drop redundant subtrees
- reorder_by_depth: deepest-first node order
- apply_filter, FilterMode, PathMatcher: path whitelist/blacklist
- CollapseState: subtree collapse/expand
"""

from json_diagram.graph.builder import GraphBuilder
from json_diagram.graph.collapse import CollapseState, children_edges, outgoers
from json_diagram.graph.compressor import MIN_GROUP_WIDTH, compress, compress_rows
from json_diagram.graph.filter import FilterMode, PathMatcher, apply_filter
from json_diagram.graph.model import (
    ROOT_PATH,
    Collapsed,
    Edge,
    Graph,
    Node,
    NodeData,
    NodeKind,
)
from json_diagram.graph.reorder import reorder_by_depth

__all__ = [
    "MIN_GROUP_WIDTH",
    "ROOT_PATH",
    "Collapsed",
    "CollapseState",
    "Edge",
    "FilterMode",
    "Graph",
    "GraphBuilder",
    "Node",
    "NodeData",
    "NodeKind",
    "PathMatcher",
    "apply_filter",
    "children_edges",
    "compress",
    "compress_rows",
    "outgoers",
    "reorder_by_depth",
]
