"""json-diagram - compile JSON documents into node/edge diagrams."""

from __future__ import annotations

from json_diagram.api import build_graph, compile_text, parse
from json_diagram.compiler import GraphCompiler
from json_diagram.config import FilterConfig, GraphConfig
from json_diagram.graph.model import Collapsed, Edge, Graph, Node, NodeKind
from json_diagram.result import CompileResult

__version__: str = "0.1.0"
__all__: list[str] = [
    "Collapsed",
    "CompileResult",
    "Edge",
    "FilterConfig",
    "Graph",
    "GraphCompiler",
    "GraphConfig",
    "Node",
    "NodeKind",
    "build_graph",
    "compile_text",
    "parse",
]
