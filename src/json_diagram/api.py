"""Public API functions for json-diagram.

Each call creates a fresh GraphCompiler so no state carries over between
calls.
"""

from __future__ import annotations

from typing import Any

from json_diagram.compiler import GraphCompiler
from json_diagram.config import FilterConfig, GraphConfig
from json_diagram.document.parser import to_document
from json_diagram.graph.model import Graph
from json_diagram.result import CompileResult

__all__ = ["build_graph", "compile_text", "parse"]


def parse(
    document_text: str,
    filter_config: FilterConfig | None = None,
    config: GraphConfig | None = None,
) -> Graph:
    """Compile document text into a graph, returning an empty graph on failure.

    Args:
        document_text: Relaxed JSON text (comments and trailing commas allowed).
        filter_config: Optional path filter.
        config:        Pipeline settings. Defaults to ``GraphConfig()``.

    Returns:
        The compiled ``Graph``; ``Graph()`` when the text does not parse.
    """
    return compile_text(document_text, filter_config, config).graph


def compile_text(
    document_text: str,
    filter_config: FilterConfig | None = None,
    config: GraphConfig | None = None,
) -> CompileResult:
    """Like ``parse`` but also reports the parse error and timing."""
    return GraphCompiler(config=config).compile(document_text, filter_config)


def build_graph(
    value: Any,
    filter_config: FilterConfig | None = None,
    config: GraphConfig | None = None,
) -> Graph:
    """Compile an already-decoded Python JSON value.

    Raises:
        TypeError: If ``value`` contains a non-JSON type.
    """
    return GraphCompiler(config=config).compile_document(
        to_document(value), filter_config
    )
