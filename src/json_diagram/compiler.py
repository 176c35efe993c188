"""GraphCompiler: wires DocumentParser + GraphBuilder + passes + TextMeasurer.

This is the orchestration layer behind the public API. One ``compile()`` call
runs the whole pipeline synchronously:

    text -> DocumentParser -> GraphBuilder -> compress -> reorder_by_depth
         -> apply_filter

Every stage returns a new ``Graph``; nothing from a previous call is reused
except the measurement cache, which is a pure function of label text.
Parse failures do not raise: the result carries an empty graph and the error
message, and the failure is logged at WARNING. A document nested too deeply
for the later recursive stages is reported the same way.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from json_diagram.cache import MeasurementCache
from json_diagram.config import FilterConfig, GraphConfig
from json_diagram.document.parser import (
    NESTING_TOO_DEEP,
    DocumentParseError,
    DocumentParser,
)
from json_diagram.graph.builder import GraphBuilder
from json_diagram.graph.compressor import compress
from json_diagram.graph.filter import apply_filter
from json_diagram.graph.model import Graph
from json_diagram.graph.reorder import reorder_by_depth
from json_diagram.measure.static import StaticMeasurer
from json_diagram.result import CompileResult

if TYPE_CHECKING:
    from json_diagram.document.nodes import DocumentNode
    from json_diagram.protocols import TextMeasurer

__all__ = ["GraphCompiler"]

logger = logging.getLogger(__name__)


class GraphCompiler:
    """Orchestrator for document-to-graph compilation.

    Two separate ``GraphCompiler`` instances never share measurement cache
    state.

    Example::

        compiler = GraphCompiler()
        result = compiler.compile('{"name": "api", "tags": ["a", "b"]}')
        result.ok                    # True
        len(result.graph.nodes)      # 1  (the short array stays inline)
    """

    def __init__(
        self,
        measurer: TextMeasurer | None = None,
        config: GraphConfig | None = None,
        parser: DocumentParser | None = None,
        max_cache_size: int = 2048,
    ) -> None:
        """Initialise the compiler.

        Args:
            measurer: A TextMeasurer-conformant object. Defaults to
                ``StaticMeasurer()`` when None. Wrapped in a per-instance
                ``MeasurementCache``.
            config: Pipeline settings. Defaults to ``GraphConfig()``.
            parser: Document parser. Defaults to ``DocumentParser()``.
            max_cache_size: Capacity of the measurement LRU cache. This is an
                infrastructure parameter and not part of ``GraphConfig``.
        """
        self._config: GraphConfig = config if config is not None else GraphConfig()
        raw_measurer: Any = measurer if measurer is not None else StaticMeasurer()
        self._measurer = MeasurementCache(raw_measurer, max_size=max_cache_size)
        self._parser = parser if parser is not None else DocumentParser()
        self._builder = GraphBuilder(self._measurer)

    @property
    def config(self) -> GraphConfig:
        return self._config

    @property
    def measurer(self) -> MeasurementCache:
        return self._measurer

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compile(
        self, text: str, filter_config: FilterConfig | None = None
    ) -> CompileResult:
        """Compile document text into a graph.

        Args:
            text: Relaxed JSON document text.
            filter_config: Optional path filter. Inactive filters (empty or
                invalid pattern) leave the graph unchanged.

        Returns:
            A ``CompileResult``. On parse failure, or when the document is
            nested too deeply to compile, ``graph`` is empty and ``error``
            holds the message.
        """
        t0 = time.perf_counter()
        try:
            document = self._parser.parse(text)
        except DocumentParseError as exc:
            logger.warning("Could not parse document: %s", exc)
            return self._failed(str(exc), t0)

        try:
            graph = self.compile_document(document, filter_config)
        except RecursionError:
            # Parsed, but too deep for the recursive value copies and rendering.
            logger.warning("Could not compile document: %s", NESTING_TOO_DEEP)
            return self._failed(NESTING_TOO_DEEP, t0)

        elapsed = (time.perf_counter() - t0) * 1000.0
        logger.debug(
            "Compiled %d nodes, %d edges in %.2f ms",
            len(graph.nodes),
            len(graph.edges),
            elapsed,
        )
        return CompileResult(graph=graph, error=None, computation_time_ms=elapsed)

    def _failed(self, message: str, t0: float) -> CompileResult:
        return CompileResult(
            graph=Graph(),
            error=message,
            computation_time_ms=(time.perf_counter() - t0) * 1000.0,
        )

    def compile_document(
        self, document: DocumentNode, filter_config: FilterConfig | None = None
    ) -> Graph:
        """Run build, compress, reorder and filter over an already-parsed CST."""
        graph = self._builder.build(document)
        if self._config.compress:
            graph = compress(graph, self._measurer, self._config.min_group_width)
        if self._config.reorder:
            graph = reorder_by_depth(graph)
        if filter_config is not None and filter_config.is_active:
            graph = apply_filter(
                graph, filter_config.matcher(), filter_config.mode, self._measurer
            )
        return graph
