"""CompileResult dataclass for compile pipeline output."""

from __future__ import annotations

from dataclasses import dataclass

from json_diagram.graph.model import Graph

__all__ = ["CompileResult"]


@dataclass(frozen=True, slots=True)
class CompileResult:
    """Result of a ``GraphCompiler.compile()`` call.

    Attributes:
        graph: The compiled (and possibly filtered) graph. Empty when the
            document could not be parsed.
        error: The parse error message, or None on success.
        computation_time_ms: Wall-clock duration of the compile in milliseconds.
    """

    graph: Graph
    error: str | None
    computation_time_ms: float

    @property
    def ok(self) -> bool:
        return self.error is None
