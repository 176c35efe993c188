"""TextMeasurer Protocol: the Measurement extension point.

Any object with a conformant ``measure`` method can size nodes; no base class
is required. Implementations must be pure functions of their arguments, since
results are cached by label text.

Example::

    from json_diagram.protocols import Size, TextMeasurer

    class FixedMeasurer:
        def measure(self, label: str, has_parent: bool) -> Size:
            return Size(120.0, 40.0)

    assert isinstance(FixedMeasurer(), TextMeasurer)
"""

from __future__ import annotations

from typing import NamedTuple, Protocol, runtime_checkable

__all__ = ["Size", "TextMeasurer"]


class Size(NamedTuple):
    """Pixel dimensions of a rendered label."""

    width: float
    height: float


@runtime_checkable
class TextMeasurer(Protocol):
    """Structural protocol for label measurement.

    ``measure`` receives the rendered label (rows joined by newlines) and
    whether the box has an incoming edge, and returns its ``Size``.
    """

    def measure(self, label: str, has_parent: bool) -> Size: ...
