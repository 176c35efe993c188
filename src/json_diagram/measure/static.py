"""StaticMeasurer: font-free label sizing on a monospace cell grid.

Each character occupies one cell, East Asian wide and fullwidth characters
occupy two. Width is the widest line in cells times ``char_width`` plus
horizontal padding; height is the line count times ``line_height`` plus
vertical padding. Boxes with an incoming edge get ``connector_width`` extra
room for the connector handle.
"""

from __future__ import annotations

import unicodedata

import numpy as np

from json_diagram.protocols import Size

_WIDE = frozenset({"W", "F"})


def _cells(line: str) -> int:
    if line.isascii():
        return len(line)
    return sum(2 if unicodedata.east_asian_width(ch) in _WIDE else 1 for ch in line)


class StaticMeasurer:
    """Deterministic ``TextMeasurer`` that needs no font or rendering backend.

    Satisfies the ``TextMeasurer`` Protocol structurally.

    Example::

        measurer = StaticMeasurer()
        measurer.measure("hello", has_parent=False)   # Size(width=64.0, height=30.0)
        measurer.measure("a: 1\\nb: 2", has_parent=True)   # Size(width=72.0, height=48.0)
    """

    def __init__(
        self,
        char_width: float = 8.0,
        line_height: float = 18.0,
        padding_x: float = 24.0,
        padding_y: float = 12.0,
        connector_width: float = 16.0,
    ) -> None:
        if char_width <= 0 or line_height <= 0:
            msg = "char_width and line_height must be positive"
            raise ValueError(msg)
        self.char_width = char_width
        self.line_height = line_height
        self.padding_x = padding_x
        self.padding_y = padding_y
        self.connector_width = connector_width

    def measure(self, label: str, has_parent: bool) -> Size:
        """Return the box size for ``label``.

        Args:
            label:      Rendered label; rows separated by ``"\\n"``.
            has_parent: Whether the box has an incoming edge.

        Returns:
            ``Size(width, height)`` in pixels.
        """
        cells = np.fromiter((_cells(line) for line in label.split("\n")), dtype=np.int64)
        width = float(cells.max()) * self.char_width + self.padding_x
        if has_parent:
            width += self.connector_width
        height = float(cells.size) * self.line_height + self.padding_y
        return Size(width, height)
