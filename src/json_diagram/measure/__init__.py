"""Measurement backends.

All measurers satisfy the ``TextMeasurer`` Protocol structurally. The base
install ships ``StaticMeasurer``, a monospace cell model with no font
dependencies.
"""

from json_diagram.measure.static import StaticMeasurer

__all__ = ["StaticMeasurer"]
