"""Rendering of node text into the label string that gets measured.

Scalars render as JSON literals except strings, which render bare. Inline
structural values render as one-line JSON. Group rows render one
``key: value`` line each.
"""

from __future__ import annotations

import json
from typing import Any

from json_diagram.graph.model import Collapsed, NodeText, Row

__all__ = ["format_value", "render_rows", "render_text", "summarize"]


def format_value(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, Collapsed):
        return str(value)
    return json.dumps(value, ensure_ascii=False)


def summarize(value: Any) -> Any:
    """Replace a structural value by its ``Collapsed`` count; scalars pass through."""
    if isinstance(value, dict):
        return Collapsed("object", len(value))
    if isinstance(value, list):
        return Collapsed("array", len(value))
    return value


def render_rows(rows: list[Row]) -> str:
    return "\n".join(f"{key}: {format_value(value)}" for key, value in rows)


def render_text(text: NodeText) -> str:
    if isinstance(text, list):
        return render_rows(text)
    return format_value(text)
