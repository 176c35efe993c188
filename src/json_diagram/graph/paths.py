"""Dotted-path helpers shared by the compressor, reorder and filter passes.

Paths are ``{Root}`` followed by one ``.``-separated segment per object key or
array index traversed. Keys and indices share the segment namespace, so a key
named ``"0"`` and array index ``0`` produce the same path.
"""

from __future__ import annotations

from collections.abc import Collection

from json_diagram.graph.model import ROOT_PATH

__all__ = [
    "is_under",
    "normalize_path",
    "path_depth",
    "path_prefixes",
]

_ROOT_PREFIX = f"{ROOT_PATH}."


def normalize_path(path: str) -> str:
    """Strip the leading ``{Root}.``; ``{Root}`` itself is returned unchanged."""
    if path.startswith(_ROOT_PREFIX):
        return path[len(_ROOT_PREFIX) :]
    return path


def path_depth(path: str) -> int:
    return len(path.split("."))


def path_prefixes(path: str) -> list[str]:
    """Every dot-segment prefix of ``path``, shortest first, ``path`` included.

    ``"{Root}.a.b"`` -> ``["{Root}", "{Root}.a", "{Root}.a.b"]``
    """
    segments = path.split(".")
    return [".".join(segments[: i + 1]) for i in range(len(segments))]


def is_under(path: str | None, prefixes: Collection[str]) -> bool:
    """True when ``path`` equals one of ``prefixes`` or lies below it."""
    if path is None or not prefixes:
        return False
    return any(p in prefixes for p in path_prefixes(path))
