"""MeasurementCache: LRU-backed caching proxy for any TextMeasurer.

Wraps any TextMeasurer-conformant object and memoises ``measure()`` results
keyed by ``(label, has_parent)``. The compressor measures the same one-row
labels repeatedly across sibling objects, so most calls are served from
memory. LRU eviction is silent when ``max_size`` is exceeded.

Each ``MeasurementCache`` instance owns its own ``LRUCache``; two instances
never share entries.

Example::

    from json_diagram.cache import MeasurementCache
    from json_diagram.measure import StaticMeasurer

    cache = MeasurementCache(StaticMeasurer(), max_size=1024)
    cache.measure("port: 8080", has_parent=True)   # hits the measurer
    cache.measure("port: 8080", has_parent=True)   # served from memory
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from cachetools import LRUCache

from json_diagram.protocols import Size

if TYPE_CHECKING:
    from json_diagram.protocols import TextMeasurer

__all__ = ["MeasurementCache"]


class MeasurementCache:
    """LRU-backed caching proxy around any TextMeasurer.

    Satisfies the ``TextMeasurer`` Protocol structurally.

    Args:
        measurer: Any object satisfying the ``TextMeasurer`` Protocol.
        max_size: Maximum number of cached labels. Defaults to 2048.
    """

    def __init__(self, measurer: TextMeasurer, max_size: int = 2048) -> None:
        self._measurer: Any = measurer
        self._cache: LRUCache[tuple[str, bool], Size] = LRUCache(maxsize=max_size)
        self.hits = 0
        self.misses = 0

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    @property
    def measurer(self) -> Any:
        """The wrapped measurer."""
        return self._measurer

    # ------------------------------------------------------------------
    # TextMeasurer Protocol surface
    # ------------------------------------------------------------------

    def measure(self, label: str, has_parent: bool) -> Size:
        key = (label, has_parent)
        cached = self._cache.get(key)
        if cached is not None:
            self.hits += 1
            return cached
        self.misses += 1
        width, height = self._measurer.measure(label, has_parent)
        size = Size(float(width), float(height))
        self._cache[key] = size
        return size

    def clear(self) -> None:
        self._cache.clear()
        self.hits = 0
        self.misses = 0
