"""GraphConfig and FilterConfig: immutable pipeline settings.

GraphConfig holds the layout parameters of the compile pipeline. FilterConfig
is the path-filter surface: a regex pattern plus whitelist/blacklist mode,
with validity and activity derived from the pattern. Both are frozen
dataclasses passed explicitly to the compiler; there is no module-level
"current settings" object.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from cachetools import LRUCache, cached

from json_diagram.graph.compressor import MIN_GROUP_WIDTH
from json_diagram.graph.filter import FilterMode, PathMatcher

__all__ = ["FilterConfig", "GraphConfig"]


@dataclass(frozen=True, slots=True)
class GraphConfig:
    """Immutable configuration for the compile pipeline.

    Attributes:
        min_group_width: Hard minimum width of a group node after compression.
        compress: Run the node compressor. When False, every nested value keeps
            its pointer subtree and group rows keep their full values.
        reorder: Present nodes deepest-first.
    """

    min_group_width: float = MIN_GROUP_WIDTH
    compress: bool = True
    reorder: bool = True

    def __post_init__(self) -> None:
        if self.min_group_width < 0.0:
            msg = f"min_group_width must be >= 0.0, got {self.min_group_width}"
            raise ValueError(msg)


@cached(cache=LRUCache(maxsize=128))
def _compile(pattern: str) -> re.Pattern[str] | str:
    """Compile ``pattern``; on failure return the error message instead."""
    try:
        return re.compile(pattern)
    except re.error as exc:
        return str(exc)


@dataclass(frozen=True, slots=True)
class FilterConfig:
    """Path filter settings.

    The pattern is stripped of surrounding whitespace. An empty pattern is
    valid but inactive; a pattern that does not compile is invalid and
    inactive. An inactive filter leaves the graph unchanged.

    Attributes:
        pattern: Regular expression searched for in normalized paths.
        is_whitelist: Keep matching paths (True) or remove them (False).

    Example::

        config = FilterConfig(pattern="user\\\\.(name|email)")
        config.is_active                               # True
        config.should_include("user.name")             # True
        FilterConfig(pattern="(").error_message        # "missing ), ..."
    """

    pattern: str = ""
    is_whitelist: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "pattern", self.pattern.strip())

    @property
    def _compiled(self) -> re.Pattern[str] | str | None:
        if not self.pattern:
            return None
        return _compile(self.pattern)

    @property
    def is_valid(self) -> bool:
        return not isinstance(self._compiled, str)

    @property
    def is_active(self) -> bool:
        return isinstance(self._compiled, re.Pattern)

    @property
    def error_message(self) -> str:
        compiled = self._compiled
        return compiled if isinstance(compiled, str) else ""

    @property
    def mode(self) -> FilterMode:
        return FilterMode.WHITELIST if self.is_whitelist else FilterMode.BLACKLIST

    def matcher(self) -> PathMatcher | None:
        """The predicate for ``apply_filter``, or None when inactive."""
        compiled = self._compiled
        if isinstance(compiled, re.Pattern):
            return PathMatcher(compiled)
        return None

    def should_include(self, path: str) -> bool:
        """Raw include test on ``path`` as given; True when inactive."""
        compiled = self._compiled
        if not isinstance(compiled, re.Pattern):
            return True
        found = compiled.search(path) is not None
        return found if self.is_whitelist else not found

    @staticmethod
    def validate_pattern(pattern: str) -> bool:
        """True when ``pattern`` is empty or compiles."""
        stripped = pattern.strip()
        return not stripped or not isinstance(_compile(stripped), str)
