"""LCSCache: LRU-backed memoisation of LCS lengths.

Wraps any ``SimilarityScore[int]`` (by default the LCS length) and caches
results per ``(left, right)`` pair in memory.  LRU eviction occurs silently
when ``max_size`` is exceeded -- no error is raised.

Only hashable inputs (``str``, ``bytes``, tuples of hashable elements and
user-defined sequences of hashable elements, which are keyed by content)
can be cached.  Unhashable inputs such as lists are passed straight through
to the wrapped scorer on every call.

Each ``LCSCache`` instance maintains its own ``LRUCache`` -- there is no
class-level shared state, so two separate instances never interfere.

Example::

    from lcs_similarity.cache import LCSCache

    cache = LCSCache(max_size=1024)
    cache.lcs_length("ABCBDAB", "BDCABA")   # computed: 4
    cache.lcs_length("ABCBDAB", "BDCABA")   # served from memory
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from cachetools import LRUCache

from lcs_similarity.inputs import as_input
from lcs_similarity.lcs import INSTANCE as _LCS

if TYPE_CHECKING:
    from lcs_similarity.protocols import SimilarityScore

__all__ = ["LCSCache"]

logger = logging.getLogger(__name__)


class LCSCache:
    """LRU-backed caching proxy around an integer similarity score.

    Satisfies the ``SimilarityScore`` Protocol structurally.

    Args:
        scorer: Callable ``(left, right) -> int``.  Defaults to the LCS length.
        max_size: Maximum number of input pairs to hold in memory.  Defaults
            to 512.  When exceeded, the least-recently-used entry is silently
            evicted.
    """

    def __init__(self, scorer: SimilarityScore[int] | None = None, max_size: int = 512) -> None:
        self._scorer: Any = scorer if scorer is not None else _LCS
        self._cache: LRUCache[tuple[Any, ...], int] = LRUCache(maxsize=max_size)
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

    # ------------------------------------------------------------------
    # SimilarityScore Protocol surface
    # ------------------------------------------------------------------

    def __call__(self, left: Any, right: Any) -> int:
        return self.lcs_length(left, right)

    def lcs_length(self, left: Any, right: Any) -> int:
        """Return the wrapped score for ``(left, right)``, memoised when hashable.

        Inputs pass through ``as_input`` first, so the key is built from
        content (user-defined sequences become tuples) rather than object
        identity, and the scorer receives those same values.

        ``InvalidArgumentError`` for ``None`` or non-sequence inputs, and any
        error raised by the wrapped scorer, propagate and are never cached.
        """
        left = as_input(left)
        right = as_input(right)
        key = (type(left), left, type(right), right)
        try:
            hash(key)
        except TypeError:
            logger.debug(
                "LCSCache bypass for unhashable %s/%s",
                type(left).__name__,
                type(right).__name__,
            )
            return int(self._scorer(left, right))

        cached = self._cache.get(key)
        if cached is not None:
            self.hits += 1
            return cached

        self.misses += 1
        value = int(self._scorer(left, right))
        self._cache[key] = value
        return value

    def clear(self) -> None:
        """Drop every cached entry and reset the hit/miss counters."""
        self._cache.clear()
        self.hits = 0
        self.misses = 0
