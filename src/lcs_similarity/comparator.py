"""LCSComparator: orchestrator that wires the LCS engine, cache and normalizer.

This is the central wiring layer between the raw algorithm and the public
API.  It converts an LCS length into a rich ComparisonResult with a
normalised similarity score, the insert/delete distance, one reconstructed
subsequence and timing data.

Architecture:
- compare() starts a wall-clock timer, validates both inputs and
  materialises each one once with ``as_input``, fetches the
  LCS length through the per-instance ``LCSCache``, optionally reconstructs
  the subsequence with Hirschberg's Algorithm C, and normalises the length
  with the configured ``SimilarityNormalization``.
- The length and the reconstruction are computed independently; their
  agreement (``len(subsequence) == lcs_length``) is an engine invariant.
"""

from __future__ import annotations

import logging
import time
from typing import Any

from lcs_similarity.algorithm.config import LCSConfig
from lcs_similarity.algorithm.normalizer import normalize_similarity
from lcs_similarity.cache import LCSCache
from lcs_similarity.inputs import as_input
from lcs_similarity.lcs import INSTANCE as _LCS
from lcs_similarity.result import ComparisonResult

__all__ = ["LCSComparator"]

logger = logging.getLogger(__name__)


class LCSComparator:
    """Orchestrator for LCS-based sequence comparison.

    Two separate ``LCSComparator`` instances never share cache state -- each
    instance maintains its own ``LCSCache``.

    Example::

        from lcs_similarity.comparator import LCSComparator

        cmp = LCSComparator()
        result = cmp.compare("ABC Corporation", "ABC Corp")
        print(result.lcs_length)        # 8
        print(result.subsequence)       # "ABC Corp"
        print(result.similarity_score)  # 16 / 23
    """

    def __init__(
        self,
        config: LCSConfig | None = None,
        max_cache_size: int = 512,
    ) -> None:
        """Initialise the comparator.

        Args:
            config: Comparison parameters.  Defaults to ``LCSConfig()``.
            max_cache_size: Maximum number of input pairs held in the
                per-instance LRU cache of LCS lengths.  Defaults to 512.
                This is an infrastructure parameter -- it is NOT part of
                ``LCSConfig`` (which governs scoring behaviour only).
        """
        self._config: LCSConfig = config if config is not None else LCSConfig()
        self._cache = LCSCache(max_size=max_cache_size)

    @property
    def config(self) -> LCSConfig:
        return self._config

    @property
    def cache(self) -> LCSCache:
        return self._cache

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compare(self, left: Any, right: Any) -> ComparisonResult:
        """Compare two sequences and return a rich ComparisonResult.

        Args:
            left:  First sequence (``str``, ``bytes``, list, tuple or any
                ``SimilarityInput``).
            right: Second sequence.

        Returns:
            A ``ComparisonResult`` with all five fields populated
            (``subsequence`` is ``None`` when ``config.reconstruct`` is False).

        Raises:
            InvalidArgumentError: If either input is ``None`` or not a sequence.
        """
        t0 = time.perf_counter()

        raw = (left, right)
        left = as_input(left)
        right = as_input(right)
        n_left = len(left)
        n_right = len(right)

        length = self._cache.lcs_length(left, right)
        subsequence = (
            _LCS.longest_common_subsequence(left, right, like=raw)
            if self._config.reconstruct
            else None
        )
        score = normalize_similarity(length, n_left, n_right, self._config.normalization)

        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        logger.debug(
            "compared %d x %d elements: lcs=%d score=%.4f in %.3fms",
            n_left,
            n_right,
            length,
            score,
            elapsed_ms,
        )

        return ComparisonResult(
            similarity_score=score,
            lcs_length=length,
            distance=n_left + n_right - 2 * length,
            subsequence=subsequence,
            computation_time_ms=elapsed_ms,
        )

    def is_equivalent(self, left: Any, right: Any, threshold: float | None = None) -> bool:
        """Return True if the similarity of ``left`` and ``right`` reaches ``threshold``.

        ``threshold`` defaults to ``config.equivalence_threshold``.
        """
        if threshold is None:
            threshold = self._config.equivalence_threshold
        return self.compare(left, right).similarity_score >= threshold
