"""ConsistencyScorer: pairwise LCS agreement across a set of sequences.

Given N samples of the "same" text or token stream (repeated renderings,
OCR passes, transcriptions), the scorer fills an ``N x N`` matrix of LCS
lengths, normalises every off-diagonal pair with the configured
``SimilarityNormalization`` and summarises the pairs as::

    score = max(0.0, mean(pairwise) - std(pairwise))

Low average agreement and uneven agreement (one outlier sample) both pull
the score down.  Each document is materialised once with ``as_input``;
the matrix is symmetric, so only the upper triangle is computed.
"""

from __future__ import annotations

import itertools
from typing import Any

import numpy as np

from lcs_similarity.algorithm.config import LCSConfig
from lcs_similarity.algorithm.normalizer import normalize_similarity
from lcs_similarity.cache import LCSCache
from lcs_similarity.inputs import as_input

__all__ = ["ConsistencyScorer"]


class ConsistencyScorer:
    """Summarises how closely a set of sequences agree with each other.

    Repeated documents hit the per-instance ``LCSCache``, so scoring a list
    with many duplicates costs one LCS per distinct pair.

    Example::

        from lcs_similarity.scorer import ConsistencyScorer

        scorer = ConsistencyScorer()
        scorer.pairwise_lengths(["frog", "fog", "fig"])
        # array([[4, 3, 2],
        #        [3, 3, 2],
        #        [2, 2, 3]])
        scorer.compute(["hello world"] * 3)  # 1.0
    """

    def __init__(
        self,
        config: LCSConfig | None = None,
        max_cache_size: int = 512,
    ) -> None:
        self._config = config if config is not None else LCSConfig()
        self._cache = LCSCache(max_size=max_cache_size)

    def pairwise_lengths(self, docs: list[Any]) -> np.ndarray:
        """Return the symmetric ``N x N`` matrix of LCS lengths.

        The diagonal holds each document's own length.

        Raises:
            InvalidArgumentError: If any document is ``None`` or not a sequence.
        """
        inputs = [as_input(doc) for doc in docs]
        n = len(inputs)

        lengths = np.zeros((n, n), dtype=np.int64)
        for i, seq in enumerate(inputs):
            lengths[i, i] = len(seq)
        for i, j in itertools.combinations(range(n), 2):
            lengths[i, j] = lengths[j, i] = self._cache.lcs_length(inputs[i], inputs[j])
        return lengths

    def pairwise_scores(self, docs: list[Any]) -> np.ndarray:
        """Return the normalised similarity of every unordered pair, in
        ``itertools.combinations`` order."""
        lengths = self.pairwise_lengths(docs)
        return np.array(
            [
                normalize_similarity(
                    int(lengths[i, j]),
                    int(lengths[i, i]),
                    int(lengths[j, j]),
                    self._config.normalization,
                )
                for i, j in itertools.combinations(range(len(docs)), 2)
            ],
            dtype=float,
        )

    def compute(self, docs: list[Any]) -> float:
        """Compute the consistency score for a list of sequences.

        Returns:
            A float in [0.0, 1.0].  1.0 for empty or single-element lists
            (no pairs to disagree).
        """
        if len(docs) <= 1:
            return 1.0

        scores = self.pairwise_scores(docs)
        return float(np.clip(scores.mean() - scores.std(), 0.0, 1.0))
