"""Public API functions for lcs-similarity.

This module provides the user-facing comparison functions: compare,
similarity_score, is_equivalent and consistency_score.  Each call creates a
fresh LCSComparator (or ConsistencyScorer) to guarantee zero global state
mutation between calls.
"""

from __future__ import annotations

from typing import Any

from lcs_similarity.algorithm.config import LCSConfig
from lcs_similarity.comparator import LCSComparator
from lcs_similarity.result import ComparisonResult
from lcs_similarity.scorer import ConsistencyScorer

__all__ = ["compare", "consistency_score", "is_equivalent", "similarity_score"]


def compare(
    left: Any,
    right: Any,
    config: LCSConfig | None = None,
) -> ComparisonResult:
    """Compare two sequences and return a rich ComparisonResult.

    Args:
        left:   First sequence.
        right:  Second sequence.
        config: Comparison parameters.  Defaults to ``LCSConfig()`` when None.

    Returns:
        A ``ComparisonResult`` with similarity_score, lcs_length, distance,
        subsequence and computation_time_ms populated.
    """
    return LCSComparator(config=config).compare(left, right)


def similarity_score(
    left: Any,
    right: Any,
    config: LCSConfig | None = None,
) -> float:
    """Return the normalised LCS similarity of two sequences.

    Reconstruction is skipped; only the length is computed.

    Returns:
        A float in [0.0, 1.0].  1.0 means identical; 0.0 means nothing shared.
    """
    base = config if config is not None else LCSConfig()
    scoring = LCSConfig(
        normalization=base.normalization,
        equivalence_threshold=base.equivalence_threshold,
        reconstruct=False,
    )
    return LCSComparator(config=scoring).compare(left, right).similarity_score


def is_equivalent(
    left: Any,
    right: Any,
    threshold: float | None = None,
    config: LCSConfig | None = None,
) -> bool:
    """Return True if the two sequences are similar enough to be considered equal.

    Args:
        left:      First sequence.
        right:     Second sequence.
        threshold: Minimum similarity score.  Defaults to
                   ``config.equivalence_threshold`` (0.85).
        config:    Comparison parameters.  Defaults to ``LCSConfig()`` when None.

    Returns:
        True if ``similarity_score(left, right, config) >= threshold``.
    """
    if threshold is None:
        threshold = (config if config is not None else LCSConfig()).equivalence_threshold
    return similarity_score(left, right, config=config) >= threshold


def consistency_score(
    docs: list[Any],
    config: LCSConfig | None = None,
) -> float:
    """Return how closely a set of sequences agree, from their pairwise LCS scores.

    Formula: ``max(0, mean(pairwise_scores) - std(pairwise_scores))``.

    Returns:
        A float in [0.0, 1.0].  Returns 1.0 for empty and single-element lists.
    """
    return ConsistencyScorer(config=config).compute(docs)
