"""Similarity normalizer for LCS lengths.

Converts a raw LCS length into a similarity score in [0, 1] according to a
``SimilarityNormalization`` mode.

Two empty inputs are identical (1.0).  When exactly one input is empty no
element can be shared, so the score is 0.0 for every mode.
"""

from __future__ import annotations

import math

from lcs_similarity.algorithm.config import SimilarityNormalization


def normalize_similarity(
    lcs_len: int,
    n_left: int,
    n_right: int,
    mode: SimilarityNormalization = SimilarityNormalization.DICE,
) -> float:
    """Normalize an LCS length to a [0, 1] similarity score.

    Args:
        lcs_len: Length of the longest common subsequence.
        n_left:  Length of the left input.
        n_right: Length of the right input.
        mode:    Normalization formula; see ``SimilarityNormalization``.

    Returns:
        Float in [0.0, 1.0] -- 1.0 means identical, 0.0 means nothing shared.

    Raises:
        ValueError: If ``lcs_len`` is negative or longer than either input.
    """
    if lcs_len < 0 or lcs_len > min(n_left, n_right):
        msg = f"lcs_len must be in [0, {min(n_left, n_right)}], got {lcs_len}"
        raise ValueError(msg)

    if n_left == 0 and n_right == 0:
        return 1.0
    if n_left == 0 or n_right == 0:
        return 0.0

    if mode == SimilarityNormalization.DICE:
        score = 2.0 * lcs_len / (n_left + n_right)
    elif mode == SimilarityNormalization.MAX:
        score = lcs_len / max(n_left, n_right)
    elif mode == SimilarityNormalization.MIN:
        score = lcs_len / min(n_left, n_right)
    else:
        score = lcs_len / math.sqrt(n_left * n_right)
    return min(1.0, score)
