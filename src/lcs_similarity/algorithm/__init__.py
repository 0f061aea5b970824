"""algorithm subpackage -- the LCS engine and its scoring helpers.

Provides Hirschberg's linear-space procedures, the quadratic full-table
reference, and the similarity normalization used by the comparator.  Import
from this module (not from sub-modules directly) to stay on the stable
public interface.

Example::

    from lcs_similarity.algorithm import hirschberg_reduce, reconstruct_subsequence

    hirschberg_reduce("ABCBDAB", "BDCABA")[-1]           # 4
    "".join(reconstruct_subsequence("ABCBDAB", "BDCABA"))  # a 4-character LCS
"""

from __future__ import annotations

from lcs_similarity.algorithm.config import LCSConfig, SimilarityNormalization
from lcs_similarity.algorithm.hirschberg import (
    find_split,
    hirschberg_reduce,
    reconstruct_subsequence,
)
from lcs_similarity.algorithm.normalizer import normalize_similarity
from lcs_similarity.algorithm.table import backtrack_subsequence, lcs_length_table

__all__ = [
    "LCSConfig",
    "SimilarityNormalization",
    "backtrack_subsequence",
    "find_split",
    "hirschberg_reduce",
    "lcs_length_table",
    "normalize_similarity",
    "reconstruct_subsequence",
]
