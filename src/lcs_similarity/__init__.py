"""lcs-similarity - longest common subsequence metrics in linear space."""

from __future__ import annotations

from lcs_similarity.adapters import EditDistanceFrom, SimilarityScoreFrom
from lcs_similarity.algorithm.config import LCSConfig, SimilarityNormalization
from lcs_similarity.api import (
    compare,
    consistency_score,
    is_equivalent,
    similarity_score,
)
from lcs_similarity.comparator import LCSComparator
from lcs_similarity.distance import LongestCommonSubsequenceDistance, lcs_distance
from lcs_similarity.errors import InvalidArgumentError
from lcs_similarity.lcs import LongestCommonSubsequence, lcs_length, longest_common_subsequence
from lcs_similarity.protocols import SimilarityInput
from lcs_similarity.result import ComparisonResult

__version__: str = "0.1.0"
__all__: list[str] = [
    "ComparisonResult",
    "EditDistanceFrom",
    "InvalidArgumentError",
    "LCSComparator",
    "LCSConfig",
    "LongestCommonSubsequence",
    "LongestCommonSubsequenceDistance",
    "SimilarityInput",
    "SimilarityNormalization",
    "SimilarityScoreFrom",
    "compare",
    "consistency_score",
    "is_equivalent",
    "lcs_distance",
    "lcs_length",
    "longest_common_subsequence",
    "similarity_score",
]
