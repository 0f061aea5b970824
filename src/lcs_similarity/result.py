"""ComparisonResult dataclass for LCS comparison output.

This module provides the rich result type returned by compare() calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = ["ComparisonResult"]


@dataclass(frozen=True, slots=True)
class ComparisonResult:
    """Rich result of a compare() call.

    Attributes:
        similarity_score: Normalised similarity in [0.0, 1.0].  1.0 is identical.
        lcs_length: Length of the longest common subsequence.
        distance: Insert/delete edit distance,
            ``len(left) + len(right) - 2 * lcs_length``.
        subsequence: One longest common subsequence, or ``None`` when the
            comparator was configured with ``reconstruct=False``.
        computation_time_ms: Wall-clock duration of the comparison in milliseconds.
    """

    similarity_score: float
    lcs_length: int
    distance: int
    subsequence: Any
    computation_time_ms: float
