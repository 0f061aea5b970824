"""LCS-based edit distance.

The distance is the number of insertions and deletions (no substitutions)
needed to turn one sequence into the other::

    len(left) + len(right) - 2 * lcs_length(left, right)
"""

from __future__ import annotations

from typing import Any

from lcs_similarity.inputs import as_input
from lcs_similarity.lcs import INSTANCE as _LCS

__all__ = ["LongestCommonSubsequenceDistance", "lcs_distance"]


class LongestCommonSubsequenceDistance:
    """Insert/delete edit distance derived from the LCS length.

    Satisfies the ``EditDistance`` Protocol via ``__call__``.
    """

    def __call__(self, left: Any, right: Any) -> int:
        return self.apply(left, right)

    def apply(self, left: Any, right: Any) -> int:
        """Return the LCS distance between ``left`` and ``right``.

        Raises:
            InvalidArgumentError: If either input is ``None`` or not a sequence.
        """
        left = as_input(left)
        right = as_input(right)
        return len(left) + len(right) - 2 * _LCS.apply(left, right)


INSTANCE = LongestCommonSubsequenceDistance()


def lcs_distance(left: Any, right: Any) -> int:
    """Return the LCS distance of two sequences."""
    return INSTANCE.apply(left, right)
