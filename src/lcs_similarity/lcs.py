"""Longest common subsequence: length and reconstruction.

The public entry points validate their inputs, short-circuit empty
sequences without allocating DP rows, and always hand the longer sequence
to the engine as ``left`` so that row width (and therefore memory) is
``O(min(m, n))`` for the length and the recursion halves the longer side.

Example::

    from lcs_similarity import lcs_length, longest_common_subsequence

    lcs_length("ABCBDAB", "BDCABA")                  # 4
    longest_common_subsequence("frog", "fog")        # "fog"
    longest_common_subsequence([1, 2, 3], [3, 1, 3])  # [1, 3]
"""

from __future__ import annotations

from typing import Any

from lcs_similarity.algorithm.hirschberg import hirschberg_reduce, reconstruct_subsequence
from lcs_similarity.inputs import as_input, assemble

__all__ = ["INSTANCE", "LongestCommonSubsequence", "lcs_length", "longest_common_subsequence"]


class LongestCommonSubsequence:
    """LCS length as a similarity score, plus LCS reconstruction.

    Stateless: a single instance (``INSTANCE``) can be shared freely between
    threads.  Satisfies the ``SimilarityScore`` Protocol via ``__call__``.
    """

    def __call__(self, left: Any, right: Any) -> int:
        return self.apply(left, right)

    def apply(self, left: Any, right: Any) -> int:
        """Return the length of the longest common subsequence.

        Args:
            left:  First sequence.
            right: Second sequence.

        Returns:
            Integer in ``[0, min(len(left), len(right))]``.

        Raises:
            InvalidArgumentError: If either input is ``None`` or not a sequence.
        """
        left = as_input(left)
        right = as_input(right)

        left_sz = len(left)
        right_sz = len(right)
        if left_sz == 0 or right_sz == 0:
            return 0

        # The inner sequence sets the row width.
        if left_sz < right_sz:
            return hirschberg_reduce(right, left)[left_sz]
        return hirschberg_reduce(left, right)[right_sz]

    def longest_common_subsequence(
        self, left: Any, right: Any, like: tuple[Any, Any] | None = None
    ) -> Any:
        """Return one longest common subsequence of ``left`` and ``right``.

        When several subsequences of maximal length exist the choice is
        deterministic: the engine runs with the longer input halved and takes
        the first optimal split point.

        Args:
            left:  First sequence.
            right: Second sequence.
            like:  Original ``(left, right)`` objects whose types decide the
                result type, for callers that already passed their inputs
                through ``as_input``.  Defaults to ``(left, right)``.

        Returns:
            A ``str`` if both inputs are ``str``, ``bytes`` if both are
            ``bytes``, a ``tuple`` if ``left`` is a tuple, otherwise a list.

        Raises:
            InvalidArgumentError: If either input is ``None`` or not a sequence.
        """
        raw_left, raw_right = like if like is not None else (left, right)
        left = as_input(left)
        right = as_input(right)

        if len(left) == 0 or len(right) == 0:
            return assemble([], raw_left, raw_right)

        if len(left) < len(right):
            elements = reconstruct_subsequence(right, left)
        else:
            elements = reconstruct_subsequence(left, right)
        return assemble(elements, raw_left, raw_right)


INSTANCE = LongestCommonSubsequence()


def lcs_length(left: Any, right: Any) -> int:
    """Return the LCS length of two sequences (see ``LongestCommonSubsequence.apply``)."""
    return INSTANCE.apply(left, right)


def longest_common_subsequence(left: Any, right: Any) -> Any:
    """Return one LCS of two sequences (see ``LongestCommonSubsequence.longest_common_subsequence``)."""
    return INSTANCE.longest_common_subsequence(left, right)
