"""Hirschberg's linear-space longest common subsequence.

Implements the two procedures of D. S. Hirschberg, "A linear space algorithm
for computing maximal common subsequences" (CACM 18(6), 1975):

- ``hirschberg_reduce`` (Algorithm B): the last row of the LCS dynamic
  programming table for all of ``left`` against every prefix of ``right``,
  computed with two rows of width ``len(right) + 1``.
- ``reconstruct_subsequence`` (Algorithm C): divide-and-conquer recovery of
  an actual LCS.  ``left`` is halved at each level; a forward pass over the
  first half and a backward pass over the reversed second half locate the
  split point ``k`` of ``right``, and both halves are solved recursively.

Time is O(m*n) and auxiliary space O(m + n); recursion depth is O(log m).

All functions here expect already-validated, sliceable inputs (see
``lcs_similarity.inputs.as_input``).  Elements are compared with ``==`` only.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from lcs_similarity.inputs import reverse

__all__ = ["find_split", "hirschberg_reduce", "reconstruct_subsequence"]


def hirschberg_reduce(left: Any, right: Any) -> list[int]:
    """Return the final row of the LCS table for ``left`` against ``right``.

    ``row[j]`` is the LCS length of all of ``left`` and ``right[:j]``; the
    result therefore has ``len(right) + 1`` entries and ``row[0] == 0``.

    Args:
        left:  Outer sequence (``m`` iterations).
        right: Inner sequence; its length sets the row width.

    Returns:
        List of ``len(right) + 1`` non-negative, non-decreasing integers.
    """
    m = len(left)
    n = len(right)

    rows = [[0] * (n + 1), [0] * (n + 1)]

    for i in range(m):
        # K(0, j) <- K(1, j): swap references instead of copying.
        rows[0], rows[1] = rows[1], rows[0]
        prev, cur = rows
        element = left[i]
        for j in range(1, n + 1):
            if element == right[j - 1]:
                cur[j] = prev[j - 1] + 1
            else:
                cur[j] = max(cur[j - 1], prev[j])

    return rows[1]


def find_split(forward: list[int], backward: list[int]) -> int:
    """Return the split index ``k`` maximising ``forward[k] + backward[n - k]``.

    ``forward`` is the Algorithm B row of the first half of ``left`` against
    ``right``; ``backward`` is the row of the reversed second half against
    reversed ``right``.  Both have ``n + 1`` entries.  The smallest maximiser
    wins, which keeps the reconstructed subsequence deterministic.
    """
    totals = np.asarray(forward, dtype=np.int64) + np.asarray(backward, dtype=np.int64)[::-1]
    return int(np.argmax(totals))


def reconstruct_subsequence(left: Any, right: Any) -> list[Any]:
    """Return the elements of one longest common subsequence of ``left`` and ``right``.

    Elements are taken from ``left``.  Which LCS is returned when several
    exist is fixed by ``find_split``'s first-maximum rule.

    Args:
        left:  Sequence that is halved at each recursion level.
        right: Sequence partitioned at the computed split point.

    Returns:
        A list of elements, in order, common to both inputs.
    """
    out: list[Any] = []
    _reconstruct(left, right, out)
    return out


def _reconstruct(left: Any, right: Any, out: list[Any]) -> None:
    m = len(left)
    n = len(right)

    if n == 0 or m == 0:
        return

    if m == 1:
        element = left[0]
        for j in range(n):
            if element == right[j]:
                out.append(element)
                break
        return

    mid = m // 2
    left_first = left[:mid]
    left_second = left[mid:]

    l1 = hirschberg_reduce(left_first, right)
    l2 = hirschberg_reduce(reverse(left_second), reverse(right))
    k = find_split(l1, l2)

    _reconstruct(left_first, right[:k], out)
    _reconstruct(left_second, right[k:], out)
