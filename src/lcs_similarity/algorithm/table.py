"""Full-table (quadratic space) LCS computation.

``lcs_length_table`` materialises the whole ``(m + 1) x (n + 1)`` dynamic
programming table and ``backtrack_subsequence`` walks it back from the
bottom-right corner to recover one LCS.  This is the textbook approach the
linear-space engine in ``hirschberg`` replaces; it is kept for callers that
need every prefix-pair length and as an independent cross-check.
"""

from __future__ import annotations

from typing import Any

import numpy as np

__all__ = ["backtrack_subsequence", "lcs_length_table"]


def lcs_length_table(left: Any, right: Any) -> np.ndarray:
    """Compute the full LCS length table.

    Args:
        left:  First sequence (rows).
        right: Second sequence (columns).

    Returns:
        Integer array of shape ``(len(left) + 1, len(right) + 1)`` where cell
        ``[i, j]`` is the LCS length of ``left[:i]`` and ``right[:j]``.
    """
    m = len(left)
    n = len(right)

    table = np.zeros((m + 1, n + 1), dtype=np.int64)

    for i in range(m):
        element = left[i]
        for j in range(n):
            if element == right[j]:
                table[i + 1, j + 1] = table[i, j] + 1
            else:
                table[i + 1, j + 1] = max(table[i + 1, j], table[i, j + 1])

    return table


def backtrack_subsequence(table: np.ndarray, left: Any, right: Any) -> list[Any]:
    """Read one LCS back out of a table built by ``lcs_length_table``.

    Args:
        table: Table for exactly these ``left`` / ``right`` inputs.
        left:  First sequence; result elements are taken from it.
        right: Second sequence.

    Returns:
        List of LCS elements in order.

    Raises:
        ValueError: If ``table`` does not have shape ``(m + 1, n + 1)``.
    """
    expected = (len(left) + 1, len(right) + 1)
    if table.shape != expected:
        msg = f"table shape must be {expected}, got {table.shape}"
        raise ValueError(msg)

    i, j = len(left), len(right)
    out: list[Any] = []
    while table[i, j]:
        while table[i, j] == table[i - 1, j]:
            i -= 1
        while table[i, j] == table[i, j - 1]:
            j -= 1
        i -= 1
        j -= 1
        out.append(left[i])

    out.reverse()
    return out
