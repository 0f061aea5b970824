"""Adapters that bind a fixed left-hand sequence to a scorer.

Useful when one reference sequence is compared against many candidates::

    from lcs_similarity import EditDistanceFrom, LongestCommonSubsequenceDistance

    from_ref = EditDistanceFrom(LongestCommonSubsequenceDistance(), "kitten")
    [from_ref.apply(c) for c in ("sitting", "kitchen")]   # [5, 3]
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from lcs_similarity.errors import InvalidArgumentError
from lcs_similarity.protocols import EditDistance, SimilarityScore

R = TypeVar("R")

__all__ = ["EditDistanceFrom", "SimilarityScoreFrom"]


class EditDistanceFrom(Generic[R]):
    """An ``EditDistance`` with its left argument fixed.

    Args:
        edit_distance: Any callable ``(left, right) -> R``.  Must not be None.
        left: The fixed left sequence.  May be None here; whether the
            wrapped distance accepts it is decided when ``apply`` runs.
    """

    def __init__(self, edit_distance: EditDistance[R], left: Any) -> None:
        if edit_distance is None:
            msg = "The edit distance may not be None."
            raise InvalidArgumentError(msg)
        self._edit_distance = edit_distance
        self._left = left

    @property
    def edit_distance(self) -> EditDistance[R]:
        return self._edit_distance

    @property
    def left(self) -> Any:
        return self._left

    def apply(self, right: Any) -> R:
        """Return the distance from the fixed left sequence to ``right``."""
        return self._edit_distance(self._left, right)

    __call__ = apply


class SimilarityScoreFrom(Generic[R]):
    """A ``SimilarityScore`` with its left argument fixed.

    Args:
        similarity_score: Any callable ``(left, right) -> R``.  Must not be None.
        left: The fixed left sequence.
    """

    def __init__(self, similarity_score: SimilarityScore[R], left: Any) -> None:
        if similarity_score is None:
            msg = "The similarity score may not be None."
            raise InvalidArgumentError(msg)
        self._similarity_score = similarity_score
        self._left = left

    @property
    def similarity_score(self) -> SimilarityScore[R]:
        return self._similarity_score

    @property
    def left(self) -> Any:
        return self._left

    def apply(self, right: Any) -> R:
        """Return the similarity of the fixed left sequence and ``right``."""
        return self._similarity_score(self._left, right)

    __call__ = apply
