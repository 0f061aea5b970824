"""Structural protocols for sequence inputs and scoring functions.

Users can plug in their own sequence types and scorers without inheriting
from any base class -- any object with the right methods passes
``isinstance`` checks.

Example::

    from lcs_similarity.protocols import SimilarityInput

    class Tokens:
        def __init__(self, words: list[str]) -> None:
            self._words = words

        def __len__(self) -> int:
            return len(self._words)

        def __getitem__(self, index: int) -> str:
            return self._words[index]

    assert isinstance(Tokens(["a", "b"]), SimilarityInput)  # True
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

E_co = TypeVar("E_co", covariant=True)
R_co = TypeVar("R_co", covariant=True)

__all__ = ["EditDistance", "SimilarityInput", "SimilarityScore"]


@runtime_checkable
class SimilarityInput(Protocol[E_co]):
    """An ordered, finite, indexable sequence of equality-comparable elements.

    The LCS engine only ever needs the length and O(1) positional access.
    Elements are compared with ``==``; they do not have to be hashable.
    """

    def __len__(self) -> int: ...

    def __getitem__(self, index: int) -> E_co: ...


@runtime_checkable
class SimilarityScore(Protocol[R_co]):
    """A similarity measure between two sequences (higher is more similar)."""

    def __call__(self, left: Any, right: Any) -> R_co: ...


@runtime_checkable
class EditDistance(Protocol[R_co]):
    """A distance between two sequences (0 means identical)."""

    def __call__(self, left: Any, right: Any) -> R_co: ...
