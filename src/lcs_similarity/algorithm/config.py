"""LCSConfig and SimilarityNormalization for comparator configuration.

LCSConfig is a frozen (immutable) dataclass holding the comparison
parameters.  SimilarityNormalization selects how a raw LCS length is turned
into a [0, 1] similarity score.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto


class SimilarityNormalization(StrEnum):
    """How an LCS length ``L`` is normalised for inputs of length ``m`` and ``n``.

    - DICE:      ``2L / (m + n)`` (Sørensen-Dice style, the default).
    - MAX:       ``L / max(m, n)``.
    - MIN:       ``L / min(m, n)`` (1.0 when one input is a subsequence of the other).
    - GEOMETRIC: ``L / sqrt(m * n)``.
    """

    DICE = auto()
    MAX = auto()
    MIN = auto()
    GEOMETRIC = auto()


@dataclass(frozen=True, slots=True)
class LCSConfig:
    """Immutable configuration for ``LCSComparator``.

    Attributes:
        normalization: How the LCS length is scaled to a similarity score.
        equivalence_threshold: Default minimum similarity for
            ``is_equivalent``, in [0, 1].
        reconstruct: When False, ``compare`` skips rebuilding the subsequence
            and ``ComparisonResult.subsequence`` is ``None``.
    """

    normalization: SimilarityNormalization = SimilarityNormalization.DICE
    equivalence_threshold: float = 0.85
    reconstruct: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.normalization, SimilarityNormalization):
            msg = f"normalization must be a SimilarityNormalization, got {self.normalization!r}"
            raise ValueError(msg)
        if not 0.0 <= self.equivalence_threshold <= 1.0:
            msg = f"equivalence_threshold must be in [0, 1], got {self.equivalence_threshold}"
            raise ValueError(msg)
