"""Tests for normalize_similarity.

Each mode is checked against its closed-form formula, plus the empty-input
conventions (both empty -> 1.0, one empty -> 0.0) and argument validation.
"""

from __future__ import annotations

import math

import pytest

from lcs_similarity.algorithm.config import SimilarityNormalization
from lcs_similarity.algorithm.normalizer import normalize_similarity


class TestModes:
    def test_dice_is_default(self) -> None:
        assert normalize_similarity(3, 4, 3) == pytest.approx(6 / 7)

    def test_dice(self) -> None:
        score = normalize_similarity(8, 15, 8, SimilarityNormalization.DICE)
        assert score == pytest.approx(16 / 23)

    def test_max(self) -> None:
        score = normalize_similarity(3, 4, 3, SimilarityNormalization.MAX)
        assert score == pytest.approx(0.75)

    def test_min(self) -> None:
        # "fog" is a subsequence of "frog"
        assert normalize_similarity(3, 4, 3, SimilarityNormalization.MIN) == pytest.approx(1.0)

    def test_geometric(self) -> None:
        score = normalize_similarity(3, 4, 3, SimilarityNormalization.GEOMETRIC)
        assert score == pytest.approx(3 / math.sqrt(12))

    @pytest.mark.parametrize("mode", list(SimilarityNormalization))
    def test_identical_inputs_score_one(self, mode: SimilarityNormalization) -> None:
        assert normalize_similarity(5, 5, 5, mode) == pytest.approx(1.0)

    @pytest.mark.parametrize("mode", list(SimilarityNormalization))
    def test_nothing_shared_scores_zero(self, mode: SimilarityNormalization) -> None:
        assert normalize_similarity(0, 3, 3, mode) == 0.0


class TestEmptyInputs:
    @pytest.mark.parametrize("mode", list(SimilarityNormalization))
    def test_both_empty_identical(self, mode: SimilarityNormalization) -> None:
        assert normalize_similarity(0, 0, 0, mode) == 1.0

    @pytest.mark.parametrize("mode", list(SimilarityNormalization))
    def test_one_empty(self, mode: SimilarityNormalization) -> None:
        assert normalize_similarity(0, 0, 4, mode) == 0.0
        assert normalize_similarity(0, 4, 0, mode) == 0.0


class TestValidation:
    def test_negative_length(self) -> None:
        with pytest.raises(ValueError, match="lcs_len"):
            normalize_similarity(-1, 3, 3)

    def test_length_exceeds_shorter_input(self) -> None:
        with pytest.raises(ValueError, match="lcs_len"):
            normalize_similarity(4, 3, 10)
