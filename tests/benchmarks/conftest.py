"""Deterministic sequence generators for performance benchmarks.

All generators produce fixed, reproducible inputs from a seeded
``random.Random``.  Three tiers: 100, 500 and 2000 characters.
Each tier provides a "similar" pair (a few scattered edits) and a
"dissimilar" pair (independent draws over the same alphabet).
"""

from __future__ import annotations

import random

import pytest

_ALPHABET = "ACGT"


def generate_sequence(length: int, seed: int) -> str:
    """Generate a fixed DNA-like string."""
    rng = random.Random(seed)
    return "".join(rng.choice(_ALPHABET) for _ in range(length))


def _make_similar(length: int) -> tuple[str, str]:
    """Right side is the left side with every 10th character replaced."""
    left = generate_sequence(length, seed=length)
    right = "".join(
        _ALPHABET[(_ALPHABET.index(ch) + 1) % 4] if i % 10 == 0 else ch
        for i, ch in enumerate(left)
    )
    return left, right


def _make_dissimilar(length: int) -> tuple[str, str]:
    return generate_sequence(length, seed=length), generate_sequence(length, seed=length + 1)


# --- Fixtures for each size tier ---


@pytest.fixture
def pair_100_similar() -> tuple[str, str]:
    return _make_similar(100)


@pytest.fixture
def pair_100_dissimilar() -> tuple[str, str]:
    return _make_dissimilar(100)


@pytest.fixture
def pair_500_similar() -> tuple[str, str]:
    return _make_similar(500)


@pytest.fixture
def pair_500_dissimilar() -> tuple[str, str]:
    return _make_dissimilar(500)


@pytest.fixture
def pair_2000_similar() -> tuple[str, str]:
    return _make_similar(2000)
