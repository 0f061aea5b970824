"""Shared fixtures for the lcs-similarity test-suite."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

import pytest


def _is_subsequence(candidate: Sequence[Any], seq: Sequence[Any]) -> bool:
    """True if every element of ``candidate`` appears in ``seq`` in order."""
    it = iter(seq)
    return all(any(element == other for other in it) for element in candidate)


@pytest.fixture
def is_subsequence() -> Callable[[Sequence[Any], Sequence[Any]], bool]:
    """Return the in-order subsequence checker."""
    return _is_subsequence
