"""Unit tests for LCSCache.

Tests cover:
- Cache hits (cached pairs bypass the wrapped scorer on the second call)
- User-defined sequences are keyed by content, not identity
- Unhashable inputs (lists) bypass the cache entirely
- LRU eviction (silent eviction at max_size; evicted pairs recompute)
- Instance isolation (separate LCSCache instances do not share state)
- Errors from the wrapped scorer propagate and are never cached
- Properties (max_size and curr_size return correct values)
"""

from __future__ import annotations

from typing import Any

import pytest

from lcs_similarity import InvalidArgumentError, lcs_length
from lcs_similarity.cache import LCSCache

# ---------------------------------------------------------------------------
# Spy helper
# ---------------------------------------------------------------------------


def _make_spy() -> tuple[Any, list[tuple[Any, Any]]]:
    """Return (scorer, call_log): a spy around lcs_length that records each call."""
    call_log: list[tuple[Any, Any]] = []

    def spy(left: Any, right: Any) -> int:
        call_log.append((left, right))
        return lcs_length(left, right)

    return spy, call_log


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


class TestCachedPairsNotRecomputed:
    def test_second_call_served_from_cache(self) -> None:
        spy, call_log = _make_spy()
        cache = LCSCache(spy)

        assert cache.lcs_length("ABCBDAB", "BDCABA") == 4
        assert cache.lcs_length("ABCBDAB", "BDCABA") == 4

        assert len(call_log) == 1
        assert cache.hits == 1
        assert cache.misses == 1

    def test_zero_length_is_cached(self) -> None:
        spy, call_log = _make_spy()
        cache = LCSCache(spy)

        cache.lcs_length("abc", "xyz")
        cache.lcs_length("abc", "xyz")

        assert len(call_log) == 1

    def test_argument_order_is_part_of_key(self) -> None:
        spy, call_log = _make_spy()
        cache = LCSCache(spy)

        cache.lcs_length("frog", "fog")
        cache.lcs_length("fog", "frog")

        assert len(call_log) == 2

    def test_str_and_tuple_are_distinct_keys(self) -> None:
        spy, call_log = _make_spy()
        cache = LCSCache(spy)

        cache.lcs_length("ab", "ab")
        cache.lcs_length(("a", "b"), ("a", "b"))

        assert len(call_log) == 2


class _Letters:
    """Minimal user-defined sequence backed by a mutable string."""

    def __init__(self, text: str) -> None:
        self.text = text

    def __len__(self) -> int:
        return len(self.text)

    def __getitem__(self, index: int) -> str:
        return self.text[index]


class TestUserSequenceKeys:
    def test_keyed_by_content_not_identity(self) -> None:
        spy, call_log = _make_spy()
        cache = LCSCache(spy)

        cache.lcs_length(_Letters("frog"), _Letters("fog"))
        cache.lcs_length(_Letters("frog"), _Letters("fog"))

        assert len(call_log) == 1
        assert cache.hits == 1

    def test_mutation_changes_key(self) -> None:
        cache = LCSCache()
        left = _Letters("frog")
        right = _Letters("frog")
        assert cache.lcs_length(left, right) == 4

        right.text = "x"
        assert cache.lcs_length(left, right) == 0
        assert cache.misses == 2

    def test_scorer_receives_materialised_tuples(self) -> None:
        spy, call_log = _make_spy()
        LCSCache(spy).lcs_length(_Letters("ab"), "ab")
        assert call_log == [(("a", "b"), "ab")]


class TestUnhashableInputs:
    def test_lists_bypass_cache(self) -> None:
        spy, call_log = _make_spy()
        cache = LCSCache(spy)

        assert cache.lcs_length([1, 2, 3], [3, 1, 3]) == 2
        assert cache.lcs_length([1, 2, 3], [3, 1, 3]) == 2

        assert len(call_log) == 2
        assert cache.curr_size == 0


class TestLRUEviction:
    def test_eviction_at_max_size(self) -> None:
        spy, call_log = _make_spy()
        cache = LCSCache(spy, max_size=2)

        cache.lcs_length("a", "a")
        cache.lcs_length("b", "b")
        cache.lcs_length("c", "c")  # evicts ("a", "a")
        assert cache.curr_size == 2

        call_log.clear()
        cache.lcs_length("a", "a")
        assert len(call_log) == 1

    def test_recently_used_survives(self) -> None:
        spy, call_log = _make_spy()
        cache = LCSCache(spy, max_size=2)

        cache.lcs_length("a", "a")
        cache.lcs_length("b", "b")
        cache.lcs_length("a", "a")  # touch
        cache.lcs_length("c", "c")  # evicts ("b", "b")

        call_log.clear()
        cache.lcs_length("a", "a")
        assert call_log == []


class TestInstanceIsolation:
    def test_instances_do_not_share_entries(self) -> None:
        spy, call_log = _make_spy()
        first = LCSCache(spy)
        second = LCSCache(spy)

        first.lcs_length("frog", "fog")
        second.lcs_length("frog", "fog")

        assert len(call_log) == 2


class TestErrors:
    def test_none_propagates_and_is_not_cached(self) -> None:
        cache = LCSCache()
        with pytest.raises(InvalidArgumentError):
            cache.lcs_length(None, "abc")
        assert cache.curr_size == 0


class TestProperties:
    def test_default_max_size(self) -> None:
        assert LCSCache().max_size == 512

    def test_custom_max_size(self) -> None:
        assert LCSCache(max_size=8).max_size == 8

    def test_curr_size_and_clear(self) -> None:
        cache = LCSCache()
        cache("frog", "fog")
        cache("fly", "ant")
        assert cache.curr_size == 2

        cache.clear()
        assert cache.curr_size == 0
        assert cache.hits == 0
        assert cache.misses == 0

    def test_default_scorer_is_lcs_length(self) -> None:
        assert LCSCache()("PENNSYLVANIA", "PENNCISYLVNIA") == 11
