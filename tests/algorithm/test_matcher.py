"""Tests for match_unordered and SimilarityCache.

Covers:
- Permutations match completely
- Missing / extra lists keep original order
- Duplicates are consumed one-to-one
- First match wins (sequential scan, not optimal assignment)
- SimilarityCache memoizes per identity pair and evicts at max_size
"""

from __future__ import annotations

from typing import Any

from json_unit_diff.algorithm.matcher import SimilarityCache, match_unordered


def _equal(expected: Any, actual: Any) -> bool:
    return bool(expected == actual)


# ---------------------------------------------------------------------------
# match_unordered
# ---------------------------------------------------------------------------


class TestMatchUnordered:
    def test_permutation_matches(self) -> None:
        assert match_unordered([1, 2, 3], [3, 1, 2], _equal) == ([], [])

    def test_missing_and_extra(self) -> None:
        assert match_unordered([1, 2, 3], [1, 2, 4], _equal) == ([3], [4])

    def test_empty_inputs(self) -> None:
        assert match_unordered([], [], _equal) == ([], [])

    def test_all_extra(self) -> None:
        assert match_unordered([], [1, 2], _equal) == ([], [1, 2])

    def test_duplicates_consumed_one_to_one(self) -> None:
        assert match_unordered([1, 1, 2], [1, 2, 2], _equal) == ([1], [2])

    def test_missing_keeps_expected_order(self) -> None:
        missing, _ = match_unordered([5, 4, 3, 2], [4], _equal)
        assert missing == [5, 3, 2]

    def test_first_match_wins_over_better_assignment(self) -> None:
        # "anything >= 1" consumes expected 1 first, leaving 2 unmatched for actual 1,
        # although the assignment (1->1, 2->2) would match everything.
        def at_least(expected: int, actual: int) -> bool:
            return actual >= expected

        missing, extra = match_unordered([1, 2], [2, 1], at_least)
        assert missing == [2]
        assert extra == [1]

    def test_predicate_called_in_scan_order(self) -> None:
        calls: list[tuple[int, int]] = []

        def record(expected: int, actual: int) -> bool:
            calls.append((expected, actual))
            return expected == actual

        match_unordered([1, 2], [2, 1], record)
        assert calls == [(1, 2), (2, 2), (1, 1)]


# ---------------------------------------------------------------------------
# SimilarityCache
# ---------------------------------------------------------------------------


class TestSimilarityCache:
    def test_default_size(self) -> None:
        assert SimilarityCache().max_size == 512

    def test_computes_once_per_pair(self) -> None:
        cache = SimilarityCache()
        calls: list[int] = []
        left = {"a": 1}
        right = {"a": 1}

        def compute(expected: Any, actual: Any) -> bool:
            calls.append(1)
            return True

        assert cache.get_or_compute(left, right, compute) is True
        assert cache.get_or_compute(left, right, compute) is True
        assert len(calls) == 1
        assert cache.curr_size == 1

    def test_false_outcome_is_cached(self) -> None:
        cache = SimilarityCache()
        calls: list[int] = []
        left: list[int] = [1]
        right: list[int] = [2]

        def compute(expected: Any, actual: Any) -> bool:
            calls.append(1)
            return False

        cache.get_or_compute(left, right, compute)
        cache.get_or_compute(left, right, compute)
        assert len(calls) == 1

    def test_distinct_objects_are_distinct_keys(self) -> None:
        cache = SimilarityCache()
        left = {"a": 1}
        right_one = {"a": 1}
        right_two = {"a": 1}
        cache.get_or_compute(left, right_one, _equal)
        cache.get_or_compute(left, right_two, _equal)
        assert cache.curr_size == 2

    def test_evicts_beyond_max_size(self) -> None:
        cache = SimilarityCache(max_size=2)
        nodes = [[i] for i in range(4)]
        for node in nodes:
            cache.get_or_compute(node, node, _equal)
        assert cache.curr_size == 2
