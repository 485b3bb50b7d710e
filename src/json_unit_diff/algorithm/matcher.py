"""Order-insensitive array matching with a memoized similarity predicate.

``match_unordered`` pairs actual elements with expected elements using
sequential first-match-wins consumption:

    for each actual element, left to right:
        scan the remaining expected elements, left to right
        consume the first one that is similar, else record the actual as extra
    expected elements never consumed are missing

This is not an optimal assignment.  When duplicates or near-duplicates
exist, which expected element gets consumed depends on scan order.

``SimilarityCache`` memoizes the predicate per comparison run.  Nested
ignore-order arrays re-test the same (expected, actual) node pairs once per
outer candidate; the cache turns those repeats into lookups.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from cachetools import LRUCache

__all__ = ["SimilarityCache", "match_unordered"]


def match_unordered(
    expected: Sequence[Any],
    actual: Sequence[Any],
    is_similar: Callable[[Any, Any], bool],
) -> tuple[list[Any], list[Any]]:
    """Match ``actual`` against ``expected`` as multisets.

    Args:
        expected: Expected array elements.
        actual: Actual array elements.
        is_similar: Predicate ``(expected_element, actual_element) -> bool``.

    Returns:
        ``(missing_values, extra_values)``: expected elements left unmatched
        and actual elements that matched nothing, both in original order.
    """
    missing_values = list(expected)
    extra_values: list[Any] = []
    for actual_element in actual:
        index = next(
            (
                i
                for i, expected_element in enumerate(missing_values)
                if is_similar(expected_element, actual_element)
            ),
            None,
        )
        if index is None:
            extra_values.append(actual_element)
        else:
            del missing_values[index]
    return missing_values, extra_values


class SimilarityCache:
    """LRU cache of sub-comparison outcomes keyed by node identity.

    Keys are ``(id(expected), id(actual))``.  Identity keys are only sound
    while both trees are alive and unmodified, so a cache must never outlive
    the comparison run that created it.

    Args:
        max_size: Maximum number of outcomes held.  When exceeded, the
            least-recently-used entry is silently evicted.
    """

    def __init__(self, max_size: int = 512) -> None:
        self._cache: LRUCache[tuple[int, int], bool] = LRUCache(maxsize=max_size)

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    def get_or_compute(
        self,
        expected: Any,
        actual: Any,
        compute: Callable[[Any, Any], bool],
    ) -> bool:
        """Return the cached outcome for the pair, computing it on a miss."""
        key = (id(expected), id(actual))
        outcome = self._cache.get(key)
        if outcome is None:
            outcome = compute(expected, actual)
            self._cache[key] = outcome
        return outcome
