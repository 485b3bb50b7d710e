"""NodeComparator: recursive comparison of two canonical JSON trees.

Architecture:
- compare() is the single entry point for a node pair.  The ignore
  placeholder short-circuits first, then both nodes are classified and a
  kind mismatch is recorded without descending.
- OBJECT nodes:  key-set difference (missing / extra, honoring
                 IGNORE_EXTRA_FIELDS and TREAT_NULL_AS_ABSENT), then every
                 common key in sorted order.
- ARRAY nodes:   length check, then either positional comparison or
                 multiset matching (IGNORE_ARRAY_ORDER) through independent
                 sub-comparisons.
- Leaf nodes:    value equality, or absolute-difference tolerance for
                 numbers.

Every mismatch is appended to one ``Differences`` recorder in pre-order,
so the report order follows traversal order: object fields sorted, array
elements by index.

Differences come in two classes.  Structural differences (key set, array
length) are always recorded.  Value differences (kind, leaf, tolerance,
array content) are dropped under COMPARE_ONLY_STRUCTURE.
"""

from __future__ import annotations

from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, Context, Decimal, localcontext
from typing import Any

from json_unit_diff.algorithm.config import DiffConfig, Option
from json_unit_diff.algorithm.matcher import SimilarityCache, match_unordered
from json_unit_diff.differences import Differences
from json_unit_diff.tree.nodes import NodeType, node_type_of
from json_unit_diff.tree.paths import array_path, field_path
from json_unit_diff.tree.render import quote_text_value, render, render_list

__all__ = ["NodeComparator"]

# Subtraction under this context is exact for any finite operands
_EXACT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN)


def _keys_message(keys: list[str], path: str) -> str:
    return ",".join(f'"{field_path(path, key)}"' for key in keys)


class NodeComparator:
    """Recursive comparator writing every mismatch into a ``Differences``.

    One instance serves one comparison run.  Order-insensitive array
    matching spawns fresh instances with their own throwaway recorders; only
    their emptiness is consulted, so their messages never reach the
    enclosing report.  Those nested instances share this instance's
    ``SimilarityCache``.

    Example::

        differences = Differences()
        NodeComparator(DiffConfig(), differences).compare({"a": 1}, {"a": 2}, "")
        list(differences)
        # ['Different value found in node "a". Expected 1, got 2.']
    """

    def __init__(
        self,
        config: DiffConfig,
        differences: Differences,
        similarity_cache: SimilarityCache | None = None,
    ) -> None:
        """Initialise the comparator.

        Args:
            config: Comparison configuration.  ``start_path`` is not used here;
                the caller passes the starting path to ``compare``.
            differences: Recorder that receives every mismatch.
            similarity_cache: Memo of sub-comparison outcomes.  A fresh cache
                is created when None.
        """
        self._config = config
        self._differences = differences
        self._similarity_cache = (
            similarity_cache if similarity_cache is not None else SimilarityCache()
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compare(self, expected: Any, actual: Any, path: str) -> None:
        """Compare two nodes at ``path``, recording mismatches.

        Args:
            expected: Expected canonical node.
            actual: Actual canonical node.
            path: Address of both nodes, used in messages.

        Raises:
            TypeError: If either node is not a canonical JSON value.
        """
        if (
            isinstance(expected, str)
            and expected == self._config.ignore_placeholder
        ):
            return

        expected_type = node_type_of(expected)
        actual_type = node_type_of(actual)

        if expected_type != actual_type:
            self._value_difference_found(
                f'Different value found in node "{path}". '
                f"Expected '{render(expected)}', got '{render(actual)}'."
            )
            return

        if expected_type == NodeType.OBJECT:
            self._compare_objects(expected, actual, path)
        elif expected_type == NodeType.ARRAY:
            self._compare_arrays(expected, actual, path)
        elif expected_type == NodeType.NUMBER:
            self._compare_numbers(expected, actual, path)
        elif expected_type in (NodeType.STRING, NodeType.BOOLEAN):
            self._compare_values(expected, actual, path)
        # NULL: two nulls are always equal

    def is_similar(self, expected: Any, actual: Any) -> bool:
        """Return True if an independent comparison of the pair finds nothing.

        Runs with a fresh recorder at the empty path and the same config;
        the outcome is memoized in the shared ``SimilarityCache``.
        """
        return self._similarity_cache.get_or_compute(
            expected, actual, self._run_isolated
        )

    # ------------------------------------------------------------------
    # Containers
    # ------------------------------------------------------------------

    def _compare_objects(
        self, expected: dict[str, Any], actual: dict[str, Any], path: str
    ) -> None:
        expected_keys = expected.keys()
        actual_keys = actual.keys()

        if expected_keys != actual_keys:
            missing_keys = sorted(expected_keys - actual_keys)
            if self._config.has_option(Option.IGNORE_EXTRA_FIELDS):
                extra_keys: list[str] = []
            else:
                extra_keys = sorted(actual_keys - expected_keys)
            if self._config.has_option(Option.TREAT_NULL_AS_ABSENT):
                extra_keys = [key for key in extra_keys if actual[key] is not None]

            if missing_keys or extra_keys:
                missing_message = (
                    f"Missing: {_keys_message(missing_keys, path)}"
                    if missing_keys
                    else ""
                )
                extra_message = (
                    f"Extra: {_keys_message(extra_keys, path)}" if extra_keys else ""
                )
                self._structure_difference_found(
                    f'Different keys found in node "{path}". '
                    f"Expected [{', '.join(sorted(expected_keys))}], "
                    f"got [{', '.join(sorted(actual_keys))}]. "
                    f"{missing_message} {extra_message}"
                )

        for key in sorted(expected_keys & actual_keys):
            self.compare(expected[key], actual[key], field_path(path, key))

    def _compare_arrays(
        self, expected: list[Any], actual: list[Any], path: str
    ) -> None:
        if len(expected) != len(actual):
            self._structure_difference_found(
                f'Array "{path}" has different length. '
                f"Expected {len(expected)}, got {len(actual)}."
            )

        if self._config.has_option(Option.IGNORE_ARRAY_ORDER):
            missing_values, extra_values = match_unordered(
                expected, actual, self.is_similar
            )
            if missing_values or extra_values:
                self._value_difference_found(
                    f'Array "{path}" has different content. '
                    f"Missing values {render_list(missing_values)}, "
                    f"extra values {render_list(extra_values)}"
                )
            return

        # Elements past the shorter length are covered by the length message
        for index, (expected_item, actual_item) in enumerate(
            zip(expected, actual, strict=False)
        ):
            self.compare(expected_item, actual_item, array_path(path, index))

    # ------------------------------------------------------------------
    # Leaves
    # ------------------------------------------------------------------

    def _compare_numbers(
        self, expected: int | Decimal, actual: int | Decimal, path: str
    ) -> None:
        tolerance = self._config.numeric_tolerance
        if tolerance is None or self._config.has_option(Option.IGNORE_VALUES):
            self._compare_values(expected, actual, path)
            return

        with localcontext(_EXACT):
            difference = abs(Decimal(expected) - Decimal(actual))
        if difference > tolerance:
            self._value_difference_found(
                f'Different value found in node "{path}". '
                f"Expected {quote_text_value(expected)}, "
                f"got {quote_text_value(actual)}, "
                f"difference is {difference}, tolerance is {tolerance}"
            )

    def _compare_values(self, expected: Any, actual: Any, path: str) -> None:
        if self._config.has_option(Option.IGNORE_VALUES):
            return
        if expected != actual:
            self._value_difference_found(
                f'Different value found in node "{path}". '
                f"Expected {quote_text_value(expected)}, "
                f"got {quote_text_value(actual)}."
            )

    # ------------------------------------------------------------------
    # Recording
    # ------------------------------------------------------------------

    def _structure_difference_found(self, message: str) -> None:
        self._differences.add(message)

    def _value_difference_found(self, message: str) -> None:
        if not self._config.has_option(Option.COMPARE_ONLY_STRUCTURE):
            self._differences.add(message)

    def _run_isolated(self, expected: Any, actual: Any) -> bool:
        differences = Differences()
        nested = NodeComparator(self._config, differences, self._similarity_cache)
        nested.compare(expected, actual, "")
        return differences.is_empty()
