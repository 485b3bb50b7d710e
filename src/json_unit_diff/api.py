"""Public API functions for json-unit-diff.

This module provides the user-facing functions: create_diff, compare,
json_equals and assert_json_equals.  Each call creates a fresh ``Diff``
session to guarantee zero shared state between calls.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal
from typing import Any

from json_unit_diff.algorithm.config import (
    DEFAULT_IGNORE_PLACEHOLDER,
    DiffConfig,
    Option,
)
from json_unit_diff.diff import Diff
from json_unit_diff.result import DiffResult

__all__ = ["assert_json_equals", "compare", "create_diff", "json_equals"]


def create_diff(
    expected: Any,
    actual: Any,
    actual_name: str = "actual",
    start_path: str = "",
    ignore_placeholder: str = DEFAULT_IGNORE_PLACEHOLDER,
    numeric_tolerance: Decimal | float | int | str | None = None,
    options: Iterable[Option | str] = (),
) -> Diff:
    """Create a comparison session.

    Args:
        expected:           Expected document: JSON text or a JSON-like value.
        actual:             Actual document: JSON text or a JSON-like value.
        actual_name:        Name of the actual document in conversion errors.
        start_path:         Path inside ``actual`` where comparison starts,
                            e.g. ``"result.items[0]"``.  Empty means the root.
        ignore_placeholder: Expected string that accepts any actual value.
        numeric_tolerance:  Absolute tolerance for numbers, or None for exact
                            comparison.
        options:            Leniency flags (``Option`` members or names).

    Returns:
        A ``Diff`` that compares lazily on its first result query.
    """
    return Diff.create(
        expected,
        actual,
        actual_name=actual_name,
        start_path=start_path,
        ignore_placeholder=ignore_placeholder,
        numeric_tolerance=numeric_tolerance,
        options=options,
    )


def _diff_from_config(
    expected: Any, actual: Any, config: DiffConfig | None, actual_name: str
) -> Diff:
    config = config if config is not None else DiffConfig()
    return Diff.create(
        expected,
        actual,
        actual_name=actual_name,
        start_path=config.start_path,
        ignore_placeholder=config.ignore_placeholder,
        numeric_tolerance=config.numeric_tolerance,
        options=config.options,
    )


def compare(
    expected: Any,
    actual: Any,
    config: DiffConfig | None = None,
    actual_name: str = "actual",
) -> DiffResult:
    """Compare two documents and return a ``DiffResult``.

    Args:
        expected:    Expected document.
        actual:      Actual document.
        config:      Comparison configuration.  Defaults to ``DiffConfig()``.
        actual_name: Name of the actual document in conversion errors.

    Returns:
        A ``DiffResult`` with the similarity flag, messages and report text.
    """
    return _diff_from_config(expected, actual, config, actual_name).result()


def json_equals(
    expected: Any,
    actual: Any,
    config: DiffConfig | None = None,
) -> bool:
    """Return True if the two documents have no differences under ``config``."""
    return _diff_from_config(expected, actual, config, "actual").similar()


def assert_json_equals(
    expected: Any,
    actual: Any,
    config: DiffConfig | None = None,
    actual_name: str = "actual",
) -> None:
    """Assert that two documents have no differences.

    Raises:
        AssertionError: With ``"JSON documents are different:\\n"`` followed by
            the report text when any difference is found.
    """
    diff = _diff_from_config(expected, actual, config, actual_name)
    if not diff.similar():
        raise AssertionError(f"JSON documents are different:\n{diff.differences()}")
