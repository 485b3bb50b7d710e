"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible documents. No random values.
Three tiers:
- 100-key nested objects (positional comparison)
- 50-element arrays of objects, reversed (order-insensitive matching,
  worst case for the sequential scan)
- 10 x 10 nested arrays, each reversed (order-insensitive matching where
  inner pairs are re-tested for every outer candidate)
"""

from __future__ import annotations

from typing import Any

import pytest


def _make_nested_objects(changed: bool) -> tuple[dict[str, Any], dict[str, Any]]:
    """10 sections x 10 leaf keys; optionally change every tenth value."""
    expected: dict[str, Any] = {}
    actual: dict[str, Any] = {}
    for i in range(10):
        expected[f"section_{i}"] = {f"field_{i}_{j}": f"value_{i}_{j}" for j in range(10)}
        actual[f"section_{i}"] = {
            f"field_{i}_{j}": f"other_{i}_{j}" if changed and j == 0 else f"value_{i}_{j}"
            for j in range(10)
        }
    return expected, actual


def _make_reversed_records(size: int) -> tuple[list[Any], list[Any]]:
    expected = [{"id": i, "name": f"item-{i}", "price": i * 1.25} for i in range(size)]
    return expected, list(reversed(expected))


def _make_reversed_matrix(size: int) -> tuple[list[Any], list[Any]]:
    expected = [[f"{i}-{j}" for j in range(size)] for i in range(size)]
    actual = [list(reversed(row)) for row in reversed(expected)]
    return expected, actual


@pytest.fixture
def pair_nested_equal() -> tuple[dict[str, Any], dict[str, Any]]:
    """100-key nested pair with no differences."""
    return _make_nested_objects(changed=False)


@pytest.fixture
def pair_nested_changed() -> tuple[dict[str, Any], dict[str, Any]]:
    """100-key nested pair with ten value differences."""
    return _make_nested_objects(changed=True)


@pytest.fixture
def pair_reversed_records() -> tuple[list[Any], list[Any]]:
    """50 records in reverse order."""
    return _make_reversed_records(50)


@pytest.fixture
def pair_reversed_matrix() -> tuple[list[Any], list[Any]]:
    """10 x 10 string matrix reversed on both axes."""
    return _make_reversed_matrix(10)
