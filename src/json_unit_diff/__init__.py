"""JSON unit diff - assertion-grade difference reports for JSON documents."""

from __future__ import annotations

from json_unit_diff.algorithm.config import (
    DEFAULT_IGNORE_PLACEHOLDER,
    DiffConfig,
    Option,
)
from json_unit_diff.api import (
    assert_json_equals,
    compare,
    create_diff,
    json_equals,
)
from json_unit_diff.diff import Diff
from json_unit_diff.result import DiffResult
from json_unit_diff.tree.builder import JsonConversionError

__version__: str = "0.1.0"
__all__: list[str] = [
    "DEFAULT_IGNORE_PLACEHOLDER",
    "Diff",
    "DiffConfig",
    "DiffResult",
    "JsonConversionError",
    "Option",
    "assert_json_equals",
    "compare",
    "create_diff",
    "json_equals",
]
