"""algorithm subpackage: the comparison engine and its configuration.

Example::

    from json_unit_diff.algorithm import DiffConfig, NodeComparator, Option
    from json_unit_diff.differences import Differences

    differences = Differences()
    config = DiffConfig(options={Option.IGNORE_ARRAY_ORDER})
    NodeComparator(config, differences).compare([1, 2], [2, 1], "")
    differences.is_empty()   # True
"""

from __future__ import annotations

from json_unit_diff.algorithm.comparator import NodeComparator
from json_unit_diff.algorithm.config import (
    DEFAULT_IGNORE_PLACEHOLDER,
    DiffConfig,
    Option,
)
from json_unit_diff.algorithm.matcher import SimilarityCache, match_unordered

__all__ = [
    "DEFAULT_IGNORE_PLACEHOLDER",
    "DiffConfig",
    "NodeComparator",
    "Option",
    "SimilarityCache",
    "match_unordered",
]
