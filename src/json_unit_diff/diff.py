"""Diff: one comparison session between an expected and an actual document.

A session owns both canonical roots, an immutable ``DiffConfig`` and one
``Differences`` recorder.  It moves from NOT_RUN to COMPARED exactly once,
on the first result query:

- the start path is resolved inside the actual root;
- a missing node is recorded as ``Missing node in path "<path>".`` and
  nothing else is compared;
- otherwise the expected root is compared against the located subtree.

Later queries replay the recorder without walking the trees again.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from decimal import Decimal
from typing import Any

from json_unit_diff.algorithm.comparator import NodeComparator
from json_unit_diff.algorithm.config import (
    DEFAULT_IGNORE_PLACEHOLDER,
    DiffConfig,
    Option,
)
from json_unit_diff.algorithm.matcher import SimilarityCache
from json_unit_diff.differences import Differences
from json_unit_diff.result import DiffResult
from json_unit_diff.tree.builder import TreeBuilder, quote_if_needed
from json_unit_diff.tree.nodes import MISSING
from json_unit_diff.tree.paths import get_node
from json_unit_diff.tree.render import render

__all__ = ["SAME_VALUE_MESSAGE", "Diff"]

SAME_VALUE_MESSAGE = "JSON documents have the same value."

diff_logger = logging.getLogger("json_unit_diff.difference.diff")
values_logger = logging.getLogger("json_unit_diff.difference.values")


class Diff:
    """Comparison session over two canonical JSON trees.

    Use ``Diff.create`` to start from host values or JSON text; the
    constructor expects trees already produced by ``TreeBuilder``.

    Example::

        from json_unit_diff import Diff

        diff = Diff.create({"a": 1}, '{"a": 1, "b": 2}')
        diff.similar()        # False
        print(diff.differences())
        # Different keys found in node "". Expected [a], got [a, b].  Extra: "b"
    """

    def __init__(
        self,
        expected: Any,
        actual: Any,
        config: DiffConfig | None = None,
        max_cache_size: int = 512,
    ) -> None:
        """Initialise the session.

        Args:
            expected: Expected canonical tree.
            actual: Actual canonical tree.
            config: Comparison configuration.  Defaults to ``DiffConfig()``.
            max_cache_size: Size of the sub-comparison memo used by
                order-insensitive array matching.  This is an infrastructure
                parameter, not part of ``DiffConfig``.
        """
        self._expected = expected
        self._actual = actual
        self._config: DiffConfig = config if config is not None else DiffConfig()
        self._max_cache_size = max_cache_size
        self._differences = Differences()
        self._compared = False
        self._computation_time_ms = 0.0

    @classmethod
    def create(
        cls,
        expected: Any,
        actual: Any,
        actual_name: str = "actual",
        start_path: str = "",
        ignore_placeholder: str = DEFAULT_IGNORE_PLACEHOLDER,
        numeric_tolerance: Decimal | float | int | str | None = None,
        options: Iterable[Option | str] = (),
    ) -> Diff:
        """Build a session from host values or JSON text.

        ``expected`` goes through ``quote_if_needed`` so that a bare word is an
        expected JSON string; ``actual`` is converted as is.

        Args:
            expected: Expected document.
            actual: Actual document.
            actual_name: Name of the actual document in conversion errors.
            start_path: Path inside ``actual`` where comparison starts.
            ignore_placeholder: Expected string that accepts any value.
            numeric_tolerance: Absolute tolerance for numbers, or None.
            options: Leniency flags.

        Raises:
            JsonConversionError: If a text document is not valid JSON.
            TypeError: If a document contains non-JSON values.
            ValueError: If the configuration is invalid.
        """
        config = DiffConfig(
            start_path=start_path,
            ignore_placeholder=ignore_placeholder,
            numeric_tolerance=numeric_tolerance,
            options=options,  # type: ignore[arg-type]
        )
        builder = TreeBuilder()
        return cls(
            builder.build(quote_if_needed(expected), label="expected"),
            builder.build(actual, label=actual_name),
            config=config,
        )

    @property
    def config(self) -> DiffConfig:
        return self._config

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------

    def similar(self) -> bool:
        """Return True if the documents have no differences."""
        self._compare()
        return self._differences.is_empty()

    def differences(self) -> str:
        """Return the report text.

        ``"JSON documents have the same value."`` when similar, otherwise
        every recorded message followed by a line break, in recording order.
        """
        if self.similar():
            return SAME_VALUE_MESSAGE
        return self._differences.render()

    def result(self) -> DiffResult:
        """Return the outcome as a ``DiffResult``."""
        report = self.differences()
        return DiffResult(
            similar=self._differences.is_empty(),
            differences=tuple(self._differences),
            report=report,
            computation_time_ms=self._computation_time_ms,
        )

    def __str__(self) -> str:
        return self.differences()

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def _compare(self) -> None:
        if self._compared:
            return
        t0 = time.perf_counter()

        start_path = self._config.start_path
        part = get_node(self._actual, start_path)
        if part is MISSING:
            self._differences.add(f'Missing node in path "{start_path}".')
        else:
            comparator = NodeComparator(
                self._config,
                self._differences,
                SimilarityCache(max_size=self._max_cache_size),
            )
            comparator.compare(self._expected, part, start_path)

        self._computation_time_ms = (time.perf_counter() - t0) * 1000.0
        self._compared = True
        self._log_differences(part)

    def _log_differences(self, part: Any) -> None:
        if self._differences.is_empty():
            return
        if diff_logger.isEnabledFor(logging.DEBUG):
            diff_logger.debug(self._differences.render().strip())
        if values_logger.isEnabledFor(logging.DEBUG):
            values_logger.debug(
                "Comparing expected:\n%s\n------------\nwith actual:\n%s\n",
                render(self._expected),
                render(part),
            )
