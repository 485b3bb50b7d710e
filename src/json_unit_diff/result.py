"""DiffResult dataclass for comparison output.

This module provides the result type returned by compare() calls.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["DiffResult"]


@dataclass(frozen=True, slots=True)
class DiffResult:
    """Outcome of one comparison.

    Attributes:
        similar: True when no difference was recorded.
        differences: Recorded difference messages in recording order.
        report: The full report text, ``"JSON documents have the same value."``
            when similar, otherwise every message followed by a line break.
        computation_time_ms: Wall-clock duration of the comparison in
            milliseconds.
    """

    similar: bool
    differences: tuple[str, ...]
    report: str
    computation_time_ms: float
