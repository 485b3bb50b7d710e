"""Option and DiffConfig for comparison configuration.

DiffConfig is a frozen (immutable) dataclass threaded by reference through
the whole recursive comparison.  Option enumerates the leniency flags the
comparator queries by membership.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from decimal import Decimal, InvalidOperation
from enum import StrEnum, auto
from typing import Any

__all__ = ["DEFAULT_IGNORE_PLACEHOLDER", "DiffConfig", "Option"]

DEFAULT_IGNORE_PLACEHOLDER = "${json-unit.ignore}"


class Option(StrEnum):
    """Leniency flags for a comparison.

    - IGNORE_EXTRA_FIELDS:    Keys present only in the actual object are accepted.
    - IGNORE_VALUES:          Leaf values are not compared; shapes still are.
    - IGNORE_ARRAY_ORDER:     Arrays are compared as multisets.
    - TREAT_NULL_AS_ABSENT:   An extra key whose actual value is null counts as absent.
    - COMPARE_ONLY_STRUCTURE: Value differences are never recorded.
    """

    IGNORE_EXTRA_FIELDS = auto()
    IGNORE_VALUES = auto()
    IGNORE_ARRAY_ORDER = auto()
    TREAT_NULL_AS_ABSENT = auto()
    COMPARE_ONLY_STRUCTURE = auto()


def _to_option(value: Option | str) -> Option:
    if isinstance(value, Option):
        return value
    if not isinstance(value, str):
        msg = f"Unknown option {value!r}"
        raise ValueError(msg)
    try:
        return Option(value.lower())
    except ValueError:
        msg = f"Unknown option {value!r}"
        raise ValueError(msg) from None


def _to_tolerance(value: Any) -> Decimal | None:
    if value is None:
        return None
    if isinstance(value, bool):
        msg = f"numeric_tolerance must be a number, got {value!r}"
        raise ValueError(msg)
    try:
        tolerance = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation:
        msg = f"numeric_tolerance must be a number, got {value!r}"
        raise ValueError(msg) from None
    if not tolerance.is_finite() or tolerance < 0:
        msg = f"numeric_tolerance must be finite and >= 0, got {value!r}"
        raise ValueError(msg)
    return tolerance


@dataclass(frozen=True, slots=True)
class DiffConfig:
    """Immutable configuration of one comparison.

    Attributes:
        start_path: Path inside the actual document where comparison starts.
            Empty string means the root.  A path that does not resolve,
            malformed ones included, is reported as a missing node.
        ignore_placeholder: Expected string that accepts any actual value.
        numeric_tolerance: When set, numbers are equal if their absolute
            difference does not exceed it (unless IGNORE_VALUES is set).
            Accepts int, float, str or Decimal; stored as Decimal.
        options: Active leniency flags.  Accepts any iterable of Option
            members or option names; stored as a frozenset.
    """

    start_path: str = ""
    ignore_placeholder: str = DEFAULT_IGNORE_PLACEHOLDER
    numeric_tolerance: Decimal | None = None
    options: frozenset[Option] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "numeric_tolerance", _to_tolerance(self.numeric_tolerance)
        )
        options: Iterable[Option | str] = self.options
        if isinstance(options, str):
            options = [options]
        object.__setattr__(
            self, "options", frozenset(_to_option(option) for option in options)
        )

    def has_option(self, option: Option) -> bool:
        """Return True if ``option`` is active."""
        return option in self.options

    def with_options(self, *options: Option | str) -> DiffConfig:
        """Return a copy with ``options`` added to the active flags."""
        return replace(self, options=self.options | {_to_option(o) for o in options})
