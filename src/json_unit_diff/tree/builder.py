"""TreeBuilder: converts host values into canonical JSON trees.

Accepted inputs:
- JSON text (``str``, ``bytes``, ``bytearray``), parsed with ``json.loads``
  using ``Decimal`` for fractional numbers so tolerance arithmetic is exact.
- Python values: ``Mapping`` (string keys), non-string ``Sequence``,
  ``str``, ``int``, ``float``, ``Decimal``, ``bool`` and ``None``.

Output trees contain only ``dict``, ``list``, ``str``, ``int``, ``Decimal``,
``bool`` and ``None``.  Floats become ``Decimal(repr(f))`` so that ``1.05``
is exactly one hundred and five hundredths.
"""

from __future__ import annotations

import json
import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

__all__ = ["JsonConversionError", "TreeBuilder", "quote_if_needed"]


class JsonConversionError(ValueError):
    """Raised when JSON text can not be parsed into a tree."""


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-finite number {name} is not valid JSON")


def _parse(text: str | bytes | bytearray) -> Any:
    return json.loads(text, parse_float=Decimal, parse_constant=_reject_constant)


def quote_if_needed(value: Any) -> Any:
    """Return ``value`` with bare-word strings turned into JSON string literals.

    Expected documents may be written as plain text (``"abc"`` meaning the JSON
    string ``"abc"``).  Text that already parses as JSON is left untouched.
    """
    if isinstance(value, str):
        try:
            _parse(value)
        except ValueError:
            return json.dumps(value, ensure_ascii=False)
    return value


@dataclass
class TreeBuilder:
    """Converts host values into canonical JSON trees.

    Top-level text is parsed as a JSON document; strings nested inside
    mappings or sequences are kept as JSON strings.

    Example::

        builder = TreeBuilder()
        builder.build('{"price": 1.05}')   # {"price": Decimal("1.05")}
        builder.build({"tags": ("a",)})    # {"tags": ["a"]}
    """

    def build(self, value: Any, label: str = "actual") -> Any:
        """Convert ``value`` to a canonical tree.

        Args:
            value: JSON text or a Python JSON-like value.
            label: Name of the document, used in error messages.

        Returns:
            The canonical tree.

        Raises:
            JsonConversionError: If text input is not valid JSON.
            TypeError: If the value (or a nested value) is not JSON-like.
        """
        if isinstance(value, (str, bytes, bytearray)):
            # json.loads detects UTF-8/16/32 in bytes; a bad encoding is a ValueError
            try:
                parsed = _parse(value)
            except ValueError as exc:
                text = value if isinstance(value, str) else bytes(value)
                raise JsonConversionError(
                    f"Can not parse {label} value: '{text}'"
                ) from exc
            return self._normalize(parsed)
        return self._normalize(value)

    def _normalize(self, value: Any) -> Any:
        # CRITICAL: bool MUST be checked before int, bool subclasses int
        if isinstance(value, bool) or value is None or isinstance(value, str):
            return value

        if isinstance(value, int):
            return int(value)

        if isinstance(value, float):
            if not math.isfinite(value):
                raise ValueError(f"Non-finite number {value!r} is not valid JSON")
            return Decimal(repr(value))

        if isinstance(value, Decimal):
            if not value.is_finite():
                raise ValueError(f"Non-finite number {value!r} is not valid JSON")
            return value

        if isinstance(value, Mapping):
            return self._build_object(value)

        if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
            return [self._normalize(item) for item in value]

        raise TypeError(f"Unsupported JSON value type: {type(value)!r}")

    def _build_object(self, obj: Mapping[Any, Any]) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for key, val in obj.items():
            if not isinstance(key, str):
                raise TypeError(f"JSON object keys must be str, got {type(key)!r}")
            result[key] = self._normalize(val)
        return result
