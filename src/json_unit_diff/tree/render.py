"""Display helpers for difference messages.

``render`` writes a canonical node as compact JSON text (``{"a":1}``,
``"x"``, ``[1,2]``).  ``render_list`` renders a list of nodes the way the
content-mismatch message lists them (``[1, {"a":2}]``).  ``quote_text_value``
is the leaf form used by value-equality messages: strings wrapped in double
quotes without escaping, everything else as its JSON literal.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from decimal import Decimal
from typing import Any

__all__ = ["quote_text_value", "render", "render_list"]


def render(value: Any) -> str:
    """Render a canonical node as compact JSON text."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, Decimal)):
        return str(value)
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, dict):
        members = ",".join(
            f"{json.dumps(key, ensure_ascii=False)}:{render(item)}"
            for key, item in value.items()
        )
        return "{" + members + "}"
    if isinstance(value, list):
        return "[" + ",".join(render(item) for item in value) + "]"
    return repr(value)


def render_list(values: Iterable[Any]) -> str:
    """Render nodes as a bracketed, ``", "``-separated list."""
    return "[" + ", ".join(render(value) for value in values) + "]"


def quote_text_value(value: Any) -> str:
    """Render a leaf value for a value-equality message."""
    if isinstance(value, str):
        return f'"{value}"'
    return render(value)
