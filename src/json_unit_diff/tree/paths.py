"""Dotted/bracketed node addressing.

Paths look like ``user.addresses[1].city``.  The root is the empty string,
a root array element is ``[0]``.  ``field_path`` and ``array_path`` build the
paths that appear in difference messages; ``get_node`` resolves the same
syntax against a canonical tree.
"""

from __future__ import annotations

import re
from typing import Any

from json_unit_diff.tree.nodes import MISSING

__all__ = ["array_path", "field_path", "get_node", "is_valid_path"]

# One step: a field name or a bracketed index
_STEP = re.compile(r"([^.\[\]]+)|\[(\d+)\]")

# Whole path: first step, then ".name" or "[i]" steps
_PATH = re.compile(r"(?:[^.\[\]]+|\[\d+\])(?:\.[^.\[\]]+|\[\d+\])*")


def field_path(parent: str, name: str) -> str:
    """Return the path of field ``name`` inside the object at ``parent``."""
    if not parent:
        return name
    return f"{parent}.{name}"


def array_path(parent: str, index: int) -> str:
    """Return the path of element ``index`` inside the array at ``parent``."""
    if not parent:
        return f"[{index}]"
    return f"{parent}[{index}]"


def is_valid_path(path: str) -> bool:
    """Return True if ``path`` is empty or a well-formed node path."""
    return path == "" or _PATH.fullmatch(path) is not None


def get_node(root: Any, path: str) -> Any:
    """Resolve ``path`` against ``root``.

    Args:
        root: Canonical JSON tree.
        path: Node path; ``""`` addresses the root itself.

    Returns:
        The addressed node, or ``MISSING`` when any step does not exist
        (unknown key, index out of range, field step on a non-object or
        index step on a non-array) or the path is malformed.
    """
    if not is_valid_path(path):
        return MISSING
    node = root
    for match in _STEP.finditer(path):
        name, index = match.groups()
        if name is not None:
            if not isinstance(node, dict) or name not in node:
                return MISSING
            node = node[name]
        else:
            position = int(index)
            if not isinstance(node, list) or position >= len(node):
                return MISSING
            node = node[position]
    return node
