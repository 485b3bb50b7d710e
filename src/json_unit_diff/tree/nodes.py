"""NodeType StrEnum, the MISSING sentinel and the value classifier.

Canonical JSON trees are plain Python values produced by ``TreeBuilder``:
``dict`` (OBJECT), ``list`` (ARRAY), ``str`` (STRING), ``int`` or
``Decimal`` (NUMBER), ``bool`` (BOOLEAN) and ``None`` (NULL).  ``MISSING``
stands for "no node at this path" and is distinct from JSON null.
"""

from __future__ import annotations

from decimal import Decimal
from enum import StrEnum, auto
from typing import Any, Final

__all__ = ["MISSING", "NodeType", "node_type_of"]


class NodeType(StrEnum):
    """Enumeration of the six JSON value kinds.

    StrEnum values are the lowercased member names:
    - OBJECT  -> "object"  : JSON object {}
    - ARRAY   -> "array"   : JSON array []
    - STRING  -> "string"  : JSON string
    - NUMBER  -> "number"  : JSON number (int or Decimal)
    - BOOLEAN -> "boolean" : true / false
    - NULL    -> "null"    : null
    """

    OBJECT = auto()
    ARRAY = auto()
    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    NULL = auto()


class _Missing:
    """Singleton type of ``MISSING``."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Final = _Missing()


def node_type_of(value: Any) -> NodeType:
    """Return the kind of a canonical tree node.

    Raises:
        TypeError: If ``value`` is not a canonical JSON node.  This signals a
            malformed tree, never a difference between documents.
    """
    # bool MUST be checked before int, bool subclasses int
    if isinstance(value, bool):
        return NodeType.BOOLEAN
    if isinstance(value, dict):
        return NodeType.OBJECT
    if isinstance(value, list):
        return NodeType.ARRAY
    if isinstance(value, str):
        return NodeType.STRING
    if isinstance(value, (int, Decimal)):
        return NodeType.NUMBER
    if value is None:
        return NodeType.NULL
    raise TypeError(f"Unexpected node type {value!r}")
