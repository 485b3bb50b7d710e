"""Tests for NodeType, the MISSING sentinel and node_type_of.

Covers:
- NodeType has exactly six lowercase StrEnum members
- node_type_of classifies every canonical kind
- bool is classified before int
- MISSING is a falsy singleton distinct from None
- TypeError on non-canonical values (float, MISSING, arbitrary objects)
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from json_unit_diff.tree.nodes import MISSING, NodeType, node_type_of

# ---------------------------------------------------------------------------
# NodeType
# ---------------------------------------------------------------------------


class TestNodeType:
    def test_has_exactly_six_members(self) -> None:
        assert len(list(NodeType)) == 6

    def test_member_names(self) -> None:
        names = {m.name for m in NodeType}
        assert names == {"OBJECT", "ARRAY", "STRING", "NUMBER", "BOOLEAN", "NULL"}

    def test_values_are_lowercase_names(self) -> None:
        assert NodeType.OBJECT == "object"
        assert NodeType.NULL == "null"

    def test_is_str_subclass(self) -> None:
        assert isinstance(NodeType.ARRAY, str)


# ---------------------------------------------------------------------------
# node_type_of
# ---------------------------------------------------------------------------


class TestNodeTypeOf:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ({}, NodeType.OBJECT),
            ({"a": 1}, NodeType.OBJECT),
            ([], NodeType.ARRAY),
            ("", NodeType.STRING),
            ("text", NodeType.STRING),
            (0, NodeType.NUMBER),
            (-12, NodeType.NUMBER),
            (Decimal("1.05"), NodeType.NUMBER),
            (True, NodeType.BOOLEAN),
            (False, NodeType.BOOLEAN),
            (None, NodeType.NULL),
        ],
    )
    def test_classifies_canonical_values(self, value: object, expected: NodeType) -> None:
        assert node_type_of(value) == expected

    def test_bool_is_not_a_number(self) -> None:
        assert node_type_of(True) != NodeType.NUMBER

    def test_float_is_rejected(self) -> None:
        with pytest.raises(TypeError, match="Unexpected node type"):
            node_type_of(1.5)

    def test_missing_is_rejected(self) -> None:
        with pytest.raises(TypeError, match="Unexpected node type"):
            node_type_of(MISSING)

    def test_arbitrary_object_is_rejected(self) -> None:
        with pytest.raises(TypeError):
            node_type_of(object())


# ---------------------------------------------------------------------------
# MISSING
# ---------------------------------------------------------------------------


class TestMissing:
    def test_is_falsy(self) -> None:
        assert not MISSING

    def test_is_not_none(self) -> None:
        assert MISSING is not None

    def test_is_singleton(self) -> None:
        assert type(MISSING)() is MISSING

    def test_repr(self) -> None:
        assert repr(MISSING) == "MISSING"
