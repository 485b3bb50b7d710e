"""Tree subpackage for canonical JSON value trees.

Re-exports the public API for the tree module:
- NodeType: StrEnum of the six value kinds
- MISSING: sentinel for "no node at this path"
- node_type_of: the value classifier
- TreeBuilder: converts host values and JSON text into canonical trees
- field_path / array_path / get_node: node addressing
- render: compact JSON rendering for messages
"""

from json_unit_diff.tree.builder import JsonConversionError, TreeBuilder, quote_if_needed
from json_unit_diff.tree.nodes import MISSING, NodeType, node_type_of
from json_unit_diff.tree.paths import array_path, field_path, get_node, is_valid_path
from json_unit_diff.tree.render import quote_text_value, render, render_list

__all__ = [
    "MISSING",
    "JsonConversionError",
    "NodeType",
    "TreeBuilder",
    "array_path",
    "field_path",
    "get_node",
    "is_valid_path",
    "node_type_of",
    "quote_if_needed",
    "quote_text_value",
    "render",
    "render_list",
]
