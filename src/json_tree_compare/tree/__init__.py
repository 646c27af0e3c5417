"""Tree subpackage for JSON-to-tree conversion primitives.

Re-exports the public API for the tree module:
- DocumentNode: a node of the document tree with an incremental fingerprint
- NodeKind: StrEnum of the five node kinds (TEXT, NUMBER, BOOLEAN, ARRAY, OBJECT)
- TreeBuilder: converts any valid JSON value into a DocumentNode tree
"""

from json_tree_compare.tree.builder import TreeBuilder
from json_tree_compare.tree.nodes import DocumentNode, NodeKind

__all__ = ["DocumentNode", "NodeKind", "TreeBuilder"]
