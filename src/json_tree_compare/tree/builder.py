"""TreeBuilder: converts any parsed JSON value into a DocumentNode tree.

Root shape:
- A top-level list becomes an unnamed ARRAY root.
- A top-level dict becomes an unnamed OBJECT root.
- A top-level scalar becomes the single unnamed child of an OBJECT root.

JSON ``null`` has no node kind.  Null fields and null array elements are
skipped, and indices stay contiguous over the nodes actually created.

The conversion is iterative.  Nodes are created top-down (a child needs its
parent at construction time so that its array index can be fingerprinted) and
attached bottom-up, so every child is complete before its fingerprint is
folded into its parent.  Nesting depth is therefore bounded by memory, not by
the interpreter's recursion limit.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from json_tree_compare.tree.nodes import DocumentNode, NodeKind, as_double

__all__ = ["JsonValue", "TreeBuilder"]

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


@dataclass
class TreeBuilder:
    """Converts any valid JSON value into a DocumentNode tree.

    The dispatch order matters: bool MUST be checked before int because bool
    is a subclass of int in Python (``isinstance(True, int)`` is True).

    Example::

        builder = TreeBuilder()
        tree = builder.build({"a": [1, 2]})
        # tree: OBJECT("") -> ARRAY("a") -> NUMBER(1.0), NUMBER(2.0)
        tree.child(0).child(1).path()   # "/a/[1]"
    """

    def build(self, value: JsonValue) -> DocumentNode:
        """Convert a JSON value to a DocumentNode tree.

        Args:
            value: Any valid JSON value (dict, list, str, int, float, bool, None).

        Returns:
            The root DocumentNode (parent None, index 0).

        Raises:
            TypeError: If the value, or anything nested in it, is not a JSON type.
        """
        if isinstance(value, list):
            root = DocumentNode("", NodeKind.ARRAY)
            entries: Iterable[tuple[str, Any]] = (("", item) for item in value)
        elif isinstance(value, dict):
            root = DocumentNode("", NodeKind.OBJECT)
            entries = value.items()
        else:
            root = DocumentNode("", NodeKind.OBJECT)
            entries = (("", value),)

        # (node, children awaiting attachment) in the order nodes were expanded
        expanded: list[tuple[DocumentNode, list[DocumentNode]]] = []
        pending: list[tuple[DocumentNode, Iterable[tuple[str, Any]]]] = [(root, entries)]

        while pending:
            node, node_entries = pending.pop()
            children: list[DocumentNode] = []
            for name, item in node_entries:
                if item is None:
                    continue
                child = self._make_node(name, item, node, len(children))
                children.append(child)
                if isinstance(item, dict):
                    pending.append((child, item.items()))
                elif isinstance(item, list):
                    pending.append((child, (("", element) for element in item)))
            expanded.append((node, children))

        # A node is always expanded after its parent, so walking the list
        # backwards completes every subtree before it is attached.
        for node, children in reversed(expanded):
            for child in children:
                node.add_child(child)

        return root

    def _make_node(
        self, name: str, item: Any, parent: DocumentNode, index: int
    ) -> DocumentNode:
        """Create the (still childless) node for one field or array element."""
        # CRITICAL: bool MUST be checked before int -- bool subclasses int in Python
        if isinstance(item, bool):
            kind = NodeKind.BOOLEAN
            value: str | float | None = float(item)
        elif isinstance(item, str):
            kind = NodeKind.TEXT
            value = item
        elif isinstance(item, (int, float)):
            kind = NodeKind.NUMBER
            value = as_double(item)
        elif isinstance(item, dict):
            kind = NodeKind.OBJECT
            value = None
        elif isinstance(item, list):
            kind = NodeKind.ARRAY
            value = None
        else:
            msg = f"Unsupported JSON value type: {type(item)!r}"
            raise TypeError(msg)
        return DocumentNode(name, kind, value, index=index, parent=parent)
