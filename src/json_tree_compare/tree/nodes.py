"""DocumentNode dataclass and NodeKind StrEnum for JSON-to-tree representation.

A DocumentNode mirrors one JSON value.  Every node carries a 32-bit
``fingerprint`` folded incrementally from its own header (name, kind, value
and, under ARRAY parents, its index) and the fingerprints of its children in
order.  Two subtrees are equal iff their fingerprints are equal, which makes
equality an O(1) check once the tree is built.

Fingerprint composition (``zlib.crc32`` fold, in this order):

1. length-prefixed UTF-8 ``name``
2. ``kind`` value
3. ``value`` when present: length-prefixed UTF-8 for TEXT, big-endian
   IEEE-754 double for NUMBER and BOOLEAN
4. big-endian ``index`` -- only when the parent is an ARRAY
5. each child fingerprint as a big-endian unsigned 32-bit integer

The parent fingerprint is never folded in.  Object field positions are left
out so that a pure field reordering keeps each field's fingerprint and can be
detected as such.
"""

from __future__ import annotations

import struct
import zlib
from dataclasses import dataclass, field
from enum import StrEnum

__all__ = ["DocumentNode", "NodeKind", "as_double"]

_INT = struct.Struct(">i")
_UINT = struct.Struct(">I")
_DOUBLE = struct.Struct(">d")

DELIMITER = "/"


class NodeKind(StrEnum):
    """The five node kinds of a document tree.

    Values are the upper-case member names; they appear verbatim in
    ``Node types are different`` messages.
    """

    TEXT = "TEXT"
    NUMBER = "NUMBER"
    BOOLEAN = "BOOLEAN"
    ARRAY = "ARRAY"
    OBJECT = "OBJECT"

    @property
    def is_scalar(self) -> bool:
        """True for TEXT, NUMBER and BOOLEAN."""
        return self not in (NodeKind.ARRAY, NodeKind.OBJECT)


def as_double(number: float) -> float:
    """Convert a number to a double; integers beyond double range become +/-inf."""
    try:
        return float(number)
    except OverflowError:
        return float("inf") if number > 0 else float("-inf")


def _fold_bytes(data: bytes, crc: int) -> int:
    # Length prefix keeps adjacent variable-size fields from running together.
    return zlib.crc32(data, zlib.crc32(_INT.pack(len(data)), crc))


@dataclass(slots=True, eq=False)
class DocumentNode:
    """A node of the document tree.

    Attributes:
        name:        Field name; empty for array elements and the root.
        kind:        Which kind of JSON value this node holds (see NodeKind).
        value:       ``str`` for TEXT, ``float`` for NUMBER and BOOLEAN
                     (booleans become 0.0/1.0); None for ARRAY and OBJECT.
        index:       Position within the parent's children (0 for the root).
        parent:      Non-owning back-reference, used for path rendering only.
        children:    Owned child nodes in document order.
        fingerprint: 32-bit content fingerprint of this subtree.

    A child must be constructed with its future parent and then attached with
    ``add_child``::

        root = DocumentNode("", NodeKind.OBJECT)
        root.add_child(DocumentNode("a", NodeKind.NUMBER, 1, parent=root))
    """

    name: str
    kind: NodeKind
    value: str | float | None = None
    index: int = 0
    parent: DocumentNode | None = field(default=None, repr=False)
    children: list[DocumentNode] = field(default_factory=list, init=False, repr=False)
    fingerprint: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        if self.value is not None and self.kind in (NodeKind.NUMBER, NodeKind.BOOLEAN):
            self.value = as_double(self.value)

        crc = _fold_bytes(self.name.encode("utf-8"), 0)
        crc = zlib.crc32(self.kind.value.encode("ascii"), crc)
        if isinstance(self.value, str):
            crc = _fold_bytes(self.value.encode("utf-8"), crc)
        elif self.value is not None:
            crc = zlib.crc32(_DOUBLE.pack(self.value), crc)
        if self.parent is not None and self.parent.kind == NodeKind.ARRAY:
            crc = zlib.crc32(_INT.pack(self.index), crc)
        self.fingerprint = crc

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    def add_child(self, child: DocumentNode) -> DocumentNode:
        """Append ``child`` and fold its fingerprint into this node's.

        Args:
            child: A node constructed with ``parent=self`` whose own subtree
                is already complete.

        Returns:
            This node, so that calls can be chained.

        Raises:
            ValueError: If ``child`` was constructed for another parent.
        """
        if child.parent is not self:
            msg = f"child {child.name!r} was not constructed with this node as parent"
            raise ValueError(msg)
        self.children.append(child)
        self.fingerprint = zlib.crc32(_UINT.pack(child.fingerprint), self.fingerprint)
        return self

    @property
    def num_children(self) -> int:
        return len(self.children)

    def child(self, index: int) -> DocumentNode:
        return self.children[index]

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------

    def path(self) -> str:
        """Render the ``/``-delimited path from the root to this node.

        Each step is the node's name.  ``[index]`` is appended when the name
        alone does not identify the node among its siblings, i.e. the parent
        has two or more children and another child has the same name.  Array
        elements therefore get an index whenever the array has more than one
        element; uniquely-named object fields never do.  The root is ``/``.
        """
        steps: list[str] = []
        node = self
        while node.parent is not None:
            parent = node.parent
            if parent.num_children > 1 and _name_is_shared(node, parent):
                steps.append(f"{node.name}[{node.index}]")
            else:
                steps.append(node.name)
            node = parent
        steps.reverse()
        return DELIMITER + DELIMITER.join(steps)

    # ------------------------------------------------------------------
    # Equality by fingerprint
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, DocumentNode):
            return NotImplemented
        return self.fingerprint == other.fingerprint

    def __hash__(self) -> int:
        return self.fingerprint


def _name_is_shared(node: DocumentNode, parent: DocumentNode) -> bool:
    return any(
        sibling is not node and sibling.name == node.name
        for sibling in parent.children
    )
