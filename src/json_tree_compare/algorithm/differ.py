"""TreeDiffer: lock-step walk over two document trees.

For each node pair:

1. Equal fingerprints: the subtrees are equal, nothing to report.
2. Kinds differ: report; stop the whole walk when ``stop_on_first``.
3. Names differ: report; same stop rule.
4. Both scalar and values differ: report; same stop rule.
5. Children:
   - identical lists (fingerprint by fingerprint): nothing to report.
   - identical once both are sorted by name: report the reordering and do
     not descend into these children.
   - otherwise align the lists with ``compare_sequences``, pair DELETE/ADD
     entries by name, walk every pair, then report what stayed unmatched.

The walk keeps an explicit work list instead of recursing, so document depth
is not limited by the interpreter stack.  Work items are taken in the order a
recursive walk would visit them: a node's own messages first, then each
paired child subtree left to right, then the node's ``Children differ``
message.

``stop_on_first`` is best effort.  Only steps 2-4 stop the walk (even when
the recorder suppresses the message); ``Children ...`` messages never do.
"""

from __future__ import annotations

import logging
from operator import attrgetter
from typing import TYPE_CHECKING

from json_tree_compare.algorithm.myers import DEFAULT_MAX_DIFFS, compare_sequences
from json_tree_compare.algorithm.pairing import pair_changes, summarize_changes
from json_tree_compare.tree.nodes import DocumentNode, NodeKind

if TYPE_CHECKING:
    from json_tree_compare.recorder import DiscrepancyRecorder

__all__ = ["TreeDiffer"]

logger = logging.getLogger(__name__)

_fingerprint = attrgetter("fingerprint")
_name = attrgetter("name")

# A work item is either a node pair to compare or a deferred message.
_Task = tuple[DocumentNode, DocumentNode] | str


class TreeDiffer:
    """Compares two document trees and reports discrepancies to a recorder.

    A differ holds no state between ``compare`` calls other than its
    configuration; callers create one per comparison together with a fresh
    recorder.

    Example::

        recorder = DiscrepancyRecorder()
        TreeDiffer(recorder).compare(builder.build(doc1), builder.build(doc2))
        recorder.messages
    """

    def __init__(
        self,
        recorder: DiscrepancyRecorder,
        stop_on_first: bool = False,
        max_diffs: int = DEFAULT_MAX_DIFFS,
    ) -> None:
        self._recorder = recorder
        self._stop_on_first = stop_on_first
        self._max_diffs = max_diffs

    def compare(self, node1: DocumentNode, node2: DocumentNode) -> None:
        """Walk both trees from the given nodes and record every discrepancy."""
        tasks: list[_Task] = [(node1, node2)]
        while tasks:
            task = tasks.pop()
            if isinstance(task, str):
                self._recorder.add_message(task)
                continue

            left, right = task
            if left.fingerprint == right.fingerprint:
                continue
            if self._kinds_differ(left, right) and self._stop_on_first:
                return
            if self._names_differ(left, right) and self._stop_on_first:
                return
            if self._values_differ(left, right) and self._stop_on_first:
                return
            tasks.extend(reversed(self._compare_children(left, right)))

    # ------------------------------------------------------------------
    # Node fields
    # ------------------------------------------------------------------

    def _kinds_differ(self, left: DocumentNode, right: DocumentNode) -> bool:
        if left.kind == right.kind:
            return False
        self._recorder.add_message(
            f"Node types are different: '{left.kind}' vs '{right.kind}', path='{left.path()}'"
        )
        return True

    def _names_differ(self, left: DocumentNode, right: DocumentNode) -> bool:
        if left.name == right.name:
            return False
        self._recorder.add_message(
            f"Node names are different: '{left.name}' vs '{right.name}', path='{left.path()}'"
        )
        return True

    def _values_differ(self, left: DocumentNode, right: DocumentNode) -> bool:
        if not (left.kind.is_scalar and right.kind.is_scalar):
            return False
        if left.value == right.value:
            return False
        self._recorder.add_message(
            f"Nodes values differ: '{left.value}' vs '{right.value}', path='{left.path()}'"
        )
        return True

    # ------------------------------------------------------------------
    # Children
    # ------------------------------------------------------------------

    def _compare_children(self, left: DocumentNode, right: DocumentNode) -> list[_Task]:
        """Compare the child lists; return the follow-up work in visiting order."""
        children1 = left.children
        children2 = right.children
        if _same_fingerprints(children1, children2):
            return []

        if _same_fingerprints(sorted(children1, key=_name), sorted(children2, key=_name)):
            # Pure reordering; the reordered children are not compared further.
            self._recorder.add_message(
                f"Children order differ for {len(children1)} nodes, path='{left.path()}'"
            )
            return []

        diffs = compare_sequences(
            children1, children2, self._max_diffs, key=_fingerprint
        )
        changes = pair_changes(diffs)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "path=%s: %d edit(s), %d modified pair(s), %d unmatched",
                left.path(),
                len(diffs),
                len(changes.pairs),
                len(changes.unmatched),
            )

        followups: list[_Task] = list(changes.pairs)
        if changes.unmatched:
            summary = summarize_changes(
                changes.unmatched, array_parent=left.kind == NodeKind.ARRAY
            )
            followups.append(
                f"Children differ: counts {len(children1)} vs {len(children2)} "
                f"(diffs: {summary}), path='{left.path()}'"
            )
        return followups


def _same_fingerprints(nodes1: list[DocumentNode], nodes2: list[DocumentNode]) -> bool:
    return len(nodes1) == len(nodes2) and all(
        n1.fingerprint == n2.fingerprint for n1, n2 in zip(nodes1, nodes2, strict=True)
    )
