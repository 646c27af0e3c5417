"""algorithm subpackage -- public API for the comparison algorithms.

Provides the generic sequence aligner, change pairing, the tree differencer
and the comparison configuration.  Import from this module (not from
sub-modules directly) to stay on the stable public interface.

Example::

    from json_tree_compare.algorithm import compare_sequences, serialize_diffs

    serialize_diffs(compare_sequences("abc", "abd"))
    # "-c[2<->-1]\\n+d[-1<->2]\\n"
"""

from __future__ import annotations

from json_tree_compare.algorithm.config import CompareConfig
from json_tree_compare.algorithm.differ import TreeDiffer
from json_tree_compare.algorithm.myers import (
    DEFAULT_MAX_DIFFS,
    DiffEntry,
    DiffType,
    compare_sequences,
    serialize_diffs,
)
from json_tree_compare.algorithm.pairing import ChangeSet, pair_changes, summarize_changes

__all__ = [
    "DEFAULT_MAX_DIFFS",
    "ChangeSet",
    "CompareConfig",
    "DiffEntry",
    "DiffType",
    "TreeDiffer",
    "compare_sequences",
    "pair_changes",
    "serialize_diffs",
    "summarize_changes",
]
