"""Change pairing and run-length summaries for sibling edit scripts.

An edit script over two child lists reports every changed child as one
DELETE (old version) plus one ADD (new version).  ``pair_changes`` matches
such DELETE/ADD entries by element name so that the differencer can descend
into the pair instead of reporting two unrelated changes.  Whatever stays
unmatched is a genuine insertion or deletion and is rendered by
``summarize_changes``.

Summary format, one range per run of consecutive indices of the same kind::

    name[start-end]:<sign><count>

``+`` marks DELETE runs and ``-`` marks ADD runs.  This is the reverse of
the usual diff notation and is kept as is because existing consumers match on
it.  Under ARRAY parents the name is empty.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from json_tree_compare.algorithm.myers import DiffEntry, DiffType

__all__ = ["ChangeSet", "pair_changes", "summarize_changes"]

_SIGNS = {DiffType.DELETE: "+", DiffType.ADD: "-"}


@dataclass(slots=True)
class ChangeSet:
    """Result of pairing one edit script.

    Attributes:
        pairs:     ``(deleted_element, added_element)`` tuples in the order they
                   were formed.  The first element always comes from A.
        unmatched: ADD/DELETE entries left without a partner, in script order.
    """

    pairs: list[tuple[Any, Any]] = field(default_factory=list)
    unmatched: list[DiffEntry] = field(default_factory=list)


def _name(entry: DiffEntry) -> str:
    return getattr(entry.element, "name", "")


def pair_changes(diffs: list[DiffEntry]) -> ChangeSet:
    """Pair DELETE and ADD entries whose elements share a name.

    The script is scanned in order.  For each entry that is still unmatched,
    the nearest following unmatched entry of the opposite kind with an equal
    ``name`` becomes its partner.  SAME entries are ignored.

    Args:
        diffs: An edit script produced by ``compare_sequences``.

    Returns:
        A ChangeSet with the pairs and the remaining unmatched entries.
    """
    changes = [d for d in diffs if d.diff_type != DiffType.SAME]
    consumed = [False] * len(changes)
    result = ChangeSet()

    for i, entry in enumerate(changes):
        if consumed[i]:
            continue
        name = _name(entry)
        for j in range(i + 1, len(changes)):
            other = changes[j]
            if consumed[j] or other.diff_type == entry.diff_type or _name(other) != name:
                continue
            consumed[i] = consumed[j] = True
            if entry.diff_type == DiffType.DELETE:
                result.pairs.append((entry.element, other.element))
            else:
                result.pairs.append((other.element, entry.element))
            break

    result.unmatched = [d for d, used in zip(changes, consumed, strict=True) if not used]
    return result


@dataclass(slots=True)
class _Run:
    first: DiffEntry
    start: int
    end: int
    count: int = 1


def _position(entry: DiffEntry) -> int:
    return entry.a_idx if entry.diff_type == DiffType.DELETE else entry.b_idx


def summarize_changes(unmatched: list[DiffEntry], array_parent: bool = False) -> str:
    """Compress unmatched entries into ``name[start-end]:<sign><count>`` ranges.

    Entries of the same kind with consecutive indices (``a_idx`` for DELETE,
    ``b_idx`` for ADD) form one range, named after its first element.  Ranges
    are listed in the order their first entry appears in the script and
    joined with ``", "``.

    Args:
        unmatched:    Unmatched entries in script order (see ``pair_changes``).
        array_parent: True when the compared children belong to an ARRAY, in
                      which case range names are left empty.

    Returns:
        The summary text; empty when there are no entries.
    """
    runs: list[_Run] = []
    last_run: dict[DiffType, _Run] = {}

    for entry in unmatched:
        pos = _position(entry)
        run = last_run.get(entry.diff_type)
        if run is not None and pos == run.end + 1:
            run.end = pos
            run.count += 1
            continue
        run = _Run(first=entry, start=pos, end=pos)
        runs.append(run)
        last_run[entry.diff_type] = run

    parts = []
    for run in runs:
        name = "" if array_parent else _name(run.first)
        sign = _SIGNS[run.first.diff_type]
        parts.append(f"{name}[{run.start}-{run.end}]:{sign}{run.count}")
    return ", ".join(parts)
