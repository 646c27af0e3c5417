"""Myers' edit-script algorithm for two ordered sequences.

Implements the O(NP) refinement of Myers' O(ND) difference algorithm
(Wu, Manber, Myers, Miller: "An O(NP) Sequence Comparison Algorithm").
The aligner knows nothing about JSON or trees: it works on any two ordered
sequences whose elements (or ``key(element)`` values) support ``==``.

Architecture:
- The shorter sequence is always the primary one (``a`` internally), which
  bounds the work by the smaller length.  When the caller's A is not shorter
  than B the roles are swapped and every recorded ADD/DELETE and index pair is
  mapped back, so results are always expressed against the caller's A and B.
- ``_EditGraph.compose`` explores furthest-reaching points diagonal band by
  diagonal band until the final diagonal reaches the end of both sequences,
  and returns the points of that path.
- ``_EditGraph.record`` walks that path and emits DiffEntry values.
- ``max_diffs`` bounds the number of explored edit-graph points.  When it is
  exceeded the search stops and only the script along the best path so far is
  returned: shorter, not minimal, and no longer a complete A -> B script.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

__all__ = [
    "DEFAULT_MAX_DIFFS",
    "DiffEntry",
    "DiffType",
    "compare_sequences",
    "serialize_diffs",
]

logger = logging.getLogger(__name__)

DEFAULT_MAX_DIFFS = 2_000_000


class DiffType(StrEnum):
    """One edit operation kind.

    - SAME:   element present in both sequences (only with ``record_equals``)
    - ADD:    element present only in B
    - DELETE: element present only in A
    """

    SAME = auto()
    ADD = auto()
    DELETE = auto()


@dataclass(frozen=True, slots=True)
class DiffEntry:
    """One operation of an edit script.

    Attributes:
        element:   The element concerned (taken from A for DELETE, from B for ADD).
        diff_type: The operation kind.
        a_idx:     Index in A, -1 for ADD entries.
        b_idx:     Index in B, -1 for DELETE entries.
    """

    element: Any
    diff_type: DiffType
    a_idx: int = -1
    b_idx: int = -1


def compare_sequences(
    a: Iterable[Any],
    b: Iterable[Any],
    max_diffs: int = DEFAULT_MAX_DIFFS,
    *,
    key: Callable[[Any], Any] | None = None,
    record_equals: bool = False,
) -> list[DiffEntry]:
    """Compute the edit script that turns ``a`` into ``b``.

    Args:
        a:             The first sequence.
        b:             The second sequence.
        max_diffs:     Maximum number of edit-graph points to explore (> 0).
        key:           Maps an element to the value compared for equality.
                       Defaults to the element itself.
        record_equals: Also emit SAME entries for common elements.

    Returns:
        The ordered edit script.  DELETE entries carry ``a_idx``, ADD entries
        carry ``b_idx``, SAME entries carry both.

    Raises:
        ValueError: If ``max_diffs`` is not positive.

    Example::

        compare_sequences("abc", "abd")
        # [DiffEntry('c', DELETE, 2, -1), DiffEntry('d', ADD, -1, 2)]
    """
    if max_diffs <= 0:
        msg = f"max_diffs must be > 0, got {max_diffs}"
        raise ValueError(msg)

    seq_a = list(a)
    seq_b = list(b)
    if len(seq_a) < len(seq_b):
        graph = _EditGraph(seq_a, seq_b, max_diffs, record_equals, reverse=False, key=key)
    else:
        graph = _EditGraph(seq_b, seq_a, max_diffs, record_equals, reverse=True, key=key)
    return graph.run()


def serialize_diffs(diffs: Iterable[DiffEntry]) -> str:
    """Render an edit script, one ``<sign><element>[<a_idx><-><b_idx>]`` line per entry.

    The sign is ``-`` for DELETE, ``+`` for ADD and ``=`` for SAME.
    """
    signs = {DiffType.DELETE: "-", DiffType.ADD: "+", DiffType.SAME: "="}
    return "".join(
        f"{signs[d.diff_type]}{d.element}[{d.a_idx}<->{d.b_idx}]\n" for d in diffs
    )


class _EditGraph:
    """Search state for one alignment.

    ``a`` is never longer than ``b``.  ``reverse`` tells whether ``a`` is the
    caller's B, in which case operations and indices are flipped on output.
    """

    def __init__(
        self,
        a: Sequence[Any],
        b: Sequence[Any],
        max_diffs: int,
        record_equals: bool,
        *,
        reverse: bool,
        key: Callable[[Any], Any] | None,
    ) -> None:
        self._a = a
        self._b = b
        self._a_keys = [key(e) for e in a] if key is not None else list(a)
        self._b_keys = [key(e) for e in b] if key is not None else list(b)
        self._max_diffs = max_diffs
        self._record_equals = record_equals
        self._reverse = reverse
        self._diffs: list[DiffEntry] = []
        # Search state
        self._paths: list[int] = []
        self._points: list[tuple[int, int, int]] = []

    def run(self) -> list[DiffEntry]:
        coords, exhausted = self._compose()
        if exhausted:
            logger.debug(
                "Edit-graph budget of %d points exhausted; returning partial script",
                self._max_diffs,
            )
        self._record(coords)
        return self._diffs

    # ------------------------------------------------------------------
    # Path search
    # ------------------------------------------------------------------

    def _compose(self) -> tuple[list[tuple[int, int]], bool]:
        """Search the edit graph for a shortest path from (0, 0) to (m, n).

        Returns:
            The path points from the end back to the origin, and whether the
            search stopped because ``max_diffs`` was exceeded.
        """
        m = len(self._a_keys)
        n = len(self._b_keys)
        offset = m + 1
        delta = n - m
        fp = [-1] * (m + n + 3)
        self._paths = [-1] * (m + n + 3)
        self._points = []

        p = 0
        while True:
            for k in range(-p, delta):
                fp[k + offset] = self._snake(k, fp[k - 1 + offset] + 1, fp[k + 1 + offset], offset)
            for k in range(delta + p, delta, -1):
                fp[k + offset] = self._snake(k, fp[k - 1 + offset] + 1, fp[k + 1 + offset], offset)
            fp[delta + offset] = self._snake(
                delta, fp[delta - 1 + offset] + 1, fp[delta + 1 + offset], offset
            )

            # y == n on the final diagonal means x == m: both sequences consumed
            if fp[delta + offset] >= n:
                exhausted = False
                break
            if len(self._points) > self._max_diffs:
                exhausted = True
                break
            p += 1

        coords: list[tuple[int, int]] = []
        r = self._paths[delta + offset]
        while r != -1:
            x, y, r = self._points[r]
            coords.append((x, y))
        return coords, exhausted

    def _snake(self, k: int, p: int, pp: int, offset: int) -> int:
        """Follow diagonal ``k`` from the furthest reachable point; return its y."""
        if p > pp:
            r = self._paths[k - 1 + offset]
        else:
            r = self._paths[k + 1 + offset]

        y = max(p, pp)
        x = y - k
        a_keys = self._a_keys
        b_keys = self._b_keys
        while x < len(a_keys) and y < len(b_keys) and a_keys[x] == b_keys[y]:
            x += 1
            y += 1

        self._paths[k + offset] = len(self._points)
        self._points.append((x, y, r))
        return y

    # ------------------------------------------------------------------
    # Script recording
    # ------------------------------------------------------------------

    def _record(self, coords: list[tuple[int, int]]) -> None:
        """Emit entries along ``coords``, from the origin to the last point."""
        px = 0
        py = 0
        for cx, cy in reversed(coords):
            while px < cx or py < cy:
                if cy - cx > py - px:
                    self._emit_b(py)
                    py += 1
                elif cy - cx < py - px:
                    self._emit_a(px)
                    px += 1
                else:
                    if self._record_equals:
                        self._emit_same(px, py)
                    px += 1
                    py += 1

    def _emit_b(self, py: int) -> None:
        # An element only in the longer sequence.
        if self._reverse:
            self._diffs.append(DiffEntry(self._b[py], DiffType.DELETE, py, -1))
        else:
            self._diffs.append(DiffEntry(self._b[py], DiffType.ADD, -1, py))

    def _emit_a(self, px: int) -> None:
        # An element only in the shorter sequence.
        if self._reverse:
            self._diffs.append(DiffEntry(self._a[px], DiffType.ADD, -1, px))
        else:
            self._diffs.append(DiffEntry(self._a[px], DiffType.DELETE, px, -1))

    def _emit_same(self, px: int, py: int) -> None:
        if self._reverse:
            self._diffs.append(DiffEntry(self._b[py], DiffType.SAME, py, px))
        else:
            self._diffs.append(DiffEntry(self._a[px], DiffType.SAME, px, py))
