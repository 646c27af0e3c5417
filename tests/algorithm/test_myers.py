"""Tests for the Myers edit-script aligner.

Covers:
- Exact edit scripts for character and integer sequences
- Script serialisation
- Minimality (edit count = |A| + |B| - 2 * LCS) and replay (A + script -> B),
  on fixed cases and on seeded random pairs
- Mirror symmetry when the sequences differ in length, and its absence for
  equal lengths
- Key functions and SAME recording
- The max_diffs exploration budget
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Any

import pytest

from json_tree_compare.algorithm.myers import (
    DEFAULT_MAX_DIFFS,
    DiffEntry,
    DiffType,
    compare_sequences,
    serialize_diffs,
)

ADD = DiffType.ADD
DELETE = DiffType.DELETE
SAME = DiffType.SAME


def d(element: Any, diff_type: DiffType, a_idx: int, b_idx: int) -> DiffEntry:
    return DiffEntry(element, diff_type, a_idx, b_idx)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _lcs_length(a: Sequence[Any], b: Sequence[Any]) -> int:
    """Classic O(n*m) longest-common-subsequence length."""
    prev = [0] * (len(b) + 1)
    for x in a:
        cur = [0]
        for j, y in enumerate(b):
            cur.append(prev[j] + 1 if x == y else max(prev[j + 1], cur[j]))
        prev = cur
    return prev[-1]


def _replay(a: Sequence[Any], diffs: list[DiffEntry]) -> list[Any]:
    """Apply an edit script to ``a``: drop DELETE indices, insert ADD elements."""
    deleted = {e.a_idx for e in diffs if e.diff_type == DELETE}
    result = [x for i, x in enumerate(a) if i not in deleted]
    for entry in sorted((e for e in diffs if e.diff_type == ADD), key=lambda e: e.b_idx):
        result.insert(entry.b_idx, entry.element)
    return result


def _mirror(diffs: list[DiffEntry]) -> list[DiffEntry]:
    swap = {ADD: DELETE, DELETE: ADD, SAME: SAME}
    return [DiffEntry(e.element, swap[e.diff_type], e.b_idx, e.a_idx) for e in diffs]


STRING_CASES = [
    ("abc", "abd", [d("c", DELETE, 2, -1), d("d", ADD, -1, 2)]),
    (
        "abcdef",
        "dacfea",
        [
            d("d", ADD, -1, 0),
            d("b", DELETE, 1, -1),
            d("d", DELETE, 3, -1),
            d("e", DELETE, 4, -1),
            d("e", ADD, -1, 4),
            d("a", ADD, -1, 5),
        ],
    ),
    (
        "acbdeacbed",
        "acebdabbabed",
        [
            d("e", ADD, -1, 2),
            d("e", DELETE, 4, -1),
            d("c", DELETE, 6, -1),
            d("b", ADD, -1, 7),
            d("a", ADD, -1, 8),
            d("b", ADD, -1, 9),
        ],
    ),
    (
        "acebdabbabed",
        "acbdeacbed",
        [
            d("e", DELETE, 2, -1),
            d("e", ADD, -1, 4),
            d("c", ADD, -1, 6),
            d("b", DELETE, 7, -1),
            d("a", DELETE, 8, -1),
            d("b", DELETE, 9, -1),
        ],
    ),
    (
        "abcbda",
        "bdcaba",
        [
            d("a", DELETE, 0, -1),
            d("d", ADD, -1, 1),
            d("a", ADD, -1, 3),
            d("d", DELETE, 4, -1),
        ],
    ),
    ("bokko", "bokkko", [d("k", ADD, -1, 4)]),
    (
        "abcaaaaaabd",
        "abdaaaaaabc",
        [
            d("c", DELETE, 2, -1),
            d("d", ADD, -1, 2),
            d("d", DELETE, 10, -1),
            d("c", ADD, -1, 10),
        ],
    ),
    ("", "", []),
    ("a", "", [d("a", DELETE, 0, -1)]),
    ("", "b", [d("b", ADD, -1, 0)]),
    ("Привет!", "Прювет!", [d("и", DELETE, 2, -1), d("ю", ADD, -1, 2)]),
    ("ab", "ba", [d("a", DELETE, 0, -1), d("a", ADD, -1, 1)]),
]

INT_CASES = [
    (
        [1, 2, 3, 4, 5, 6, 6, 6, 7, 8, 9],
        [1, 2, 3, 4, 5, 0, 7, 8, 9],
        [d(6, DELETE, 5, -1), d(6, DELETE, 6, -1), d(6, DELETE, 7, -1), d(0, ADD, -1, 5)],
    ),
    ([1, 2, 3], [1, 5, 3], [d(2, DELETE, 1, -1), d(5, ADD, -1, 1)]),
    ([], [], []),
]


class TestEditScripts:
    """Exact scripts for known inputs."""

    @pytest.mark.parametrize(("a", "b", "expected"), STRING_CASES)
    def test_string_diffs(self, a: str, b: str, expected: list[DiffEntry]) -> None:
        assert compare_sequences(a, b) == expected

    @pytest.mark.parametrize(("a", "b", "expected"), INT_CASES)
    def test_integer_diffs(
        self, a: list[int], b: list[int], expected: list[DiffEntry]
    ) -> None:
        assert compare_sequences(a, b) == expected

    def test_identical_sequences(self) -> None:
        assert compare_sequences([1, 2, 3], [1, 2, 3]) == []

    def test_accepts_any_iterable(self) -> None:
        assert compare_sequences(iter("abc"), (c for c in "abd")) == STRING_CASES[0][2]


class TestSerialization:
    """serialize_diffs() output format."""

    def test_delete_and_add(self) -> None:
        diffs = compare_sequences("abc", "abd")
        assert serialize_diffs(diffs) == "-c[2<->-1]\n+d[-1<->2]\n"

    def test_same_entries(self) -> None:
        assert serialize_diffs([d("x", SAME, 0, 1)]) == "=x[0<->1]\n"

    def test_empty(self) -> None:
        assert serialize_diffs([]) == ""


class TestScriptProperties:
    """Minimality, replay and symmetry."""

    @pytest.mark.parametrize(("a", "b"), [(a, b) for a, b, _ in STRING_CASES + INT_CASES])
    def test_minimal_edit_count(self, a: Sequence[Any], b: Sequence[Any]) -> None:
        diffs = compare_sequences(a, b)
        assert len(diffs) == len(a) + len(b) - 2 * _lcs_length(a, b)

    @pytest.mark.parametrize(("a", "b"), [(a, b) for a, b, _ in STRING_CASES + INT_CASES])
    def test_replay_reproduces_b(self, a: Sequence[Any], b: Sequence[Any]) -> None:
        assert _replay(a, compare_sequences(a, b)) == list(b)

    @pytest.mark.parametrize(
        ("a", "b"),
        [("bca", "acaaaaa"), ("acaaaaa", "bca"), ("ab", "bbbbba"), ("c", "aacaa")],
    )
    def test_minimal_when_longer_tail_remains(self, a: str, b: str) -> None:
        """The path runs to the end of the longer sequence before stopping."""
        diffs = compare_sequences(a, b)
        assert len(diffs) == len(a) + len(b) - 2 * _lcs_length(a, b)
        assert _replay(a, diffs) == list(b)

    @pytest.mark.parametrize("seed", [0, 7, 42])
    def test_random_pairs_minimal_and_replayable(self, seed: int) -> None:
        rng = random.Random(seed)
        for _ in range(1000):
            a = "".join(rng.choice("abc") for _ in range(rng.randint(0, 9)))
            b = "".join(rng.choice("abc") for _ in range(rng.randint(0, 9)))
            diffs = compare_sequences(a, b)
            assert len(diffs) == len(a) + len(b) - 2 * _lcs_length(a, b), (a, b)
            assert _replay(a, diffs) == list(b), (a, b)
            if len(a) != len(b):
                assert compare_sequences(b, a) == _mirror(diffs), (a, b)

    @pytest.mark.parametrize(
        ("a", "b"),
        [
            ("bokko", "bokkko"),
            ("acbdeacbed", "acebdabbabed"),
            ("a", ""),
            ("abc", "abcd"),
            ([1, 2, 3, 4, 5, 6, 6, 6, 7, 8, 9], [1, 2, 3, 4, 5, 0, 7, 8, 9]),
        ],
    )
    def test_mirror_when_lengths_differ(self, a: Sequence[Any], b: Sequence[Any]) -> None:
        assert compare_sequences(b, a) == _mirror(compare_sequences(a, b))

    def test_equal_lengths_not_mirrored(self) -> None:
        """Equal-length inputs share one internal orientation in both directions.

        Both scripts are minimal, but ("ba", "ab") is not the mirror image of
        ("ab", "ba").
        """
        forward = compare_sequences("ab", "ba")
        backward = compare_sequences("ba", "ab")
        assert forward == [d("a", DELETE, 0, -1), d("a", ADD, -1, 1)]
        assert backward == [d("b", DELETE, 0, -1), d("b", ADD, -1, 1)]
        assert backward != _mirror(forward)

    def test_delete_carries_a_index_add_carries_b_index(self) -> None:
        for entry in compare_sequences("abcdef", "dacfea"):
            if entry.diff_type == DELETE:
                assert entry.a_idx >= 0
                assert entry.b_idx == -1
            else:
                assert entry.a_idx == -1
                assert entry.b_idx >= 0


class TestOptions:
    """key= and record_equals= keyword options."""

    def test_key_function_defines_equality(self) -> None:
        a = ["Apple", "banana"]
        b = ["apple", "BANANA"]
        assert compare_sequences(a, b, key=str.lower) == []

    def test_key_function_elements_reported_unchanged(self) -> None:
        diffs = compare_sequences(["A", "b"], ["a", "c"], key=str.lower)
        assert diffs == [d("b", DELETE, 1, -1), d("c", ADD, -1, 1)]

    def test_record_equals_adds_same_entries(self) -> None:
        diffs = compare_sequences("abc", "abd", record_equals=True)
        assert diffs == [
            d("a", SAME, 0, 0),
            d("b", SAME, 1, 1),
            d("c", DELETE, 2, -1),
            d("d", ADD, -1, 2),
        ]

    def test_record_equals_not_reversed(self) -> None:
        diffs = compare_sequences("ab", "abc", record_equals=True)
        assert diffs == [d("a", SAME, 0, 0), d("b", SAME, 1, 1), d("c", ADD, -1, 2)]


class TestMaxDiffs:
    """The exploration budget."""

    def test_default_budget(self) -> None:
        assert DEFAULT_MAX_DIFFS == 2_000_000

    def test_small_budget_gives_shorter_script(self) -> None:
        a = list("abcd")
        b = list("dcba")
        assert len(compare_sequences(a, b)) == 6
        assert len(compare_sequences(a, b, 1)) == 2

    def test_budget_terminates_on_dissimilar_sequences(self) -> None:
        a = list(range(300))
        b = list(range(1000, 1400))
        full = compare_sequences(a, b)
        bounded = compare_sequences(a, b, 10)
        assert len(full) == 700
        assert len(bounded) < len(full)

    @pytest.mark.parametrize("bad", [0, -1])
    def test_non_positive_budget_rejected(self, bad: int) -> None:
        with pytest.raises(ValueError, match="max_diffs"):
            compare_sequences("a", "b", bad)
