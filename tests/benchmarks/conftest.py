"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible documents. No random values.
Three tiers: 1k-element arrays, 10k-node nested objects and 1000-level
deep nesting. Each tier provides an "equal" pair (fast path only) and a
"changed" pair that forces alignment of sibling lists.
"""

from __future__ import annotations

from typing import Any

import pytest


def _records(count: int, rev: int = 0) -> list[dict[str, Any]]:
    """A list of small records, as found in API responses."""
    return [
        {"id": i, "name": f"item_{i}", "active": i % 2 == 0, "rev": rev, "tags": ["a", "b"]}
        for i in range(count)
    ]


def _make_array_pair(changed: bool) -> tuple[list[Any], list[Any]]:
    """1000 records; the changed side edits every 50th record and drops the last 10."""
    left = _records(1000)
    right = _records(1000)
    if changed:
        for i in range(0, 1000, 50):
            right[i]["rev"] = 1
        del right[-10:]
    return left, right


def _make_nested_pair(changed: bool) -> tuple[dict[str, Any], dict[str, Any]]:
    """10 sections x 10 groups x 20 leaves x 5 fields, about 10k nodes."""

    def build(mark: str) -> dict[str, Any]:
        doc: dict[str, Any] = {}
        for i in range(10):
            section: dict[str, Any] = {}
            for j in range(10):
                section[f"group_{j}"] = {
                    f"leaf_{k}": {
                        "label": f"l_{i}_{j}_{k}",
                        "weight": i * j * k,
                        "flag": k % 3 == 0,
                        "note": mark if (i + j + k) % 13 == 0 else "",
                        "extra": [k, k + 1],
                    }
                    for k in range(20)
                }
            doc[f"section_{i}"] = section
        return doc

    return build(""), build("changed" if changed else "")


def _make_deep_pair(changed: bool) -> tuple[Any, Any]:
    """1000 levels of alternating objects and arrays."""

    def build(leaf: Any) -> Any:
        value: Any = {"leaf": leaf}
        for level in range(1000):
            value = [value] if level % 2 else {"level": value, "depth": level}
        return value

    return build(1), build(2 if changed else 1)


# --- Fixtures for each size tier ---


@pytest.fixture
def pair_array_equal() -> tuple[list[Any], list[Any]]:
    """1k-record arrays, identical."""
    return _make_array_pair(changed=False)


@pytest.fixture
def pair_array_changed() -> tuple[list[Any], list[Any]]:
    """1k-record arrays with 20 edited records and 10 dropped ones."""
    return _make_array_pair(changed=True)


@pytest.fixture
def pair_nested_equal() -> tuple[dict[str, Any], dict[str, Any]]:
    """~10k-node nested objects, identical."""
    return _make_nested_pair(changed=False)


@pytest.fixture
def pair_nested_changed() -> tuple[dict[str, Any], dict[str, Any]]:
    """~10k-node nested objects with a handful of scattered text edits."""
    return _make_nested_pair(changed=True)


@pytest.fixture
def pair_deep_equal() -> tuple[Any, Any]:
    """1000-level deep documents, identical."""
    return _make_deep_pair(changed=False)


@pytest.fixture
def pair_deep_changed() -> tuple[Any, Any]:
    """1000-level deep documents differing at the innermost leaf."""
    return _make_deep_pair(changed=True)
