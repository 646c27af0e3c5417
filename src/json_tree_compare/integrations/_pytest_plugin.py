"""pytest plugin for json-tree-compare.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import pytest

from json_tree_compare import CompareConfig, compare


@pytest.fixture(scope="session")
def assert_json_matches() -> Any:
    """Fixture that returns a callable JSON structural-equality asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to compare() which creates a fresh JsonComparator per call).

    Usage in tests::

        def test_response(assert_json_matches):
            assert_json_matches(response.text, expected_text)

        def test_ignoring_timestamps(assert_json_matches):
            assert_json_matches(actual, expected, known_discrepancies=[r"path='/ts'"])

    Returns:
        A callable ``_assert(actual, expected, stop_on_first=False,
        known_discrepancies=(), config=None) -> None`` that raises
        ``AssertionError`` listing every discrepancy.
    """

    def _assert(
        actual: Any,
        expected: Any,
        stop_on_first: bool = False,
        known_discrepancies: Iterable[str] = (),
        config: CompareConfig | None = None,
    ) -> None:
        """Assert that two JSON documents are structurally equal.

        Args:
            actual:              The JSON produced by the code under test.
            expected:            The expected/reference JSON.
            stop_on_first:       Stop at the first type, name or value mismatch.
            known_discrepancies: Regular expressions of acceptable discrepancies.
            config:              Optional CompareConfig overriding the switches.

        Raises:
            AssertionError: When at least one discrepancy is reported, with
                one discrepancy per line in the message.
        """
        messages = compare(
            actual,
            expected,
            stop_on_first=stop_on_first,
            known_discrepancies=known_discrepancies,
            config=config,
        )
        if messages:
            details = "\n".join(f"  {m}" for m in messages)
            raise AssertionError(
                f"JSON documents differ ({len(messages)} discrepancies):\n{details}"
            )

    return _assert
