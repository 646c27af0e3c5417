"""ComparisonResult dataclass for comparison output.

This module provides the result type returned by ``JsonComparator.compare()``.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ComparisonResult"]


@dataclass(frozen=True, slots=True)
class ComparisonResult:
    """Result of one comparison.

    Attributes:
        messages: Discrepancy messages that survived suppression, in emission
            order.  Empty when the documents are structurally equal.
        computation_time_ms: Wall-clock duration of the comparison in
            milliseconds, parsing included.
    """

    messages: list[str]
    computation_time_ms: float

    @property
    def has_differences(self) -> bool:
        """True if at least one discrepancy was reported."""
        return bool(self.messages)
