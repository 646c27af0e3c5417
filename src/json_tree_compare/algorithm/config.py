"""CompareConfig: immutable configuration for one comparison.

CompareConfig is a frozen dataclass holding the comparison switches:
whether to stop on the first discrepancy, which discrepancy messages are
known and therefore suppressed, and the sibling-alignment budget.
"""

from __future__ import annotations

from dataclasses import dataclass

from json_tree_compare.algorithm.myers import DEFAULT_MAX_DIFFS

__all__ = ["CompareConfig"]


@dataclass(frozen=True, slots=True)
class CompareConfig:
    """Immutable configuration for a comparison.

    Attributes:
        stop_on_first: Stop the tree walk at the first type, name or value
            mismatch.  Best effort: ``Children ...`` messages do not stop the
            walk, so several messages can still be reported.
        known_discrepancies: Regular expressions; a discrepancy message in
            which any of them is found (``re.search``) is dropped.  Lists are
            accepted and stored as a tuple.
        max_diffs: Upper bound on the edit-graph points explored when aligning
            one pair of sibling lists (> 0).  Exceeding it yields a shorter,
            non-minimal alignment instead of unbounded work.
    """

    stop_on_first: bool = False
    known_discrepancies: tuple[str, ...] = ()
    max_diffs: int = DEFAULT_MAX_DIFFS

    def __post_init__(self) -> None:
        patterns = self.known_discrepancies
        if isinstance(patterns, str):
            msg = "known_discrepancies must be a collection of patterns, not a single string"
            raise ValueError(msg)
        if not isinstance(patterns, tuple):
            patterns = tuple(patterns)
            # frozen: bypass __setattr__ to store the normalised value
            object.__setattr__(self, "known_discrepancies", patterns)
        for pattern in patterns:
            if not isinstance(pattern, str):
                msg = f"known_discrepancies must contain strings, got {pattern!r}"
                raise ValueError(msg)
        if self.max_diffs <= 0:
            msg = f"max_diffs must be > 0, got {self.max_diffs}"
            raise ValueError(msg)
