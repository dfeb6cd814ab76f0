from __future__ import annotations

from typing import Optional


class SearchError(Exception):
    """Base class for recoverable search outcomes reported to the caller."""


class InvalidBoxSize(SearchError, ValueError):
    def __init__(self, box_size: float):
        super().__init__(f"box_size must be > 0, got {box_size!r}")
        self.box_size = box_size


class NoPathFound(SearchError):
    """The frontier ran dry before any node reached the target's box."""

    def __init__(self, expanded: int, message: Optional[str] = None):
        super().__init__(message or f"No path found after expanding {expanded} nodes")
        self.expanded = expanded


class SearchLimitExceeded(SearchError):
    def __init__(self, max_steps: int):
        super().__init__(f"Search gave up after {max_steps} expansions")
        self.max_steps = max_steps


class ReconstructionInvariantViolation(AssertionError):
    """The completed tree is inconsistent; this is a bug, not bad input.

    Not a ``SearchError`` on purpose: callers handling ordinary failures with
    ``except SearchError`` must not swallow it.
    """
