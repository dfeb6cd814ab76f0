"""Greedy box-centre path search.

Provides:
- Coordinate / PathNode: the value types a search consumes and returns
- build_path / search: the search entry points
- SearchError and friends: failure outcomes
"""

from __future__ import annotations

from .errors import (
    InvalidBoxSize,
    NoPathFound,
    ReconstructionInvariantViolation,
    SearchError,
    SearchLimitExceeded,
)
from .greedy import build_path, search
from .types import Coordinate, Diagonal, PathNode, SearchOptions, SearchResult

__all__ = [
    "Coordinate",
    "Diagonal",
    "PathNode",
    "SearchOptions",
    "SearchResult",
    "build_path",
    "search",
    "SearchError",
    "InvalidBoxSize",
    "NoPathFound",
    "SearchLimitExceeded",
    "ReconstructionInvariantViolation",
]
