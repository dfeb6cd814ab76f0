from __future__ import annotations

from .algorithms import (
    Coordinate,
    InvalidBoxSize,
    NoPathFound,
    PathNode,
    ReconstructionInvariantViolation,
    SearchError,
    SearchLimitExceeded,
    SearchOptions,
    SearchResult,
    build_path,
    search,
)

__version__ = "0.3.0"

__all__ = [
    "Coordinate",
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
