from __future__ import annotations

import heapq
from itertools import count
from typing import Dict, Iterable, List, Optional, Tuple

from .errors import ReconstructionInvariantViolation
from .types import Coordinate, PathNode


class SearchState:
    """Frontier plus completed set for one search.

    Notes
    -----
    - The frontier is a heap on (heuristic, insertion number). That pops in
      the same order as a stable ascending sort by heuristic over everything
      queued so far. Its head is the active node while that node is being
      expanded.
    - ``completed`` holds expanded nodes in expansion order; ``_index`` maps
      each completed coordinate to its position there, so parents are looked
      up by coordinate without a linear scan.
    - The frontier may hold several entries for one coordinate (queued from
      different parents). Only the first to reach the head is expanded.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[float, int, PathNode]] = []
        self._seq = count()
        self.completed: List[PathNode] = []
        self._index: Dict[Coordinate, int] = {}

    def __contains__(self, point: Coordinate) -> bool:
        return point in self._index

    def __len__(self) -> int:
        return len(self.completed)

    @property
    def frontier(self) -> List[PathNode]:
        """Queued nodes in selection order (a copy)."""
        return [node for _, _, node in sorted(self._heap)]

    def mark_completed(self, node: PathNode) -> None:
        if node.point in self._index:
            raise ReconstructionInvariantViolation(f"{node.point} was completed twice")
        self._index[node.point] = len(self.completed)
        self.completed.append(node)

    def lookup(self, point: Coordinate) -> Optional[PathNode]:
        i = self._index.get(point)
        return None if i is None else self.completed[i]

    def advance(self, candidates: Iterable[PathNode]) -> None:
        """Retire the expanded head and queue ``candidates``."""
        if self._heap:
            heapq.heappop(self._heap)
        for node in candidates:
            heapq.heappush(self._heap, (node.heuristic, next(self._seq), node))
        while self._heap and self._heap[0][2].point in self._index:
            heapq.heappop(self._heap)

    def head(self) -> Optional[PathNode]:
        return self._heap[0][2] if self._heap else None

    def completed_path(self, terminal: PathNode) -> List[PathNode]:
        """Walk parent pointers from ``terminal`` back to the origin.

        Returns the nodes in origin -> terminal order.
        """
        out: List[PathNode] = [terminal]
        cur = terminal
        while cur.source is not None:
            parent = self.lookup(cur.source)
            if parent is None:
                raise ReconstructionInvariantViolation(
                    f"Unable to find parent node {cur.source} of {cur.point}"
                )
            out.append(parent)
            if len(out) > len(self.completed):
                raise ReconstructionInvariantViolation("Parent pointers form a cycle")
            cur = parent
        out.reverse()
        return out
