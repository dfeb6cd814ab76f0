"""
Greedy best-first search between box centres.

What it does
------------
- Starts at ``source`` and repeatedly expands the frontier node with the
  smallest straight-line distance to ``target``.
- Stops as soon as the active node's box contains ``target``.
- There is no cost-so-far term: priority is the heuristic alone. Paths are
  locally greedy, not globally shortest, and that is the contract callers
  rely on. Do not turn this into A* without changing every caller.

Moves
-----
- Orthogonal: one box up/down/left/right.
- Diagonal: only when the target box and both orthogonal boxes it squeezes
  between are free.
- Anything with a negative x or y is off the plane.
"""

from __future__ import annotations

import logging
from typing import AbstractSet, Iterable, List, Optional

from .errors import NoPathFound, SearchLimitExceeded
from .geometry import heuristic, in_plane, in_same_box, load_neighbors, validate_box_size
from .state import SearchState
from .types import Coordinate, PathNode, SearchOptions, SearchResult

logger = logging.getLogger(__name__)


def expand_candidates(
    active: PathNode,
    target: Coordinate,
    box_size: float,
    terrain: AbstractSet[Coordinate],
    state: SearchState,
) -> List[PathNode]:
    """Return new frontier nodes reachable in one move from ``active``.

    Orthogonal survivors come first, then diagonal ones, each in the order
    ``load_neighbors`` produced them.
    """
    orthogonals, diagonals = load_neighbors(active.point, box_size)

    points: List[Coordinate] = [
        p for p in orthogonals if in_plane(p) and p not in terrain and p not in state
    ]

    for diag in diagonals:
        gate_a, gate_b = diag.route_sides
        if not (in_plane(diag.point) and in_plane(gate_a) and in_plane(gate_b)):
            continue
        if diag.point in terrain or gate_a in terrain or gate_b in terrain:
            continue
        if diag.point in state:
            continue
        points.append(diag.point)

    return [PathNode(point=p, heuristic=heuristic(p, target), source=active.point) for p in points]


def search(
    source: Coordinate,
    target: Coordinate,
    box_size: float,
    terrain: Iterable[Coordinate] = (),
    options: Optional[SearchOptions] = None,
) -> SearchResult:
    """Run one search and return the path plus search statistics.

    Raises
    ------
    InvalidBoxSize
        ``box_size`` is not strictly positive.
    NoPathFound
        Every reachable box was expanded without reaching ``target``.
    SearchLimitExceeded
        ``options.max_steps`` expansions happened without reaching ``target``.
    """
    box_size = validate_box_size(box_size)
    options = options or SearchOptions()
    blocked = frozenset(terrain)

    state = SearchState()
    active = PathNode.initial(source, heuristic(source, target))
    visited_out: List[Coordinate] = []

    logger.debug(
        "search %s -> %s box_size=%s terrain=%d", source, target, box_size, len(blocked)
    )

    while True:
        state.mark_completed(active)
        if options.return_visited and len(visited_out) < options.max_visited:
            visited_out.append(active.point)

        if in_same_box(active.point, target, box_size):
            path = state.completed_path(active)
            logger.debug("found path of %d nodes after %d expansions", len(path), len(state))
            return SearchResult(path=path, visited=visited_out, expanded=len(state))

        if options.max_steps is not None and len(state) >= options.max_steps:
            logger.debug("step limit %d reached", options.max_steps)
            raise SearchLimitExceeded(options.max_steps)

        state.advance(expand_candidates(active, target, box_size, blocked, state))

        nxt = state.head()
        if nxt is None:
            logger.debug("frontier exhausted after %d expansions", len(state))
            raise NoPathFound(expanded=len(state))
        active = nxt


def build_path(
    source: Coordinate,
    target: Coordinate,
    box_size: float,
    terrain: Iterable[Coordinate] = (),
) -> List[PathNode]:
    """Ordered PathNodes from ``source`` to the node whose box holds ``target``."""
    return search(source, target, box_size, terrain).path
