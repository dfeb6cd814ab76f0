"""
Box geometry on the continuous plane.

The plane is cut into square boxes of side ``box_size`` aligned to the
origin. Searches move between box centres: four orthogonal steps, plus four
diagonal steps that are each gated by the two orthogonal cells they pass
between (no cutting through a blocked corner).
"""

from __future__ import annotations

from math import hypot, isnan
from typing import List, Tuple

from .errors import InvalidBoxSize
from .types import Coordinate, Diagonal


def validate_box_size(box_size: float) -> float:
    if isnan(box_size) or box_size <= 0:
        raise InvalidBoxSize(box_size)
    return float(box_size)


def heuristic(a: Coordinate, b: Coordinate) -> float:
    """Straight-line distance between two coordinates."""
    return hypot(a.x - b.x, a.y - b.y)


def in_same_box(a: Coordinate, b: Coordinate, box_size: float) -> bool:
    """True if ``b`` lies inside the box of side ``box_size`` centred on ``a``.

    The box is centred on ``a`` itself, not snapped to the grid, and both
    bounds are inclusive. It answers "close enough to stop".
    """
    half = box_size / 2.0
    return (a.x - half <= b.x <= a.x + half) and (a.y - half <= b.y <= a.y + half)


def centre_of_box(point: Coordinate, box_size: float) -> Coordinate:
    box_size = validate_box_size(box_size)
    half = box_size / 2.0
    return Coordinate(
        x=point.x - point.x % box_size + half,
        y=point.y - point.y % box_size + half,
    )


def load_neighbors(point: Coordinate, box_size: float) -> Tuple[List[Coordinate], List[Diagonal]]:
    """Return the orthogonal and diagonal neighbour centres of ``point``'s box.

    Orthogonals come back as [above, below, left, right]; diagonals as
    [top_right, top_left, bottom_right, bottom_left]. "Above" is the smaller
    y, matching screen coordinates.
    """
    c = centre_of_box(point, box_size)
    s = box_size

    above = Coordinate(c.x, c.y - s)
    below = Coordinate(c.x, c.y + s)
    left = Coordinate(c.x - s, c.y)
    right = Coordinate(c.x + s, c.y)

    diagonals = [
        Diagonal(point=Coordinate(c.x + s, c.y - s), route_sides=(above, right)),
        Diagonal(point=Coordinate(c.x - s, c.y - s), route_sides=(above, left)),
        Diagonal(point=Coordinate(c.x + s, c.y + s), route_sides=(below, right)),
        Diagonal(point=Coordinate(c.x - s, c.y + s), route_sides=(below, left)),
    ]
    return [above, below, left, right], diagonals


def in_plane(point: Coordinate) -> bool:
    # The plane is first-quadrant only.
    return point.x >= 0 and point.y >= 0
