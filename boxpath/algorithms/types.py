from __future__ import annotations

import struct
from dataclasses import dataclass, field
from functools import total_ordering
from typing import List, Optional, Tuple

# (mantissa, exponent, sign)
DecodedFloat = Tuple[int, int, int]


def integer_decode(value: float) -> DecodedFloat:
    """Split a 64-bit float into its (mantissa, exponent, sign) integers.

    Two floats decode identically iff they have the same bit pattern, so
    ``-0.0`` and ``0.0`` differ and a NaN decodes equal to itself.
    """
    (bits,) = struct.unpack(">Q", struct.pack(">d", value))
    sign = 1 if bits >> 63 == 0 else -1
    exponent = (bits >> 52) & 0x7FF
    if exponent == 0:
        mantissa = (bits & 0xFFFFFFFFFFFFF) << 1
    else:
        mantissa = (bits & 0xFFFFFFFFFFFFF) | 0x10000000000000
    return mantissa, exponent - 1075, sign


@total_ordering
@dataclass(frozen=True, eq=False)
class Coordinate:
    """A point on the plane.

    Notes
    -----
    - Equality and hashing go through ``integer_decode`` on both axes rather
      than float ``==``, so coordinates are safe set/dict keys.
    - Ordering is plain lexicographic float ordering on (x, y).
    """

    x: float
    y: float
    _key: Tuple[DecodedFloat, DecodedFloat] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        # decoded once; every set/dict probe in a search hashes these
        object.__setattr__(self, "_key", (integer_decode(self.x), integer_decode(self.y)))

    def as_int_tuple(self) -> Tuple[DecodedFloat, DecodedFloat]:
        return self._key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return self.as_int_tuple() == other.as_int_tuple()

    def __hash__(self) -> int:
        return hash(self.as_int_tuple())

    def __lt__(self, other: Coordinate) -> bool:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return (self.x, self.y) < (other.x, other.y)


@dataclass(frozen=True)
class Diagonal:
    """A diagonal neighbour and the two orthogonal cells it cuts between.

    The move to ``point`` is only allowed when neither coordinate in
    ``route_sides`` is blocked.
    """

    point: Coordinate
    route_sides: Tuple[Coordinate, Coordinate]


@dataclass(frozen=True)
class PathNode:
    point: Coordinate
    heuristic: float
    source: Optional[Coordinate] = None

    @classmethod
    def initial(cls, point: Coordinate, heuristic: float) -> PathNode:
        return cls(point=point, heuristic=heuristic, source=None)


@dataclass
class SearchOptions:
    return_visited: bool = False
    max_visited: int = 50000
    # None means unbounded; otherwise the search gives up after this many expansions.
    max_steps: Optional[int] = None


@dataclass
class SearchResult:
    path: List[PathNode]
    visited: List[Coordinate] = field(default_factory=list)
    expanded: int = 0
