"""
Shared type definitions for the n-omino generator.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Shapes never exceed this many squares, so they always fit the 8x8 torus.
MAX_SQUARES = 7
GRID_SIZE = 8


class Direction(Enum):
    """Cardinal direction for growth."""

    N = "N"  # Up (decreasing y)
    E = "E"  # Right (increasing x)
    S = "S"  # Down (increasing y)
    W = "W"  # Left (decreasing x)


@dataclass(frozen=True)
class Vector:
    """A displacement on the grid."""

    dx: int
    dy: int

    def __neg__(self) -> Vector:
        return Vector(-self.dx, -self.dy)


@dataclass(frozen=True)
class Point:
    """An (x, y) coordinate. Unbounded; the grid wraps it."""

    x: int
    y: int

    def __add__(self, vec: Vector) -> Point:
        return Point(self.x + vec.dx, self.y + vec.dy)

    def __sub__(self, other: Point) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)


ORIGIN = Point(0, 0)

DIRECTION_VECTORS: dict[Direction, Vector] = {
    Direction.N: Vector(0, -1),
    Direction.E: Vector(1, 0),
    Direction.S: Vector(0, 1),
    Direction.W: Vector(-1, 0),
}

# Order in which the directions of one combination are added and followed.
DIRECTION_ORDER: tuple[Direction, ...] = (Direction.N, Direction.E, Direction.S, Direction.W)


def unit_vector(direction: Direction) -> Vector:
    """Return the unit vector for a direction."""
    return DIRECTION_VECTORS[direction]


@dataclass(frozen=True)
class DirectionCombo:
    """A set of directions applied together as one growth step."""

    directions: frozenset[Direction]
    squares: int

    def ordered(self) -> tuple[Direction, ...]:
        """Directions of this combination in N, E, S, W order."""
        return tuple(d for d in DIRECTION_ORDER if d in self.directions)

    def __str__(self) -> str:
        return "+".join(d.value for d in reversed(self.ordered()))


def _combo(*directions: Direction) -> DirectionCombo:
    return DirectionCombo(frozenset(directions), len(directions))


_N, _E, _S, _W = Direction.N, Direction.E, Direction.S, Direction.W

# Search edge set, in priority order. The lone West step is absent; the
# enumerated counts depend on this exact table.
DIRECTION_COMBOS: tuple[DirectionCombo, ...] = (
    _combo(_N),
    _combo(_E),
    _combo(_E, _N),
    _combo(_S),
    _combo(_S, _N),
    _combo(_S, _E),
    _combo(_S, _E, _N),
    _combo(_W, _N),
    _combo(_W, _E),
    _combo(_W, _E, _N),
    _combo(_W, _S),
    _combo(_W, _S, _N),
    _combo(_W, _S, _E),
    _combo(_W, _S, _E, _N),
)
