"""
Fixed polyomino (n-omino) enumeration.
Grows shapes square by square on a toroidal bit grid, canonicalizes each
complete shape by translation, then sorts and deduplicates the collection.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, replace
from enum import Enum
from functools import total_ordering
from time import perf_counter
from typing import Iterable, Iterator, Protocol, TextIO

from ascii_render import render_shape, render_shapes
from bitgrid import BitGrid
from omino_types import (
    DIRECTION_COMBOS,
    MAX_SQUARES,
    ORIGIN,
    Direction,
    DirectionCombo,
    Point,
    Vector,
    unit_vector,
)

logger = logging.getLogger(__name__)


class InvalidSquareCount(ValueError):
    """Raised when a square count outside [1, MAX_SQUARES] is requested."""

    def __init__(self, n: object) -> None:
        super().__init__(
            f"Invalid square count: {n!r}\n"
            f"  Expected an integer in [1, {MAX_SQUARES}]"
        )
        self.n = n


# =============================================================================
# Collisions
# =============================================================================


class CollisionReason(Enum):
    """Why a square could not be added."""

    OCCUPIED = "occupied"  # Destination already holds a square
    NO_SQUARES_LEFT = "no_squares_left"  # Shape already has N squares


@dataclass(frozen=True)
class Collision:
    """Failed growth step. Returned, never raised."""

    reason: CollisionReason
    position: Point


# =============================================================================
# Shape
# =============================================================================


@total_ordering
@dataclass(frozen=True, eq=False)
class Shape:
    """
    A partial or complete n-omino.

    Only the grid takes part in equality and ordering; the cursor and the
    extents are construction state.

    Attributes:
        grid: Occupied cells
        cursor: Occupied cell the search currently grows from
        extent_min: Minimum corner of the bounding box
        extent_max: Maximum corner of the bounding box
        squares_left: Squares still to add before the shape is complete
    """

    grid: BitGrid
    cursor: Point
    extent_min: Point
    extent_max: Point
    squares_left: int

    @classmethod
    def new(cls, n: int) -> Shape:
        """A single square at the origin that still needs ``n - 1`` more."""
        return cls(
            grid=BitGrid().set(ORIGIN),
            cursor=ORIGIN,
            extent_min=ORIGIN,
            extent_max=ORIGIN,
            squares_left=n - 1,
        )

    @property
    def is_complete(self) -> bool:
        return self.squares_left == 0

    @property
    def width(self) -> int:
        return self.extent_max.x - self.extent_min.x + 1

    @property
    def height(self) -> int:
        return self.extent_max.y - self.extent_min.y + 1

    def add(self, direction: Direction) -> Shape | Collision:
        """
        Claim the cell next to the cursor in ``direction``.

        The cursor does not move. On collision the shape is unchanged and a
        Collision describing the failure is returned instead.
        """
        pos = self.cursor + unit_vector(direction)

        if self.grid.get(pos):
            return Collision(CollisionReason.OCCUPIED, pos)
        if self.squares_left < 1:
            return Collision(CollisionReason.NO_SQUARES_LEFT, pos)

        return replace(
            self,
            grid=self.grid.set(pos),
            extent_min=Point(min(pos.x, self.extent_min.x), min(pos.y, self.extent_min.y)),
            extent_max=Point(max(pos.x, self.extent_max.x), max(pos.y, self.extent_max.y)),
            squares_left=self.squares_left - 1,
        )

    def add_combo(self, combo: DirectionCombo) -> Shape | Collision:
        """Add every direction of ``combo`` from the same cursor, all or nothing."""
        shape: Shape = self
        for direction in combo.ordered():
            result = shape.add(direction)
            if isinstance(result, Collision):
                return result
            shape = result
        return shape

    def follow(self, direction: Direction) -> Shape:
        """Move the cursor one step. The destination must already be claimed."""
        return replace(self, cursor=self.cursor + unit_vector(direction))

    def canonicalize(self) -> Shape:
        """Translate the shape so its bounding box starts at (0, 0)."""
        shift = ORIGIN - self.extent_min
        if shift == Vector(0, 0):
            return self
        return replace(
            self,
            grid=self.grid.translate(shift),
            cursor=self.cursor + shift,
            extent_min=ORIGIN,
            extent_max=self.extent_max + shift,
        )

    def compare(self, other: Shape) -> int:
        return self.grid.compare(other.grid)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Shape):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other: Shape) -> bool:
        return self.compare(other) < 0

    def __hash__(self) -> int:
        return hash(self.grid)

    def cells(self) -> Iterator[Point]:
        """Yield occupied cells inside the bounding box, row by row."""
        for y in range(self.extent_min.y, self.extent_max.y + 1):
            for x in range(self.extent_min.x, self.extent_max.x + 1):
                p = Point(x, y)
                if self.grid.get(p):
                    yield p

    def __str__(self) -> str:
        return render_shape(self).strip("\n")


# =============================================================================
# Enumeration
# =============================================================================


class ShapeSink(Protocol):
    """Anything completed shapes can be appended to."""

    def append(self, shape: Shape, /) -> None: ...


@dataclass(frozen=True)
class GenerationStats:
    """Summary of one enumeration run."""

    n: int
    leaves: int  # Complete shapes reached, duplicates included
    distinct: int
    elapsed: float  # Seconds


def grow(shape: Shape, shapes: ShapeSink) -> None:
    """
    Recursively extend ``shape`` until it is complete.

    For each direction combination, every direction is claimed from the current
    cursor; if any collides the combination is skipped. Otherwise one
    continuation is spawned per direction with the cursor moved onto that
    newly claimed cell. Complete shapes are canonicalized and appended to
    ``shapes``.
    """
    if shape.is_complete:
        shapes.append(shape.canonicalize())
        return

    for combo in DIRECTION_COMBOS:
        grown = shape.add_combo(combo)
        if isinstance(grown, Collision):
            logger.debug(
                "grow: pruned %s at %s (%s)", combo, grown.position, grown.reason.value
            )
            continue

        for direction in combo.ordered():
            grow(grown.follow(direction), shapes)


def sort_unique(shapes: Iterable[Shape]) -> list[Shape]:
    """Sort shapes and drop adjacent duplicates."""
    unique: list[Shape] = []
    for shape in sorted(shapes):
        if not unique or unique[-1] != shape:
            unique.append(shape)
    return unique


def validate_square_count(n: object) -> int:
    """Return ``n`` if it is an integer in [1, MAX_SQUARES], else raise."""
    if isinstance(n, bool) or not isinstance(n, int) or not 1 <= n <= MAX_SQUARES:
        raise InvalidSquareCount(n)
    return n


def enumerate_shapes(n: int) -> tuple[list[Shape], GenerationStats]:
    """
    Enumerate the distinct fixed n-ominoes the growth search reaches.

    Args:
        n: Number of squares, in [1, MAX_SQUARES]

    Returns:
        Tuple of (sorted unique canonical shapes, run statistics)

    Raises:
        InvalidSquareCount: If n is out of range
    """
    n = validate_square_count(n)

    start = perf_counter()
    leaves: list[Shape] = []
    grow(Shape.new(n), leaves)
    shapes = sort_unique(leaves)
    stats = GenerationStats(n, len(leaves), len(shapes), perf_counter() - start)

    logger.info(
        "enumerate_shapes: n=%d, leaves=%d, distinct=%d, elapsed=%.3fs",
        stats.n,
        stats.leaves,
        stats.distinct,
        stats.elapsed,
    )
    return shapes, stats


def generate_shapes(n: int) -> list[Shape]:
    """Sorted, unique, canonical fixed n-ominoes for ``n`` squares."""
    shapes, _ = enumerate_shapes(n)
    return shapes


def generate(n: int, out: TextIO | None = None) -> bool:
    """
    Enumerate n-ominoes and write the count and each rendering to ``out``.

    Returns:
        True on success, False (with nothing written) if n is out of range
    """
    try:
        shapes = generate_shapes(n)
    except InvalidSquareCount:
        logger.info("generate: rejected square count %r", n)
        return False

    if out is None:
        out = sys.stdout
    out.write(f"n_ominoes = {len(shapes)}\n")
    out.write(render_shapes(shapes))
    return True
