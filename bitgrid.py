"""
Toroidal 8x8 bit grid packed into a single 64-bit integer.

Cell (x, y) lives at bit ``63 - (8*y + x)`` once both coordinates are reduced
modulo 8: rows are bytes, row 0 is the most significant byte and column 0 is
the high bit of its row. Comparing the packed integers therefore orders grids
lexicographically by their row-major bit pattern.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from omino_types import GRID_SIZE, Point, Vector

_ROW_MASK = 0xFF
_WORD_BITS = GRID_SIZE * GRID_SIZE
_WORD_MASK = (1 << _WORD_BITS) - 1


def _wrap(i: int) -> int:
    return i % GRID_SIZE


def _bit(p: Point) -> int:
    return 1 << (_WORD_BITS - 1 - (GRID_SIZE * _wrap(p.y) + _wrap(p.x)))


def rotate_right_8(value: int, rot: int) -> int:
    """Rotate an 8-bit value right by ``rot`` (taken modulo 8)."""
    rot %= 8
    return ((value >> rot) | (value << (8 - rot))) & _ROW_MASK


def rotate_right_64(value: int, rot: int) -> int:
    """Rotate a 64-bit value right by ``rot`` (taken modulo 64)."""
    rot %= _WORD_BITS
    return ((value >> rot) | (value << (_WORD_BITS - rot))) & _WORD_MASK


@dataclass(frozen=True, order=True)
class BitGrid:
    """An 8x8 membership grid with wrap-around addressing.

    Instances are immutable; ``set`` and ``translate`` return new grids.
    """

    bits: int = 0

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> BitGrid:
        """Build a grid with every given point set."""
        bits = 0
        for p in points:
            bits |= _bit(p)
        return cls(bits)

    def set(self, p: Point) -> BitGrid:
        """Return a grid with the cell at ``p`` occupied."""
        return BitGrid(self.bits | _bit(p))

    def get(self, p: Point) -> bool:
        """Whether the cell at ``p`` is occupied."""
        return bool(self.bits & _bit(p))

    def translate(self, vec: Vector) -> BitGrid:
        """
        Move every occupied cell by ``vec``, wrapping on both axes.

        The whole pattern shifts at once: each row byte is rotated by dx, then
        the word is rotated a whole number of rows for dy.
        """
        bits = self.bits
        if _wrap(vec.dx):
            shifted = 0
            for row in range(GRID_SIZE):
                offset = (GRID_SIZE - 1 - row) * 8
                byte = (bits >> offset) & _ROW_MASK
                shifted |= rotate_right_8(byte, vec.dx) << offset
            bits = shifted
        if _wrap(vec.dy):
            bits = rotate_right_64(bits, 8 * vec.dy)
        return BitGrid(bits)

    def compare(self, other: BitGrid) -> int:
        """Return -1, 0 or +1 ordering the packed patterns as unsigned ints."""
        if self.bits < other.bits:
            return -1
        if self.bits > other.bits:
            return 1
        return 0

    def count(self) -> int:
        """Number of occupied cells."""
        return bin(self.bits).count("1")

    def cells(self) -> Iterator[Point]:
        """Yield occupied cells in row-major order, coordinates in [0, 8)."""
        for y in range(GRID_SIZE):
            for x in range(GRID_SIZE):
                p = Point(x, y)
                if self.get(p):
                    yield p

    def __str__(self) -> str:
        return "\n".join(
            "".join("#" if self.get(Point(x, y)) else "." for x in range(GRID_SIZE))
            for y in range(GRID_SIZE)
        )
