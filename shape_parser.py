"""
Parsing utilities for writing n-ominoes as text.

Accepts two formats:
1. Concise format with one character per cell, rows separated by | or newlines
2. Rendered format with two characters per cell, as produced by ascii_render
"""

from __future__ import annotations

from collections import deque
from typing import Iterable

from bitgrid import BitGrid
from nomino import Shape
from omino_types import DIRECTION_VECTORS, MAX_SQUARES, ORIGIN, Point

__all__ = ["is_connected", "parse_shape", "parse_rendered", "shape_from_cells"]

FILLED_CHARS = frozenset("#X")
EMPTY_CHARS = frozenset("._ ")


def is_connected(cells: Iterable[Point]) -> bool:
    """Whether the cells form one edge-connected region (flood fill)."""
    remaining = set(cells)
    if not remaining:
        return False

    start = remaining.pop()
    q = deque([start])
    while q:
        p = q.popleft()
        for vec in DIRECTION_VECTORS.values():
            nb = p + vec
            if nb in remaining:
                remaining.remove(nb)
                q.append(nb)
    return not remaining


def shape_from_cells(cells: Iterable[Point]) -> Shape:
    """
    Build a complete, canonical shape from a set of cells.

    Raises:
        ValueError: If there are no cells, too many cells, or they are not connected
    """
    points = set(cells)
    if not points:
        raise ValueError("Shape has no filled cells")
    if len(points) > MAX_SQUARES:
        raise ValueError(
            f"Shape has {len(points)} filled cells\n"
            f"  At most {MAX_SQUARES} cells fit the grid"
        )
    if not is_connected(points):
        raise ValueError(
            f"Shape is not connected\n"
            f"  Cells: {sorted((p.x, p.y) for p in points)}"
        )

    min_x = min(p.x for p in points)
    min_y = min(p.y for p in points)
    max_x = max(p.x for p in points)
    max_y = max(p.y for p in points)

    shift = ORIGIN - Point(min_x, min_y)
    moved = [p + shift for p in points]
    first = min(moved, key=lambda p: (p.y, p.x))
    return Shape(
        grid=BitGrid.from_points(moved),
        cursor=first,
        extent_min=ORIGIN,
        extent_max=Point(max_x, max_y) + shift,
        squares_left=0,
    )


def _split_rows(definition: str) -> list[str]:
    text = definition.strip("\n")
    if "|" in text:
        return text.split("|")
    return text.split("\n")


def parse_shape(definition: str) -> Shape:
    """
    Parse a shape from the concise format.

    Format:
    - Rows separated by | (or by newlines when no | is present)
    - One character per cell:
      * '#' or 'X': filled cell
      * '.', '_' or space: empty cell
    - Definitions containing '[' are read two characters per cell instead,
      '[]' filled and two spaces empty (see parse_rendered)
    - Rows may have different lengths; missing cells are empty

    Example:
        "##|#." or "##\\n#." -> the L-tromino with cells (0,0), (1,0), (0,1)

    Args:
        definition: Shape definition string

    Returns:
        Complete, canonical Shape

    Raises:
        ValueError: On invalid characters or an invalid cell set
    """
    if "[" in definition:
        return parse_rendered("\n".join(_split_rows(definition)))

    cells: list[Point] = []
    for row_idx, row_str in enumerate(_split_rows(definition)):
        for col_idx, char in enumerate(row_str):
            if char in FILLED_CHARS:
                cells.append(Point(col_idx, row_idx))
            elif char not in EMPTY_CHARS:
                raise ValueError(
                    f"Invalid character '{char}' in shape definition\n"
                    f"  Row {row_idx}: \"{row_str}\"\n"
                    f"  Position: column {col_idx}\n"
                    f"  Valid characters: '#' or 'X' (filled), '.', '_' or space (empty)"
                )
    return shape_from_cells(cells)


def parse_rendered(text: str) -> Shape:
    """
    Parse a shape from rendered output ('[]' filled, two spaces empty).

    Leading and trailing blank lines are ignored.

    Raises:
        ValueError: On cells that are neither '[]' nor two spaces
    """
    rows = text.split("\n")
    while rows and not rows[0].strip():
        rows.pop(0)
    while rows and not rows[-1].strip():
        rows.pop()

    cells: list[Point] = []
    for row_idx, row_str in enumerate(rows):
        if len(row_str) % 2:
            row_str += " "
        for col_idx in range(len(row_str) // 2):
            glyph = row_str[2 * col_idx : 2 * col_idx + 2]
            if glyph == "[]":
                cells.append(Point(col_idx, row_idx))
            elif glyph != "  ":
                raise ValueError(
                    f"Invalid glyph '{glyph}' in rendered shape\n"
                    f"  Row {row_idx}: \"{row_str}\"\n"
                    f"  Position: cell {col_idx}\n"
                    f"  Valid glyphs: '[]' (filled), '  ' (empty)"
                )
    return shape_from_cells(cells)
