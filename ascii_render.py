"""
ASCII rendering for n-ominoes.

Provides two rendering approaches:
1. Stacked rendering - each shape in turn, rows top to bottom, two characters per cell
2. Flow rendering - several shapes side by side per band, optionally colorized
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Iterable

import simple_chalk as chalk  # type: ignore[import-untyped]

from omino_types import Point

if TYPE_CHECKING:
    from nomino import Shape

logger = logging.getLogger(__name__)

FILLED = "[]"
EMPTY = "  "
CELL_WIDTH = len(FILLED)


# =============================================================================
# Stacked Rendering
# =============================================================================


def render_row(shape: Shape, row: int, filled: str = FILLED, empty: str = EMPTY) -> str:
    """Render one row of a shape across its bounding box's x-range."""
    return "".join(
        filled if shape.grid.get(Point(x, row)) else empty
        for x in range(shape.extent_min.x, shape.extent_max.x + 1)
    )


def render_shape(shape: Shape) -> str:
    """
    Render a shape as two leading blank lines followed by its rows.

    Every row, including the last, ends with a newline.
    """
    lines = ["\n\n"]
    for row in range(shape.extent_min.y, shape.extent_max.y + 1):
        lines.append(render_row(shape, row))
        lines.append("\n")
    return "".join(lines)


def render_shapes(shapes: Iterable[Shape]) -> str:
    """Render each shape in turn."""
    return "".join(render_shape(shape) for shape in shapes)


# =============================================================================
# Flow Rendering
# =============================================================================


def shape_lines(shape: Shape, colorize: Callable[[str], str] | None = None) -> list[str]:
    """Rows of a shape as strings, filled glyphs optionally colorized."""
    filled = colorize(FILLED) if colorize else FILLED
    return [
        render_row(shape, row, filled=filled)
        for row in range(shape.extent_min.y, shape.extent_max.y + 1)
    ]


def render_shapes_flow(
    shapes: Iterable[Shape],
    terminal_width: int = 80,
    spacing: int = 2,
    color: bool = False,
) -> str:
    """
    Render shapes in flow layout (as many per band as fit the width).

    Args:
        shapes: Shapes to render, in display order
        terminal_width: Maximum visible width of a band (default 80)
        spacing: Spaces between neighbouring shapes (default 2)
        color: Cycle shapes through a chalk palette

    Returns:
        Rendered string, bands separated by a blank line
    """
    colors: list[Callable[[str], str]] = [
        chalk.red,
        chalk.green,
        chalk.yellow,
        chalk.blue,
        chalk.magenta,
        chalk.cyan,
    ]

    bands: list[list[tuple[list[str], int]]] = []
    band: list[tuple[list[str], int]] = []
    band_width = 0

    for i, shape in enumerate(shapes):
        colorize = colors[i % len(colors)] if color else None
        # Visible width excludes ANSI codes, so take it from the bounding box
        width = shape.width * CELL_WIDTH
        needed = width + (spacing if band else 0)

        if band and band_width + needed > terminal_width:
            bands.append(band)
            band = []
            band_width = 0
            needed = width

        band.append((shape_lines(shape, colorize), width))
        band_width += needed

    if band:
        bands.append(band)

    logger.debug("render_shapes_flow: %d bands at width %d", len(bands), terminal_width)

    output_lines: list[str] = []
    for band in bands:
        _flush_band(band, output_lines, spacing)
    return "\n".join(output_lines)


def _flush_band(
    band: list[tuple[list[str], int]],
    output_lines: list[str],
    spacing: int,
) -> None:
    """Helper to combine one band of shapes horizontally into output_lines."""
    height = max(len(lines) for lines, _ in band)

    for line_idx in range(height):
        parts = []
        for lines, width in band:
            if line_idx < len(lines):
                parts.append(lines[line_idx])
            else:
                parts.append(" " * width)
        output_lines.append((" " * spacing).join(parts).rstrip())

    output_lines.append("")
