"""
ASCII rendering for gridwave grids.

Grids print one character per cell with an optional row label column.
Search paths are overlaid in colour, or swapped in as a marker character
for plain-text output.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable

import simple_chalk as chalk  # type: ignore[import-untyped]

from grid_types import Grid
from gridmodel import grid_rows

__all__ = ["render_rows", "render_grid", "display_grid", "render_path_overlay"]

logger = logging.getLogger(__name__)

ROW_LABEL_WIDTH = 4


def render_rows(
    grid: Grid,
    path: Iterable[int] = (),
    highlight: int | None = None,
    color: bool = True,
) -> list[str]:
    """
    Render each grid row to a string.

    Args:
        grid: The grid to render
        path: Cells to colour as part of a path
        highlight: Optional cell to show inverted (e.g. a cursor)
        color: Apply ANSI colours; with False the output is the raw values

    Returns:
        One string per row. Absent cells render as a space.
    """
    on_path = set(path)

    def colorize(cell: int) -> Callable[[str], str]:
        if not color:
            return lambda s: s
        if cell == highlight:
            return chalk.bgWhite.black
        if cell in on_path:
            return chalk.green
        return lambda s: s

    lines: list[str] = []
    for row in grid_rows(grid):
        line = ""
        for cell in row:
            content = str(grid.cells[cell]) if cell in grid else " "
            line += colorize(cell)(content)
        lines.append(line)
    return lines


def render_grid(
    grid: Grid,
    path: Iterable[int] = (),
    highlight: int | None = None,
    label_rows: bool = True,
    color: bool = True,
) -> str:
    """Render a grid, prefixing each row with its y index ("0   ab")."""
    lines = render_rows(grid, path=path, highlight=highlight, color=color)
    if label_rows:
        lines = [
            f"{y:<{ROW_LABEL_WIDTH}}"[:ROW_LABEL_WIDTH] + line
            for y, line in enumerate(lines)
        ]
    return "\n".join(lines)


def display_grid(grid: Grid, text: str | None = None, **render_kwargs: Any) -> Grid:
    """Print a grid (with optional header) and hand it back for chaining."""
    if text:
        print(f"\n--- {text}")
    print(render_grid(grid, **render_kwargs))
    return grid


def render_path_overlay(grid: Grid, path: Iterable[int], marker: str = "O") -> Grid:
    """Return a copy of grid with every path cell replaced by marker."""
    cells = dict(grid.cells)
    replaced = 0
    for cell in path:
        if cell in cells:
            cells[cell] = marker
            replaced += 1
    logger.debug("render_path_overlay: marked %d cells with %r", replaced, marker)
    return Grid(cells, grid.width, grid.height, infinite=grid.infinite)
