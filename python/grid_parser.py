"""
Grid construction for gridwave.

Provides three ways to build a Grid:
1. Solid grids filled with a single value
2. Character grids read from multiline text
3. Digit grids: character grids with every value coerced to int
"""

from __future__ import annotations

import logging
from typing import Any

from grid_types import EmptyInputError, Grid, InputError
from text_input import as_single_lines

__all__ = ["solid_grid", "parse_grid", "parse_digit_grid", "to_digit_grid"]

logger = logging.getLogger(__name__)


def solid_grid(width: int, height: int, initial_value: Any = None) -> Grid:
    """
    Create a width x height grid with every cell set to initial_value.

    Raises:
        InputError: If either dimension is not positive
    """
    if width <= 0 or height <= 0:
        raise InputError(
            f"Invalid solid grid size: {width}x{height}\n"
            f"  Width and height must both be positive"
        )
    cells = {index: initial_value for index in range(width * height)}
    return Grid(cells, width, height)


def parse_grid(multiline_text: str, width: int | None = None) -> Grid:
    """
    Read a grid of characters, one row per non-empty line.

    Format:
    - Each character is one cell, stored as a one-character string
    - Row width comes from the first line
    - Blank lines are ignored

    If width is given and wider than the text, the grid is "infinite": each
    row is laid out at the declared width and the indices past the real
    content are left unmapped.

    Example:
        parse_grid("ab\\ncd")
        Creates a 2x2 grid {0: "a", 1: "b", 2: "c", 3: "d"}

        parse_grid("ab\\ncd", width=5)
        Creates {0: "a", 1: "b", 5: "c", 6: "d"}, width=5, infinite=True

    Args:
        multiline_text: The grid text
        width: Optional declared width, at least the line width

    Returns:
        The parsed Grid

    Raises:
        EmptyInputError: If there are no non-empty lines
        InputError: If rows differ in length or width is too narrow
    """
    lines = as_single_lines(multiline_text)
    if not lines:
        raise EmptyInputError("Cannot build a grid from text with no non-empty lines")

    line_width = len(lines[0])
    mismatched = [(i, len(line)) for i, line in enumerate(lines) if len(line) != line_width]
    if mismatched:
        error_msg = (
            f"Inconsistent row lengths in grid text\n"
            f"  Expected: {line_width} columns (from row 0)\n"
            f"  Mismatched rows:\n"
        )
        for row_idx, actual_cols in mismatched:
            error_msg += f"    Row {row_idx}: {actual_cols} columns - \"{lines[row_idx]}\"\n"
        error_msg += "  All rows must have the same number of cells"
        raise InputError(error_msg)

    grid_width = line_width if width is None else width
    if grid_width < line_width:
        raise InputError(
            f"Declared width {grid_width} is narrower than the grid text\n"
            f"  Line width: {line_width}"
        )

    cells = {
        grid_width * (i // line_width) + (i % line_width): character
        for i, character in enumerate("".join(lines))
    }
    grid = Grid(cells, grid_width, len(lines), infinite=grid_width > line_width)

    logger.info(
        "parse_grid: width=%d, height=%d, line_width=%d, infinite=%s",
        grid.width,
        grid.height,
        line_width,
        grid.infinite,
    )
    return grid


def to_digit_grid(grid: Grid) -> Grid:
    """
    Return a copy of grid with every value converted to int.

    Values that are already ints are left alone, so this is safe to apply
    more than once.

    Raises:
        InputError: If a value is neither an int nor parses as one
    """
    cells: dict[int, int] = {}
    for index, value in grid.cells.items():
        if isinstance(value, int):
            cells[index] = value
            continue
        try:
            cells[index] = int(value)
        except (TypeError, ValueError) as err:
            raise InputError(
                f"Invalid digit cell: {value!r}\n"
                f"  Index: {index} (x={index % grid.width}, y={index // grid.width})\n"
                f"  Every cell must be a digit or an int"
            ) from err
    return Grid(cells, grid.width, grid.height, infinite=grid.infinite)


def parse_digit_grid(multiline_text: str) -> Grid:
    """Read a grid of single digits, e.g. "12\\n34" -> {0: 1, 1: 2, 2: 3, 3: 4}."""
    return to_digit_grid(parse_grid(multiline_text))
