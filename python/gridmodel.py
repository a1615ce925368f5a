"""
Coordinate model for flat, row-major grids.

Cell indices are plain ints: index = x + y * width. Everything here is a
read-only query or returns a new Grid.
"""

from __future__ import annotations

from grid_types import (
    BoundsError,
    Direction,
    Grid,
    InvalidDirectionError,
    NeighborSlot,
    OffBoard,
    OnBoard,
)

__all__ = [
    "grid_x",
    "grid_y",
    "cell_id",
    "grid_cells",
    "grid_rows",
    "neighbors4",
    "neighbors4_including_offgrid",
    "neighbors8",
    "invert",
    "on_edge_of_board",
    "build_compass",
    "to_text_grid",
]


# =============================================================================
# Coordinates
# =============================================================================


def grid_x(grid: Grid, cell: int) -> int:
    return cell % grid.width


def grid_y(grid: Grid, cell: int) -> int:
    return cell // grid.width


def cell_id(grid: Grid, x: int, y: int) -> int:
    return x + y * grid.width


def grid_cells(grid: Grid) -> range:
    """All indices 0..last_cell, present or not."""
    return range(grid.last_cell + 1)


def grid_rows(grid: Grid) -> list[range]:
    """Indices grouped into rows of width cells."""
    return [range(y * grid.width, (y + 1) * grid.width) for y in range(grid.height)]


# =============================================================================
# Neighbors
# =============================================================================


def _candidates4(grid: Grid, index: int) -> list[tuple[int, bool]]:
    """
    The four orthogonal candidates in [N, W, E, S] order, each paired with
    whether it stays on index's row (W/E) or column (N/S).

    Plain +-1 arithmetic wraps onto the neighbouring row at the edges, so the
    row check is what rejects those.
    """
    w = grid.width
    row = index // w
    return [
        (index - w, True),
        (index - 1, (index - 1) // w == row),
        (index + 1, (index + 1) // w == row),
        (index + w, True),
    ]


def neighbors4(grid: Grid, index: int) -> list[int]:
    """
    Orthogonal neighbors of index, in [N, W, E, S] order.

    Missing cells (off the board, or padding in an infinite grid) and
    wrap-around candidates are left out.
    """
    return [
        candidate
        for candidate, aligned in _candidates4(grid, index)
        if aligned and candidate in grid
    ]


def neighbors4_including_offgrid(grid: Grid, index: int) -> list[NeighborSlot]:
    """
    Always four slots in [N, W, E, S] order, each OnBoard or OffBoard.

    Raises:
        BoundsError: On an infinite grid
    """
    if grid.infinite:
        raise BoundsError(
            "neighbors4_including_offgrid does not support infinite grids\n"
            f"  Grid width: {grid.width}, height: {grid.height}"
        )
    slots: list[NeighborSlot] = []
    for candidate, aligned in _candidates4(grid, index):
        if aligned and 0 <= candidate <= grid.last_cell:
            slots.append(OnBoard(candidate))
        else:
            slots.append(OffBoard(candidate))
    return slots


def neighbors8(grid: Grid, index: int) -> list[int]:
    """
    All eight neighbors of index that exist on the board.

    Order: [N, S, NW, W, SW, NE, E, SE]. Only the sides need an explicit
    check; top and bottom excursions simply aren't in the grid.

    Raises:
        BoundsError: On an infinite grid
    """
    if grid.infinite:
        raise BoundsError(
            "neighbors8 does not support infinite grids\n"
            f"  Grid width: {grid.width}, height: {grid.height}"
        )
    w = grid.width
    x = grid_x(grid, index)
    positions = [index - w, index + w]
    if x > 0:
        positions += [index - w - 1, index - 1, index + w - 1]
    if x < w - 1:
        positions += [index - w + 1, index + 1, index + w + 1]
    return [p for p in positions if p in grid]


# =============================================================================
# Transforms
# =============================================================================


def invert(grid: Grid) -> Grid:
    """Transpose: the value at (x, y) moves to (y, x) and width/height swap."""
    cells = {
        grid_x(grid, cell) * grid.height + grid_y(grid, cell): value
        for cell, value in grid.cells.items()
    }
    return Grid(cells, grid.height, grid.width, infinite=grid.infinite)


def on_edge_of_board(grid: Grid, cell: int, direction: Direction | str) -> bool:
    """
    Is cell on the board edge facing direction?

    Accepts a Direction or its value ("N", "S", "E", "W").

    Raises:
        InvalidDirectionError: For anything else
    """
    try:
        direction = Direction(direction)
    except ValueError as err:
        raise InvalidDirectionError(
            f"Invalid direction: {direction!r}\n"
            f"  Valid directions: {', '.join(d.value for d in Direction)}"
        ) from err

    if direction == Direction.N:
        return grid_y(grid, cell) == 0
    elif direction == Direction.W:
        return grid_x(grid, cell) == 0
    elif direction == Direction.S:
        return grid_y(grid, cell) == grid.height - 1
    else:
        return grid_x(grid, cell) == grid.width - 1


def build_compass(grid: Grid) -> dict[Direction, int]:
    """Raw index deltas per direction. No bounds checking."""
    return {
        Direction.N: -grid.width,
        Direction.E: 1,
        Direction.S: grid.width,
        Direction.W: -1,
    }


def to_text_grid(grid: Grid) -> str:
    """Render values back to newline-joined rows; absent cells become ""."""
    return "\n".join(
        "".join(str(grid.cells[cell]) if cell in grid else "" for cell in row)
        for row in grid_rows(grid)
    )
