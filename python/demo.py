"""
Demonstration scripts for the gridwave grid toolkit.
"""

from ascii_render import display_grid, render_path_overlay
from grid_parser import parse_digit_grid, parse_grid
from grid_types import GridError, OffBoard
from gridmodel import invert, neighbors4, neighbors4_including_offgrid
from pathfinding import Connectivity, SearchRules, find_path


def demo_coordinates() -> None:
    """Show neighbor queries, including the off-board diagnostics."""
    grid = parse_grid("abc\ndef\nghi")
    display_grid(grid, "3x3 letters", color=False)

    for cell in (0, 4, 5):
        slots = neighbors4_including_offgrid(grid, cell)
        described = ", ".join(
            f"off({slot.index})" if isinstance(slot, OffBoard) else grid.cells[slot.index]
            for slot in slots
        )
        print(f"{grid.cells[cell]}: neighbors4={neighbors4(grid, cell)} [N, W, E, S] = {described}")

    display_grid(invert(grid), "inverted", color=False)


def demo_shortest_path() -> None:
    """Solve a small maze with 4 and 8 neighbors, and a digit grid with a custom wall."""
    maze = parse_grid(
        """
#########
#...#...#
#.#.#.#.#
#.#...#.#
#.#####.#
#.......#
#########
"""
    )
    start, finish = 10, maze.last_cell - maze.width - 1

    for connectivity in Connectivity:
        result = find_path(maze, start, finish, SearchRules(connectivity=connectivity))
        display_grid(
            render_path_overlay(maze, result.path),
            f"{connectivity.value} neighbors, cost {result.cost.cost}",
            color=False,
        )

    digits = parse_digit_grid("0000\n1110\n0000\n0111")
    result = find_path(digits, 0, 12, SearchRules(wall=1))
    display_grid(digits, f"digit grid, cost {result.cost.cost}", path=result.path, color=False)
    print(f"path: {result.path}")

    walled = parse_digit_grid("0100\n1100\n0000")
    try:
        find_path(walled, 0, 11, SearchRules(wall=1))
    except GridError as err:
        print(f"\n--- walled-in corner\n{err}")


if __name__ == "__main__":
    demo_coordinates()
    demo_shortest_path()
