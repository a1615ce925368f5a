"""
Interactive demo for gridwave shortest paths.
Display a maze and move the target with the keyboard; the path follows.
"""

import logging
import sys

import readchar
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from ascii_render import render_grid
from grid_parser import parse_grid
from grid_types import Direction, Grid, GridError
from gridmodel import build_compass, grid_x, grid_y, on_edge_of_board
from pathfinding import NodeState, SearchRules, find_path


class PathDemo:
    """Interactive demo: start is fixed, the target moves."""

    def __init__(self, grid: Grid, start: int, rules: SearchRules = SearchRules()) -> None:
        self.grid = grid
        self.start = start
        self.rules = rules
        self.target = start
        self.result: NodeState | None = None
        self.console = Console()
        self.status_message = "Ready"
        self.recompute()

    def recompute(self) -> None:
        """Search from start to the current target and record the outcome."""
        try:
            self.result = find_path(self.grid, self.start, self.target, self.rules)
        except GridError as err:
            self.result = None
            self.status_message = f"✗ {str(err).splitlines()[0]}"
        else:
            self.status_message = (
                f"✓ Cost {self.result.cost.cost} to "
                f"[{grid_x(self.grid, self.target)}, {grid_y(self.grid, self.target)}]"
            )

    def move_target(self, direction: Direction) -> None:
        """Step the target one cell, staying on the board."""
        if on_edge_of_board(self.grid, self.target, direction):
            self.status_message = f"✗ Target is already on the {direction.value} edge"
            return
        self.target += build_compass(self.grid)[direction]
        self.recompute()

    def reset(self) -> None:
        self.target = self.start
        self.recompute()
        self.status_message = "Target reset to start"

    def generate_display(self) -> Panel:
        """Generate the current display with grid and status."""
        path = self.result.path if self.result else ()
        grid_text = render_grid(self.grid, path=path, highlight=self.target)

        status = Text()
        status.append("Start: ", style="bold")
        status.append(f"[{grid_x(self.grid, self.start)}, {grid_y(self.grid, self.start)}]  ")
        status.append("Target: ", style="bold")
        status.append(f"[{grid_x(self.grid, self.target)}, {grid_y(self.grid, self.target)}]\n\n")

        # Convert ANSI-colored grid text to Rich Text properly
        status.append(Text.from_ansi(grid_text))
        status.append("\n\n")
        status.append("Keys:\n", style="bold cyan")
        status.append("  W - Move target North\n")
        status.append("  A - Move target West\n")
        status.append("  S - Move target South\n")
        status.append("  D - Move target East\n")
        status.append("  R - Reset target to start\n")
        status.append("  Q - Quit\n\n")

        status.append("─" * 40 + "\n", style="dim")
        status.append("Status: ", style="bold")
        status.append(self.status_message)

        return Panel(status, title="gridwave Shortest Path Demo", border_style="green", width=80)

    def run(self) -> None:
        """Run the demo until Q or Ctrl-C."""
        with Live(self.generate_display(), console=self.console, refresh_per_second=4) as live:
            try:
                while True:
                    live.update(self.generate_display())

                    key = readchar.readkey()

                    if key.lower() == 'q':
                        self.status_message = "Quitting..."
                        live.update(self.generate_display())
                        break
                    elif key.lower() == 'r':
                        self.reset()
                    elif key.lower() == 'w':
                        self.move_target(Direction.N)
                    elif key.lower() == 's':
                        self.move_target(Direction.S)
                    elif key.lower() == 'a':
                        self.move_target(Direction.W)
                    elif key.lower() == 'd':
                        self.move_target(Direction.E)
                    else:
                        self.status_message = f"Unknown key: {repr(key)}"

            except KeyboardInterrupt:
                self.status_message = "Interrupted by user"
                live.update(self.generate_display())


LAYOUTS = dict(
    maze = """
#########
#S..#...#
#.#.#.#.#
#.#...#.#
#.#####.#
#.......#
#########
""",
    open = """
.....
.....
.....
""",
    island = """
..#..
.###.
..#..
""",
)


def start_of(grid: Grid) -> int:
    """The cell marked S, else the first open cell."""
    for cell, value in sorted(grid.cells.items()):
        if value == "S":
            return cell
    return min(cell for cell, value in grid.cells.items() if value != SearchRules().wall)


def main(grid: Grid) -> None:
    """Run the interactive demo on a parsed layout."""
    demo = PathDemo(grid, start_of(grid))
    demo.run()


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == 'sublime':
        # Running from IDE - just render one search
        logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')

        print('Running from IDE - rendering one search')
        print()

        grid = parse_grid(LAYOUTS['maze'])
        demo = PathDemo(grid, start_of(grid))
        demo.target = grid.last_cell - grid.width - 1
        demo.recompute()
        path = demo.result.path if demo.result else ()
        print(render_grid(grid, path=path, highlight=demo.target))
        print(demo.status_message)
    else:
        main(parse_grid(LAYOUTS[sys.argv[1] if len(sys.argv) > 1 else 'maze']))
