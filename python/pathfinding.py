"""
Unit-cost shortest paths by wavefront expansion.

Dijkstra without a priority queue: every edge costs 1, so each wave of
relaxations from the previous wave's cells settles the next ring of
distances. The search stops as soon as the finish cell has a path.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from grid_types import BoundsError, Grid, UnreachableTargetError
from gridmodel import grid_cells, grid_x, grid_y, neighbors4, neighbors8

__all__ = [
    "Connectivity",
    "SearchRules",
    "Unvisited",
    "UNVISITED",
    "Visited",
    "Cost",
    "NodeState",
    "NodeMap",
    "build_node_map",
    "relax",
    "expand_wave",
    "shortest_path",
    "find_path",
]

logger = logging.getLogger(__name__)

STEP_COST = 1


class Connectivity(Enum):
    """Which neighbors a search may step to."""

    FOUR = "four"  # Orthogonal moves only
    EIGHT = "eight"  # Orthogonal and diagonal moves


@dataclass(frozen=True)
class SearchRules:
    """Rules governing a search."""

    wall: Any = "#"
    connectivity: Connectivity = Connectivity.FOUR

    def is_wall(self, value: Any) -> bool:
        return value == self.wall

    def neighbor_fn(self) -> Callable[[Grid, int], list[int]]:
        if self.connectivity == Connectivity.EIGHT:
            return neighbors8
        return neighbors4


# =============================================================================
# Node State
# =============================================================================


@dataclass(frozen=True)
class Unvisited:
    """Cost of a cell no wave has reached yet. Greater than any Visited."""

    def is_less_than(self, other: Cost) -> bool:
        return False

    def plus(self, step: int) -> Cost:
        return self


@dataclass(frozen=True)
class Visited:
    """Cost of a cell some wave has reached."""

    cost: int

    def is_less_than(self, other: Cost) -> bool:
        return isinstance(other, Unvisited) or self.cost < other.cost

    def plus(self, step: int) -> Cost:
        return Visited(self.cost + step)


Cost = Unvisited | Visited

UNVISITED = Unvisited()


@dataclass(frozen=True)
class NodeState:
    """Search bookkeeping for one cell: best cost so far and the path to it."""

    cost: Cost = UNVISITED
    path: tuple[int, ...] = ()  # Empty means unvisited

    @property
    def visited(self) -> bool:
        return bool(self.path)


NodeMap = dict[int, NodeState]


# =============================================================================
# Search
# =============================================================================


def _check_endpoint(grid: Grid, cell: int, name: str, rules: SearchRules) -> None:
    if not 0 <= cell <= grid.last_cell or cell not in grid:
        raise BoundsError(
            f"Search {name} {cell} is not a cell of the grid\n"
            f"  Grid width: {grid.width}, height: {grid.height}, last cell: {grid.last_cell}"
        )
    if rules.is_wall(grid.cells[cell]):
        raise UnreachableTargetError(
            f"Search {name} {cell} (x={grid_x(grid, cell)}, y={grid_y(grid, cell)}) is a wall"
        )


def build_node_map(grid: Grid, start: int, rules: SearchRules = SearchRules()) -> NodeMap:
    """Every present, non-wall cell starts unvisited, except start at cost 0."""
    node_map: NodeMap = {}
    for cell in grid_cells(grid):
        if cell not in grid or rules.is_wall(grid.cells[cell]):
            continue
        if cell == start:
            node_map[cell] = NodeState(Visited(0), (start,))
        else:
            node_map[cell] = NodeState()
    return node_map


def _improved(node_map: NodeMap, source: int, target: int) -> NodeState | None:
    from_source = node_map[source].cost.plus(STEP_COST)
    if not from_source.is_less_than(node_map[target].cost):
        return None
    return NodeState(from_source, node_map[source].path + (target,))


def relax(node_map: NodeMap, source: int, target: int) -> NodeMap:
    """
    Route target through source if that is strictly cheaper.

    Returns node_map itself when nothing improves, otherwise a new map.
    """
    state = _improved(node_map, source, target)
    if state is None:
        return node_map
    updated = dict(node_map)
    updated[target] = state
    return updated


def expand_wave(
    grid: Grid,
    frontier: list[int],
    node_map: NodeMap,
    rules: SearchRules = SearchRules(),
) -> tuple[NodeMap, list[int]]:
    """
    Relax every unvisited neighbor of the frontier once.

    Frontier cells are taken in ascending order and neighbors in the neighbor
    query's order, so the first strict improvement decides each path.

    Returns:
        Tuple of (new node map, next frontier). The next frontier holds every
        neighbor touched this wave, improved or not.
    """
    neighbor_fn = rules.neighbor_fn()
    updated = dict(node_map)
    touched: set[int] = set()

    for node in sorted(frontier):
        for neighbor in neighbor_fn(grid, node):
            if neighbor not in node_map or node_map[neighbor].visited:
                continue
            state = _improved(updated, node, neighbor)
            if state is not None:
                updated[neighbor] = state
            touched.add(neighbor)

    return updated, sorted(touched)


def shortest_path(
    grid: Grid,
    start: int,
    finish: int,
    rules: SearchRules = SearchRules(),
) -> NodeMap:
    """
    Run waves out from start until finish has a path.

    Returns:
        The node map at the moment finish was reached. node_map[finish].path
        runs from start to finish inclusive.

    Raises:
        BoundsError: If start or finish is not a cell of the grid
        UnreachableTargetError: If start or finish is a wall, or the frontier
            empties before finish is reached
    """
    _check_endpoint(grid, start, "start", rules)
    _check_endpoint(grid, finish, "finish", rules)

    node_map = build_node_map(grid, start, rules)
    frontier = [start]
    waves = 0

    while not node_map[finish].visited:
        if not frontier:
            raise UnreachableTargetError(
                f"No path from {start} to {finish}\n"
                f"  Start: x={grid_x(grid, start)}, y={grid_y(grid, start)}\n"
                f"  Finish: x={grid_x(grid, finish)}, y={grid_y(grid, finish)}\n"
                f"  Frontier exhausted after {waves} waves"
            )
        node_map, frontier = expand_wave(grid, frontier, node_map, rules)
        waves += 1
        logger.debug("expand_wave %d: frontier=%d cells", waves, len(frontier))

    logger.info(
        "shortest_path: start=%d, finish=%d, cost=%s, waves=%d",
        start,
        finish,
        node_map[finish].cost,
        waves,
    )
    return node_map


def find_path(
    grid: Grid,
    start: int,
    finish: int,
    rules: SearchRules = SearchRules(),
) -> NodeState:
    """Shortest path from start to finish: the finish cell's NodeState."""
    return shortest_path(grid, start, finish, rules)[finish]
