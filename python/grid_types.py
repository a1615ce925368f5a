"""
Shared type definitions for the gridwave system.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


class Direction(Enum):
    """Cardinal direction on the board."""

    N = "N"  # Up (decreasing y)
    S = "S"  # Down (increasing y)
    E = "E"  # Right (increasing x)
    W = "W"  # Left (decreasing x)


# =============================================================================
# Errors
# =============================================================================


class GridError(Exception):
    """Base class for everything gridwave raises."""


class InputError(GridError):
    """Grid text or cell values could not be turned into a grid."""


class EmptyInputError(InputError):
    """Grid text contained no non-empty lines."""


class BoundsError(GridError):
    """An operation was asked about a cell or grid shape it cannot handle."""


class UnreachableTargetError(GridError):
    """The search frontier ran dry before the finish cell was reached."""


class InvalidDirectionError(GridError):
    """A direction outside N/S/E/W was supplied."""


# =============================================================================
# Grid Definition Types
# =============================================================================


@dataclass(frozen=True)
class Grid:
    """A 2D grid stored as a flat, row-major mapping of index -> value.

    For an "infinite" grid the declared width is wider than the source text,
    so some indices in 0..last_cell are legitimately absent.
    """

    cells: Mapping[int, Any] = field(repr=False)
    width: int
    height: int
    infinite: bool = False

    def __post_init__(self) -> None:
        # Read-only copy of the caller's mapping
        object.__setattr__(self, "cells", MappingProxyType(dict(self.cells)))

    @property
    def max_dimension(self) -> int:
        return max(self.width, self.height)

    @property
    def last_cell(self) -> int:
        return self.width * self.height - 1

    def get(self, index: int, default: Any = None) -> Any:
        return self.cells.get(index, default)

    def __contains__(self, index: object) -> bool:
        return index in self.cells


# =============================================================================
# Neighbor Slots
# =============================================================================


@dataclass(frozen=True)
class OnBoard:
    """A neighbor slot that lands on a real cell."""

    index: int


@dataclass(frozen=True)
class OffBoard:
    """A neighbor slot that falls off the board (or wraps onto another row)."""

    index: int  # Raw candidate index, may be negative


NeighborSlot = OnBoard | OffBoard
