"""
Shared type definitions for the maze generator and solver.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """Cardinal direction between grid-adjacent cells."""

    N = "N"  # Up (decreasing row)
    E = "E"  # Right (increasing col)
    S = "S"  # Down (increasing row)
    W = "W"  # Left (decreasing col)

    @property
    def delta(self) -> tuple[int, int]:
        """(row, col) offset for one step in this direction."""
        return _DELTAS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_DELTAS = {
    Direction.N: (-1, 0),
    Direction.E: (0, 1),
    Direction.S: (1, 0),
    Direction.W: (0, -1),
}

_OPPOSITES = {
    Direction.N: Direction.S,
    Direction.E: Direction.W,
    Direction.S: Direction.N,
    Direction.W: Direction.E,
}

# Fixed search order for carving and solving: up, right, down, left
DIRECTIONS: tuple[Direction, ...] = (Direction.N, Direction.E, Direction.S, Direction.W)


@dataclass(frozen=True)
class CellPosition:
    """A (row, col) position in a grid."""

    row: int
    col: int

    def step(self, direction: Direction) -> CellPosition:
        dr, dc = direction.delta
        return CellPosition(self.row + dr, self.col + dc)


# =============================================================================
# Text Format
# =============================================================================

WALL = "X "
OPEN = "  "
PATH = "+ "

TOKENS = frozenset({WALL, OPEN, PATH})
TOKEN_WIDTH = 2


def text_dimensions(width: int, height: int) -> tuple[int, int]:
    """Token (rows, cols) of the rendered text for a width x height maze."""
    return (2 * height + 1, 2 * width + 1)


def entrance_position(rows: int, cols: int) -> CellPosition:
    """Entrance gap in the top border, in text coordinates."""
    return CellPosition(0, 1)


def exit_position(rows: int, cols: int) -> CellPosition:
    """Exit gap in the bottom border, in text coordinates.

    The renderer forces this token open and the solver stops when it gets here.
    """
    return CellPosition(rows - 1, cols - 2)


# =============================================================================
# Errors
# =============================================================================


class MazeError(Exception):
    """Base class for maze errors."""


class InvalidDimensionsError(MazeError, ValueError):
    """Maze width or height is not a positive integer."""


class MalformedMazeTextError(MazeError, ValueError):
    """Text does not follow the rendered maze format."""


class MazeFileUnavailableError(MazeError, FileNotFoundError):
    """Input maze file could not be read."""
