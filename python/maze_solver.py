"""
Depth-first path search through parsed maze text.

The search marks its current route with path tokens and reverts them when it
backs out of a dead end, so on success the marked tokens are exactly one route
from entrance to exit. Any route is accepted; it need not be the shortest.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from maze_parser import ParsedMazeGrid, parse_maze_text, read_maze_file
from maze_types import DIRECTIONS, OPEN, PATH, CellPosition, MalformedMazeTextError

logger = logging.getLogger(__name__)


@dataclass
class _Step:
    """A position on the current route and the next direction index to try."""

    position: CellPosition
    next_direction: int = 0


def _next_open(grid: ParsedMazeGrid, step: _Step) -> CellPosition | None:
    """Advance ``step`` to its next open neighbour, trying up, right, down, left."""
    while step.next_direction < len(DIRECTIONS):
        candidate = step.position.step(DIRECTIONS[step.next_direction])
        step.next_direction += 1
        if grid.in_bounds(candidate) and grid.token(candidate) == OPEN:
            return candidate
    return None


def find_path(grid: ParsedMazeGrid) -> list[CellPosition] | None:
    """
    Mark one route from the entrance to the exit of ``grid`` in place.

    Args:
        grid: Parsed maze; open tokens on the route become path tokens

    Returns:
        The route from entrance to exit, or None if the exit is unreachable.
        On None every token the search touched has been reverted to open.

    Raises:
        MalformedMazeTextError: If the entrance or exit lies outside the grid
    """
    entrance, exit_ = grid.entrance, grid.exit
    for name, pos in (("entrance", entrance), ("exit", exit_)):
        if not grid.in_bounds(pos):
            raise MalformedMazeTextError(
                f"Malformed maze text: {name} ({pos.row}, {pos.col}) "
                f"is outside the {grid.rows}x{grid.cols} grid"
            )

    if grid.token(entrance) != OPEN:
        logger.info("find_path: entrance (%d, %d) is not open", entrance.row, entrance.col)
        return None

    grid.set_token(entrance, PATH)
    stack = [_Step(entrance)]

    while stack:
        step = stack[-1]
        if step.position == exit_:
            logger.info("find_path: exit reached, path length %d", len(stack))
            return [s.position for s in stack]

        candidate = _next_open(grid, step)
        if candidate is None:
            # Dead end
            grid.set_token(step.position, OPEN)
            stack.pop()
            logger.debug("find_path: backtrack from (%d, %d)", step.position.row, step.position.col)
            continue

        grid.set_token(candidate, PATH)
        stack.append(_Step(candidate))

    logger.info("find_path: no path from entrance to exit")
    return None


def solve_maze(grid: ParsedMazeGrid) -> bool:
    """Mark one route through ``grid`` in place; True if the exit was reached."""
    return find_path(grid) is not None


class MazeSolver:
    """Reads a rendered maze and solves it on construction.

    ``str(solver)`` is the grid with the route shown as path tokens.
    """

    def __init__(self, filename: str | Path | None = None, *, text: str | None = None) -> None:
        if text is None:
            if filename is None:
                raise ValueError("MazeSolver needs a filename or text")
            text = read_maze_file(filename)

        self.grid = parse_maze_text(text)
        self.path: list[CellPosition] = find_path(self.grid) or []
        self.solved = bool(self.path)

    @classmethod
    def from_text(cls, text: str) -> MazeSolver:
        return cls(text=text)

    def __str__(self) -> str:
        return str(self.grid)
