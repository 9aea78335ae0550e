"""
Text rendering for mazes.

Provides two renderers:
1. Maze rendering - walls and passages of a generated maze as fixed-width glyph text
2. Solution rendering - a parsed maze grid with its path highlighted in colour
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from simple_chalk import chalk  # type: ignore[import-untyped]

from maze_types import (
    OPEN,
    PATH,
    WALL,
    CellPosition,
    Direction,
    entrance_position,
    exit_position,
    text_dimensions,
)

if TYPE_CHECKING:
    from maze import Maze
    from maze_parser import ParsedMazeGrid

logger = logging.getLogger(__name__)


# =============================================================================
# Maze Rendering
# =============================================================================


def _seam_glyph(maze: Maze, pos: CellPosition, direction: Direction) -> str:
    return OPEN if maze.is_linked(pos, direction) else WALL


def render_glyphs(maze: Maze) -> list[list[str]]:
    """Build the full glyph buffer for a maze, borders included.

    The buffer has 2*height+1 rows and 2*width+1 columns. Row 0 is the top
    border and column 0 the left border. Beyond those, a glyph at content
    coordinates (depth, across) = (row-1, col-1) is:
      * both even: a cell interior, always open
      * depth even, across odd: seam to the cell on the right
      * depth odd, across even: seam to the cell below
      * both odd: a corner post, always wall
    """
    rows, cols = text_dimensions(maze.width, maze.height)
    buffer: list[list[str]] = [[WALL for _ in range(cols)] for _ in range(rows)]

    for depth in range(2 * maze.height):
        for across in range(2 * maze.width):
            pos = CellPosition(depth // 2, across // 2)
            if depth % 2 == 0 and across % 2 == 0:
                glyph = OPEN
            elif depth % 2 == 0:
                glyph = _seam_glyph(maze, pos, Direction.E)
            elif across % 2 == 0:
                glyph = _seam_glyph(maze, pos, Direction.S)
            else:
                glyph = WALL
            buffer[depth + 1][across + 1] = glyph

    entrance = entrance_position(rows, cols)
    exit_ = exit_position(rows, cols)
    buffer[entrance.row][entrance.col] = OPEN
    buffer[exit_.row][exit_.col] = OPEN

    return buffer


def render_maze(maze: Maze) -> str:
    """
    Render a maze to its text format.

    Every row is newline-terminated and one trailing blank line follows, so the
    output can be written to a file and read back by the parser.

    Args:
        maze: The generated maze to render

    Returns:
        The rendered text
    """
    buffer = render_glyphs(maze)
    return "".join("".join(row) + "\n" for row in buffer) + "\n"


# =============================================================================
# Solution Rendering
# =============================================================================


def render_solution(grid: ParsedMazeGrid, color: bool = True) -> str:
    """
    Render a parsed (and possibly solved) maze grid.

    Args:
        grid: The grid to render
        color: Highlight the path in green and dim the walls with ANSI codes

    Returns:
        One newline-terminated line per grid row
    """
    if not color:
        return str(grid)

    styles: dict[str, Callable[[str], str]] = {
        WALL: chalk.white,
        PATH: chalk.greenBright,
        OPEN: lambda s: s,
    }

    lines: list[str] = []
    for row in grid.tokens:
        lines.append("".join(styles[token](token) for token in row) + "\n")

    logger.debug("render_solution: %d rows, %d path tokens", grid.rows, len(grid.path_positions()))
    return "".join(lines)
