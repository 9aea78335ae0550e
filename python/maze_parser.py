"""
Parsing of rendered maze text back into an addressable grid of tokens.

Format (as produced by maze_render.render_maze):
- One line per grid row, every line the same length
- Each grid column is a two-character token:
  * "X " - wall
  * "  " - open
  * "+ " - path (written by the solver)
- Trailing blank lines are ignored
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from maze_types import (
    PATH,
    TOKEN_WIDTH,
    TOKENS,
    CellPosition,
    MalformedMazeTextError,
    MazeFileUnavailableError,
    entrance_position,
    exit_position,
)

__all__ = ["ParsedMazeGrid", "parse_maze_text", "read_maze_file", "write_maze_file"]

logger = logging.getLogger(__name__)


@dataclass
class ParsedMazeGrid:
    """A rectangular grid of two-character tokens, mutable in place."""

    tokens: list[list[str]]

    @property
    def rows(self) -> int:
        return len(self.tokens)

    @property
    def cols(self) -> int:
        return len(self.tokens[0]) if self.tokens else 0

    @property
    def maze_height(self) -> int:
        """Number of maze cells down, borders and seams excluded."""
        return (self.rows - 1) // 2

    @property
    def maze_width(self) -> int:
        """Number of maze cells across, borders and seams excluded."""
        return (self.cols - 1) // 2

    @property
    def entrance(self) -> CellPosition:
        return entrance_position(self.rows, self.cols)

    @property
    def exit(self) -> CellPosition:
        return exit_position(self.rows, self.cols)

    def in_bounds(self, pos: CellPosition) -> bool:
        return 0 <= pos.row < self.rows and 0 <= pos.col < self.cols

    def token(self, pos: CellPosition) -> str:
        return self.tokens[pos.row][pos.col]

    def set_token(self, pos: CellPosition, token: str) -> None:
        self.tokens[pos.row][pos.col] = token

    def path_positions(self) -> list[CellPosition]:
        """All positions currently marked as path, in row-major order."""
        return [
            CellPosition(r, c)
            for r, row in enumerate(self.tokens)
            for c, token in enumerate(row)
            if token == PATH
        ]

    def copy(self) -> ParsedMazeGrid:
        return ParsedMazeGrid([list(row) for row in self.tokens])

    def __str__(self) -> str:
        return "".join("".join(row) + "\n" for row in self.tokens)


def parse_maze_text(text: str) -> ParsedMazeGrid:
    """
    Parse rendered maze text into a token grid.

    Height is the number of lines (trailing blank lines dropped); width is the
    length of the first line divided by the token width.

    Example:
        "X   X \\nX   X \\nX   X \\n\\n"
        Creates a 3x3 token grid (a 1x1 maze) with the entrance at (0, 1)
        and the exit at (2, 1).

    Args:
        text: Rendered maze text

    Returns:
        ParsedMazeGrid with one token per grid position

    Raises:
        MalformedMazeTextError: If the text is empty, ragged, or uses unknown glyphs
    """
    lines = text.split("\n")
    while lines and not lines[-1]:
        lines.pop()

    if not lines:
        raise MalformedMazeTextError("Malformed maze text: no rows found")

    line_length = len(lines[0])
    if line_length == 0 or line_length % TOKEN_WIDTH:
        raise MalformedMazeTextError(
            f"Malformed maze text: first row has {line_length} characters\n"
            f"  Row 0: \"{lines[0]}\"\n"
            f"  Rows must be a non-zero multiple of {TOKEN_WIDTH} characters"
        )

    mismatched = [(i, len(line)) for i, line in enumerate(lines) if len(line) != line_length]
    if mismatched:
        error_msg = (
            f"Malformed maze text: inconsistent row lengths\n"
            f"  Expected: {line_length} characters (from row 0)\n"
            f"  Mismatched rows:\n"
        )
        for row_idx, actual in mismatched:
            error_msg += f"    Row {row_idx}: {actual} characters - \"{lines[row_idx]}\"\n"
        error_msg += "  All rows must have the same length"
        raise MalformedMazeTextError(error_msg)

    tokens: list[list[str]] = []
    for row_idx, line in enumerate(lines):
        row: list[str] = []
        for col_idx in range(line_length // TOKEN_WIDTH):
            token = line[col_idx * TOKEN_WIDTH:(col_idx + 1) * TOKEN_WIDTH]
            if token not in TOKENS:
                raise MalformedMazeTextError(
                    f"Malformed maze text: invalid token '{token}'\n"
                    f"  Row {row_idx}, column {col_idx}\n"
                    f"  Valid tokens: 'X ' (wall), '  ' (open), '+ ' (path)"
                )
            row.append(token)
        tokens.append(row)

    grid = ParsedMazeGrid(tokens)
    if grid.rows < 2 or grid.cols < 2:
        raise MalformedMazeTextError(
            f"Malformed maze text: {grid.rows}x{grid.cols} tokens is too small\n"
            f"  Need at least 2 rows and 2 columns for an entrance and an exit"
        )

    logger.debug("parse_maze_text: %d rows, %d cols", grid.rows, grid.cols)
    return grid


def read_maze_file(path: str | Path) -> str:
    """
    Read rendered maze text from a file.

    Raises:
        MazeFileUnavailableError: If the file cannot be opened or read
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise MazeFileUnavailableError(f"Input maze file unavailable: {path}") from exc

    logger.info("Read maze file %s (%d characters)", path, len(text))
    return text


def write_maze_file(path: str | Path, text: str) -> None:
    """Write rendered maze text to a file."""
    Path(path).write_text(text, encoding="utf-8")
    logger.info("Wrote maze file %s", path)
