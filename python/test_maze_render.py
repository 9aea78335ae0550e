"""
Tests for maze rendering.
"""

import re

import pytest

from maze import Maze
from maze_parser import parse_maze_text
from maze_render import render_glyphs, render_maze, render_solution
from maze_solver import solve_maze
from maze_types import DIRECTIONS, OPEN, WALL, CellPosition

ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


class TestRenderLayout:
    """Tests for the shape of the rendered text."""

    @pytest.mark.parametrize("width,height", [(1, 1), (3, 2), (5, 5), (15, 10)])
    def test_dimensions(self, width: int, height: int) -> None:
        """2*height+1 lines of 2*width+1 tokens, then a blank line."""
        text = render_maze(Maze(width, height, seed=1))
        assert text.endswith("\n\n")

        lines = text.split("\n")[:-2]
        assert len(lines) == 2 * height + 1
        for line in lines:
            assert len(line) == 2 * (2 * width + 1)

    def test_single_cell(self) -> None:
        """A 1x1 maze has the entrance above and the exit below its only cell."""
        assert render_maze(Maze(1, 1)) == "X   X \nX   X \nX   X \n\n"

    def test_top_border_has_entrance(self) -> None:
        """The top border is all wall except the second token."""
        width = 6
        first_line = render_maze(Maze(width, 3, seed=2)).split("\n")[0]
        assert first_line == WALL + OPEN + WALL * (2 * width - 1)

    def test_bottom_border_has_exit(self) -> None:
        """The bottom border is all wall except the second-to-last token."""
        width, height = 4, 3
        buffer = render_glyphs(Maze(width, height, seed=2))
        assert buffer[-1] == [WALL] * (2 * width - 1) + [OPEN, WALL]

    def test_borders(self) -> None:
        """Left and right columns are solid wall."""
        buffer = render_glyphs(Maze(5, 4, seed=3))
        assert all(row[0] == WALL for row in buffer)
        assert all(row[-1] == WALL for row in buffer)

    def test_cells_open_and_corners_wall(self) -> None:
        """Cell interiors are always open, corner posts always wall."""
        buffer = render_glyphs(Maze(6, 5, seed=4))
        rows, cols = len(buffer), len(buffer[0])
        for r in range(1, rows, 2):
            for c in range(1, cols, 2):
                assert buffer[r][c] == OPEN
        for r in range(2, rows - 1, 2):
            for c in range(2, cols - 1, 2):
                assert buffer[r][c] == WALL

    def test_idempotent(self) -> None:
        """Rendering the same maze twice gives the same text."""
        maze = Maze(9, 7, seed=5)
        assert render_maze(maze) == render_maze(maze)


class TestRenderSeams:
    """Seams between cells reflect the surviving links."""

    @pytest.mark.parametrize("seed", range(5))
    def test_seams_match_links(self, seed: int) -> None:
        """A seam is open exactly when its two cells are linked."""
        maze = Maze(7, 5, seed=seed)
        buffer = render_glyphs(maze)

        for row in range(maze.height):
            for col in range(maze.width):
                pos = CellPosition(row, col)
                for direction in DIRECTIONS:
                    other = pos.step(direction)
                    if not maze.in_bounds(other):
                        continue
                    seam = buffer[pos.row + other.row + 1][pos.col + other.col + 1]
                    expected = OPEN if maze.is_linked(pos, direction) else WALL
                    assert seam == expected

    def test_open_seam_count(self) -> None:
        """Inside the borders, one open seam per passage."""
        maze = Maze(8, 8, seed=6)
        buffer = render_glyphs(maze)
        open_seams = sum(
            1
            for r in range(1, len(buffer) - 1)
            for c in range(1, len(buffer[0]) - 1)
            if (r + c) % 2 == 1 and buffer[r][c] == OPEN
        )
        assert open_seams == maze.passage_count


class TestRenderSolution:
    """Tests for rendering parsed grids."""

    def test_plain(self) -> None:
        """Without colour the output is the grid's text."""
        grid = parse_maze_text(render_maze(Maze(4, 4, seed=7)))
        solve_maze(grid)
        assert render_solution(grid, color=False) == str(grid)

    def test_coloured_text_matches_plain(self) -> None:
        """Colouring only adds escape codes."""
        grid = parse_maze_text(render_maze(Maze(4, 4, seed=7)))
        solve_maze(grid)
        assert ANSI_ESCAPE.sub("", render_solution(grid)) == str(grid)
