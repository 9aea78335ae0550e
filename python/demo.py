#!/usr/bin/env python3
"""
Demo of maze generation and solving.

Generates a few sample mazes, then solves a maze read from a text file.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from maze import Maze
from maze_render import render_solution
from maze_solver import MazeSolver
from maze_types import MalformedMazeTextError, MazeFileUnavailableError

logger = logging.getLogger(__name__)

# (width, height, debug)
DEMO_MAZES = [
    (5, 5, True),
    (5, 5, False),
    (15, 10, False),
]

DEFAULT_MAZE_FILE = Path(__file__).with_name("maze_test.txt")


def show_generated(console: Console) -> None:
    """Generate and display each of the sample mazes."""
    for width, height, debug in DEMO_MAZES:
        maze = Maze(width, height, debug, debug_sink=console.out)
        console.print(Panel(Text(maze.render()), title=f"{width}x{height} maze", expand=False))


def show_solved(console: Console, filename: Path) -> bool:
    """Solve the maze in ``filename`` and display it. Returns False if it could not be read."""
    try:
        solver = MazeSolver(filename)
    except (MazeFileUnavailableError, MalformedMazeTextError) as exc:
        logger.error("%s", exc)
        return False

    status = "solved" if solver.solved else "no path"
    console.print(
        Panel(
            Text.from_ansi(render_solution(solver.grid)),
            title=f"{filename.name} ({status})",
            border_style="green" if solver.solved else "red",
            expand=False,
        )
    )
    return True


def main(filename: Path = DEFAULT_MAZE_FILE) -> int:
    console = Console()
    show_generated(console)
    return 0 if show_solved(console, filename) else 1


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')
    sys.exit(main(Path(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_MAZE_FILE))
