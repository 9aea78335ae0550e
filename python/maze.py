"""
Random perfect maze generation.

A maze is a width x height grid of cells. Generation starts from the full mesh
of grid-adjacent links and carves a random spanning tree out of it with a
depth-first walk, severing every link that would close a cycle. The surviving
links are the passages; everything else renders as wall.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterator

from maze_parser import write_maze_file
from maze_render import render_maze
from maze_types import DIRECTIONS, CellPosition, Direction, InvalidDimensionsError

logger = logging.getLogger(__name__)


@dataclass
class Cell:
    """A maze cell: the directions it still links to, plus the carve flag."""

    links: set[Direction] = field(default_factory=set)
    visited: bool = False


@dataclass
class _Frame:
    """One level of the carve walk: a cell and its pending candidates."""

    position: CellPosition
    candidates: list[Direction]


class Maze:
    """A randomly generated perfect maze.

    Construction fully generates the maze. Pass ``seed`` or an explicit ``rng``
    for repeatable output. With ``debug`` set, the in-progress maze is rendered
    to ``debug_sink`` after every severed link.
    """

    def __init__(
        self,
        width: int,
        height: int,
        debug: bool = False,
        *,
        rng: random.Random | None = None,
        seed: int | None = None,
        debug_sink: Callable[[str], None] = print,
    ) -> None:
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise InvalidDimensionsError(
                    f"Invalid maze {name}: {value!r}\n"
                    f"  Width and height must be positive integers"
                )

        self.width = width
        self.height = height
        self.debug = debug
        self.debug_sink = debug_sink
        self.rng = rng if rng is not None else random.Random(seed)

        self.cells: list[list[Cell]] = [[Cell() for _ in range(width)] for _ in range(height)]
        self._connect_neighbors()
        self._carve(CellPosition(0, 0))

        logger.info(
            "Generated %dx%d maze with %d passages",
            width,
            height,
            self.passage_count,
        )

    # -------------------------------------------------------------------------
    # Grid access
    # -------------------------------------------------------------------------

    def in_bounds(self, pos: CellPosition) -> bool:
        return 0 <= pos.row < self.height and 0 <= pos.col < self.width

    def cell(self, pos: CellPosition) -> Cell:
        if not self.in_bounds(pos):
            raise IndexError(f"Cell ({pos.row}, {pos.col}) is outside the {self.width}x{self.height} maze")
        return self.cells[pos.row][pos.col]

    def is_linked(self, pos: CellPosition, direction: Direction) -> bool:
        """True if a passage leads from ``pos`` in ``direction``.

        Both sides of the link must agree.
        """
        other = pos.step(direction)
        if not self.in_bounds(pos) or not self.in_bounds(other):
            return False
        return (
            direction in self.cell(pos).links
            and direction.opposite in self.cell(other).links
        )

    def neighbors(self, pos: CellPosition) -> list[CellPosition]:
        """Cells reachable from ``pos`` through one passage."""
        return [pos.step(d) for d in DIRECTIONS if self.is_linked(pos, d)]

    def passages(self) -> Iterator[tuple[CellPosition, CellPosition]]:
        """Yield each surviving passage once, as a pair of positions."""
        for row in range(self.height):
            for col in range(self.width):
                pos = CellPosition(row, col)
                # Only look right and down so each edge is seen once
                for direction in (Direction.E, Direction.S):
                    if self.is_linked(pos, direction):
                        yield pos, pos.step(direction)

    @property
    def passage_count(self) -> int:
        return sum(1 for _ in self.passages())

    # -------------------------------------------------------------------------
    # Generation
    # -------------------------------------------------------------------------

    def _connect_neighbors(self) -> None:
        """Link every cell to each of its in-grid neighbours."""
        for row in range(self.height):
            for col in range(self.width):
                pos = CellPosition(row, col)
                cell = self.cells[row][col]
                for direction in DIRECTIONS:
                    if self.in_bounds(pos.step(direction)):
                        cell.links.add(direction)

    def sever(self, pos: CellPosition, direction: Direction) -> None:
        """Remove the link from ``pos`` in ``direction`` on both sides."""
        self.cell(pos).links.discard(direction)
        other = pos.step(direction)
        if self.in_bounds(other):
            self.cell(other).links.discard(direction.opposite)

        logger.debug("Severed (%d, %d) %s", pos.row, pos.col, direction.value)
        if self.debug:
            self.display()

    def _enter(self, pos: CellPosition, previous: CellPosition | None) -> _Frame:
        """Visit ``pos``: collect unvisited neighbours, cut links back into the tree."""
        cell = self.cells[pos.row][pos.col]
        cell.visited = True

        candidates: list[Direction] = []
        for direction in DIRECTIONS:
            if direction not in cell.links:
                continue
            other = pos.step(direction)
            if not self.cell(other).visited:
                candidates.append(direction)
            elif other != previous:
                self.sever(pos, direction)
        return _Frame(pos, candidates)

    def _carve(self, start: CellPosition) -> None:
        """Randomized depth-first carve of a spanning tree rooted at ``start``.

        Uses an explicit stack; a candidate that got visited by a deeper branch
        before being picked has its link severed instead of being entered.
        """
        stack = [self._enter(start, None)]

        while stack:
            frame = stack[-1]
            if not frame.candidates:
                stack.pop()
                continue

            direction = frame.candidates.pop(self.rng.randrange(len(frame.candidates)))
            target = frame.position.step(direction)
            if not self.cell(target).visited:
                stack.append(self._enter(target, frame.position))
            elif direction in self.cell(frame.position).links:
                self.sever(frame.position, direction)

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def render(self) -> str:
        return render_maze(self)

    def __str__(self) -> str:
        return self.render()

    def display(self) -> None:
        """Send the current rendering to the debug sink (stdout by default)."""
        self.debug_sink(self.render())

    def save(self, path: str | Path) -> None:
        """Write the rendered maze to ``path`` in the solver's input format."""
        write_maze_file(path, self.render())
