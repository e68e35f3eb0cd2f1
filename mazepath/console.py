import sys
import time
from typing import List, Optional, TextIO

import numpy as np

from .config import STEP_DELAY
from .grid import GLYPHS, Cell, Grid, Position
from .shortest_path import DistanceMap


def format_grid(cells: np.ndarray) -> str:
    return '\n'.join(''.join(GLYPHS[Cell(int(code))] for code in row) for row in cells)


def format_distances(grid: Grid, distances: DistanceMap) -> str:
    """Grid frame with each open cell replaced by its distance (mod 10 so columns stay aligned)."""
    lines = []
    for y, row in enumerate(grid.cells):
        line = ''
        for x, code in enumerate(row):
            if code == Cell.OPEN and (x, y) in distances:
                line += str(distances[(x, y)] % 10)
            else:
                line += GLYPHS[Cell(int(code))]
        lines.append(line)
    return '\n'.join(lines)


class MarkerTrace:
    """Mutable copy of a grid's cells whose start marker walks along a path."""

    def __init__(self, grid: Grid, position: Optional[Position] = None):
        self.cells = np.array(grid.cells, dtype=np.int8)
        self.position = position if position is not None else grid.start
        self.moves_used = 0

    def move_to(self, pos: Position) -> None:
        x, y = self.position
        self.cells[y, x] = Cell.OPEN
        x, y = pos
        self.cells[y, x] = Cell.START
        self.position = pos
        self.moves_used += 1

    def frame(self) -> str:
        return format_grid(self.cells)


def print_frame(text: str, out: Optional[TextIO] = None) -> None:
    out = out or sys.stdout
    print(text, file=out)
    print(file=out)


def animate_moves(grid: Grid, moves: List[Position], delay: float = STEP_DELAY, out: Optional[TextIO] = None) -> int:
    """Print the starting frame and then one frame per move; returns the number of moves made."""
    trace = MarkerTrace(grid, moves[0])
    print_frame(trace.frame(), out)
    for pos in moves[1:]:
        if delay > 0:
            time.sleep(delay)
        trace.move_to(pos)
        print_frame(trace.frame(), out)
    return trace.moves_used
