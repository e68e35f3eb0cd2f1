"""Random maze with a guaranteed corridor from start to goal.

Interior cells are walls or open at random, the start and goal tokens land on
two distinct interior cells, and a tracer then wanders from the start to the
goal opening every cell it steps on. The corridor it leaves behind is the
reachability guarantee; it is not necessarily the shortest route.
"""
from typing import List, Optional, Tuple

import numpy as np

from .config import DEFAULT_COLS, DEFAULT_ROWS, MIN_SIZE, WALL_PROBABILITY, WOBBLE_PROBABILITY
from .errors import InvalidGrid
from .grid import Cell, Grid, Position


def random_interior(rows: int, cols: int, wall_probability: float, rng: np.random.Generator) -> np.ndarray:
    cells = np.full((rows, cols), Cell.WALL, dtype=np.int8)
    walls = rng.random((rows - 2, cols - 2)) < wall_probability
    cells[1:-1, 1:-1] = np.where(walls, Cell.WALL, Cell.OPEN)
    return cells


def place_tokens(cells: np.ndarray, rng: np.random.Generator) -> Tuple[Position, Position]:
    rows, cols = cells.shape
    start = (int(rng.integers(1, cols - 1)), int(rng.integers(1, rows - 1)))
    goal = start
    while goal == start:
        goal = (int(rng.integers(1, cols - 1)), int(rng.integers(1, rows - 1)))
    cells[start[1], start[0]] = Cell.START
    cells[goal[1], goal[0]] = Cell.GOAL
    return start, goal


def _advance(value: int, target: int, low: int, high: int, rng: np.random.Generator, wobble: float) -> int:
    if value < target:
        return value + 1
    if value > target:
        return value - 1
    if rng.random() < wobble:
        stepped = value + int(rng.choice((-1, 1)))
        if low <= stepped <= high:
            return stepped
    return value


def carve_corridor(cells: np.ndarray, start: Position, goal: Position, rng: np.random.Generator,
                   wobble: float = WOBBLE_PROBABILITY) -> List[Position]:
    """Open a random 4-connected walk from start to goal; returns every traced position.

    Each step picks an axis at random. On an axis where the tracer still
    lags the goal it moves one cell closer; on an axis it already shares with
    the goal it may drift one cell either way without leaving the interior.
    """
    rows, cols = cells.shape
    x, y = start
    traced = [start]
    while (x, y) != goal:
        if rng.integers(2) == 0:
            nx, ny = _advance(x, goal[0], 1, cols - 2, rng, wobble), y
        else:
            nx, ny = x, _advance(y, goal[1], 1, rows - 2, rng, wobble)
        if (nx, ny) == (x, y):
            continue
        x, y = nx, ny
        if cells[y, x] == Cell.WALL:
            cells[y, x] = Cell.OPEN
        traced.append((x, y))
    return traced


def generate_maze_with_trace(rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS,
                             wall_probability: float = WALL_PROBABILITY,
                             seed: Optional[int] = None) -> Tuple[Grid, List[Position]]:
    """Build a maze and return it together with the positions the corridor tracer walked."""
    if rows < MIN_SIZE or cols < MIN_SIZE:
        raise InvalidGrid(f"Maze must be at least {MIN_SIZE}x{MIN_SIZE}, got {rows}x{cols}")
    if rows == MIN_SIZE and cols == MIN_SIZE:
        raise InvalidGrid("A 3x3 maze has a single interior cell, no room for distinct start and goal")
    if not 0.0 <= wall_probability <= 1.0:
        raise ValueError(f"wall_probability must lie in [0, 1], got {wall_probability}")

    rng = np.random.default_rng(seed)
    cells = random_interior(rows, cols, wall_probability, rng)
    start, goal = place_tokens(cells, rng)
    traced = carve_corridor(cells, start, goal, rng)
    return Grid(cells), traced


def generate_maze(rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS, wall_probability: float = WALL_PROBABILITY,
                  seed: Optional[int] = None) -> Grid:
    grid, _ = generate_maze_with_trace(rows, cols, wall_probability, seed)
    return grid
