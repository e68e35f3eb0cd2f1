from enum import IntEnum
from typing import Iterator, List, Sequence, Tuple

import numpy as np

from .config import GOAL_GLYPH, MIN_SIZE, OPEN_GLYPH, START_GLYPH, WALL_GLYPH
from .errors import InvalidGrid, OutOfBounds

Position = Tuple[int, int]

# up, down, left, right
DIRECTIONS = [('U', 0, -1), ('D', 0, 1), ('L', -1, 0), ('R', 1, 0)]


class Cell(IntEnum):
    WALL = 0
    OPEN = 1
    START = 2
    GOAL = 3


GLYPHS = {
    Cell.WALL: WALL_GLYPH,
    Cell.OPEN: OPEN_GLYPH,
    Cell.START: START_GLYPH,
    Cell.GOAL: GOAL_GLYPH,
}
CELLS_BY_GLYPH = {glyph: cell for cell, glyph in GLYPHS.items()}


class Grid:
    """Fixed-size rectangular maze.

    Cells are stored row-major in a read-only numpy array, so a position
    ``(x, y)`` lives at ``cells[y, x]``: x picks the column, y the row.
    """

    def __init__(self, cells):
        try:
            raw = np.asarray(cells)
        except ValueError as e:
            raise InvalidGrid(f"Grid rows must form a rectangle: {e}") from e
        if raw.ndim != 2:
            raise InvalidGrid(f"Grid must be two-dimensional, got shape {raw.shape}")
        rows, cols = raw.shape
        if rows < MIN_SIZE or cols < MIN_SIZE:
            raise InvalidGrid(f"Grid must be at least {MIN_SIZE}x{MIN_SIZE}, got {rows}x{cols}")
        if raw.dtype.kind not in 'iu':
            raise InvalidGrid(f"Grid cell codes must be integers, got dtype {raw.dtype}")
        known = [int(cell) for cell in Cell]
        if not np.isin(raw, known).all():
            unknown = sorted({int(code) for code in raw.ravel()} - set(known))
            raise InvalidGrid(f"Grid contains unknown cell codes: {unknown}")
        # copy, so later edits to the caller's array never reach the grid
        array = raw.astype(np.int8)
        array.flags.writeable = False
        self._cells = array

    @classmethod
    def from_strings(cls, lines: Sequence[str]) -> 'Grid':
        try:
            cells = [[CELLS_BY_GLYPH[glyph] for glyph in line] for line in lines]
        except KeyError as e:
            raise InvalidGrid(f"Unknown cell glyph {e.args[0]!r}") from None
        if len({len(row) for row in cells}) > 1:
            raise InvalidGrid("All grid rows must have the same length")
        return cls(cells)

    @property
    def cells(self) -> np.ndarray:
        return self._cells

    @property
    def rows(self) -> int:
        return self._cells.shape[0]

    @property
    def cols(self) -> int:
        return self._cells.shape[1]

    def dimensions(self) -> Tuple[int, int]:
        return self.rows, self.cols

    def in_bounds(self, pos: Position) -> bool:
        x, y = pos
        return 0 <= x < self.cols and 0 <= y < self.rows

    def cell_at(self, pos: Position) -> Cell:
        if not self.in_bounds(pos):
            raise OutOfBounds(pos, self.rows, self.cols)
        x, y = pos
        return Cell(int(self._cells[y, x]))

    def is_passable(self, pos: Position) -> bool:
        return self.cell_at(pos) is not Cell.WALL

    def neighbors(self, pos: Position) -> Iterator[Position]:
        """Yield the in-bounds 4-neighbours of pos, in up/down/left/right order."""
        x, y = pos
        for _, dx, dy in DIRECTIONS:
            nxt = (x + dx, y + dy)
            if self.in_bounds(nxt):
                yield nxt

    def positions_of(self, kind: Cell) -> List[Position]:
        ys, xs = np.nonzero(self._cells == kind)
        return [(int(x), int(y)) for y, x in zip(ys, xs)]

    def _single(self, kind: Cell) -> Position:
        found = self.positions_of(kind)
        if len(found) != 1:
            raise InvalidGrid(f"Expected exactly one {kind.name} cell, found {len(found)}")
        return found[0]

    @property
    def start(self) -> Position:
        return self._single(Cell.START)

    @property
    def goal(self) -> Position:
        return self._single(Cell.GOAL)

    def copy_cells(self) -> np.ndarray:
        return self._cells.copy()

    def to_strings(self) -> List[str]:
        return [''.join(GLYPHS[Cell(int(code))] for code in row) for row in self._cells]

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return np.array_equal(self._cells, other._cells)

    def __hash__(self):
        return hash(self._cells.tobytes())

    def __repr__(self):
        return f"Grid(rows={self.rows}, cols={self.cols})"


def validate_grid(grid: Grid) -> Tuple[Position, Position]:
    """Check the structural maze invariants: wall border, one start and one goal.

    Start and goal are distinct cell kinds, so finding one of each also means
    they sit on different positions. Reachability is left to the search,
    which raises UnreachableGoal.
    """
    cells = grid.cells
    border = np.concatenate([cells[0, :], cells[-1, :], cells[:, 0], cells[:, -1]])
    if (border != Cell.WALL).any():
        raise InvalidGrid("Every border cell must be a wall")
    return grid.start, grid.goal
