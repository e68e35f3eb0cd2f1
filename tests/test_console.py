import io

from mazepath.console import MarkerTrace, animate_moves, format_distances, format_grid
from mazepath.grid import Cell
from mazepath.shortest_path import compute_distances
from mazepath.solver import solve_maze


def test_format_grid(detour_grid):
    assert format_grid(detour_grid.cells) == 'XXXXX\nXS__X\nX_X_X\nX__OX\nXXXXX'


def test_format_distances(detour_grid):
    distances = compute_distances(detour_grid, detour_grid.goal)
    assert format_distances(detour_grid, distances) == 'XXXXX\nXS32X\nX3X1X\nX21OX\nXXXXX'


def test_marker_trace_leaves_grid_untouched(detour_grid):
    trace = MarkerTrace(detour_grid)
    trace.move_to((1, 2))
    assert trace.cells[1, 1] == Cell.OPEN
    assert trace.cells[2, 1] == Cell.START
    assert trace.moves_used == 1
    assert detour_grid.cell_at((1, 1)) is Cell.START


def test_animate_moves_prints_each_frame(detour_grid):
    result = solve_maze(detour_grid)
    out = io.StringIO()
    moves_used = animate_moves(detour_grid, result.moves, delay=0, out=out)
    assert moves_used == 4
    frames = out.getvalue().strip().split('\n\n')
    assert len(frames) == 5
    assert frames[0] == 'XXXXX\nXS__X\nX_X_X\nX__OX\nXXXXX'
    assert frames[2] == 'XXXXX\nX___X\nX_X_X\nXS_OX\nXXXXX'
    assert frames[-1] == 'XXXXX\nX___X\nX_X_X\nX__SX\nXXXXX'


def test_animate_single_cell_path(detour_grid):
    out = io.StringIO()
    assert animate_moves(detour_grid, [(1, 1)], delay=0, out=out) == 0
    assert out.getvalue().count('S') == 1
