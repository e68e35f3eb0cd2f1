import pytest

from mazepath.errors import NoDecreasingNeighbor, UnreachableGoal
from mazepath.grid import Grid
from mazepath.maze_generator import generate_maze
from mazepath.reconstruct import next_step, reconstruct_path
from mazepath.shortest_path import compute_distances, search_from_goal
from mazepath.solver import solve_maze


def _assert_valid_walk(grid, moves, distances):
    assert moves[0] == grid.start
    assert moves[-1] == grid.goal
    assert len(moves) - 1 == distances[grid.start]
    for (x1, y1), (x2, y2) in zip(moves, moves[1:]):
        assert abs(x1 - x2) + abs(y1 - y2) == 1
        assert grid.is_passable((x2, y2))


def test_detour_prefers_down_before_right(detour_grid):
    distances = search_from_goal(detour_grid, (3, 3), (1, 1))
    moves = reconstruct_path(detour_grid, distances, (1, 1), (3, 3))
    assert moves == [(1, 1), (1, 2), (1, 3), (2, 3), (3, 3)]
    assert len(moves) - 1 == 4


def test_next_step_tie_break_order(detour_grid):
    distances = compute_distances(detour_grid, (3, 3))
    # (1, 2) below and (2, 1) to the right both sit at distance 3
    assert next_step(detour_grid, distances, (1, 1)) == (1, 2)


def test_up_wins_over_left():
    grid = Grid.from_strings([
        'XXXXX',
        'XO__X',
        'X_S_X',
        'X___X',
        'XXXXX',
    ])
    result = solve_maze(grid)
    assert result.moves == [(2, 2), (2, 1), (1, 1)]


def test_left_wins_over_right():
    grid = Grid.from_strings([
        'XXXXXXX',
        'X__S__X',
        'X_XXX_X',
        'X__O__X',
        'XXXXXXX',
    ])
    result = solve_maze(grid)
    assert result.moves == [(3, 1), (2, 1), (1, 1), (1, 2), (1, 3), (2, 3), (3, 3)]


def test_single_cell_start_is_goal():
    grid = Grid.from_strings([
        'XXX',
        'X_X',
        'XXX',
    ])
    distances = search_from_goal(grid, (1, 1), (1, 1))
    assert reconstruct_path(grid, distances, (1, 1), (1, 1)) == [(1, 1)]


def test_reconstruction_is_repeatable(loop_grid):
    distances = compute_distances(loop_grid, loop_grid.goal)
    first = reconstruct_path(loop_grid, distances, loop_grid.start, loop_grid.goal)
    second = reconstruct_path(loop_grid, distances, loop_grid.start, loop_grid.goal)
    assert first == second
    _assert_valid_walk(loop_grid, first, distances)


def test_generated_mazes_yield_shortest_walks():
    for seed in range(40):
        grid = generate_maze(10, 10, seed=seed)
        result = solve_maze(grid)
        _assert_valid_walk(grid, result.moves, result.distances)
        assert result.move_count == result.distances[grid.start]


def test_start_without_distance_raises(split_grid):
    distances = compute_distances(split_grid, split_grid.goal)
    with pytest.raises(UnreachableGoal):
        reconstruct_path(split_grid, distances, split_grid.start, split_grid.goal)


def test_inconsistent_map_raises(detour_grid):
    distances = {(3, 3): 0, (1, 1): 4, (2, 1): 5}
    with pytest.raises(NoDecreasingNeighbor) as excinfo:
        reconstruct_path(detour_grid, distances, (1, 1), (3, 3))
    assert excinfo.value.pos == (1, 1)
    assert str(excinfo.value) == "No neighbour of (1, 1) has distance 3"


def test_walk_ending_off_goal_raises(detour_grid):
    # map measured from (2, 1) while asking for a walk to (3, 3)
    distances = compute_distances(detour_grid, (2, 1))
    with pytest.raises(NoDecreasingNeighbor) as excinfo:
        reconstruct_path(detour_grid, distances, (1, 1), (3, 3))
    assert excinfo.value.pos == (2, 1)
    assert str(excinfo.value) == "Walk ended at (2, 1) instead of goal (3, 3)"


def test_wall_labels_are_ignored(detour_grid):
    distances = compute_distances(detour_grid, (3, 3))
    distances[(2, 2)] = 2
    moves = reconstruct_path(detour_grid, distances, (2, 1), (3, 3))
    assert moves == [(2, 1), (3, 1), (3, 2), (3, 3)]
