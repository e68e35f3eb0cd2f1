from typing import List

from .errors import NoDecreasingNeighbor, UnreachableGoal
from .grid import Grid, Position
from .shortest_path import DistanceMap


def next_step(grid: Grid, distances: DistanceMap, pos: Position) -> Position:
    """First neighbour (up, down, left, right) that is one move closer to the origin."""
    wanted = distances[pos] - 1
    for nxt in grid.neighbors(pos):
        if distances.get(nxt) == wanted and grid.is_passable(nxt):
            return nxt
    raise NoDecreasingNeighbor(pos, distances[pos])


def reconstruct_path(grid: Grid, distances: DistanceMap, start: Position, goal: Position) -> List[Position]:
    """Walk downhill through a goal-origin distance map from start to goal.

    Each step lowers the distance by exactly one, so the walk takes
    ``distances[start]`` steps and the result holds one more position than that.
    """
    if start not in distances:
        raise UnreachableGoal(start, goal)
    pos = start
    moves = [pos]
    for _ in range(distances[start]):
        pos = next_step(grid, distances, pos)
        moves.append(pos)
    if pos != goal:
        raise NoDecreasingNeighbor(pos, distances[pos], f"Walk ended at {pos} instead of goal {goal}")
    return moves
