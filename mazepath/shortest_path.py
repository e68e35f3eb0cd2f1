"""Breadth-first distance labelling over a Grid.

Distances are measured from an origin cell (the goal, when solving a maze).
Each level of the search is one frontier: every position in it shares the
same distance. A position is recorded the first time any frontier reaches
it, and breadth-first order makes that first distance the minimum, so no
entry is ever revised and nothing is enqueued twice.
"""
from typing import Dict, Iterator, List, Tuple

from .errors import InvalidGrid, UnreachableGoal
from .grid import Grid, Position

DistanceMap = Dict[Position, int]


def iter_frontiers(grid: Grid, origin: Position, distances: DistanceMap = None) -> Iterator[Tuple[int, List[Position]]]:
    """Yield ``(distance, frontier)`` for every level of the search, origin first.

    When ``distances`` is given it is filled in place as levels are produced.
    """
    if not grid.is_passable(origin):
        raise InvalidGrid(f"Search origin {origin} is a wall")
    if distances is None:
        distances = {}
    distances.clear()
    distances[origin] = 0
    frontier = [origin]
    level = 0
    while frontier:
        yield level, frontier
        next_frontier = []
        for pos in frontier:
            for nxt in grid.neighbors(pos):
                if nxt in distances or not grid.is_passable(nxt):
                    continue
                distances[nxt] = level + 1
                next_frontier.append(nxt)
        frontier = next_frontier
        level += 1


def compute_distances(grid: Grid, origin: Position) -> DistanceMap:
    """Label every cell reachable from origin with its move count from origin."""
    distances = {}
    for _ in iter_frontiers(grid, origin, distances):
        pass
    return distances


def search_from_goal(grid: Grid, goal: Position, start: Position) -> DistanceMap:
    grid.cell_at(start)
    distances = compute_distances(grid, goal)
    if start not in distances:
        raise UnreachableGoal(start, goal)
    return distances
