from dataclasses import dataclass, field
from typing import List

from .grid import Grid, Position
from .reconstruct import reconstruct_path
from .shortest_path import DistanceMap, search_from_goal


@dataclass
class PathResult:
    """Shortest path from start to goal plus the distance field it was read from"""
    moves: List[Position]
    distances: DistanceMap = field(repr=False)

    @property
    def move_count(self) -> int:
        return len(self.moves) - 1

    @property
    def start(self) -> Position:
        return self.moves[0]

    @property
    def goal(self) -> Position:
        return self.moves[-1]


def solve_maze(grid: Grid, start: Position = None, goal: Position = None) -> PathResult:
    if start is None:
        start = grid.start
    if goal is None:
        goal = grid.goal
    distances = search_from_goal(grid, goal, start)
    moves = reconstruct_path(grid, distances, start, goal)
    return PathResult(moves, distances)
