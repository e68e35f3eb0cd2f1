from .errors import InvalidGrid, NoDecreasingNeighbor, OutOfBounds, PathfindingError, UnreachableGoal
from .grid import Cell, Grid, validate_grid
from .maze_generator import generate_maze, generate_maze_with_trace
from .reconstruct import reconstruct_path
from .shortest_path import compute_distances, iter_frontiers, search_from_goal
from .solver import PathResult, solve_maze

__version__ = '0.1.0'
