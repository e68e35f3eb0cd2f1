class PathfindingError(Exception):
    """Base class for every failure raised by mazepath."""


class OutOfBounds(PathfindingError, IndexError):
    def __init__(self, pos, rows, cols):
        super().__init__(f"Position {pos} is outside a {rows}x{cols} grid")
        self.pos = pos


class InvalidGrid(PathfindingError, ValueError):
    pass


class UnreachableGoal(PathfindingError):
    def __init__(self, start, goal):
        super().__init__(f"No path connects start {start} and goal {goal}")
        self.start = start
        self.goal = goal


class NoDecreasingNeighbor(PathfindingError):
    def __init__(self, pos, distance, message=None):
        super().__init__(message or f"No neighbour of {pos} has distance {distance - 1}")
        self.pos = pos
        self.distance = distance
