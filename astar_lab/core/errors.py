# astar_lab/core/errors.py
#!/usr/bin/env python3


class AStarLabError(Exception):
    """Base class for errors raised by the search core."""


class InvariantViolation(AStarLabError):
    """An internal contract of the search was broken. Never recoverable."""


class OutOfGridError(AStarLabError, IndexError):
    """A coordinate resolved to an index outside the node list."""

    def __init__(self, x: int, y: int, index: int):
        super().__init__(f"cell ({x}, {y}) resolves to index {index}, outside the grid")
        self.x = x
        self.y = y
        self.index = index
