# astar_lab/core/defaults.py
#!/usr/bin/env python3
"""
Default board layout.

Coordinates are in `Grid.get_node` space, so negative values count back
from the right/bottom edge (one adjustment only).
"""

from typing import List

from astar_lab.core.types import Cell

CELL_SIZE = 32
DEFAULT_COLUMNS = 40
DEFAULT_VIEWPORT_HEIGHT = 640

DEFAULT_START: Cell = (1, 4)
DEFAULT_END: Cell = (-2, 1)

DEFAULT_WALLS: List[Cell] = [
    # lower arm
    (8, -1), (8, -2), (8, -3), (8, -4), (7, -4), (6, -4), (5, -4),
    # upper arm
    (8, -5), (8, -6), (8, -7), (8, -8), (7, -8), (6, -8), (5, -8),
    # column from the top
    (8, 0), (8, 1), (8, 2), (8, 3), (8, 4), (8, 5), (8, 6), (8, 7), (8, 8),
]
