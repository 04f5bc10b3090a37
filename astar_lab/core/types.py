# astar_lab/core/types.py
#!/usr/bin/env python3
from enum import Enum
from typing import Tuple

Cell = Tuple[int, int]  # (col, row)

# Fixed-point step costs: 14 ~ sqrt(2) * 10
STRAIGHT_COST = 10
DIAGONAL_COST = 14

UNSET = -1


class NodeType(Enum):
    EMPTY = "empty"
    WALL = "wall"
    START = "start"
    END = "end"
    POTENTIAL = "potential"
    CHECKED = "checked"
    SELECTED = "selected"


class SearchState(Enum):
    MARKING = "marking"
    CHECKING = "checking"
    BACKTRACKING = "backtracking"
    END = "end"
