# astar_lab/core/node.py
#!/usr/bin/env python3
"""
A single grid cell: classification plus the A* costs.

Costs:
- g: accumulated cost from the start (UNSET until first reached).
- h: octile distance to the end, recomputed every time the node is marked.
- f: g + h, the primary frontier key.

Classification moves EMPTY -> POTENTIAL -> CHECKED -> SELECTED during a
search. START / END / WALL are set by placement.
"""

from astar_lab.core.errors import InvariantViolation
from astar_lab.core.types import Cell, NodeType, STRAIGHT_COST, DIAGONAL_COST, UNSET


class Node:
    __slots__ = ("_x", "_y", "_kind", "_g_cost", "_h_cost")

    def __init__(self, x: int, y: int):
        self._x = x
        self._y = y
        self._kind = NodeType.EMPTY
        self._g_cost = UNSET
        self._h_cost = UNSET

    def __repr__(self) -> str:
        return f"Node({self._x}, {self._y}, {self._kind.value}, g={self._g_cost}, h={self._h_cost})"

    # -------------------- read access --------------------

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def cell(self) -> Cell:
        return (self._x, self._y)

    @property
    def kind(self) -> NodeType:
        return self._kind

    @property
    def g_cost(self) -> int:
        return self._g_cost

    @property
    def h_cost(self) -> int:
        return self._h_cost

    @property
    def f_cost(self) -> int:
        return self._g_cost + self._h_cost

    # -------------------- placement --------------------

    def make_start(self) -> None:
        self._kind = NodeType.START
        self._g_cost = 0

    def make_end(self) -> None:
        self._kind = NodeType.END

    def make_wall(self) -> None:
        self._kind = NodeType.WALL

    def make_empty(self) -> None:
        self._kind = NodeType.EMPTY
        self._g_cost = UNSET
        self._h_cost = UNSET

    # -------------------- predicates --------------------

    def is_start(self) -> bool:
        return self._kind is NodeType.START

    def is_end(self) -> bool:
        return self._kind is NodeType.END

    def is_wall(self) -> bool:
        return self._kind is NodeType.WALL

    def is_empty(self) -> bool:
        return self._kind is NodeType.EMPTY

    def is_checked(self) -> bool:
        return self._kind is NodeType.CHECKED

    def is_potential(self) -> bool:
        return self._kind is NodeType.POTENTIAL

    def is_selected(self) -> bool:
        return self._kind is NodeType.SELECTED

    # -------------------- costs --------------------

    def distance_to(self, other: "Node") -> int:
        """Octile distance: diagonal steps cost 14, straight steps cost 10."""
        dx = abs(other.x - self._x)
        dy = abs(other.y - self._y)
        d_min = min(dx, dy)
        d_max = max(dx, dy)
        return d_min * DIAGONAL_COST + (d_max - d_min) * STRAIGHT_COST

    def calculate_g_cost(self, prev: "Node") -> None:
        """Relax g through `prev`; never raises an already-set cost."""
        candidate = prev.g_cost + self.distance_to(prev)
        if self._g_cost == UNSET or candidate < self._g_cost:
            self._g_cost = candidate

    # -------------------- search transitions --------------------

    def make_potential(self, prev: "Node", end: "Node") -> None:
        # Also valid on an already-potential node: g may drop, h is refreshed
        self.calculate_g_cost(prev)
        self._h_cost = self.distance_to(end)
        self._kind = NodeType.POTENTIAL

    def make_checked(self) -> None:
        if self._kind is not NodeType.POTENTIAL:
            raise InvariantViolation(f"make_checked on {self!r}: expected potential")
        self._kind = NodeType.CHECKED

    def make_selected(self) -> None:
        if self._kind is not NodeType.CHECKED:
            raise InvariantViolation(f"make_selected on {self!r}: expected checked")
        self._kind = NodeType.SELECTED
