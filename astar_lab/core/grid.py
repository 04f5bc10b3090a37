# astar_lab/core/grid.py
#!/usr/bin/env python3
"""
Steppable A* over a rectangular grid: one state's worth of work per tick().

States:
    MARKING -> CHECKING -> MARKING -> ... -> BACKTRACKING -> ... -> END

- MARKING re-scans the whole closed set and marks/relaxes its neighbours.
- CHECKING promotes exactly one frontier node (lowest f, then lowest h,
  then first in frontier order).
- BACKTRACKING walks from the end to the start through strictly
  decreasing g, one node per tick.
- END is terminal.

Diagonal moves are allowed (8-connected). An unreachable end is not
reported: the grid keeps alternating MARKING / CHECKING.
"""

import logging
from typing import Iterable, Iterator, List, Optional

from astar_lab.core.defaults import (
    CELL_SIZE,
    DEFAULT_START,
    DEFAULT_END,
    DEFAULT_WALLS,
)
from astar_lab.core.errors import InvariantViolation, OutOfGridError
from astar_lab.core.node import Node
from astar_lab.core.types import Cell, SearchState

logger = logging.getLogger(__name__)


class Grid:
    def __init__(
        self,
        cols: int,
        viewport_height: int,
        cell_size: int = CELL_SIZE,
        start: Cell = DEFAULT_START,
        end: Cell = DEFAULT_END,
        walls: Iterable[Cell] = DEFAULT_WALLS,
    ):
        if cols <= 0:
            raise ValueError(f"cols must be positive, got {cols}")
        if cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {cell_size}")
        rows = viewport_height // cell_size
        if rows <= 0:
            raise ValueError(f"viewport height {viewport_height} holds no row of size {cell_size}")

        self.cols = cols
        self.rows = rows
        self.cell_size = cell_size

        # row-major: index = y * cols + x
        self._nodes: List[Node] = [Node(c, r) for r in range(rows) for c in range(cols)]

        self.potential: List[Node] = []
        self.checked: List[Node] = []
        self.selected: List[Node] = []
        self.state = SearchState.MARKING

        self.start = self.get_node(*start)
        self.end = self.get_node(*end)
        self.start.make_start()
        self.end.make_end()

        self.backtrack_current: Node = self.end
        self.checked.append(self.start)

        for wx, wy in walls:
            self.get_node(wx, wy).make_wall()

        logger.debug("grid %dx%d (cell %dpx), start %s, end %s",
                     cols, rows, cell_size, self.start.cell, self.end.cell)

    @classmethod
    def fit_viewport(cls, cols: int, width: int, height: int, **kwargs) -> "Grid":
        """Size cells so `cols` columns span `width`, then fill `height` with rows."""
        if cols <= 0:
            raise ValueError(f"cols must be positive, got {cols}")
        return cls(cols, height, cell_size=max(1, width // cols), **kwargs)

    # -------------------- topology --------------------

    @property
    def nodes(self) -> Iterator[Node]:
        return iter(self._nodes)

    def get_node(self, x: int, y: int) -> Node:
        """
        Row-major lookup with a single wraparound for negative coordinates.

        (-1, 0) is the last column of the first row. Anything more negative
        than -cols / -rows is not wrapped a second time.
        """
        if y < 0:
            y += self.rows
        if x < 0:
            x += self.cols
        index = y * self.cols + x
        if not 0 <= index < len(self._nodes):
            raise OutOfGridError(x, y, index)
        return self._nodes[index]

    def get_neighbor_nodes(self, node: Node) -> List[Node]:
        """Up to 8 neighbours, clipped at the edges (no wraparound here)."""
        x, y = node.x, node.y
        has_up = y > 0
        has_left = x > 0
        has_down = y < self.rows - 1
        has_right = x < self.cols - 1

        out: List[Node] = []
        if has_up:
            out.append(self.get_node(x, y - 1))
        if has_left:
            out.append(self.get_node(x - 1, y))
        if has_down:
            out.append(self.get_node(x, y + 1))
        if has_right:
            out.append(self.get_node(x + 1, y))

        if has_left and has_up:
            out.append(self.get_node(x - 1, y - 1))
        if has_left and has_down:
            out.append(self.get_node(x - 1, y + 1))
        if has_right and has_up:
            out.append(self.get_node(x + 1, y - 1))
        if has_right and has_down:
            out.append(self.get_node(x + 1, y + 1))
        return out

    # -------------------- placement --------------------

    def node_at_pixel(self, px: float, py: float) -> Node:
        return self.get_node(int(px // self.cell_size), int(py // self.cell_size))

    def place_wall_at(self, px: float, py: float) -> None:
        node = self.node_at_pixel(px, py)
        if node is self.start or node is self.end:
            logger.debug("wall not placed on %s cell %s", node.kind.value, node.cell)
            return
        node.make_wall()

    def place_start_at(self, px: float, py: float) -> None:
        # Frontier, selection and search state are left as they are
        node = self.node_at_pixel(px, py)
        # Start and end never share a cell; a click on the end is ignored
        if node is self.end:
            logger.debug("start not placed on end cell %s", node.cell)
            return

        self.start.make_empty()
        node.make_start()
        self.checked = [node]
        self.start = node

    def place_end_at(self, px: float, py: float) -> None:
        node = self.node_at_pixel(px, py)
        # Start and end never share a cell; a click on the start is ignored
        if node is self.start:
            logger.debug("end not placed on start cell %s", node.cell)
            return

        self.end.make_empty()
        node.make_end()
        self.end = node
        self.backtrack_current = node

    # -------------------- search steps --------------------

    def _mark_potential_nodes(self) -> bool:
        """Mark neighbours of every closed node. True once the end is adjacent."""
        for closed in self.checked:
            for neighbor in self.get_neighbor_nodes(closed):
                if neighbor.is_end():
                    neighbor.calculate_g_cost(closed)
                    return True

                if neighbor.is_empty() or neighbor.is_potential():
                    if neighbor.is_empty():
                        self.potential.append(neighbor)
                    neighbor.make_potential(closed, self.end)
        return False

    def _check_best_potential_node(self) -> Optional[Node]:
        """Promote one frontier node: lowest f, then lowest h, then first seen."""
        if not self.potential:
            return None

        min_f = min(n.f_cost for n in self.potential)
        min_h = min(n.h_cost for n in self.potential if n.f_cost == min_f)

        index = next(
            i for i, n in enumerate(self.potential)
            if n.f_cost == min_f and n.h_cost == min_h
        )
        node = self.potential.pop(index)
        self.checked.append(node)
        node.make_checked()
        return node

    def _select_best_previous_node(self, current: Node) -> Node:
        candidates: List[Node] = []
        for node in self.get_neighbor_nodes(current):
            if (node.is_checked() or node.is_start()) and node.g_cost < current.g_cost:
                if node.is_start():
                    return node
                candidates.append(node)

        if not candidates:
            raise InvariantViolation(f"no predecessor for {current!r} while backtracking")

        best = min(candidates, key=lambda n: n.g_cost)  # first wins on ties
        best.make_selected()
        return best

    def tick(self) -> SearchState:
        """Advance the search by one state and return the new state."""
        if self.state is SearchState.MARKING:
            if self._mark_potential_nodes():
                self.selected.append(self.end)
                self.state = SearchState.BACKTRACKING
                logger.info("end %s reached with g=%d", self.end.cell, self.end.g_cost,
                            extra={"search_state": self.state.value})
            else:
                self.state = SearchState.CHECKING

        elif self.state is SearchState.CHECKING:
            node = self._check_best_potential_node()
            if node is not None:
                logger.debug("checked %s f=%d h=%d", node.cell, node.f_cost, node.h_cost,
                             extra={"search_state": self.state.value})
            self.state = SearchState.MARKING

        elif self.state is SearchState.BACKTRACKING:
            self.backtrack_current = self._select_best_previous_node(self.backtrack_current)
            self.selected.append(self.backtrack_current)
            if self.backtrack_current is self.start:
                self.state = SearchState.END
                logger.info("path complete: %d cells, cost %d", len(self.selected), self.end.g_cost,
                            extra={"search_state": self.state.value})

        return self.state

    def run(self, max_ticks: int) -> int:
        """Tick until END or `max_ticks` calls. Returns the number of ticks made."""
        ticks = 0
        while ticks < max_ticks and self.state is not SearchState.END:
            self.tick()
            ticks += 1
        return ticks

    # -------------------- results --------------------

    @property
    def finished(self) -> bool:
        return self.state is SearchState.END

    def path(self) -> List[Cell]:
        """Selected cells from start to end (partial while backtracking)."""
        return [n.cell for n in reversed(self.selected)]

    def path_cost(self) -> Optional[int]:
        return self.end.g_cost if self.finished else None

    def metrics(self) -> dict:
        return {
            "state": self.state.value,
            "potential": len(self.potential),
            "checked": len(self.checked),
            "selected": len(self.selected),
            "path_len": len(self.selected) if self.finished else 0,
            "total_cost": self.path_cost(),
        }
