# astar_lab/app/state.py
#!/usr/bin/env python3
"""
Everything the viewer needs between frames, in one object.

The grid is only ever replaced through reset(); placement and stepping go
through the methods here so the tool / preparing rules live in one place.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from astar_lab.app.settings import Settings, MIN_STEPS_PER_SEC, MAX_STEPS_PER_SEC
from astar_lab.core.errors import OutOfGridError
from astar_lab.core.grid import Grid
from astar_lab.core.types import SearchState

logger = logging.getLogger(__name__)


class ToolMode(Enum):
    NONE = "none"
    WALL = "wall"
    START = "start"
    END = "end"


@dataclass
class AppState:
    settings: Settings = field(default_factory=Settings)
    grid: Optional[Grid] = None
    tool: ToolMode = ToolMode.NONE
    preparing: bool = True
    running: bool = False
    steps_per_sec: int = 0

    def __post_init__(self):
        if not self.steps_per_sec:
            self.steps_per_sec = self.settings.steps_per_sec
        if self.grid is None:
            self.grid = self._build_grid()

    def _build_grid(self) -> Grid:
        s = self.settings
        return Grid(s.cols, s.viewport_height, cell_size=s.cell_size)

    # -------------------- lifecycle --------------------

    def reset(self) -> None:
        """Discard the grid (and any search in progress) and start preparing again."""
        self.grid = self._build_grid()
        self.preparing = True
        self.running = False
        logger.info("board reset")

    # -------------------- tools --------------------

    def select_tool(self, tool: ToolMode) -> None:
        # Tools other than NONE are only available before the first step
        if tool is not ToolMode.NONE and not self.preparing:
            return
        self.tool = tool

    def apply_tool(self, px: float, py: float) -> bool:
        """Apply the active tool at a pixel position. False if nothing happened."""
        if self.tool is ToolMode.NONE:
            return False
        try:
            if self.tool is ToolMode.WALL:
                self.grid.place_wall_at(px, py)
            elif self.tool is ToolMode.START:
                self.grid.place_start_at(px, py)
            elif self.tool is ToolMode.END:
                self.grid.place_end_at(px, py)
        except OutOfGridError as ex:
            logger.debug("click outside the grid ignored: %s", ex)
            return False
        return True

    # -------------------- stepping --------------------

    def step(self) -> SearchState:
        """Leave preparation (tools off) and advance the search once."""
        self.tool = ToolMode.NONE
        self.preparing = False
        state = self.grid.tick()
        if state is SearchState.END:
            self.running = False
        return state

    def toggle_run(self) -> None:
        if self.grid.finished:
            return
        self.running = not self.running
        if self.running:
            self.tool = ToolMode.NONE
            self.preparing = False

    def bump_speed(self, dv: int) -> None:
        self.steps_per_sec = int(max(MIN_STEPS_PER_SEC, min(MAX_STEPS_PER_SEC, self.steps_per_sec + dv)))

    def status_line(self) -> str:
        m = self.grid.metrics()
        text = f"A* | {m['state']} | open {m['potential']} | closed {m['checked']}"
        if m["total_cost"] is not None:
            text += f" | path {m['path_len']} cells, cost {m['total_cost']}"
        if self.preparing:
            text += f" | tool: {self.tool.value}"
        else:
            text += f" | {self.steps_per_sec} steps/s" + (" (running)" if self.running else "")
        return text
