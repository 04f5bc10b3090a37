# astar_lab/app/viewer.py
#!/usr/bin/env python3
"""
A* Step Viewer: draws the grid and drives Grid.tick() from a timer

- Keyboard:
    [W]/[S]/[E]  -> wall / start / end tool (before the first step)
    [ESC]        -> no tool
    [ENTER]      -> single step
    [R]          -> run/pause
    [SPACE]      -> reset board
    [+]/[-]      -> steps/sec
    [Q]          -> quit
- Mouse:
    left click / drag -> apply the active tool

Config: see astar_lab/app/settings.py (ASTAR_* env vars or --key=value).
"""

# --- bootstrap import path so `from astar_lab...` works when run as a script ---
import sys, time
from pathlib import Path
_REPO_ROOT = Path(__file__).resolve().parents[2]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))
# -------------------------------------------------------------------------------

import logging
from typing import Dict
import pygame

from astar_lab.app import palette
from astar_lab.app.settings import Settings, resolve_settings
from astar_lab.app.state import AppState, ToolMode
from astar_lab.core.errors import OutOfGridError
from astar_lab.core.node import Node
from astar_lab.utils.logger_config import setup_logging

logger = logging.getLogger(__name__)

FONT_NAME = None  # default pygame font
FONT_SIZE = 14

TOOL_KEYS: Dict[int, ToolMode] = {
    pygame.K_w: ToolMode.WALL,
    pygame.K_s: ToolMode.START,
    pygame.K_e: ToolMode.END,
    pygame.K_ESCAPE: ToolMode.NONE,
}

# key -> AppState method
ACTION_KEYS: Dict[int, str] = {
    pygame.K_RETURN: "step",
    pygame.K_KP_ENTER: "step",
    pygame.K_r: "toggle_run",
    pygame.K_SPACE: "reset",
}


# ---------- Viewer ----------
class Viewer:
    def __init__(self, settings: Settings):
        pygame.init()

        self.app = AppState(settings=settings)
        self.screen = pygame.display.set_mode(settings.window_size)
        self.font = pygame.font.Font(FONT_NAME, FONT_SIZE)
        self.clock = pygame.time.Clock()
        self._last_step_t = 0.0
        self._caption = ""

    def run(self):
        while True:
            self._handle_events()
            if self.app.running:
                self._tick_algorithm()
            self._draw()
            self.clock.tick(60)

    def _tick_algorithm(self):
        t0 = time.time()
        step_interval = 1.0 / max(1, self.app.steps_per_sec)
        if t0 - self._last_step_t >= step_interval:
            self._last_step_t = t0
            self.app.step()

    def _quit(self):
        pygame.quit(); sys.exit(0)

    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                self._quit()
            elif e.type == pygame.KEYDOWN:
                if e.key == pygame.K_q:
                    self._quit()
                elif e.key in TOOL_KEYS:
                    self.app.select_tool(TOOL_KEYS[e.key])
                elif e.key in ACTION_KEYS:
                    getattr(self.app, ACTION_KEYS[e.key])()
                elif e.key in (pygame.K_PLUS, pygame.K_EQUALS):
                    self.app.bump_speed(+1)
                elif e.key in (pygame.K_MINUS, pygame.K_UNDERSCORE):
                    self.app.bump_speed(-1)
            elif e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                self.app.apply_tool(*e.pos)
            elif e.type == pygame.MOUSEMOTION and e.buttons[0]:
                self.app.apply_tool(*e.pos)

    # ---------- drawing ----------
    def _draw(self):
        self.screen.fill(palette.BACKGROUND)
        cs = self.app.grid.cell_size
        for node in self.app.grid.nodes:
            self._draw_node(node, cs)

        caption = self.app.status_line()
        if caption != self._caption:
            pygame.display.set_caption(caption)
            self._caption = caption
        pygame.display.flip()

    def _draw_node(self, node: Node, cs: int):
        rect = pygame.Rect(node.x * cs, node.y * cs, cs, cs)
        fill = palette.fill_for(node.kind)
        if fill is not None:
            pygame.draw.rect(self.screen, fill, rect)
        pygame.draw.rect(self.screen, palette.BORDER, rect, 1)

        label = palette.LABEL.get(node.kind)
        if label:
            txt = self.font.render(label, True, palette.TEXT)
            self.screen.blit(txt, txt.get_rect(center=rect.center))
        elif node.kind in palette.SHOWS_COSTS:
            # g top-left, h top-right, f centred
            g = self.font.render(str(node.g_cost), True, palette.TEXT)
            h = self.font.render(str(node.h_cost), True, palette.TEXT)
            f = self.font.render(str(node.f_cost), True, palette.TEXT)
            self.screen.blit(g, (rect.x + 2, rect.y + 2))
            self.screen.blit(h, (rect.right - h.get_width() - 2, rect.y + 2))
            self.screen.blit(f, f.get_rect(center=rect.center))


# ---------- main ----------
def main():
    settings = resolve_settings()
    setup_logging(getattr(logging, settings.log_level))
    try:
        viewer = Viewer(settings)
    except (ValueError, OutOfGridError) as ex:
        logger.error("Failed to build grid: %s", ex)
        sys.exit(1)
    viewer.run()

if __name__ == "__main__":
    main()
