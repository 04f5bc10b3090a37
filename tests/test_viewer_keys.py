import pygame

from astar_lab.app.state import AppState, ToolMode
from astar_lab.app.viewer import ACTION_KEYS, TOOL_KEYS


def test_space_resets_and_r_runs():
    assert ACTION_KEYS[pygame.K_SPACE] == "reset"
    assert ACTION_KEYS[pygame.K_r] == "toggle_run"
    assert ACTION_KEYS[pygame.K_RETURN] == "step"


def test_actions_name_app_state_methods():
    for name in ACTION_KEYS.values():
        assert callable(getattr(AppState, name))


def test_tool_keys():
    assert TOOL_KEYS[pygame.K_w] is ToolMode.WALL
    assert TOOL_KEYS[pygame.K_s] is ToolMode.START
    assert TOOL_KEYS[pygame.K_e] is ToolMode.END
    assert TOOL_KEYS[pygame.K_ESCAPE] is ToolMode.NONE
