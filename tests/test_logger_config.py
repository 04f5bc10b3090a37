import logging

from astar_lab.core.grid import Grid
from astar_lab.utils.logger_config import StateFormatter, setup_logging


def test_setup_logging_does_not_stack_handlers():
    setup_logging(logging.DEBUG)
    setup_logging(logging.INFO)
    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, StateFormatter)


def test_state_formatter():
    fmt = StateFormatter()
    rec = logging.LogRecord("astar_lab.core.grid", logging.INFO, __file__, 1, "end %s", ((2, 2),), None)
    assert fmt.format(rec) == "[INFO] astar_lab.core.grid: end (2, 2)"
    rec.search_state = "backtracking"
    assert fmt.format(rec) == "[backtracking] end (2, 2)"


def test_grid_logs_completion(caplog):
    grid = Grid(3, 30, cell_size=10, start=(0, 0), end=(2, 2), walls=())
    with caplog.at_level(logging.INFO, logger="astar_lab.core.grid"):
        grid.run(100)
    messages = [r.getMessage() for r in caplog.records]
    assert any("path complete" in m for m in messages)
    assert any(getattr(r, "search_state", None) == "end" for r in caplog.records)
