# astar_lab/app/settings.py
#!/usr/bin/env python3
"""
Viewer configuration.

Each value is read from the environment first; a matching `--key=value`
command-line argument wins over it. Bad values fall back to the default.

    ASTAR_COLUMNS          --cols=     grid columns
    ASTAR_VIEWPORT_HEIGHT  --height=   viewport height (px)
    ASTAR_CELL_SIZE        --cell=     cell size (px)
    ASTAR_STEPS_PER_SEC    --speed=    initial run speed
    ASTAR_LOG_LEVEL        --log=      logging level name
"""

import logging
import os
import sys
from dataclasses import dataclass
from typing import Dict, List, Optional

from astar_lab.core.defaults import CELL_SIZE, DEFAULT_COLUMNS, DEFAULT_VIEWPORT_HEIGHT

logger = logging.getLogger(__name__)

DEFAULT_STEPS_PER_SEC = 8
MIN_STEPS_PER_SEC = 1
MAX_STEPS_PER_SEC = 60

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    cols: int = DEFAULT_COLUMNS
    viewport_height: int = DEFAULT_VIEWPORT_HEIGHT
    cell_size: int = CELL_SIZE
    steps_per_sec: int = DEFAULT_STEPS_PER_SEC
    log_level: str = "INFO"

    @property
    def window_size(self):
        return (self.cols * self.cell_size, self.viewport_height)


def _parse_args(argv: List[str]) -> Dict[str, str]:
    out: Dict[str, str] = {}
    for arg in argv:
        if arg.startswith("--") and "=" in arg:
            key, value = arg[2:].split("=", 1)
            out[key.lower()] = value
    return out


def _resolve_int(raw: Optional[str], name: str, default: int, lo: int = 1, hi: Optional[int] = None) -> int:
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("ignoring %s=%r: not an integer", name, raw)
        return default
    if value < lo or (hi is not None and value > hi):
        logger.warning("ignoring %s=%d: out of range", name, value)
        return default
    return value


def resolve_settings(argv: Optional[List[str]] = None, environ: Optional[Dict[str, str]] = None) -> Settings:
    argv = sys.argv[1:] if argv is None else argv
    environ = os.environ if environ is None else environ
    args = _parse_args(argv)

    def raw(env_key: str, arg_key: str) -> Optional[str]:
        return args.get(arg_key, environ.get(env_key))

    level = (raw("ASTAR_LOG_LEVEL", "log") or "INFO").upper()
    if level not in LOG_LEVELS:
        logger.warning("ignoring log level %r", level)
        level = "INFO"

    return Settings(
        cols=_resolve_int(raw("ASTAR_COLUMNS", "cols"), "cols", DEFAULT_COLUMNS),
        viewport_height=_resolve_int(raw("ASTAR_VIEWPORT_HEIGHT", "height"), "height", DEFAULT_VIEWPORT_HEIGHT),
        cell_size=_resolve_int(raw("ASTAR_CELL_SIZE", "cell"), "cell", CELL_SIZE),
        steps_per_sec=_resolve_int(raw("ASTAR_STEPS_PER_SEC", "speed"), "speed", DEFAULT_STEPS_PER_SEC,
                                   MIN_STEPS_PER_SEC, MAX_STEPS_PER_SEC),
        log_level=level,
    )
