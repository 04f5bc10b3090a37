# astar_lab/utils/logger_config.py
import logging


class StateFormatter(logging.Formatter):
    """
    Compact console format. Records carrying a `search_state` attribute are
    printed as '[state] message'; everything else as '[LEVEL] name: message'.
    """
    def format(self, record):
        if hasattr(record, 'search_state'):
            return f"[{record.search_state}] {record.getMessage()}"
        return f"[{record.levelname}] {record.name}: {record.getMessage()}"


def setup_logging(log_level=logging.INFO):
    """
    Configure the root logger with a single console handler.

    Any handlers left over from a previous call are removed, so calling this
    again (e.g. after a settings change) does not duplicate output.

    Args:
        log_level (int): Level for the console handler. logging.DEBUG shows
                         every state transition of the search.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(StateFormatter())
    root_logger.addHandler(console_handler)
