"""Root logger setup for the tic-tac-toe front ends."""

import logging
from typing import Optional

from .config import AIConfig


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure the root logger. Only front ends call this, never the library.

    Raises:
        ValueError: for a level outside AIConfig.LOG_LEVELS.
    """
    log_level = (level or AIConfig.LOG_LEVEL).upper()
    if log_level not in AIConfig.LOG_LEVELS:
        raise ValueError(f"Unknown log level {level!r}, expected one of: {', '.join(AIConfig.LOG_LEVELS)}")

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(log_level)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(logging.Formatter(AIConfig.LOG_FORMAT))
    root.addHandler(stream_handler)
