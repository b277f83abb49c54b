"""
Logging configuration for the Flight Tracker.
"""

import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER_NAME = "flight_tracker.console"


def setup_logging(level: str = "INFO", stream: Optional[TextIO] = None) -> None:
    """
    Configure the root logger with a console handler.

    Repeat calls replace the handler added by a previous call instead of
    stacking a second one.

    Args:
        level: Logging level name (e.g., "INFO", "DEBUG").
        stream: Output stream. Defaults to stdout.
    """
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in list(root_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.set_name(_HANDLER_NAME)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)
