"""
Logging utilities.
"""

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Configure the root logger for command line use.

    Log records go to stderr so that stdout stays free for transformed
    source printed by ``--dry-run``.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    logging.basicConfig(
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )
    set_log_level(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name or __name__)


def set_log_level(level: str) -> None:
    """
    Set the logging level.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    numeric_level = getattr(logging, level.upper(), None)
    if isinstance(numeric_level, int):
        logging.root.setLevel(numeric_level)
