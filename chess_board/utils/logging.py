"""
Logging setup for host applications.

Library modules only create module-level loggers under the "chess_board"
namespace; they never configure handlers. A host application (CLI, game
loop, test harness) calls setup_logger() once to route that output.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "chess_board"
LOG_FORMAT = '%(asctime)s [%(levelname)s] %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logger(
    debug: bool = False, log_file: Optional[Union[str, Path]] = None
) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        debug: If True, log at DEBUG level; otherwise INFO level
        log_file: Write to this file instead of stderr

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path, mode='w')
    else:
        handler = logging.StreamHandler(sys.stderr)

    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)

    return logger
