"""Debug logging for the launcher.

The package logger is disabled on import so that library use stays silent;
the CLI turns it on when `PYLAUNCH_DEBUG` is set.
"""

import sys
from typing import Optional, TextIO

from loguru import logger

LOG_FORMAT = "py: {level}: {message}"


def configure_logging(debug: bool, sink: Optional[TextIO] = None) -> None:
    """Route pylaunch debug records to `sink` (stderr by default) if `debug`."""
    if not debug:
        logger.disable("pylaunch")
        return

    logger.remove()
    logger.add(sink or sys.stderr, format=LOG_FORMAT, level="DEBUG", colorize=False)
    logger.enable("pylaunch")
