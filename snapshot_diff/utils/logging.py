"""
Logging configuration.

Library modules log through `logging.getLogger(__name__)` and never configure
handlers themselves. Applications (the CLI) call setup_logging() once.
"""

import logging
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "snapshot_diff"


def setup_logging(
    level: Union[int, str] = logging.WARNING,
    console: Optional[Console] = None
) -> logging.Logger:
    """
    Attach a Rich handler to the package logger.

    Calling it again replaces the handler instead of stacking another one.

    Args:
        level: Logging level name or number
        console: Console to write records to (defaults to stderr)

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(console=console or Console(stderr=True), show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level if isinstance(level, int) else level.upper())
    logger.propagate = False
    return logger
