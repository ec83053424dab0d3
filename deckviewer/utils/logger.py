"""Logger setup shared by the CLI and the library."""

import logging
import sys
from typing import Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logger(name: str = "deckviewer", level: Union[int, str, None] = None) -> logging.Logger:
    """
    Configure and return the package logger.

    Calling it more than once does not stack handlers.

    Args:
        name: Logger name (defaults to the package root logger)
        level: Level name or number (defaults to INFO)

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level if level is not None else logging.INFO)

    if not any(getattr(h, "_deckviewer", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._deckviewer = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
