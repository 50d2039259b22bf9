import logging
import sys
from typing import Optional, Union

from .config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Attach a single stderr handler to the ``bookshelf`` logger.

    ``level`` defaults to ``BOOKSHELF_LOG_LEVEL``. Calling this again
    replaces the handler instead of stacking a second one.
    """
    if level is None:
        level = get_settings().log_level
    if isinstance(level, str):
        level = level.upper()

    logger = logging.getLogger("bookshelf")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
