"""Logging setup for clic.

The library only creates loggers under the ``clic`` namespace; handlers are
attached by applications (or the ``clic`` command) through ``setup_logging``.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

LOGGER_NAME = "clic"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Marks the handler installed here so repeated setup does not stack handlers
_HANDLER_ATTR = "_clic_handler"


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """Configure the ``clic`` logger to write to stderr.

    Args:
        level: Level name (e.g. ``"DEBUG"``). If None, uses the
               ``CLIC_LOG_LEVEL`` setting.

    Returns:
        The configured ``clic`` logger.
    """
    if level is None:
        from clic.config import get_settings
        level = get_settings().log_level

    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level}")

    root_logger = logging.getLogger(LOGGER_NAME)
    root_logger.setLevel(numeric)

    for handler in root_logger.handlers:
        if getattr(handler, _HANDLER_ATTR, False):
            break
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        setattr(handler, _HANDLER_ATTR, True)
        root_logger.addHandler(handler)

    root_logger.debug("Logging initialized at %s level", level.upper())
    return root_logger
