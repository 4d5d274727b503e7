"""
Logging for srvdisco.

All loggers live under ``srvdisco``; the engine and resolver log queries at
DEBUG and failed lookups at WARNING. Levels follow ``SRVDISCO_LOG_LEVEL``
unless an explicit level is passed.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .config import DiscoverySettings

logger = logging.getLogger("srvdisco")

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_FORMAT_NO_TIME = "%(levelname)-8s | %(name)s | %(message)s"


def configure_logging(
    settings: DiscoverySettings | None = None,
    level: int | None = None,
    handler: logging.Handler | None = None,
    format_timestamps: bool = True,
) -> logging.Logger:
    """
    Attach a single handler to the srvdisco logger.

    Args:
        settings: Source of the level when ``level`` is not given. Loaded
            from the environment if omitted.
        level: Explicit logging level, overrides settings.
        handler: Handler to install. Defaults to stderr.
        format_timestamps: Prefix records with a timestamp.

    Returns:
        The srvdisco logger.

    Example:
        # SRVDISCO_LOG_LEVEL=DEBUG
        configure_logging()

        configure_logging(level=logging.WARNING)
    """
    if level is None:
        if settings is None:
            from .config import DiscoverySettings

            settings = DiscoverySettings()
        level = settings.get_log_level()

    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    if format_timestamps:
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    else:
        handler.setFormatter(logging.Formatter(LOG_FORMAT_NO_TIME))
    handler.setLevel(level)

    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return the ``srvdisco.<name>`` logger."""
    return logger.getChild(name)
