"""Global logger configuration for the slimcommons project.

Every module logs through a child of the ``slimcommons`` logger, so a single
handler on the project logger covers the whole package. The level comes from
``settings.LOG_LEVEL`` (the ``LOG_LEVEL`` environment variable) unless given
explicitly.
"""

import logging
import sys

from slimcommons.core.config import settings

__all__ = ["logger", "setup_logger", "get_logger"]

PROJECT_LOGGER = "slimcommons"


def setup_logger(
    name: str = PROJECT_LOGGER,
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name (typically project name)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    level = level or settings.LOG_LEVEL
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    configured = logging.getLogger(name)

    # Configure once; repeated calls hand back the same logger untouched
    if not configured.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        )
        configured.addHandler(handler)
        configured.setLevel(getattr(logging, level.upper()))
        configured.propagate = False

    return configured


def get_logger(module_name: str) -> logging.Logger:
    """Return the logger for a module inside the package.

    Names already under ``slimcommons.`` are used as-is, anything else is nested
    below the project logger so it shares its handler and level.
    """
    if module_name == PROJECT_LOGGER or module_name.startswith(PROJECT_LOGGER + "."):
        return logging.getLogger(module_name)
    return logger.getChild(module_name)


logger = setup_logger()
