"""
Logging utilities.

All agentcheckpoint loggers propagate to the package root logger, which
owns the single stderr handler.
"""

import logging
import sys

ROOT_LOGGER = "agentcheckpoint"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _configure_root() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(logging.INFO)
    return root


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the given name.

    Names outside the package are nested under it, so every logger
    shares the package handler and level.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger under the agentcheckpoint hierarchy
    """
    _configure_root()
    if name != ROOT_LOGGER and not name.startswith(f"{ROOT_LOGGER}."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def set_log_level(level: int | str) -> None:
    """
    Set the log level for every agentcheckpoint logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper())

    _configure_root().setLevel(level)
