"""Centralized logging configuration for NetRoute.

All package loggers hang off the ``netroute`` root logger. Modules obtain
their logger with ``get_logger(__name__)`` and never attach handlers of their
own. The initial level can be set with the ``NETROUTE_LOG_LEVEL`` environment
variable (e.g. ``DEBUG``); otherwise INFO is used.
"""

import logging
import os
import sys
from typing import Optional, Union

ROOT_LOGGER_NAME = "netroute"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LEVEL_ENV_VAR = "NETROUTE_LOG_LEVEL"

_ROOT_LOGGER_CONFIGURED = False


def _level_from_env(default: int) -> int:
    """Resolve the initial level from the environment, falling back to default."""
    raw = os.environ.get(LEVEL_ENV_VAR)
    if not raw:
        return default
    value = logging.getLevelName(raw.strip().upper())
    return value if isinstance(value, int) else default


def setup_root_logger(
    level: Optional[int] = None,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Configure the ``netroute`` root logger once.

    Subsequent calls are no-ops until ``reset_logging()`` is called.

    Args:
        level: Logging level. Defaults to ``NETROUTE_LOG_LEVEL`` or INFO.
        format_string: Custom format string.
        handler: Custom handler. Defaults to a stdout StreamHandler.
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    if level is None:
        level = _level_from_env(logging.INFO)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    # Propagate so pytest's caplog sees records
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a package logger that inherits the root ``netroute`` settings.

    Args:
        name: Logger name, normally ``__name__`` of the calling module.

    Returns:
        The logger instance.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: Union[int, str]) -> None:
    """Set the level of the ``netroute`` root logger and its handlers.

    Args:
        level: Numeric level or level name such as ``"DEBUG"``.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level!r}")
        level = resolved

    setup_root_logger()
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Switch all NetRoute loggers to DEBUG."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Switch all NetRoute loggers back to INFO."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop handlers and forget prior setup (used by tests)."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
