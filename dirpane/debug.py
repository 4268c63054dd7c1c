"""Opt-in debug logging.

The TUI owns the terminal, so log records never go to stderr while it runs.
By default the package logger only carries a ``NullHandler``; a log file is
attached when debugging is enabled through ``--debug`` or ``DIRPANE_DEBUG``.
"""

from __future__ import annotations

import logging
import os

LOGGER_NAME = "dirpane"
DEBUG_ENV = "DIRPANE_DEBUG"
LOG_PATH_ENV = "DIRPANE_LOG"
DEFAULT_LOG_FILENAME = "dirpane_debug.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_configured = False


def debug_enabled() -> bool:
    """Return whether the environment asks for debug logging."""
    value = os.environ.get(DEBUG_ENV, "0").strip().lower()
    return value in {"1", "true", "yes", "on", "debug"}


def configure_logging(debug: bool | None = None, log_path: str | None = None) -> logging.Logger:
    """Attach handlers to the package logger once and return it.

    A file handler is added when ``debug`` is true (or the env flag is set) or
    when an explicit ``log_path`` is given. Opening the file may fail; in that
    case the logger stays silent instead of writing over the TUI.
    """
    global _configured
    logger = logging.getLogger(LOGGER_NAME)
    if _configured:
        return logger

    if debug is None:
        debug = debug_enabled()
    if log_path is None:
        log_path = os.environ.get(LOG_PATH_ENV) or None
    if log_path is None and debug:
        log_path = os.path.join(os.getcwd(), DEFAULT_LOG_FILENAME)

    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.propagate = False

    handler: logging.Handler
    if log_path:
        try:
            handler = logging.FileHandler(os.path.expanduser(log_path), encoding="utf-8")
        except OSError:
            handler = logging.NullHandler()
        else:
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = logging.NullHandler()
    logger.addHandler(handler)
    _configured = True
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a child of the package logger for module ``name``."""
    return logging.getLogger(LOGGER_NAME).getChild(name)


def reset_logging() -> None:
    """Drop handlers installed by ``configure_logging`` (used by tests)."""
    global _configured
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    _configured = False
