"""Logging setup and utilities.

stdout carries completion replies back to the shell, so every handler
writes to stderr or to a file.
"""

import logging
import os
import sys
from typing import TextIO

__all__ = [
    "LogObjects",
    "get_logger",
    "init_logger",
    "is_debug",
    "set_debug",
    "should_colorize",
]

_ESC = "\x1b["
_RESET = f"{_ESC}0m"

# (prefix) per level, DEBUG and INFO stay plain
_LEVEL_STYLES = {
    logging.WARNING: f"{_ESC}33;2m",
    logging.ERROR: f"{_ESC}31;2m",
    logging.CRITICAL: f"{_ESC}31;1m",
}


class _DebugState:
    """Debug flag, from `COMPFILTER_DEBUG` or `DEBUG`, switched on by `--debug`."""

    value: bool = bool(os.environ.get("COMPFILTER_DEBUG") or os.environ.get("DEBUG"))


def is_debug() -> bool:
    """Return the current debug state."""
    return _DebugState.value


def set_debug(value: bool) -> None:
    """Set the debug state."""
    _DebugState.value = value


class LogObjects:
    """Reusable objects for loggers."""

    handlers: list[logging.Handler] = []


def should_colorize(stream: TextIO | None = None) -> bool:
    """Determine if ANSI colors should be used for the given stream.

    Respects NO_COLOR, FORCE_COLOR and TTY detection.

    Args:
        stream: The output stream to check. Defaults to sys.stderr.
    """
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    if stream is None:
        stream = sys.stderr
    return hasattr(stream, "isatty") and stream.isatty()


class ScreenLogFormatter(logging.Formatter):
    """A custom formatter, adding colors based on log level."""

    def __init__(self, use_colors: bool) -> None:
        super().__init__()
        log_format = r"%(name)20s - %(message)s // %(filename)s:%(lineno)d" if is_debug() else r"%(name)s: %(message)s"
        self._formatters: dict[int, logging.Formatter] = {}
        for level in (logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, logging.CRITICAL):
            prefix = _LEVEL_STYLES.get(level, "") if use_colors else ""
            suffix = _RESET if prefix else ""
            self._formatters[level] = logging.Formatter(prefix + log_format + suffix)

    def format(self, record: logging.LogRecord) -> str:
        formatter = self._formatters.get(record.levelno, self._formatters[logging.INFO])
        return formatter.format(record)


def init_logger(filename: str | None = None, force_debug: bool = False) -> None:
    """Initialize the logging system.

    Args:
        filename: Optional filename to log to
        force_debug: If True, force debug level
    """
    if force_debug:
        set_debug(True)

    LogObjects.handlers.clear()
    if filename:
        file_handler = logging.FileHandler(filename)
        file_handler.setFormatter(logging.Formatter(fmt=r"%(asctime)s [%(levelname)s] %(name)s :: %(message)s :: %(filename)s:%(lineno)d"))
        LogObjects.handlers.append(file_handler)
    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(ScreenLogFormatter(should_colorize(sys.stderr)))
    LogObjects.handlers.append(stream_handler)


def get_logger(name: str = "compfilter", level: int | None = None) -> logging.Logger:
    """Return a named logger.

    Args:
        name (str): logger's name
        level (int): logger's level (auto if not set)

    Returns:
        The logger instance
    """
    logger = logging.getLogger(name)
    if level is None:
        logger.setLevel(logging.DEBUG if is_debug() else logging.WARNING)
    else:
        logger.setLevel(level)
    logger.propagate = False
    for handler in LogObjects.handlers:
        if handler not in logger.handlers:
            logger.addHandler(handler)
    logger.debug('Logger "%s" initialized', name)
    return logger
