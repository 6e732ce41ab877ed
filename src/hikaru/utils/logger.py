"""Logger configuration and convenience helpers."""

from __future__ import annotations

import logging
import sys

_DEFAULT_LOGGER_NAME = "hikaru"
_DEFAULT_LOG_LEVEL = logging.INFO
_DEFAULT_FORMATTER = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
_DEFAULT_HANDLER = logging.StreamHandler(sys.stdout)
_DEFAULT_HANDLER.setFormatter(_DEFAULT_FORMATTER)


def _configure_logger(logger: logging.Logger, level: int) -> None:
    """
    Configures a logger with the specified logging level and default handler.

    The level is only applied when the logger has none of its own. A default
    stdout handler is attached when the logger has no handlers, and
    propagation to ancestor loggers is disabled so records are not emitted
    twice.

    Parameters
    ----------
    logger : logging.Logger
        The logger instance to configure.
    level : int
        The logging level to set if the logger's level is not already set.

    Examples
    --------
    >>> import logging
    >>> from hikaru.utils.logger import _configure_logger
    >>> logger = logging.getLogger("my_logger")
    >>> _configure_logger(logger, logging.INFO)
    >>> logger.info("This is an info message.")
    """
    if logger.level == logging.NOTSET:
        logger.setLevel(level)
    if not logger.handlers:
        logger.addHandler(_DEFAULT_HANDLER)
    logger.propagate = False


def get_logger(name: str | None = None, level: int = _DEFAULT_LOG_LEVEL) -> logging.Logger:
    """Return the package logger, or a logger beneath it.

    Only the package logger carries the handler. Loggers beneath it propagate
    to it and inherit its level unless they set their own.
    """
    package_logger = logging.getLogger(_DEFAULT_LOGGER_NAME)
    _configure_logger(package_logger, level)
    if not name or name == _DEFAULT_LOGGER_NAME:
        return package_logger
    return logging.getLogger(name)


def set_level(level: int, logger_names: list[str] | None = None) -> None:
    """Set the log level for one or more loggers and everything beneath them.

    Descendants are reset to NOTSET so they follow the new level.
    """
    names = logger_names or [_DEFAULT_LOGGER_NAME]
    existing = logging.Logger.manager.loggerDict
    for name in names:
        logging.getLogger(name).setLevel(level)
        prefix = f"{name}."
        for child_name, child in list(existing.items()):
            if child_name.startswith(prefix) and isinstance(child, logging.Logger):
                child.setLevel(logging.NOTSET)
