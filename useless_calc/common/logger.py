"""Shared logger for the calculator package."""
import logging
import sys


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _build_logger(name: str = "useless_calc") -> logging.Logger:
    """
    Create the package logger with a single stderr handler.

    Calling this twice for the same name does not duplicate handlers.

    :param str name: Logger name

    :return: Configured logger
    :rtype: logging.Logger
    """
    log = logging.getLogger(name)
    if not log.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        log.addHandler(handler)
    log.setLevel(logging.WARNING)
    # Keep output out of the interactive prompt unless asked for
    log.propagate = False
    return log


def set_level(level: str) -> None:
    """
    Change the package log level.

    :param str level: Level name, e.g. "DEBUG" or "info"

    :raises ValueError: If the level name is unknown
    """
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level}")
    logger.setLevel(numeric)


logger = _build_logger()
