"""
Loggers for the trecparse command line tools.

Every logger is a child of the `trecparse` logger, which owns the only handler
(stderr). The parsing core does not log: its errors are returned as values.
"""

import logging
from typing import Union

__all__ = ["get_logger", "reset_level"]

ROOT_LOGGER_NAME = "trecparse"
LOG_FORMAT = "[%(asctime)s %(name)s %(levelname)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _to_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Invalid log level: {level}")
    return value


def _root_logger() -> logging.Logger:
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
    return logger


def get_logger(name: str, level: Union[int, str] = logging.WARNING) -> logging.Logger:
    """Return the `trecparse.<name>` logger, set to `level`."""
    logger = _root_logger().getChild(name)
    logger.setLevel(_to_level(level))
    return logger


def reset_level(level: Union[int, str]) -> None:
    """Set `level` on every trecparse logger created so far."""
    level = _to_level(level)
    prefix = f"{ROOT_LOGGER_NAME}."
    for name, logger in logging.Logger.manager.loggerDict.items():
        if isinstance(logger, logging.Logger) and name.startswith(prefix):
            logger.setLevel(level)
