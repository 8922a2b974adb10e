# MIT License (see LICENSE)
"""
Logging configuration for the particle_sim package.

Library modules only create loggers (``logging.getLogger(__name__)``);
an embedding application or script calls setup_logging() once to decide
where the messages go.
"""
from __future__ import annotations
import logging
import sys

from .constants import LOG_LEVEL_ENV
from .util import env_str

LOGGER_NAME = "particle_sim"


def resolve_level(level: int | str | None = None) -> int:
    """
    Turn a level name/number into a logging level.

    When level is None the PARTICLE_SIM_LOG_LEVEL environment variable is
    used, defaulting to WARNING.
    """
    if level is None:
        level = env_str(LOG_LEVEL_ENV, "WARNING")
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: '{level}'")
    return value


def setup_logging(level: int | str | None = None, log_file: str | None = None) -> logging.Logger:
    """
    Configure the 'particle_sim' logger.

    Args:
        level: Logging level (e.g. logging.DEBUG or "DEBUG"). Read from the
               environment when omitted.
        log_file: Optional path to also write logs to.

    Returns:
        The configured package logger.
    """
    lvl = resolve_level(level)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(lvl)

    # Avoid duplicate output when called more than once
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(lvl)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(lvl)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized at level %s", logging.getLevelName(lvl))
    return logger
