"""Package-wide settings and logging setup."""

import logging
import os

# Radix limits for base conversion
MIN_BASE = 2
MAX_BASE = 36
DIGIT_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"

DEFAULT_LOG_BASE = "10"

# REPL
PROMPT = "> "
MAX_INPUT = 1024
CLEAR_SEQUENCE = "\033[2J\033[H"

LOG_LEVEL_ENV = "BIGCALC_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def log_level() -> str:
    """Log level name taken from the environment, or the default."""
    return os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()


def configure_logging(level: str | None = None) -> None:
    """
    Install a stderr handler for the package loggers.

    Args:
        level: Level name such as "DEBUG"; falls back to ``log_level()``

    Raises:
        ValueError: If the level name is unknown
    """
    name = (level or log_level()).upper()
    numeric = logging.getLevelName(name)
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {name}")
    logging.basicConfig(level=numeric, format=LOG_FORMAT)
