"""
Logging setup for chargex.

The classification core only logs at DEBUG; INFO and above come from the
CLI, the writers and the MongoDB lookup.
"""

import logging
from typing import Optional

from chargex.config import Config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Driver loggers kept at WARNING unless chargex itself logs above that
QUIET_LOGGERS = ("pymongo",)


def resolve_level(level: str) -> int:
    """
    Convert a level name such as "debug" or "WARNING" to its numeric value.

    Args:
        level: Level name, case-insensitive

    Returns:
        Numeric logging level

    Raises:
        ValueError: If the name is not a logging level
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")
    return numeric_level


def configure_logging(config: Optional[Config] = None, level: Optional[str] = None) -> None:
    """
    Configure logging from the configuration.

    Args:
        config: Configuration object (INFO when omitted)
        level: Level overriding the configured one, e.g. from --log-level
    """
    if level is None:
        level = "INFO" if config is None else config.logging.level
    numeric_level = resolve_level(level)

    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, datefmt=DATE_FORMAT)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
