"""
Logging configuration for Budgeteer.

Every module asks for its logger through get_logger() so that web requests,
CLI commands and tests all share one line format. The default level comes
from the ``logging.level`` key of config.yaml.
"""

import logging
import sys
from typing import Dict, Optional

from budgeteer.core.config import get_config_value

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_loggers: Dict[str, logging.Logger] = {}


def _configured_level() -> int:
    raw = get_config_value("logging", "level", default="INFO")
    level = logging.getLevelName(str(raw).upper())
    return level if isinstance(level, int) else logging.INFO


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a configured logger for a module.

    Args:
        name: Logger name (e.g., 'budgeteer.statistics', 'budgeteer.budgets')
        level: Logging level (default: ``logging.level`` from config.yaml)

    Returns:
        Configured logger, cached per name
    """
    if name in _loggers:
        return _loggers[name]

    if level is None:
        level = _configured_level()

    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    _loggers[name] = logger
    return logger


def set_level(level: int) -> None:
    """Change the level of every logger handed out so far (CLI --verbose)."""
    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)
