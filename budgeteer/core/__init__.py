"""
Budgeteer Core - Shared services for all modules.

Usage:
    from budgeteer.core import get_db, get_config, get_logger, BUDGETEER_PATHS
"""

from budgeteer.core.config import get_config, get_config_value, BUDGETEER_PATHS
from budgeteer.core.db import get_db, execute_query, migrate_all
from budgeteer.core.logging import get_logger

__all__ = [
    "get_config",
    "get_config_value",
    "BUDGETEER_PATHS",
    "get_db",
    "execute_query",
    "migrate_all",
    "get_logger",
]
