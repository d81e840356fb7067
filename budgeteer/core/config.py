"""
Configuration management for Budgeteer.

Loads config.yaml and provides type-safe access to settings.
"""

import os
import yaml
from pathlib import Path
from typing import Any, Dict, Optional

# Config file location, lives alongside the budgeteer package modules
_PACKAGE_DIR = Path(__file__).parent.parent.resolve()
CONFIG_PATH = Path(os.environ.get("BUDGETEER_CONFIG", _PACKAGE_DIR / "config.yaml"))

# Cache for loaded config
_config_cache: Optional[Dict[str, Any]] = None

_STATISTICS_DEFAULTS = {
    "weeks": 12,
    "months": 6,
    "days": 30,
}


def get_config(reload: bool = False) -> Dict[str, Any]:
    """
    Load configuration from config.yaml.

    Args:
        reload: Force reload even if cached

    Returns:
        Configuration dictionary
    """
    global _config_cache

    if _config_cache is not None and not reload:
        return _config_cache

    if not CONFIG_PATH.exists():
        raise FileNotFoundError(f"Config file not found: {CONFIG_PATH}")

    with open(CONFIG_PATH, "r", encoding="utf-8") as f:
        _config_cache = yaml.safe_load(f) or {}

    return _config_cache


def get_config_value(*keys: str, default: Any = None) -> Any:
    """
    Get a nested config value safely.

    Args:
        *keys: Path of keys to traverse (e.g., 'destinations', 'database')
        default: Value to return if key not found

    Example:
        currency = get_config_value('currency', default='EUR')
    """
    config = get_config()

    for key in keys:
        if isinstance(config, dict) and key in config:
            config = config[key]
        else:
            return default

    return config


def get_currency() -> str:
    """ISO currency code all cent amounts are expressed in."""
    return str(get_config_value("currency", default="EUR")).upper()


def get_statistics_defaults() -> Dict[str, int]:
    """Default lookback lengths for charts (config.yaml overrides defaults)."""
    cfg = get_config_value("statistics", default={}) or {}
    return {key: int(cfg.get(key, default)) for key, default in _STATISTICS_DEFAULTS.items()}


class BudgeteerPaths:
    """
    Centralized path access for Budgeteer.

    All paths are loaded from config.yaml with sensible fallbacks.

    Usage:
        from budgeteer.core.config import BUDGETEER_PATHS
        db = BUDGETEER_PATHS.database
    """

    def __init__(self):
        self._config = None

    def _ensure_config(self):
        if self._config is None:
            self._config = get_config()

    def _resolve(self, raw: str) -> Path:
        """Resolve a path: if relative, resolve against _PACKAGE_DIR."""
        p = Path(raw)
        if not p.is_absolute():
            p = _PACKAGE_DIR / p
        return p

    @property
    def database(self) -> Path:
        env_db = os.environ.get("BUDGETEER_DATABASE")
        if env_db:
            return Path(env_db).resolve()
        self._ensure_config()
        raw = self._config.get("destinations", {}).get("database", "data/budgeteer.db")
        return self._resolve(raw)

    @property
    def data_dir(self) -> Path:
        return self.database.parent

    @property
    def config_dir(self) -> Path:
        return _PACKAGE_DIR

    @property
    def root(self) -> Path:
        return _PACKAGE_DIR


# Singleton instance
BUDGETEER_PATHS = BudgeteerPaths()
