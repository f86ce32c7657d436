"""Application configuration helpers."""

from __future__ import annotations

from .env import env_flag, env_int, optional_env_var
from .errors import ConfigurationError
from .logging import configure_logging, resolve_log_level
from .navigation import (
    DEFAULT_MAX_DEPTH,
    DEFAULT_MENU_NAME,
    NavigationConfig,
    clamp_max_depth,
    get_navigation_config,
)
from .storage import (
    DatabaseConfig,
    StorageConfig,
    get_database_config,
    get_database_uri,
    get_storage_config,
)

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "DEFAULT_MENU_NAME",
    "ConfigurationError",
    "DatabaseConfig",
    "NavigationConfig",
    "StorageConfig",
    "clamp_max_depth",
    "configure_logging",
    "env_flag",
    "env_int",
    "get_database_config",
    "get_database_uri",
    "get_navigation_config",
    "get_storage_config",
    "optional_env_var",
    "resolve_log_level",
]
