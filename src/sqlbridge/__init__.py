"""sqlbridge - multi-dialect database connection strings and SQL dialect facts."""

from .constants import LIBRARY_VERSION
from .database import (
    AuthMethod,
    DatabaseConfig,
    DatabaseType,
    PoolSettings,
    build_connection_string,
    resolve_pool_settings,
    validate_config,
)
from .exceptions import ConfigError, DialectError, SqlBridgeError

__version__ = LIBRARY_VERSION

__all__ = [
    "AuthMethod",
    "DatabaseConfig",
    "DatabaseType",
    "PoolSettings",
    "build_connection_string",
    "resolve_pool_settings",
    "validate_config",
    "ConfigError",
    "DialectError",
    "SqlBridgeError",
]
