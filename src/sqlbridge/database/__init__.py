"""Database connectivity core for sqlbridge.

This module validates database configurations, builds driver-ready
connection strings and answers dialect questions for a database-agnostic
data-access layer.

Architecture:
- config.py: DatabaseConfig, DatabaseType, AuthMethod, PoolSettings
- validation.py: Configuration completeness checks per authentication mode
- connection.py: Connection string building and pool parameter selection
- dialects/: Dialect-specific SQL (SQL Server, Azure SQL DB, PostgreSQL, MySQL, SQLite)
- formatting.py: Datetime literals and dialect summaries
- logging.py: Structured, credential-free log events
"""

from sqlbridge.database.config import AuthMethod, DatabaseConfig, DatabaseType, PoolSettings
from sqlbridge.database.connection import (
    build_connection_string,
    extract_server_name,
    parse_connection_string,
    qualify_user,
    resolve_pool_settings,
)
from sqlbridge.database.dialects import (
    DialectFacts,
    SavepointSyntax,
    SqlExecutor,
    datetime_format,
    dialect_facts,
    driver_name,
    get_dialect,
    is_sql_server_family,
    rollback_to_savepoint,
    rollback_to_savepoint_sql,
    savepoint_sql,
    set_savepoint,
    supports_savepoints,
)
from sqlbridge.database.formatting import format_datetime, format_dialect_summary
from sqlbridge.database.logging import configure_logging, redact_connection_string
from sqlbridge.database.validation import find_config_errors, is_valid_config, validate_config

__all__ = [
    "AuthMethod",
    "DatabaseConfig",
    "DatabaseType",
    "PoolSettings",
    "build_connection_string",
    "extract_server_name",
    "parse_connection_string",
    "qualify_user",
    "resolve_pool_settings",
    "DialectFacts",
    "SavepointSyntax",
    "SqlExecutor",
    "datetime_format",
    "dialect_facts",
    "driver_name",
    "get_dialect",
    "is_sql_server_family",
    "rollback_to_savepoint",
    "rollback_to_savepoint_sql",
    "savepoint_sql",
    "set_savepoint",
    "supports_savepoints",
    "format_datetime",
    "format_dialect_summary",
    "configure_logging",
    "redact_connection_string",
    "find_config_errors",
    "is_valid_config",
    "validate_config",
]
