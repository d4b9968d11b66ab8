"""SQL dialects for the supported database types.

Every function here takes a ``DatabaseType`` or its string value. Unknown
strings are answered with generic ANSI defaults: the driver name is the
string itself, savepoints are unsupported, datetimes use the space-separated
layout.
"""

from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

from ..config import DatabaseType
from ...exceptions import UnsupportedDatabaseTypeError
from .base import BaseDialect, DialectFacts, SavepointSyntax, SqlExecutor
from .generic import GenericDialect
from .mysql import MySQLDialect
from .postgresql import PostgreSQLDialect
from .sqlite import SQLiteDialect
from .sqlserver import AzureSqlDialect, SqlServerDialect

__all__ = [
    "BaseDialect",
    "DialectFacts",
    "SavepointSyntax",
    "SqlExecutor",
    "GenericDialect",
    "MySQLDialect",
    "PostgreSQLDialect",
    "SQLiteDialect",
    "SqlServerDialect",
    "AzureSqlDialect",
    "DIALECTS",
    "get_dialect",
    "dialect_facts",
    "driver_name",
    "supports_savepoints",
    "datetime_format",
    "is_sql_server_family",
    "savepoint_sql",
    "rollback_to_savepoint_sql",
    "release_savepoint_sql",
    "set_savepoint",
    "rollback_to_savepoint",
    "quote_identifier",
    "limit_offset_clause",
    "current_timestamp_sql",
    "auto_increment_keyword",
]

DatabaseTypeLike = Union[DatabaseType, str]

DIALECTS: Mapping[DatabaseType, BaseDialect] = MappingProxyType({
    DatabaseType.SQLITE: SQLiteDialect(),
    DatabaseType.MYSQL: MySQLDialect(),
    DatabaseType.POSTGRES: PostgreSQLDialect(),
    DatabaseType.SQLSERVER: SqlServerDialect(),
    DatabaseType.AZURE_SQL_DB: AzureSqlDialect(),
})

_missing = [member.value for member in DatabaseType if member not in DIALECTS]
if _missing:
    raise ImportError(f"No dialect registered for database types: {', '.join(_missing)}")


def get_dialect(database_type: DatabaseTypeLike, strict: bool = False) -> BaseDialect:
    """Return the dialect for a database type.

    Args:
        database_type: Database type member or string (aliases allowed)
        strict: Raise for unknown types instead of returning a GenericDialect

    Returns:
        Dialect instance

    Raises:
        UnsupportedDatabaseTypeError: If strict and the type is unknown
    """
    member = DatabaseType.lookup(database_type)
    if member is not None:
        return DIALECTS[member]
    if strict or not isinstance(database_type, str):
        raise UnsupportedDatabaseTypeError(database_type)
    return GenericDialect(database_type)


def dialect_facts(database_type: DatabaseTypeLike) -> DialectFacts:
    return get_dialect(database_type).facts


def driver_name(database_type: DatabaseTypeLike) -> str:
    """Physical driver for a database type; SQL Server and Azure SQL DB share one."""
    return get_dialect(database_type).driver_name


def supports_savepoints(database_type: DatabaseTypeLike) -> bool:
    """True for PostgreSQL, SQL Server and Azure SQL DB."""
    return get_dialect(database_type).supports_savepoints


def datetime_format(database_type: DatabaseTypeLike) -> str:
    """strftime layout for datetime literals ('T' separated for SQL Server)."""
    return get_dialect(database_type).datetime_format


def is_sql_server_family(database_type: DatabaseTypeLike) -> bool:
    return isinstance(get_dialect(database_type), SqlServerDialect)


def savepoint_sql(database_type: DatabaseTypeLike, name: str) -> str:
    return get_dialect(database_type).savepoint_sql(name)


def rollback_to_savepoint_sql(database_type: DatabaseTypeLike, name: str) -> str:
    return get_dialect(database_type).rollback_to_savepoint_sql(name)


def release_savepoint_sql(database_type: DatabaseTypeLike, name: str) -> Optional[str]:
    return get_dialect(database_type).release_savepoint_sql(name)


def set_savepoint(executor: SqlExecutor, database_type: DatabaseTypeLike, name: str) -> Any:
    """Set a savepoint in the executor's current transaction."""
    return get_dialect(database_type).set_savepoint(executor, name)


def rollback_to_savepoint(executor: SqlExecutor, database_type: DatabaseTypeLike, name: str) -> Any:
    """Roll the executor's current transaction back to a savepoint."""
    return get_dialect(database_type).rollback_to_savepoint(executor, name)


def quote_identifier(database_type: DatabaseTypeLike, name: str) -> str:
    return get_dialect(database_type).quote_identifier(name)


def limit_offset_clause(database_type: DatabaseTypeLike, limit: int, offset: int = 0) -> str:
    return get_dialect(database_type).limit_offset_clause(limit, offset)


def current_timestamp_sql(database_type: DatabaseTypeLike) -> str:
    return get_dialect(database_type).current_timestamp_sql()


def auto_increment_keyword(database_type: DatabaseTypeLike) -> str:
    return get_dialect(database_type).auto_increment_keyword()
