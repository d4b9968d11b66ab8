"""Database configuration model.

The configuration is owned by the caller (usually built by a settings loader)
and is treated as read-only here: every operation in this package is a pure
function of a ``DatabaseConfig`` value.
"""

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Union

from ..exceptions import UnsupportedAuthMethodError, UnsupportedDatabaseTypeError


class DatabaseType(str, Enum):
    """Supported database products."""

    SQLITE = "sqlite3"
    MYSQL = "mysql"
    POSTGRES = "postgres"
    SQLSERVER = "sqlserver"
    AZURE_SQL_DB = "azuresqldb"

    @classmethod
    def parse(cls, value: Union["DatabaseType", str]) -> "DatabaseType":
        """Coerce a string (case-insensitive, aliases allowed) to a DatabaseType.

        Raises:
            UnsupportedDatabaseTypeError: If the value names no known database
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            key = _DATABASE_TYPE_ALIASES.get(key, key)
            for member in cls:
                if member.value == key:
                    return member
        raise UnsupportedDatabaseTypeError(value)

    @classmethod
    def lookup(cls, value: Union["DatabaseType", str]) -> "DatabaseType | None":
        """Like ``parse`` but returns None for unknown values."""
        try:
            return cls.parse(value)
        except UnsupportedDatabaseTypeError:
            return None


_DATABASE_TYPE_ALIASES = {
    "sqlite": "sqlite3",
    "postgresql": "postgres",
    "mssql": "sqlserver",
}


class AuthMethod(str, Enum):
    """Authentication methods for Azure SQL DB."""

    PASSWORD = "password"
    SERVICE_PRINCIPAL = "service_principal"

    @classmethod
    def parse(cls, value: Union["AuthMethod", str, None]) -> "AuthMethod":
        """Coerce a string to an AuthMethod; empty or None means password.

        Raises:
            UnsupportedAuthMethodError: If the value names no known method
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.PASSWORD
        if isinstance(value, str):
            key = value.strip().lower().replace("-", "_")
            if not key:
                return cls.PASSWORD
            for member in cls:
                if member.value == key:
                    return member
        raise UnsupportedAuthMethodError(value)


@dataclass(frozen=True)
class DatabaseConfig:
    """
    Immutable database configuration.

    Attributes:
        database_type: Target database product.
        host: Server address, optionally with ``:port``.
        database_name: Database (catalog) to connect to.
        user: Login for basic authentication.
        password: Password for basic authentication.
        auth_method: Azure SQL DB authentication method; ignored for other types.
        azure_tenant_id: Azure AD tenant for service principal authentication.
        azure_client_id: Application (client) id of the service principal.
        azure_client_secret: Client secret of the service principal.
        max_idle_connections: Generic pool hint.
        max_open_connections: Generic pool hint.
        connection_max_lifetime_seconds: Generic pool hint.
        azure_max_idle_conns: Azure override, 0 means unset.
        azure_max_open_conns: Azure override, 0 means unset.
        azure_conn_max_lifetime: Azure override in seconds, 0 means unset.
    """

    database_type: DatabaseType
    host: str = ""
    database_name: str = ""
    user: str = ""
    password: str = ""
    auth_method: AuthMethod = AuthMethod.PASSWORD
    azure_tenant_id: str = ""
    azure_client_id: str = ""
    azure_client_secret: str = ""
    max_idle_connections: int = 0
    max_open_connections: int = 0
    connection_max_lifetime_seconds: int = 0
    azure_max_idle_conns: int = 0
    azure_max_open_conns: int = 0
    azure_conn_max_lifetime: int = 0

    def __post_init__(self) -> None:
        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "database_type", DatabaseType.parse(self.database_type))
        object.__setattr__(self, "auth_method", AuthMethod.parse(self.auth_method))

    @property
    def is_azure(self) -> bool:
        return self.database_type is DatabaseType.AZURE_SQL_DB

    @property
    def effective_auth_method(self) -> AuthMethod:
        """Auth method actually in force; only Azure SQL DB can use a service principal."""
        if self.is_azure:
            return self.auth_method
        return AuthMethod.PASSWORD

    @property
    def uses_service_principal(self) -> bool:
        return self.effective_auth_method is AuthMethod.SERVICE_PRINCIPAL

    def __repr__(self) -> str:
        # Keep secrets out of tracebacks and debug output
        return (
            f"DatabaseConfig(database_type={self.database_type.value!r}, "
            f"host={self.host!r}, database_name={self.database_name!r}, "
            f"user={self.user!r}, auth_method={self.auth_method.value!r})"
        )


@dataclass(frozen=True)
class PoolSettings:
    """Effective connection pool parameters handed to the pool manager."""

    max_idle: int
    max_open: int
    max_lifetime_seconds: int

    @property
    def max_lifetime(self) -> timedelta:
        return timedelta(seconds=self.max_lifetime_seconds)


__all__ = [
    "DatabaseType",
    "AuthMethod",
    "DatabaseConfig",
    "PoolSettings",
]
