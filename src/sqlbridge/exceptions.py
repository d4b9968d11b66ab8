"""
sqlbridge exceptions.

Every error raised by the library derives from ``SqlBridgeError``. All of them
describe a malformed configuration or an unsupported dialect request, so none
of them are retriable.
"""


class SqlBridgeError(Exception):
    """Base exception for all sqlbridge errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigError(SqlBridgeError, ValueError):
    """Raised when a database configuration is incomplete or inconsistent."""

    field: str | None = None
    summary: str = "Invalid database configuration"
    hint: str = "Check the database configuration"

    def __init__(self, message: str | None = None):
        if message is None:
            message = f"{self.summary}\n  Hint: {self.hint}"
        super().__init__(message)


class NullConfigError(ConfigError):
    """Raised when no configuration was supplied at all."""

    summary = "Database configuration is missing"
    hint = "Pass a DatabaseConfig instance, not None"


class MissingHostError(ConfigError):
    field = "host"
    summary = "Database host is required"
    hint = "Set 'host' (e.g. myserver.database.windows.net or localhost:1433)"


class MissingDatabaseNameError(ConfigError):
    field = "database_name"
    summary = "Database name is required"
    hint = "Set 'database_name'"


class MissingUserError(ConfigError):
    field = "user"
    summary = "Database user is required for basic authentication"
    hint = "Set 'user', or use auth_method='service_principal' for Azure SQL DB"


class MissingTenantIdError(ConfigError):
    field = "azure_tenant_id"
    summary = "azure_tenant_id is required for service principal authentication"
    hint = "Set 'azure_tenant_id' to the Azure AD tenant (directory) id"


class MissingClientIdError(ConfigError):
    field = "azure_client_id"
    summary = "azure_client_id is required for service principal authentication"
    hint = "Set 'azure_client_id' to the application (client) id"


class MissingClientSecretError(ConfigError):
    field = "azure_client_secret"
    summary = "azure_client_secret is required for service principal authentication"
    hint = "Set 'azure_client_secret' to the client secret value"


class UnsupportedDatabaseTypeError(ConfigError):
    field = "database_type"
    summary = "Unsupported database type"
    hint = "Supported types: sqlite3, mysql, postgres, sqlserver, azuresqldb"

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"{self.summary}: {value!r}\n  Hint: {self.hint}")


class UnsupportedAuthMethodError(ConfigError):
    field = "auth_method"
    summary = "Unsupported authentication method"
    hint = "Supported methods: password, service_principal"

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"{self.summary}: {value!r}\n  Hint: {self.hint}")


class DialectError(SqlBridgeError, ValueError):
    """Raised when a dialect cannot express the requested SQL."""

    pass


class SavepointNotSupportedError(DialectError):
    """Raised when savepoint SQL is requested from a dialect without savepoints.

    Callers are expected to fall back to rolling back the whole transaction.
    """

    def __init__(self, database_type: str):
        self.database_type = database_type
        super().__init__(
            f"Savepoints are not supported for database type: {database_type}\n"
            f"  Hint: Roll back the whole transaction instead"
        )


class InvalidSavepointNameError(DialectError):
    """Raised when a savepoint name is not a plain SQL identifier."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Invalid savepoint name: {name!r}\n"
            f"  Hint: Use letters, digits and underscores, not starting with a digit"
        )


class UnsupportedDialectFeatureError(DialectError):
    """Raised when a dialect has no spelling for a SQL feature."""

    def __init__(self, database_type: str, feature: str):
        self.database_type = database_type
        self.feature = feature
        super().__init__(
            f"No {feature} syntax known for database type: {database_type}\n"
            f"  Hint: Use a supported database type or write this SQL by hand"
        )


__all__ = [
    "SqlBridgeError",
    "ConfigError",
    "NullConfigError",
    "MissingHostError",
    "MissingDatabaseNameError",
    "MissingUserError",
    "MissingTenantIdError",
    "MissingClientIdError",
    "MissingClientSecretError",
    "UnsupportedDatabaseTypeError",
    "UnsupportedAuthMethodError",
    "DialectError",
    "SavepointNotSupportedError",
    "InvalidSavepointNameError",
    "UnsupportedDialectFeatureError",
]
