"""Connection string building and connection pool parameter selection."""

from typing import Optional

from ..constants import (
    AZURE_FEDAUTH_SERVICE_PRINCIPAL,
    AZURE_SQL_DOMAIN_SUFFIX,
    CONNECTION_STRING_ASSIGNMENT,
    CONNECTION_STRING_SEPARATOR,
    DEFAULT_AZURE_CONN_MAX_LIFETIME,
    DEFAULT_AZURE_MAX_IDLE_CONNS,
    DEFAULT_AZURE_MAX_OPEN_CONNS,
    REDACTED_VALUE,
    USER_SERVER_SEPARATOR,
)
from ..exceptions import NullConfigError
from .config import DatabaseConfig, PoolSettings
from .logging import SECRET_KEYS, log_connection_string_built, log_pool_settings
from .validation import validate_config


def build_connection_string(config: Optional[DatabaseConfig]) -> str:
    """Build a SQL Server family connection string from a configuration.

    The configuration is validated first; validation errors propagate
    unchanged, so a partially built string never leaves this function.

    Formats:
        service principal (Azure SQL DB only):
            server=<host>;fedauth=ActiveDirectoryServicePrincipal;User ID=<client id>;Password=<client secret>;database=<db>
        basic authentication (everything else):
            server=<host>;user id=<user>;password=<password>;database=<db>

    The result contains credentials in clear text. Keep it out of logs, or
    pass it through ``redact_connection_string`` first.

    Args:
        config: Database configuration

    Returns:
        Connection string in the driver's key/value syntax

    Raises:
        ConfigError: If the configuration is invalid
    """
    validate_config(config)

    if config.uses_service_principal:
        pairs = _service_principal_pairs(config)
    else:
        pairs = _basic_pairs(config)

    conn_str = _join_pairs(pairs)
    log_connection_string_built(config, _join_pairs(_redact_pairs(pairs)))
    return conn_str


def _join_pairs(pairs: list[tuple[str, str]]) -> str:
    # Key case and order are what the driver parser expects; do not normalize
    return CONNECTION_STRING_SEPARATOR.join(
        f"{key}{CONNECTION_STRING_ASSIGNMENT}{value}" for key, value in pairs
    )


def _redact_pairs(pairs: list[tuple[str, str]]) -> list[tuple[str, str]]:
    return [
        (key, REDACTED_VALUE if key.lower() in SECRET_KEYS else value)
        for key, value in pairs
    ]


def _basic_pairs(config: DatabaseConfig) -> list[tuple[str, str]]:
    return [
        ("server", config.host),
        ("user id", qualify_user(config)),
        ("password", config.password),
        ("database", config.database_name),
    ]


def _service_principal_pairs(config: DatabaseConfig) -> list[tuple[str, str]]:
    return [
        ("server", config.host),
        ("fedauth", AZURE_FEDAUTH_SERVICE_PRINCIPAL),
        ("User ID", config.azure_client_id),
        ("Password", config.azure_client_secret),
        ("database", config.database_name),
    ]


def qualify_user(config: DatabaseConfig) -> str:
    """Return the login identity to put in a basic-auth connection string.

    Azure SQL DB logins must be qualified with the logical server name
    (``user@server``). Users that already contain ``@`` and users of other
    database types are returned unchanged.

    Args:
        config: Database configuration

    Returns:
        Login identity
    """
    user = config.user
    if config.is_azure and USER_SERVER_SEPARATOR not in user:
        server_name = extract_server_name(config.host)
        if server_name:
            user = f"{user}{USER_SERVER_SEPARATOR}{server_name}"
    return user


def extract_server_name(host: str) -> str:
    """Extract the server short name from a host address.

    Examples:
        "servername.database.windows.net" -> "servername"
        "servername.database.windows.net:1433" -> "servername"
        "localhost:1433" -> "localhost"
        "127.0.0.1" -> "127.0.0.1"

    Args:
        host: Host, optionally with a port suffix

    Returns:
        Host without port and without the Azure SQL domain suffix
    """
    host = host.split(":", 1)[0]

    idx = host.find(AZURE_SQL_DOMAIN_SUFFIX)
    if idx != -1:
        host = host[:idx]

    return host


def parse_connection_string(conn_str: str) -> dict[str, str]:
    """Parse a semicolon-delimited connection string into components.

    Args:
        conn_str: Connection string in format key=value;key=value
                  Example: server=db.internal;user id=svc;password=x;database=ledger

    Returns:
        Dictionary of lower-cased keys to values (values are not trimmed)

    Raises:
        ValueError: If the string is empty or a segment has no '='
    """
    if not conn_str or not conn_str.strip():
        raise ValueError("Connection string cannot be empty")

    parts: dict[str, str] = {}
    for segment in conn_str.split(CONNECTION_STRING_SEPARATOR):
        if not segment:
            continue
        key, sep, value = segment.partition(CONNECTION_STRING_ASSIGNMENT)
        if not sep or not key.strip():
            raise ValueError(
                f"Invalid connection string segment: {segment.split(CONNECTION_STRING_ASSIGNMENT)[0]!r}\n"
                f"  Hint: Use format key=value;key=value\n"
                f"  Example: server=localhost;user id=sa;password=...;database=mydb"
            )
        parts[key.strip().lower()] = value

    return parts


def resolve_pool_settings(config: Optional[DatabaseConfig]) -> PoolSettings:
    """Select the connection pool parameters for a configuration.

    Azure SQL DB: each ``azure_*`` override that is set (> 0) replaces the
    generic value, and anything still 0 falls back to 10 idle / 100 open /
    3600 seconds. Other database types get the generic values unchanged.

    Args:
        config: Database configuration

    Returns:
        Effective pool settings

    Raises:
        NullConfigError: If config is None
    """
    if config is None:
        raise NullConfigError()

    max_idle = config.max_idle_connections
    max_open = config.max_open_connections
    max_lifetime = config.connection_max_lifetime_seconds

    if config.is_azure:
        if config.azure_max_idle_conns > 0:
            max_idle = config.azure_max_idle_conns
        if config.azure_max_open_conns > 0:
            max_open = config.azure_max_open_conns
        if config.azure_conn_max_lifetime > 0:
            max_lifetime = config.azure_conn_max_lifetime

        if max_idle == 0:
            max_idle = DEFAULT_AZURE_MAX_IDLE_CONNS
        if max_open == 0:
            max_open = DEFAULT_AZURE_MAX_OPEN_CONNS
        if max_lifetime == 0:
            max_lifetime = DEFAULT_AZURE_CONN_MAX_LIFETIME

    settings = PoolSettings(
        max_idle=max_idle,
        max_open=max_open,
        max_lifetime_seconds=max_lifetime,
    )
    log_pool_settings(config, settings)
    return settings
