"""Constants and static configuration for sqlbridge."""

# Application constants
LIBRARY_VERSION = "0.3.0"

# Driver names
MSSQL_DRIVER_NAME = "mssql"  # Single wire driver for SQL Server and Azure SQL DB

# Azure SQL DB connection pool fallbacks (applied only when nothing is configured)
DEFAULT_AZURE_MAX_IDLE_CONNS = 10
DEFAULT_AZURE_MAX_OPEN_CONNS = 100
DEFAULT_AZURE_CONN_MAX_LIFETIME = 3600  # 1 hour, in seconds

# Azure SQL DB identity
AZURE_SQL_DOMAIN_SUFFIX = ".database.windows.net"
AZURE_FEDAUTH_SERVICE_PRINCIPAL = "ActiveDirectoryServicePrincipal"
USER_SERVER_SEPARATOR = "@"

# Connection string syntax
CONNECTION_STRING_SEPARATOR = ";"
CONNECTION_STRING_ASSIGNMENT = "="
REDACTED_VALUE = "***"

# Datetime reference layout (year-month-day, hour:minute:second).
# Both dialect templates are built from these two halves.
DATETIME_DATE_LAYOUT = "%Y-%m-%d"
DATETIME_TIME_LAYOUT = "%H:%M:%S"
DATETIME_FORMAT_SPACE = f"{DATETIME_DATE_LAYOUT} {DATETIME_TIME_LAYOUT}"
DATETIME_FORMAT_ISO = f"{DATETIME_DATE_LAYOUT}T{DATETIME_TIME_LAYOUT}"

# Savepoint names are emitted unquoted by ANSI dialects
SAVEPOINT_NAME_PATTERN = r"^[A-Za-z_][A-Za-z0-9_]*$"

# Logging
LOGGER_NAME = "sqlbridge"
DATABASE_LOGGER_NAME = "sqlbridge.database"
FINGERPRINT_LENGTH = 16  # hex chars of SHA-256 kept in log events
