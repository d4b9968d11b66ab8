"""SQL Server and Azure SQL DB dialects."""

from typing import Optional

from ...constants import DATETIME_FORMAT_ISO, MSSQL_DRIVER_NAME
from ..config import DatabaseType
from .base import BaseDialect, SavepointSyntax


class SqlServerDialect(BaseDialect):
    """SQL Server (Transact-SQL).

    T-SQL has no SAVEPOINT keyword: savepoints are named sub-transactions
    (``SAVE TRANSACTION`` / ``ROLLBACK TRANSACTION``) and cannot be released.
    """

    database_type = DatabaseType.SQLSERVER.value
    driver_name = MSSQL_DRIVER_NAME
    savepoint_syntax = SavepointSyntax.TRANSACT_SQL
    datetime_format = DATETIME_FORMAT_ISO
    supports_savepoints = True

    def quote_identifier(self, name: str) -> str:
        return "[" + name.replace("]", "]]") + "]"

    def limit_offset_clause(self, limit: int, offset: int = 0) -> str:
        # Only valid after an ORDER BY clause
        self._check_limits(limit, offset)
        return f"OFFSET {offset} ROWS FETCH NEXT {limit} ROWS ONLY"

    def current_timestamp_sql(self) -> str:
        return "GETDATE()"

    def auto_increment_keyword(self) -> str:
        return "IDENTITY(1, 1)"

    def savepoint_sql(self, name: str) -> str:
        self.check_savepoint(name)
        return f"SAVE TRANSACTION {self.quote_identifier(name)}"

    def rollback_to_savepoint_sql(self, name: str) -> str:
        self.check_savepoint(name)
        return f"ROLLBACK TRANSACTION {self.quote_identifier(name)}"

    def release_savepoint_sql(self, name: str) -> Optional[str]:
        self.check_savepoint(name)
        return None


class AzureSqlDialect(SqlServerDialect):
    """Azure SQL DB: same wire driver and T-SQL syntax as SQL Server."""

    database_type = DatabaseType.AZURE_SQL_DB.value
