"""PostgreSQL dialect."""

from ..config import DatabaseType
from .base import BaseDialect, SavepointSyntax


class PostgreSQLDialect(BaseDialect):
    """PostgreSQL: ANSI savepoints, double-quoted identifiers."""

    database_type = DatabaseType.POSTGRES.value
    driver_name = DatabaseType.POSTGRES.value
    savepoint_syntax = SavepointSyntax.ANSI
    supports_savepoints = True

    def quote_identifier(self, name: str) -> str:
        return '"' + name.replace('"', '""') + '"'

    def limit_offset_clause(self, limit: int, offset: int = 0) -> str:
        self._check_limits(limit, offset)
        if offset:
            return f"LIMIT {limit} OFFSET {offset}"
        return f"LIMIT {limit}"

    def current_timestamp_sql(self) -> str:
        return "CURRENT_TIMESTAMP"

    def auto_increment_keyword(self) -> str:
        return "SERIAL"
