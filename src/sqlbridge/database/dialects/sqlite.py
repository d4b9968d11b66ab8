"""SQLite dialect."""

from ..config import DatabaseType
from .base import BaseDialect, SavepointSyntax


class SQLiteDialect(BaseDialect):
    """SQLite (embedded, file based). Savepoints reported as unsupported."""

    database_type = DatabaseType.SQLITE.value
    driver_name = DatabaseType.SQLITE.value
    savepoint_syntax = SavepointSyntax.ANSI
    supports_savepoints = False

    def quote_identifier(self, name: str) -> str:
        return '"' + name.replace('"', '""') + '"'

    def limit_offset_clause(self, limit: int, offset: int = 0) -> str:
        self._check_limits(limit, offset)
        if offset:
            return f"LIMIT {limit} OFFSET {offset}"
        return f"LIMIT {limit}"

    def current_timestamp_sql(self) -> str:
        return "datetime('now')"

    def auto_increment_keyword(self) -> str:
        return "AUTOINCREMENT"
