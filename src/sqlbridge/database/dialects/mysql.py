"""MySQL dialect."""

from ..config import DatabaseType
from .base import BaseDialect, SavepointSyntax


class MySQLDialect(BaseDialect):
    """MySQL: backtick identifiers, ``LIMIT offset, count``.

    Savepoints are reported as unsupported so callers roll back the whole
    transaction instead.
    """

    database_type = DatabaseType.MYSQL.value
    driver_name = DatabaseType.MYSQL.value
    savepoint_syntax = SavepointSyntax.ANSI
    supports_savepoints = False

    def quote_identifier(self, name: str) -> str:
        return "`" + name.replace("`", "``") + "`"

    def limit_offset_clause(self, limit: int, offset: int = 0) -> str:
        self._check_limits(limit, offset)
        if offset:
            return f"LIMIT {offset}, {limit}"
        return f"LIMIT {limit}"

    def current_timestamp_sql(self) -> str:
        return "CURRENT_TIMESTAMP"

    def auto_increment_keyword(self) -> str:
        return "AUTO_INCREMENT"
