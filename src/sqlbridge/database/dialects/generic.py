"""Fallback dialect for database types without a dedicated implementation."""

from ...exceptions import UnsupportedDialectFeatureError
from .base import BaseDialect, SavepointSyntax


class GenericDialect(BaseDialect):
    """ANSI defaults for an unrecognized database type.

    The driver name is the type string itself and savepoints are reported
    as unsupported.
    """

    savepoint_syntax = SavepointSyntax.ANSI
    supports_savepoints = False

    def __init__(self, database_type: str):
        self.database_type = database_type
        self.driver_name = database_type

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
        # No portable spelling exists
        raise UnsupportedDialectFeatureError(self.database_type, "auto-increment")
