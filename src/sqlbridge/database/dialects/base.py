"""Abstract base class for SQL dialects."""

import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Protocol, runtime_checkable

from ...constants import DATETIME_FORMAT_SPACE, SAVEPOINT_NAME_PATTERN
from ...exceptions import InvalidSavepointNameError, SavepointNotSupportedError

logger = logging.getLogger(__name__)

SAVEPOINT_NAME_RE = re.compile(SAVEPOINT_NAME_PATTERN)


@runtime_checkable
class SqlExecutor(Protocol):
    """Anything that can execute one SQL statement.

    DB-API connections and cursors (``sqlite3.Connection``, ``pyodbc.Cursor``,
    ...) already match. Errors are raised, not returned.
    """

    def execute(self, sql: str) -> Any: ...


class SavepointSyntax(str, Enum):
    """How a dialect phrases savepoints."""

    ANSI = "ansi"  # SAVEPOINT name / ROLLBACK TO SAVEPOINT name
    TRANSACT_SQL = "transact_sql"  # SAVE TRANSACTION [name] / ROLLBACK TRANSACTION [name]


@dataclass(frozen=True)
class DialectFacts:
    """Static facts about a dialect, keyed by database type."""

    database_type: str
    driver_name: str
    savepoint_syntax: SavepointSyntax
    datetime_format: str
    supports_savepoints: bool


class BaseDialect(ABC):
    """Abstract base class for database-specific SQL dialects.

    Each database type implements this interface so the data-access layer
    can build SQL without knowing which database it talks to. Savepoint
    statements default to the ANSI phrasing.
    """

    database_type: str = ""
    driver_name: str = ""
    savepoint_syntax: SavepointSyntax = SavepointSyntax.ANSI
    datetime_format: str = DATETIME_FORMAT_SPACE
    supports_savepoints: bool = False

    @property
    def facts(self) -> DialectFacts:
        return DialectFacts(
            database_type=self.database_type,
            driver_name=self.driver_name,
            savepoint_syntax=self.savepoint_syntax,
            datetime_format=self.datetime_format,
            supports_savepoints=self.supports_savepoints,
        )

    @abstractmethod
    def quote_identifier(self, name: str) -> str:
        """Quote a table or column name.

        Args:
            name: Unquoted identifier

        Returns:
            Identifier quoted for this dialect
        """
        pass

    @abstractmethod
    def limit_offset_clause(self, limit: int, offset: int = 0) -> str:
        """Build the row-limiting clause appended to a SELECT.

        Args:
            limit: Maximum number of rows
            offset: Number of rows to skip

        Returns:
            SQL fragment

        Raises:
            ValueError: If limit or offset is negative
        """
        pass

    @abstractmethod
    def current_timestamp_sql(self) -> str:
        """SQL expression for the current date and time."""
        pass

    @abstractmethod
    def auto_increment_keyword(self) -> str:
        """Column keyword for an auto-incrementing integer key."""
        pass

    def check_savepoint(self, name: str) -> None:
        """Ensure this dialect can emit a savepoint with the given name.

        Raises:
            SavepointNotSupportedError: If the dialect has no savepoints
            InvalidSavepointNameError: If name is not a plain identifier
        """
        if not self.supports_savepoints:
            raise SavepointNotSupportedError(self.database_type)
        if not isinstance(name, str) or not SAVEPOINT_NAME_RE.match(name):
            raise InvalidSavepointNameError(name)

    def savepoint_sql(self, name: str) -> str:
        """Statement that sets a savepoint inside the current transaction."""
        self.check_savepoint(name)
        return f"SAVEPOINT {name}"

    def rollback_to_savepoint_sql(self, name: str) -> str:
        """Statement that rolls back to a savepoint."""
        self.check_savepoint(name)
        return f"ROLLBACK TO SAVEPOINT {name}"

    def release_savepoint_sql(self, name: str) -> Optional[str]:
        """Statement that releases a savepoint, or None if the dialect has none."""
        self.check_savepoint(name)
        return f"RELEASE SAVEPOINT {name}"

    def set_savepoint(self, executor: SqlExecutor, name: str) -> Any:
        """Set a savepoint through the given executor.

        Returns:
            Whatever the executor returns
        """
        sql = self.savepoint_sql(name)
        logger.debug(f"Setting savepoint {name} ({self.database_type})")
        return executor.execute(sql)

    def rollback_to_savepoint(self, executor: SqlExecutor, name: str) -> Any:
        """Roll back to a savepoint through the given executor.

        Returns:
            Whatever the executor returns
        """
        sql = self.rollback_to_savepoint_sql(name)
        logger.debug(f"Rolling back to savepoint {name} ({self.database_type})")
        return executor.execute(sql)

    @staticmethod
    def _check_limits(limit: int, offset: int) -> None:
        if limit < 0 or offset < 0:
            raise ValueError(
                f"Invalid row limit: limit={limit}, offset={offset}\n"
                f"  Hint: limit and offset must be zero or positive"
            )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(database_type={self.database_type!r})"
