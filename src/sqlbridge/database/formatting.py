"""Dialect-aware value formatting and dialect summaries."""

from datetime import date, datetime
from typing import Iterable, Optional, Union

from .config import DatabaseType
from .dialects import DatabaseTypeLike, dialect_facts

RESULT_SEPARATOR = "=" * 80
ROW_SEPARATOR = "-" * 80

SUMMARY_COLUMNS = ["database_type", "driver_name", "savepoints", "savepoint_syntax", "datetime_format"]


def format_datetime(database_type: DatabaseTypeLike, value: Union[datetime, date]) -> str:
    """Render a datetime as a literal in the dialect's layout.

    Timezone information and sub-second precision are dropped. A ``date``
    is rendered at midnight.

    Args:
        database_type: Target database type
        value: Value to render

    Returns:
        Datetime string, e.g. "2024-03-01 13:45:00" or "2024-03-01T13:45:00"
    """
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    return value.strftime(dialect_facts(database_type).datetime_format)


def format_dialect_summary(database_types: Optional[Iterable[DatabaseTypeLike]] = None) -> str:
    """Format the dialect facts of several database types as a plain text table.

    Args:
        database_types: Types to include (default: every supported type)

    Returns:
        Column-aligned table with separators
    """
    if database_types is None:
        database_types = list(DatabaseType)

    rows = []
    for database_type in database_types:
        facts = dialect_facts(database_type)
        rows.append({
            "database_type": facts.database_type,
            "driver_name": facts.driver_name,
            "savepoints": "yes" if facts.supports_savepoints else "no",
            "savepoint_syntax": facts.savepoint_syntax.value,
            "datetime_format": facts.datetime_format,
        })

    # Calculate column widths for alignment
    col_widths = {col: len(col) for col in SUMMARY_COLUMNS}
    for row in rows:
        for col in SUMMARY_COLUMNS:
            col_widths[col] = max(col_widths[col], len(row[col]))

    output = [
        RESULT_SEPARATOR,
        "SQL DIALECTS",
        RESULT_SEPARATOR,
        "  ".join(col.ljust(col_widths[col]) for col in SUMMARY_COLUMNS).rstrip(),
        ROW_SEPARATOR,
    ]
    for row in rows:
        output.append("  ".join(row[col].ljust(col_widths[col]) for col in SUMMARY_COLUMNS).rstrip())

    output.extend([
        ROW_SEPARATOR,
        f"Total dialects: {len(rows)}",
        RESULT_SEPARATOR,
        "",
    ])

    return "\n".join(output)
