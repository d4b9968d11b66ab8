"""
Pytest configuration for sqlbridge tests.

Shared configurations and a recording SQL executor live here so every test
file can reuse them instead of repeating hosts and credentials.
"""

from typing import Any

import pytest

from sqlbridge.database import AuthMethod, DatabaseConfig, DatabaseType

# ---------------------------------------------------------------------------
# Shared values (import these in test files)
# ---------------------------------------------------------------------------
AZURE_HOST = "myserver.database.windows.net"
SP_CLIENT_SECRET = "s3cr3t-value"


class RecordingExecutor:
    """SqlExecutor that records statements instead of running them."""

    def __init__(self, result: Any = 1):
        self.statements: list[str] = []
        self.result = result

    def execute(self, sql: str) -> Any:
        self.statements.append(sql)
        return self.result


class FailingExecutor:
    """SqlExecutor whose every statement fails."""

    def execute(self, sql: str) -> Any:
        raise RuntimeError(f"statement failed: {sql}")


@pytest.fixture
def sqlserver_config() -> DatabaseConfig:
    return DatabaseConfig(
        database_type=DatabaseType.SQLSERVER,
        host="db.internal",
        user="svc",
        password="p@ss",
        database_name="ledger",
    )


@pytest.fixture
def azure_password_config() -> DatabaseConfig:
    return DatabaseConfig(
        database_type=DatabaseType.AZURE_SQL_DB,
        host=AZURE_HOST,
        user="alice",
        password="pw",
        database_name="ledger",
    )


@pytest.fixture
def azure_sp_config() -> DatabaseConfig:
    return DatabaseConfig(
        database_type="azuresqldb",
        auth_method=AuthMethod.SERVICE_PRINCIPAL,
        host="acct.database.windows.net",
        database_name="ledger",
        azure_tenant_id="tid",
        azure_client_id="cid",
        azure_client_secret=SP_CLIENT_SECRET,
    )


@pytest.fixture
def recording_executor() -> RecordingExecutor:
    return RecordingExecutor()
