"""Unit tests for connection string building and pool settings."""

import dataclasses
import json
import logging

import pytest

from sqlbridge.database import (
    DatabaseConfig,
    DatabaseType,
    PoolSettings,
    build_connection_string,
    extract_server_name,
    parse_connection_string,
    qualify_user,
    resolve_pool_settings,
)
from sqlbridge.exceptions import MissingHostError, MissingTenantIdError, MissingUserError, NullConfigError
from tests.conftest import AZURE_HOST, SP_CLIENT_SECRET


class TestBasicAuth:
    def test_sqlserver(self, sqlserver_config: DatabaseConfig) -> None:
        assert build_connection_string(sqlserver_config) == (
            "server=db.internal;user id=svc;password=p@ss;database=ledger"
        )

    def test_azure_user_is_qualified(self, azure_password_config: DatabaseConfig) -> None:
        assert build_connection_string(azure_password_config) == (
            f"server={AZURE_HOST};user id=alice@myserver;password=pw;database=ledger"
        )

    def test_azure_qualified_user_unchanged(self, azure_password_config: DatabaseConfig) -> None:
        config = dataclasses.replace(azure_password_config, user="alice@myserver")
        assert qualify_user(config) == "alice@myserver"
        assert "user id=alice@myserver;" in build_connection_string(config)

    def test_azure_host_with_port(self, azure_password_config: DatabaseConfig) -> None:
        config = dataclasses.replace(azure_password_config, host=f"{AZURE_HOST}:1433")
        assert qualify_user(config) == "alice@myserver"

    def test_azure_empty_short_name_leaves_user(self, azure_password_config: DatabaseConfig) -> None:
        config = dataclasses.replace(azure_password_config, host=":1433")
        assert qualify_user(config) == "alice"

    def test_sqlserver_user_never_qualified(self, sqlserver_config: DatabaseConfig) -> None:
        config = dataclasses.replace(sqlserver_config, user="alice", host=AZURE_HOST)
        assert qualify_user(config) == "alice"

    def test_azure_password_mode_ignores_azure_ids(self, azure_password_config: DatabaseConfig) -> None:
        config = dataclasses.replace(azure_password_config, azure_client_id="cid")
        conn_str = build_connection_string(config)
        assert "cid" not in conn_str
        assert "fedauth" not in conn_str

    def test_other_dialects_use_basic_format(self) -> None:
        config = DatabaseConfig(
            database_type=DatabaseType.POSTGRES, host="pg:5432", user="app", database_name="ledger"
        )
        assert build_connection_string(config) == "server=pg:5432;user id=app;password=;database=ledger"

    def test_no_trailing_separator_or_whitespace(self, sqlserver_config: DatabaseConfig) -> None:
        conn_str = build_connection_string(sqlserver_config)
        assert not conn_str.endswith(";")
        assert "; " not in conn_str and " =" not in conn_str and "= " not in conn_str


class TestServicePrincipal:
    def test_format(self, azure_sp_config: DatabaseConfig) -> None:
        assert build_connection_string(azure_sp_config) == (
            "server=acct.database.windows.net;fedauth=ActiveDirectoryServicePrincipal;"
            f"User ID=cid;Password={SP_CLIENT_SECRET};database=ledger"
        )

    def test_contents(self, azure_sp_config: DatabaseConfig) -> None:
        conn_str = build_connection_string(azure_sp_config)
        assert "ActiveDirectoryServicePrincipal" in conn_str
        assert "cid" in conn_str
        assert SP_CLIENT_SECRET in conn_str
        assert "ledger" in conn_str
        assert "password" not in conn_str

    def test_user_field_ignored(self, azure_sp_config: DatabaseConfig) -> None:
        config = dataclasses.replace(azure_sp_config, user="alice", password="pw")
        assert build_connection_string(config) == build_connection_string(azure_sp_config)


class TestBuildValidatesFirst:
    def test_missing_host(self, sqlserver_config: DatabaseConfig) -> None:
        with pytest.raises(MissingHostError):
            build_connection_string(dataclasses.replace(sqlserver_config, host=""))

    def test_missing_host_service_principal(self, azure_sp_config: DatabaseConfig) -> None:
        with pytest.raises(MissingHostError):
            build_connection_string(dataclasses.replace(azure_sp_config, host=""))

    def test_missing_tenant(self, azure_sp_config: DatabaseConfig) -> None:
        with pytest.raises(MissingTenantIdError):
            build_connection_string(dataclasses.replace(azure_sp_config, azure_tenant_id=""))

    def test_missing_user(self, azure_password_config: DatabaseConfig) -> None:
        with pytest.raises(MissingUserError):
            build_connection_string(dataclasses.replace(azure_password_config, user=""))

    def test_null(self) -> None:
        with pytest.raises(NullConfigError):
            build_connection_string(None)

    def test_idempotent(self, azure_password_config: DatabaseConfig, azure_sp_config: DatabaseConfig) -> None:
        for config in (azure_password_config, azure_sp_config):
            assert build_connection_string(config) == build_connection_string(config)


class TestExtractServerName:
    @pytest.mark.parametrize(
        "host, expected",
        [
            ("myserver.database.windows.net", "myserver"),
            ("myserver.database.windows.net:1433", "myserver"),
            ("localhost:1433", "localhost"),
            ("127.0.0.1", "127.0.0.1"),
            ("db.internal", "db.internal"),
            (":1433", ""),
            ("", ""),
        ],
    )
    def test_examples(self, host: str, expected: str) -> None:
        assert extract_server_name(host) == expected


class TestParseConnectionString:
    def test_basic(self, sqlserver_config: DatabaseConfig) -> None:
        assert parse_connection_string(build_connection_string(sqlserver_config)) == {
            "server": "db.internal",
            "user id": "svc",
            "password": "p@ss",
            "database": "ledger",
        }

    def test_keys_lowercased(self, azure_sp_config: DatabaseConfig) -> None:
        parts = parse_connection_string(build_connection_string(azure_sp_config))
        assert parts["fedauth"] == "ActiveDirectoryServicePrincipal"
        assert parts["user id"] == "cid"
        assert parts["password"] == SP_CLIENT_SECRET

    def test_value_may_contain_equals(self) -> None:
        assert parse_connection_string("password=a=b")["password"] == "a=b"

    @pytest.mark.parametrize("conn_str", ["", "   "])
    def test_empty(self, conn_str: str) -> None:
        with pytest.raises(ValueError, match="cannot be empty"):
            parse_connection_string(conn_str)

    def test_segment_without_equals(self) -> None:
        with pytest.raises(ValueError, match="Hint"):
            parse_connection_string("server=x;database")


class TestPoolSettings:
    def test_generic_values_pass_through(self, sqlserver_config: DatabaseConfig) -> None:
        config = dataclasses.replace(
            sqlserver_config, max_idle_connections=5, max_open_connections=20, connection_max_lifetime_seconds=600
        )
        assert resolve_pool_settings(config) == PoolSettings(5, 20, 600)

    @pytest.mark.parametrize("database_type", ["sqlserver", "postgres", "mysql", "sqlite3"])
    def test_no_fallback_outside_azure(self, database_type: str) -> None:
        config = DatabaseConfig(database_type=database_type)
        assert resolve_pool_settings(config) == PoolSettings(0, 0, 0)

    def test_azure_overrides_ignored_outside_azure(self, sqlserver_config: DatabaseConfig) -> None:
        config = dataclasses.replace(sqlserver_config, azure_max_idle_conns=7, azure_max_open_conns=70)
        assert resolve_pool_settings(config) == PoolSettings(0, 0, 0)

    def test_azure_fallbacks(self, azure_password_config: DatabaseConfig) -> None:
        settings = resolve_pool_settings(azure_password_config)
        assert settings == PoolSettings(max_idle=10, max_open=100, max_lifetime_seconds=3600)

    def test_azure_generic_values_kept(self, azure_password_config: DatabaseConfig) -> None:
        config = dataclasses.replace(
            azure_password_config,
            max_idle_connections=5,
            max_open_connections=50,
            connection_max_lifetime_seconds=1200,
        )
        assert resolve_pool_settings(config) == PoolSettings(5, 50, 1200)

    def test_azure_overrides_win(self, azure_password_config: DatabaseConfig) -> None:
        config = dataclasses.replace(
            azure_password_config,
            max_idle_connections=5,
            max_open_connections=50,
            connection_max_lifetime_seconds=1200,
            azure_max_idle_conns=7,
            azure_max_open_conns=70,
            azure_conn_max_lifetime=700,
        )
        assert resolve_pool_settings(config) == PoolSettings(7, 70, 700)

    def test_azure_partial_override(self, azure_password_config: DatabaseConfig) -> None:
        config = dataclasses.replace(azure_password_config, azure_max_open_conns=30)
        assert resolve_pool_settings(config) == PoolSettings(10, 30, 3600)

    def test_negative_override_ignored(self, azure_password_config: DatabaseConfig) -> None:
        config = dataclasses.replace(azure_password_config, azure_max_idle_conns=-1)
        assert resolve_pool_settings(config).max_idle == 10

    def test_null(self) -> None:
        with pytest.raises(NullConfigError):
            resolve_pool_settings(None)

    def test_logged(self, azure_password_config: DatabaseConfig, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="sqlbridge.database"):
            resolve_pool_settings(azure_password_config)
        events = [json.loads(r.getMessage()) for r in caplog.records if r.name == "sqlbridge.database"]
        assert events[-1]["event"] == "pool_settings"
        assert events[-1]["max_open"] == 100
