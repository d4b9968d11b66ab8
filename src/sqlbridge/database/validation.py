"""Database configuration validation."""

from typing import Callable, Optional

from ..exceptions import (
    ConfigError,
    MissingClientIdError,
    MissingClientSecretError,
    MissingDatabaseNameError,
    MissingHostError,
    MissingTenantIdError,
    MissingUserError,
    NullConfigError,
)
from .config import DatabaseConfig
from .logging import log_validation_failure

# Ordered checks; the order decides which error validate_config() reports
COMMON_CHECKS: list[tuple[Callable[[DatabaseConfig], bool], type[ConfigError]]] = [
    (lambda c: bool(c.host), MissingHostError),
    (lambda c: bool(c.database_name), MissingDatabaseNameError),
]

SERVICE_PRINCIPAL_CHECKS: list[tuple[Callable[[DatabaseConfig], bool], type[ConfigError]]] = [
    (lambda c: bool(c.azure_tenant_id), MissingTenantIdError),
    (lambda c: bool(c.azure_client_id), MissingClientIdError),
    (lambda c: bool(c.azure_client_secret), MissingClientSecretError),
]

PASSWORD_CHECKS: list[tuple[Callable[[DatabaseConfig], bool], type[ConfigError]]] = [
    (lambda c: bool(c.user), MissingUserError),
]


def find_config_errors(config: Optional[DatabaseConfig]) -> list[ConfigError]:
    """Run every check and collect all failures.

    Checks run in a fixed order: host, database name, then either the
    service principal fields (tenant id, client id, client secret) or the
    basic-auth user.

    Args:
        config: Database configuration to check

    Returns:
        List of errors in check order (empty if the configuration is valid)
    """
    if config is None:
        return [NullConfigError()]

    checks = list(COMMON_CHECKS)
    if config.uses_service_principal:
        checks.extend(SERVICE_PRINCIPAL_CHECKS)
    else:
        checks.extend(PASSWORD_CHECKS)

    return [error_cls() for check, error_cls in checks if not check(config)]


def validate_config(config: Optional[DatabaseConfig]) -> None:
    """Validate that a configuration is complete for its authentication mode.

    Args:
        config: Database configuration to validate

    Raises:
        NullConfigError: If config is None
        MissingHostError: If host is empty
        MissingDatabaseNameError: If database name is empty
        MissingTenantIdError: Service principal without tenant id
        MissingClientIdError: Service principal without client id
        MissingClientSecretError: Service principal without client secret
        MissingUserError: Basic authentication without user
    """
    errors = find_config_errors(config)
    if errors:
        log_validation_failure(config, errors[0])
        raise errors[0]


def is_valid_config(config: Optional[DatabaseConfig]) -> bool:
    """Quick check if a configuration would pass validation.

    Args:
        config: Configuration to check

    Returns:
        True if validate_config() would not raise
    """
    return not find_config_errors(config)
