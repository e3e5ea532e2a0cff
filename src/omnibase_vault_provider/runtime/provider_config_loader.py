# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Provider Configuration Loader.

Loads Vault provider configuration from a YAML file and the standard Vault
environment variables.

Config File Structure:
    ```yaml
    url: https://vault.example.com:8200
    namespace: engineering
    timeout_seconds: 30
    verify_ssl: true
    ```

Environment variables (VAULT_ADDR, VAULT_NAMESPACE, VAULT_SKIP_VERIFY,
VAULT_CLIENT_TIMEOUT) override file values. The token is only ever taken from
VAULT_TOKEN; a ``token`` key in the file is rejected.

Security:
    - Uses yaml.safe_load() to prevent arbitrary code execution
    - File size is capped before reading
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

import yaml
from pydantic import ValidationError

from omnibase_vault_provider.enums import EnumInfraTransportType
from omnibase_vault_provider.errors import (
    ModelInfraErrorContext,
    ProtocolConfigurationError,
)
from omnibase_vault_provider.models import ModelVaultProviderConfig

logger = logging.getLogger(__name__)

MAX_CONFIG_SIZE_BYTES = 1024 * 1024

_FORBIDDEN_FILE_KEYS: frozenset[str] = frozenset({"token"})


def _config_error_context() -> ModelInfraErrorContext:
    return ModelInfraErrorContext.with_correlation(
        transport_type=EnumInfraTransportType.RUNTIME,
        operation="load_provider_config",
        target_name="vault_provider",
    )


def load_provider_config(
    config_path: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> ModelVaultProviderConfig:
    """Load provider configuration.

    Args:
        config_path: Optional YAML file. When None, configuration comes from
            the environment alone.
        environ: Environment mapping; defaults to os.environ.

    Returns:
        Validated ModelVaultProviderConfig.

    Raises:
        ProtocolConfigurationError: If the file is missing, too large, not
            valid YAML, not a mapping, contains a token, or the combined
            values fail validation.
    """
    file_values: dict[str, object] = {}
    if config_path is not None:
        file_values = _read_config_file(Path(config_path))

    try:
        config = ModelVaultProviderConfig.from_env(environ, **file_values)
    except ValidationError as e:
        raise ProtocolConfigurationError(
            f"Invalid Vault provider configuration: {e}",
            context=_config_error_context(),
        ) from e
    except ValueError as e:
        raise ProtocolConfigurationError(
            f"Invalid Vault provider environment value: {e}",
            context=_config_error_context(),
        ) from e

    logger.debug(
        "Loaded Vault provider configuration",
        extra={
            "config_path": str(config_path) if config_path is not None else None,
            "url": config.url,
            "namespace": config.namespace,
            "has_token": config.token is not None,
        },
    )
    return config


def _read_config_file(path: Path) -> dict[str, object]:
    if not path.is_file():
        raise ProtocolConfigurationError(
            f"Config file not found: {path}",
            context=_config_error_context(),
        )

    file_size = path.stat().st_size
    if file_size > MAX_CONFIG_SIZE_BYTES:
        raise ProtocolConfigurationError(
            f"Config file too large: {file_size} bytes (max {MAX_CONFIG_SIZE_BYTES})",
            context=_config_error_context(),
        )

    try:
        with path.open(encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ProtocolConfigurationError(
            f"Invalid YAML in config file: {e}",
            context=_config_error_context(),
        ) from e

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ProtocolConfigurationError(
            f"Config file must be a mapping, got {type(raw).__name__}",
            context=_config_error_context(),
        )

    forbidden = sorted(_FORBIDDEN_FILE_KEYS & set(raw))
    if forbidden:
        raise ProtocolConfigurationError(
            "Vault token must come from VAULT_TOKEN, not the config file",
            context=_config_error_context(),
            config_path=str(path),
        )

    return {str(key): value for key, value in raw.items()}


__all__: list[str] = ["MAX_CONFIG_SIZE_BYTES", "load_provider_config"]
