# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault Provider Errors Module.

Exports:
    ModelInfraErrorContext: Configuration model for bundled error context
    RuntimeHostError: Base provider error class
    ProtocolConfigurationError: Configuration and schema validation errors
    DataJsonSyntaxError: data_json is not a JSON object
    SecretResolutionError: Secret path could not be resolved
    InfraConnectionError: Remote call failures
    InfraVaultError: Vault write/read/delete failures
    InfraAuthenticationError: Token rejected or insufficient permissions
    InfraUnavailableError: Vault down, sealed, or unreachable

Error Sanitization Guidelines:
    NEVER include in error messages or context:
        - Vault tokens
        - Secret values, including the raw data_json string

    SAFE to include:
        - Secret paths (e.g., "secret/foo")
        - Operation names (e.g., "write", "read", "delete")
        - Correlation IDs
        - Error codes and remote error descriptions
"""

from omnibase_vault_provider.errors.error_data_json import DataJsonSyntaxError
from omnibase_vault_provider.errors.error_vault import InfraVaultError
from omnibase_vault_provider.errors.infra_errors import (
    InfraAuthenticationError,
    InfraConnectionError,
    InfraUnavailableError,
    ProtocolConfigurationError,
    RuntimeHostError,
    SecretResolutionError,
)
from omnibase_vault_provider.errors.model_infra_error_context import (
    ModelInfraErrorContext,
)

__all__: list[str] = [
    "DataJsonSyntaxError",
    "InfraAuthenticationError",
    "InfraConnectionError",
    "InfraUnavailableError",
    "InfraVaultError",
    "ModelInfraErrorContext",
    "ProtocolConfigurationError",
    "RuntimeHostError",
    "SecretResolutionError",
]
