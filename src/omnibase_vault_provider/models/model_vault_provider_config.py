# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault Provider Configuration Model.

This module provides the Pydantic configuration model used to build the
Vault client that lifecycle handlers receive through ModelProviderContext.

Security Note:
    The token field uses SecretStr to prevent accidental logging of
    sensitive credentials. Tokens come from the VAULT_TOKEN environment
    variable, never from YAML configuration files.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, SecretStr

ENV_VAULT_ADDR = "VAULT_ADDR"
ENV_VAULT_TOKEN = "VAULT_TOKEN"
ENV_VAULT_NAMESPACE = "VAULT_NAMESPACE"
ENV_VAULT_SKIP_VERIFY = "VAULT_SKIP_VERIFY"
ENV_VAULT_CLIENT_TIMEOUT = "VAULT_CLIENT_TIMEOUT"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


class ModelVaultProviderConfig(BaseModel):
    """Configuration for the Vault client used by the provider.

    Attributes:
        url: Vault server URL (required, e.g., "https://vault.example.com:8200")
        token: Vault authentication token (SecretStr for security, optional)
        namespace: Vault namespace for Vault Enterprise (optional)
        timeout_seconds: Request timeout in seconds (1.0-300.0, default 30.0)
        verify_ssl: Whether to verify SSL certificates (default True)

    Example:
        >>> config = ModelVaultProviderConfig(
        ...     url="https://vault.example.com:8200",
        ...     token=SecretStr("s.1234567890abcdefghijklmnopqrstuv"),
        ... )
        >>> print(config.token)
        **********
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        from_attributes=True,
    )

    url: str = Field(
        min_length=1,
        description="Vault server URL (e.g., 'https://vault.example.com:8200')",
    )
    token: SecretStr | None = Field(
        default=None,
        description="Vault authentication token",
    )
    namespace: str | None = Field(
        default=None,
        description="Vault namespace for Vault Enterprise",
    )
    timeout_seconds: float = Field(
        default=30.0,
        ge=1.0,
        le=300.0,
        description="Request timeout in seconds",
    )
    verify_ssl: bool = Field(
        default=True,
        description="Whether to verify SSL certificates",
    )

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        **overrides: object,
    ) -> ModelVaultProviderConfig:
        """Build a config from the standard Vault environment variables.

        Reads VAULT_ADDR, VAULT_TOKEN, VAULT_NAMESPACE, VAULT_SKIP_VERIFY and
        VAULT_CLIENT_TIMEOUT. Keyword arguments supply values for fields the
        environment leaves unset; a set variable always takes precedence.

        Raises:
            pydantic.ValidationError: If the resulting values are invalid.
        """
        env = os.environ if environ is None else environ
        values: dict[str, object] = dict(overrides)

        if env.get(ENV_VAULT_ADDR):
            values["url"] = env[ENV_VAULT_ADDR]
        if env.get(ENV_VAULT_TOKEN):
            values["token"] = SecretStr(env[ENV_VAULT_TOKEN])
        if env.get(ENV_VAULT_NAMESPACE):
            values["namespace"] = env[ENV_VAULT_NAMESPACE]
        if env.get(ENV_VAULT_SKIP_VERIFY):
            values["verify_ssl"] = env[ENV_VAULT_SKIP_VERIFY].lower() not in _TRUTHY
        if env.get(ENV_VAULT_CLIENT_TIMEOUT):
            values["timeout_seconds"] = float(env[ENV_VAULT_CLIENT_TIMEOUT])

        return cls.model_validate(values)


__all__: list[str] = [
    "ENV_VAULT_ADDR",
    "ENV_VAULT_CLIENT_TIMEOUT",
    "ENV_VAULT_NAMESPACE",
    "ENV_VAULT_SKIP_VERIFY",
    "ENV_VAULT_TOKEN",
    "ModelVaultProviderConfig",
]
