# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""HashiCorp Vault logical client backed by hvac.

Uses Vault's generic logical API (write/read/delete on a raw path) so that a
resource can target any secrets engine mount: KV v1 paths such as
``secret/foo`` or engine-specific paths alike.

Calls are synchronous and made exactly once. Timeouts come from the hvac
transport (timeout_seconds); there is no retry or circuit breaker here.

Exception Translation:
    hvac.exceptions.Forbidden, Unauthorized  -> InfraAuthenticationError
    hvac.exceptions.VaultDown, requests ConnectionError/Timeout
                                             -> InfraUnavailableError
    hvac.exceptions.InvalidPath              -> SecretResolutionError
    any other hvac.exceptions.VaultError     -> InfraVaultError

The original exception is always chained with ``from``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from uuid import UUID

import hvac
import hvac.exceptions
import requests

from omnibase_vault_provider.enums import EnumInfraTransportType
from omnibase_vault_provider.errors import (
    InfraAuthenticationError,
    InfraUnavailableError,
    InfraVaultError,
    ModelInfraErrorContext,
    ProtocolConfigurationError,
    RuntimeHostError,
    SecretResolutionError,
)
from omnibase_vault_provider.models import (
    ModelVaultProviderConfig,
    ModelVaultSecretRecord,
)

logger = logging.getLogger(__name__)

CLIENT_TARGET_NAME = "vault_logical_client"


class VaultLogicalClient:
    """Vault client conforming to ProtocolVaultLogicalClient.

    Either wrap an existing hvac.Client or build one with from_config().

    Example:
        >>> config = ModelVaultProviderConfig.from_env()
        >>> client = VaultLogicalClient.from_config(config)
        >>> client.verify_authentication()
        >>> client.write("secret/foo", {"key": "value"})
    """

    def __init__(
        self,
        client: hvac.Client,
        namespace: str | None = None,
        correlation_id: UUID | None = None,
    ) -> None:
        self._client = client
        self._namespace = namespace
        self._correlation_id = correlation_id

    @classmethod
    def from_config(
        cls,
        config: ModelVaultProviderConfig,
        correlation_id: UUID | None = None,
    ) -> VaultLogicalClient:
        """Create an hvac client from provider configuration.

        Raises:
            ProtocolConfigurationError: If no token is configured.
            InfraVaultError: If hvac rejects the configuration.
        """
        if config.token is None:
            raise ProtocolConfigurationError(
                "Missing 'token' in config - Vault authentication token required",
                context=ModelInfraErrorContext.with_correlation(
                    correlation_id,
                    transport_type=EnumInfraTransportType.VAULT,
                    operation="initialize",
                    target_name=CLIENT_TARGET_NAME,
                    namespace=config.namespace,
                ),
            )

        try:
            client = hvac.Client(
                url=config.url,
                token=config.token.get_secret_value(),
                namespace=config.namespace,
                verify=config.verify_ssl,
                timeout=config.timeout_seconds,
            )
        except hvac.exceptions.VaultError as e:
            raise InfraVaultError(
                f"Failed to create Vault client: {type(e).__name__}",
                context=ModelInfraErrorContext.with_correlation(
                    correlation_id,
                    transport_type=EnumInfraTransportType.VAULT,
                    operation="initialize",
                    target_name=CLIENT_TARGET_NAME,
                    namespace=config.namespace,
                ),
            ) from e

        logger.debug(
            "Vault client created",
            extra={
                "url": config.url,
                "namespace": config.namespace,
                "verify_ssl": config.verify_ssl,
                "timeout_seconds": config.timeout_seconds,
            },
        )
        return cls(client, namespace=config.namespace, correlation_id=correlation_id)

    @property
    def hvac_client(self) -> hvac.Client:
        """Return the wrapped hvac client."""
        return self._client

    def _error_context(self, operation: str) -> ModelInfraErrorContext:
        return ModelInfraErrorContext(
            transport_type=EnumInfraTransportType.VAULT,
            operation=operation,
            target_name=CLIENT_TARGET_NAME,
            correlation_id=self._correlation_id,
            namespace=self._namespace,
        )

    def _translate_error(
        self, error: Exception, operation: str, path: str | None
    ) -> RuntimeHostError:
        ctx = self._error_context(operation)
        if isinstance(error, (hvac.exceptions.Forbidden, hvac.exceptions.Unauthorized)):
            return InfraAuthenticationError(
                f"permission denied: {error}", context=ctx, secret_path=path
            )
        if isinstance(
            error,
            (
                hvac.exceptions.VaultDown,
                requests.exceptions.ConnectionError,
                requests.exceptions.Timeout,
            ),
        ):
            return InfraUnavailableError(
                f"Vault server is unavailable: {error}", context=ctx, secret_path=path
            )
        if isinstance(error, hvac.exceptions.InvalidPath):
            return SecretResolutionError(
                f"secret path not found or invalid: {error}",
                context=ctx,
                secret_path=path,
            )
        return InfraVaultError(f"{error}", context=ctx, secret_path=path)

    def verify_authentication(self) -> None:
        """Check that the configured token is accepted by Vault.

        Raises:
            InfraAuthenticationError: If Vault reports the token as invalid.
            InfraUnavailableError: If Vault cannot be reached.
        """
        try:
            authenticated = self._client.is_authenticated()
        except (hvac.exceptions.VaultError, requests.exceptions.RequestException) as e:
            raise self._translate_error(e, "verify_authentication", None) from e

        if not authenticated:
            raise InfraAuthenticationError(
                "Vault authentication failed - check token validity",
                context=self._error_context("verify_authentication"),
            )

    def write(
        self, path: str, data: Mapping[str, object]
    ) -> Mapping[str, object] | None:
        try:
            response = self._client.write_data(path, data=dict(data))
        except (hvac.exceptions.VaultError, requests.exceptions.RequestException) as e:
            raise self._translate_error(e, "write", path) from e

        # hvac returns a requests.Response for 204 No Content
        if isinstance(response, Mapping):
            return response
        return None

    def read(self, path: str) -> ModelVaultSecretRecord | None:
        try:
            response = self._client.read(path)
        except (hvac.exceptions.VaultError, requests.exceptions.RequestException) as e:
            raise self._translate_error(e, "read", path) from e

        if response is None:
            return None
        if not isinstance(response, Mapping):
            raise InfraVaultError(
                f"unexpected response type from Vault read: {type(response).__name__}",
                context=self._error_context("read"),
                secret_path=path,
            )
        return ModelVaultSecretRecord.from_response(response)

    def delete(self, path: str) -> None:
        try:
            self._client.delete(path)
        except (hvac.exceptions.VaultError, requests.exceptions.RequestException) as e:
            raise self._translate_error(e, "delete", path) from e


__all__: list[str] = ["CLIENT_TARGET_NAME", "VaultLogicalClient"]
