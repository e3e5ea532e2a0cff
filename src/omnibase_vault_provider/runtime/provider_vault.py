# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault provider runtime.

Registry of resource handlers plus the configure step that turns provider
configuration into the ModelProviderContext handed to every lifecycle call.

Example:
    >>> provider = ProviderVault()
    >>> context = provider.configure(load_provider_config("vault.yaml"))
    >>> handler = provider.get_resource("vault_generic_secret")
    >>> state = handler.create(config, context)
"""

from __future__ import annotations

import logging
from uuid import UUID, uuid4

from omnibase_vault_provider.clients import VaultLogicalClient
from omnibase_vault_provider.enums import EnumInfraTransportType
from omnibase_vault_provider.errors import (
    ModelInfraErrorContext,
    ProtocolConfigurationError,
)
from omnibase_vault_provider.handlers import (
    HandlerGenericSecret,
    ModelProviderContext,
)
from omnibase_vault_provider.models import ModelVaultProviderConfig

logger = logging.getLogger(__name__)

PROVIDER_NAME = "vault"


class ProviderVault:
    """Vault provider exposing resource handlers to the host engine."""

    def __init__(self) -> None:
        generic_secret = HandlerGenericSecret()
        self._resources: dict[str, HandlerGenericSecret] = {
            generic_secret.resource_type: generic_secret,
        }

    def resource_types(self) -> list[str]:
        """Return registered resource type names, sorted."""
        return sorted(self._resources)

    def get_resource(self, type_name: str) -> HandlerGenericSecret:
        """Return the handler for type_name.

        Raises:
            ProtocolConfigurationError: If no handler is registered for it.
        """
        handler = self._resources.get(type_name)
        if handler is None:
            raise ProtocolConfigurationError(
                f"Unknown resource type: {type_name}",
                context=ModelInfraErrorContext(
                    transport_type=EnumInfraTransportType.RUNTIME,
                    operation="get_resource",
                    target_name=PROVIDER_NAME,
                ),
                available=", ".join(self.resource_types()),
            )
        return handler

    def configure(
        self,
        config: ModelVaultProviderConfig,
        correlation_id: UUID | None = None,
    ) -> ModelProviderContext:
        """Build and authenticate the Vault client.

        Raises:
            ProtocolConfigurationError: If no token is configured.
            InfraAuthenticationError: If Vault rejects the token.
            InfraUnavailableError: If Vault cannot be reached.
        """
        correlation_id = correlation_id or uuid4()
        client = VaultLogicalClient.from_config(config, correlation_id=correlation_id)
        client.verify_authentication()

        logger.info(
            "Vault provider configured",
            extra={
                "url": config.url,
                "namespace": config.namespace,
                "correlation_id": str(correlation_id),
            },
        )
        return ModelProviderContext(
            client=client,
            correlation_id=correlation_id,
            namespace=config.namespace,
        )

    def describe(self) -> dict[str, object]:
        """Return provider metadata and every resource's description."""
        return {
            "provider": PROVIDER_NAME,
            "resources": {
                name: handler.describe() for name, handler in sorted(self._resources.items())
            },
        }


__all__: list[str] = ["PROVIDER_NAME", "ProviderVault"]
