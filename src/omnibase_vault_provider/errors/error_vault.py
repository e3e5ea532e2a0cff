# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault-Specific Infrastructure Error Class.

This module defines the InfraVaultError class for Vault-related
infrastructure errors. It extends InfraConnectionError to provide
specialized error handling for HashiCorp Vault operations.
"""

from omnibase_vault_provider.errors.infra_errors import InfraConnectionError
from omnibase_vault_provider.errors.model_infra_error_context import (
    ModelInfraErrorContext,
)


class InfraVaultError(InfraConnectionError):
    """Error communicating with Vault.

    Raised by the lifecycle handlers when a remote write, read, or delete
    fails. The original exception is always chained as ``__cause__``.

    Example:
        >>> context = ModelInfraErrorContext(
        ...     transport_type=EnumInfraTransportType.VAULT,
        ...     operation="write",
        ...     target_name="vault_generic_secret",
        ... )
        >>> raise InfraVaultError(
        ...     "error writing to Vault: permission denied",
        ...     context=context,
        ...     secret_path="secret/foo",
        ... )
    """

    def __init__(
        self,
        message: str,
        context: ModelInfraErrorContext | None = None,
        secret_path: str | None = None,
        **extra_context: object,
    ) -> None:
        """Initialize InfraVaultError with Vault-specific context.

        Args:
            message: Human-readable error message
            context: Bundled infrastructure context (should use VAULT transport_type)
            secret_path: Optional path to the secret that caused the error
            **extra_context: Additional context information
        """
        if secret_path is not None:
            extra_context["secret_path"] = secret_path
        self.secret_path = secret_path

        super().__init__(
            message=message,
            context=context,
            **extra_context,
        )


__all__: list[str] = [
    "InfraVaultError",
]
