# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Infrastructure Error Context Configuration Model.

This module defines the configuration model for infrastructure error context,
encapsulating common structured fields to reduce __init__ parameter count
while maintaining strong typing.
"""

from __future__ import annotations

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from omnibase_vault_provider.enums import EnumInfraTransportType


class ModelInfraErrorContext(BaseModel):
    """Configuration model for infrastructure error context.

    Attributes:
        transport_type: Type of infrastructure transport (VAULT, RUNTIME)
        operation: Operation being performed (write, read, delete, validate, ...)
        target_name: Target resource or endpoint name
        correlation_id: Request correlation ID for tracing
        namespace: Vault Enterprise namespace, when one is configured

    Example:
        >>> context = ModelInfraErrorContext(
        ...     transport_type=EnumInfraTransportType.VAULT,
        ...     operation="write",
        ...     target_name="vault_generic_secret",
        ... )
        >>> raise InfraVaultError("error writing to Vault", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    transport_type: EnumInfraTransportType | None = Field(
        default=None,
        description="Type of infrastructure transport (VAULT, RUNTIME)",
    )
    operation: str | None = Field(
        default=None,
        description="Operation being performed (write, read, delete, ...)",
    )
    target_name: str | None = Field(
        default=None,
        description="Target resource or endpoint name",
    )
    correlation_id: UUID | None = Field(
        default=None,
        description="Request correlation ID for tracing",
    )
    namespace: str | None = Field(
        default=None,
        description="Vault namespace for Vault Enterprise",
    )

    @classmethod
    def with_correlation(
        cls,
        correlation_id: UUID | None = None,
        **kwargs: object,
    ) -> ModelInfraErrorContext:
        """Build a context, generating a correlation ID when none is given.

        Args:
            correlation_id: Existing correlation ID to propagate, if any
            **kwargs: Remaining context fields

        Returns:
            ModelInfraErrorContext with a non-None correlation_id
        """
        return cls(correlation_id=correlation_id or uuid4(), **kwargs)


__all__ = ["ModelInfraErrorContext"]
