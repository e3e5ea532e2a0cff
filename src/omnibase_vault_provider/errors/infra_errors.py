# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Infrastructure-Specific Error Classes.

Error Hierarchy:
    RuntimeHostError (base provider error)
    ├── ProtocolConfigurationError
    │   └── DataJsonSyntaxError (error_data_json.py)
    ├── SecretResolutionError
    ├── InfraConnectionError
    │   └── InfraVaultError (error_vault.py)
    ├── InfraAuthenticationError
    └── InfraUnavailableError

All errors:
    - Use EnumInfraErrorCode for error classification
    - Support proper error chaining with `raise ... from e`
    - Include structured context for debugging
    - Accept ModelInfraErrorContext for bundled context parameters
"""

from __future__ import annotations

from uuid import UUID

from omnibase_vault_provider.enums import EnumInfraErrorCode
from omnibase_vault_provider.errors.model_infra_error_context import (
    ModelInfraErrorContext,
)


class RuntimeHostError(Exception):
    """Base error class for provider infrastructure errors.

    All provider errors inherit from this class. Structured fields from the
    ModelInfraErrorContext are flattened into ``self.context`` alongside any
    extra keyword context, so a handler can log ``error.context`` directly.

    Example:
        >>> context = ModelInfraErrorContext(
        ...     transport_type=EnumInfraTransportType.VAULT,
        ...     operation="delete",
        ...     target_name="vault_generic_secret",
        ... )
        >>> raise RuntimeHostError("Operation failed", context=context)
    """

    def __init__(
        self,
        message: str,
        error_code: EnumInfraErrorCode | None = None,
        context: ModelInfraErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        """Initialize RuntimeHostError with structured fields.

        Args:
            message: Human-readable error message
            error_code: Error code (defaults to OPERATION_FAILED)
            context: Bundled infrastructure context (transport_type, operation, etc.)
            **extra_context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or EnumInfraErrorCode.OPERATION_FAILED

        structured_context: dict[str, object] = dict(extra_context)
        self.correlation_id: UUID | None = None
        if context is not None:
            if context.transport_type is not None:
                structured_context["transport_type"] = context.transport_type
            if context.operation is not None:
                structured_context["operation"] = context.operation
            if context.target_name is not None:
                structured_context["target_name"] = context.target_name
            if context.namespace is not None:
                structured_context["namespace"] = context.namespace
            self.correlation_id = context.correlation_id
        self.context = structured_context

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.message!r}, "
            f"error_code={self.error_code.value!r})"
        )


class ProtocolConfigurationError(RuntimeHostError):
    """Raised when configuration or schema validation fails.

    Used for configuration parsing errors, missing required fields,
    invalid values, or misuse of the resource schema.
    """

    def __init__(
        self,
        message: str,
        context: ModelInfraErrorContext | None = None,
        error_code: EnumInfraErrorCode | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code or EnumInfraErrorCode.INVALID_CONFIGURATION,
            context=context,
            **extra_context,
        )


class SecretResolutionError(RuntimeHostError):
    """Raised when a secret path cannot be resolved.

    Example:
        >>> raise SecretResolutionError(
        ...     "No secret found at path",
        ...     context=context,
        ...     secret_path="secret/foo",
        ... )
    """

    def __init__(
        self,
        message: str,
        context: ModelInfraErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumInfraErrorCode.RESOURCE_NOT_FOUND,
            context=context,
            **extra_context,
        )


class InfraConnectionError(RuntimeHostError):
    """Raised when a call to the remote service fails."""

    def __init__(
        self,
        message: str,
        context: ModelInfraErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumInfraErrorCode.CONNECTION_ERROR,
            context=context,
            **extra_context,
        )


class InfraAuthenticationError(RuntimeHostError):
    """Raised when the remote service rejects the client's credentials.

    Used for invalid or expired tokens and insufficient policy permissions.
    """

    def __init__(
        self,
        message: str,
        context: ModelInfraErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumInfraErrorCode.AUTHENTICATION_ERROR,
            context=context,
            **extra_context,
        )


class InfraUnavailableError(RuntimeHostError):
    """Raised when the remote service is down, sealed, or unreachable."""

    def __init__(
        self,
        message: str,
        context: ModelInfraErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumInfraErrorCode.SERVICE_UNAVAILABLE,
            context=context,
            **extra_context,
        )


__all__: list[str] = [
    "InfraAuthenticationError",
    "InfraConnectionError",
    "InfraUnavailableError",
    "ProtocolConfigurationError",
    "RuntimeHostError",
    "SecretResolutionError",
]
