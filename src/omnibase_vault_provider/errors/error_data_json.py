# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""data_json Syntax Error.

Raised when a data_json value cannot be decoded into a JSON object. This is
a validation-class error: it is always raised before any remote call.
"""

from omnibase_vault_provider.enums import EnumInfraErrorCode
from omnibase_vault_provider.errors.infra_errors import ProtocolConfigurationError
from omnibase_vault_provider.errors.model_infra_error_context import (
    ModelInfraErrorContext,
)


class DataJsonSyntaxError(ProtocolConfigurationError):
    """data_json is malformed JSON or not a JSON object.

    The offending value itself is not stored on the error; it is secret
    material. ``field_name`` and ``reason`` identify what went wrong.
    """

    def __init__(
        self,
        message: str,
        context: ModelInfraErrorContext | None = None,
        field_name: str = "data_json",
        reason: str | None = None,
        **extra_context: object,
    ) -> None:
        self.field_name = field_name
        self.reason = reason
        extra_context["field_name"] = field_name
        if reason is not None:
            extra_context["reason"] = reason

        super().__init__(
            message=message,
            context=context,
            error_code=EnumInfraErrorCode.VALIDATION_ERROR,
            **extra_context,
        )


__all__: list[str] = ["DataJsonSyntaxError"]
