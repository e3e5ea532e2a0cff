# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Provider context passed to every lifecycle handler."""

from __future__ import annotations

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from omnibase_vault_provider.protocols import ProtocolVaultLogicalClient


class ModelProviderContext(BaseModel):
    """Configured collaborators for lifecycle handlers.

    Attributes:
        client: Authenticated remote secret client
        correlation_id: Correlation ID attached to logs and errors
        namespace: Vault namespace the client operates in, if any
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=True,  # Allow ProtocolVaultLogicalClient duck-typed objects
    )

    client: ProtocolVaultLogicalClient
    correlation_id: UUID = Field(default_factory=uuid4)
    namespace: str | None = None


__all__: list[str] = ["ModelProviderContext"]
