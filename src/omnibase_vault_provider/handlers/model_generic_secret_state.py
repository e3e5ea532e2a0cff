# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Recorded state of a vault_generic_secret resource."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from omnibase_vault_provider.enums import (
    EnumGenericSecretField,
    EnumResourceLifecycleState,
)
from omnibase_vault_provider.handlers.model_generic_secret_config import (
    ModelGenericSecretConfig,
)


class ModelGenericSecretState(BaseModel):
    """State the host engine stores after a lifecycle call.

    The identity (``id``) always equals ``path`` once the resource exists.

    Attributes:
        id: Resource identity
        path: Vault path of the secret
        data_json: Canonical JSON of the secret data
        allow_read: Whether refreshes read the secret back from Vault
        lifecycle_state: What the provider last verified about the secret
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(min_length=1)
    path: str = Field(min_length=1)
    data_json: str
    allow_read: bool = False
    lifecycle_state: EnumResourceLifecycleState = (
        EnumResourceLifecycleState.PRESENT_UNVERIFIED
    )

    def to_config(self) -> ModelGenericSecretConfig:
        """Return the declared-configuration view of this state."""
        return ModelGenericSecretConfig(
            path=self.path,
            data_json=self.data_json,
            allow_read=self.allow_read,
        )

    def to_values(self) -> dict[str, object]:
        """Return declared fields keyed by field name."""
        return {
            EnumGenericSecretField.PATH.value: self.path,
            EnumGenericSecretField.DATA_JSON.value: self.data_json,
            EnumGenericSecretField.ALLOW_READ.value: self.allow_read,
        }


__all__: list[str] = ["ModelGenericSecretState"]
