# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Declared configuration of a vault_generic_secret resource."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

from omnibase_vault_provider.enums import EnumGenericSecretField


class ModelGenericSecretConfig(BaseModel):
    """Operator-declared configuration.

    data_json is carried as declared; JSON validation happens at plan time
    through the resource schema, and the write handler decodes it strictly.

    Attributes:
        path: Full path where the generic secret will be written
        data_json: JSON-encoded secret data to write
        allow_read: Whether the provider token may read the secret back
    """

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    path: str = Field(min_length=1)
    data_json: str
    allow_read: bool = False

    @classmethod
    def from_values(cls, values: Mapping[str, object]) -> ModelGenericSecretConfig:
        """Build a config from a field-name keyed mapping."""
        return cls.model_validate(
            {
                key.value: values[key.value]
                for key in EnumGenericSecretField
                if values.get(key.value) is not None
            }
        )


__all__: list[str] = ["ModelGenericSecretConfig"]
