# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Schema declaration for the vault_generic_secret resource."""

from __future__ import annotations

from omnibase_vault_provider.enums import EnumGenericSecretField, EnumSchemaValueType
from omnibase_vault_provider.handlers.model_resource_schema import ModelResourceSchema
from omnibase_vault_provider.handlers.model_resource_schema_field import (
    ModelResourceSchemaField,
)
from omnibase_vault_provider.utils import normalize_data_json, validate_data_json

RESOURCE_TYPE_GENERIC_SECRET = "vault_generic_secret"


def generic_secret_schema() -> ModelResourceSchema:
    """Return the declared schema of vault_generic_secret."""
    return ModelResourceSchema(
        type_name=RESOURCE_TYPE_GENERIC_SECRET,
        schema_fields=(
            ModelResourceSchemaField(
                name=EnumGenericSecretField.PATH.value,
                value_type=EnumSchemaValueType.STRING,
                required=True,
                force_new=True,
                description="Full path where the generic secret will be written.",
            ),
            # Data is passed as JSON so that an arbitrary structure is possible,
            # rather than forcing e.g. all values to be strings.
            ModelResourceSchemaField(
                name=EnumGenericSecretField.DATA_JSON.value,
                value_type=EnumSchemaValueType.STRING,
                required=True,
                description="JSON-encoded secret data to write.",
                validate_func=validate_data_json,
                state_func=normalize_data_json,
            ),
            ModelResourceSchemaField(
                name=EnumGenericSecretField.ALLOW_READ.value,
                value_type=EnumSchemaValueType.BOOL,
                default=False,
                description=(
                    "True if the provided token is allowed to read the secret "
                    "from vault"
                ),
            ),
        ),
    )


__all__: list[str] = ["RESOURCE_TYPE_GENERIC_SECRET", "generic_secret_schema"]
