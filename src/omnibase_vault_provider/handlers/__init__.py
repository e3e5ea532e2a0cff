# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault Provider resource handlers.

Exports:
    HandlerGenericSecret: vault_generic_secret lifecycle handler
    ModelGenericSecretConfig: Declared configuration
    ModelGenericSecretState: Recorded state
    ModelProviderContext: Configured client passed to every handler call
    ModelResourceSchema: Declared schema of a resource type
    ModelResourceSchemaField: One declared schema field
    RESOURCE_TYPE_GENERIC_SECRET: Resource type name
    generic_secret_schema: Schema declaration for vault_generic_secret
"""

from omnibase_vault_provider.handlers.handler_generic_secret import (
    SUPPORTED_OPERATIONS,
    HandlerGenericSecret,
)
from omnibase_vault_provider.handlers.model_generic_secret_config import (
    ModelGenericSecretConfig,
)
from omnibase_vault_provider.handlers.model_generic_secret_state import (
    ModelGenericSecretState,
)
from omnibase_vault_provider.handlers.model_provider_context import (
    ModelProviderContext,
)
from omnibase_vault_provider.handlers.model_resource_schema import ModelResourceSchema
from omnibase_vault_provider.handlers.model_resource_schema_field import (
    ModelResourceSchemaField,
)
from omnibase_vault_provider.handlers.schema_generic_secret import (
    RESOURCE_TYPE_GENERIC_SECRET,
    generic_secret_schema,
)

__all__: list[str] = [
    "RESOURCE_TYPE_GENERIC_SECRET",
    "SUPPORTED_OPERATIONS",
    "HandlerGenericSecret",
    "ModelGenericSecretConfig",
    "ModelGenericSecretState",
    "ModelProviderContext",
    "ModelResourceSchema",
    "ModelResourceSchemaField",
    "generic_secret_schema",
]
