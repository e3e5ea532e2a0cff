# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault Provider models."""

from omnibase_vault_provider.models.model_vault_provider_config import (
    ModelVaultProviderConfig,
)
from omnibase_vault_provider.models.model_vault_secret_record import (
    ModelVaultSecretRecord,
)

__all__: list[str] = [
    "ModelVaultProviderConfig",
    "ModelVaultSecretRecord",
]
