# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault provider runtime: configuration loading, logging, handler registry."""

from omnibase_vault_provider.runtime.provider_config_loader import (
    MAX_CONFIG_SIZE_BYTES,
    load_provider_config,
)
from omnibase_vault_provider.runtime.provider_vault import PROVIDER_NAME, ProviderVault
from omnibase_vault_provider.runtime.util_logging import configure_logging

__all__: list[str] = [
    "MAX_CONFIG_SIZE_BYTES",
    "PROVIDER_NAME",
    "ProviderVault",
    "configure_logging",
    "load_provider_config",
]
