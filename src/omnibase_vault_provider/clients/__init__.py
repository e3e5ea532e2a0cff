# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Remote clients for the Vault provider."""

from omnibase_vault_provider.clients.client_vault_logical import (
    CLIENT_TARGET_NAME,
    VaultLogicalClient,
)

__all__: list[str] = ["CLIENT_TARGET_NAME", "VaultLogicalClient"]
