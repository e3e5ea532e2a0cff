# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault Provider protocol definitions."""

from omnibase_vault_provider.protocols.protocol_vault_logical_client import (
    ProtocolVaultLogicalClient,
)

__all__: list[str] = ["ProtocolVaultLogicalClient"]
