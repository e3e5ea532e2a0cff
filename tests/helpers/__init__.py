# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shared test helpers for omnibase_vault_provider tests."""

from tests.helpers.fake_vault_client import RecordingVaultClient, VaultCall
from tests.helpers.log_helpers import filter_handler_warnings, get_warning_messages

__all__ = [
    "RecordingVaultClient",
    "VaultCall",
    "filter_handler_warnings",
    "get_warning_messages",
]
