# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault Provider utility functions.

Exports:
    decode_data_json: Strict decode of a data_json string into a mapping
    encode_data_json: Canonical JSON serialization
    normalize_data_json: Canonicalize a data_json string for state comparison
    validate_data_json: Plan-time check that data_json is a JSON object
"""

from omnibase_vault_provider.utils.util_data_json import (
    decode_data_json,
    encode_data_json,
    normalize_data_json,
    validate_data_json,
)

__all__: list[str] = [
    "decode_data_json",
    "encode_data_json",
    "normalize_data_json",
    "validate_data_json",
]
