# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""ONEX Vault Provider - declarative secret resources for HashiCorp Vault.

This package provides the vault_generic_secret resource for a desired-state
provisioning engine:

- Schema declaration of the resource's fields (path, data_json, allow_read)
- data_json validation and canonicalization for stable drift comparison
- Create/read/update/delete handlers over Vault's logical API (hvac)
- Transport-aware error handling with ModelInfraErrorContext

Key Components:
    - HandlerGenericSecret: lifecycle handler invoked by the host engine
    - ProviderVault: resource registry and client configuration
    - normalize_data_json / validate_data_json: plan-time JSON helpers
"""

from omnibase_vault_provider.handlers import (
    HandlerGenericSecret,
    ModelGenericSecretConfig,
    ModelGenericSecretState,
    ModelProviderContext,
)
from omnibase_vault_provider.runtime import ProviderVault, load_provider_config
from omnibase_vault_provider.utils import normalize_data_json, validate_data_json

__version__ = "0.1.0"

__all__: list[str] = [
    "HandlerGenericSecret",
    "ModelGenericSecretConfig",
    "ModelGenericSecretState",
    "ModelProviderContext",
    "ProviderVault",
    "__version__",
    "load_provider_config",
    "normalize_data_json",
    "validate_data_json",
]
