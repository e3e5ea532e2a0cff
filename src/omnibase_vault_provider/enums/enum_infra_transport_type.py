# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Infrastructure Transport Type Enumeration.

Defines the transport types used in error context for the Vault provider.
"""

from enum import Enum


class EnumInfraTransportType(str, Enum):
    """Infrastructure transport types for provider components.

    Attributes:
        VAULT: HashiCorp Vault secret transport
        RUNTIME: Provider-internal operations (schema, config, normalization)
    """

    VAULT = "vault"
    RUNTIME = "runtime"


__all__ = ["EnumInfraTransportType"]
