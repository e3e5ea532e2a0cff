# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault Provider Enumerations Module.

Exports:
    EnumGenericSecretField: Field keys of the vault_generic_secret resource
    EnumInfraErrorCode: Error classification codes
    EnumInfraTransportType: Infrastructure transport type enumeration
    EnumResourceLifecycleState: ABSENT / PRESENT_UNVERIFIED / PRESENT_VERIFIED
    EnumSchemaValueType: Value types for schema fields
"""

from omnibase_vault_provider.enums.enum_generic_secret_field import (
    EnumGenericSecretField,
)
from omnibase_vault_provider.enums.enum_infra_error_code import EnumInfraErrorCode
from omnibase_vault_provider.enums.enum_infra_transport_type import (
    EnumInfraTransportType,
)
from omnibase_vault_provider.enums.enum_resource_lifecycle_state import (
    EnumResourceLifecycleState,
)
from omnibase_vault_provider.enums.enum_schema_value_type import EnumSchemaValueType

__all__: list[str] = [
    "EnumGenericSecretField",
    "EnumInfraErrorCode",
    "EnumInfraTransportType",
    "EnumResourceLifecycleState",
    "EnumSchemaValueType",
]
