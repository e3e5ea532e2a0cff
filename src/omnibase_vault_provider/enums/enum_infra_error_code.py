# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Infrastructure Error Code Enumeration.

Classifies provider errors so callers can branch on a stable code instead
of parsing messages.
"""

from enum import Enum


class EnumInfraErrorCode(str, Enum):
    """Error codes attached to every RuntimeHostError."""

    OPERATION_FAILED = "operation_failed"
    INVALID_CONFIGURATION = "invalid_configuration"
    VALIDATION_ERROR = "validation_error"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONNECTION_ERROR = "connection_error"
    AUTHENTICATION_ERROR = "authentication_error"
    SERVICE_UNAVAILABLE = "service_unavailable"


__all__ = ["EnumInfraErrorCode"]
