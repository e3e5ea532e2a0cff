# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Schema Value Type Enumeration."""

from enum import Enum


class EnumSchemaValueType(str, Enum):
    """Value types a resource schema field may declare."""

    STRING = "string"
    BOOL = "bool"

    @property
    def python_type(self) -> type:
        """Return the Python type accepted for this schema type."""
        return _PYTHON_TYPES[self]


_PYTHON_TYPES: dict[EnumSchemaValueType, type] = {
    EnumSchemaValueType.STRING: str,
    EnumSchemaValueType.BOOL: bool,
}


__all__ = ["EnumSchemaValueType"]
