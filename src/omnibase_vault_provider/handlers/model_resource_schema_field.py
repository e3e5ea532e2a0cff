# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Resource Schema Field Model.

One declared field of a resource: its type, whether it is required, its
default, whether changing it forces replacement, and the optional validate
and state functions the host engine runs at plan time.
"""

from __future__ import annotations

from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, Field, model_validator

from omnibase_vault_provider.enums import EnumSchemaValueType

# Validate functions return a list of error messages, empty when valid.
ValidateFunc = Callable[[str], list[str]]
# State functions map a declared value to the value stored in state.
StateFunc = Callable[[str], str]


class ModelResourceSchemaField(BaseModel):
    """Declared field of a resource schema.

    Attributes:
        name: Field name as it appears in configuration
        value_type: Declared value type
        required: Whether configuration must set the field
        default: Value used when an optional field is unset
        force_new: Whether a change requires destroy-and-recreate
        description: Operator-facing description
        validate_func: Plan-time validator for string fields
        state_func: Plan-time normalizer for string fields
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1)
    value_type: EnumSchemaValueType
    required: bool = False
    default: str | bool | None = None
    force_new: bool = False
    description: str = ""
    validate_func: ValidateFunc | None = Field(default=None, exclude=True)
    state_func: StateFunc | None = Field(default=None, exclude=True)

    @model_validator(mode="after")
    def validate_consistency(self) -> ModelResourceSchemaField:
        if self.required and self.default is not None:
            raise ValueError(f"required field '{self.name}' cannot have a default")
        if self.default is not None and type(self.default) is not self.value_type.python_type:
            raise ValueError(
                f"default for '{self.name}' must be {self.value_type.value}, "
                f"got {type(self.default).__name__}"
            )
        if (
            self.validate_func is not None or self.state_func is not None
        ) and self.value_type is not EnumSchemaValueType.STRING:
            raise ValueError(
                f"validate/state functions are only supported on string fields "
                f"('{self.name}' is {self.value_type.value})"
            )
        return self

    def accepts(self, value: object) -> bool:
        """Return True if value has this field's declared type."""
        return type(value) is self.value_type.python_type

    def describe(self) -> dict[str, object]:
        """Return a JSON-friendly description of the field."""
        return {
            "type": self.value_type.value,
            "required": self.required,
            "default": self.default,
            "force_new": self.force_new,
            "description": self.description,
            "validated": self.validate_func is not None,
            "normalized": self.state_func is not None,
        }


__all__: list[str] = ["ModelResourceSchemaField", "StateFunc", "ValidateFunc"]
