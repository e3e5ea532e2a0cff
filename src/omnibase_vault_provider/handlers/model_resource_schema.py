# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Resource Schema Model.

Describes a resource's accepted fields to the host engine and offers the
plan-time helpers the engine needs: validation, defaults, state functions and
replacement detection. The diff and plan/apply algorithm itself belongs to the
host engine.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, model_validator

from omnibase_vault_provider.enums import EnumInfraTransportType
from omnibase_vault_provider.errors import (
    ModelInfraErrorContext,
    ProtocolConfigurationError,
)
from omnibase_vault_provider.handlers.model_resource_schema_field import (
    ModelResourceSchemaField,
)

logger = logging.getLogger(__name__)


class ModelResourceSchema(BaseModel):
    """Declared schema of one resource type.

    Attributes:
        type_name: Resource type name (e.g., "vault_generic_secret")
        schema_fields: Declared fields, in declaration order
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    type_name: str = Field(min_length=1)
    schema_fields: tuple[ModelResourceSchemaField, ...] = Field(min_length=1)

    @model_validator(mode="after")
    def validate_unique_names(self) -> ModelResourceSchema:
        names = [f.name for f in self.schema_fields]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"duplicate field names: {', '.join(duplicates)}")
        return self

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(f.name for f in self.schema_fields)

    def get_field(self, name: str) -> ModelResourceSchemaField:
        """Look up a field by name.

        Raises:
            ProtocolConfigurationError: If the schema has no such field.
        """
        for schema_field in self.schema_fields:
            if schema_field.name == name:
                return schema_field
        raise ProtocolConfigurationError(
            f"{self.type_name} has no field '{name}'",
            context=ModelInfraErrorContext(
                transport_type=EnumInfraTransportType.RUNTIME,
                operation="get_field",
                target_name=self.type_name,
            ),
        )

    def validate_values(self, values: Mapping[str, object]) -> list[str]:
        """Validate declared configuration against the schema.

        Reports unknown fields, missing required fields, type mismatches, and
        the messages produced by each field's validate function.

        Returns:
            Error messages; empty when the configuration is valid.
        """
        errors: list[str] = []
        known = set(self.field_names)
        for key in values:
            if key not in known:
                errors.append(f"{self.type_name}: unknown field '{key}'")

        for schema_field in self.schema_fields:
            value = values.get(schema_field.name)
            if value is None:
                if schema_field.required:
                    errors.append(
                        f"{self.type_name}: field '{schema_field.name}' is required"
                    )
                continue
            if not schema_field.accepts(value):
                errors.append(
                    f"{self.type_name}: field '{schema_field.name}' must be "
                    f"{schema_field.value_type.value}, got {type(value).__name__}"
                )
                continue
            if schema_field.validate_func is not None and isinstance(value, str):
                errors.extend(schema_field.validate_func(value))

        if errors:
            logger.debug(
                "Resource configuration failed validation",
                extra={"type_name": self.type_name, "error_count": len(errors)},
            )
        return errors

    def apply_defaults(self, values: Mapping[str, object]) -> dict[str, object]:
        """Return a copy of values with unset optional fields defaulted."""
        result = dict(values)
        for schema_field in self.schema_fields:
            if schema_field.default is not None and result.get(schema_field.name) is None:
                result[schema_field.name] = schema_field.default
        return result

    def apply_state_funcs(self, values: Mapping[str, object]) -> dict[str, object]:
        """Return a copy of values with each field's state function applied."""
        result = dict(values)
        for schema_field in self.schema_fields:
            value = result.get(schema_field.name)
            if schema_field.state_func is not None and isinstance(value, str):
                result[schema_field.name] = schema_field.state_func(value)
        return result

    def fields_requiring_replacement(
        self,
        prior: Mapping[str, object],
        planned: Mapping[str, object],
    ) -> list[str]:
        """Return force_new fields whose value differs between prior and planned."""
        return [
            schema_field.name
            for schema_field in self.schema_fields
            if schema_field.force_new
            and prior.get(schema_field.name) != planned.get(schema_field.name)
        ]

    def describe(self) -> dict[str, object]:
        """Return a JSON-friendly description of the schema."""
        return {
            "type_name": self.type_name,
            "fields": {f.name: f.describe() for f in self.schema_fields},
        }


__all__: list[str] = ["ModelResourceSchema"]
