# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault Secret Record Model.

A secret as returned by Vault's logical read API. Only ``data`` feeds back
into resource state; lease fields are kept for callers that care.
"""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field


class ModelVaultSecretRecord(BaseModel):
    """Secret read from a Vault logical path.

    Attributes:
        data: Secret payload stored at the path
        lease_id: Lease identifier, empty for non-leased secrets
        lease_duration: Lease duration in seconds
        renewable: Whether the lease is renewable
        warnings: Warnings Vault attached to the response
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    data: dict[str, object] = Field(default_factory=dict)
    lease_id: str = Field(default="")
    lease_duration: int = Field(default=0, ge=0)
    renewable: bool = Field(default=False)
    warnings: list[str] = Field(default_factory=list)

    @classmethod
    def from_response(cls, response: Mapping[str, object]) -> ModelVaultSecretRecord:
        """Parse an hvac read response body.

        Missing or null fields fall back to their defaults.
        """
        data = response.get("data")
        warnings = response.get("warnings")
        return cls(
            data=dict(data) if isinstance(data, Mapping) else {},
            lease_id=str(response.get("lease_id") or ""),
            lease_duration=int(response.get("lease_duration") or 0),
            renewable=bool(response.get("renewable") or False),
            warnings=[str(w) for w in warnings] if isinstance(warnings, list) else [],
        )


__all__: list[str] = ["ModelVaultSecretRecord"]
