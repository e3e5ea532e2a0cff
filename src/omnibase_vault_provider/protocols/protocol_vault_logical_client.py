# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol definition for the remote secret client.

Lifecycle handlers talk to Vault only through this interface. The concrete
implementation is VaultLogicalClient (hvac); tests substitute an in-memory
recording fake.

Error Handling:
    Implementations raise on failure rather than returning an error value.
    Handlers wrap whatever is raised with the operation and path.

Example Usage:
    ```python
    class InMemoryClient:
        def __init__(self) -> None:
            self.secrets: dict[str, dict[str, object]] = {}

        def write(self, path, data):
            self.secrets[path] = dict(data)
            return None

        def read(self, path):
            if path not in self.secrets:
                return None
            return ModelVaultSecretRecord(data=self.secrets[path])

        def delete(self, path):
            self.secrets.pop(path, None)
    ```
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from omnibase_vault_provider.models import ModelVaultSecretRecord


@runtime_checkable
class ProtocolVaultLogicalClient(Protocol):
    """Write, read and delete secrets at arbitrary Vault logical paths.

    Implementations are expected to be already authenticated.
    """

    def write(
        self, path: str, data: Mapping[str, object]
    ) -> Mapping[str, object] | None:
        """Write data at path, replacing any existing secret (upsert).

        Returns:
            The raw response body, or None when Vault returns 204.
        """
        ...

    def read(self, path: str) -> ModelVaultSecretRecord | None:
        """Read the secret at path.

        Returns:
            The record, or None when nothing is stored at path.
        """
        ...

    def delete(self, path: str) -> None:
        """Delete the secret at path."""
        ...


__all__: list[str] = ["ProtocolVaultLogicalClient"]
