# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""vault_generic_secret lifecycle handler.

Writes a JSON object to an arbitrary Vault path and deletes it again as part
of the host engine's reconciliation pass. Create and update share one write
path: Vault's logical write is an upsert.

Each entry point makes at most one synchronous call to the remote client and
returns. A remote failure is wrapped in InfraVaultError with the operation and
path; nothing is retried and nothing is rolled back.

State Transitions:
    ABSENT --write--> PRESENT_UNVERIFIED
    PRESENT_* --read(allow_read=True)--> PRESENT_VERIFIED
    PRESENT_* --read(allow_read=False)--> unchanged
    PRESENT_* --delete--> ABSENT

Refresh Caveat:
    With allow_read enabled, a refresh replaces data_json with whatever Vault
    currently holds, re-encoded canonically. Any difference from the declared
    value (including value types Vault changed) surfaces as drift.
"""

from __future__ import annotations

import logging

from omnibase_vault_provider.enums import (
    EnumInfraTransportType,
    EnumResourceLifecycleState,
)
from omnibase_vault_provider.errors import (
    DataJsonSyntaxError,
    InfraVaultError,
    ModelInfraErrorContext,
    ProtocolConfigurationError,
    RuntimeHostError,
    SecretResolutionError,
)
from omnibase_vault_provider.handlers.model_generic_secret_config import (
    ModelGenericSecretConfig,
)
from omnibase_vault_provider.handlers.model_generic_secret_state import (
    ModelGenericSecretState,
)
from omnibase_vault_provider.handlers.model_provider_context import (
    ModelProviderContext,
)
from omnibase_vault_provider.handlers.model_resource_schema import ModelResourceSchema
from omnibase_vault_provider.handlers.schema_generic_secret import (
    RESOURCE_TYPE_GENERIC_SECRET,
    generic_secret_schema,
)
from omnibase_vault_provider.utils import decode_data_json, encode_data_json

logger = logging.getLogger(__name__)

SUPPORTED_OPERATIONS: frozenset[str] = frozenset(
    {
        "create",
        "update",
        "read",
        "delete",
        "import_state",
    }
)


class HandlerGenericSecret:
    """Lifecycle handler for vault_generic_secret.

    The host engine calls create/update/read/delete with typed configuration
    or state and a ModelProviderContext carrying the configured client.

    Example:
        >>> handler = HandlerGenericSecret()
        >>> context = ModelProviderContext(client=client)
        >>> state = handler.create(
        ...     ModelGenericSecretConfig(path="secret/foo", data_json='{"key": "value"}'),
        ...     context,
        ... )
        >>> state.id
        'secret/foo'
    """

    def __init__(self) -> None:
        self._schema = generic_secret_schema()

    @property
    def resource_type(self) -> str:
        """Return the resource type name."""
        return RESOURCE_TYPE_GENERIC_SECRET

    @property
    def schema(self) -> ModelResourceSchema:
        """Return the declared resource schema."""
        return self._schema

    def _error_context(
        self, operation: str, context: ModelProviderContext
    ) -> ModelInfraErrorContext:
        return ModelInfraErrorContext(
            transport_type=EnumInfraTransportType.VAULT,
            operation=operation,
            target_name=RESOURCE_TYPE_GENERIC_SECRET,
            correlation_id=context.correlation_id,
            namespace=context.namespace,
        )

    def create(
        self,
        config: ModelGenericSecretConfig,
        context: ModelProviderContext,
    ) -> ModelGenericSecretState:
        """Create the secret. Identical to write."""
        return self.write(config, context)

    def update(
        self,
        prior_state: ModelGenericSecretState,
        config: ModelGenericSecretConfig,
        context: ModelProviderContext,
    ) -> ModelGenericSecretState:
        """Update the secret in place.

        Raises:
            ProtocolConfigurationError: If path changed; a new path requires
                the host engine to destroy and recreate the resource.
        """
        if prior_state.path != config.path:
            raise ProtocolConfigurationError(
                "path cannot be updated in place; the resource must be replaced",
                context=self._error_context("update", context),
                prior_path=prior_state.path,
                planned_path=config.path,
            )
        return self.write(config, context)

    def write(
        self,
        config: ModelGenericSecretConfig,
        context: ModelProviderContext,
    ) -> ModelGenericSecretState:
        """Write data_json to path.

        Returns:
            State whose identity is path and whose data_json is canonical.

        Raises:
            DataJsonSyntaxError: If data_json is not a JSON object. No remote
                call is made.
            InfraVaultError: If the remote write fails. The identity is not set.
        """
        path = config.path

        try:
            data = decode_data_json(config.data_json)
        except DataJsonSyntaxError as e:
            # The message names the field and decoder position only; the raw
            # value is secret material and must not reach logs or state output.
            raise DataJsonSyntaxError(
                e.message,
                context=self._error_context("write", context),
                reason=e.reason,
                secret_path=path,
            ) from e

        logger.debug(
            "Writing generic Vault secret",
            extra={
                "secret_path": path,
                "correlation_id": str(context.correlation_id),
            },
        )
        try:
            context.client.write(path, data)
        except Exception as e:
            raise InfraVaultError(
                f"error writing to Vault: {e}",
                context=self._error_context("write", context),
                secret_path=path,
                remote_error_type=type(e).__name__,
            ) from e

        return ModelGenericSecretState(
            id=path,
            path=path,
            data_json=encode_data_json(data),
            allow_read=config.allow_read,
            lifecycle_state=EnumResourceLifecycleState.PRESENT_UNVERIFIED,
        )

    def delete(
        self,
        state: ModelGenericSecretState,
        context: ModelProviderContext,
    ) -> None:
        """Delete the secret stored at the resource's identity.

        Raises:
            InfraVaultError: If the remote delete fails. The resource is not
                considered destroyed.
        """
        path = state.id

        logger.debug(
            "Deleting vault_generic_secret",
            extra={
                "secret_path": path,
                "correlation_id": str(context.correlation_id),
            },
        )
        try:
            context.client.delete(path)
        except Exception as e:
            raise InfraVaultError(
                f"error deleting {path!r} from Vault: {e}",
                context=self._error_context("delete", context),
                secret_path=path,
                remote_error_type=type(e).__name__,
            ) from e

    def read(
        self,
        state: ModelGenericSecretState,
        context: ModelProviderContext,
    ) -> ModelGenericSecretState | None:
        """Refresh state from Vault when allow_read is set.

        Returns:
            The refreshed state, or None when Vault holds nothing at path and
            the resource should be dropped from state.

        Raises:
            InfraVaultError: If the remote read fails.
            RuntimeHostError: If the returned data cannot be encoded as JSON.
        """
        path = state.path

        if not state.allow_read:
            logger.warning(
                "vault_generic_secret does not automatically refresh if allow_read is set to false",
                extra={"secret_path": path},
            )
            return state.model_copy(update={"id": path})

        logger.debug(
            "Reading secret from Vault",
            extra={
                "secret_path": path,
                "correlation_id": str(context.correlation_id),
            },
        )
        try:
            record = context.client.read(path)
        except Exception as e:
            raise InfraVaultError(
                f"error reading from Vault: {e}",
                context=self._error_context("read", context),
                secret_path=path,
                remote_error_type=type(e).__name__,
            ) from e

        if record is None:
            logger.warning(
                "vault_generic_secret not found, removing from state",
                extra={"secret_path": path},
            )
            return None

        try:
            data_json = encode_data_json(record.data)
        except (TypeError, ValueError, RecursionError) as e:
            raise RuntimeHostError(
                f"error marshaling JSON for {path!r}: {e}",
                context=self._error_context("read", context),
                secret_path=path,
            ) from e

        return state.model_copy(
            update={
                "id": path,
                "data_json": data_json,
                "lifecycle_state": EnumResourceLifecycleState.PRESENT_VERIFIED,
            }
        )

    def import_state(
        self,
        identity: str,
        context: ModelProviderContext,
    ) -> ModelGenericSecretState:
        """Adopt an existing secret whose path is identity.

        Imported resources read their data back from Vault, so allow_read
        is enabled on the resulting state.

        Raises:
            SecretResolutionError: If nothing is stored at identity.
            InfraVaultError: If the remote read fails.
        """
        placeholder = ModelGenericSecretState(
            id=identity,
            path=identity,
            data_json="{}",
            allow_read=True,
        )
        imported = self.read(placeholder, context)
        if imported is None:
            raise SecretResolutionError(
                f"cannot import {identity!r}: no secret stored at that path",
                context=self._error_context("import_state", context),
                secret_path=identity,
            )
        return imported

    def describe(self) -> dict[str, object]:
        """Return handler metadata and the resource schema description."""
        return {
            "resource_type": RESOURCE_TYPE_GENERIC_SECRET,
            "supported_operations": sorted(SUPPORTED_OPERATIONS),
            "schema": self._schema.describe(),
        }


__all__: list[str] = ["HandlerGenericSecret", "SUPPORTED_OPERATIONS"]
