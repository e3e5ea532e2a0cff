# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for HandlerGenericSecret.

These tests use the in-memory RecordingVaultClient to validate lifecycle
behavior and count remote calls without a Vault server.
"""

from __future__ import annotations

import json
import logging

import pytest

from omnibase_vault_provider.enums import (
    EnumInfraErrorCode,
    EnumInfraTransportType,
    EnumResourceLifecycleState,
)
from omnibase_vault_provider.errors import (
    DataJsonSyntaxError,
    InfraAuthenticationError,
    InfraVaultError,
    ProtocolConfigurationError,
    RuntimeHostError,
    SecretResolutionError,
)
from omnibase_vault_provider.handlers import (
    HandlerGenericSecret,
    ModelGenericSecretConfig,
    ModelGenericSecretState,
    ModelProviderContext,
)
from omnibase_vault_provider.models import ModelVaultSecretRecord
from tests.conftest import FIXED_CORRELATION_ID, assert_has_methods
from tests.helpers.fake_vault_client import RecordingVaultClient, VaultCall
from tests.helpers.log_helpers import filter_handler_warnings, get_warning_messages

HANDLER_MODULE = "omnibase_vault_provider.handlers.handler_generic_secret"


def _state(
    path: str = "secret/foo",
    data_json: str = '{"key":"value"}',
    allow_read: bool = False,
    lifecycle_state: EnumResourceLifecycleState = (
        EnumResourceLifecycleState.PRESENT_UNVERIFIED
    ),
) -> ModelGenericSecretState:
    return ModelGenericSecretState(
        id=path,
        path=path,
        data_json=data_json,
        allow_read=allow_read,
        lifecycle_state=lifecycle_state,
    )


class TestHandlerGenericSecretWrite:
    """create/update/write behavior."""

    def test_create_writes_once_and_sets_identity(
        self,
        handler: HandlerGenericSecret,
        secret_config: ModelGenericSecretConfig,
        provider_context: ModelProviderContext,
        recording_client: RecordingVaultClient,
    ) -> None:
        state = handler.create(secret_config, provider_context)

        assert recording_client.calls == [
            VaultCall("write", "secret/foo", {"key": "value"})
        ]
        assert state.id == "secret/foo"
        assert state.path == "secret/foo"
        assert state.lifecycle_state is EnumResourceLifecycleState.PRESENT_UNVERIFIED

    def test_write_stores_canonical_data_json(
        self,
        handler: HandlerGenericSecret,
        provider_context: ModelProviderContext,
    ) -> None:
        config = ModelGenericSecretConfig(
            path="secret/foo",
            data_json='{ "b": 2,\n  "a": {"y": true, "x": null} }',
            allow_read=True,
        )

        state = handler.write(config, provider_context)

        assert state.data_json == '{"a":{"x":null,"y":true},"b":2}'
        assert state.allow_read is True

    def test_write_passes_structured_values(
        self,
        handler: HandlerGenericSecret,
        provider_context: ModelProviderContext,
        recording_client: RecordingVaultClient,
    ) -> None:
        config = ModelGenericSecretConfig(
            path="secret/app",
            data_json='{"port": 5432, "enabled": true, "hosts": ["a", "b"]}',
        )

        handler.write(config, provider_context)

        assert recording_client.secrets["secret/app"] == {
            "port": 5432,
            "enabled": True,
            "hosts": ["a", "b"],
        }

    @pytest.mark.parametrize("data_json", ["{invalid", "[1,2,3]", '"a string"', ""])
    def test_malformed_data_json_makes_no_remote_call(
        self,
        handler: HandlerGenericSecret,
        provider_context: ModelProviderContext,
        recording_client: RecordingVaultClient,
        data_json: str,
    ) -> None:
        config = ModelGenericSecretConfig(path="secret/foo", data_json=data_json)

        with pytest.raises(DataJsonSyntaxError) as exc_info:
            handler.write(config, provider_context)

        assert recording_client.calls == []
        assert exc_info.value.error_code is EnumInfraErrorCode.VALIDATION_ERROR
        assert exc_info.value.context["secret_path"] == "secret/foo"
        assert exc_info.value.context["operation"] == "write"
        assert exc_info.value.correlation_id == FIXED_CORRELATION_ID
        assert str(exc_info.value).startswith("data_json")

    def test_syntax_error_message_names_field(
        self,
        handler: HandlerGenericSecret,
        provider_context: ModelProviderContext,
    ) -> None:
        config = ModelGenericSecretConfig(path="secret/foo", data_json="{invalid")

        with pytest.raises(DataJsonSyntaxError, match="data_json syntax error"):
            handler.write(config, provider_context)

    def test_syntax_error_message_omits_secret_value(
        self,
        handler: HandlerGenericSecret,
        provider_context: ModelProviderContext,
    ) -> None:
        config = ModelGenericSecretConfig(
            path="secret/foo", data_json='{"password": "hunter2"'
        )

        with pytest.raises(DataJsonSyntaxError) as exc_info:
            handler.write(config, provider_context)

        assert "hunter2" not in str(exc_info.value)
        assert "hunter2" not in repr(exc_info.value.context)

    def test_deeply_nested_data_json_makes_no_remote_call(
        self,
        handler: HandlerGenericSecret,
        provider_context: ModelProviderContext,
        recording_client: RecordingVaultClient,
    ) -> None:
        deep = '{"a":' + "[" * 100_000 + "]" * 100_000 + "}"
        config = ModelGenericSecretConfig(path="secret/foo", data_json=deep)

        with pytest.raises(DataJsonSyntaxError) as exc_info:
            handler.write(config, provider_context)

        assert recording_client.calls == []
        assert exc_info.value.reason == "malformed_json"

    def test_remote_write_failure_is_wrapped(
        self,
        handler: HandlerGenericSecret,
        secret_config: ModelGenericSecretConfig,
        provider_context: ModelProviderContext,
        recording_client: RecordingVaultClient,
    ) -> None:
        cause = RuntimeError("permission denied")
        recording_client.fail_with = cause

        with pytest.raises(InfraVaultError) as exc_info:
            handler.create(secret_config, provider_context)

        error = exc_info.value
        assert str(error) == "error writing to Vault: permission denied"
        assert error.__cause__ is cause
        assert error.secret_path == "secret/foo"
        assert error.context["transport_type"] is EnumInfraTransportType.VAULT
        assert error.context["remote_error_type"] == "RuntimeError"
        assert len(recording_client.calls_for("write")) == 1

    def test_remote_error_classification_survives_as_cause(
        self,
        handler: HandlerGenericSecret,
        secret_config: ModelGenericSecretConfig,
        provider_context: ModelProviderContext,
        recording_client: RecordingVaultClient,
    ) -> None:
        recording_client.fail_with = InfraAuthenticationError("permission denied")

        with pytest.raises(InfraVaultError) as exc_info:
            handler.create(secret_config, provider_context)

        assert isinstance(exc_info.value.__cause__, InfraAuthenticationError)

    def test_update_routes_through_write(
        self,
        handler: HandlerGenericSecret,
        provider_context: ModelProviderContext,
        recording_client: RecordingVaultClient,
    ) -> None:
        prior = _state(data_json='{"key":"old"}')
        config = ModelGenericSecretConfig(path="secret/foo", data_json='{"key": "new"}')

        state = handler.update(prior, config, provider_context)

        assert recording_client.calls == [
            VaultCall("write", "secret/foo", {"key": "new"})
        ]
        assert state.data_json == '{"key":"new"}'

    def test_update_refuses_path_change(
        self,
        handler: HandlerGenericSecret,
        provider_context: ModelProviderContext,
        recording_client: RecordingVaultClient,
    ) -> None:
        prior = _state(path="secret/old")
        config = ModelGenericSecretConfig(path="secret/new", data_json="{}")

        with pytest.raises(ProtocolConfigurationError, match="replaced"):
            handler.update(prior, config, provider_context)

        assert recording_client.calls == []


class TestHandlerGenericSecretDelete:
    """delete behavior."""

    def test_delete_calls_remote_once_with_identity(
        self,
        handler: HandlerGenericSecret,
        provider_context: ModelProviderContext,
        recording_client: RecordingVaultClient,
    ) -> None:
        recording_client.secrets["secret/foo"] = {"key": "value"}

        result = handler.delete(_state(), provider_context)

        assert result is None
        assert recording_client.calls == [VaultCall("delete", "secret/foo")]
        assert "secret/foo" not in recording_client.secrets

    def test_delete_failure_names_path_and_remote_error(
        self,
        handler: HandlerGenericSecret,
        provider_context: ModelProviderContext,
        recording_client: RecordingVaultClient,
    ) -> None:
        recording_client.fail_with = RuntimeError("connection reset")

        with pytest.raises(InfraVaultError) as exc_info:
            handler.delete(_state(), provider_context)

        message = str(exc_info.value)
        assert "'secret/foo'" in message
        assert "connection reset" in message
        assert exc_info.value.context["operation"] == "delete"


class TestHandlerGenericSecretRead:
    """read/refresh behavior."""

    def test_read_without_allow_read_makes_no_call(
        self,
        handler: HandlerGenericSecret,
        provider_context: ModelProviderContext,
        recording_client: RecordingVaultClient,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        state = _state(data_json='{"key":"declared"}', allow_read=False)

        with caplog.at_level(logging.WARNING):
            refreshed = handler.read(state, provider_context)

        assert recording_client.calls == []
        assert refreshed is not None
        assert refreshed.data_json == '{"key":"declared"}'
        assert refreshed.id == "secret/foo"
        assert refreshed.lifecycle_state is EnumResourceLifecycleState.PRESENT_UNVERIFIED
        warnings = get_warning_messages(caplog.records, HANDLER_MODULE)
        assert warnings == [
            "vault_generic_secret does not automatically refresh if allow_read is set to false"
        ]

    def test_read_without_allow_read_resets_identity_to_path(
        self,
        handler: HandlerGenericSecret,
        provider_context: ModelProviderContext,
    ) -> None:
        state = ModelGenericSecretState(
            id="stale-id", path="secret/foo", data_json="{}", allow_read=False
        )

        refreshed = handler.read(state, provider_context)

        assert refreshed is not None
        assert refreshed.id == "secret/foo"

    def test_read_with_allow_read_stores_canonical_remote_data(
        self,
        handler: HandlerGenericSecret,
        provider_context: ModelProviderContext,
        recording_client: RecordingVaultClient,
    ) -> None:
        recording_client.secrets["secret/foo"] = {"key": "value"}
        state = _state(data_json='{"key":"declared"}', allow_read=True)

        refreshed = handler.read(state, provider_context)

        assert recording_client.calls == [VaultCall("read", "secret/foo")]
        assert refreshed is not None
        assert refreshed.data_json == '{"key":"value"}'
        assert refreshed.id == "secret/foo"
        assert refreshed.lifecycle_state is EnumResourceLifecycleState.PRESENT_VERIFIED

    def test_read_surfaces_remote_type_changes_as_drift(
        self,
        handler: HandlerGenericSecret,
        provider_context: ModelProviderContext,
        recording_client: RecordingVaultClient,
    ) -> None:
        recording_client.secrets["secret/foo"] = {"port": "5432", "b": 1, "a": 2}
        state = _state(data_json='{"a":2,"b":1,"port":5432}', allow_read=True)

        refreshed = handler.read(state, provider_context)

        assert refreshed is not None
        assert refreshed.data_json == '{"a":2,"b":1,"port":"5432"}'
        assert refreshed.data_json != state.data_json

    def test_read_missing_record_returns_none(
        self,
        handler: HandlerGenericSecret,
        provider_context: ModelProviderContext,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.WARNING):
            refreshed = handler.read(_state(allow_read=True), provider_context)

        assert refreshed is None
        assert len(filter_handler_warnings(caplog.records, HANDLER_MODULE)) == 1

    def test_read_failure_is_wrapped(
        self,
        handler: HandlerGenericSecret,
        provider_context: ModelProviderContext,
        recording_client: RecordingVaultClient,
    ) -> None:
        recording_client.fail_with = RuntimeError("sealed")

        with pytest.raises(InfraVaultError, match="error reading from Vault: sealed"):
            handler.read(_state(allow_read=True), provider_context)

    def test_read_unencodable_data_raises(
        self,
        handler: HandlerGenericSecret,
    ) -> None:
        class NaNClient(RecordingVaultClient):
            def read(self, path: str) -> ModelVaultSecretRecord | None:
                return ModelVaultSecretRecord(data={"value": float("nan")})

        context = ModelProviderContext(client=NaNClient())

        with pytest.raises(RuntimeHostError, match="error marshaling JSON"):
            handler.read(_state(allow_read=True), context)

    def test_read_too_deeply_nested_data_raises(
        self,
        handler: HandlerGenericSecret,
        provider_context: ModelProviderContext,
        recording_client: RecordingVaultClient,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        def deep_encode(data: object) -> str:
            raise RecursionError("maximum recursion depth exceeded")

        recording_client.secrets["secret/foo"] = {"key": "value"}
        monkeypatch.setattr(f"{HANDLER_MODULE}.encode_data_json", deep_encode)

        with pytest.raises(RuntimeHostError, match="error marshaling JSON") as exc_info:
            handler.read(_state(allow_read=True), provider_context)

        assert isinstance(exc_info.value.__cause__, RecursionError)

    def test_read_does_not_log_secret_values(
        self,
        handler: HandlerGenericSecret,
        provider_context: ModelProviderContext,
        recording_client: RecordingVaultClient,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        recording_client.secrets["secret/foo"] = {"password": "hunter2"}

        with caplog.at_level(logging.DEBUG):
            handler.read(_state(allow_read=True), provider_context)

        assert "hunter2" not in caplog.text


class TestHandlerGenericSecretImport:
    """import_state behavior."""

    def test_import_reads_existing_secret(
        self,
        handler: HandlerGenericSecret,
        provider_context: ModelProviderContext,
        recording_client: RecordingVaultClient,
    ) -> None:
        recording_client.secrets["secret/existing"] = {"b": 1, "a": "x"}

        state = handler.import_state("secret/existing", provider_context)

        assert state.id == "secret/existing"
        assert state.path == "secret/existing"
        assert state.allow_read is True
        assert state.data_json == '{"a":"x","b":1}'
        assert state.lifecycle_state is EnumResourceLifecycleState.PRESENT_VERIFIED

    def test_import_missing_secret_raises(
        self,
        handler: HandlerGenericSecret,
        provider_context: ModelProviderContext,
    ) -> None:
        with pytest.raises(SecretResolutionError, match="secret/missing"):
            handler.import_state("secret/missing", provider_context)


class TestHandlerGenericSecretLifecycle:
    """End-to-end state transitions against the in-memory client."""

    def test_absent_to_verified_to_absent(
        self,
        handler: HandlerGenericSecret,
        provider_context: ModelProviderContext,
        recording_client: RecordingVaultClient,
    ) -> None:
        config = ModelGenericSecretConfig(
            path="secret/foo", data_json='{"key": "value"}', allow_read=True
        )

        created = handler.create(config, provider_context)
        refreshed = handler.read(created, provider_context)
        assert refreshed is not None
        assert refreshed.lifecycle_state is EnumResourceLifecycleState.PRESENT_VERIFIED
        assert refreshed.data_json == created.data_json

        handler.delete(refreshed, provider_context)

        assert handler.read(refreshed, provider_context) is None
        assert [call.operation for call in recording_client.calls] == [
            "write",
            "read",
            "delete",
            "read",
        ]


class TestHandlerGenericSecretDescribe:
    """Handler metadata."""

    def test_describe_lists_operations_and_schema(
        self, handler: HandlerGenericSecret
    ) -> None:
        description = handler.describe()

        assert description["resource_type"] == "vault_generic_secret"
        assert description["supported_operations"] == [
            "create",
            "delete",
            "import_state",
            "read",
            "update",
        ]
        json.dumps(description)

    def test_handler_exposes_lifecycle_methods(
        self, handler: HandlerGenericSecret
    ) -> None:
        assert_has_methods(
            handler,
            ["create", "update", "read", "delete", "import_state", "describe"],
            protocol_name="HandlerGenericSecret",
        )
