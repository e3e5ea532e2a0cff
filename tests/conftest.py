# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pytest configuration and shared fixtures for omnibase_vault_provider tests."""

from __future__ import annotations

from unittest.mock import MagicMock
from uuid import UUID

import pytest

from omnibase_vault_provider.handlers import (
    HandlerGenericSecret,
    ModelGenericSecretConfig,
    ModelProviderContext,
)
from tests.helpers.fake_vault_client import RecordingVaultClient

FIXED_CORRELATION_ID = UUID("00000000-0000-4000-8000-000000000001")


def assert_has_methods(
    obj: object,
    required_methods: list[str],
    *,
    protocol_name: str | None = None,
) -> None:
    """Assert that an object has all required methods (duck typing conformance).

    Args:
        obj: The object to check for method presence.
        required_methods: Method names that must be present and callable.
        protocol_name: Optional protocol name for clearer error messages.
    """
    name = protocol_name or obj.__class__.__name__
    for method_name in required_methods:
        assert hasattr(obj, method_name), f"{name} must have '{method_name}' method"
        assert callable(
            getattr(obj, method_name)
        ), f"{name}.{method_name} must be callable"


@pytest.fixture
def recording_client() -> RecordingVaultClient:
    """Provide an empty in-memory recording client."""
    return RecordingVaultClient()


@pytest.fixture
def provider_context(recording_client: RecordingVaultClient) -> ModelProviderContext:
    """Provide a context wired to the recording client."""
    return ModelProviderContext(
        client=recording_client,
        correlation_id=FIXED_CORRELATION_ID,
    )


@pytest.fixture
def handler() -> HandlerGenericSecret:
    """Provide a fresh vault_generic_secret handler."""
    return HandlerGenericSecret()


@pytest.fixture
def secret_config() -> ModelGenericSecretConfig:
    """Provide a basic declared configuration."""
    return ModelGenericSecretConfig(path="secret/foo", data_json='{"key": "value"}')


@pytest.fixture
def mock_hvac_client() -> MagicMock:
    """Provide mocked hvac.Client."""
    client = MagicMock()
    client.is_authenticated.return_value = True
    client.write_data.return_value = None
    client.read.return_value = None
    client.delete.return_value = None
    return client
