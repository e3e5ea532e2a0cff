# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""data_json validation and canonicalization.

Secret payloads are declared as a JSON string so that arbitrary structures
are possible, rather than forcing every value to be a string. The host engine
compares stored state against the declared value, so the string is rebuilt
into a canonical single-line form: extra whitespace or a different key order
in the configuration must not show up as drift.

Canonical Form:
    - Object keys sorted at every nesting level
    - No insignificant whitespace (separators "," and ":")
    - Non-ASCII characters emitted as UTF-8, not as \\uXXXX escapes

    >>> normalize_data_json('{ "b": 2,\\n  "a": 1 }')
    '{"a":1,"b":2}'

Only a JSON object is accepted at the top level. The non-standard constants
NaN, Infinity and -Infinity that Python's json module tolerates are rejected,
since Vault and the host engine cannot represent them.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping

from omnibase_vault_provider.errors import DataJsonSyntaxError

logger = logging.getLogger(__name__)

_JSON_TYPE_NAMES: dict[type, str] = {
    list: "array",
    str: "string",
    int: "number",
    float: "number",
    bool: "boolean",
    type(None): "null",
}


def _reject_constant(name: str) -> float:
    raise ValueError(f"non-standard JSON constant {name}")


def decode_data_json(value: str, field_name: str = "data_json") -> dict[str, object]:
    """Decode a data_json string into a mapping.

    Args:
        value: The declared JSON string.
        field_name: Field name used in error messages.

    Returns:
        The decoded JSON object.

    Raises:
        DataJsonSyntaxError: If value is not a string, is malformed JSON, or
            decodes to something other than a JSON object.
    """
    if not isinstance(value, str):
        raise DataJsonSyntaxError(
            f"{field_name} must be a string, got {type(value).__name__}",
            field_name=field_name,
            reason="not_a_string",
        )

    try:
        decoded = json.loads(value, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise DataJsonSyntaxError(
            f"{field_name} syntax error: {e.msg} (line {e.lineno} column {e.colno})",
            field_name=field_name,
            reason="malformed_json",
        ) from e
    except ValueError as e:
        raise DataJsonSyntaxError(
            f"{field_name} syntax error: {e}",
            field_name=field_name,
            reason="malformed_json",
        ) from e
    except RecursionError as e:
        raise DataJsonSyntaxError(
            f"{field_name} syntax error: nesting exceeds the maximum depth",
            field_name=field_name,
            reason="malformed_json",
        ) from e

    if not isinstance(decoded, dict):
        type_name = _JSON_TYPE_NAMES.get(type(decoded), type(decoded).__name__)
        raise DataJsonSyntaxError(
            f"{field_name} must decode to a JSON object, got {type_name}",
            field_name=field_name,
            reason="not_an_object",
        )

    return decoded


def encode_data_json(data: Mapping[str, object]) -> str:
    """Serialize a mapping into canonical JSON.

    Raises:
        TypeError: If data holds a value with no JSON representation.
        ValueError: If data holds NaN or an infinite float.
        RecursionError: If data is nested deeper than the encoder allows.
    """
    return json.dumps(
        data,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    )


def validate_data_json(value: str) -> list[str]:
    """Check that value decodes to a JSON object.

    Returns:
        An empty list when valid, otherwise exactly one error message.
    """
    try:
        decode_data_json(value)
    except DataJsonSyntaxError as e:
        return [e.message]
    return []


def normalize_data_json(value: str) -> str:
    """Rebuild value as canonical single-line JSON.

    Normalizing an already-normalized string returns it unchanged.

    A value that fails to decode yields "" and a value that fails to
    re-encode is returned as given. Both cases are logged at ERROR; the
    validator runs first, so neither is expected in practice.
    """
    try:
        data = decode_data_json(value)
    except DataJsonSyntaxError as e:
        logger.error(
            "Invalid JSON data in vault_generic_secret",
            extra={"reason": e.reason, "error": e.message},
        )
        return ""

    try:
        return encode_data_json(data)
    except (TypeError, ValueError, RecursionError) as e:
        logger.error(
            "Problem normalizing JSON for vault_generic_secret",
            extra={"error_type": type(e).__name__},
        )
        return value


__all__: list[str] = [
    "decode_data_json",
    "encode_data_json",
    "normalize_data_json",
    "validate_data_json",
]
