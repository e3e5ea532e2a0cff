# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Field keys of the vault_generic_secret resource.

Schema declaration and state handling address fields through these keys so
a typo fails at import time rather than silently reading a missing field.
"""

from enum import Enum


class EnumGenericSecretField(str, Enum):
    """Declared fields of vault_generic_secret."""

    PATH = "path"
    DATA_JSON = "data_json"
    ALLOW_READ = "allow_read"


__all__ = ["EnumGenericSecretField"]
