# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Resource Lifecycle State Enumeration.

Tracks what the provider knows about a managed secret:

    ABSENT --write--> PRESENT_UNVERIFIED --read(allow_read)--> PRESENT_VERIFIED
    any state --delete--> ABSENT

A read without allow_read leaves the state unchanged.
"""

from enum import Enum


class EnumResourceLifecycleState(str, Enum):
    """Effective state of a managed resource."""

    ABSENT = "absent"
    PRESENT_UNVERIFIED = "present_unverified"
    PRESENT_VERIFIED = "present_verified"


__all__ = ["EnumResourceLifecycleState"]
