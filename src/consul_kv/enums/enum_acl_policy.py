# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Consul default ACL policy enumeration (``X-Consul-Default-ACL-Policy``)."""

from enum import Enum


class EnumAclPolicy(str, Enum):
    """Default ACL policy reported by the Consul agent."""

    ALLOW = "allow"
    DENY = "deny"


__all__ = ["EnumAclPolicy"]
