# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Consul read consistency modes.

Consul reads default to leader-forwarded reads. ``consistent`` adds a
leadership round trip, ``stale`` lets any server answer.
"""

from enum import Enum


class EnumConsistencyMode(str, Enum):
    """Read consistency mode sent as a valueless query parameter.

    Attributes:
        DEFAULT: No query parameter (Consul default mode)
        CONSISTENT: ``?consistent``
        STALE: ``?stale``
    """

    DEFAULT = "default"
    CONSISTENT = "consistent"
    STALE = "stale"


__all__ = ["EnumConsistencyMode"]
