# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Consul query backend enumeration (``X-Consul-Query-Backend`` header)."""

from enum import Enum


class EnumQueryBackend(str, Enum):
    """Backend that served a Consul query.

    Attributes:
        BLOCKING_QUERY: Classic blocking-query backend
        STREAMING: Streaming backend (Consul 1.10+)
    """

    BLOCKING_QUERY = "blocking-query"
    STREAMING = "streaming"


__all__ = ["EnumQueryBackend"]
