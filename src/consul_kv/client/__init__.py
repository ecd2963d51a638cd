# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Consul client handle and the protocol the execution layer depends on."""

from consul_kv.client.client_consul import HEADER_CONSUL_TOKEN, ConsulClient
from consul_kv.client.protocol_consul_client import ProtocolConsulClient

__all__: list[str] = [
    "HEADER_CONSUL_TOKEN",
    "ConsulClient",
    "ProtocolConsulClient",
]
