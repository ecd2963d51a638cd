# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""consul_kv - typed asyncio client for the HashiCorp Consul KV HTTP API.

This package provides:

- ``kv``: delete/keys/read/read_raw/read_json/read_json_raw/set/set_json
- ``api``: execution layer decoding responses into ModelApiResponse
- ``ConsulClient``: httpx-based handle to a Consul agent
- Request descriptors and builders for every KV endpoint
- Typed errors with structured, sanitized context

Example:
    >>> from consul_kv import ConsulClient, ModelConsulClientSettings, kv
    >>> async with ConsulClient(ModelConsulClientSettings.from_env()) as client:
    ...     await kv.set_json(client, "app/config", {"debug": True})
    ...     res = await kv.read_json(client, "app/config", dict)
    ...     res.response.value
    {'debug': True}
"""

from consul_kv import api, kv
from consul_kv.client import ConsulClient, ProtocolConsulClient
from consul_kv.models import (
    ModelApiResponse,
    ModelConsulClientSettings,
    ModelGenericKVPair,
    ModelKVPair,
    ModelResponseMetadata,
)

__all__: list[str] = [
    "ConsulClient",
    "ModelApiResponse",
    "ModelConsulClientSettings",
    "ModelGenericKVPair",
    "ModelKVPair",
    "ModelResponseMetadata",
    "ProtocolConsulClient",
    "api",
    "kv",
]
