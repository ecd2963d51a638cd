# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Consul KV request descriptors and builders."""

from consul_kv.models.requests.model_delete_key_request import (
    DeleteKeyRequest,
    DeleteKeyRequestBuilder,
)
from consul_kv.models.requests.model_kv_request_base import (
    KV_API_PREFIX,
    KVReadRequestBuilderBase,
    KVRequestBuilderBase,
    ModelKVReadRequestBase,
    ModelKVRequestBase,
)
from consul_kv.models.requests.model_read_key_request import (
    ReadKeyRequest,
    ReadKeyRequestBuilder,
)
from consul_kv.models.requests.model_read_keys_request import (
    ReadKeysRequest,
    ReadKeysRequestBuilder,
)
from consul_kv.models.requests.model_read_raw_key_request import (
    ReadRawKeyRequest,
    ReadRawKeyRequestBuilder,
)
from consul_kv.models.requests.model_set_key_request import (
    SetKeyRequest,
    SetKeyRequestBuilder,
)

__all__: list[str] = [
    "KV_API_PREFIX",
    "DeleteKeyRequest",
    "DeleteKeyRequestBuilder",
    "KVReadRequestBuilderBase",
    "KVRequestBuilderBase",
    "ModelKVReadRequestBase",
    "ModelKVRequestBase",
    "ReadKeyRequest",
    "ReadKeyRequestBuilder",
    "ReadKeysRequest",
    "ReadKeysRequestBuilder",
    "ReadRawKeyRequest",
    "ReadRawKeyRequestBuilder",
    "SetKeyRequest",
    "SetKeyRequestBuilder",
]
