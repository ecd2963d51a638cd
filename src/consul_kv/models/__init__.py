# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pydantic models for the consul_kv package."""

from consul_kv.models.model_api_response import ModelApiResponse
from consul_kv.models.model_consul_client_settings import (
    DEFAULT_CONSUL_ADDRESS,
    ModelConsulClientSettings,
)
from consul_kv.models.model_kv_pair import (
    ModelGenericKVPair,
    ModelKVPair,
    ModelKVPairMetadata,
)
from consul_kv.models.model_response_metadata import ModelResponseMetadata

__all__: list[str] = [
    "DEFAULT_CONSUL_ADDRESS",
    "ModelApiResponse",
    "ModelConsulClientSettings",
    "ModelGenericKVPair",
    "ModelKVPair",
    "ModelKVPairMetadata",
    "ModelResponseMetadata",
]
