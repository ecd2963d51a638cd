# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Read raw key request (``GET /v1/kv/<key>?raw``)."""

from __future__ import annotations

from typing import ClassVar

from consul_kv.models.requests.model_kv_request_base import (
    KVReadRequestBuilderBase,
    ModelKVReadRequestBase,
)


class ReadRawKeyRequest(ModelKVReadRequestBase):
    """Reads the undecoded value bytes of a single key, without metadata."""

    response_type: ClassVar[object] = bytes
    missing_key_payload: ClassVar[bytes | None] = b""

    def query_params(self) -> list[tuple[str, str]]:
        params = [("raw", "")]
        params.extend(super().query_params())
        return params

    @classmethod
    def builder(cls) -> ReadRawKeyRequestBuilder:
        return ReadRawKeyRequestBuilder()


class ReadRawKeyRequestBuilder(KVReadRequestBuilderBase[ReadRawKeyRequest]):
    """Builder for ReadRawKeyRequest."""

    request_type = ReadRawKeyRequest


__all__: list[str] = ["ReadRawKeyRequest", "ReadRawKeyRequestBuilder"]
