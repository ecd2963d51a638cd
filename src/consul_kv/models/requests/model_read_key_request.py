# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Read key request (``GET /v1/kv/<key>``)."""

from __future__ import annotations

from typing import ClassVar, Self

from consul_kv.models.model_kv_pair import ModelKVPair
from consul_kv.models.requests.model_kv_request_base import (
    KVReadRequestBuilderBase,
    ModelKVReadRequestBase,
)


class ReadKeyRequest(ModelKVReadRequestBase):
    """Reads the entry at a key, or all entries under a prefix with ``recurse``.

    Consul always answers with a JSON list of entries, even for a single key.

    Attributes:
        recurse: Return every entry whose key starts with ``key``
    """

    response_type: ClassVar[object] = list[ModelKVPair]

    recurse: bool = False

    def query_params(self) -> list[tuple[str, str]]:
        params = super().query_params()
        if self.recurse:
            params.append(("recurse", ""))
        return params

    @classmethod
    def builder(cls) -> ReadKeyRequestBuilder:
        return ReadKeyRequestBuilder()


class ReadKeyRequestBuilder(KVReadRequestBuilderBase[ReadKeyRequest]):
    """Builder for ReadKeyRequest."""

    request_type = ReadKeyRequest

    def recurse(self, recurse: bool = True) -> Self:
        return self._set("recurse", recurse)


__all__: list[str] = ["ReadKeyRequest", "ReadKeyRequestBuilder"]
