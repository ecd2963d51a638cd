# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Delete key request (``DELETE /v1/kv/<key>``)."""

from __future__ import annotations

from typing import ClassVar, Self

from pydantic import Field

from consul_kv.models.requests.model_kv_request_base import (
    KVRequestBuilderBase,
    ModelKVRequestBase,
)


class DeleteKeyRequest(ModelKVRequestBase):
    """Deletes a key, or every key under a prefix when ``recurse`` is set.

    Consul answers ``true`` even when the key did not exist. With ``cas``
    the delete only happens if the key's ModifyIndex matches; Consul then
    answers ``false`` on a mismatch.

    Attributes:
        cas: Check-and-set ModifyIndex
        recurse: Delete all keys with the given prefix
    """

    http_method: ClassVar[str] = "DELETE"
    response_type: ClassVar[object] = bool

    cas: int | None = Field(default=None, ge=0)
    recurse: bool = False

    def query_params(self) -> list[tuple[str, str]]:
        params = super().query_params()
        if self.cas is not None:
            params.append(("cas", str(self.cas)))
        if self.recurse:
            params.append(("recurse", ""))
        return params

    @classmethod
    def builder(cls) -> DeleteKeyRequestBuilder:
        return DeleteKeyRequestBuilder()


class DeleteKeyRequestBuilder(KVRequestBuilderBase[DeleteKeyRequest]):
    """Builder for DeleteKeyRequest."""

    request_type = DeleteKeyRequest

    def cas(self, index: int) -> Self:
        return self._set("cas", index)

    def recurse(self, recurse: bool = True) -> Self:
        return self._set("recurse", recurse)


__all__: list[str] = ["DeleteKeyRequest", "DeleteKeyRequestBuilder"]
