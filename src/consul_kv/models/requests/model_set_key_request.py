# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Set key request (``PUT /v1/kv/<key>``)."""

from __future__ import annotations

from typing import ClassVar, Self

from pydantic import Field

from consul_kv.models.requests.model_kv_request_base import (
    KVRequestBuilderBase,
    ModelKVRequestBase,
)


class SetKeyRequest(ModelKVRequestBase):
    """Creates or updates a key. The value is sent as the raw request body.

    Consul answers ``true`` on success and ``false`` when a ``cas``,
    ``acquire`` or ``release`` condition did not hold.

    Attributes:
        value: Bytes to store
        flags: Opaque client-defined 64-bit flags
        cas: Check-and-set ModifyIndex (0 means "only if absent")
        acquire: Session ID acquiring the key's lock
        release: Session ID releasing the key's lock
    """

    http_method: ClassVar[str] = "PUT"
    response_type: ClassVar[object] = bool

    value: bytes
    flags: int | None = Field(default=None, ge=0, lt=2**64)
    cas: int | None = Field(default=None, ge=0)
    acquire: str | None = None
    release: str | None = None

    def query_params(self) -> list[tuple[str, str]]:
        params = super().query_params()
        if self.flags is not None:
            params.append(("flags", str(self.flags)))
        if self.cas is not None:
            params.append(("cas", str(self.cas)))
        if self.acquire is not None:
            params.append(("acquire", self.acquire))
        if self.release is not None:
            params.append(("release", self.release))
        return params

    def body(self) -> bytes | None:
        return self.value

    @classmethod
    def builder(cls) -> SetKeyRequestBuilder:
        return SetKeyRequestBuilder()


class SetKeyRequestBuilder(KVRequestBuilderBase[SetKeyRequest]):
    """Builder for SetKeyRequest."""

    request_type = SetKeyRequest

    def value(self, value: bytes) -> Self:
        return self._set("value", value)

    def flags(self, flags: int) -> Self:
        return self._set("flags", flags)

    def cas(self, index: int) -> Self:
        return self._set("cas", index)

    def acquire(self, session: str) -> Self:
        return self._set("acquire", session)

    def release(self, session: str) -> Self:
        return self._set("release", session)


__all__: list[str] = ["SetKeyRequest", "SetKeyRequestBuilder"]
