# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""List keys request (``GET /v1/kv/<prefix>?keys``)."""

from __future__ import annotations

from typing import ClassVar, Self

from consul_kv.models.requests.model_kv_request_base import (
    KVReadRequestBuilderBase,
    ModelKVReadRequestBase,
)


class ReadKeysRequest(ModelKVReadRequestBase):
    """Lists the keys under a prefix without their values.

    Attributes:
        separator: Stop listing at this separator, returning "folders"
            (e.g. ``"/"`` lists one level)
    """

    response_type: ClassVar[object] = list[str]

    separator: str | None = None

    def query_params(self) -> list[tuple[str, str]]:
        params = [("keys", "")]
        params.extend(super().query_params())
        if self.separator is not None:
            params.append(("separator", self.separator))
        return params

    @classmethod
    def builder(cls) -> ReadKeysRequestBuilder:
        return ReadKeysRequestBuilder()


class ReadKeysRequestBuilder(KVReadRequestBuilderBase[ReadKeysRequest]):
    """Builder for ReadKeysRequest."""

    request_type = ReadKeysRequest

    def separator(self, separator: str) -> Self:
        return self._set("separator", separator)


__all__: list[str] = ["ReadKeysRequest", "ReadKeysRequestBuilder"]
