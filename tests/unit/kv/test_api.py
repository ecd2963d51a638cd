# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for the execution layer (exec_with_result / exec_with_raw)."""

from __future__ import annotations

from collections.abc import Callable
from datetime import timedelta

import httpx
import pytest

from consul_kv import api
from consul_kv.client import ConsulClient
from consul_kv.errors import ConsulApiError, ResponseDecodeError
from consul_kv.models import ModelKVPair
from consul_kv.models.requests import (
    DeleteKeyRequestBuilder,
    ReadKeyRequestBuilder,
    ReadKeysRequestBuilder,
    ReadRawKeyRequestBuilder,
)
from tests.helpers import MockHandler, json_response, kv_entry, raw_response

ClientFactory = Callable[[MockHandler], ConsulClient]


class TestExecWithResult:
    """Tests for exec_with_result."""

    @pytest.mark.asyncio
    async def test_decodes_kv_pairs_and_metadata(self, make_client: ClientFactory) -> None:
        client = make_client(
            lambda request: json_response(
                [kv_entry("a", b"1"), kv_entry("b", b"2")],
                headers={"x-consul-index": "77", "x-consul-lastcontact": "12"},
            )
        )
        request = ReadKeyRequestBuilder().key("").recurse().build()

        res = await api.exec_with_result(client, request)

        assert [pair.key for pair in res.response] == ["a", "b"]
        assert all(isinstance(pair, ModelKVPair) for pair in res.response)
        assert res.response[1].value == b"2"
        assert res.metadata.index == 77
        assert res.metadata.known_leader is True
        assert res.metadata.last_contact == timedelta(milliseconds=12)

    @pytest.mark.asyncio
    async def test_decodes_bool(self, make_client: ClientFactory) -> None:
        client = make_client(lambda request: json_response(True))
        res = await api.exec_with_result(client, DeleteKeyRequestBuilder().key("k").build())
        assert res.response is True

    @pytest.mark.asyncio
    async def test_404_read_yields_empty_list(self, make_client: ClientFactory) -> None:
        client = make_client(
            lambda request: httpx.Response(404, headers={"x-consul-index": "9"})
        )

        res = await api.exec_with_result(client, ReadKeyRequestBuilder().key("missing").build())

        assert res.response == []
        assert res.metadata.index == 9

    @pytest.mark.asyncio
    async def test_404_keys_yields_empty_list(self, make_client: ClientFactory) -> None:
        client = make_client(lambda request: httpx.Response(404))
        res = await api.exec_with_result(client, ReadKeysRequestBuilder().key("none/").build())
        assert res.response == []

    @pytest.mark.asyncio
    async def test_malformed_body_raises_decode_error(
        self, make_client: ClientFactory
    ) -> None:
        client = make_client(lambda request: httpx.Response(200, content=b"<html>oops</html>"))

        with pytest.raises(ResponseDecodeError) as exc_info:
            await api.exec_with_result(client, ReadKeyRequestBuilder().key("k").build())

        assert exc_info.value.context["response_body"] == "<html>oops</html>"
        assert exc_info.value.context["operation"] == "GET /v1/kv/k"

    @pytest.mark.asyncio
    async def test_wrong_shape_raises_decode_error(self, make_client: ClientFactory) -> None:
        client = make_client(lambda request: json_response({"not": "a list"}))

        with pytest.raises(ResponseDecodeError):
            await api.exec_with_result(client, ReadKeysRequestBuilder().key("").build())

    @pytest.mark.asyncio
    async def test_client_errors_propagate(self, make_client: ClientFactory) -> None:
        client = make_client(lambda request: httpx.Response(500, text="boom"))

        with pytest.raises(ConsulApiError):
            await api.exec_with_result(client, ReadKeyRequestBuilder().key("k").build())


class TestExecWithRaw:
    """Tests for exec_with_raw."""

    @pytest.mark.asyncio
    async def test_returns_body_bytes(self, make_client: ClientFactory) -> None:
        client = make_client(lambda request: raw_response(b"\x00\x01binary"))
        res = await api.exec_with_raw(client, ReadRawKeyRequestBuilder().key("k").build())
        assert res.response == b"\x00\x01binary"
        assert res.metadata.index == 42

    @pytest.mark.asyncio
    async def test_404_yields_empty_bytes(self, make_client: ClientFactory) -> None:
        client = make_client(lambda request: httpx.Response(404, text="ignored"))
        res = await api.exec_with_raw(client, ReadRawKeyRequestBuilder().key("k").build())
        assert res.response == b""


class TestGetTypeAdapter:
    """Tests for the TypeAdapter cache."""

    def test_adapter_is_cached(self) -> None:
        assert api.get_type_adapter(list[str]) is api.get_type_adapter(list[str])
