# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""In-memory stand-in for the Consul KV HTTP API, served via httpx.MockTransport.

Implements the subset of ``/v1/kv/`` the client uses: GET (plain,
``recurse``, ``keys``, ``raw``), PUT (with ``flags`` and ``cas``) and DELETE
(with ``recurse``). Missing keys answer 404 like a real agent.
"""

from __future__ import annotations

import base64
import json
from dataclasses import dataclass, field
from urllib.parse import unquote

import httpx

from tests.helpers.util_consul_responses import json_response, raw_response

_KV_PREFIX = "/v1/kv/"


@dataclass
class FakeEntry:
    value: bytes
    flags: int
    create_index: int
    modify_index: int


@dataclass
class FakeConsulKV:
    """Minimal Consul KV server state plus a request log."""

    entries: dict[str, FakeEntry] = field(default_factory=dict)
    requests: list[httpx.Request] = field(default_factory=list)
    index: int = 1

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not request.url.path.startswith(_KV_PREFIX):
            return httpx.Response(404, text="unknown endpoint")
        key = unquote(request.url.path[len(_KV_PREFIX) :])
        params = request.url.params

        if request.method == "GET":
            return self._get(key, params)
        if request.method == "PUT":
            return self._put(key, params, request.content)
        if request.method == "DELETE":
            return self._delete(key, params)
        return httpx.Response(405)

    def _headers(self) -> dict[str, str]:
        return {"x-consul-index": str(self.index)}

    def _matching(self, key: str, recurse: bool) -> list[str]:
        if recurse:
            return sorted(k for k in self.entries if k.startswith(key))
        return [key] if key in self.entries else []

    @staticmethod
    def _encode_value(value: bytes) -> str | None:
        # Consul reports an empty value as null, not "".
        return base64.b64encode(value).decode("ascii") if value else None

    def _get(self, key: str, params: httpx.QueryParams) -> httpx.Response:
        if "keys" in params:
            found = sorted(k for k in self.entries if k.startswith(key))
            if not found:
                return httpx.Response(404, headers=self._headers())
            return json_response(found, headers=self._headers())

        found = self._matching(key, "recurse" in params)
        if not found:
            return httpx.Response(404, headers=self._headers())

        if "raw" in params:
            return raw_response(self.entries[found[0]].value, headers=self._headers())

        body = [
            {
                "Key": k,
                "Value": self._encode_value(self.entries[k].value),
                "Flags": self.entries[k].flags,
                "CreateIndex": self.entries[k].create_index,
                "ModifyIndex": self.entries[k].modify_index,
                "LockIndex": 0,
            }
            for k in found
        ]
        return json_response(body, headers=self._headers())

    def _put(self, key: str, params: httpx.QueryParams, content: bytes) -> httpx.Response:
        existing = self.entries.get(key)
        if "cas" in params:
            cas = int(params["cas"])
            current = existing.modify_index if existing is not None else 0
            if cas != current:
                return json_response(False, headers=self._headers())

        self.index += 1
        self.entries[key] = FakeEntry(
            value=content,
            flags=int(params.get("flags", "0")),
            create_index=existing.create_index if existing is not None else self.index,
            modify_index=self.index,
        )
        return json_response(True, headers=self._headers())

    def _delete(self, key: str, params: httpx.QueryParams) -> httpx.Response:
        for k in self._matching(key, "recurse" in params):
            del self.entries[k]
        self.index += 1
        return httpx.Response(
            200,
            content=json.dumps(True).encode("utf-8"),
            headers={"content-type": "application/json", **self._headers()},
        )
