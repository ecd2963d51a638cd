# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Test helpers for consul_kv tests.

Available Utilities:
    Consul Responses:
        - kv_entry: KV entry dict as serialized by Consul
        - json_response: httpx.Response with a JSON body and Consul headers
        - raw_response: httpx.Response with an opaque body

    Fake Consul:
        - FakeConsulKV: in-memory KV API usable as a MockTransport handler
"""

from tests.helpers.util_consul_responses import (
    DEFAULT_CONSUL_HEADERS,
    TEST_ADDRESS,
    TEST_TOKEN,
    MockHandler,
    json_response,
    kv_entry,
    raw_response,
)
from tests.helpers.util_fake_consul import FakeConsulKV, FakeEntry

__all__: list[str] = [
    "DEFAULT_CONSUL_HEADERS",
    "FakeConsulKV",
    "FakeEntry",
    "TEST_ADDRESS",
    "TEST_TOKEN",
    "MockHandler",
    "json_response",
    "kv_entry",
    "raw_response",
]
