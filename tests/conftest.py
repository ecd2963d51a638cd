# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pytest configuration and shared fixtures for consul_kv tests."""

from __future__ import annotations

from collections.abc import AsyncGenerator, Callable

import httpx
import pytest
import pytest_asyncio
from pydantic import SecretStr

from consul_kv.client import ConsulClient
from consul_kv.models import ModelConsulClientSettings
from tests.helpers import TEST_ADDRESS, TEST_TOKEN, MockHandler


@pytest.fixture
def consul_settings() -> ModelConsulClientSettings:
    """Provide test client settings."""
    return ModelConsulClientSettings(
        address=TEST_ADDRESS,
        token=SecretStr(TEST_TOKEN),
        timeout_seconds=5.0,
    )


@pytest_asyncio.fixture
async def make_client(
    consul_settings: ModelConsulClientSettings,
) -> AsyncGenerator[Callable[[MockHandler], ConsulClient], None]:
    """Provide a factory building ConsulClients over httpx.MockTransport.

    The injected httpx clients are closed after the test.
    """
    http_clients: list[httpx.AsyncClient] = []

    def _make(handler: MockHandler) -> ConsulClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        http_clients.append(http_client)
        return ConsulClient(consul_settings, http_client=http_client)

    yield _make

    for http_client in http_clients:
        await http_client.aclose()
