# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pytest configuration and fixtures for integration tests.

Integration tests talk to a real Consul agent configured through the
standard Consul environment variables.

Environment Variables:
    CONSUL_HTTP_ADDR: Agent address (required; tests are skipped when unset)
    CONSUL_HTTP_TOKEN: ACL token with kv read/write on the test prefix
"""

from __future__ import annotations

import os
import socket
import uuid
from collections.abc import AsyncGenerator
from urllib.parse import urlparse

import pytest
import pytest_asyncio

from consul_kv import kv
from consul_kv.client import ConsulClient
from consul_kv.models import ModelConsulClientSettings
from consul_kv.models.requests import DeleteKeyRequestBuilder


def _check_consul_reachable() -> bool:
    """Check whether the configured Consul agent accepts TCP connections."""
    address = os.getenv("CONSUL_HTTP_ADDR")
    if not address:
        return False
    if "://" not in address:
        address = f"http://{address}"
    parsed = urlparse(address)
    host = parsed.hostname or "127.0.0.1"
    port = parsed.port or (443 if parsed.scheme == "https" else 8500)
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
            sock.settimeout(2.0)
            result: int = sock.connect_ex((host, port))
            return result == 0
    except (OSError, TimeoutError, socket.gaierror):
        return False


CONSUL_AVAILABLE = _check_consul_reachable()


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Mark integration tests, skipping them when Consul is unreachable."""
    integration_marker = pytest.mark.integration
    skip_marker = pytest.mark.skip(
        reason="Consul not available (set CONSUL_HTTP_ADDR to a reachable agent)"
    )

    for item in items:
        if "tests/integration" not in str(item.fspath):
            continue
        item.add_marker(integration_marker)
        if not CONSUL_AVAILABLE:
            item.add_marker(skip_marker)


@pytest.fixture
def test_prefix() -> str:
    """Provide a unique key prefix so runs do not interfere."""
    return f"consul-kv-tests/{uuid.uuid4().hex[:12]}/"


@pytest_asyncio.fixture
async def consul_client(test_prefix: str) -> AsyncGenerator[ConsulClient, None]:
    """Provide a ConsulClient from the environment, cleaning the test prefix afterwards."""
    async with ConsulClient(ModelConsulClientSettings.from_env()) as client:
        yield client
        await kv.delete(client, test_prefix, DeleteKeyRequestBuilder().recurse())
