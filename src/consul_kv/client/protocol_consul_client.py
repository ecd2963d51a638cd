# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol for the client handle consumed by the execution layer.

``consul_kv.api`` and ``consul_kv.kv`` only need a settings object (for
error context) and a way to send a request descriptor. Anything satisfying
this protocol can stand in for ConsulClient, e.g. a test double.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from uuid import UUID

    import httpx

    from consul_kv.models import ModelConsulClientSettings
    from consul_kv.models.requests import ModelKVRequestBase


@runtime_checkable
class ProtocolConsulClient(Protocol):
    """Client handle able to execute KV request descriptors."""

    @property
    def settings(self) -> ModelConsulClientSettings:
        """Settings the client was created with."""
        ...

    async def send(
        self,
        request: ModelKVRequestBase,
        correlation_id: UUID | None = None,
    ) -> httpx.Response:
        """Perform one HTTP round trip for ``request``.

        Returns the response for 2xx statuses, and for 404 when the request
        declares a ``missing_key_payload``.

        Raises:
            ConsulConnectionError: Transport failure.
            ConsulTimeoutError: Transport timeout.
            ConsulApiError: Any other non-success status.
        """
        ...


__all__: list[str] = ["ProtocolConsulClient"]
