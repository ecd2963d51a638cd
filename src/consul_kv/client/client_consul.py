# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Consul HTTP client handle built on httpx.AsyncClient.

ConsulClient owns (or borrows) an ``httpx.AsyncClient`` and turns KV request
descriptors into HTTP calls against the agent. It performs exactly one
round trip per call: retries and circuit breaking are left to the caller.

Error Mapping:
    httpx.ConnectError       -> ConsulConnectionError
    httpx.TimeoutException   -> ConsulTimeoutError
    other httpx.HTTPError    -> ConsulConnectionError
    401/403                  -> ConsulAuthenticationError
    404 on read endpoints    -> success, body replaced by the request's
                                ``missing_key_payload``
    other non-2xx            -> ConsulApiError

Security:
    The ACL token is sent as ``X-Consul-Token`` and never logged. Response
    bodies are passed through ``sanitize_error_string()`` before they are
    attached to errors.

Example:
    >>> async with ConsulClient(ModelConsulClientSettings.from_env()) as client:
    ...     res = await kv.read(client, "app/config")
"""

from __future__ import annotations

import asyncio
import logging
import ssl
from types import TracebackType
from typing import Self
from uuid import UUID, uuid4

import httpx

from consul_kv.errors import (
    ClientError,
    ConsulApiError,
    ConsulAuthenticationError,
    ConsulConnectionError,
    ConsulTimeoutError,
    ModelClientErrorContext,
)
from consul_kv.models import ModelConsulClientSettings
from consul_kv.models.requests import ModelKVRequestBase
from consul_kv.utils import sanitize_error_message, sanitize_error_string

logger = logging.getLogger(__name__)

HEADER_CONSUL_TOKEN = "X-Consul-Token"
HTTP_NOT_FOUND = 404


class ConsulClient:
    """Asynchronous handle to a Consul agent's HTTP API.

    The underlying ``httpx.AsyncClient`` is created lazily on first use
    unless one is injected. An injected client is never closed by
    ConsulClient; a client it created is closed by ``close()`` or on
    leaving the ``async with`` block.

    Concurrent calls share the HTTP connection pool; the handle keeps no
    other state between calls.
    """

    def __init__(
        self,
        settings: ModelConsulClientSettings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            settings: Client settings (defaults to ``ModelConsulClientSettings()``)
            http_client: Optional pre-built httpx client to use for all calls
        """
        self._settings = settings or ModelConsulClientSettings()
        self._http_client: httpx.AsyncClient | None = http_client
        self._owns_http_client: bool = http_client is None
        self._http_client_lock = asyncio.Lock()

    @property
    def settings(self) -> ModelConsulClientSettings:
        return self._settings

    async def __aenter__(self) -> Self:
        await self._get_http_client()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    def _build_verify(self) -> ssl.SSLContext | bool:
        settings = self._settings
        if not settings.verify_ssl:
            return False
        if settings.ca_cert is None and settings.client_cert is None:
            return True
        context = ssl.create_default_context(cafile=settings.ca_cert)
        if settings.client_cert is not None:
            context.load_cert_chain(settings.client_cert, settings.client_key)
        return context

    def _build_headers(self) -> dict[str, str]:
        headers: dict[str, str] = {}
        if self._settings.token is not None:
            headers[HEADER_CONSUL_TOKEN] = self._settings.token.get_secret_value()
        return headers

    async def _get_http_client(self) -> httpx.AsyncClient:
        """Return the HTTP client, creating it on first use."""
        if self._http_client is not None:
            return self._http_client

        async with self._http_client_lock:
            if self._http_client is not None:
                return self._http_client

            self._http_client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._settings.timeout_seconds),
                verify=self._build_verify(),
            )
            logger.info(
                "Consul HTTP client created",
                extra={
                    "address": self._settings.address,
                    "timeout_seconds": self._settings.timeout_seconds,
                    "verify_ssl": self._settings.verify_ssl,
                },
            )
            return self._http_client

    async def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        async with self._http_client_lock:
            if self._owns_http_client and self._http_client is not None:
                await self._http_client.aclose()
                self._http_client = None
                logger.info(
                    "Consul HTTP client closed",
                    extra={"address": self._settings.address},
                )

    def _error_context(
        self, request: ModelKVRequestBase, correlation_id: UUID
    ) -> ModelClientErrorContext:
        return ModelClientErrorContext(
            operation=f"{request.http_method} {request.path()}",
            target_name=self._settings.address,
            correlation_id=correlation_id,
        )

    async def send(
        self,
        request: ModelKVRequestBase,
        correlation_id: UUID | None = None,
    ) -> httpx.Response:
        """Execute one HTTP round trip for a request descriptor.

        Args:
            request: Finalized request descriptor
            correlation_id: Correlation ID for logs and errors (generated if None)

        Returns:
            The httpx response (body already read).

        Raises:
            ConsulConnectionError: Transport failure.
            ConsulTimeoutError: Transport timeout.
            ConsulAuthenticationError: 401/403 from Consul.
            ConsulApiError: Any other non-success status.
        """
        correlation_id = correlation_id or uuid4()
        client = await self._get_http_client()
        url = self._settings.address + request.path()

        logger.debug(
            "Sending Consul KV request",
            extra={
                "method": request.http_method,
                "path": request.path(),
                "correlation_id": str(correlation_id),
            },
        )

        try:
            response = await client.request(
                request.http_method,
                url,
                params=request.query_params(),
                content=request.body(),
                headers=self._build_headers(),
            )
        except httpx.TimeoutException as e:
            raise ConsulTimeoutError(
                f"Request to Consul timed out: {sanitize_error_message(e)}",
                context=self._error_context(request, correlation_id),
                timeout_seconds=self._settings.timeout_seconds,
            ) from e
        except httpx.ConnectError as e:
            raise ConsulConnectionError(
                f"Failed to connect to Consul: {sanitize_error_message(e)}",
                context=self._error_context(request, correlation_id),
            ) from e
        except httpx.HTTPError as e:
            raise ConsulConnectionError(
                f"HTTP transport error talking to Consul: {sanitize_error_message(e)}",
                context=self._error_context(request, correlation_id),
            ) from e

        status = response.status_code
        logger.debug(
            "Received Consul KV response",
            extra={
                "method": request.http_method,
                "path": request.path(),
                "status_code": status,
                "correlation_id": str(correlation_id),
            },
        )

        if 200 <= status < 300:
            return response
        if status == HTTP_NOT_FOUND and request.missing_key_payload is not None:
            return response

        error = self._map_http_status_to_error(response, request, correlation_id)
        logger.warning(
            "Consul KV request failed",
            extra={
                "method": request.http_method,
                "path": request.path(),
                "status_code": status,
                "error_code": error.error_code.value,
                "correlation_id": str(correlation_id),
            },
        )
        raise error

    def _map_http_status_to_error(
        self,
        response: httpx.Response,
        request: ModelKVRequestBase,
        correlation_id: UUID,
    ) -> ClientError:
        """Map a non-success response to a typed error (not raised)."""
        ctx = self._error_context(request, correlation_id)
        body_snippet = sanitize_error_string(response.text.strip()) if response.content else ""
        status = response.status_code

        if status in (401, 403):
            return ConsulAuthenticationError(
                f"Consul rejected the request ({status})",
                status_code=status,
                response_body=body_snippet,
                context=ctx,
                key=request.key,
            )

        return ConsulApiError(
            f"Consul returned HTTP {status} for {request.http_method} {request.path()}"
            + (f": {body_snippet}" if body_snippet else ""),
            status_code=status,
            response_body=body_snippet,
            context=ctx,
            key=request.key,
        )


__all__: list[str] = ["ConsulClient", "HEADER_CONSUL_TOKEN"]
