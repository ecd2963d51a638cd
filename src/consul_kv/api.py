# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Execution layer: run request descriptors and decode the response envelope.

``exec_with_result`` decodes the JSON body into the request's declared
``response_type``; ``exec_with_raw`` returns the body bytes untouched. Both
attach the header-derived ModelResponseMetadata and propagate client errors
unchanged.
"""

from __future__ import annotations

import functools
import logging
from typing import Any, TypeVar
from uuid import UUID

from pydantic import TypeAdapter, ValidationError

from consul_kv.client import ProtocolConsulClient
from consul_kv.client.client_consul import HTTP_NOT_FOUND
from consul_kv.errors import ModelClientErrorContext, ResponseDecodeError
from consul_kv.models import ModelApiResponse, ModelResponseMetadata
from consul_kv.models.requests import ModelKVRequestBase
from consul_kv.utils import sanitize_error_string

logger = logging.getLogger(__name__)

T = TypeVar("T")


@functools.lru_cache(maxsize=128)
def get_type_adapter(target: Any) -> TypeAdapter[Any]:
    """Return a cached TypeAdapter for ``target``."""
    return TypeAdapter(target)


async def _send(
    client: ProtocolConsulClient,
    request: ModelKVRequestBase,
    correlation_id: UUID | None,
) -> tuple[bytes, ModelResponseMetadata]:
    response = await client.send(request, correlation_id)
    if response.status_code == HTTP_NOT_FOUND and request.missing_key_payload is not None:
        content = request.missing_key_payload
    else:
        content = response.content
    return content, ModelResponseMetadata.from_headers(response.headers)


async def exec_with_result(
    client: ProtocolConsulClient,
    request: ModelKVRequestBase,
    correlation_id: UUID | None = None,
) -> ModelApiResponse[Any]:
    """Execute ``request`` and decode its JSON body into ``request.response_type``.

    Args:
        client: Client handle performing the HTTP round trip
        request: Finalized request descriptor
        correlation_id: Correlation ID for logs and errors

    Returns:
        Envelope holding the decoded payload and response metadata.

    Raises:
        ResponseDecodeError: If the body is not valid for the response type.
        ClientError: Any error raised by ``client.send``.
    """
    content, metadata = await _send(client, request, correlation_id)
    adapter = get_type_adapter(request.response_type)
    try:
        payload = adapter.validate_json(content)
    except ValidationError as e:
        logger.warning(
            "Failed to decode Consul response body",
            extra={
                "path": request.path(),
                "error_count": e.error_count(),
                "correlation_id": str(correlation_id) if correlation_id else None,
            },
        )
        raise ResponseDecodeError(
            f"Failed to decode response of {request.http_method} {request.path()}",
            context=ModelClientErrorContext.with_correlation(
                correlation_id=correlation_id,
                operation=f"{request.http_method} {request.path()}",
                target_name=client.settings.address,
            ),
            response_body=sanitize_error_string(
                content.decode("utf-8", errors="replace"), max_length=200
            ),
        ) from e
    return ModelApiResponse(response=payload, metadata=metadata)


async def exec_with_raw(
    client: ProtocolConsulClient,
    request: ModelKVRequestBase,
    correlation_id: UUID | None = None,
) -> ModelApiResponse[bytes]:
    """Execute ``request`` and return its body bytes as the payload.

    Raises:
        ClientError: Any error raised by ``client.send``.
    """
    content, metadata = await _send(client, request, correlation_id)
    return ModelApiResponse(response=content, metadata=metadata)


__all__: list[str] = ["exec_with_raw", "exec_with_result", "get_type_adapter"]
