# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Consul KV operations.

Typed coroutines over the Consul KV HTTP API. Each operation builds a
request descriptor (from the caller's builder, or a fresh default one),
performs exactly one HTTP round trip through the execution layer and
returns a ModelApiResponse.

Supported Operations:
    - delete: Delete a key (or prefix with ``recurse``)
    - keys: List keys under a prefix
    - read: Read the entries at a key (or prefix with ``recurse``)
    - read_raw: Read the raw value bytes of a key
    - read_json: Read a key and decode its value as JSON into a type
    - read_json_raw: Read a key's raw value and decode it as JSON into a type
    - set: Store bytes at a key
    - set_json: Encode a value as JSON and store it at a key

Builder Overrides:
    Every operation accepts an optional builder carrying extra options
    (``recurse``, ``dc``, ``flags``, ...). The key, and the value for
    ``set``/``set_json``, are always applied last so they cannot be
    overridden by the builder.

Example:
    >>> async with ConsulClient() as client:
    ...     await kv.set(client, "app/name", b"demo")
    ...     res = await kv.read(client, "app", ReadKeyRequestBuilder().recurse())
    ...     [pair.key for pair in res.response]
    ['app/name']
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar
from uuid import UUID, uuid4

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError, to_json

from consul_kv import api
from consul_kv.client import ProtocolConsulClient
from consul_kv.errors import (
    EmptyResponseError,
    JsonDeserializeError,
    JsonSerializeError,
    ModelClientErrorContext,
    RequestBuildError,
)
from consul_kv.models import ModelApiResponse, ModelGenericKVPair, ModelKVPair
from consul_kv.models.requests import (
    DeleteKeyRequestBuilder,
    ReadKeyRequestBuilder,
    ReadKeysRequestBuilder,
    ReadRawKeyRequestBuilder,
    SetKeyRequestBuilder,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _log_operation(operation: str, key: str, correlation_id: UUID) -> None:
    logger.debug(
        "Consul KV operation",
        extra={
            "operation": operation,
            "key": key,
            "correlation_id": str(correlation_id),
        },
    )


def _context(
    client: ProtocolConsulClient, operation: str, correlation_id: UUID
) -> ModelClientErrorContext:
    return ModelClientErrorContext(
        operation=operation,
        target_name=client.settings.address,
        correlation_id=correlation_id,
    )


def _decode_json(
    client: ProtocolConsulClient,
    model: Any,
    content: bytes,
    key: str,
    operation: str,
    correlation_id: UUID,
) -> Any:
    try:
        return api.get_type_adapter(model).validate_json(content)
    except ValidationError as e:
        raise JsonDeserializeError(
            f"Value at {key!r} is not valid JSON for {getattr(model, '__name__', model)}: "
            f"{e.error_count()} validation error(s)",
            context=_context(client, operation, correlation_id),
            key=key,
        ) from e


async def delete(
    client: ProtocolConsulClient,
    key: str,
    opts: DeleteKeyRequestBuilder | None = None,
) -> ModelApiResponse[bool]:
    """Delete the given key.

    Consul reports success even if the key did not exist.
    """
    correlation_id = uuid4()
    _log_operation("kv_delete", key, correlation_id)
    request = (opts or DeleteKeyRequestBuilder()).key(key).build()
    return await api.exec_with_result(client, request, correlation_id)


async def keys(
    client: ProtocolConsulClient,
    path: str,
    opts: ReadKeysRequestBuilder | None = None,
) -> ModelApiResponse[list[str]]:
    """List all keys under the given path prefix.

    A prefix with no keys yields an empty list.
    """
    correlation_id = uuid4()
    _log_operation("kv_keys", path, correlation_id)
    request = (opts or ReadKeysRequestBuilder()).key(path).build()
    return await api.exec_with_result(client, request, correlation_id)


async def read(
    client: ProtocolConsulClient,
    key: str,
    opts: ReadKeyRequestBuilder | None = None,
) -> ModelApiResponse[list[ModelKVPair]]:
    """Read the entries at the given key.

    Returns one pair for an existing key, none for a missing key, and every
    pair under the prefix when the builder sets ``recurse``.
    A key holding an empty value is reported with ``value=None``, as Consul
    sends it.
    """
    correlation_id = uuid4()
    _log_operation("kv_read", key, correlation_id)
    request = (opts or ReadKeyRequestBuilder()).key(key).build()
    return await api.exec_with_result(client, request, correlation_id)


async def read_raw(
    client: ProtocolConsulClient,
    key: str,
    opts: ReadRawKeyRequestBuilder | None = None,
) -> ModelApiResponse[bytes]:
    """Read the raw value bytes at the given key (empty for a missing key)."""
    correlation_id = uuid4()
    _log_operation("kv_read_raw", key, correlation_id)
    request = (opts or ReadRawKeyRequestBuilder()).key(key).build()
    return await api.exec_with_raw(client, request, correlation_id)


async def read_json(
    client: ProtocolConsulClient,
    key: str,
    model: type[T],
    opts: ReadKeyRequestBuilder | None = None,
) -> ModelApiResponse[ModelGenericKVPair[T]]:
    """Read the JSON value at the given key and decode it into ``model``.

    Only a single value is handled: if Consul returns several pairs the
    last one is decoded. Recursive reads are rejected; use ``read`` for
    those.

    Args:
        client: Client handle
        key: Key to read
        model: Target type (pydantic model, dataclass, builtin, ...)
        opts: Optional builder with extra read options

    Returns:
        Envelope holding a ModelGenericKVPair whose value is a ``model``.

    Raises:
        RequestBuildError: If ``opts`` requests a recursive read.
        EmptyResponseError: If no pair (or a pair without a value) was returned.
        JsonDeserializeError: If the value is not valid JSON for ``model``.
    """
    correlation_id = uuid4()
    _log_operation("kv_read_json", key, correlation_id)
    request = (opts or ReadKeyRequestBuilder()).key(key).build()
    if request.recurse:
        raise RequestBuildError(
            "read_json decodes a single value; use read() for recursive reads",
            context=_context(client, "kv_read_json", correlation_id),
            key=key,
        )
    res = await api.exec_with_result(client, request, correlation_id)

    pairs: list[ModelKVPair] = res.response
    if not pairs or pairs[-1].value is None:
        raise EmptyResponseError(
            f"No value stored at {key!r}",
            context=_context(client, "kv_read_json", correlation_id),
            key=key,
        )
    pair = pairs[-1]
    value = _decode_json(
        client, model, pair.value, key, "kv_read_json", correlation_id
    )
    return res.with_response(ModelGenericKVPair.from_kv_pair(pair, value))


async def read_json_raw(
    client: ProtocolConsulClient,
    key: str,
    model: type[T],
    opts: ReadRawKeyRequestBuilder | None = None,
) -> ModelApiResponse[T]:
    """Read the raw value at the given key and decode it as JSON into ``model``.

    Raises:
        EmptyResponseError: If the raw value is empty.
        JsonDeserializeError: If the value is not valid JSON for ``model``.
    """
    correlation_id = uuid4()
    _log_operation("kv_read_json_raw", key, correlation_id)
    request = (opts or ReadRawKeyRequestBuilder()).key(key).build()
    res = await api.exec_with_raw(client, request, correlation_id)

    if not res.response:
        raise EmptyResponseError(
            f"No value stored at {key!r}",
            context=_context(client, "kv_read_json_raw", correlation_id),
            key=key,
        )
    value = _decode_json(
        client, model, res.response, key, "kv_read_json_raw", correlation_id
    )
    return res.with_response(value)


async def set(
    client: ProtocolConsulClient,
    key: str,
    value: bytes,
    opts: SetKeyRequestBuilder | None = None,
) -> ModelApiResponse[bool]:
    """Store ``value`` at the given key.

    The response is False when a ``cas``/``acquire``/``release`` condition
    set on the builder did not hold.
    """
    correlation_id = uuid4()
    _log_operation("kv_set", key, correlation_id)
    request = (opts or SetKeyRequestBuilder()).key(key).value(value).build()
    return await api.exec_with_result(client, request, correlation_id)


async def set_json(
    client: ProtocolConsulClient,
    key: str,
    value: object,
    opts: SetKeyRequestBuilder | None = None,
) -> ModelApiResponse[bool]:
    """Encode ``value`` as JSON and store it at the given key.

    Pydantic models, dataclasses and plain JSON-compatible values are
    supported.

    Raises:
        JsonSerializeError: If ``value`` cannot be encoded. No request is sent.
    """
    correlation_id = uuid4()
    _log_operation("kv_set_json", key, correlation_id)
    try:
        # Non-finite floats are written as null so the stored bytes stay valid JSON.
        encoded = to_json(value, inf_nan_mode="null")
    except (PydanticSerializationError, TypeError, ValueError) as e:
        raise JsonSerializeError(
            f"Cannot encode value for {key!r} as JSON: {type(e).__name__}",
            context=_context(client, "kv_set_json", correlation_id),
            key=key,
        ) from e
    request = (opts or SetKeyRequestBuilder()).key(key).value(encoded).build()
    return await api.exec_with_result(client, request, correlation_id)


__all__: list[str] = [
    "delete",
    "keys",
    "read",
    "read_json",
    "read_json_raw",
    "read_raw",
    "set",
    "set_json",
]
