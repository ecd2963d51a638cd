# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""consul_kv Errors Module.

Exports:
    ModelClientErrorContext: Configuration model for bundled error context
    ClientError: Base client error class
    RequestBuildError: Request builder errors
    ConsulConnectionError: Transport errors
    ConsulTimeoutError: Transport timeouts
    ConsulApiError: Non-success HTTP status from Consul
    ConsulAuthenticationError: ACL token rejected by Consul
    ResponseDecodeError: Malformed response envelope
    EmptyResponseError: Typed read found no value
    JsonDeserializeError: Stored payload is not valid JSON for the target type
    JsonSerializeError: Value could not be encoded as JSON

Error Sanitization Guidelines:
    NEVER include in error messages or context:
        - ACL tokens
        - Stored KV values

    SAFE to include:
        - Keys and operation names
        - Agent addresses
        - Correlation IDs
        - HTTP status codes and sanitized response bodies
"""

from consul_kv.errors.client_errors import (
    ClientError,
    ConsulApiError,
    ConsulAuthenticationError,
    ConsulConnectionError,
    ConsulTimeoutError,
    EmptyResponseError,
    JsonDeserializeError,
    JsonSerializeError,
    RequestBuildError,
    ResponseDecodeError,
)
from consul_kv.errors.model_client_error_context import ModelClientErrorContext

__all__: list[str] = [
    # Configuration model
    "ModelClientErrorContext",
    # Error classes
    "ClientError",
    "RequestBuildError",
    "ConsulConnectionError",
    "ConsulTimeoutError",
    "ConsulApiError",
    "ConsulAuthenticationError",
    "ResponseDecodeError",
    "EmptyResponseError",
    "JsonDeserializeError",
    "JsonSerializeError",
]
