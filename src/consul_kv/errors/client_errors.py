# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Client Error Classes.

This module defines the errors raised by the consul_kv package.

Error Hierarchy:
    ClientError (base client error)
    ├── RequestBuildError
    ├── ConsulConnectionError
    │   └── ConsulTimeoutError
    ├── ConsulApiError
    │   └── ConsulAuthenticationError
    ├── ResponseDecodeError
    ├── EmptyResponseError
    ├── JsonDeserializeError
    └── JsonSerializeError

All errors:
    - Use EnumClientErrorCode for error classification
    - Support proper error chaining with `raise ... from e`
    - Include structured context for debugging
    - Support correlation IDs for request tracking
    - Accept ModelClientErrorContext for bundled context parameters
"""

from __future__ import annotations

from uuid import UUID

from consul_kv.enums import EnumClientErrorCode
from consul_kv.errors.model_client_error_context import ModelClientErrorContext


class ClientError(Exception):
    """Base class for every error raised by the consul_kv package.

    Structured Fields (via ModelClientErrorContext):
        operation: Operation being performed
        target_name: Target endpoint name
        correlation_id: Request correlation ID for tracking

    Example:
        >>> context = ModelClientErrorContext(
        ...     operation="kv_read",
        ...     target_name="http://127.0.0.1:8500",
        ... )
        >>> raise ClientError("Operation failed", context=context, key="app/config")
    """

    def __init__(
        self,
        message: str,
        error_code: EnumClientErrorCode | None = None,
        context: ModelClientErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        """Initialize ClientError with structured fields.

        Args:
            message: Human-readable error message
            error_code: Error code (defaults to OPERATION_FAILED)
            context: Bundled client context (operation, target_name, ...)
            **extra_context: Additional context information
        """
        super().__init__(message)
        self.message: str = message
        self.error_code: EnumClientErrorCode = (
            error_code or EnumClientErrorCode.OPERATION_FAILED
        )
        self.correlation_id: UUID | None = None

        structured_context: dict[str, object] = dict(extra_context)
        if context is not None:
            if context.operation is not None:
                structured_context["operation"] = context.operation
            if context.target_name is not None:
                structured_context["target_name"] = context.target_name
            self.correlation_id = context.correlation_id
        self.context: dict[str, object] = structured_context

    def __str__(self) -> str:
        return f"[{self.error_code.value}] {self.message}"


class RequestBuildError(ClientError):
    """Raised when a request builder cannot produce a request.

    Used when the key was never set or when options are combined in a way
    the operation does not support (e.g. ``recurse`` on a single-value read).
    """

    def __init__(
        self,
        message: str,
        context: ModelClientErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumClientErrorCode.INVALID_REQUEST,
            context=context,
            **extra_context,
        )


class ConsulConnectionError(ClientError):
    """Raised when the transport cannot reach the Consul agent.

    Example:
        >>> raise ConsulConnectionError(
        ...     "Failed to connect to Consul",
        ...     context=context,
        ...     host="consul.example.com",
        ...     port=8500,
        ... )
    """

    def __init__(
        self,
        message: str,
        context: ModelClientErrorContext | None = None,
        error_code: EnumClientErrorCode | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code or EnumClientErrorCode.CONNECTION_ERROR,
            context=context,
            **extra_context,
        )


class ConsulTimeoutError(ConsulConnectionError):
    """Raised when a request to the Consul agent times out."""

    def __init__(
        self,
        message: str,
        context: ModelClientErrorContext | None = None,
        timeout_seconds: float | None = None,
        **extra_context: object,
    ) -> None:
        """Initialize ConsulTimeoutError.

        Args:
            message: Human-readable error message
            context: Bundled client context
            timeout_seconds: Configured timeout that elapsed
            **extra_context: Additional context information
        """
        if timeout_seconds is not None:
            extra_context["timeout_seconds"] = timeout_seconds
        super().__init__(
            message=message,
            context=context,
            error_code=EnumClientErrorCode.TIMEOUT,
            **extra_context,
        )


class ConsulApiError(ClientError):
    """Raised when Consul answers with a non-success HTTP status.

    Attributes:
        status_code: HTTP status code returned by Consul
        response_body: Sanitized response body snippet
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        response_body: str = "",
        context: ModelClientErrorContext | None = None,
        error_code: EnumClientErrorCode | None = None,
        **extra_context: object,
    ) -> None:
        self.status_code: int = status_code
        self.response_body: str = response_body
        super().__init__(
            message=message,
            error_code=error_code or EnumClientErrorCode.API_ERROR,
            context=context,
            status_code=status_code,
            response_body=response_body,
            **extra_context,
        )


class ConsulAuthenticationError(ConsulApiError):
    """Raised when Consul rejects the request's ACL token (401/403)."""

    def __init__(
        self,
        message: str,
        status_code: int,
        response_body: str = "",
        context: ModelClientErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            status_code=status_code,
            response_body=response_body,
            context=context,
            error_code=EnumClientErrorCode.AUTHENTICATION_FAILED,
            **extra_context,
        )


class ResponseDecodeError(ClientError):
    """Raised when a response body does not match the expected envelope."""

    def __init__(
        self,
        message: str,
        context: ModelClientErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumClientErrorCode.RESPONSE_DECODE_ERROR,
            context=context,
            **extra_context,
        )


class EmptyResponseError(ClientError):
    """Raised when a typed read finds no value to decode.

    Raised by ``read_json`` when Consul returns zero pairs (or a pair with
    a null value) and by ``read_json_raw`` when the raw body is empty.
    """

    def __init__(
        self,
        message: str = "The request returned an empty response",
        context: ModelClientErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumClientErrorCode.EMPTY_RESPONSE,
            context=context,
            **extra_context,
        )


class JsonDeserializeError(ClientError):
    """Raised when stored bytes are not valid JSON for the requested type.

    The underlying parse error is available as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        context: ModelClientErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumClientErrorCode.JSON_DESERIALIZE_ERROR,
            context=context,
            **extra_context,
        )


class JsonSerializeError(ClientError):
    """Raised when a value cannot be encoded as JSON before ``set_json``."""

    def __init__(
        self,
        message: str,
        context: ModelClientErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumClientErrorCode.JSON_SERIALIZE_ERROR,
            context=context,
            **extra_context,
        )


__all__: list[str] = [
    "ClientError",
    "ConsulApiError",
    "ConsulAuthenticationError",
    "ConsulConnectionError",
    "ConsulTimeoutError",
    "EmptyResponseError",
    "JsonDeserializeError",
    "JsonSerializeError",
    "RequestBuildError",
    "ResponseDecodeError",
]
