# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Client Error Context Model.

This module defines the model bundling the structured fields shared by
every consul_kv error, keeping error ``__init__`` signatures short while
staying strongly typed.
"""

from __future__ import annotations

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class ModelClientErrorContext(BaseModel):
    """Structured context attached to client errors.

    Attributes:
        operation: Operation being performed (kv_read, kv_set, ...)
        target_name: Target endpoint, usually the Consul agent address
        correlation_id: Request correlation ID for tracing

    Example:
        >>> context = ModelClientErrorContext(
        ...     operation="kv_read",
        ...     target_name="http://127.0.0.1:8500",
        ...     correlation_id=uuid4(),
        ... )
        >>> raise ConsulConnectionError("Connection refused", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    operation: str | None = Field(
        default=None,
        description="Operation being performed (kv_read, kv_set, ...)",
    )
    target_name: str | None = Field(
        default=None,
        description="Target endpoint or resource name",
    )
    correlation_id: UUID | None = Field(
        default=None,
        description="Request correlation ID for tracing",
    )

    @classmethod
    def with_correlation(
        cls,
        correlation_id: UUID | None = None,
        **kwargs: str | None,
    ) -> ModelClientErrorContext:
        """Create a context, generating a correlation ID when none is given.

        Args:
            correlation_id: Existing correlation ID to propagate.
            **kwargs: Remaining context fields (operation, target_name).

        Returns:
            A context whose correlation_id is never None.
        """
        return cls(correlation_id=correlation_id or uuid4(), **kwargs)


__all__ = ["ModelClientErrorContext"]
