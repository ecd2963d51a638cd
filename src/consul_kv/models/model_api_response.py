# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Generic API response envelope."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from consul_kv.models.model_response_metadata import ModelResponseMetadata

T = TypeVar("T")
U = TypeVar("U")


class ModelApiResponse(BaseModel, Generic[T]):
    """A decoded Consul response payload with the query metadata that came with it.

    Attributes:
        response: The decoded payload (bool, bytes, list of pairs, ...)
        metadata: Header-derived query metadata

    Example:
        >>> res = await kv.read(client, "app/config")
        >>> res.response[0].value
        b'...'
        >>> res.metadata.index
        42
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
    )

    response: T
    metadata: ModelResponseMetadata = Field(default_factory=ModelResponseMetadata)

    def with_response(self, response: U) -> ModelApiResponse[U]:
        """Return a new envelope holding ``response`` and this envelope's metadata."""
        return ModelApiResponse(response=response, metadata=self.metadata)


__all__: list[str] = ["ModelApiResponse"]
