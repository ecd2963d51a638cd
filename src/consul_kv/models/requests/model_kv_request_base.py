# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Base classes for Consul KV request descriptors and their builders.

A request descriptor is an immutable pydantic model describing one call to
a ``/v1/kv/<key>`` endpoint: HTTP method, path, query parameters, body and
the payload type the response decodes to.

A builder is a mutable, per-call object collecting the descriptor's fields
through fluent setters. ``build()`` validates the collected fields and
returns the descriptor, raising RequestBuildError when the key was never
set or a field is invalid.

Example:
    >>> request = ReadKeyRequestBuilder().key("app/config").recurse().build()
    >>> request.path()
    '/v1/kv/app/config'
    >>> request.query_params()
    [('recurse', '')]
"""

from __future__ import annotations

from typing import ClassVar, Generic, Self, TypeVar
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from consul_kv.enums import EnumConsistencyMode
from consul_kv.errors import RequestBuildError

KV_API_PREFIX = "/v1/kv/"

RequestT = TypeVar("RequestT", bound="ModelKVRequestBase")


class ModelKVRequestBase(BaseModel):
    """Fields and wire mapping shared by every KV request.

    Attributes:
        key: Key (or key prefix) the request targets
        dc: Datacenter to query (defaults to the agent's datacenter)
        ns: Consul Enterprise namespace
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    http_method: ClassVar[str] = "GET"
    response_type: ClassVar[object] = object
    # Payload used in place of a 404 body; None means 404 is an error.
    missing_key_payload: ClassVar[bytes | None] = None

    key: str
    dc: str | None = None
    ns: str | None = None

    @field_validator("key")
    @classmethod
    def _reject_dot_segments(cls, key: str) -> str:
        # URL normalization would collapse these and address a different key.
        if any(segment in (".", "..") for segment in key.split("/")):
            raise ValueError(f"key {key!r} contains a '.' or '..' path segment")
        return key

    def path(self) -> str:
        """URL path of the request, with the key quoted but ``/`` kept."""
        return KV_API_PREFIX + quote(self.key, safe="/")

    def query_params(self) -> list[tuple[str, str]]:
        """Query parameters as ordered ``(name, value)`` pairs.

        Valueless flags (``recurse``, ``raw``, ...) are sent with an empty
        value; Consul only checks for their presence.
        """
        params: list[tuple[str, str]] = []
        if self.dc is not None:
            params.append(("dc", self.dc))
        if self.ns is not None:
            params.append(("ns", self.ns))
        return params

    def body(self) -> bytes | None:
        """Request body, or None for body-less requests."""
        return None


class ModelKVReadRequestBase(ModelKVRequestBase):
    """Shared fields of read requests.

    Attributes:
        consistency: Read consistency mode
    """

    missing_key_payload: ClassVar[bytes | None] = b"[]"

    consistency: EnumConsistencyMode = EnumConsistencyMode.DEFAULT

    def query_params(self) -> list[tuple[str, str]]:
        params = super().query_params()
        if self.consistency != EnumConsistencyMode.DEFAULT:
            params.append((self.consistency.value, ""))
        return params


class KVRequestBuilderBase(Generic[RequestT]):
    """Mutable builder producing a ``RequestT`` descriptor.

    Fields may be given as keyword arguments or through the fluent setters;
    unknown field names raise RequestBuildError immediately.
    """

    request_type: ClassVar[type[ModelKVRequestBase]]

    def __init__(self, **fields: object) -> None:
        self._fields: dict[str, object] = {}
        for name, value in fields.items():
            self._set(name, value)

    def _set(self, name: str, value: object) -> Self:
        if name not in self.request_type.model_fields:
            raise RequestBuildError(
                f"{self.request_type.__name__} has no field {name!r}",
                field=name,
            )
        self._fields[name] = value
        return self

    def key(self, key: str) -> Self:
        return self._set("key", key)

    def dc(self, dc: str) -> Self:
        return self._set("dc", dc)

    def ns(self, ns: str) -> Self:
        return self._set("ns", ns)

    def get(self, name: str) -> object | None:
        """Return a field set on this builder, or None if unset."""
        return self._fields.get(name)

    def build(self) -> RequestT:
        """Validate the collected fields and return the request descriptor.

        Raises:
            RequestBuildError: If the key is unset or a field is invalid.
        """
        if "key" not in self._fields:
            raise RequestBuildError(
                f"Cannot build {self.request_type.__name__}: key is not set",
                field="key",
            )
        try:
            request = self.request_type.model_validate(self._fields)
        except ValidationError as e:
            raise RequestBuildError(
                f"Cannot build {self.request_type.__name__}: "
                f"{e.error_count()} invalid field(s)",
                fields=sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]}),
            ) from e
        return request  # type: ignore[return-value]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(sorted(self._fields))})"


class KVReadRequestBuilderBase(KVRequestBuilderBase[RequestT]):
    """Builder base adding the read consistency setter."""

    def consistency(self, mode: EnumConsistencyMode) -> Self:
        return self._set("consistency", mode)


__all__: list[str] = [
    "KV_API_PREFIX",
    "KVReadRequestBuilderBase",
    "KVRequestBuilderBase",
    "ModelKVReadRequestBase",
    "ModelKVRequestBase",
]

