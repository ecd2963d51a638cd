# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Consul KV Pair Models.

This module provides the models for entries returned by ``GET /v1/kv/<key>``.

Consul returns entries as PascalCase JSON with the value base64 encoded::

    {
        "CreateIndex": 100,
        "ModifyIndex": 200,
        "LockIndex": 0,
        "Key": "app/config",
        "Flags": 0,
        "Value": "dGVzdA==",
        "Session": null
    }

``ModelKVPair`` decodes the value to bytes. ``ModelGenericKVPair`` carries the
same store metadata with the value already decoded into a caller type.
"""

from __future__ import annotations

import base64
import binascii
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

T = TypeVar("T")


class ModelKVPairMetadata(BaseModel):
    """Store-assigned metadata shared by raw and typed KV pairs.

    Attributes:
        key: Full key path
        create_index: Raft index at which the key was created
        modify_index: Raft index of the last modification
        lock_index: Number of times the key was acquired by a session lock
        flags: Opaque client-defined 64-bit flags
        namespace: Consul Enterprise namespace, if any
        session: Session holding the lock on the key, if any
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    key: str = Field(alias="Key")
    create_index: int = Field(default=0, ge=0, alias="CreateIndex")
    modify_index: int = Field(default=0, ge=0, alias="ModifyIndex")
    lock_index: int = Field(default=0, ge=0, alias="LockIndex")
    flags: int = Field(default=0, ge=0, alias="Flags")
    namespace: str | None = Field(default=None, alias="Namespace")
    session: str | None = Field(default=None, alias="Session")


class ModelKVPair(ModelKVPairMetadata):
    """A KV entry as stored by Consul, with its value decoded to bytes.

    Example:
        >>> pair = ModelKVPair.model_validate({"Key": "test", "Value": "dGVzdA=="})
        >>> pair.value
        b'test'
    """

    value: bytes | None = Field(default=None, alias="Value")

    @field_validator("value", mode="before")
    @classmethod
    def _decode_base64(cls, value: object) -> object:
        # Wire values are base64 strings; bytes are taken as already decoded.
        if isinstance(value, str):
            try:
                return base64.b64decode(value, validate=True)
            except binascii.Error as e:
                raise ValueError(f"Value is not valid base64: {e}") from e
        return value


class ModelGenericKVPair(ModelKVPairMetadata, Generic[T]):
    """A KV entry whose value was deserialized into a caller-chosen type."""

    value: T

    @classmethod
    def from_kv_pair(cls, pair: ModelKVPair, value: T) -> ModelGenericKVPair[T]:
        """Copy the metadata of ``pair`` onto a new typed pair holding ``value``."""
        return cls(
            value=value,
            **pair.model_dump(exclude={"value"}),
        )


__all__: list[str] = [
    "ModelGenericKVPair",
    "ModelKVPair",
    "ModelKVPairMetadata",
]
