# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Consul Response Metadata Model.

Consul reports query metadata in response headers rather than the body.
This module parses those headers into a single reusable model attached
to every ModelApiResponse.

Header Mapping:
    X-Consul-Index              -> index
    X-Cache                     -> cache (HIT/MISS)
    X-Consul-KnownLeader        -> known_leader
    X-Consul-LastContact        -> last_contact (milliseconds)
    X-Consul-Query-Backend      -> query_backend
    X-Consul-ContentHash        -> content_hash
    X-Consul-Default-ACL-Policy -> default_acl_policy
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import timedelta

from pydantic import BaseModel, ConfigDict, Field

from consul_kv.enums import EnumAclPolicy, EnumQueryBackend

logger = logging.getLogger(__name__)

HEADER_INDEX = "x-consul-index"
HEADER_CACHE = "x-cache"
HEADER_KNOWN_LEADER = "x-consul-knownleader"
HEADER_LAST_CONTACT = "x-consul-lastcontact"
HEADER_QUERY_BACKEND = "x-consul-query-backend"
HEADER_CONTENT_HASH = "x-consul-contenthash"
HEADER_DEFAULT_ACL_POLICY = "x-consul-default-acl-policy"


def _lower_keys(headers: Mapping[str, str]) -> dict[str, str]:
    return {name.lower(): value for name, value in headers.items()}


def _parse_int(name: str, raw: str | None) -> int | None:
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.debug(
            "Ignoring unparsable Consul header",
            extra={"header": name, "raw_value": raw},
        )
        return None


def _parse_bool(name: str, raw: str | None, true: str, false: str) -> bool | None:
    if raw is None:
        return None
    normalized = raw.strip().lower()
    if normalized == true:
        return True
    if normalized == false:
        return False
    logger.debug(
        "Ignoring unparsable Consul header",
        extra={"header": name, "raw_value": raw},
    )
    return None


class ModelResponseMetadata(BaseModel):
    """Query metadata reported by Consul alongside a response.

    Attributes:
        index: Raft index of the data returned (for blocking queries)
        cache: True on an agent cache hit, False on a miss, None if not cached
        known_leader: Whether the cluster had a known leader
        last_contact: Time since the serving server last heard from the leader
        query_backend: Backend that served the query
        content_hash: Hash of the response content (hash-based blocking)
        default_acl_policy: Default ACL policy of the agent
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    index: int | None = Field(default=None, ge=0)
    cache: bool | None = None
    known_leader: bool | None = None
    last_contact: timedelta | None = None
    query_backend: EnumQueryBackend | None = None
    content_hash: str | None = None
    default_acl_policy: EnumAclPolicy | None = None

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> ModelResponseMetadata:
        """Parse response headers into metadata.

        Header names are matched case-insensitively. Missing headers and
        values that do not parse become None.

        Args:
            headers: Response headers (e.g. ``httpx.Response.headers``)

        Returns:
            Parsed metadata.
        """
        lowered = _lower_keys(headers)

        last_contact_ms = _parse_int(
            HEADER_LAST_CONTACT, lowered.get(HEADER_LAST_CONTACT)
        )

        query_backend: EnumQueryBackend | None = None
        raw_backend = lowered.get(HEADER_QUERY_BACKEND)
        if raw_backend is not None:
            try:
                query_backend = EnumQueryBackend(raw_backend.strip().lower())
            except ValueError:
                logger.debug(
                    "Ignoring unknown Consul query backend",
                    extra={"header": HEADER_QUERY_BACKEND, "raw_value": raw_backend},
                )

        acl_policy: EnumAclPolicy | None = None
        raw_policy = lowered.get(HEADER_DEFAULT_ACL_POLICY)
        if raw_policy is not None:
            try:
                acl_policy = EnumAclPolicy(raw_policy.strip().lower())
            except ValueError:
                logger.debug(
                    "Ignoring unknown Consul ACL policy",
                    extra={"header": HEADER_DEFAULT_ACL_POLICY, "raw_value": raw_policy},
                )

        index = _parse_int(HEADER_INDEX, lowered.get(HEADER_INDEX))

        return cls(
            index=index if index is None or index >= 0 else None,
            cache=_parse_bool(HEADER_CACHE, lowered.get(HEADER_CACHE), "hit", "miss"),
            known_leader=_parse_bool(
                HEADER_KNOWN_LEADER, lowered.get(HEADER_KNOWN_LEADER), "true", "false"
            ),
            last_contact=(
                timedelta(milliseconds=last_contact_ms)
                if last_contact_ms is not None
                else None
            ),
            query_backend=query_backend,
            content_hash=lowered.get(HEADER_CONTENT_HASH) or None,
            default_acl_policy=acl_policy,
        )


__all__: list[str] = ["ModelResponseMetadata"]
