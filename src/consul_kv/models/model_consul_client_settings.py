# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Consul Client Settings Model.

This module provides the Pydantic configuration model for ConsulClient.

Security Note:
    The token field uses SecretStr to prevent accidental logging of the
    ACL token. Tokens should come from the environment (CONSUL_HTTP_TOKEN),
    never from committed configuration files.

Environment Variables (read by ``from_env``):
    CONSUL_HTTP_ADDR: Agent address (default: http://127.0.0.1:8500)
    CONSUL_HTTP_TOKEN: ACL token
    CONSUL_HTTP_SSL: Use https when the address has no scheme ("true"/"false")
    CONSUL_HTTP_SSL_VERIFY: Verify TLS certificates ("true"/"false")
    CONSUL_CACERT: CA certificate file
    CONSUL_CLIENT_CERT: Client certificate file (mutual TLS)
    CONSUL_CLIENT_KEY: Client key file (mutual TLS)
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

DEFAULT_CONSUL_ADDRESS = "http://127.0.0.1:8500"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _env_flag(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    normalized = raw.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


class ModelConsulClientSettings(BaseModel):
    """Configuration for ConsulClient.

    Attributes:
        address: Consul agent URL; a bare ``host:port`` gets ``http://``
        token: ACL token sent as ``X-Consul-Token`` (SecretStr)
        verify_ssl: Whether to verify TLS certificates (default True)
        ca_cert: Path to a CA bundle used to verify the agent
        client_cert: Path to a client certificate for mutual TLS
        client_key: Path to the client certificate's key
        timeout_seconds: Per-request timeout in seconds (0.1-600.0, default 30.0)

    Example:
        >>> settings = ModelConsulClientSettings(
        ...     address="https://consul.example.com:8501",
        ...     token=SecretStr("acl-token"),
        ... )
        >>> print(settings.token)
        **********
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    address: str = Field(
        default=DEFAULT_CONSUL_ADDRESS,
        description="Consul agent URL (e.g., 'http://127.0.0.1:8500')",
    )
    token: SecretStr | None = Field(
        default=None,
        description="ACL token (SecretStr for security)",
    )
    verify_ssl: bool = Field(
        default=True,
        description="Whether to verify TLS certificates",
    )
    ca_cert: str | None = Field(
        default=None,
        description="Path to a CA certificate bundle",
    )
    client_cert: str | None = Field(
        default=None,
        description="Path to a client certificate for mutual TLS",
    )
    client_key: str | None = Field(
        default=None,
        description="Path to the client certificate key",
    )
    timeout_seconds: float = Field(
        default=30.0,
        ge=0.1,
        le=600.0,
        description="Per-request timeout in seconds",
    )

    @field_validator("address")
    @classmethod
    def _normalize_address(cls, value: str) -> str:
        address = value.strip().rstrip("/")
        if not address:
            raise ValueError("address must not be empty")
        if "://" not in address:
            address = f"http://{address}"
        scheme = address.split("://", 1)[0].lower()
        if scheme not in ("http", "https"):
            raise ValueError(f"address scheme must be http or https, got {scheme!r}")
        return address

    @classmethod
    def from_env(
        cls, env: Mapping[str, str] | None = None
    ) -> ModelConsulClientSettings:
        """Build settings from the standard Consul CLI environment variables.

        Args:
            env: Mapping to read from (defaults to ``os.environ``)

        Returns:
            Settings with unset variables left at their defaults.

        Raises:
            ValueError: If a boolean variable holds an unrecognized value.
            pydantic.ValidationError: If the resulting settings are invalid.
        """
        env = os.environ if env is None else env
        values: dict[str, object] = {}

        address = env.get("CONSUL_HTTP_ADDR", "").strip()
        if address:
            if "://" not in address and _env_flag(env, "CONSUL_HTTP_SSL", False):
                address = f"https://{address}"
            values["address"] = address

        token = env.get("CONSUL_HTTP_TOKEN", "").strip()
        if token:
            values["token"] = SecretStr(token)

        values["verify_ssl"] = _env_flag(env, "CONSUL_HTTP_SSL_VERIFY", True)

        for env_name, field_name in (
            ("CONSUL_CACERT", "ca_cert"),
            ("CONSUL_CLIENT_CERT", "client_cert"),
            ("CONSUL_CLIENT_KEY", "client_key"),
        ):
            path = env.get(env_name, "").strip()
            if path:
                values[field_name] = path

        return cls(**values)


__all__: list[str] = ["DEFAULT_CONSUL_ADDRESS", "ModelConsulClientSettings"]
