# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Tests for ModelConsulClientSettings."""

from __future__ import annotations

import pytest
from pydantic import SecretStr, ValidationError

from consul_kv.models import DEFAULT_CONSUL_ADDRESS, ModelConsulClientSettings


class TestModelConsulClientSettings:
    """Tests for construction and validation."""

    def test_default_values(self) -> None:
        settings = ModelConsulClientSettings()
        assert settings.address == DEFAULT_CONSUL_ADDRESS
        assert settings.token is None
        assert settings.verify_ssl is True
        assert settings.timeout_seconds == 30.0

    def test_address_without_scheme_gets_http(self) -> None:
        settings = ModelConsulClientSettings(address="consul.local:8500")
        assert settings.address == "http://consul.local:8500"

    def test_trailing_slash_is_stripped(self) -> None:
        settings = ModelConsulClientSettings(address="https://consul.local:8501/")
        assert settings.address == "https://consul.local:8501"

    def test_unsupported_scheme_is_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ModelConsulClientSettings(address="ftp://consul.local")
        assert "address" in str(exc_info.value)

    def test_empty_address_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ModelConsulClientSettings(address="  ")

    def test_timeout_bounds(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ModelConsulClientSettings(timeout_seconds=0.0)
        assert "timeout_seconds" in str(exc_info.value)

    def test_token_is_not_exposed_in_repr(self) -> None:
        settings = ModelConsulClientSettings(token=SecretStr("super-secret-token"))
        assert "super-secret-token" not in repr(settings)
        assert "super-secret-token" not in str(settings.model_dump())


class TestModelConsulClientSettingsFromEnv:
    """Tests for from_env()."""

    def test_empty_env_uses_defaults(self) -> None:
        settings = ModelConsulClientSettings.from_env({})
        assert settings == ModelConsulClientSettings()

    def test_reads_consul_variables(self) -> None:
        settings = ModelConsulClientSettings.from_env(
            {
                "CONSUL_HTTP_ADDR": "consul.example.com:8500",
                "CONSUL_HTTP_TOKEN": "acl-token",
                "CONSUL_HTTP_SSL_VERIFY": "false",
                "CONSUL_CACERT": "/etc/consul/ca.pem",
                "CONSUL_CLIENT_CERT": "/etc/consul/client.pem",
                "CONSUL_CLIENT_KEY": "/etc/consul/client-key.pem",
            }
        )
        assert settings.address == "http://consul.example.com:8500"
        assert settings.token is not None
        assert settings.token.get_secret_value() == "acl-token"
        assert settings.verify_ssl is False
        assert settings.ca_cert == "/etc/consul/ca.pem"
        assert settings.client_cert == "/etc/consul/client.pem"
        assert settings.client_key == "/etc/consul/client-key.pem"

    def test_ssl_flag_selects_https(self) -> None:
        settings = ModelConsulClientSettings.from_env(
            {"CONSUL_HTTP_ADDR": "consul.example.com:8501", "CONSUL_HTTP_SSL": "true"}
        )
        assert settings.address == "https://consul.example.com:8501"

    def test_explicit_scheme_wins_over_ssl_flag(self) -> None:
        settings = ModelConsulClientSettings.from_env(
            {"CONSUL_HTTP_ADDR": "http://consul:8500", "CONSUL_HTTP_SSL": "true"}
        )
        assert settings.address == "http://consul:8500"

    def test_invalid_boolean_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="CONSUL_HTTP_SSL_VERIFY"):
            ModelConsulClientSettings.from_env({"CONSUL_HTTP_SSL_VERIFY": "perhaps"})

    def test_reads_os_environ_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CONSUL_HTTP_ADDR", "http://env-consul:8500")
        monkeypatch.delenv("CONSUL_HTTP_TOKEN", raising=False)
        settings = ModelConsulClientSettings.from_env()
        assert settings.address == "http://env-consul:8500"
        assert settings.token is None
