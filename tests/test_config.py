"""Tests for DiscoverySettings."""

from __future__ import annotations

import logging

import pytest

from srvdisco import DiscoverySettings


class TestDiscoverySettings:
    """Tests for DiscoverySettings."""

    def test_default_values(self) -> None:
        """DiscoverySettings should have sensible defaults."""
        settings = DiscoverySettings()

        assert settings.protocol == "tcp"
        assert settings.default_scheme == "http"
        assert settings.nameservers == []
        assert settings.dns_port == 53
        assert settings.lifetime is None
        assert settings.search is False
        assert settings.get_log_level() == logging.INFO

    def test_loads_from_env_vars(self, monkeypatch) -> None:
        """DiscoverySettings should load from environment variables."""
        monkeypatch.setenv("SRVDISCO_PROTOCOL", "udp")
        monkeypatch.setenv("SRVDISCO_DEFAULT_SCHEME", "https")
        monkeypatch.setenv("SRVDISCO_NAMESERVERS", '["10.0.0.2", "10.0.0.3"]')
        monkeypatch.setenv("SRVDISCO_DNS_PORT", "5353")
        monkeypatch.setenv("SRVDISCO_LIFETIME", "2.5")
        monkeypatch.setenv("SRVDISCO_SEARCH", "true")
        monkeypatch.setenv("SRVDISCO_LOG_LEVEL", "debug")

        settings = DiscoverySettings()

        assert settings.protocol == "udp"
        assert settings.default_scheme == "https"
        assert settings.nameservers == ["10.0.0.2", "10.0.0.3"]
        assert settings.dns_port == 5353
        assert settings.lifetime == 2.5
        assert settings.search is True
        assert settings.get_log_level() == logging.DEBUG

    def test_env_prefix(self, monkeypatch) -> None:
        """DiscoverySettings should use the SRVDISCO_ prefix."""
        monkeypatch.setenv("SRVDISCO_DEFAULT_SCHEME", "grpc")
        # Set without prefix (should be ignored)
        monkeypatch.setenv("DEFAULT_SCHEME", "ftp")

        settings = DiscoverySettings()

        assert settings.default_scheme == "grpc"

    def test_unknown_log_level_falls_back_to_info(self) -> None:
        settings = DiscoverySettings(log_level="chatty")

        assert settings.get_log_level() == logging.INFO

    @pytest.mark.parametrize("port", [0, 70000])
    def test_rejects_invalid_port(self, port: int) -> None:
        with pytest.raises(ValueError):
            DiscoverySettings(dns_port=port)

    def test_rejects_non_positive_lifetime(self) -> None:
        with pytest.raises(ValueError):
            DiscoverySettings(lifetime=0)

    def test_rejects_empty_protocol(self) -> None:
        with pytest.raises(ValueError, match="protocol"):
            DiscoverySettings(protocol="")

    def test_rejects_empty_scheme(self) -> None:
        with pytest.raises(ValueError, match="scheme"):
            DiscoverySettings(default_scheme="")
