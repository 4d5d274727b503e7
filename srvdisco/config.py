"""Discovery settings loaded from environment variables."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


class DiscoverySettings(BaseSettings):
    """Settings for SRV discovery.

    All settings use the SRVDISCO_ prefix.

    Environment Variables:
        SRVDISCO_PROTOCOL: Transport label in the SRV name (default: tcp)
        SRVDISCO_DEFAULT_SCHEME: Scheme used by discover() when none is given (default: http)
        SRVDISCO_NAMESERVERS: JSON list of nameserver IPs (default: system configuration)
        SRVDISCO_DNS_PORT: Nameserver port (default: 53)
        SRVDISCO_LIFETIME: Total seconds the resolver may spend on one query (default: resolver default)
        SRVDISCO_SEARCH: Apply the resolver search list to relative domains (default: false)
        SRVDISCO_LOG_LEVEL: DEBUG/INFO/WARNING/ERROR (default: INFO)

    Example:
        export SRVDISCO_NAMESERVERS='["10.0.0.2"]'
        export SRVDISCO_LIFETIME=2.5

        from srvdisco import DiscoverySettings
        settings = DiscoverySettings()
    """

    model_config = SettingsConfigDict(
        env_prefix="SRVDISCO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    protocol: str = Field(
        default="tcp",
        description="Transport label used in the SRV owner name",
    )
    default_scheme: str = Field(
        default="http",
        description="URL scheme used when discover() is called without one",
    )
    nameservers: list[str] = Field(
        default_factory=list,
        description="Nameserver addresses; empty uses the system resolver configuration",
    )
    dns_port: int = Field(
        default=53,
        ge=1,
        le=65535,
        description="Port the nameservers listen on",
    )
    lifetime: float | None = Field(
        default=None,
        gt=0,
        description="Total time in seconds the resolver may spend on one lookup",
    )
    search: bool = Field(
        default=False,
        description="Apply the resolver search list to relative domain names",
    )
    log_level: str = Field(
        default="INFO",
        description="Level used by configure_logging() when none is passed",
    )

    def get_log_level(self) -> int:
        """Map log_level to a logging module level, falling back to INFO."""
        return _LOG_LEVELS.get(self.log_level.upper(), logging.INFO)

    def model_post_init(self, __context: Any) -> None:
        """Validate settings after initialization."""
        if not self.protocol:
            raise ValueError("SRV protocol label is required")
        if not self.default_scheme:
            raise ValueError("Default URL scheme is required")
