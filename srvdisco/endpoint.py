"""Endpoint value type and its string renderings."""

from __future__ import annotations

from dataclasses import dataclass

from .resolver import ServiceTarget


def join_host_port(host: str, port: int) -> str:
    """Combine host and port, bracketing hosts that contain a colon (IPv6)."""
    if ":" in host:
        return f"[{host}]:{port}"
    return f"{host}:{port}"


@dataclass(frozen=True)
class Endpoint:
    """
    A discovered service location.

    Hostnames and ports are kept verbatim: a trailing dot stays, and port 0
    renders as ``0``.

    Example:
        endpoint = Endpoint(scheme="https", hostname="host.example.com", port=8080)
        endpoint.url        # "https://host.example.com:8080"
        endpoint.host_port  # "host.example.com:8080"
    """

    scheme: str
    hostname: str
    port: int

    @classmethod
    def from_target(cls, target: ServiceTarget, scheme: str) -> Endpoint:
        """Build an endpoint from one SRV target."""
        return cls(scheme=scheme, hostname=target.hostname, port=target.port)

    @property
    def host_port(self) -> str:
        """Get address as host:port."""
        return join_host_port(self.hostname, self.port)

    @property
    def url(self) -> str:
        """Get the endpoint as scheme://host:port."""
        return f"{self.scheme}://{self.host_port}"

    def __str__(self) -> str:
        return self.url


def render_url(endpoint: Endpoint) -> str:
    return endpoint.url


def render_host_port(endpoint: Endpoint) -> str:
    return endpoint.host_port


def render_hostname(endpoint: Endpoint) -> str:
    return endpoint.hostname
