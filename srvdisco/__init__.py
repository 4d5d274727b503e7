"""
srvdisco - DNS SRV service discovery.

Looks up ``_service._tcp.domain`` and turns the answer into URLs,
``host:port`` strings or hostnames, either collected in one call or
streamed as they are produced.

Example:
    from srvdisco import discover, discover_addrs_ports

    result = await discover("example.com", "api", "https")
    urls = result.raise_for_error()

    addresses = await discover_addrs_ports("example.com", "api")
"""

from .config import DiscoverySettings
from .discover import (
    DiscoveryResult,
    discover,
    discover_addrs,
    discover_addrs_ports,
    discover_addrs_ports_sync,
    discover_addrs_sync,
    discover_sync,
    drain,
)
from .endpoint import Endpoint, join_host_port, render_host_port, render_hostname, render_url
from .exceptions import LookupFailedError, SrvDiscoError, StreamClosedError
from .logging import configure_logging, get_logger
from .resolver import DNSResolver, ServiceTarget, SRVResolver, StaticResolver, srv_name
from .stream import DiscoveryStream, Done, Failed, Outcome, stream_discover

__all__ = [
    # Collecting discovery
    "discover",
    "discover_addrs",
    "discover_addrs_ports",
    "discover_sync",
    "discover_addrs_sync",
    "discover_addrs_ports_sync",
    "drain",
    "DiscoveryResult",
    # Streaming discovery
    "stream_discover",
    "DiscoveryStream",
    "Done",
    "Failed",
    "Outcome",
    # Endpoints
    "Endpoint",
    "join_host_port",
    "render_url",
    "render_host_port",
    "render_hostname",
    # Resolvers
    "SRVResolver",
    "DNSResolver",
    "StaticResolver",
    "ServiceTarget",
    "srv_name",
    # Configuration
    "DiscoverySettings",
    # Exceptions
    "SrvDiscoError",
    "LookupFailedError",
    "StreamClosedError",
    # Logging
    "configure_logging",
    "get_logger",
]

__version__ = "0.1.0"
