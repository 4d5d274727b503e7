"""
Collecting discovery functions.

Each function drains a DiscoveryStream to completion and returns every
endpoint rendered as a string, in resolver order, as a DiscoveryResult.
Lookup failures are reported on the result, never raised.

Example:
    result = await discover("example.com", "api", "https")
    if result.ok:
        for url in result:
            print(url)
    else:
        print("lookup failed:", result.error)
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Coroutine, Iterator
from dataclasses import dataclass, field
from typing import Any, TypeVar

from .config import DiscoverySettings
from .endpoint import Endpoint, render_host_port, render_hostname, render_url
from .exceptions import LookupFailedError
from .resolver import SRVResolver
from .stream import Failed, stream_discover

T = TypeVar("T")

Renderer = Callable[[Endpoint], str]

# Scheme used where only host or host:port is returned
_ADDRESS_SCHEME = "http"


@dataclass
class DiscoveryResult:
    """
    Endpoints collected from one discovery call.

    Attributes:
        endpoints: Rendered endpoints in resolver order.
        error: The lookup failure, or None on success.
    """

    endpoints: list[str] = field(default_factory=list)
    error: LookupFailedError | None = None

    @property
    def ok(self) -> bool:
        """True unless the lookup failed. Also the truth value of the result."""
        return self.error is None

    def raise_for_error(self) -> list[str]:
        """Return the endpoints, raising the lookup failure if there was one."""
        if self.error is not None:
            raise self.error
        return self.endpoints

    def __iter__(self) -> Iterator[str]:
        return iter(self.endpoints)

    def __len__(self) -> int:
        return len(self.endpoints)

    def __bool__(self) -> bool:
        # An empty successful answer is still a success
        return self.ok


async def drain(
    domain: str,
    service: str,
    scheme: str,
    render: Renderer,
    *,
    resolver: SRVResolver | None = None,
    settings: DiscoverySettings | None = None,
) -> DiscoveryResult:
    """
    Run one discovery and render every endpoint with ``render``.

    Args:
        domain: DNS domain to search.
        service: SRV service name.
        scheme: Scheme attached to each endpoint before rendering.
        render: Function turning an Endpoint into its string form.
        resolver: Resolver override.
        settings: Settings override.

    Returns:
        DiscoveryResult with all endpoints, or no endpoints and the error.
    """
    endpoints: list[str] = []
    async with stream_discover(
        domain, service, scheme, resolver=resolver, settings=settings
    ) as stream:
        async for endpoint in stream:
            endpoints.append(render(endpoint))

    outcome = stream.outcome
    if isinstance(outcome, Failed):
        return DiscoveryResult(error=outcome.error)
    return DiscoveryResult(endpoints=endpoints)


async def discover(
    domain: str,
    service: str,
    scheme: str | None = None,
    *,
    resolver: SRVResolver | None = None,
    settings: DiscoverySettings | None = None,
) -> DiscoveryResult:
    """
    Discover a service and return ``scheme://host:port`` URLs.

    ``scheme`` defaults to ``settings.default_scheme``.
    """
    if scheme is None:
        if settings is None:
            settings = DiscoverySettings()
        scheme = settings.default_scheme
    return await drain(domain, service, scheme, render_url, resolver=resolver, settings=settings)


async def discover_addrs(
    domain: str,
    service: str,
    *,
    resolver: SRVResolver | None = None,
    settings: DiscoverySettings | None = None,
) -> DiscoveryResult:
    """Discover a service and return bare hostnames."""
    return await drain(
        domain, service, _ADDRESS_SCHEME, render_hostname, resolver=resolver, settings=settings
    )


async def discover_addrs_ports(
    domain: str,
    service: str,
    *,
    resolver: SRVResolver | None = None,
    settings: DiscoverySettings | None = None,
) -> DiscoveryResult:
    """Discover a service and return ``host:port`` strings."""
    return await drain(
        domain, service, _ADDRESS_SCHEME, render_host_port, resolver=resolver, settings=settings
    )


# =============================================================================
# Blocking variants
# =============================================================================


def _run_blocking(coro: Coroutine[Any, Any, T]) -> T:
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        # No running loop - asyncio.run() handles the loop lifecycle
        return asyncio.run(coro)

    coro.close()
    raise RuntimeError(
        "Blocking discovery cannot run inside an event loop; await the async variant instead."
    )


def discover_sync(
    domain: str,
    service: str,
    scheme: str | None = None,
    *,
    resolver: SRVResolver | None = None,
    settings: DiscoverySettings | None = None,
) -> DiscoveryResult:
    """Blocking form of discover()."""
    return _run_blocking(
        discover(domain, service, scheme, resolver=resolver, settings=settings)
    )


def discover_addrs_sync(
    domain: str,
    service: str,
    *,
    resolver: SRVResolver | None = None,
    settings: DiscoverySettings | None = None,
) -> DiscoveryResult:
    """Blocking form of discover_addrs()."""
    return _run_blocking(discover_addrs(domain, service, resolver=resolver, settings=settings))


def discover_addrs_ports_sync(
    domain: str,
    service: str,
    *,
    resolver: SRVResolver | None = None,
    settings: DiscoverySettings | None = None,
) -> DiscoveryResult:
    """Blocking form of discover_addrs_ports()."""
    return _run_blocking(
        discover_addrs_ports(domain, service, resolver=resolver, settings=settings)
    )
