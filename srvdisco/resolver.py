"""
SRV resolver capability.

Defines the protocol the discovery engine consumes and two implementations:
DNSResolver (dnspython's asyncio resolver) and StaticResolver (fixed answers,
useful for tests and local development).
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

import dns.asyncresolver
import dns.rdatatype

from .config import DiscoverySettings
from .logging import get_logger

logger = get_logger("resolver")


# =============================================================================
# Lookup Result
# =============================================================================


@dataclass(frozen=True)
class ServiceTarget:
    """
    One target of an SRV answer.

    Attributes:
        hostname: Target host exactly as the resolver returned it.
        port: Target port.
        priority: SRV priority (informational, never used for ordering).
        weight: SRV weight (informational, never used for ordering).
    """

    hostname: str
    port: int
    priority: int = 0
    weight: int = 0


def srv_name(service: str, proto: str, domain: str) -> str:
    """Build the SRV owner name, e.g. ``_api._tcp.example.com``."""
    return f"_{service}._{proto}.{domain}"


# =============================================================================
# Resolver Protocol
# =============================================================================


@runtime_checkable
class SRVResolver(Protocol):
    """Protocol for objects that can perform an SRV lookup.

    Implementations return targets in answer order and raise on failure.
    """

    async def lookup_srv(self, service: str, proto: str, domain: str) -> list[ServiceTarget]:
        """Look up ``_service._proto.domain`` and return its targets."""
        ...


# =============================================================================
# dnspython Resolver
# =============================================================================


class DNSResolver:
    """
    SRV resolver backed by ``dns.asyncresolver``.

    The underlying dnspython resolver is created on first use, so building a
    DNSResolver never touches the system resolver configuration.

    Example:
        resolver = DNSResolver(nameservers=["10.0.0.2"], lifetime=2.0)
        targets = await resolver.lookup_srv("api", "tcp", "example.com")
    """

    def __init__(
        self,
        nameservers: Iterable[str] | None = None,
        port: int = 53,
        lifetime: float | None = None,
        search: bool = False,
    ):
        self.nameservers = list(nameservers or [])
        self.port = port
        self.lifetime = lifetime
        self.search = search
        self._resolver: dns.asyncresolver.Resolver | None = None

    @classmethod
    def from_settings(cls, settings: DiscoverySettings) -> DNSResolver:
        """Create a resolver from DiscoverySettings."""
        return cls(
            nameservers=settings.nameservers,
            port=settings.dns_port,
            lifetime=settings.lifetime,
            search=settings.search,
        )

    def _get_resolver(self) -> dns.asyncresolver.Resolver:
        if self._resolver is None:
            # configure=True reads /etc/resolv.conf, skip it when nameservers are pinned
            resolver = dns.asyncresolver.Resolver(configure=not self.nameservers)
            # Port first: string nameservers pick it up when they are enriched
            resolver.port = self.port
            if self.nameservers:
                resolver.nameservers = self.nameservers
            if self.lifetime is not None:
                resolver.lifetime = self.lifetime
            self._resolver = resolver
        return self._resolver

    async def lookup_srv(self, service: str, proto: str, domain: str) -> list[ServiceTarget]:
        """
        Resolve SRV records for a service.

        Targets are returned in the order of the answer section. Hostnames
        are absolute (trailing dot), as the system resolver reports them.

        Raises:
            dns.exception.DNSException: NXDOMAIN, NoAnswer, timeouts and
                every other resolution failure, unchanged.
        """
        qname = srv_name(service, proto, domain)
        logger.debug("Querying SRV %s", qname)

        answer = await self._get_resolver().resolve(
            qname,
            dns.rdatatype.SRV,
            search=self.search,
        )

        targets = [
            ServiceTarget(
                hostname=rdata.target.to_text(),
                port=rdata.port,
                priority=rdata.priority,
                weight=rdata.weight,
            )
            for rdata in answer
        ]
        logger.debug("SRV %s returned %d target(s)", qname, len(targets))
        return targets


# =============================================================================
# Static Resolver
# =============================================================================


class StaticResolver:
    """
    Resolver that answers from a fixed table.

    Keys are SRV owner names (``_api._tcp.example.com``). Unknown names,
    or a resolver built with ``error=...``, raise instead of answering.

    Example:
        resolver = StaticResolver({
            "_api._tcp.example.com": [ServiceTarget("a.example.com", 443)],
        })
    """

    def __init__(
        self,
        records: dict[str, list[ServiceTarget]] | None = None,
        error: BaseException | None = None,
    ):
        self.records = dict(records or {})
        self.error = error
        self.calls: list[tuple[str, str, str]] = []

    def add(self, service: str, proto: str, domain: str, *targets: ServiceTarget) -> None:
        """Register targets for a service."""
        self.records.setdefault(srv_name(service, proto, domain), []).extend(targets)

    async def lookup_srv(self, service: str, proto: str, domain: str) -> list[ServiceTarget]:
        """Return the registered targets, or raise the configured error."""
        self.calls.append((service, proto, domain))
        if self.error is not None:
            raise self.error

        qname = srv_name(service, proto, domain)
        if qname not in self.records:
            raise LookupError(f"lookup {qname}: no such host")
        return list(self.records[qname])
