"""
Streaming SRV discovery.

A DiscoveryStream performs one SRV lookup in its own task and hands each
target to the consumer as an Endpoint. The handoff is synchronous: the
producer waits until the consumer has taken an endpoint before emitting the
next one. Exactly one terminal outcome (Done or Failed) follows the last
endpoint, on every exit path including cancellation.

Example:
    async with stream_discover("example.com", "api", "https") as stream:
        async for endpoint in stream:
            print(endpoint.url)

    if isinstance(stream.outcome, Failed):
        raise stream.outcome.error
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from types import TracebackType

from .config import DiscoverySettings
from .endpoint import Endpoint
from .exceptions import LookupFailedError, StreamClosedError
from .logging import get_logger
from .resolver import DNSResolver, SRVResolver, srv_name

logger = get_logger("stream")


# =============================================================================
# Terminal Outcome
# =============================================================================


@dataclass(frozen=True)
class Done:
    """The lookup succeeded and every endpoint was delivered."""

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failed:
    """The stream ended without completing; ``error`` says why."""

    error: LookupFailedError

    @property
    def ok(self) -> bool:
        return False


Outcome = Done | Failed


# =============================================================================
# Discovery Stream
# =============================================================================


class DiscoveryStream:
    """
    Single-producer, single-consumer stream of discovered endpoints.

    The producer task starts on first iteration, on ``start()`` or on
    entering ``async with``. Leaving the ``async with`` block (or calling
    ``aclose()``) cancels a producer that is still running, so abandoning a
    stream midway never leaves a task blocked on a handoff.

    Attributes:
        domain: Domain searched.
        service: Service name searched.
        scheme: Scheme attached to every endpoint.
        protocol: Transport label in the SRV name.
        resolver: Resolver performing the lookup.
    """

    def __init__(
        self,
        domain: str,
        service: str,
        scheme: str,
        resolver: SRVResolver,
        protocol: str = "tcp",
    ):
        self.domain = domain
        self.service = service
        self.scheme = scheme
        self.protocol = protocol
        self.resolver = resolver

        # Binds to the running loop on first use
        self._queue: asyncio.Queue[Endpoint | Done | Failed] = asyncio.Queue(maxsize=1)
        self._task: asyncio.Task[None] | None = None
        self._outcome: Outcome | None = None

    @property
    def query_name(self) -> str:
        """SRV owner name this stream looks up."""
        return srv_name(self.service, self.protocol, self.domain)

    @property
    def started(self) -> bool:
        return self._task is not None

    @property
    def finished(self) -> bool:
        """True once the terminal outcome has been received."""
        return self._outcome is not None

    @property
    def outcome(self) -> Outcome:
        """
        The terminal outcome.

        Raises:
            StreamClosedError: If the stream has not finished yet.
        """
        if self._outcome is None:
            raise StreamClosedError(
                f"Stream for {self.query_name} has not finished; consume it or await wait()"
            )
        return self._outcome

    # -------------------------------------------------------------------------
    # Producer
    # -------------------------------------------------------------------------

    def start(self) -> None:
        """Start the producer task. Must be called from a running event loop."""
        if self._task is not None or self._outcome is not None:
            return
        self._task = asyncio.create_task(self._produce(), name=f"srvdisco:{self.query_name}")

    def _error(self, message: str, cause: BaseException | None = None) -> LookupFailedError:
        error = LookupFailedError(
            message,
            domain=self.domain,
            service=self.service,
            protocol=self.protocol,
            original_error=cause,
        )
        error.__cause__ = cause
        return error

    async def _produce(self) -> None:
        outcome: Outcome = Failed(self._error("Discovery aborted"))
        try:
            outcome = await self._lookup_and_emit()
        except asyncio.CancelledError as e:
            logger.debug("Discovery of %s cancelled", self.query_name)
            outcome = Failed(self._error("Discovery cancelled", e))
            raise
        except Exception as e:
            logger.exception("Discovery of %s aborted", self.query_name)
            outcome = Failed(self._error("Discovery aborted", e))
            raise
        finally:
            self._close(outcome)

    async def _lookup_and_emit(self) -> Outcome:
        logger.debug("Looking up %s", self.query_name)
        try:
            targets = await self.resolver.lookup_srv(self.service, self.protocol, self.domain)
        except Exception as e:
            logger.warning("SRV lookup failed for %s: %s", self.query_name, e)
            return Failed(self._error("SRV lookup failed", e))

        count = 0
        for target in targets:
            await self._send(Endpoint.from_target(target, self.scheme))
            count += 1

        logger.debug("Delivered %d endpoint(s) for %s", count, self.query_name)
        return Done()

    async def _send(self, endpoint: Endpoint) -> None:
        await self._queue.put(endpoint)
        # Block until the consumer has taken it
        await self._queue.join()

    def _close(self, outcome: Outcome) -> None:
        """Queue the terminal outcome. Runs exactly once per producer."""
        # Only an endpoint abandoned mid-handoff can still be queued here
        while not self._queue.empty():
            self._queue.get_nowait()
            self._queue.task_done()
        self._queue.put_nowait(outcome)

    async def _reap(self) -> None:
        """Wait for the producer task to finish."""
        task = self._task
        if task is None:
            return
        await asyncio.wait({task})
        if not task.cancelled():
            # An unexpected producer error is already carried by the Failed outcome
            task.exception()

    # -------------------------------------------------------------------------
    # Consumer
    # -------------------------------------------------------------------------

    def __aiter__(self) -> DiscoveryStream:
        return self

    async def __anext__(self) -> Endpoint:
        if self._outcome is not None:
            raise StopAsyncIteration

        self.start()
        message = await self._queue.get()
        self._queue.task_done()

        if isinstance(message, Endpoint):
            return message

        self._outcome = message
        await self._reap()
        raise StopAsyncIteration

    async def wait(self) -> Outcome:
        """Consume any remaining endpoints and return the terminal outcome."""
        async for _ in self:
            pass
        return self.outcome

    async def aclose(self) -> None:
        """
        Abandon the stream.

        Cancels a running producer. Endpoints not yet taken are dropped. If
        the lookup had not completed, the outcome becomes Failed with an
        ``asyncio.CancelledError`` cause.
        """
        if self._outcome is not None:
            return

        if self._task is None:
            self._outcome = Failed(
                self._error("Discovery cancelled before start", asyncio.CancelledError())
            )
            return

        self._task.cancel()
        await self._reap()

        while self._outcome is None and not self._queue.empty():
            message = self._queue.get_nowait()
            self._queue.task_done()
            if not isinstance(message, Endpoint):
                self._outcome = message

        if self._outcome is None:
            # Cancelled before the producer ever ran
            self._outcome = Failed(self._error("Discovery cancelled", asyncio.CancelledError()))

    async def __aenter__(self) -> DiscoveryStream:
        self.start()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()


# =============================================================================
# Entry Point
# =============================================================================


def stream_discover(
    domain: str,
    service: str,
    scheme: str,
    *,
    resolver: SRVResolver | None = None,
    settings: DiscoverySettings | None = None,
) -> DiscoveryStream:
    """
    Create a stream that discovers ``_service._tcp.domain``.

    Nothing is looked up until the stream is started or iterated.

    Args:
        domain: DNS domain to search.
        service: SRV service name (without the leading underscore).
        scheme: URL scheme attached to every endpoint.
        resolver: Resolver to use. Defaults to a DNSResolver built from settings.
        settings: Discovery settings. Loaded from the environment if omitted.

    Raises:
        ValueError: If domain or service is empty.
    """
    if not domain:
        raise ValueError("domain is required")
    if not service:
        raise ValueError("service is required")

    if settings is None:
        settings = DiscoverySettings()
    if resolver is None:
        resolver = DNSResolver.from_settings(settings)

    return DiscoveryStream(domain, service, scheme, resolver, protocol=settings.protocol)
