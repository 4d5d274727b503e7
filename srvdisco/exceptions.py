"""
Exception classes for srvdisco.

Provides typed exceptions for better error handling and debugging.
"""


class SrvDiscoError(Exception):
    """Base exception for all srvdisco errors."""

    pass


class LookupFailedError(SrvDiscoError):
    """
    Raised (or reported) when an SRV lookup fails.

    This is the only failure a discovery call can end with. It wraps
    whatever the resolver reported (NXDOMAIN, timeout, no nameservers...).

    Attributes:
        domain: Domain the lookup was performed in.
        service: Service name that was looked up.
        protocol: Transport label used in the query name.
        original_error: The exception raised by the resolver.
    """

    def __init__(
        self,
        message: str,
        domain: str | None = None,
        service: str | None = None,
        protocol: str | None = None,
        original_error: BaseException | None = None,
    ):
        super().__init__(message)
        self.domain = domain
        self.service = service
        self.protocol = protocol
        self.original_error = original_error

    @property
    def query_name(self) -> str | None:
        """The SRV owner name that was queried, if known."""
        if self.service is None or self.domain is None:
            return None
        return f"_{self.service}._{self.protocol or 'tcp'}.{self.domain}"

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.query_name:
            parts.append(f"Query: {self.query_name}")
        if self.original_error:
            parts.append(f"Cause: {type(self.original_error).__name__}: {self.original_error}")
        return " | ".join(parts)


class StreamClosedError(SrvDiscoError):
    """Raised when a stream is used in a way its state does not allow."""

    pass
