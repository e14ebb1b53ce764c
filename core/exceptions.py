"""Custom exception hierarchy for the CORS forwarding proxy."""


class ProxyError(Exception):
    """Base exception for all errors that end a proxied request."""


class MissingTarget(ProxyError):
    """No target URL in the x-target-url header or url query param."""


class InvalidTarget(ProxyError):
    """Target URL failed percent-decoding or the scheme check."""


class UnsupportedMethod(ProxyError):
    """Inbound method has no outbound counterpart."""

    def __init__(self, method: str) -> None:
        super().__init__(f"Unsupported method: {method}")
        self.method = method


class TransportFailure(ProxyError):
    """Raised when the outbound call to the target fails.

    Attributes:
        message: Error message reported by the transport
        target_url: URL the call was made to (optional)
    """

    def __init__(
        self,
        message: str,
        target_url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.target_url = target_url


class TransportTimeout(TransportFailure):
    """Raised when the target does not answer in time."""


class TransportConnectionError(TransportFailure):
    """Raised when unable to connect to the target."""
