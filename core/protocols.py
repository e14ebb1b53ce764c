"""Shared protocol definitions."""

from typing import Protocol

from core.request_types import ProxyRequest, TargetResponse


class Transport(Protocol):
    """Performs the outbound HTTP call.

    Implementations raise TransportFailure when the call itself fails.
    """

    async def send(self, request: ProxyRequest) -> TargetResponse: ...


class RequestLogger(Protocol):
    """Protocol for request logging (Dashboard)."""

    def log_forward(
        self,
        method: str,
        target_url: str,
        status: int,
        *,
        headers: dict[str, str] | None = None,
    ) -> None: ...
    def log_preflight(self, uri: str) -> None: ...
    def log_error(self, status: int, message: str) -> None: ...


class NullLogger:
    """RequestLogger that discards everything."""

    def log_forward(
        self,
        method: str,
        target_url: str,
        status: int,
        *,
        headers: dict[str, str] | None = None,
    ) -> None:
        pass

    def log_preflight(self, uri: str) -> None:
        pass

    def log_error(self, status: int, message: str) -> None:
        pass
