"""Shared request and response data types."""

from dataclasses import dataclass, field
from enum import Enum


class HttpMethod(str, Enum):
    """Methods the proxy forwards to a target."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


@dataclass(frozen=True)
class InboundRequest:
    """Request as received from the caller."""

    method: str
    uri: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""


@dataclass(frozen=True)
class TargetDescriptor:
    """Validated absolute http(s) URL of the real destination."""

    url: str


@dataclass(frozen=True)
class ProxyRequest:
    """Protocol-neutral request handed to the transport."""

    method: HttpMethod
    url: str
    headers: dict[str, str]
    body: bytes


@dataclass(frozen=True)
class TargetResponse:
    """Unfiltered response as returned by the transport."""

    status: int
    headers: list[tuple[str, str]]
    body: bytes


@dataclass(frozen=True)
class ProxyResponse:
    """Protocol-neutral response with the target's CORS headers removed."""

    status: int
    headers: dict[str, str]
    body: bytes


@dataclass(frozen=True)
class OutboundResponse:
    """Response returned to the original caller."""

    status: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""
