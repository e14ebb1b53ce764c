"""Outbound HTTP calls to the target server."""

import httpx

from core.exceptions import TransportConnectionError, TransportFailure, TransportTimeout
from core.request_types import ProxyRequest, TargetResponse

# httpx derives these from the URL and body
_TRANSPORT_OWNED_HEADERS = {"host", "content-length"}


class HttpxTransport:
    """Send proxy requests with a shared httpx client."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def send(self, request: ProxyRequest) -> TargetResponse:
        """Execute the call and read the raw (undecoded) body."""
        headers = {
            key: value
            for key, value in request.headers.items()
            if key.lower() not in _TRANSPORT_OWNED_HEADERS
        }
        try:
            req = self._client.build_request(
                request.method.value,
                request.url,
                headers=headers,
                content=request.body,
            )
            response = await self._client.send(req, stream=True)
            try:
                body = b"".join([chunk async for chunk in response.aiter_raw()])
            finally:
                await response.aclose()
        except httpx.TimeoutException as e:
            raise TransportTimeout(_describe(e, "Upstream timeout"), request.url) from e
        except httpx.RequestError as e:
            raise TransportConnectionError(_describe(e, "Upstream connection error"), request.url) from e
        except httpx.InvalidURL as e:
            raise TransportFailure(_describe(e, "Invalid URL"), request.url) from e
        except ValueError as e:
            # httpx rejects header names or values it cannot encode
            raise TransportFailure(_describe(e, "Invalid request"), request.url) from e

        # latin-1 keeps the raw header bytes intact on the way back out
        encoding = "latin-1"
        return TargetResponse(
            status=response.status_code,
            headers=[(k.decode(encoding), v.decode(encoding)) for k, v in response.headers.raw],
            body=body,
        )


def _describe(error: Exception, fallback: str) -> str:
    message = str(error)
    return f"{fallback}: {message}" if message else fallback
