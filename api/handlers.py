"""FastAPI route handlers."""

from fastapi import Request, Response

from core.config import Config
from core.decorate import ResponseDecorator
from core.headers import header_map
from core.protocols import RequestLogger
from core.request_types import InboundRequest, OutboundResponse


async def to_inbound_request(request: Request) -> InboundRequest:
    """Convert a Starlette request; duplicate headers keep the first value."""
    uri = request.url.path
    if request.url.query:
        uri += f"?{request.url.query}"
    return InboundRequest(
        method=request.method,
        uri=uri,
        headers=header_map(request.headers.items()),
        body=await request.body(),
    )


def to_response(outbound: OutboundResponse) -> Response:
    return Response(
        content=outbound.body,
        status_code=outbound.status,
        headers=outbound.headers,
    )


async def handle_proxy(request: Request, config: Config, logger: RequestLogger) -> Response:
    """Handle any method on any path through the proxy service."""
    content_length = request.headers.get("content-length")
    if content_length and content_length.isdigit() and int(content_length) > config.limits.max_body_bytes:
        return _too_large(logger)

    inbound = await to_inbound_request(request)
    if len(inbound.body) > config.limits.max_body_bytes:
        return _too_large(logger)

    proxy_service = request.app.state.proxy_service
    outbound = await proxy_service.handle(inbound)
    return to_response(outbound)


def _too_large(logger: RequestLogger) -> Response:
    logger.log_error(413, "Request body too large")
    decorator = ResponseDecorator()
    outbound = OutboundResponse(
        status=413,
        headers={"Content-Type": "text/plain; charset=utf-8"},
        body=b"Proxy Error: Request body too large",
    )
    return to_response(decorator.decorate_cors(outbound))
