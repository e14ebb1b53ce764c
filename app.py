"""FastAPI application factory."""

from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request

from api.handlers import handle_proxy
from core.config import Config
from core.decorate import ResponseDecorator
from core.headers import HeaderSanitizer
from core.protocols import RequestLogger
from core.request_types import HttpMethod
from core.resolver import TargetResolver
from core.transform import RequestTranslator
from services.proxy_service import ProxyService
from services.upstream import HttpxTransport

# TRACE reaches the handler and is rejected there as unsupported
ROUTED_METHODS = [method.value for method in HttpMethod] + ["TRACE"]


def create_app(config: Config, logger: RequestLogger) -> FastAPI:
    """Create and configure the FastAPI application."""
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        limits = httpx.Limits(
            max_connections=config.upstream.max_connections,
            max_keepalive_connections=config.upstream.max_keepalive_connections,
        )
        client = httpx.AsyncClient(
            timeout=config.upstream.timeout,
            limits=limits,
            follow_redirects=False,
        )
        app.state.proxy_service = ProxyService(
            transport=HttpxTransport(client),
            logger=logger,
            resolver=TargetResolver(),
            translator=RequestTranslator(HeaderSanitizer(), user_agent=config.upstream.user_agent),
            decorator=ResponseDecorator(),
        )
        try:
            yield
        finally:
            await client.aclose()

    app = FastAPI(title="CORS Forward Proxy", version="0.1.0", lifespan=lifespan)

    @app.api_route("/{path:path}", methods=ROUTED_METHODS)
    async def proxy(path: str, request: Request):
        return await handle_proxy(request, config, logger)

    return app
