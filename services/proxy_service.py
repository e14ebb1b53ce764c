"""Top-level proxy control flow: preflight or forward, then decorate."""

from core.decorate import ResponseDecorator
from core.exceptions import ProxyError
from core.protocols import RequestLogger, Transport
from core.request_types import HttpMethod, InboundRequest, OutboundResponse
from core.resolver import TargetResolver
from core.transform import RequestTranslator


class ProxyService:
    """Handle one inbound request end to end.

    Holds only its collaborators; nothing request-scoped is stored on the
    instance, so one service is shared by all concurrent requests.
    """

    def __init__(
        self,
        transport: Transport,
        logger: RequestLogger,
        resolver: TargetResolver | None = None,
        translator: RequestTranslator | None = None,
        decorator: ResponseDecorator | None = None,
    ) -> None:
        self._transport = transport
        self._logger = logger
        self._resolver = resolver or TargetResolver()
        self._translator = translator or RequestTranslator()
        self._decorator = decorator or ResponseDecorator()

    async def handle(self, inbound: InboundRequest) -> OutboundResponse:
        """Return the caller-facing response; never raises ProxyError."""
        if inbound.method.upper() == HttpMethod.OPTIONS.value:
            self._logger.log_preflight(inbound.uri)
            return self._decorator.decorate_cors(self._decorator.preflight())

        try:
            response = await self._forward(inbound)
        except ProxyError as e:
            self._logger.log_error(500, str(e))
            return self._decorator.decorate_cors(self._decorator.error(str(e)))

        return self._decorator.decorate_cors(self._decorator.decorate_no_cache(response))

    async def _forward(self, inbound: InboundRequest) -> OutboundResponse:
        target = self._resolver.resolve(inbound)
        proxy_request = self._translator.build_proxy_request(inbound, target)
        target_response = await self._transport.send(proxy_request)
        proxy_response = self._translator.build_outbound_from_target(target_response)
        self._logger.log_forward(
            proxy_request.method.value,
            proxy_request.url,
            proxy_response.status,
            headers=proxy_request.headers,
        )
        return self._translator.build_outbound_response(proxy_response)
