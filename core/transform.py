"""Translation between inbound, proxy and outbound request/response shapes."""

from core.exceptions import UnsupportedMethod
from core.headers import HeaderSanitizer, is_visible_ascii, set_header
from core.request_types import (
    HttpMethod,
    InboundRequest,
    OutboundResponse,
    ProxyRequest,
    ProxyResponse,
    TargetDescriptor,
    TargetResponse,
)

DEFAULT_USER_AGENT = "cors-proxy/1.0"


class RequestTranslator:
    """Map requests toward the target and responses back to the caller."""

    def __init__(
        self,
        sanitizer: HeaderSanitizer | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self._sanitizer = sanitizer or HeaderSanitizer()
        self._user_agent = user_agent

    def build_proxy_request(
        self,
        inbound: InboundRequest,
        target: TargetDescriptor,
    ) -> ProxyRequest:
        """Build the request sent to the target."""
        headers = {
            key: value
            for key, value in self._sanitizer.filter_outbound(inbound.headers).items()
            if is_visible_ascii(key) and is_visible_ascii(value)
        }
        # Always overrides whatever the caller sent
        set_header(headers, "User-Agent", self._user_agent)
        set_header(headers, "Accept", "*/*")
        return ProxyRequest(
            method=self.map_method(inbound.method),
            url=target.url,
            headers=headers,
            body=inbound.body,
        )

    def build_outbound_from_target(self, response: TargetResponse) -> ProxyResponse:
        """Strip the target's CORS and hop-by-hop headers; repeated headers keep the last value."""
        merged: dict[str, str] = {}
        for name, value in response.headers:
            set_header(merged, name, value)
        headers = self._sanitizer.filter_inbound(merged)
        return ProxyResponse(
            status=response.status,
            headers=headers,
            body=response.body,
        )

    def build_outbound_response(self, response: ProxyResponse) -> OutboundResponse:
        """Convert to the caller-facing response."""
        headers = self._sanitizer.filter_outbound(response.headers)
        return OutboundResponse(
            status=response.status,
            headers=headers,
            body=response.body,
        )

    @staticmethod
    def map_method(method: str) -> HttpMethod:
        try:
            return HttpMethod(method.upper())
        except ValueError:
            raise UnsupportedMethod(method) from None
