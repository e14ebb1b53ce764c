"""CORS and cache-suppression headers added to caller-facing responses."""

import dataclasses

from core.headers import set_header
from core.request_types import OutboundResponse

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, PATCH, OPTIONS, HEAD",
    "Access-Control-Allow-Headers": "*",
    "Access-Control-Expose-Headers": "*",
}

NO_CACHE_HEADERS = {
    "Cache-Control": "no-store, no-cache, must-revalidate, proxy-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}

PREFLIGHT_MAX_AGE = "86400"


class ResponseDecorator:
    """Attach fixed header sets to a response, overwriting existing values."""

    def decorate_cors(self, response: OutboundResponse) -> OutboundResponse:
        return self._with_headers(response, CORS_HEADERS)

    def decorate_no_cache(self, response: OutboundResponse) -> OutboundResponse:
        return self._with_headers(response, NO_CACHE_HEADERS)

    def preflight(self) -> OutboundResponse:
        """Undecorated answer to an OPTIONS request."""
        return OutboundResponse(status=200, headers={"Access-Control-Max-Age": PREFLIGHT_MAX_AGE})

    def error(self, message: str) -> OutboundResponse:
        """Undecorated 500 response for a failed proxy attempt."""
        return OutboundResponse(
            status=500,
            headers={"Content-Type": "text/plain; charset=utf-8"},
            body=f"Proxy Error: {message}".encode(),
        )

    @staticmethod
    def _with_headers(response: OutboundResponse, extra: dict[str, str]) -> OutboundResponse:
        headers = dict(response.headers)
        for name, value in extra.items():
            set_header(headers, name, value)
        return dataclasses.replace(response, headers=headers)
