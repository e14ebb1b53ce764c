"""Target URL resolution - x-target-url header or url query param."""

from urllib.parse import unquote

from core.exceptions import InvalidTarget, MissingTarget
from core.headers import get_header, is_visible_ascii
from core.request_types import InboundRequest, TargetDescriptor

TARGET_HEADER = "x-target-url"
TARGET_QUERY_PARAM = "url"
ALLOWED_PREFIXES = ("http://", "https://")


class TargetResolver:
    """Extract and validate the target URL of an inbound request."""

    def resolve(self, request: InboundRequest) -> TargetDescriptor:
        """Return the validated target, header taking precedence over query."""
        header_value = get_header(request.headers, TARGET_HEADER)
        if header_value is not None and is_visible_ascii(header_value):
            return self.validate(header_value)

        query_value = self._query_param(request.uri, TARGET_QUERY_PARAM)
        if query_value is not None:
            try:
                decoded = unquote(query_value, errors="strict")
            except UnicodeDecodeError as e:
                raise InvalidTarget(f"Failed to decode URL: {e}") from e
            return self.validate(decoded)

        raise MissingTarget("Missing target URL in x-target-url header or url query param")

    def validate(self, candidate: str) -> TargetDescriptor:
        """Syntactic scheme check only, no DNS or port rules."""
        if not candidate.startswith(ALLOWED_PREFIXES):
            raise InvalidTarget("Target URL must start with http:// or https://")
        return TargetDescriptor(candidate)

    @staticmethod
    def _query_param(uri: str, name: str) -> str | None:
        """Raw (still percent-encoded) value of the first matching pair."""
        _, sep, query = uri.partition("?")
        if not sep:
            return None
        query = query.split("#", 1)[0]
        for pair in query.split("&"):
            key, eq, value = pair.partition("=")
            if eq and key == name:
                return value
        return None
