"""Header maps and hop-by-hop / CORS header filtering."""

from collections.abc import Iterable, Mapping

HOP_BY_HOP_HEADERS = frozenset(
    {
        "connection",
        "keep-alive",
        "proxy-authenticate",
        "proxy-authorization",
        "te",
        "trailers",
        "transfer-encoding",
        "upgrade",
    }
)

CORS_HEADER_PREFIX = "access-control-"


def header_map(pairs: Iterable[tuple[str, str]]) -> dict[str, str]:
    """Build a header map from (name, value) pairs, first occurrence wins."""
    headers: dict[str, str] = {}
    seen: set[str] = set()
    for name, value in pairs:
        key_lower = name.lower()
        if key_lower in seen:
            continue
        seen.add(key_lower)
        headers[name] = value
    return headers


def get_header(headers: Mapping[str, str], name: str) -> str | None:
    """Case-insensitive lookup."""
    name_lower = name.lower()
    for key, value in headers.items():
        if key.lower() == name_lower:
            return value
    return None


def set_header(headers: dict[str, str], name: str, value: str) -> None:
    """Set a header in place, replacing any key that differs only in case."""
    name_lower = name.lower()
    for key in [k for k in headers if k.lower() == name_lower]:
        del headers[key]
    headers[name] = value


def is_visible_ascii(value: str) -> bool:
    """True when the value can be sent as a plain HTTP header token or value."""
    return all(ch == "\t" or 32 <= ord(ch) < 127 for ch in value)


def is_hop_by_hop(name: str) -> bool:
    return name.lower() in HOP_BY_HOP_HEADERS


def is_cors_header(name: str) -> bool:
    name_lower = name.lower()
    return name_lower.startswith(CORS_HEADER_PREFIX) or name_lower == "vary"


class HeaderSanitizer:
    """Strip headers that must not cross the proxy boundary."""

    def filter_outbound(self, headers: Mapping[str, str]) -> dict[str, str]:
        """Drop hop-by-hop headers from a request headed for the target."""
        return {key: value for key, value in headers.items() if not is_hop_by_hop(key)}

    def filter_inbound(self, headers: Mapping[str, str]) -> dict[str, str]:
        """Drop the target's CORS assertions and hop-by-hop headers."""
        return {
            key: value
            for key, value in headers.items()
            if not is_cors_header(key) and not is_hop_by_hop(key)
        }
