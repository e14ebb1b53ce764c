from core.headers import (
    HOP_BY_HOP_HEADERS,
    HeaderSanitizer,
    get_header,
    header_map,
    is_cors_header,
    is_hop_by_hop,
    set_header,
)

# ---------------------------------------------------------------------------
# Header map helpers
# ---------------------------------------------------------------------------


class TestHeaderMap:
    def test_first_occurrence_wins(self):
        headers = header_map([("X-Token", "first"), ("x-token", "second")])
        assert headers == {"X-Token": "first"}

    def test_preserves_key_casing(self):
        headers = header_map([("Content-Type", "text/plain")])
        assert list(headers) == ["Content-Type"]

    def test_get_header_is_case_insensitive(self):
        assert get_header({"X-Target-URL": "http://a"}, "x-target-url") == "http://a"

    def test_get_header_missing(self):
        assert get_header({"accept": "*/*"}, "x-target-url") is None

    def test_set_header_replaces_differently_cased_key(self):
        headers = {"user-agent": "curl/8.0", "accept": "text/html"}
        set_header(headers, "User-Agent", "cors-proxy/1.0")
        assert headers == {"accept": "text/html", "User-Agent": "cors-proxy/1.0"}

    def test_set_header_adds_new_key(self):
        headers: dict[str, str] = {}
        set_header(headers, "Pragma", "no-cache")
        assert headers == {"Pragma": "no-cache"}


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


class TestClassification:
    def test_hop_by_hop_set(self):
        assert HOP_BY_HOP_HEADERS == {
            "connection",
            "keep-alive",
            "proxy-authenticate",
            "proxy-authorization",
            "te",
            "trailers",
            "transfer-encoding",
            "upgrade",
        }

    def test_hop_by_hop_ignores_case(self):
        assert is_hop_by_hop("Transfer-Encoding") is True
        assert is_hop_by_hop("Content-Length") is False

    def test_cors_prefix(self):
        assert is_cors_header("Access-Control-Allow-Origin") is True
        assert is_cors_header("access-control-max-age") is True

    def test_vary_is_cors(self):
        assert is_cors_header("Vary") is True

    def test_similar_names_are_not_cors(self):
        assert is_cors_header("X-Access-Control") is False
        assert is_cors_header("Varying") is False


# ---------------------------------------------------------------------------
# HeaderSanitizer
# ---------------------------------------------------------------------------


class TestFilterOutbound:
    def test_drops_hop_by_hop(self):
        sanitizer = HeaderSanitizer()
        result = sanitizer.filter_outbound(
            {
                "Connection": "keep-alive",
                "Keep-Alive": "timeout=5",
                "Proxy-Authorization": "Basic abc",
                "TE": "trailers",
                "Upgrade": "websocket",
                "Content-Type": "application/json",
            }
        )
        assert result == {"Content-Type": "application/json"}

    def test_keeps_cors_request_headers(self):
        sanitizer = HeaderSanitizer()
        headers = {"Access-Control-Request-Method": "POST", "Origin": "http://app"}
        assert sanitizer.filter_outbound(headers) == headers

    def test_does_not_mutate_input(self):
        sanitizer = HeaderSanitizer()
        headers = {"connection": "close", "accept": "*/*"}
        sanitizer.filter_outbound(headers)
        assert headers == {"connection": "close", "accept": "*/*"}


class TestFilterInbound:
    def test_drops_cors_and_vary(self):
        sanitizer = HeaderSanitizer()
        result = sanitizer.filter_inbound(
            {
                "Access-Control-Allow-Origin": "https://only-me.example",
                "Access-Control-Allow-Credentials": "true",
                "Vary": "Origin",
                "Content-Type": "text/html",
            }
        )
        assert result == {"Content-Type": "text/html"}

    def test_drops_hop_by_hop(self):
        sanitizer = HeaderSanitizer()
        result = sanitizer.filter_inbound({"transfer-encoding": "chunked", "etag": '"abc"'})
        assert result == {"etag": '"abc"'}

    def test_keeps_content_encoding_and_length(self):
        sanitizer = HeaderSanitizer()
        headers = {"Content-Encoding": "gzip", "Content-Length": "42"}
        assert sanitizer.filter_inbound(headers) == headers
