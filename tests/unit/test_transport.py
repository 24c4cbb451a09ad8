"""Unit tests for the HTTP transport adapter."""

import httpx
import pytest

from zabbix_api.core.errors import BadRequestError, NetworkError
from zabbix_api.rpc.transport import build_headers, send_post_request
from zabbix_api.rpc.types import AuthMode

URL = "http://zabbix.test/api_jsonrpc.php"


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


class TestBuildHeaders:
    def test_bearer_with_session(self):
        headers = build_headers("tok", AuthMode.BEARER)

        assert headers == {"Content-Type": "application/json", "Authorization": "Bearer tok"}

    def test_bearer_without_session(self):
        assert "Authorization" not in build_headers(None, AuthMode.BEARER)

    def test_body_mode_never_sets_header(self):
        assert "Authorization" not in build_headers("tok", AuthMode.BODY)


class TestSendPostRequest:
    """Tests for send_post_request."""

    def test_posts_body_and_returns_text(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, text='{"jsonrpc":"2.0","result":"ok","id":1}')

        with _client(handler) as client:
            text = send_post_request(client, URL, '{"a":1}', session="tok")

        assert text == '{"jsonrpc":"2.0","result":"ok","id":1}'
        assert seen[0].method == "POST"
        assert str(seen[0].url) == URL
        assert seen[0].content == b'{"a":1}'
        assert seen[0].headers["content-type"] == "application/json"
        assert seen[0].headers["authorization"] == "Bearer tok"

    def test_body_mode_sends_no_authorization_header(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, text="{}")

        with _client(handler) as client:
            send_post_request(client, URL, "{}", session="tok", auth_mode=AuthMode.BODY)

        assert "authorization" not in seen[0].headers

    @pytest.mark.parametrize("status", [201, 400, 401, 404, 500, 502])
    def test_non_ok_status_is_bad_request(self, status: int):
        """Body is ignored even when it looks like a valid envelope."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status, text='{"jsonrpc":"2.0","result":"ok","id":1}')

        with _client(handler) as client, pytest.raises(BadRequestError) as exc_info:
            send_post_request(client, URL, "{}")

        assert exc_info.value.status_code == status

    def test_connection_error_is_network_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused")

        with _client(handler) as client, pytest.raises(NetworkError) as exc_info:
            send_post_request(client, URL, "{}")

        assert "Connection failed" in str(exc_info.value)
        assert isinstance(exc_info.value.cause, httpx.ConnectError)

    def test_timeout_is_network_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out")

        with _client(handler) as client, pytest.raises(NetworkError) as exc_info:
            send_post_request(client, URL, "{}", timeout=0.5)

        assert "timed out" in str(exc_info.value)

    def test_per_request_timeout_is_applied(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, text="{}")

        with _client(handler) as client:
            send_post_request(client, URL, "{}", timeout=2.5)

        assert seen[0].extensions["timeout"]["read"] == 2.5
