"""Shared pytest fixtures and configuration for pytest."""

import os
from collections.abc import Callable, Iterator
from typing import Any

import httpx
import pytest

from zabbix_api.client import ZabbixApiClient
from zabbix_api.rpc.types import AuthMode

API_URL = "http://zabbix.test/api_jsonrpc.php"

INTEGRATION_ENV = ("ZABBIX_API_URL", "ZABBIX_API_USER", "ZABBIX_API_PASSWORD")

Handler = Callable[[httpx.Request], httpx.Response]


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: needs a live Zabbix server (ZABBIX_API_* variables)"
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip live tests unless the server is configured."""
    if all(os.environ.get(name) for name in INTEGRATION_ENV):
        return

    skip_integration = pytest.mark.skip(reason="integration tests are disabled")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


@pytest.fixture
def requests_seen() -> list[httpx.Request]:
    """Requests captured by make_client handlers, in order."""
    return []


@pytest.fixture
def make_client(
    requests_seen: list[httpx.Request],
) -> Iterator[Callable[..., ZabbixApiClient]]:
    """Build a ZabbixApiClient whose HTTP exchanges are answered by a handler.

    The handler may be a callable or a plain dict used as the JSON body of a
    200 response.
    """
    clients: list[httpx.Client] = []

    def factory(
        handler: Handler | dict[str, Any],
        auth_mode: AuthMode = AuthMode.BEARER,
    ) -> ZabbixApiClient:
        def recording_handler(request: httpx.Request) -> httpx.Response:
            requests_seen.append(request)
            if callable(handler):
                return handler(request)
            return httpx.Response(200, json=handler)

        http_client = httpx.Client(transport=httpx.MockTransport(recording_handler))
        clients.append(http_client)
        return ZabbixApiClient(API_URL, http_client=http_client, auth_mode=auth_mode)

    yield factory

    for http_client in clients:
        http_client.close()
