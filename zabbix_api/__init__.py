"""Typed client for the Zabbix JSON-RPC API.

Example:
    from zabbix_api import ZabbixApiClient
    from zabbix_api.entities import CreateHostGroupRequest

    with ZabbixApiClient("http://zabbix/api_jsonrpc.php") as client:
        session = client.get_auth_session("Admin", "zabbix")
        group_id = client.create_host_group(session, CreateHostGroupRequest(name="db"))
"""

from zabbix_api.client import ZabbixApiClient
from zabbix_api.core.errors import (
    ApiCallError,
    BadRequestError,
    ConfigError,
    EmptyIdListError,
    IdParseError,
    NetworkError,
    PostprocessError,
    UnsupportedPayloadError,
    ZabbixApiError,
)
from zabbix_api.entities.base import EXTEND
from zabbix_api.rpc.types import AuthMode, ErrorDetail, Response

__version__ = "0.8.0"

__all__ = [
    "ZabbixApiClient",
    "AuthMode",
    "ErrorDetail",
    "Response",
    "EXTEND",
    # Errors
    "ZabbixApiError",
    "ConfigError",
    "NetworkError",
    "UnsupportedPayloadError",
    "BadRequestError",
    "ApiCallError",
    "PostprocessError",
    "EmptyIdListError",
    "IdParseError",
]
