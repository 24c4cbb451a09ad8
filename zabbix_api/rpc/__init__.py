"""JSON-RPC 2.0 plumbing for the Zabbix API client.

The envelope codec, the HTTP transport and the generic dispatcher through
which every typed operation in :mod:`zabbix_api.client` is implemented.

Example usage:
    dispatcher = Dispatcher(httpx.Client(), "http://zabbix/api_jsonrpc.php")
    version = dispatcher.call(None, "apiinfo.version", {}, str)
"""

from zabbix_api.rpc.dispatcher import Dispatcher, HasIds, first_id, parse_id
from zabbix_api.rpc.protocol import (
    JSON_RPC_VERSION,
    REQUEST_ID,
    build_request,
    decode_result,
    encode_params,
    parse_response,
    serialize_request,
)
from zabbix_api.rpc.transport import build_headers, send_post_request
from zabbix_api.rpc.types import AuthMode, ErrorDetail, Request, Response

__all__ = [
    # Types
    "AuthMode",
    "ErrorDetail",
    "Request",
    "Response",
    # Codec
    "JSON_RPC_VERSION",
    "REQUEST_ID",
    "build_request",
    "encode_params",
    "serialize_request",
    "parse_response",
    "decode_result",
    # Transport
    "build_headers",
    "send_post_request",
    # Dispatcher
    "Dispatcher",
    "HasIds",
    "first_id",
    "parse_id",
]
