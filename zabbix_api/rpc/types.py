"""JSON-RPC 2.0 envelope types for the Zabbix API."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class AuthMode(str, Enum):
    """Where the session token travels on authenticated calls."""

    BODY = "body"  # "auth" member of the request envelope (Zabbix <= 6.x)
    BEARER = "bearer"  # Authorization: Bearer <token> header (Zabbix >= 7.0)


@dataclass(frozen=True)
class ErrorDetail:
    """Error object reported by the remote system.

    Attributes:
        code: Remote error code (e.g. -32602 for invalid params).
        message: Short error message.
        data: Detailed, human readable explanation.
    """

    code: int
    message: str
    data: str = ""


@dataclass
class Request:
    """JSON-RPC 2.0 request.

    Attributes:
        jsonrpc: Protocol version, must be "2.0".
        method: Name of the remote method, e.g. "host.get".
        params: Parameters for the method. Any value pydantic can serialize.
        id: Request identifier.
        auth: Session token carried in the body. Only set in BODY auth mode.
    """

    jsonrpc: str
    method: str
    params: Any = None
    id: int = 1
    auth: str | None = None


@dataclass
class Response:
    """JSON-RPC 2.0 response.

    Attributes:
        jsonrpc: Protocol version, always "2.0".
        id: Request identifier from the original request.
        result: Result of the method call, None when absent.
        error: Error detail if the method failed, None when absent.
    """

    jsonrpc: str
    id: int | str | None
    result: Any | None = None
    error: ErrorDetail | None = None
