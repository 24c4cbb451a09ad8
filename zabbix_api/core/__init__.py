"""Core error types."""

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

__all__ = [
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
