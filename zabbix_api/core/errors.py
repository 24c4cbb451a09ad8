"""Typed exception hierarchy for the Zabbix API client.

Every failure a call can produce maps to exactly one class below, so callers
can retry only ``NetworkError`` or show ``ApiCallError.data`` to a user
without string matching.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from zabbix_api.rpc.types import ErrorDetail


class ZabbixApiError(Exception):
    """Base class for all client errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigError(ZabbixApiError):
    """Raised for configuration issues (missing file, invalid JSON, validation failure)."""


class NetworkError(ZabbixApiError):
    """The HTTP exchange could not complete (DNS, connection, timeout)."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        self.cause = cause
        super().__init__(message)


class UnsupportedPayloadError(ZabbixApiError):
    """Response body could not be parsed into the expected envelope or result type."""


class BadRequestError(ZabbixApiError):
    """Non-OK HTTP status, or a well-formed envelope with neither result nor error.

    Attributes:
        status_code: HTTP status of the response, or None when the status was
            OK and the envelope itself was empty.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class ApiCallError(ZabbixApiError):
    """The remote system reported an error for the call.

    The remote ``ErrorDetail`` is kept untouched on ``.error``.
    """

    def __init__(self, error: ErrorDetail) -> None:
        self.error = error
        super().__init__(f"Zabbix API error {error.code}: {error.message} {error.data}".rstrip())

    @property
    def code(self) -> int:
        return self.error.code

    @property
    def data(self) -> str:
        return self.error.data


class PostprocessError(ZabbixApiError):
    """Base class for logic errors found after an otherwise successful call."""


class EmptyIdListError(PostprocessError):
    """A create-style call returned an empty id list."""


class IdParseError(PostprocessError):
    """A returned id is not a decimal unsigned integer."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Unable to parse id from {value!r}")
