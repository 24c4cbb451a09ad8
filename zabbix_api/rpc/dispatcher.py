"""Generic call dispatcher for the Zabbix JSON-RPC API.

Every typed operation in :mod:`zabbix_api.client` goes through
:meth:`Dispatcher.call`: build envelope, one POST, decode over the caller's
result type, then classify result / error / neither.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol, TypeVar

import httpx

from zabbix_api.core.errors import (
    ApiCallError,
    BadRequestError,
    EmptyIdListError,
    IdParseError,
)
from zabbix_api.rpc.protocol import (
    build_request,
    decode_result,
    parse_response,
    serialize_request,
)
from zabbix_api.rpc.transport import send_post_request
from zabbix_api.rpc.types import AuthMode, Response

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Ids are unsigned 32-bit integers on the server side
MAX_ID = 2**32 - 1


class HasIds(Protocol):
    """Result of a create/update/delete call: a list of affected ids."""

    @property
    def ids(self) -> list[str]: ...


def parse_id(value: str) -> int:
    """Parse a decimal id string into an unsigned 32-bit integer.

    Raises:
        IdParseError: If the value is not a plain decimal number or exceeds MAX_ID.
    """
    if not isinstance(value, str) or not value.isascii() or not value.isdigit():
        raise IdParseError(value)
    parsed = int(value)
    if parsed > MAX_ID:
        raise IdParseError(value)
    return parsed


def first_id(ids: list[str]) -> int:
    """Return the first id of a returned id list as an integer.

    Raises:
        EmptyIdListError: If the list is empty.
        IdParseError: If the first id is not numeric.
    """
    if not ids:
        logger.error("unexpected error, server returned empty id list")
        raise EmptyIdListError("Server returned empty id list")
    return parse_id(ids[0])


class Dispatcher:
    """Performs typed calls over a shared httpx client.

    Holds no per-call state; a single instance can be used from several
    threads at once. The session token is always passed in by the caller.
    """

    def __init__(
        self,
        http_client: httpx.Client,
        url: str,
        auth_mode: AuthMode = AuthMode.BEARER,
        timeout: float | None = None,
    ) -> None:
        self._http_client = http_client
        self._url = url
        self._auth_mode = auth_mode
        self._timeout = timeout

    @property
    def url(self) -> str:
        return self._url

    @property
    def auth_mode(self) -> AuthMode:
        return self._auth_mode

    def _exchange(self, session: str | None, method: str, params: Any) -> Response:
        request = build_request(method, params, session, self._auth_mode)
        logger.debug("RPC call: method=%s", method)
        body = send_post_request(
            self._http_client,
            self._url,
            serialize_request(request),
            session=session,
            auth_mode=self._auth_mode,
            timeout=self._timeout,
        )
        response = parse_response(body)

        if response.result is not None:
            return response
        if response.error is not None:
            logger.warning(
                "RPC error for method=%s: %d %s %s",
                method,
                response.error.code,
                response.error.message,
                response.error.data,
            )
            raise ApiCallError(response.error)
        logger.error("response for method=%s has neither result nor error", method)
        raise BadRequestError(f"Response for '{method}' has neither result nor error")

    def call(self, session: str | None, method: str, params: Any, result_type: type[T]) -> T:
        """Call a remote method and return its typed result.

        Args:
            session: Session token, or None for unauthenticated methods.
            method: Remote method name, e.g. "hostgroup.get".
            params: Parameters, any value pydantic can serialize.
            result_type: Expected type of ``result``, e.g. ``list[HostGroup]``.

        Raises:
            NetworkError: Transport failure.
            BadRequestError: Non-OK status or empty envelope.
            UnsupportedPayloadError: Unparsable body or unexpected result shape.
            ApiCallError: Error reported by the remote system.
        """
        response = self._exchange(session, method, params)
        result: T = decode_result(response.result, result_type)
        return result

    def raw_call(
        self,
        session: str | None,
        method: str,
        params: Any,
        result_type: Any = Any,
    ) -> Response:
        """Call any remote method and return the whole decoded envelope.

        Same classification as :meth:`call`; on return ``result`` holds a
        value of ``result_type`` and ``error`` is None.
        """
        response = self._exchange(session, method, params)
        response.result = decode_result(response.result, result_type)
        return response

    def create(self, session: str | None, method: str, params: Any, response_type: type[HasIds]) -> int:
        """Call a create-style method and return the id of the new object."""
        result = self.call(session, method, params, response_type)
        return first_id(result.ids)
