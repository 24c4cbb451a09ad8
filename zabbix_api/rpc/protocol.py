"""JSON-RPC 2.0 envelope serialization and parsing for the Zabbix API."""

import json
from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_jsonable_python

from zabbix_api.core.errors import UnsupportedPayloadError
from zabbix_api.rpc.types import AuthMode, ErrorDetail, Request, Response

JSON_RPC_VERSION = "2.0"

# Every call is a single round trip, so the id never has to vary.
REQUEST_ID = 1


def build_request(
    method: str,
    params: Any,
    session: str | None = None,
    auth_mode: AuthMode = AuthMode.BEARER,
) -> Request:
    """Build a request envelope for one call.

    Args:
        method: Remote method name.
        params: Method parameters, opaque to the codec.
        session: Session token, or None for unauthenticated calls.
        auth_mode: Decides whether the token goes into the body.

    Returns:
        A Request with ``auth`` set only for BODY mode.
    """
    return Request(
        jsonrpc=JSON_RPC_VERSION,
        method=method,
        params=params,
        id=REQUEST_ID,
        auth=session if auth_mode is AuthMode.BODY else None,
    )


def encode_params(params: Any) -> Any:
    """Convert params to plain JSON data.

    Pydantic models are dumped by alias and optional fields left as None are
    dropped, so the server never sees members it did not ask for.

    Raises:
        TypeError: If the value cannot be serialized.
    """
    if params is None:
        return {}
    try:
        return to_jsonable_python(params, by_alias=True, exclude_none=True)
    except PydanticSerializationError as e:
        raise TypeError(f"params are not serializable: {e}") from e


def serialize_request(request: Request) -> str:
    """Serialize a Request to a compact JSON string.

    The ``auth`` member is omitted entirely when not set; newer servers
    reject it even when null.
    """
    data: dict[str, Any] = {
        "jsonrpc": request.jsonrpc,
        "method": request.method,
        "params": encode_params(request.params),
        "id": request.id,
    }

    if request.auth is not None:
        data["auth"] = request.auth

    return json.dumps(data, separators=(",", ":"))


def _parse_error_detail(error: Any) -> ErrorDetail:
    if not isinstance(error, dict):
        raise UnsupportedPayloadError(f"error must be an object, got: {type(error).__name__}")

    code = error.get("code")
    message = error.get("message")
    data = error.get("data", "")

    if not isinstance(code, int) or isinstance(code, bool):
        raise UnsupportedPayloadError(f"error code must be an integer, got: {code!r}")
    if not isinstance(message, str):
        raise UnsupportedPayloadError(f"error message must be a string, got: {message!r}")
    if not isinstance(data, str):
        raise UnsupportedPayloadError(f"error data must be a string, got: {type(data).__name__}")

    return ErrorDetail(code=code, message=message, data=data)


def parse_response(text: str) -> Response:
    """Parse a response body into a Response envelope.

    A missing ``result`` is not an error here: that is the normal shape of a
    remote error, and an envelope with neither member is classified later.

    Args:
        text: Raw response body.

    Returns:
        A parsed Response with ``result`` left as plain JSON data.

    Raises:
        UnsupportedPayloadError: If the body is not a valid JSON-RPC 2.0 envelope.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise UnsupportedPayloadError(f"Invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise UnsupportedPayloadError("Response must be a JSON object")

    jsonrpc = data.get("jsonrpc")
    if jsonrpc != JSON_RPC_VERSION:
        raise UnsupportedPayloadError(f"jsonrpc must be '2.0', got: {jsonrpc!r}")

    if "id" not in data:
        raise UnsupportedPayloadError("Response must have 'id' field")
    response_id = data["id"]
    if response_id is not None and (
        not isinstance(response_id, (str, int)) or isinstance(response_id, bool)
    ):
        raise UnsupportedPayloadError(
            f"id must be string, number, or null, got: {type(response_id).__name__}"
        )

    error = data.get("error")

    return Response(
        jsonrpc=jsonrpc,
        id=response_id,
        result=data.get("result"),
        error=_parse_error_detail(error) if error is not None else None,
    )


@lru_cache(maxsize=256)
def _adapter_for(result_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(result_type)


def decode_result(value: Any, result_type: Any) -> Any:
    """Validate a raw ``result`` value against the caller's expected type.

    Args:
        value: The ``result`` member as plain JSON data.
        result_type: Any type pydantic can validate (model, ``list[Model]``,
            ``str``, ``dict[str, Any]``, ``Any``...).

    Raises:
        UnsupportedPayloadError: If the value does not match the type.
    """
    try:
        return _adapter_for(result_type).validate_python(value)
    except ValidationError as e:
        raise UnsupportedPayloadError(f"Unexpected result shape: {e}") from e
