"""HTTP transport: one POST per call over a caller-supplied httpx client."""

import logging

import httpx

from zabbix_api.core.errors import BadRequestError, NetworkError
from zabbix_api.rpc.types import AuthMode

logger = logging.getLogger(__name__)

CONTENT_TYPE_JSON = "application/json"

# Longest response body written to the debug log
LOG_BODY_LIMIT = 500


def build_headers(session: str | None, auth_mode: AuthMode) -> dict[str, str]:
    """Build request headers, adding a bearer token in BEARER mode."""
    headers: dict[str, str] = {"Content-Type": CONTENT_TYPE_JSON}
    if session is not None and auth_mode is AuthMode.BEARER:
        headers["Authorization"] = f"Bearer {session}"
    return headers


def send_post_request(
    http_client: httpx.Client,
    url: str,
    body: str,
    session: str | None = None,
    auth_mode: AuthMode = AuthMode.BEARER,
    timeout: float | None = None,
) -> str:
    """POST a serialized envelope and return the raw response body.

    No retries are attempted. In BODY auth mode the token is expected to be
    inside ``body`` already and no header is added.

    Args:
        http_client: The httpx client to send with.
        url: API endpoint URL (usually ending in api_jsonrpc.php).
        body: Serialized request envelope.
        session: Session token, or None for unauthenticated calls.
        auth_mode: Where the token travels.
        timeout: Per-request timeout in seconds. None keeps the client's own.

    Returns:
        Response body text. Only returned for HTTP 200.

    Raises:
        NetworkError: If the exchange could not complete.
        BadRequestError: If the status is not 200. The body is not inspected.
    """
    logger.debug("send post request to '%s'", url)

    try:
        response = http_client.post(
            url,
            content=body,
            headers=build_headers(session, auth_mode),
            timeout=timeout if timeout is not None else httpx.USE_CLIENT_DEFAULT,
        )
    except httpx.TimeoutException as e:
        logger.warning("Request to %s timed out: %s", url, e)
        raise NetworkError(f"Request timed out: {e}", cause=e) from e
    except httpx.RequestError as e:
        logger.warning("Connection failed to %s: %s", url, e)
        raise NetworkError(f"Connection failed: {e}", cause=e) from e

    text = response.text
    logger.debug("response body: %s", text[:LOG_BODY_LIMIT])

    if response.status_code != httpx.codes.OK:
        logger.error("unexpected server response code %d", response.status_code)
        raise BadRequestError(
            f"Unexpected HTTP status {response.status_code}",
            status_code=response.status_code,
        )

    return text
