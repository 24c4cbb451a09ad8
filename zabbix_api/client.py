"""Synchronous client for the Zabbix JSON-RPC API."""

import logging
from typing import Any

import httpx

from zabbix_api.config.schema import ClientConfig
from zabbix_api.core.errors import ConfigError
from zabbix_api.entities.host import (
    CreateHostRequest,
    CreateHostResponse,
    DeleteHostsResponse,
    Host,
    UpdateHostRequest,
    UpdateHostResponse,
)
from zabbix_api.entities.hostgroup import (
    CreateHostGroupRequest,
    CreateHostGroupResponse,
    HostGroup,
)
from zabbix_api.entities.item import CreateItemRequest, CreateItemResponse, Item
from zabbix_api.entities.trigger import CreateTriggerRequest, CreateTriggerResponse, Trigger
from zabbix_api.entities.user import CreateUserRequest, CreateUserResponse, User
from zabbix_api.entities.usergroup import (
    CreateUserGroupRequest,
    CreateUserGroupResponse,
    UserGroup,
)
from zabbix_api.entities.webscenario import (
    CreateWebScenarioRequest,
    CreateWebScenarioResponse,
    WebScenario,
)
from zabbix_api.rpc.dispatcher import Dispatcher, parse_id
from zabbix_api.rpc.types import AuthMode, Response

logger = logging.getLogger(__name__)

# Used only when the client builds its own httpx.Client
DEFAULT_TIMEOUT = 30.0


class ZabbixApiClient:
    """Typed client for the Zabbix API.

    Holds the endpoint URL and an httpx client, nothing else. The session
    token returned by :meth:`get_auth_session` is owned by the caller and
    passed to every authenticated call; it is never cached or renewed.

    Usage:
        with ZabbixApiClient("http://zabbix/api_jsonrpc.php") as client:
            session = client.get_auth_session("Admin", "zabbix")
            groups = client.get_host_groups(session, {"output": "extend"})

        # Zabbix 6.x expects the token inside the request body:
        client = ZabbixApiClient(url, auth_mode=AuthMode.BODY)
    """

    def __init__(
        self,
        url: str,
        http_client: httpx.Client | None = None,
        auth_mode: AuthMode = AuthMode.BEARER,
        timeout: float | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            url: API endpoint URL, e.g. ``http://host/zabbix/api_jsonrpc.php``.
            http_client: httpx client to send requests with. When None, the
                client creates and owns one.
            auth_mode: BEARER for Zabbix 7.x, BODY for 6.x and older.
            timeout: Per-request timeout in seconds. When None, an injected
                client keeps its own setting and an owned client uses
                DEFAULT_TIMEOUT.

        Raises:
            ConfigError: If timeout is not positive.
        """
        if timeout is not None and timeout <= 0:
            raise ConfigError(f"timeout must be positive, got {timeout}")
        self._owns_http_client = http_client is None
        if http_client is None:
            http_client = httpx.Client(timeout=DEFAULT_TIMEOUT if timeout is None else timeout)
        self._http_client = http_client
        self._dispatcher = Dispatcher(http_client, url, auth_mode=auth_mode, timeout=timeout)
        logger.debug("ZabbixApiClient initialized: url=%s, auth_mode=%s", url, auth_mode.value)

    @classmethod
    def from_config(
        cls, config: ClientConfig, http_client: httpx.Client | None = None
    ) -> "ZabbixApiClient":
        """Create a client from a loaded ClientConfig."""
        return cls(
            config.url,
            http_client=http_client,
            auth_mode=config.auth_mode,
            timeout=config.timeout,
        )

    @property
    def url(self) -> str:
        return self._dispatcher.url

    @property
    def auth_mode(self) -> AuthMode:
        return self._dispatcher.auth_mode

    def close(self) -> None:
        """Close the httpx client if this instance created it."""
        if self._owns_http_client:
            self._http_client.close()

    def __enter__(self) -> "ZabbixApiClient":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    # === Session and API info ===

    def get_api_info(self) -> str:
        """Return the API version string, e.g. "7.0.0". Needs no session.

        API: https://www.zabbix.com/documentation/current/en/manual/api/reference/apiinfo/version
        """
        version = self._dispatcher.call(None, "apiinfo.version", {}, str)
        logger.info("zabbix api version: '%s'", version)
        return version

    def get_auth_session(self, login: str, password: str) -> str:
        """Log in and return an opaque session token.

        Credentials are sent as given; the server alone decides whether they
        are valid. Wrong credentials raise ApiCallError.
        """
        logger.info("getting auth session for user '%s'..", login)
        params = {"username": login, "password": password}
        session = self._dispatcher.call(None, "user.login", params, str)
        logger.info("auth ok")
        return session

    def raw_api_call(
        self,
        session: str | None,
        method: str,
        params: Any,
        result_type: Any = Any,
    ) -> Response:
        """Call any API method.

        Args:
            session: Session token, or None for methods needing no login.
            method: Remote method name, e.g. "host.get".
            params: Any serializable value.
            result_type: Type to validate ``result`` against. Plain JSON when
                left as Any.

        Returns:
            The decoded Response envelope; ``result`` is always set.
        """
        logger.info("calling api method '%s'..", method)
        response = self._dispatcher.raw_call(session, method, params, result_type)
        logger.info("api method '%s' has been successfully called", method)
        return response

    # === Host groups ===

    def get_host_groups(self, session: str, params: Any) -> list[HostGroup]:
        """Find host groups.

        API: https://www.zabbix.com/documentation/current/en/manual/api/reference/hostgroup/get
        """
        logger.info("getting host groups with params")
        return self._dispatcher.call(session, "hostgroup.get", params, list[HostGroup])

    def create_host_group(self, session: str, request: CreateHostGroupRequest) -> int:
        logger.info("creating host group '%s'..", request.name)
        group_id = self._dispatcher.create(
            session, "hostgroup.create", request, CreateHostGroupResponse
        )
        logger.info("host group '%s' has been created", request.name)
        return group_id

    # === Hosts ===

    def get_hosts(self, session: str, params: Any) -> list[Host]:
        """Find hosts.

        API: https://www.zabbix.com/documentation/current/en/manual/api/reference/host/get

        Example:
            client.get_hosts(session, GetHostsRequest(filter={"host": ["srv-1203"]}))
        """
        logger.info("getting hosts with params")
        return self._dispatcher.call(session, "host.get", params, list[Host])

    def create_host(self, session: str, request: CreateHostRequest) -> int:
        """Create a host and return its id.

        API: https://www.zabbix.com/documentation/current/en/manual/api/reference/host/create
        """
        logger.info("creating host '%s'..", request.host)
        host_id = self._dispatcher.create(session, "host.create", request, CreateHostResponse)
        logger.info("host '%s' has been created", request.host)
        return host_id

    def update_host(self, session: str, request: UpdateHostRequest) -> int:
        """Update host properties (e.g. status) and return the host id."""
        logger.info("updating host id %s..", request.host_id)
        return self._dispatcher.create(session, "host.update", request, UpdateHostResponse)

    def delete_hosts(self, session: str, host_ids: list[str]) -> list[int]:
        """Delete hosts by id and return the ids of the deleted hosts."""
        logger.info("deleting hosts %s..", host_ids)
        result = self._dispatcher.call(session, "host.delete", host_ids, DeleteHostsResponse)
        return [parse_id(host_id) for host_id in result.ids]

    # === Items ===

    def get_items(self, session: str, params: Any) -> list[Item]:
        """Find items.

        API: https://www.zabbix.com/documentation/current/en/manual/api/reference/item/get
        """
        logger.info("getting items with params")
        return self._dispatcher.call(session, "item.get", params, list[Item])

    def create_item(self, session: str, request: CreateItemRequest) -> int:
        logger.info("creating item with key '%s' for host id %s..", request.key_, request.host_id)
        item_id = self._dispatcher.create(session, "item.create", request, CreateItemResponse)
        logger.info("item '%s' has been created", request.key_)
        return item_id

    # === Triggers ===

    def get_triggers(self, session: str, params: Any) -> list[Trigger]:
        logger.info("getting triggers..")
        return self._dispatcher.call(session, "trigger.get", params, list[Trigger])

    def create_trigger(self, session: str, request: CreateTriggerRequest) -> int:
        logger.info(
            "creating trigger '%s' with expression '%s'..",
            request.description,
            request.expression,
        )
        trigger_id = self._dispatcher.create(
            session, "trigger.create", request, CreateTriggerResponse
        )
        logger.info("trigger '%s' has been created", request.description)
        return trigger_id

    # === Web scenarios ===

    def get_webscenarios(self, session: str, params: Any) -> list[WebScenario]:
        logger.info("getting web-scenarios..")
        return self._dispatcher.call(session, "httptest.get", params, list[WebScenario])

    def create_webscenario(self, session: str, request: CreateWebScenarioRequest) -> int:
        logger.info(
            "creating web-scenario '%s' for host id '%s'..", request.name, request.host_id
        )
        scenario_id = self._dispatcher.create(
            session, "httptest.create", request, CreateWebScenarioResponse
        )
        logger.info("web-scenario '%s' has been created", request.name)
        return scenario_id

    # === Users ===

    def get_users(self, session: str, params: Any) -> list[User]:
        logger.info("getting users..")
        return self._dispatcher.call(session, "user.get", params, list[User])

    def create_user(self, session: str, request: CreateUserRequest) -> int:
        logger.info("creating user '%s'..", request.username)
        user_id = self._dispatcher.create(session, "user.create", request, CreateUserResponse)
        logger.info("user '%s' has been created", request.username)
        return user_id

    # === User groups ===

    def get_user_groups(self, session: str, params: Any) -> list[UserGroup]:
        logger.info("getting user groups..")
        return self._dispatcher.call(session, "usergroup.get", params, list[UserGroup])

    def create_user_group(self, session: str, request: CreateUserGroupRequest) -> int:
        """Create a user group and return its id.

        API: https://www.zabbix.com/documentation/current/en/manual/api/reference/usergroup/create
        """
        logger.info("creating user group '%s'..", request.name)
        group_id = self._dispatcher.create(
            session, "usergroup.create", request, CreateUserGroupResponse
        )
        logger.info("user group '%s' has been created", request.name)
        return group_id
