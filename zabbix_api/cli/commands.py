"""CLI commands: thin wrappers around ZabbixApiClient.

Each command prints JSON to stdout and returns an exit code:
    0  success
    1  the call failed (network, HTTP status, payload, remote error)
    2  bad configuration or arguments
"""

import json
from typing import Any

from zabbix_api.cli.output import print_error, print_info, print_json
from zabbix_api.client import ZabbixApiClient
from zabbix_api.core.errors import ApiCallError, ZabbixApiError
from zabbix_api.entities.host import GetHostsRequest
from zabbix_api.entities.hostgroup import GetHostGroupsRequest

EXIT_OK = 0
EXIT_CALL_FAILED = 1
EXIT_USAGE = 2


def _report(e: ZabbixApiError) -> int:
    if isinstance(e, ApiCallError):
        print_error(f"{e.error.message} (code {e.code}): {e.data}")
    else:
        print_error(f"{type(e).__name__}: {e.message}")
    return EXIT_CALL_FAILED


def cmd_version(client: ZabbixApiClient) -> int:
    try:
        version = client.get_api_info()
    except ZabbixApiError as e:
        return _report(e)
    print_json({"version": version})
    return EXIT_OK


def cmd_login(client: ZabbixApiClient, user: str, password: str) -> int:
    try:
        session = client.get_auth_session(user, password)
    except ZabbixApiError as e:
        return _report(e)
    print_json({"session": session})
    return EXIT_OK


def cmd_call(
    client: ZabbixApiClient,
    user: str,
    password: str,
    method: str,
    params_json: str,
    no_auth: bool = False,
) -> int:
    """Call any method with JSON parameters and print its result."""
    try:
        params: Any = json.loads(params_json)
    except json.JSONDecodeError as e:
        print_error(f"Invalid params JSON: {e}")
        return EXIT_USAGE

    try:
        session = None if no_auth else client.get_auth_session(user, password)
        response = client.raw_api_call(session, method, params)
    except ZabbixApiError as e:
        return _report(e)
    print_json(response.result)
    return EXIT_OK


def cmd_hostgroups(client: ZabbixApiClient, user: str, password: str, names: list[str]) -> int:
    request = GetHostGroupsRequest(filter={"name": names} if names else None)
    try:
        session = client.get_auth_session(user, password)
        groups = client.get_host_groups(session, request)
    except ZabbixApiError as e:
        return _report(e)
    if not groups:
        print_info("No host groups found")
    print_json([group.model_dump(by_alias=True) for group in groups])
    return EXIT_OK


def cmd_hosts(client: ZabbixApiClient, user: str, password: str, names: list[str]) -> int:
    request = GetHostsRequest(filter={"host": names} if names else None)
    try:
        session = client.get_auth_session(user, password)
        hosts = client.get_hosts(session, request)
    except ZabbixApiError as e:
        return _report(e)
    if not hosts:
        print_info("No hosts found")
    print_json([host.model_dump(mode="json", by_alias=True) for host in hosts])
    return EXIT_OK
