"""Argument parsing for the zabbix-api CLI."""

import argparse
from pathlib import Path

from zabbix_api.rpc.types import AuthMode


def add_connection_args(parser: argparse.ArgumentParser) -> None:
    """Add connection options shared by all subcommands.

    Each one overrides the config file and ZABBIX_API_* environment variables.
    """
    group = parser.add_argument_group("connection")
    group.add_argument("--config", type=Path, help="JSON config file")
    group.add_argument("--url", help="API endpoint URL (env: ZABBIX_API_URL)")
    group.add_argument("--user", help="Login (env: ZABBIX_API_USER)")
    group.add_argument("--password", help="Password (env: ZABBIX_API_PASSWORD)")
    group.add_argument(
        "--auth-mode",
        dest="auth_mode",
        choices=[mode.value for mode in AuthMode],
        help="bearer for Zabbix 7.x, body for 6.x (env: ZABBIX_API_AUTH_MODE)",
    )
    group.add_argument(
        "--timeout",
        type=float,
        help="Request timeout in seconds (env: ZABBIX_API_TIMEOUT)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="zabbix-api",
        description="Command line access to the Zabbix JSON-RPC API",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="count",
        default=0,
        help="Log to stderr (-v info, -vv debug)",
    )
    add_connection_args(parser)

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("version", help="Print the API version (no login)")
    subparsers.add_parser("login", help="Log in and print the session token")

    call_parser = subparsers.add_parser("call", help="Call any API method")
    call_parser.add_argument("method", help="Method name, e.g. host.get")
    call_parser.add_argument(
        "params",
        nargs="?",
        default="{}",
        help="Parameters as a JSON document (default: {})",
    )
    call_parser.add_argument(
        "--no-auth",
        dest="no_auth",
        action="store_true",
        help="Call without logging in first",
    )

    groups_parser = subparsers.add_parser("hostgroups", help="List host groups")
    groups_parser.add_argument(
        "--name", action="append", default=[], help="Filter by exact name (repeatable)"
    )

    hosts_parser = subparsers.add_parser("hosts", help="List hosts")
    hosts_parser.add_argument(
        "--name", action="append", default=[], help="Filter by technical host name (repeatable)"
    )

    return parser
