"""Entry point for the zabbix-api command."""

import logging
import sys

from zabbix_api.cli.arg_parser import build_parser
from zabbix_api.cli.commands import (
    EXIT_USAGE,
    cmd_call,
    cmd_hostgroups,
    cmd_hosts,
    cmd_login,
    cmd_version,
)
from zabbix_api.cli.output import print_error
from zabbix_api.client import ZabbixApiClient
from zabbix_api.config.loader import load_config
from zabbix_api.core.errors import ConfigError


def configure_logging(verbosity: int) -> None:
    """Send zabbix_api.* logs to stderr. Silent unless -v is given."""
    if verbosity <= 0:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    ))

    package_logger = logging.getLogger("zabbix_api")
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.INFO if verbosity == 1 else logging.DEBUG)
    package_logger.propagate = False


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = load_config(
            args.config,
            overrides={
                "url": args.url,
                "user": args.user,
                "password": args.password,
                "auth_mode": args.auth_mode,
                "timeout": args.timeout,
            },
        )
    except ConfigError as e:
        print_error(e.message)
        return EXIT_USAGE

    with ZabbixApiClient.from_config(config) as client:
        if args.command == "version":
            return cmd_version(client)
        if args.command == "login":
            return cmd_login(client, config.user, config.password)
        if args.command == "call":
            return cmd_call(
                client, config.user, config.password, args.method, args.params, args.no_auth
            )
        if args.command == "hostgroups":
            return cmd_hostgroups(client, config.user, config.password, args.name)
        if args.command == "hosts":
            return cmd_hosts(client, config.user, config.password, args.name)

    print_error(f"Unknown command: {args.command}")
    return EXIT_USAGE


def run() -> None:
    sys.exit(main())
