"""Configuration loading and validation."""

from zabbix_api.config.loader import (
    ENV_AUTH_MODE,
    ENV_PASSWORD,
    ENV_TIMEOUT,
    ENV_URL,
    ENV_USER,
    config_from_env,
    load_config,
)
from zabbix_api.config.schema import ClientConfig

__all__ = [
    "ClientConfig",
    "ENV_URL",
    "ENV_USER",
    "ENV_PASSWORD",
    "ENV_AUTH_MODE",
    "ENV_TIMEOUT",
    "config_from_env",
    "load_config",
]
