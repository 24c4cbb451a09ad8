"""Configuration loading: optional JSON file, then environment overrides.

Environment variables win over the file so that secrets can stay out of it:

    ZABBIX_API_URL, ZABBIX_API_USER, ZABBIX_API_PASSWORD,
    ZABBIX_API_AUTH_MODE, ZABBIX_API_TIMEOUT
"""

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from zabbix_api.config.schema import ClientConfig
from zabbix_api.core.errors import ConfigError

logger = logging.getLogger(__name__)

ENV_URL = "ZABBIX_API_URL"
ENV_USER = "ZABBIX_API_USER"
ENV_PASSWORD = "ZABBIX_API_PASSWORD"
ENV_AUTH_MODE = "ZABBIX_API_AUTH_MODE"
ENV_TIMEOUT = "ZABBIX_API_TIMEOUT"

_ENV_FIELDS = {
    ENV_URL: "url",
    ENV_USER: "user",
    ENV_PASSWORD: "password",
    ENV_AUTH_MODE: "auth_mode",
    ENV_TIMEOUT: "timeout",
}


def load_json_file(path: Path) -> dict[str, Any]:
    """Read a JSON config file into a dict; an empty file yields {}.

    Raises:
        ConfigError: If the file is missing or unreadable, or does not hold a
            JSON object.
    """
    logger.debug("Reading config file: %s", path)
    try:
        text = path.read_text(encoding="utf-8-sig").strip()
    except FileNotFoundError as e:
        raise ConfigError(f"File not found: {path}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read file {path}: {e}") from e
    if not text:
        return {}

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Expected object in {path}, got {type(data).__name__}")
    return data


def config_from_env(env: Mapping[str, str] | None = None) -> dict[str, Any]:
    """Collect config values present in the environment."""
    env = os.environ if env is None else env
    return {field: env[name] for name, field in _ENV_FIELDS.items() if env.get(name)}


def load_config(
    path: Path | None = None,
    env: Mapping[str, str] | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> ClientConfig:
    """Load client configuration.

    Layers, later ones winning:
    1. JSON file at ``path`` (if given)
    2. Environment variables
    3. Explicit ``overrides`` whose value is not None (e.g. CLI flags)

    Args:
        path: Optional config file path.
        env: Environment mapping. Defaults to os.environ.
        overrides: Values set by the caller.

    Returns:
        Validated ClientConfig.

    Raises:
        ConfigError: If the file is invalid or the merged values fail validation.
    """
    merged: dict[str, Any] = {}
    sources: list[str] = []

    if path is not None:
        merged.update(load_json_file(path))
        sources.append(str(path))

    env_values = config_from_env(env)
    if env_values:
        merged.update(env_values)
        sources.append("environment")

    if overrides:
        explicit = {k: v for k, v in overrides.items() if v is not None}
        if explicit:
            merged.update(explicit)
            sources.append("arguments")

    if not merged.get("url"):
        raise ConfigError(f"No API url configured (set {ENV_URL} or pass a config file)")

    try:
        config = ClientConfig.model_validate(merged)
    except ValidationError as e:
        raise ConfigError(f"Config validation failed (from {', '.join(sources)}): {e}") from e

    logger.debug("Config loaded from: %s", sources)
    return config
