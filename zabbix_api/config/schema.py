"""Pydantic model for client connection settings."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from zabbix_api.rpc.types import AuthMode


class ClientConfig(BaseModel):
    """Connection settings for a Zabbix API endpoint.

    Example config.json:
        {
            "url": "http://zabbix.local/api_jsonrpc.php",
            "user": "Admin",
            "password": "zabbix",
            "auth_mode": "body",
            "timeout": 15
        }
    """

    model_config = ConfigDict(extra="forbid")

    url: str
    """API endpoint URL, usually ending in api_jsonrpc.php."""

    user: str = ""
    """Login passed to user.login."""

    password: str = Field(default="", repr=False)
    """Password passed to user.login."""

    auth_mode: AuthMode = AuthMode.BEARER
    """bearer (Zabbix 7.x) or body (Zabbix 6.x and older)."""

    timeout: float = Field(default=30.0, gt=0)
    """Timeout in seconds for each request."""

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"url must start with http:// or https://, got: {v!r}")
        return v
