"""User macros attached to hosts and templates."""

from enum import Enum

from pydantic import Field

from zabbix_api.entities.base import ZabbixModel


class MacroType(str, Enum):
    TEXT = "0"
    SECRET = "1"
    VAULT = "2"


class HostMacro(ZabbixModel):
    """Macro as returned by ``usermacro.get``."""

    id: str = Field(alias="hostmacroid")
    host_id: str = Field(alias="hostid")
    macro: str
    value: str = ""
    type: MacroType = MacroType.TEXT
    description: str = ""


class GlobalMacro(ZabbixModel):
    id: str = Field(alias="globalmacroid")
    macro: str
    value: str = ""
    type: int = 0
    description: str = ""


class CreateHostMacro(ZabbixModel):
    """Macro definition sent inside ``host.create``.

    Example:
        CreateHostMacro.secret("{$DB_PASSWORD}", "s3cr3t", description="db")
    """

    macro: str
    value: str
    description: str | None = None
    type: MacroType | None = None

    @classmethod
    def text(cls, macro: str, value: str, description: str | None = None) -> "CreateHostMacro":
        return cls(macro=macro, value=value, description=description, type=MacroType.TEXT)

    @classmethod
    def secret(cls, macro: str, value: str, description: str | None = None) -> "CreateHostMacro":
        return cls(macro=macro, value=value, description=description, type=MacroType.SECRET)

    @classmethod
    def vault(cls, macro: str, value: str, description: str | None = None) -> "CreateHostMacro":
        return cls(macro=macro, value=value, description=description, type=MacroType.VAULT)
