"""Hosts and their interfaces, tags and status."""

from enum import Enum
from typing import Any

from pydantic import Field

from zabbix_api.entities.base import EXTEND, ZabbixModel
from zabbix_api.entities.hostgroup import HostGroupId
from zabbix_api.entities.macro import CreateHostMacro
from zabbix_api.entities.template import TemplateId


class HostStatus(str, Enum):
    """Monitoring status; transmitted as "0"/"1"."""

    ENABLED = "0"
    DISABLED = "1"


class Host(ZabbixModel):
    host_id: str = Field(alias="hostid")
    host: str
    status: HostStatus = HostStatus.ENABLED


class HostTag(ZabbixModel):
    tag: str
    value: str = ""


class HostInterface(ZabbixModel):
    """Agent/SNMP/IPMI/JMX interface (``type`` 1-4)."""

    type: int = 1
    main: int = 1
    ip: str = ""
    dns: str = ""
    port: str = "10050"
    use_ip: int = Field(default=1, alias="useip")


class GetHostsRequest(ZabbixModel):
    output: str | list[str] = EXTEND
    filter: Any = None


class CreateHostRequest(ZabbixModel):
    host: str
    groups: list[HostGroupId]
    interfaces: list[HostInterface] = []
    tags: list[HostTag] = []
    templates: list[TemplateId] = []
    macros: list[CreateHostMacro] = []
    inventory_mode: int = 0
    inventory: dict[str, str] = {}


class CreateHostResponse(ZabbixModel):
    host_ids: list[str] = Field(alias="hostids")

    @property
    def ids(self) -> list[str]:
        return self.host_ids


class UpdateHostRequest(ZabbixModel):
    host_id: str = Field(alias="hostid")
    status: HostStatus | None = None
    name: str | None = None

    @classmethod
    def disable_host(cls, host_id: str) -> "UpdateHostRequest":
        return cls(host_id=host_id, status=HostStatus.DISABLED)

    @classmethod
    def enable_host(cls, host_id: str) -> "UpdateHostRequest":
        return cls(host_id=host_id, status=HostStatus.ENABLED)


# host.update and host.delete answer with the same shape as host.create
UpdateHostResponse = CreateHostResponse
DeleteHostsResponse = CreateHostResponse
