from typing import Any

from pydantic import Field

from zabbix_api.entities.base import EXTEND, ZabbixModel


class HostGroup(ZabbixModel):
    group_id: str = Field(alias="groupid")
    name: str


class HostGroupId(ZabbixModel):
    group_id: str = Field(alias="groupid")

    @classmethod
    def of(cls, group: HostGroup) -> "HostGroupId":
        return cls(group_id=group.group_id)


class GetHostGroupsRequest(ZabbixModel):
    output: str | list[str] = EXTEND
    filter: Any = None


class CreateHostGroupRequest(ZabbixModel):
    name: str


class CreateHostGroupResponse(ZabbixModel):
    group_ids: list[str] = Field(alias="groupids")

    @property
    def ids(self) -> list[str]:
        return self.group_ids
