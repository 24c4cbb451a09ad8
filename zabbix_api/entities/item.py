from typing import Any

from pydantic import Field

from zabbix_api.entities.base import EXTEND, ZabbixModel
from zabbix_api.entities.host import HostTag


class Item(ZabbixModel):
    item_id: str = Field(default="", alias="itemid")
    name: str
    key_: str
    host_id: str = Field(alias="hostid")


class GetItemsRequest(ZabbixModel):
    output: str | list[str] = EXTEND
    with_triggers: bool | None = None
    host_ids: str | list[str] | None = Field(default=None, alias="hostids")
    item_ids: str | list[str] | None = Field(default=None, alias="itemids")
    search: Any = None
    sort_field: str | None = Field(default=None, alias="sortfield")


class CreateItemRequest(ZabbixModel):
    name: str
    key_: str
    host_id: str = Field(alias="hostid")
    type: int
    value_type: int
    interface_id: str = Field(alias="interfaceid")
    tags: list[HostTag] = []
    delay: str = "30s"


class CreateItemResponse(ZabbixModel):
    item_ids: list[str] = Field(alias="itemids")

    @property
    def ids(self) -> list[str]:
        return self.item_ids
