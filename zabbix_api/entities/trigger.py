from pydantic import Field

from zabbix_api.entities.base import EXTEND, ZabbixModel


class Trigger(ZabbixModel):
    """Trigger as returned by ``trigger.get``; priority arrives as a string."""

    trigger_id: str = Field(alias="triggerid")
    description: str
    expression: str
    event_name: str = ""
    url: str = ""
    priority: int = 0
    recovery_mode: int = 0
    recovery_expression: str = ""


class TriggerTag(ZabbixModel):
    tag: str
    value: str = ""


class GetTriggersRequest(ZabbixModel):
    output: str | list[str] = EXTEND
    trigger_ids: str | list[str] | None = Field(default=None, alias="triggerids")
    host_ids: str | list[str] | None = Field(default=None, alias="hostids")
    select_functions: str | None = Field(default=None, alias="selectFunctions")


class CreateTriggerRequest(ZabbixModel):
    description: str
    expression: str
    priority: int = 0
    recovery_mode: int | None = None
    recovery_expression: str | None = None
    url: str | None = None
    event_name: str | None = None
    dependencies: list[dict[str, str]] = []
    tags: list[TriggerTag] = []


class CreateTriggerResponse(ZabbixModel):
    trigger_ids: list[str] = Field(alias="triggerids")

    @property
    def ids(self) -> list[str]:
        return self.trigger_ids
