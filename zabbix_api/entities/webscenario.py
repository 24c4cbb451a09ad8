from pydantic import Field

from zabbix_api.entities.base import EXTEND, ZabbixModel


class WebScenarioStep(ZabbixModel):
    name: str
    url: str
    status_codes: str = ""
    no: int


class WebScenario(ZabbixModel):
    http_test_id: str = Field(default="", alias="httptestid")
    name: str
    host_id: str = Field(alias="hostid")
    steps: list[WebScenarioStep] = []


class NameSearch(ZabbixModel):
    name: str


class GetWebScenariosRequest(ZabbixModel):
    output: str | list[str] = EXTEND
    select_steps: str | None = Field(default=EXTEND, alias="selectSteps")
    http_test_ids: str | list[str] | None = Field(default=None, alias="httptestids")
    search: NameSearch | None = None

    @classmethod
    def by_id(cls, http_test_id: str) -> "GetWebScenariosRequest":
        return cls(http_test_ids=http_test_id)

    @classmethod
    def by_name(cls, name: str) -> "GetWebScenariosRequest":
        return cls(search=NameSearch(name=name))


class CreateWebScenarioRequest(ZabbixModel):
    name: str
    host_id: str = Field(alias="hostid")
    steps: list[WebScenarioStep]


class CreateWebScenarioResponse(ZabbixModel):
    http_test_ids: list[str] = Field(alias="httptestids")

    @property
    def ids(self) -> list[str]:
        return self.http_test_ids
