from pydantic import Field

from zabbix_api.entities.base import ZabbixModel


class Template(ZabbixModel):
    template_id: str = Field(alias="templateid")
    host: str
    description: str = ""
    name: str = ""
    uuid: str = ""


class TemplateId(ZabbixModel):
    template_id: str = Field(alias="templateid")

    @classmethod
    def of(cls, template: Template) -> "TemplateId":
        return cls(template_id=template.template_id)
