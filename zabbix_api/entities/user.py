from pydantic import AliasChoices, Field

from zabbix_api.entities.base import EXTEND, ZabbixModel


class User(ZabbixModel):
    # "alias" before Zabbix 5.4, "username" after
    user_id: str = Field(alias="userid")
    username: str = Field(validation_alias=AliasChoices("username", "alias"))
    name: str | None = None
    surname: str | None = None
    role_id: str | None = Field(default=None, alias="roleid")
    user_type: int | None = Field(default=None, alias="type")
    url: str | None = None


class UserGroupId(ZabbixModel):
    usrgrpid: str


class UserMedia(ZabbixModel):
    mediatypeid: str
    sendto: str | list[str]
    active: int = 0
    severity: int = 63
    period: str | None = None


class GetUsersRequest(ZabbixModel):
    output: str | list[str] = EXTEND
    filter: dict[str, list[str]] | None = None
    user_ids: list[str] | None = Field(default=None, alias="userids")
    usrgrpids: list[str] | None = None


class CreateUserRequest(ZabbixModel):
    username: str
    passwd: str
    roleid: str
    usrgrps: list[UserGroupId]
    name: str | None = None
    surname: str | None = None
    url: str | None = None
    autologin: int | None = None
    autologout: str | None = None
    lang: str | None = None
    refresh: str | None = None
    theme: str | None = None
    user_type: int | None = Field(default=None, alias="type")
    medias: list[UserMedia] | None = None


class CreateUserResponse(ZabbixModel):
    user_ids: list[str] = Field(alias="userids")

    @property
    def ids(self) -> list[str]:
        return self.user_ids
