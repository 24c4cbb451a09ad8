from pydantic import Field

from zabbix_api.entities.base import EXTEND, ZabbixModel


class UserGroupPermission(ZabbixModel):
    """Access to a host/template group: 0 deny, 2 read, 3 read-write."""

    id: str
    permission: int


class UserGroupTagFilter(ZabbixModel):
    groupid: str
    tag: str = ""
    value: str = ""


class UserGroupUser(ZabbixModel):
    user_id: str = Field(alias="userid")


class UserGroup(ZabbixModel):
    usrgrpid: str
    name: str
    gui_access: int = 0
    users_status: int = 0
    debug_mode: int = 0


class UserGroupFilter(ZabbixModel):
    name: list[str] | None = None


class GetUserGroupsRequest(ZabbixModel):
    output: str | list[str] | None = EXTEND
    filter: UserGroupFilter | None = None
    usrgrpids: list[str] | None = None
    userids: list[str] | None = None
    status: int | None = None
    select_users: str | None = Field(default=None, alias="selectUsers")
    select_rights: str | None = Field(default=None, alias="selectRights")


class CreateUserGroupRequest(ZabbixModel):
    name: str
    debug_mode: int | None = None
    gui_access: int | None = None
    users_status: int | None = None
    hostgroup_rights: list[UserGroupPermission] | None = None
    templategroup_rights: list[UserGroupPermission] | None = None
    tag_filters: list[UserGroupTagFilter] | None = None
    users: list[UserGroupUser] | None = None


class CreateUserGroupResponse(ZabbixModel):
    user_group_ids: list[str] = Field(alias="usrgrpids")

    @property
    def ids(self) -> list[str]:
        return self.user_group_ids
