"""Request, response and object models for Zabbix API entities.

Identifiers stay decimal strings, as on the wire. Optional request fields
left as None are not sent.
"""

from zabbix_api.entities.base import EXTEND, ZabbixModel
from zabbix_api.entities.host import (
    CreateHostRequest,
    CreateHostResponse,
    DeleteHostsResponse,
    GetHostsRequest,
    Host,
    HostInterface,
    HostStatus,
    HostTag,
    UpdateHostRequest,
    UpdateHostResponse,
)
from zabbix_api.entities.hostgroup import (
    CreateHostGroupRequest,
    CreateHostGroupResponse,
    GetHostGroupsRequest,
    HostGroup,
    HostGroupId,
)
from zabbix_api.entities.item import (
    CreateItemRequest,
    CreateItemResponse,
    GetItemsRequest,
    Item,
)
from zabbix_api.entities.macro import CreateHostMacro, GlobalMacro, HostMacro, MacroType
from zabbix_api.entities.template import Template, TemplateId
from zabbix_api.entities.trigger import (
    CreateTriggerRequest,
    CreateTriggerResponse,
    GetTriggersRequest,
    Trigger,
    TriggerTag,
)
from zabbix_api.entities.user import (
    CreateUserRequest,
    CreateUserResponse,
    GetUsersRequest,
    User,
    UserGroupId,
    UserMedia,
)
from zabbix_api.entities.usergroup import (
    CreateUserGroupRequest,
    CreateUserGroupResponse,
    GetUserGroupsRequest,
    UserGroup,
    UserGroupFilter,
    UserGroupPermission,
    UserGroupTagFilter,
    UserGroupUser,
)
from zabbix_api.entities.webscenario import (
    CreateWebScenarioRequest,
    CreateWebScenarioResponse,
    GetWebScenariosRequest,
    WebScenario,
    WebScenarioStep,
)

__all__ = [
    "EXTEND",
    "ZabbixModel",
    # Hosts
    "Host",
    "HostStatus",
    "HostTag",
    "HostInterface",
    "GetHostsRequest",
    "CreateHostRequest",
    "CreateHostResponse",
    "UpdateHostRequest",
    "UpdateHostResponse",
    "DeleteHostsResponse",
    # Host groups
    "HostGroup",
    "HostGroupId",
    "GetHostGroupsRequest",
    "CreateHostGroupRequest",
    "CreateHostGroupResponse",
    # Items
    "Item",
    "GetItemsRequest",
    "CreateItemRequest",
    "CreateItemResponse",
    # Triggers
    "Trigger",
    "TriggerTag",
    "GetTriggersRequest",
    "CreateTriggerRequest",
    "CreateTriggerResponse",
    # Web scenarios
    "WebScenario",
    "WebScenarioStep",
    "GetWebScenariosRequest",
    "CreateWebScenarioRequest",
    "CreateWebScenarioResponse",
    # Users
    "User",
    "UserGroupId",
    "UserMedia",
    "GetUsersRequest",
    "CreateUserRequest",
    "CreateUserResponse",
    # User groups
    "UserGroup",
    "UserGroupFilter",
    "UserGroupPermission",
    "UserGroupTagFilter",
    "UserGroupUser",
    "GetUserGroupsRequest",
    "CreateUserGroupRequest",
    "CreateUserGroupResponse",
    # Templates and macros
    "Template",
    "TemplateId",
    "MacroType",
    "HostMacro",
    "GlobalMacro",
    "CreateHostMacro",
]
