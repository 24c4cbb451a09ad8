"""Shared base for entity models."""

from pydantic import BaseModel, ConfigDict

# Value for "output" and "select*" parameters requesting every property
EXTEND = "extend"


class ZabbixModel(BaseModel):
    """Base for objects mirroring remote shapes.

    Wire names are set as aliases; Python code may use either name. Unknown
    properties returned by the server are ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")
