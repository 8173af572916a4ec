"""On-disk JSON structure of a map file."""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from ...wormhole._constants import SPEC_UNSET


class _WormholeResourceData(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    type: Literal["wormhole"] = "wormhole"
    spec: str
    system_spec: str = Field(SPEC_UNSET, alias="systemSpec")
    component_uri_string: str = Field(..., alias="componentURIString")
    originating_component_uri_string: str = Field(..., alias="originatingComponentURIString")
    originating_filename: str = Field(..., alias="originatingFilename")
    target_filename: str = Field("", alias="targetFilename")


class _OtherResourceData(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: Literal["url"] = "url"
    spec: str
    title: str = ""


_ResourceData = Annotated[_WormholeResourceData | _OtherResourceData, Field(discriminator="type")]


class _NodeData(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    uri: str
    label: str = ""
    kind: str = "node"
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    children: list["_NodeData"] = Field(default_factory=list)
    resource: _ResourceData | None = None
    wormhole_type: Literal["SOURCE", "TARGET"] | None = Field(None, alias="wormholeType")


class _MapData(BaseModel):
    model_config = ConfigDict(extra="forbid")

    uri: str
    label: str = ""
    children: list[_NodeData] = Field(default_factory=list)


_NodeData.model_rebuild()
