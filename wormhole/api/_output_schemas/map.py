"""Output schemas for map commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class MapNewOutput(BaseOutputSchema):
    path: str = Field(..., description="Map file that was created")
    uri: str = Field(..., description="Durable identifier of the new map, empty on failure")
    label: str = Field(..., description="Map label")


class MapAddOutput(BaseOutputSchema):
    path: str = Field(..., description="Map file that was changed")
    uri: str = Field(..., description="Durable identifier of the new node, empty on failure")
    label: str = Field(..., description="Label of the new node")
    parent: str = Field(..., description="Durable identifier of the node it was added to")


class MapShowOutput(BaseOutputSchema):
    """Output schema for map show command.

    Each entry of ``nodes`` has uri, label, kind, parent and depth, plus
    wormhole_type and resource for wormhole markers and nodes with resources.
    """

    path: str = Field(..., description="Map file shown")
    uri: str = Field(..., description="Durable identifier of the map, empty on failure")
    label: str = Field(..., description="Map label")
    nodes: list[dict[str, Any]] = Field(..., description="Every node of the map in depth-first order")


register_output_schema("map", "new", MapNewOutput)
register_output_schema("map", "add", MapAddOutput)
register_output_schema("map", "show", MapShowOutput)
