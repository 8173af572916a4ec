"""Output schemas for wormhole (link) commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class WormholeCreateOutput(BaseOutputSchema):
    source_map: str = Field(..., description="Map holding the source node")
    node_uri: str = Field(..., description="Source node the wormhole starts from")
    target_map: str = Field(..., description="Map the wormhole leads to")
    wormhole: dict[str, Any] = Field(..., description="Endpoints, markers and state of the wormhole, empty on failure")


class WormholeRestoreOutput(BaseOutputSchema):
    path: str = Field(..., description="Map whose wormholes were restored")
    restored: list[dict[str, Any]] = Field(..., description="Wormholes restored successfully")
    failed: list[dict[str, Any]] = Field(..., description="Wormholes that could not be restored")


class WormholeReparentOutput(BaseOutputSchema):
    path: str = Field(..., description="Map holding the marker")
    marker_uri: str = Field(..., description="Marker that was moved")
    previous_parent: str = Field(..., description="Node the marker was attached to, empty if unknown")
    new_parent: str = Field(..., description="Node the marker was moved to")
    wormhole: dict[str, Any] = Field(..., description="The restored wormhole, empty on failure")


class WormholeLocateOutput(BaseOutputSchema):
    source_map: str = Field(..., description="Map the search starts from")
    hint: str = Field(..., description="Recorded path of the target map")
    node_uri: str = Field(..., description="Node the target map must contain")
    found: bool = Field(..., description="Whether a map was found")
    strategy: str | None = Field(..., description="Name of the strategy that found the map, None if not found")
    path: str | None = Field(..., description="File of the map found, None if not found")


class WormholeCheckOutput(BaseOutputSchema):
    """Output schema for wormhole check command.

    Each entry of ``wormholes`` has marker, host, wormhole_type, spec,
    component and status: ok, missing_map, missing_node, not_found (the
    pointer records a target node that was never found) or no_pointer.
    """

    path: str = Field(..., description="Map that was checked")
    wormholes: list[dict[str, Any]] = Field(..., description="One entry per wormhole marker in the map")
    broken_count: int = Field(..., description="Number of markers whose far end cannot be reached")


register_output_schema("wormhole", "create", WormholeCreateOutput)
register_output_schema("wormhole", "restore", WormholeRestoreOutput)
register_output_schema("wormhole", "reparent", WormholeReparentOutput)
register_output_schema("wormhole", "locate", WormholeLocateOutput)
register_output_schema("wormhole", "check", WormholeCheckOutput)
