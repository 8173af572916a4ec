"""Wormhole construction defaults."""

from pydantic import BaseModel, ConfigDict, Field


class WormholeSectionConfig(BaseModel):
    """Labels and spacing used when a new wormhole is built."""

    model_config = ConfigDict(extra="forbid")

    default_node_label: str = Field("New Node", description="Label of the placeholder target node")
    default_target_label: str = Field("Wormhole", description="Label of the target wormhole marker")
    spread_gap: float = Field(40.0, ge=0, description="Horizontal gap left between overlapping nodes")
