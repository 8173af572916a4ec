"""Target map resolver configuration."""

from pydantic import BaseModel, ConfigDict, Field


class ResolverConfig(BaseModel):
    """Bounds for the folder searches made while locating a target map."""

    model_config = ConfigDict(extra="forbid")

    max_search_depth: int = Field(16, gt=0, description="Maximum folder depth for subfolder and ancestor searches")
    follow_symlinks: bool = Field(False, description="Descend into symlinked folders during subfolder search")
