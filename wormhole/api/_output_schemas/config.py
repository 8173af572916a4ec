"""Output schema for ``wormhole config show``."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ConfigShowOutput(BaseOutputSchema):
    """A single section, or ``{"sections": [...]}`` when none was asked for."""

    section: str = Field(..., description="Requested section, empty when listing")
    content: dict[str, Any] = Field(..., description="Section values, or the section names when listing")
    config_path: str = Field(..., description="Configuration file consulted")


register_output_schema("config", "show", ConfigShowOutput)
