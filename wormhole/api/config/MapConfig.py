"""Map persistence configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MapConfig(BaseModel):
    """Map section of Wormhole configuration."""

    model_config = ConfigDict(extra="forbid")

    type: str = Field("json", description="Map persistence backend type")
    indent: int = Field(2, ge=0, description="Indentation used when writing map files")

    @field_validator("type")
    @classmethod
    def _known_backend(cls, v: str) -> str:
        if v not in _BACKEND_REGISTRY:
            raise ValueError(f"Unsupported map backend: {v!r} (supported: {sorted(_BACKEND_REGISTRY)})")
        return v


_BACKEND_REGISTRY = {
    "json": "wormhole.api.map._json",
}
