"""Top-level Wormhole configuration."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...utils.get_home_dir import get_home_dir
from .LogConfig import LogConfig
from .MapConfig import MapConfig
from .ResolverConfig import ResolverConfig
from .WormholeSectionConfig import WormholeSectionConfig


class WormholeConfig(BaseModel):
    """Contents of ``config.json`` in the wormhole home directory.

    Every section has defaults, so a partial file, or none at all, is valid.
    """

    model_config = ConfigDict(extra="forbid")

    resolver: ResolverConfig = Field(default_factory=ResolverConfig)
    map: MapConfig = Field(default_factory=MapConfig)
    wormhole: WormholeSectionConfig = Field(default_factory=WormholeSectionConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_config_path(cls) -> Path:
        return get_home_dir("config.json")

    @classmethod
    def load(cls) -> "WormholeConfig":
        """Read the configuration file, falling back to defaults when it is absent.

        Raises:
            ValueError: If the file is not JSON or a value is rejected; the
                message names the offending field
        """
        path = cls.get_config_path()
        if not path.exists():
            return cls()

        try:
            raw = json.loads(path.read_text())
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first["loc"])
            detail = f"{field}: {first['msg']}" if field else first["msg"]
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Sections in file order, as plain data."""
        return self.model_dump(mode="json")

    def save(self) -> None:
        """Write the configuration through a temporary file so a failed write leaves the old one.

        Raises:
            RuntimeError: If the file cannot be written
        """
        path = self.get_config_path()
        temp_path = path.with_name(path.name + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            temp_path.write_text(json.dumps(self.to_dict(), indent=4))
            temp_path.replace(path)
        except OSError as e:
            temp_path.unlink(missing_ok=True)
            raise RuntimeError(f"Failed to save config {path}: {e}") from e
