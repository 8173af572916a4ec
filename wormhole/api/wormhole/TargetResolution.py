"""Result of locating the map at the far end of a wormhole."""

from dataclasses import dataclass
from pathlib import Path

from ..map.MapDocument import MapDocument


@dataclass(frozen=True)
class TargetResolution:
    """The map found, the strategy that found it and the file it came from."""

    document: MapDocument
    strategy: str
    path: Path

    def to_dict(self) -> dict[str, object]:
        return {"strategy": self.strategy, "path": str(self.path), "map_uri": self.document.uri}
