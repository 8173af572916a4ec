"""Abstract UI collaborator used by the wormhole core."""

from abc import ABC, abstractmethod
from pathlib import Path

from ..map.MapDocument import MapDocument
from ..map.MapNode import MapNode


class MapViewer(ABC):
    """What the core needs from the editor hosting the maps."""

    @abstractmethod
    def choose_target_map(self, new_map: bool, current: MapDocument) -> MapDocument | None:
        """Return the map the new wormhole should lead to.

        Args:
            new_map: True to create a brand-new map, False to pick an existing one
            current: The map holding the source node

        Returns:
            The chosen map, or None if the user cancelled
        """
        pass

    @abstractmethod
    def set_active(self, component: MapNode | None) -> None:
        """Move UI focus to component (None clears it)."""
        pass

    @abstractmethod
    def redisplay(self, path: Path) -> None:
        """Reload and redisplay the map stored at path."""
        pass
