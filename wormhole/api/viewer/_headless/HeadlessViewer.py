"""Viewer that answers from a pre-selected target map and records UI requests."""

from pathlib import Path

from ....utils.get_logger import get_logger
from ....utils.normalize_path import normalize_path
from ...map.MapDocument import MapDocument
from ...map.MapLoadError import MapLoadError
from ...map.MapNode import MapNode
from ...map.MapStore import MapStore
from ..MapViewer import MapViewer

logger = get_logger("viewer")


class HeadlessViewer(MapViewer):
    """MapViewer with no UI.

    ``choose_target_map`` answers with the map at ``target_path``: a fresh map
    saved there when a new map is requested (never over an existing file),
    otherwise the existing map loaded through the store. Focus changes and
    redisplay requests are recorded so callers can inspect them.
    """

    def __init__(self, store: MapStore, target_path: str | Path | None = None, new_map_label: str = ""):
        self.store = store
        self.target_path = normalize_path(target_path) if target_path is not None else None
        self.new_map_label = new_map_label
        self.focus_history: list[MapNode | None] = []
        self.redisplayed: list[Path] = []

    def choose_target_map(self, new_map: bool, current: MapDocument) -> MapDocument | None:
        if self.target_path is None:
            logger.info("No target map selected")
            return None

        if new_map:
            if self.target_path.exists():
                logger.warning("Refusing to create a new map over existing file %s", self.target_path)
                return None
            document = self.store.new_map(self.new_map_label or self.target_path.stem)
            return self.store.save(document, self.target_path)

        try:
            return self.store.load(self.target_path)
        except MapLoadError as e:
            logger.warning("Cannot open target map: %s", e)
            return None

    def set_active(self, component: MapNode | None) -> None:
        self.focus_history.append(component)

    def redisplay(self, path: Path) -> None:
        self.redisplayed.append(normalize_path(path))
