"""A named, file-backed container of map nodes."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from ...utils.normalize_path import normalize_path
from .ConstructionGuard import ConstructionGuard
from .MapEvent import MapEvent
from .MapNode import MapNode
from .NodeKind import NodeKind

MapListener = Callable[[MapEvent], None]

# Offset between consecutive pasted nodes
_PASTE_STEP = 20.0


class MapDocument(MapNode):
    """Root of a map's node graph.

    The file is None until the map is first saved. Listeners are never
    persisted; anything interested in a map must re-attach after a reload.
    """

    def __init__(self, label: str = "", *, uri: str | None = None, file: Path | None = None):
        super().__init__(label, uri=uri, kind=NodeKind.MAP)
        self.file: Path | None = normalize_path(file)
        self.modified = False
        self.construction_guard = ConstructionGuard()
        self._listeners: list[MapListener] = []

    def __repr__(self) -> str:
        return f"MapDocument({self.label!r}, file={str(self.file) if self.file else None!r})"

    def set_file(self, file: Path | None) -> None:
        """Point the map at a (new) file; fires a "file" event."""
        self.file = normalize_path(file)
        self.notify(MapEvent(what="file", source=self))

    def paste_child(self, node: MapNode) -> None:
        """Insert a node at the default location (top-left, stepped per paste)."""
        offset = _PASTE_STEP * sum(1 for child in self.children if child.kind is not NodeKind.LAYER)
        node.x = offset
        node.y = offset
        self.add_child(node)

    def add_listener(self, listener: MapListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: MapListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    @property
    def listeners(self) -> list[MapListener]:
        return list(self._listeners)

    def notify(self, event: MapEvent) -> None:
        for listener in list(self._listeners):
            listener(event)

    def _changed(self, what: str, source: MapNode | None = None) -> None:
        self.modified = True
        self.notify(self._event(what, source))
