"""In-memory aggregate tying together both ends of a wormhole."""

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ..map.MapDocument import MapDocument
from ..map.MapEvent import MapEvent
from ..map.MapNode import MapNode
from .BuildState import BuildState
from .WormholeNode import WormholeNode


def _file_changed(recorded: Path | None, current: Path | None) -> bool:
    if recorded is None and current is None:
        return False
    if recorded is None or current is None:
        return True
    return recorded != current


@dataclass(eq=False)
class Wormhole:
    """Source and target endpoints, their maps and their markers.

    A wormhole is usable only when ``cancelled`` is False. It starts
    cancelled and is cleared by the builder or restorer once every step has
    succeeded. A one-sided wormhole (target node and marker unknown) is
    still usable. ``source_map_file`` and ``target_map_file`` hold the file
    identity of each map as last seen by the synchronizer.
    """

    source_component: MapNode | None = None
    source_map: MapDocument | None = None
    target_component: MapNode | None = None
    target_map: MapDocument | None = None
    source_wormhole_node: WormholeNode | None = None
    target_wormhole_node: WormholeNode | None = None
    source_map_file: Path | None = None
    target_map_file: Path | None = None
    cancelled: bool = True
    state: BuildState = BuildState.START
    error: str = ""
    strategy: str | None = None
    listener: Callable[[MapEvent], None] | None = field(default=None, repr=False)

    @property
    def is_one_sided(self) -> bool:
        return self.target_component is None

    @property
    def same_map(self) -> bool:
        return self.source_map is not None and self.source_map is self.target_map

    def maps(self) -> list[MapDocument]:
        """The distinct maps this wormhole touches, source first."""
        result: list[MapDocument] = []
        for document in (self.source_map, self.target_map):
            if document is not None and all(document is not seen for seen in result):
                result.append(document)
        return result

    def cancel(self, error: str = "") -> "Wormhole":
        self.cancelled = True
        self.state = BuildState.CANCELLED
        if error:
            self.error = error
        return self

    def record_map_files(self) -> None:
        self.source_map_file = self.source_map.file if self.source_map is not None else None
        self.target_map_file = self.target_map.file if self.target_map is not None else None

    def is_map_file_changed(self) -> bool:
        """True when either map's file differs from the one last recorded."""
        current_source = self.source_map.file if self.source_map is not None else None
        current_target = self.target_map.file if self.target_map is not None else None
        return _file_changed(self.source_map_file, current_source) or _file_changed(
            self.target_map_file, current_target
        )

    def to_dict(self) -> dict[str, Any]:
        def _uri(node: MapNode | None) -> str | None:
            return node.uri if node is not None else None

        def _file(document: MapDocument | None) -> str | None:
            return str(document.file) if document is not None and document.file is not None else None

        return {
            "source_map": _file(self.source_map),
            "source_component": _uri(self.source_component),
            "source_marker": _uri(self.source_wormhole_node),
            "target_map": _file(self.target_map),
            "target_component": _uri(self.target_component),
            "target_marker": _uri(self.target_wormhole_node),
            "state": self.state.value,
            "cancelled": self.cancelled,
            "strategy": self.strategy,
            "error": self.error,
        }
