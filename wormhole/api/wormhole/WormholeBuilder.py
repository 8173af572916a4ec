"""Build a fresh wormhole from a node to a new node in another (or the same) map."""

from __future__ import annotations

from contextlib import ExitStack

from ...utils.get_logger import get_logger
from ..config.WormholeSectionConfig import WormholeSectionConfig
from ..map.MapDocument import MapDocument
from ..map.MapNode import MapNode
from ..map.MapStore import MapStore
from ..map.NodeKind import NodeKind
from ..viewer.Layout import Layout
from ..viewer.MapViewer import MapViewer
from ..viewer.SpreadLayout import SpreadLayout
from .BuildState import BuildState
from .Wormhole import Wormhole
from .WormholeNode import WormholeNode
from .WormholeSynchronizer import WormholeSynchronizer
from .WormholeType import WormholeType

logger = get_logger("builder")

_CONTAINER_KINDS = (NodeKind.LAYER, NodeKind.GROUP)


class WormholeBuilder:
    """Runs the construction steps for a new wormhole.

    Each step either advances ``wormhole.state`` or cancels the wormhole;
    the construction guards of both maps are held from the moment each map
    is known until the build returns.
    """

    def __init__(
        self,
        store: MapStore,
        viewer: MapViewer,
        layout: Layout | None = None,
        wormhole_config: WormholeSectionConfig | None = None,
        synchronizer: WormholeSynchronizer | None = None,
    ):
        self.store = store
        self.viewer = viewer
        self.wormhole_config = wormhole_config or WormholeSectionConfig()
        self.layout = layout or SpreadLayout(self.wormhole_config.spread_gap)
        self.synchronizer = synchronizer or WormholeSynchronizer(store, viewer)

    def build(self, source_component: MapNode | None, new_map: bool = False) -> Wormhole:
        """Link source_component to a new placeholder node in a chosen map.

        Args:
            source_component: Node the wormhole starts from
            new_map: True to place the target node in a brand-new map

        Returns:
            The wormhole; check ``cancelled`` and ``error`` for the outcome
        """
        wormhole = Wormhole()
        with ExitStack() as guards:
            try:
                if not self._create_components_and_maps(wormhole, source_component, new_map, guards):
                    logger.warning("Wormhole construction cancelled: %s", wormhole.error)
                    return wormhole
                self._create_markers(wormhole)
                self._place_target(wormhole)
                self.synchronizer.write_resources(wormhole)
                wormhole.state = BuildState.POINTERS_SET
            except OSError as e:
                logger.error("Failed to save maps while building wormhole: %s", e)
                self._roll_back(wormhole)
                return wormhole.cancel(f"Failed to save maps: {e}")

        self.synchronizer.attach_listeners(wormhole)
        wormhole.state = BuildState.LISTENERS_ATTACHED
        wormhole.cancelled = False
        wormhole.state = BuildState.DONE
        logger.info("Built wormhole %s -> %s", wormhole.source_map_file, wormhole.target_map_file)
        return wormhole

    def _create_components_and_maps(
        self, wormhole: Wormhole, source_component: MapNode | None, new_map: bool, guards: ExitStack
    ) -> bool:
        self.store.save_modified()

        if source_component is None:
            wormhole.cancel("No source node given")
            return False
        source_map = source_component.parent_of_type(MapDocument)
        if source_map is None:
            wormhole.cancel(f"Source node {source_component.uri} does not belong to a map")
            return False
        guards.enter_context(source_map.construction_guard.hold())
        wormhole.source_component = source_component
        wormhole.source_map = source_map

        if self.store.save(source_map, silent=True) is None:
            wormhole.cancel("Source map has never been saved")
            return False

        wormhole.target_component = MapNode(self.wormhole_config.default_node_label)

        target_map = self.viewer.choose_target_map(new_map, source_map)
        if target_map is None:
            wormhole.cancel("No target map chosen")
            return False
        if target_map.file is None:
            wormhole.cancel("Target map has never been saved")
            return False
        if target_map is not source_map:
            guards.enter_context(target_map.construction_guard.hold())
        wormhole.target_map = target_map

        wormhole.state = BuildState.COMPONENTS_AND_MAPS
        return True

    def _create_markers(self, wormhole: Wormhole) -> None:
        source_marker = WormholeNode(WormholeType.SOURCE)
        target_marker = WormholeNode(WormholeType.TARGET, self.wormhole_config.default_target_label)
        assert wormhole.source_component is not None and wormhole.target_component is not None
        wormhole.source_component.add_child(source_marker)
        wormhole.target_component.add_child(target_marker)
        wormhole.source_wormhole_node = source_marker
        wormhole.target_wormhole_node = target_marker
        wormhole.state = BuildState.MARKERS_CREATED

    def _place_target(self, wormhole: Wormhole) -> None:
        assert wormhole.target_map is not None and wormhole.target_component is not None
        wormhole.target_map.paste_child(wormhole.target_component)
        self._spread_overlaps(wormhole.target_map, wormhole.target_component)
        wormhole.state = BuildState.PLACED

    def _spread_overlaps(self, container: MapNode, placed: MapNode) -> None:
        for child in list(container.children):
            if child is placed or child.kind is NodeKind.LINK:
                continue
            if child.kind in _CONTAINER_KINDS:
                self._spread_overlaps(child, placed)
            elif child.intersects(placed):
                self.layout.spread_out([child, placed])

    def _roll_back(self, wormhole: Wormhole) -> None:
        """Undo in-memory changes of a failed build and restore the maps on disk."""
        for marker in (wormhole.source_wormhole_node, wormhole.target_wormhole_node):
            if marker is not None and marker.parent is not None:
                marker.parent.remove_child(marker)
        target_component = wormhole.target_component
        if target_component is not None and target_component.parent is not None:
            target_component.parent.remove_child(target_component)

        for document in wormhole.maps():
            if document.file is None:
                continue
            try:
                self.store.save(document, silent=True)
            except OSError as e:
                logger.error("Could not restore %s after failed build: %s", document.file, e)
