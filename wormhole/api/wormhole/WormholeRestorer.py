"""Re-establish wormholes discovered in a loaded map."""

from __future__ import annotations

from contextlib import ExitStack

from ...utils.get_logger import get_logger
from ..map.MapDocument import MapDocument
from ..map.MapNode import MapNode
from ..map.MapStore import MapStore
from ..viewer.MapViewer import MapViewer
from .BuildState import BuildState
from .TargetMapResolver import TargetMapResolver
from .Wormhole import Wormhole
from .WormholeNode import WormholeNode
from .WormholeResource import WormholeResource
from .WormholeSynchronizer import WormholeSynchronizer
from .WormholeType import WormholeType

logger = get_logger("restorer")

STRATEGY_SAME_MAP = "same_map"


class WormholeRestorer:
    """Rebuilds the in-memory wormhole behind a persisted marker.

    A restore finds the target map (the marker's own map when the pointer
    leads back into it, otherwise through the resolver), then the endpoints
    and the marker on the other side. It finishes by resynchronizing the
    pointers and attaching change listeners. Open maps with unsaved edits are
    saved first. Any later failure cancels the wormhole and writes nothing
    more.
    """

    def __init__(
        self,
        store: MapStore,
        viewer: MapViewer,
        resolver: TargetMapResolver | None = None,
        synchronizer: WormholeSynchronizer | None = None,
    ):
        self.store = store
        self.viewer = viewer
        self.resolver = resolver or TargetMapResolver(store)
        self.synchronizer = synchronizer or WormholeSynchronizer(store, viewer)

    def restore(self, marker: WormholeNode | None, resource: WormholeResource | None) -> Wormhole:
        """Restore the wormhole a marker belongs to.

        When the target node is gone but the marker's host is still in its
        map, the result is a one-sided wormhole holding only the source side.
        """
        wormhole = Wormhole()
        if not self._save_open_maps(wormhole):
            return wormhole
        if marker is None or resource is None:
            return wormhole.cancel("No wormhole marker or pointer given")

        source_map = marker.parent_of_type(MapDocument)
        if source_map is None:
            return wormhole.cancel(f"Marker {marker.uri} does not belong to a map")
        wormhole.source_map = source_map

        with ExitStack() as guards:
            guards.enter_context(source_map.construction_guard.hold())
            if not self._find_target_map(wormhole, resource, guards):
                return wormhole

            component_id = resource.component_uri_string
            if not component_id:
                return wormhole.cancel("Wormhole pointer names no target node")

            target_map = wormhole.target_map
            assert target_map is not None
            target_component = target_map.find_child_by_uri(component_id)

            if target_component is None:
                source_component = source_map.find_child_by_uri(resource.originating_component_uri_string)
                if source_component is None:
                    return wormhole.cancel(f"Neither end of wormhole marker {marker.uri} can be found")
                wormhole.source_component = source_component
                wormhole.source_wormhole_node = marker
                logger.warning("Target node %s is missing; restoring source side only", component_id)
            else:
                wormhole.target_component = target_component
                if not self._match_target_marker(wormhole, marker, target_component, source_map):
                    return wormhole.cancel(f"No marker in target node {component_id} leads back to {source_map.file}")

            wormhole.state = BuildState.COMPONENTS_AND_MAPS
            if not self._resync(wormhole):
                return wormhole

        return self._finish(wormhole)

    def restore_reparented(
        self,
        marker: WormholeNode | None,
        resource: WormholeResource | None,
        prev_uri: str,
        new_parent: MapNode | None,
    ) -> Wormhole:
        """Restore a wormhole whose marker has moved to new_parent.

        The target node must still exist and hold a marker whose pointer
        names prev_uri (exact match); that marker becomes the target marker.
        """
        wormhole = Wormhole()
        if not self._save_open_maps(wormhole):
            return wormhole
        if marker is None or resource is None or new_parent is None or not prev_uri:
            return wormhole.cancel("Marker, pointer, previous parent and new parent are all required")

        source_map = new_parent.parent_of_type(MapDocument)
        if source_map is None:
            return wormhole.cancel(f"New parent {new_parent.uri} does not belong to a map")
        wormhole.source_component = new_parent
        wormhole.source_map = source_map

        with ExitStack() as guards:
            guards.enter_context(source_map.construction_guard.hold())
            try:
                saved = self.store.save(source_map, silent=True)
            except OSError as e:
                logger.error("Failed to save %s: %s", source_map.file, e)
                return wormhole.cancel(f"Failed to save source map: {e}")
            if saved is None:
                return wormhole.cancel("Source map has never been saved")

            if not self._find_target_map(wormhole, resource, guards):
                return wormhole

            target_map = wormhole.target_map
            assert target_map is not None
            target_component = target_map.find_child_by_uri(resource.component_uri_string)
            if target_component is None:
                return wormhole.cancel(f"Target node {resource.component_uri_string} not found")
            wormhole.target_component = target_component

            for candidate in target_component.all_wormhole_nodes():
                other = candidate.wormhole_resource if isinstance(candidate, WormholeNode) else None
                if other is not None and other.component_uri_string == prev_uri:
                    marker.set_wormhole_type(WormholeType.SOURCE)
                    candidate.set_wormhole_type(WormholeType.TARGET)
                    wormhole.source_wormhole_node = marker
                    wormhole.target_wormhole_node = candidate
                    break
            else:
                return wormhole.cancel(f"No marker in target node points at previous parent {prev_uri}")

            wormhole.state = BuildState.COMPONENTS_AND_MAPS
            if not self._resync(wormhole):
                return wormhole

        return self._finish(wormhole)

    def restore_map(self, document: MapDocument) -> list[Wormhole]:
        """Restore every wormhole whose marker lives in document."""
        wormholes: list[Wormhole] = []
        handled: set[str] = set()
        for node in document.all_wormhole_nodes():
            if not isinstance(node, WormholeNode) or node.uri in handled:
                continue
            resource = node.wormhole_resource
            if resource is None:
                continue
            wormhole = self.restore(node, resource)
            handled.add(node.uri)
            if wormhole.target_wormhole_node is not None:
                handled.add(wormhole.target_wormhole_node.uri)
            wormholes.append(wormhole)
        return wormholes

    def _save_open_maps(self, wormhole: Wormhole) -> bool:
        """Write pending edits of every open map before reading any of them."""
        try:
            self.store.save_modified()
        except OSError as e:
            logger.error("Failed to save open maps before restoring wormhole: %s", e)
            wormhole.cancel(f"Failed to save open maps: {e}")
            return False
        return True

    def _find_target_map(self, wormhole: Wormhole, resource: WormholeResource, guards: ExitStack) -> bool:
        source_map = wormhole.source_map
        assert source_map is not None
        if resource.points_to_same_map():
            wormhole.target_map = source_map
            wormhole.strategy = STRATEGY_SAME_MAP
            return True

        resolution = self.resolver.resolve(resource.target_spec(), resource.component_uri_string, source_map.file)
        if resolution is None:
            wormhole.cancel(f"Cannot locate target map {resource.target_spec()!r}")
            return False
        wormhole.target_map = resolution.document
        wormhole.strategy = resolution.strategy
        if resolution.document is not source_map:
            guards.enter_context(resolution.document.construction_guard.hold())
        return True

    @staticmethod
    def _match_target_marker(
        wormhole: Wormhole, marker: WormholeNode, target_component: MapNode, source_map: MapDocument
    ) -> bool:
        for candidate in target_component.all_wormhole_nodes():
            if candidate is marker or not isinstance(candidate, WormholeNode):
                continue
            other = candidate.wormhole_resource
            if other is None:
                continue
            source_component = source_map.find_child_by_uri(other.component_uri_string)
            if source_component is not None:
                wormhole.source_component = source_component
                marker.set_wormhole_type(WormholeType.SOURCE)
                candidate.set_wormhole_type(WormholeType.TARGET)
                wormhole.source_wormhole_node = marker
                wormhole.target_wormhole_node = candidate
                return True
        return False

    def _resync(self, wormhole: Wormhole) -> bool:
        try:
            self.synchronizer.resync(wormhole)
        except ValueError as e:
            wormhole.cancel(str(e))
            logger.warning("Cannot resynchronize wormhole: %s", e)
            return False
        except OSError as e:
            wormhole.cancel(f"Failed to save maps: {e}")
            logger.error("Failed to save maps while restoring wormhole: %s", e)
            return False
        wormhole.state = BuildState.POINTERS_SET
        return True

    def _finish(self, wormhole: Wormhole) -> Wormhole:
        self.synchronizer.attach_listeners(wormhole)
        wormhole.state = BuildState.LISTENERS_ATTACHED
        wormhole.cancelled = False
        wormhole.state = BuildState.DONE
        return wormhole
