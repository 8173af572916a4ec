"""Keep both wormhole pointers truthful as maps move and are renamed."""

from __future__ import annotations

import os
from contextlib import ExitStack
from pathlib import Path
from urllib.parse import quote

from ...utils.get_logger import get_logger
from ...utils.path_to_uri import path_to_uri
from ..map.MapDocument import MapDocument
from ..map.MapEvent import MapEvent
from ..map.MapNode import MapNode
from ..map.MapStore import MapStore
from ..viewer.MapViewer import MapViewer
from ._constants import MISSING_TARGET_NODE
from .get_relative_path import get_relative_path
from .Wormhole import Wormhole
from .WormholeNode import WormholeNode
from .WormholeResource import WormholeResource

logger = get_logger("synchronizer")


def _encode(relative: str) -> str:
    """Percent-encode a relative path as a URI reference; "" on failure."""
    if not relative:
        return ""
    try:
        return quote(relative.replace(os.sep, "/"), safe="/")
    except UnicodeEncodeError:
        return ""


def _pointer_to(other_file: Path, host_file: Path) -> tuple[str, str]:
    """Return (spec, system_spec) locating other_file from a map stored at host_file."""
    relative = get_relative_path(str(other_file), str(host_file), os.sep)
    spec = _encode(relative)
    if not spec:
        return path_to_uri(other_file), str(other_file)
    return spec, relative


class WormholeSynchronizer:
    """Computes, writes and refreshes the resource pointers of a wormhole."""

    def __init__(self, store: MapStore, viewer: MapViewer):
        self.store = store
        self.viewer = viewer

    def compute_resources(self, wormhole: Wormhole) -> tuple[WormholeResource, WormholeResource | None]:
        """Build fresh pointers from the current map files and node identifiers.

        The second pointer is None for a one-sided wormhole.

        Raises:
            ValueError: If an endpoint or a map file is missing
        """
        source_map, target_map = wormhole.source_map, wormhole.target_map
        source_component = wormhole.source_component
        if source_component is None or source_map is None or target_map is None:
            raise ValueError("Wormhole is missing its source node or one of its maps")
        if source_map.file is None or target_map.file is None:
            raise ValueError("Both maps must be saved before wormhole pointers can be computed")

        source_spec, source_system_spec = _pointer_to(target_map.file, source_map.file)
        target_spec, target_system_spec = _pointer_to(source_map.file, target_map.file)

        target_component = wormhole.target_component
        if target_component is None:
            logger.warning("Target node of wormhole in %s not found; marking it %s", source_map.file, MISSING_TARGET_NODE)
            target_id = MISSING_TARGET_NODE
        else:
            target_id = target_component.uri

        source_resource = WormholeResource(
            spec=source_spec,
            system_spec=source_system_spec,
            component_uri_string=target_id,
            originating_filename=path_to_uri(source_map.file),
            originating_component_uri_string=source_component.uri,
            target_filename=str(target_map.file),
        )
        if target_component is None:
            return source_resource, None

        target_resource = WormholeResource(
            spec=target_spec,
            system_spec=target_system_spec,
            component_uri_string=source_component.uri,
            originating_filename=path_to_uri(target_map.file),
            originating_component_uri_string=target_id,
            target_filename=str(source_map.file),
        )
        return source_resource, target_resource

    def write_resources(self, wormhole: Wormhole) -> None:
        """Set both pointers unconditionally and save both maps."""
        self._refresh_maps(wormhole)
        source_resource, target_resource = self.compute_resources(wormhole)
        with self._guards(wormhole):
            self._set_resource(wormhole.source_wormhole_node, source_resource, wormhole.source_component)
            if target_resource is not None:
                self._set_resource(wormhole.target_wormhole_node, target_resource, wormhole.target_component)
            self._save_maps(wormhole)
        wormhole.record_map_files()

    def resync(self, wormhole: Wormhole) -> bool:
        """Rewrite pointers that no longer match the maps; True if any changed.

        Unchanged pointers are left alone and nothing is saved, so calling
        this twice in a row writes at most once.

        Raises:
            ValueError: If the wormhole's nodes or maps have gone missing
        """
        self._refresh_maps(wormhole)
        source_resource, target_resource = self.compute_resources(wormhole)

        changed = False
        with self._guards(wormhole):
            if self._replace_if_different(wormhole.source_wormhole_node, source_resource, wormhole.source_component):
                changed = True
            if target_resource is not None and self._replace_if_different(
                wormhole.target_wormhole_node, target_resource, wormhole.target_component
            ):
                changed = True
            if changed:
                self._save_maps(wormhole)

        wormhole.record_map_files()
        if changed:
            for document in wormhole.maps():
                if document.file is not None:
                    self.viewer.redisplay(document.file)
            logger.info("Resynchronized wormhole %s", wormhole.source_wormhole_node)
        return changed

    def attach_listeners(self, wormhole: Wormhole) -> None:
        """Resync whenever either map moves to a new file."""

        def on_map_changed(event: MapEvent) -> None:
            if wormhole.cancelled:
                return
            if any(document.construction_guard.held for document in wormhole.maps()):
                return
            if not wormhole.is_map_file_changed():
                return
            logger.debug("Map file changed (%s); resynchronizing", event.what)
            # A failed resync must not fail the change that triggered it
            try:
                self.resync(wormhole)
            except ValueError as e:
                logger.warning("Cannot resynchronize wormhole: %s", e)
            except OSError as e:
                logger.error("Failed to save maps while resynchronizing wormhole: %s", e)

        self.detach_listeners(wormhole)
        wormhole.listener = on_map_changed
        for document in wormhole.maps():
            document.add_listener(on_map_changed)

    def detach_listeners(self, wormhole: Wormhole) -> None:
        if wormhole.listener is None:
            return
        for document in wormhole.maps():
            document.remove_listener(wormhole.listener)
        wormhole.listener = None

    def _refresh_maps(self, wormhole: Wormhole) -> None:
        """Re-derive each map from its endpoint node, which may have moved."""
        if wormhole.source_component is not None:
            source_map = wormhole.source_component.parent_of_type(MapDocument)
            if source_map is None:
                raise ValueError(f"Source node {wormhole.source_component.uri} no longer belongs to a map")
            wormhole.source_map = source_map
        if wormhole.target_component is not None:
            target_map = wormhole.target_component.parent_of_type(MapDocument)
            if target_map is None:
                raise ValueError(f"Target node {wormhole.target_component.uri} no longer belongs to a map")
            wormhole.target_map = target_map

    def _guards(self, wormhole: Wormhole) -> ExitStack:
        stack = ExitStack()
        for document in wormhole.maps():
            stack.enter_context(document.construction_guard.hold())
        return stack

    def _set_resource(self, marker: WormholeNode | None, resource: WormholeResource, host: MapNode | None) -> None:
        if marker is None:
            raise ValueError("Wormhole marker is missing")
        self.viewer.set_active(None)
        marker.resource = resource
        self.viewer.set_active(host)

    def _replace_if_different(
        self, marker: WormholeNode | None, resource: WormholeResource, host: MapNode | None
    ) -> bool:
        if marker is None:
            return False
        existing = marker.wormhole_resource
        if existing is not None and not existing.differs_from(resource):
            return False
        self._set_resource(marker, resource, host)
        return True

    def _save_maps(self, wormhole: Wormhole) -> None:
        for document in wormhole.maps():
            self.store.save(document, silent=True)
