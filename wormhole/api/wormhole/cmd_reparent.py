"""Reparent wormhole marker API command.

CLI: wormhole link reparent <map> <marker-uri> <new-parent-uri>
"""

from collections.abc import Iterator

from ..config.WormholeConfig import WormholeConfig
from ..map.MapLoadError import MapLoadError
from ..StageResult import StageResult
from . import WormholeReparentOutput
from ._Session import _Session
from .WormholeNode import WormholeNode


def cmd_reparent(map_path: str, marker_uri: str, new_parent_uri: str) -> StageResult:
    """Move a wormhole marker to another node and repair its wormhole.

    On failure the marker is moved back and the map saved again, so the
    wormhole is left as it was.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        output = WormholeReparentOutput(
            path=map_path, marker_uri=marker_uri, previous_parent="", new_parent=new_parent_uri, wormhole={}
        )

        def _fail(message: str) -> None:
            output.errors.append(message)
            result_obj.output = output.model_dump(mode="python")
            result_obj.result = message
            result_obj.success = False

        yield (0.1, "Loading configuration...")
        try:
            config = WormholeConfig.load()
            session = _Session.open(config)
            document = session.store.load(map_path)
        except (ValueError, MapLoadError) as e:
            _fail(str(e))
            return

        yield (0.3, "Finding marker and new parent...")
        marker = document.find_child_by_uri(marker_uri)
        if not isinstance(marker, WormholeNode) or marker.wormhole_resource is None:
            _fail(f"No wormhole marker with a pointer: {marker_uri}")
            return
        new_parent = document.find_child_by_uri(new_parent_uri)
        if new_parent is None:
            _fail(f"Node not found: {new_parent_uri}")
            return
        previous_parent = marker.parent
        output.previous_parent = previous_parent.uri if previous_parent is not None else ""

        yield (0.5, "Moving marker...")
        new_parent.add_child(marker)
        wormhole = session.restorer.restore_reparented(
            marker, marker.wormhole_resource, output.previous_parent, new_parent
        )

        if wormhole.cancelled:
            yield (0.8, "Reverting move...")
            if previous_parent is not None:
                previous_parent.add_child(marker)
            try:
                session.store.save(document, silent=True)
            except OSError as e:
                output.errors.append(f"Failed to save {document.file}: {e}")
            _fail(wormhole.error)
            return

        yield (1.0, "Complete")
        output.wormhole = wormhole.to_dict()
        result_obj.output = output.model_dump(mode="python")
        result_obj.result = f"Moved marker {marker_uri} to {new_parent_uri}"
        result_obj.success = True

    return StageResult(announce=f"Reparenting wormhole marker {marker_uri}...", progress_callback=do_work)
