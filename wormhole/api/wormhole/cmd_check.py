"""Check wormholes API command.

CLI: wormhole link check <map>
"""

from collections.abc import Iterator
from typing import Any

from ..config.WormholeConfig import WormholeConfig
from ..map.MapLoadError import MapLoadError
from ..StageResult import StageResult
from . import WormholeCheckOutput
from ._constants import MISSING_TARGET_NODE
from ._Session import _Session
from .WormholeNode import WormholeNode

STATUS_OK = "ok"
STATUS_MISSING_MAP = "missing_map"
STATUS_MISSING_NODE = "missing_node"
STATUS_NOT_FOUND = "not_found"
STATUS_NO_POINTER = "no_pointer"


def cmd_check(map_path: str) -> StageResult:
    """Report every wormhole marker in a map and whether its far end can be reached.

    Read-only: pointers are never rewritten and nothing is saved.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = WormholeConfig.load()
            session = _Session.open(config)
            yield (0.3, "Loading map...")
            document = session.store.load(map_path)
        except (ValueError, MapLoadError) as e:
            result_obj.output = WormholeCheckOutput(
                path=map_path, wormholes=[], broken_count=0, errors=[str(e)]
            ).model_dump(mode="python")
            result_obj.result = str(e)
            result_obj.success = False
            return

        markers = [node for node in document.all_wormhole_nodes() if isinstance(node, WormholeNode)]
        entries: list[dict[str, Any]] = []
        warnings: list[str] = []
        for index, marker in enumerate(markers, start=1):
            yield (0.3 + 0.6 * index / max(len(markers), 1), f"Checking marker {index}/{len(markers)}...")
            resource = marker.wormhole_resource
            entry: dict[str, Any] = {
                "marker": marker.uri,
                "host": marker.parent.uri if marker.parent is not None else None,
                "wormhole_type": marker.wormhole_type.value,
                "spec": resource.spec if resource else None,
                "component": resource.component_uri_string if resource else None,
            }
            if resource is None:
                entry["status"] = STATUS_NO_POINTER
                warnings.append(f"Marker {marker.uri} has no wormhole pointer")
            elif resource.component_uri_string == MISSING_TARGET_NODE:
                entry["status"] = STATUS_NOT_FOUND
                warnings.append(f"Marker {marker.uri} points at a node that was never found")
            else:
                if resource.points_to_same_map():
                    target = document
                else:
                    target = session.resolver.locate(
                        resource.target_spec(), resource.component_uri_string, document.file
                    )
                if target is None:
                    entry["status"] = STATUS_MISSING_MAP
                    warnings.append(f"Marker {marker.uri}: map {resource.target_spec()!r} not found")
                elif target.find_child_by_uri(resource.component_uri_string) is None:
                    entry["status"] = STATUS_MISSING_NODE
                    warnings.append(f"Marker {marker.uri}: node {resource.component_uri_string} not found")
                else:
                    entry["status"] = STATUS_OK
            entries.append(entry)

        broken = sum(1 for entry in entries if entry["status"] != STATUS_OK)
        yield (1.0, "Complete")
        result_obj.output = WormholeCheckOutput(
            path=str(document.file), wormholes=entries, broken_count=broken, warnings=warnings
        ).model_dump(mode="python")
        result_obj.result = f"Checked {len(entries)} wormhole marker(s), {broken} broken"
        result_obj.success = True

    return StageResult(announce=f"Checking wormholes in {map_path}...", progress_callback=do_work)
