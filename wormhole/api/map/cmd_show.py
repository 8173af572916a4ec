"""Show map API command.

CLI: wormhole map show <path>
"""

from collections.abc import Iterator
from typing import Any

from ..config.WormholeConfig import WormholeConfig
from ..StageResult import StageResult
from .MapLoadError import MapLoadError
from .MapNode import MapNode
from .MapStore import MapStore


def _describe(node: MapNode, depth: int) -> dict[str, Any]:
    entry: dict[str, Any] = {
        "uri": node.uri,
        "label": node.label,
        "kind": node.kind.value,
        "parent": node.parent.uri if node.parent is not None else None,
        "depth": depth,
    }
    wormhole_type = getattr(node, "wormhole_type", None)
    if wormhole_type is not None:
        entry["wormhole_type"] = wormhole_type.value
    if node.resource is not None:
        entry["resource"] = node.resource.to_dict()
    return entry


def _walk(node: MapNode, depth: int = 1) -> Iterator[dict[str, Any]]:
    for child in node.children:
        yield _describe(child, depth)
        yield from _walk(child, depth + 1)


def cmd_show(path: str) -> StageResult:
    """List every node of a map with its resource and wormhole role."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Loading map...")
        try:
            store = MapStore(WormholeConfig.load().map)
            document = store.load(path)
        except (ValueError, MapLoadError) as e:
            result_obj.output = {"errors": [str(e)], "warnings": [], "path": path, "uri": "", "label": "", "nodes": []}
            result_obj.result = str(e)
            result_obj.success = False
            return

        yield (0.7, "Collecting nodes...")
        nodes = list(_walk(document))

        yield (1.0, "Complete")
        result_obj.output = {
            "errors": [],
            "warnings": [],
            "path": str(document.file),
            "uri": document.uri,
            "label": document.label,
            "nodes": nodes,
        }
        result_obj.result = f"Map {document.label!r} has {len(nodes)} node(s)"
        result_obj.success = True

    return StageResult(announce=f"Showing map {path}...", progress_callback=do_work)
