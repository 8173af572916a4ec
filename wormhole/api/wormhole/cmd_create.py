"""Create wormhole API command.

CLI: wormhole link create <map> <node-uri> <target-map> [--new]
"""

from collections.abc import Iterator
from pathlib import Path

from ..config.WormholeConfig import WormholeConfig
from ..map.MapLoadError import MapLoadError
from ..StageResult import StageResult
from . import WormholeCreateOutput
from ._Session import _Session


def cmd_create(map_path: str, node_uri: str, target_map: str, new: bool = False) -> StageResult:
    """Create a wormhole from a node to a new node in target_map.

    Args:
        map_path: Map holding the source node
        node_uri: Durable identifier of the source node
        target_map: Map the wormhole leads to (created when new is True)
        new: Create target_map as a brand-new map
    """

    def _fail(result_obj: StageResult, message: str) -> None:
        result_obj.output = WormholeCreateOutput(
            source_map=map_path,
            node_uri=node_uri,
            target_map=target_map,
            wormhole={},
            errors=[message],
        ).model_dump(mode="python")
        result_obj.result = message
        result_obj.success = False

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = WormholeConfig.load()
        except ValueError as e:
            _fail(result_obj, str(e))
            return
        if new and Path(target_map).expanduser().exists():
            _fail(result_obj, f"Target map already exists: {target_map}")
            return
        session = _Session.open(config, target_path=target_map)

        yield (0.3, "Loading source map...")
        try:
            document = session.store.load(map_path)
        except MapLoadError as e:
            _fail(result_obj, str(e))
            return

        source_component = document.find_child_by_uri(node_uri)
        if source_component is None:
            _fail(result_obj, f"Node not found: {node_uri}")
            return

        yield (0.6, "Building wormhole...")
        wormhole = session.builder.build(source_component, new_map=new)

        yield (1.0, "Complete")
        errors = [wormhole.error] if wormhole.cancelled else []
        result_obj.output = WormholeCreateOutput(
            source_map=str(document.file),
            node_uri=node_uri,
            target_map=str(wormhole.target_map.file) if wormhole.target_map and wormhole.target_map.file else target_map,
            wormhole=wormhole.to_dict(),
            errors=errors,
        ).model_dump(mode="python")
        result_obj.success = not wormhole.cancelled
        result_obj.result = (
            f"Created wormhole to {wormhole.target_component.uri}"
            if result_obj.success and wormhole.target_component
            else f"Wormhole not created: {wormhole.error}"
        )

    return StageResult(announce=f"Creating wormhole from {node_uri}...", progress_callback=do_work)
