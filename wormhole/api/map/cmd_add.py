"""Add node API command.

CLI: wormhole map add <path> <label> [--parent <uri>]
"""

from collections.abc import Iterator

from ..config.WormholeConfig import WormholeConfig
from ..StageResult import StageResult
from .MapLoadError import MapLoadError
from .MapNode import MapNode
from .MapStore import MapStore


def cmd_add(path: str, label: str, parent: str = "") -> StageResult:
    """Add a labelled node to a map, under parent or at the map's top level.

    Args:
        path: Map file
        label: Label of the new node
        parent: Durable identifier of the parent node, empty for the map itself
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        output = {"errors": [], "warnings": [], "path": path, "uri": "", "label": label, "parent": parent}

        yield (0.2, "Loading map...")
        try:
            store = MapStore(WormholeConfig.load().map)
            document = store.load(path)
        except (ValueError, MapLoadError) as e:
            result_obj.fail(str(e), output, str(e))
            return

        node = MapNode(label)
        if parent:
            container = document.find_child_by_uri(parent)
            if container is None:
                message = f"Parent node not found: {parent}"
                result_obj.fail(message, output, message)
                return
            container.add_child(node)
        else:
            document.paste_child(node)

        yield (0.7, "Saving map...")
        try:
            store.save(document)
        except OSError as e:
            message = f"Cannot write {document.file}: {e}"
            result_obj.fail(message, output, message)
            return

        yield (1.0, "Complete")
        output.update(path=str(document.file), uri=node.uri, parent=parent or document.uri)
        result_obj.finish(f"Added node {node.uri}", output)

    return StageResult(announce=f"Adding node {label!r} to {path}...", progress_callback=do_work)
