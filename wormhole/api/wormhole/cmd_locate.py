"""Locate target map API command.

CLI: wormhole link locate <source-map> <hint> <node-uri>
"""

from collections.abc import Iterator

from ..config.WormholeConfig import WormholeConfig
from ..StageResult import StageResult
from ._Session import _Session


def cmd_locate(source_map: str, hint: str, node_uri: str) -> StageResult:
    """Report which resolver strategy, if any, finds the map containing node_uri.

    Args:
        source_map: Map file the search starts from (need not be loadable)
        hint: Recorded path of the target map
        node_uri: Node the target map must contain
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        output: dict = {
            "errors": [],
            "warnings": [],
            "source_map": source_map,
            "hint": hint,
            "node_uri": node_uri,
            "found": False,
            "strategy": None,
            "path": None,
        }

        yield (0.2, "Loading configuration...")
        try:
            config = WormholeConfig.load()
        except ValueError as e:
            result_obj.fail(str(e), output, str(e))
            return

        yield (0.5, "Searching for target map...")
        resolution = _Session.open(config).resolver.resolve(hint, node_uri, source_map)

        yield (1.0, "Complete")
        if resolution is None:
            result_obj.fail(
                f"Target map not found for {hint!r}", output, f"No map containing {node_uri} found for {hint!r}"
            )
            return
        output.update(found=True, strategy=resolution.strategy, path=str(resolution.path))
        result_obj.finish(f"Found {resolution.path} via {resolution.strategy}", output)

    return StageResult(announce=f"Locating map for {hint!r}...", progress_callback=do_work)
