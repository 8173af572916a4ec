"""Restore wormholes API command.

CLI: wormhole link restore <map>
"""

from collections.abc import Iterator

from ..config.WormholeConfig import WormholeConfig
from ..map.MapLoadError import MapLoadError
from ..StageResult import StageResult
from ._Session import _Session


def cmd_restore(map_path: str) -> StageResult:
    """Restore and resynchronize every wormhole whose marker lives in a map."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        errors: list[str] = []
        warnings: list[str] = []
        restored: list[dict] = []
        failed: list[dict] = []
        try:
            config = WormholeConfig.load()
            session = _Session.open(config)
            yield (0.3, "Loading map...")
            document = session.store.load(map_path)
        except (ValueError, MapLoadError) as e:
            errors.append(str(e))
        else:
            yield (0.5, "Restoring wormholes...")
            for wormhole in session.restorer.restore_map(document):
                if wormhole.cancelled:
                    failed.append(wormhole.to_dict())
                    errors.append(wormhole.error)
                else:
                    restored.append(wormhole.to_dict())
                    if wormhole.is_one_sided:
                        warnings.append(f"Wormhole from {wormhole.source_component.uri} has lost its target node")

        yield (1.0, "Complete")
        result_obj.output = {
            "errors": errors,
            "warnings": warnings,
            "path": map_path,
            "restored": restored,
            "failed": failed,
        }
        result_obj.success = len(errors) == 0
        result_obj.result = (
            f"Restored {len(restored)} wormhole(s)"
            if result_obj.success
            else f"Restored {len(restored)} wormhole(s), {len(errors)} error(s)"
        )

    return StageResult(announce=f"Restoring wormholes in {map_path}...", progress_callback=do_work)
