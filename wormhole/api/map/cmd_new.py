"""New map API command.

CLI: wormhole map new <path> [--label]
"""

from collections.abc import Iterator
from pathlib import Path

from ..config.WormholeConfig import WormholeConfig
from ..StageResult import StageResult
from .MapStore import MapStore


def cmd_new(path: str, label: str = "") -> StageResult:
    """Create an empty map file at path; label defaults to the file stem."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        map_label = label or Path(path).stem
        output = {"errors": [], "warnings": [], "path": path, "uri": "", "label": map_label}

        yield (0.2, "Loading configuration...")
        try:
            config = WormholeConfig.load()
        except ValueError as e:
            result_obj.fail(str(e), output, str(e))
            return

        if Path(path).expanduser().exists():
            result_obj.fail(f"Map not created: {path} already exists", output, f"File already exists: {path}")
            return

        yield (0.6, "Writing map...")
        store = MapStore(config.map)
        try:
            document = store.save(store.new_map(map_label), path)
        except OSError as e:
            result_obj.fail(f"Map not created: {e}", output, f"Cannot write {path}: {e}")
            return

        yield (1.0, "Complete")
        assert document is not None and document.file is not None
        output.update(path=str(document.file), uri=document.uri)
        result_obj.finish(f"Created map {document.file}", output)

    return StageResult(announce=f"Creating map {path}...", progress_callback=do_work)
