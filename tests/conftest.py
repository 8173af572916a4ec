"""Shared pytest configuration and fixtures for all tests."""

from pathlib import Path

import pytest

from wormhole.api.map.MapDocument import MapDocument
from wormhole.api.map.MapNode import MapNode
from wormhole.api.map.MapStore import MapStore
from wormhole.api.viewer._headless.HeadlessViewer import HeadlessViewer
from wormhole.api.wormhole.WormholeBuilder import WormholeBuilder


_MARKERS = {
    "unit": "fast tests of a single module",
    "integration": "tests that drive the CLI end to end",
    "map": "map model and persistence",
    "wormhole": "wormhole engine",
    "viewer": "viewer and layout",
    "config": "configuration",
    "cli": "command line interface",
}


def pytest_configure(config):
    for name, description in _MARKERS.items():
        config.addinivalue_line("markers", f"{name}: {description}")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Environment
# =============================================================================


@pytest.fixture(autouse=True)
def wormhole_home(tmp_path, monkeypatch) -> Path:
    """Point WORMHOLE_HOME at a per-test directory and run from a neutral cwd."""
    home = tmp_path / ".wormhole"
    home.mkdir()
    monkeypatch.setenv("WORMHOLE_HOME", str(home))
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return home


@pytest.fixture
def maps_dir(tmp_path) -> Path:
    path = tmp_path / "maps"
    path.mkdir()
    return path


@pytest.fixture
def store() -> MapStore:
    return MapStore()


# =============================================================================
# Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


def make_map(store: MapStore, path: Path, *labels: str, uris: tuple[str, ...] = ()) -> tuple[MapDocument, list[MapNode]]:
    """Create and save a map holding one top-level node per label."""
    document = store.new_map(path.stem)
    nodes = []
    for index, label in enumerate(labels):
        node = MapNode(label, uri=uris[index] if index < len(uris) else None)
        document.paste_child(node)
        nodes.append(node)
    store.save(document, path)
    return document, nodes


def build_wormhole(store: MapStore, source: MapNode, target_path: Path, new_map: bool = False):
    """Build a wormhole from source to a new node in the map at target_path."""
    viewer = HeadlessViewer(store, target_path)
    builder = WormholeBuilder(store, viewer)
    return builder.build(source, new_map=new_map), builder, viewer
