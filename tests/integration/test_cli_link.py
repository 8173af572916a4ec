"""End-to-end tests of the map and link commands through the CLI."""

import pytest

from tests.integration.conftest import run_json
from wormhole.api.map.MapStore import MapStore

pytestmark = pytest.mark.cli


@pytest.fixture
def atlas(maps_dir):
    """A.map with a Source node and an empty B.map, built through the CLI."""
    a_path, b_path = str(maps_dir / "A.map"), str(maps_dir / "B.map")
    assert run_json(["map", "new", a_path])[0] == 0
    assert run_json(["map", "new", b_path, "--label", "Bee"])[0] == 0
    rc, added = run_json(["map", "add", a_path, "Source"])
    assert rc == 0
    return a_path, b_path, added["uri"]


def test_map_show(atlas):
    a_path, _, source_uri = atlas
    rc, output = run_json(["map", "show", a_path])
    assert rc == 0
    assert output["label"] == "A"
    assert [node["uri"] for node in output["nodes"]] == [source_uri]


def test_map_new_refuses_existing(atlas):
    a_path, _, _ = atlas
    rc, output = run_json(["map", "new", a_path])
    assert rc == 1
    assert "already exists" in output["errors"][0]


def test_create_restore_check(atlas, maps_dir):
    a_path, b_path, source_uri = atlas

    rc, created = run_json(["link", "create", a_path, source_uri, b_path])
    assert rc == 0
    assert created["wormhole"]["state"] == "done"

    rc, shown = run_json(["map", "show", b_path])
    kinds = [node["kind"] for node in shown["nodes"]]
    assert kinds == ["node", "wormhole"]
    assert shown["nodes"][1]["wormhole_type"] == "TARGET"
    assert shown["nodes"][1]["resource"]["spec"] == "A.map"

    rc, checked = run_json(["link", "check", a_path])
    assert rc == 0
    assert checked["broken_count"] == 0

    (maps_dir / "old").mkdir()
    (maps_dir / "B.map").rename(maps_dir / "old" / "B.map")
    rc, restored = run_json(["link", "restore", a_path])
    assert rc == 0
    assert restored["restored"][0]["target_map"] == str(maps_dir / "old" / "B.map")

    marker = MapStore().load(maps_dir / "old" / "B.map").find_child_by_uri(created["wormhole"]["target_marker"])
    assert marker.wormhole_resource.spec == "../A.map"


def test_create_into_new_map(atlas, maps_dir):
    a_path, _, source_uri = atlas
    rc, created = run_json(["link", "create", a_path, source_uri, str(maps_dir / "C.map"), "--new"])
    assert rc == 0
    assert (maps_dir / "C.map").is_file()


def test_reparent(atlas):
    a_path, b_path, source_uri = atlas
    _, other = run_json(["map", "add", a_path, "Other"])
    _, created = run_json(["link", "create", a_path, source_uri, b_path])

    rc, moved = run_json(["link", "reparent", a_path, created["wormhole"]["source_marker"], other["uri"]])
    assert rc == 0
    assert moved["previous_parent"] == source_uri
    assert moved["wormhole"]["source_component"] == other["uri"]


def test_locate(atlas):
    a_path, b_path, source_uri = atlas
    _, created = run_json(["link", "create", a_path, source_uri, b_path])

    rc, located = run_json(["link", "locate", a_path, "/elsewhere/B.map", created["wormhole"]["target_component"]])
    assert rc == 0
    assert located["strategy"] == "same_folder_by_name"

    rc, missing = run_json(["link", "locate", a_path, "Z.map", "urn:test:none"])
    assert rc == 1
    assert missing["found"] is False


def test_create_with_unknown_node_fails(atlas):
    a_path, b_path, _ = atlas
    rc, created = run_json(["link", "create", a_path, "urn:test:none", b_path])
    assert rc == 1
    assert created["errors"] == ["Node not found: urn:test:none"]
