"""Unit tests for wormhole.api.viewer: SpreadLayout and HeadlessViewer."""

import pytest

from tests.unit.conftest import make_map
from wormhole.api.map.MapNode import MapNode
from wormhole.api.viewer._headless.HeadlessViewer import HeadlessViewer
from wormhole.api.viewer.SpreadLayout import SpreadLayout

pytestmark = pytest.mark.viewer


class TestSpreadLayout:
    def test_overlapping_nodes_shifted_right(self):
        first = MapNode("first", x=0, y=0)
        second = MapNode("second", x=20, y=20)
        SpreadLayout(gap=40.0).spread_out([first, second])
        assert second.x == 140.0
        assert second.y == 20.0
        assert first.x == 0.0

    def test_non_overlapping_nodes_untouched(self):
        first = MapNode("first", x=0, y=0)
        second = MapNode("second", x=500, y=0)
        SpreadLayout().spread_out([first, second])
        assert second.x == 500

    def test_chain(self):
        nodes = [MapNode(str(i), x=0, y=0) for i in range(3)]
        SpreadLayout(gap=10.0).spread_out(nodes)
        assert [node.x for node in nodes] == [0.0, 110.0, 220.0]

    def test_later_node_clears_every_earlier_node(self):
        first = MapNode("first", x=0, y=0)
        second = MapNode("second", x=200, y=0)
        third = MapNode("third", x=50, y=10)
        SpreadLayout(gap=10.0).spread_out([first, second, third])
        assert second.x == 200
        assert third.x == 310.0
        assert not any(third.intersects(other) for other in (first, second))


class TestHeadlessViewer:
    def test_no_target(self, store):
        assert HeadlessViewer(store).choose_target_map(False, store.new_map()) is None

    def test_existing_target_loaded_through_store(self, store, maps_dir):
        document, _ = make_map(store, maps_dir / "B.map", "Node")
        viewer = HeadlessViewer(store, maps_dir / "B.map")
        assert viewer.choose_target_map(False, store.new_map()) is document

    def test_missing_target(self, store, maps_dir):
        viewer = HeadlessViewer(store, maps_dir / "missing.map")
        assert viewer.choose_target_map(False, store.new_map()) is None

    def test_new_target_saved(self, store, maps_dir):
        viewer = HeadlessViewer(store, maps_dir / "C.map", new_map_label="Fresh")
        document = viewer.choose_target_map(True, store.new_map())
        assert document.label == "Fresh"
        assert document.file == maps_dir / "C.map"
        assert (maps_dir / "C.map").is_file()

    def test_new_target_never_overwrites_existing_file(self, store, maps_dir):
        make_map(store, maps_dir / "B.map", "Keep")
        before = (maps_dir / "B.map").read_bytes()
        viewer = HeadlessViewer(store, maps_dir / "B.map")
        assert viewer.choose_target_map(True, store.new_map()) is None
        assert (maps_dir / "B.map").read_bytes() == before

    def test_records_focus_and_redisplay(self, store, maps_dir):
        viewer = HeadlessViewer(store)
        node = MapNode("n")
        viewer.set_active(node)
        viewer.set_active(None)
        viewer.redisplay(maps_dir / "A.map")
        assert viewer.focus_history == [node, None]
        assert viewer.redisplayed == [maps_dir / "A.map"]
