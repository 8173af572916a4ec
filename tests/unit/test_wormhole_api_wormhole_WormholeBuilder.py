"""Unit tests for wormhole.api.wormhole.WormholeBuilder."""

import pytest

from tests.unit.conftest import build_wormhole, make_map
from wormhole.api.map.MapNode import MapNode
from wormhole.api.map.MapStore import MapStore
from wormhole.api.map.NodeKind import NodeKind
from wormhole.api.viewer._headless.HeadlessViewer import HeadlessViewer
from wormhole.api.wormhole.BuildState import BuildState
from wormhole.api.wormhole.WormholeBuilder import WormholeBuilder
from wormhole.api.wormhole.WormholeNode import WormholeNode
from wormhole.api.wormhole.WormholeType import WormholeType

pytestmark = pytest.mark.wormhole


@pytest.fixture
def two_maps(store, maps_dir):
    doc_a, (source,) = make_map(store, maps_dir / "A.map", "Source")
    doc_b, (existing,) = make_map(store, maps_dir / "B.map", "Existing")
    return doc_a, source, doc_b, existing


class TestBuild:
    def test_links_both_ends(self, store, maps_dir, two_maps):
        doc_a, source, doc_b, _ = two_maps
        wormhole, _, _ = build_wormhole(store, source, maps_dir / "B.map")

        assert not wormhole.cancelled
        assert wormhole.state is BuildState.DONE
        assert wormhole.error == ""
        assert wormhole.source_map is doc_a
        assert wormhole.target_map is doc_b
        assert wormhole.target_component.parent is doc_b
        assert wormhole.target_component.label == "New Node"

        source_marker = wormhole.source_wormhole_node
        target_marker = wormhole.target_wormhole_node
        assert source_marker.parent is source
        assert source_marker.wormhole_type is WormholeType.SOURCE
        assert target_marker.parent is wormhole.target_component
        assert target_marker.wormhole_type is WormholeType.TARGET
        assert target_marker.label == "Wormhole"

    def test_pointers_are_symmetric(self, store, maps_dir, two_maps):
        _, source, _, _ = two_maps
        wormhole, _, _ = build_wormhole(store, source, maps_dir / "B.map")

        outgoing = wormhole.source_wormhole_node.wormhole_resource
        incoming = wormhole.target_wormhole_node.wormhole_resource
        assert outgoing.spec == "B.map"
        assert outgoing.system_spec == "B.map"
        assert outgoing.component_uri_string == wormhole.target_component.uri
        assert outgoing.originating_component_uri_string == source.uri
        assert outgoing.originating_filename == (maps_dir / "A.map").as_uri()
        assert outgoing.target_filename == str(maps_dir / "B.map")

        assert incoming.spec == "A.map"
        assert incoming.component_uri_string == source.uri
        assert incoming.originating_component_uri_string == wormhole.target_component.uri
        assert incoming.originating_filename == (maps_dir / "B.map").as_uri()

        assert not outgoing.points_to_same_map()
        assert not incoming.points_to_same_map()

    def test_pointers_persisted(self, store, maps_dir, two_maps):
        _, source, _, _ = two_maps
        wormhole, _, _ = build_wormhole(store, source, maps_dir / "B.map")

        fresh = MapStore()
        marker = fresh.load(maps_dir / "A.map").find_child_by_uri(wormhole.source_wormhole_node.uri)
        assert isinstance(marker, WormholeNode)
        assert marker.wormhole_resource.spec == "B.map"
        target = fresh.load(maps_dir / "B.map").find_child_by_uri(wormhole.target_component.uri)
        assert target is not None
        assert target.children[0].wormhole_resource.spec == "A.map"

    def test_maps_left_unmodified(self, store, maps_dir, two_maps):
        doc_a, source, doc_b, _ = two_maps
        build_wormhole(store, source, maps_dir / "B.map")
        assert not doc_a.modified
        assert not doc_b.modified

    def test_target_node_spread_away_from_overlap(self, store, maps_dir, two_maps):
        _, source, _, existing = two_maps
        wormhole, _, _ = build_wormhole(store, source, maps_dir / "B.map")
        placed = wormhole.target_component
        assert placed.x == existing.x + existing.width + 40.0
        assert not placed.intersects(existing)

    def test_spread_looks_inside_layers(self, store, maps_dir):
        _, (source,) = make_map(store, maps_dir / "A.map", "Source")
        doc_b = store.new_map("B")
        layer = MapNode("Layer", kind=NodeKind.LAYER, width=0.0, height=0.0)
        doc_b.add_child(layer)
        inner = MapNode("Inner", x=20.0, y=20.0)
        layer.add_child(inner)
        store.save(doc_b, maps_dir / "B.map")

        wormhole, _, _ = build_wormhole(store, source, maps_dir / "B.map")
        assert not wormhole.target_component.intersects(inner)

    def test_same_map(self, store, maps_dir):
        doc_a, (source,) = make_map(store, maps_dir / "A.map", "Source")
        wormhole, _, _ = build_wormhole(store, source, maps_dir / "A.map")

        assert not wormhole.cancelled
        assert wormhole.same_map
        assert wormhole.maps() == [doc_a]
        assert wormhole.target_component.parent is doc_a
        assert wormhole.source_wormhole_node.wormhole_resource.spec == "A.map"
        assert wormhole.source_wormhole_node.wormhole_resource.points_to_same_map()

    def test_new_target_map(self, store, maps_dir):
        _, (source,) = make_map(store, maps_dir / "A.map", "Source")
        target_path = maps_dir / "new" / "C.map"
        wormhole, _, _ = build_wormhole(store, source, target_path, new_map=True)

        assert not wormhole.cancelled
        assert target_path.is_file()
        assert wormhole.target_map.label == "C"
        assert wormhole.source_wormhole_node.wormhole_resource.spec == "new/C.map"
        assert wormhole.target_wormhole_node.wormhole_resource.spec == "../A.map"

    def test_new_target_map_over_existing_file_cancelled(self, store, maps_dir):
        _, (source,) = make_map(store, maps_dir / "A.map", "Source")
        doc_b, _ = make_map(store, maps_dir / "B.map", "Keep")
        wormhole, _, _ = build_wormhole(store, source, maps_dir / "B.map", new_map=True)

        assert wormhole.cancelled
        assert wormhole.error == "No target map chosen"
        assert doc_b.children[0].label == "Keep"
        assert store.load(maps_dir / "B.map") is doc_b

    def test_saves_other_modified_maps_first(self, store, maps_dir, two_maps):
        _, source, doc_b, _ = two_maps
        doc_c, _ = make_map(store, maps_dir / "C.map")
        doc_c.paste_child(MapNode("Pending"))
        assert doc_c.modified

        build_wormhole(store, source, maps_dir / "B.map")
        assert not doc_c.modified
        assert MapStore().load(maps_dir / "C.map").children[0].label == "Pending"

    def test_listeners_attached_to_both_maps(self, store, maps_dir, two_maps):
        doc_a, source, doc_b, _ = two_maps
        wormhole, _, _ = build_wormhole(store, source, maps_dir / "B.map")
        assert wormhole.listener in doc_a.listeners
        assert wormhole.listener in doc_b.listeners


class TestCancel:
    def test_no_source(self, store, maps_dir):
        wormhole, _, _ = build_wormhole(store, None, maps_dir / "B.map")
        assert wormhole.cancelled
        assert wormhole.state is BuildState.CANCELLED
        assert wormhole.error == "No source node given"

    def test_source_outside_any_map(self, store, maps_dir):
        wormhole, _, _ = build_wormhole(store, MapNode("Loose"), maps_dir / "B.map")
        assert wormhole.cancelled
        assert "does not belong to a map" in wormhole.error

    def test_unsaved_source_map(self, store, maps_dir, two_maps):
        document = store.new_map("Unsaved")
        node = MapNode("Source")
        document.paste_child(node)

        wormhole, _, _ = build_wormhole(store, node, maps_dir / "B.map")
        assert wormhole.cancelled
        assert wormhole.error == "Source map has never been saved"
        assert node.children == []
        assert not document.construction_guard.held

    def test_no_target_chosen(self, store, two_maps):
        doc_a, source, _, _ = two_maps
        builder = WormholeBuilder(store, HeadlessViewer(store))
        wormhole = builder.build(source)

        assert wormhole.cancelled
        assert wormhole.error == "No target map chosen"
        assert source.children == []
        assert not doc_a.construction_guard.held

    def test_missing_target_map(self, store, maps_dir, two_maps):
        _, source, _, _ = two_maps
        wormhole, _, _ = build_wormhole(store, source, maps_dir / "missing.map")
        assert wormhole.cancelled
        assert wormhole.error == "No target map chosen"
        assert not (maps_dir / "missing.map").exists()

    def test_save_failure_rolls_back(self, store, maps_dir, two_maps, monkeypatch):
        doc_a, source, doc_b, existing = two_maps
        real_write = store._backend.write

        def failing_write(document, path):
            if path.name == "B.map":
                raise OSError("disk full")
            real_write(document, path)

        monkeypatch.setattr(store._backend, "write", failing_write)
        wormhole, _, _ = build_wormhole(store, source, maps_dir / "B.map")

        assert wormhole.cancelled
        assert "disk full" in wormhole.error
        assert source.children == []
        assert doc_b.children == [existing]
        assert not doc_a.construction_guard.held
        assert not doc_b.construction_guard.held
        assert MapStore().load(maps_dir / "A.map").all_wormhole_nodes() == []
        assert wormhole.listener is None


class TestListener:
    def test_save_as_resynchronizes(self, store, maps_dir, two_maps):
        doc_a, source, _, _ = two_maps
        wormhole, _, viewer = build_wormhole(store, source, maps_dir / "B.map")

        moved = maps_dir / "moved" / "A2.map"
        store.save(doc_a, moved)

        assert wormhole.source_wormhole_node.wormhole_resource.spec == "../B.map"
        assert wormhole.target_wormhole_node.wormhole_resource.spec == "moved/A2.map"
        assert moved in viewer.redisplayed

        fresh = MapStore()
        marker = fresh.load(maps_dir / "B.map").find_child_by_uri(wormhole.target_wormhole_node.uri)
        assert marker.wormhole_resource.spec == "moved/A2.map"
        assert marker.wormhole_resource.originating_filename == (maps_dir / "B.map").as_uri()
        assert fresh.load(moved).find_child_by_uri(wormhole.source_wormhole_node.uri) is not None

    def test_plain_save_does_not_resync(self, store, maps_dir, two_maps):
        doc_a, source, _, _ = two_maps
        wormhole, _, viewer = build_wormhole(store, source, maps_dir / "B.map")

        doc_a.paste_child(MapNode("Another"))
        store.save(doc_a)
        assert viewer.redisplayed == []

    def test_cancelled_wormhole_ignores_moves(self, store, maps_dir, two_maps):
        doc_a, source, _, _ = two_maps
        wormhole, _, viewer = build_wormhole(store, source, maps_dir / "B.map")
        wormhole.cancel()

        store.save(doc_a, maps_dir / "A2.map")
        assert viewer.redisplayed == []
        assert wormhole.target_wormhole_node.wormhole_resource.spec == "A.map"
