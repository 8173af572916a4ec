"""Unit tests for wormhole.api.config.WormholeConfig."""

import json

import pytest
from pydantic import ValidationError

from wormhole.api.config.ResolverConfig import ResolverConfig
from wormhole.api.config.WormholeConfig import WormholeConfig

pytestmark = pytest.mark.config


class TestWormholeConfig:
    def test_config_path_under_home(self, wormhole_home):
        assert WormholeConfig.get_config_path() == wormhole_home / "config.json"

    def test_missing_file_gives_defaults(self):
        config = WormholeConfig.load()
        assert config.resolver.max_search_depth == 16
        assert config.resolver.follow_symlinks is False
        assert config.map.type == "json"
        assert config.wormhole.default_node_label == "New Node"
        assert config.wormhole.spread_gap == 40.0
        assert config.log.level == "INFO"

    def test_partial_file(self, wormhole_home):
        (wormhole_home / "config.json").write_text(json.dumps({"resolver": {"max_search_depth": 3}}))
        config = WormholeConfig.load()
        assert config.resolver.max_search_depth == 3
        assert config.map.indent == 2

    def test_invalid_json(self, wormhole_home):
        (wormhole_home / "config.json").write_text("{ broken")
        with pytest.raises(ValueError, match="Invalid JSON"):
            WormholeConfig.load()

    def test_validation_error_names_field(self, wormhole_home):
        (wormhole_home / "config.json").write_text(json.dumps({"resolver": {"max_search_depth": 0}}))
        with pytest.raises(ValueError, match="Configuration validation error: resolver.max_search_depth"):
            WormholeConfig.load()

    def test_unknown_section_rejected(self, wormhole_home):
        (wormhole_home / "config.json").write_text(json.dumps({"vault": {}}))
        with pytest.raises(ValueError, match="vault"):
            WormholeConfig.load()

    def test_unknown_backend_rejected(self, wormhole_home):
        (wormhole_home / "config.json").write_text(json.dumps({"map": {"type": "xml"}}))
        with pytest.raises(ValueError, match="map.type"):
            WormholeConfig.load()

    def test_save_round_trip(self, wormhole_home):
        config = WormholeConfig(resolver=ResolverConfig(max_search_depth=4, follow_symlinks=True))
        config.save()
        assert WormholeConfig.load() == config
        assert not (wormhole_home / "config.json.tmp").exists()

    def test_save_failure_raises_runtime_error(self, wormhole_home):
        (wormhole_home / "config.json").mkdir()
        with pytest.raises(RuntimeError, match="Failed to save config"):
            WormholeConfig().save()

    def test_to_dict_sections(self):
        assert list(WormholeConfig().to_dict()) == ["resolver", "map", "wormhole", "log"]


def test_resolver_depth_must_be_positive():
    with pytest.raises(ValidationError):
        ResolverConfig(max_search_depth=0)
