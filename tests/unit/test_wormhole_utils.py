"""Unit tests for wormhole.utils."""

import logging
from pathlib import Path

import pytest

from wormhole.utils import get_home_dir, get_logger, normalize_path, path_to_uri, uri_to_path


def test_get_home_dir_from_environment(wormhole_home):
    assert get_home_dir() == wormhole_home
    assert get_home_dir("config.json") == wormhole_home / "config.json"


def test_get_home_dir_default(monkeypatch):
    monkeypatch.delenv("WORMHOLE_HOME")
    assert get_home_dir() == Path.home() / ".wormhole"


def test_get_logger_is_namespaced():
    logger = get_logger("resolver")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "wormhole.resolver"


def test_normalize_path_keeps_symlinks(tmp_path):
    (tmp_path / "real").mkdir()
    (tmp_path / "link").symlink_to(tmp_path / "real")
    assert normalize_path(tmp_path / "link") == tmp_path / "link"
    assert normalize_path(None) is None


def test_normalize_path_makes_absolute(tmp_path):
    # Tests run from tmp_path/"cwd"
    assert normalize_path("a.map") == tmp_path / "cwd" / "a.map"


@pytest.mark.parametrize(
    "uri,expected",
    [
        ("file:///Users/x/a%20b.map", Path("/Users/x/a b.map")),
        ("file://host/Users/x/a.map", Path("/Users/x/a.map")),
        ("file:/Users/x/a.map", Path("/Users/x/a.map")),
        ("/plain/path.map", Path("/plain/path.map")),
    ],
)
def test_uri_to_path(uri, expected):
    assert uri_to_path(uri) == expected


def test_path_to_uri_round_trip(tmp_path):
    path = tmp_path / "my maps" / "a.map"
    uri = path_to_uri(path)
    assert uri.startswith("file:///")
    assert "%20" in uri
    assert uri_to_path(uri) == path
