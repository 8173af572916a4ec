"""Unit tests for wormhole.api.wormhole.points_to_same_map."""

import pytest

from wormhole.api.wormhole.points_to_same_map import points_to_same_map

pytestmark = pytest.mark.wormhole


def test_file_uri_with_escapes_matches_plain_path():
    assert points_to_same_map("file:///Users/x/a%20b.map", "/Users/x/a b.map")


def test_scheme_is_case_insensitive():
    assert points_to_same_map("FILE:///Users/x/a.map", "/Users/x/a.map")


def test_windows_path_matches_file_uri_with_forward_slashes():
    assert points_to_same_map("C:\\maps\\a.map", "file:///C:/maps/a.map")


def test_unc_path_matches_forward_slash_form():
    assert points_to_same_map("\\\\server\\share\\a.map", "//server/share/a.map")


def test_relative_path_matches_absolute_suffix():
    assert points_to_same_map("a.map", "file:///Users/x/a.map")
    assert points_to_same_map("maps/a.map", "/Users/x/maps/a.map")


def test_different_files_do_not_match():
    assert not points_to_same_map("/Users/x/a.map", "/Users/x/b.map")
    assert not points_to_same_map("b.map", "file:///Users/x/a.map")


def test_absolute_paths_are_not_suffix_matched():
    assert not points_to_same_map("/x/a.map", "/y/x/a.map")


def test_suffix_match_is_plain_string_comparison():
    # Documented looseness of the heuristic
    assert points_to_same_map("B.map", "/x/AB.map")


def test_empty_path_matches_nothing_real():
    assert not points_to_same_map("", "/Users/x/a.map")
    assert not points_to_same_map("/Users/x/a.map", "")


@pytest.mark.parametrize(
    "first,second",
    [
        ("file:///Users/x/a%20b.map", "/Users/x/a b.map"),
        ("C:\\maps\\a.map", "file:///C:/maps/a.map"),
        ("a.map", "file:///Users/x/a.map"),
        ("/Users/x/a.map", "/Users/x/b.map"),
        ("", "/Users/x/a.map"),
        ("sub/a.map", "C:\\sub\\a.map"),
    ],
)
def test_commutative(first, second):
    assert points_to_same_map(first, second) == points_to_same_map(second, first)
