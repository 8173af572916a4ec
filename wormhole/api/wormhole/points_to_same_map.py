"""Decide whether two recorded map paths name the same map file.

Pure string manipulation with no filesystem access. The heuristic is lossy
on purpose: paths that differ only through symlinks or letter case on a
case-insensitive filesystem are reported as different maps.
"""

import re
from urllib.parse import unquote

_FILE_SCHEME = "file:"
_UNC_PREFIX = "\\\\"
_DRIVE_PATTERN = re.compile(r"^[A-Za-z]:")
_SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]+:")


def _is_relative(path: str) -> bool:
    if not path:
        return False
    if path.startswith(("/", "\\")):
        return False
    return not (_DRIVE_PATTERN.match(path) or _SCHEME_PATTERN.match(path))


def _strip(path: str) -> str:
    if path[: len(_FILE_SCHEME)].lower() == _FILE_SCHEME:
        path = path[len(_FILE_SCHEME) :]
    path = unquote(path)
    if path.startswith(_UNC_PREFIX):
        path = path[len(_UNC_PREFIX) :]
    return path.lstrip("/")


def points_to_same_map(first: str, second: str) -> bool:
    """Return True when both path strings denote the same map.

    Steps, in order: strip a ``file:`` scheme and percent-escapes, strip a
    leading UNC double backslash and any leading forward slashes, compare;
    then retry with forward slashes turned into backslashes when the two
    strings use different slash styles; finally accept a relative path that
    is a suffix of the other one.

    Examples:
        >>> points_to_same_map("file:///Users/x/a.map", "/Users/x/a.map")
        True
        >>> points_to_same_map("a.map", "file:///Users/x/a.map")
        True
    """
    first = first or ""
    second = second or ""
    first_relative = _is_relative(first)
    second_relative = _is_relative(second)

    first = _strip(first)
    second = _strip(second)
    if first == second:
        return True

    if ("/" in first and "\\" in second) or ("\\" in first and "/" in second):
        first = first.replace("/", "\\")
        second = second.replace("/", "\\")
        if first == second:
            return True

    if second_relative and second and first.endswith(second):
        return True
    return bool(first_relative and first and second.endswith(first))
