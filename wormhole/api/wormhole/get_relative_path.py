"""Relativize one path against another by string manipulation.

Structured URI relativization behaves differently across platforms, so the
paths are split on the separator and compared component by component. Input
that is not a well-formed path is tolerated; the result is then "".
"""

import os


def _split(path: str, separator: str) -> list[str]:
    other = "\\" if separator == "/" else "/"
    parts = path.replace(other, separator).split(separator)
    normalized: list[str] = []
    for index, part in enumerate(parts):
        if part == "" and index == 0:
            # Leading root marker of an absolute POSIX path
            normalized.append(part)
        elif part in ("", "."):
            continue
        elif part == ".." and normalized and normalized[-1] not in ("", ".."):
            normalized.pop()
        else:
            normalized.append(part)
    return normalized


def get_relative_path(target_path: str, base_path: str, separator: str = os.sep) -> str:
    """Return target_path relative to base_path, or "" when they share no root.

    The base is treated as a file unless it ends with the separator, so a
    sibling of the base file comes back as its bare name. A file relativized
    against itself also yields its bare name.

    Examples:
        >>> get_relative_path("/docs/maps/B.map", "/docs/A.map", "/")
        'maps/B.map'
        >>> get_relative_path("/docs/B.map", "/docs/maps/A.map", "/")
        '../B.map'
        >>> get_relative_path("D:\\\\B.map", "C:\\\\A.map", "\\\\")
        ''
    """
    if not target_path or not base_path:
        return ""

    other = "\\" if separator == "/" else "/"
    base_is_file = not base_path.replace(other, separator).endswith(separator)

    target = _split(target_path, separator)
    base = _split(base_path, separator)

    common = 0
    while common < len(target) and common < len(base) and target[common] == base[common]:
        common += 1

    if common == 0:
        # No common element, most likely different drive letters
        return ""

    if common == len(target) and common == len(base) and base_is_file:
        return target[-1]

    base_dirs = len(base) - 1 if base_is_file else len(base)
    if common > base_dirs:
        common = base_dirs
    ups = [".."] * (base_dirs - common)
    remainder = target[common:]
    if not remainder:
        return ""
    return separator.join(ups + remainder)
