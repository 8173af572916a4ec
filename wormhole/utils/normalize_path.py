"""Absolute form of a user-supplied path."""

from pathlib import Path
from typing import overload


@overload
def normalize_path(path: str | Path) -> Path: ...


@overload
def normalize_path(path: None) -> None: ...


def normalize_path(path: str | Path | None) -> Path | None:
    """Expand ``~`` and anchor ``path`` at the working directory.

    Symlinks are left alone: a map opened through a link keeps the link's
    path as its file, and wormholes record that path.
    """
    if path is None:
        return None
    return Path(path).expanduser().absolute()
