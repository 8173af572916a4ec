"""Map file URIs back to filesystem paths."""

from pathlib import Path
from urllib.parse import unquote, urlsplit


def uri_to_path(uri: str) -> Path:
    """Path named by ``uri``.

    ``file:///abs``, ``file://host/abs`` (the host is dropped) and
    ``file:/abs`` are all accepted. A string without the file scheme is
    taken to be a path already; percent escapes are decoded either way.
    """
    if uri[:5].lower() != "file:":
        return Path(unquote(uri))
    return Path(unquote(urlsplit(uri).path or "/"))
