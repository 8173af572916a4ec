from pathlib import Path


def path_to_uri(path: Path) -> str:
    """Convert Path to a file:// URI.

    Format: file:///absolute/path (percent-encoded)
    """
    from .normalize_path import normalize_path

    return normalize_path(path).as_uri()
