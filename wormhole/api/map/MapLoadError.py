"""Error raised when a map file cannot be read."""


class MapLoadError(Exception):
    """Raised when a map file is missing, unreadable or malformed."""
