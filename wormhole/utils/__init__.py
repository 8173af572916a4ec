"""Logging, home directory and path helpers.

One function per module.
"""

from .configure_logging import configure_logging
from .get_home_dir import get_home_dir
from .get_logger import get_logger
from .normalize_path import normalize_path
from .path_to_uri import path_to_uri
from .uri_to_path import uri_to_path

__all__ = [
    "configure_logging",
    "get_home_dir",
    "get_logger",
    "normalize_path",
    "path_to_uri",
    "uri_to_path",
]
