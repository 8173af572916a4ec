"""Send the ``wormhole`` logger tree to a rotating file in the home directory."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ..constants import LOG_FILENAME
from .get_home_dir import get_home_dir

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_MAX_BYTES = 5 * 1024 * 1024
_BACKUPS = 3

_handler: RotatingFileHandler | None = None


def configure_logging(home: Path | None = None, level: str = "INFO") -> None:
    """Attach the log file handler once per process.

    Later calls only change the level. ``level`` is one of the LogConfig
    names; WARN maps to logging.WARNING.
    """
    global _handler
    logger = logging.getLogger("wormhole")
    logger.setLevel(logging.getLevelName("WARNING" if level == "WARN" else level))
    if _handler is not None:
        return

    home = home or get_home_dir()
    home.mkdir(parents=True, exist_ok=True)
    _handler = RotatingFileHandler(home / LOG_FILENAME, maxBytes=_MAX_BYTES, backupCount=_BACKUPS)
    _handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    logger.addHandler(_handler)
