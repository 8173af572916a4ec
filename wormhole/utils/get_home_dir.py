"""Location of the per-user wormhole directory."""

import os
from pathlib import Path

from ..constants import WORMHOLE_HOME_ENV, WORMHOLE_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """``$WORMHOLE_HOME`` (or ``~/.wormhole``), joined with ``parts``.

    >>> get_home_dir("config.json")  # doctest: +SKIP
    PosixPath('/home/user/.wormhole/config.json')
    """
    override = os.environ.get(WORMHOLE_HOME_ENV)
    home = Path(override).expanduser().resolve() if override else Path.home() / WORMHOLE_HOME_EXT
    return home.joinpath(*parts)
