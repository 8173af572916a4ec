"""Wormhole API domain: bidirectional links between nodes of two maps."""

from .._output_schemas.wormhole import (
    WormholeCheckOutput,
    WormholeCreateOutput,
    WormholeLocateOutput,
    WormholeReparentOutput,
    WormholeRestoreOutput,
)
from ._constants import MISSING_TARGET_NODE, SPEC_UNSET
from .BuildState import BuildState
from .get_relative_path import get_relative_path
from .points_to_same_map import points_to_same_map
from .TargetMapResolver import TargetMapResolver
from .TargetResolution import TargetResolution
from .Wormhole import Wormhole
from .WormholeBuilder import WormholeBuilder
from .WormholeNode import WormholeNode
from .WormholeResource import WormholeResource
from .WormholeRestorer import WormholeRestorer
from .WormholeSynchronizer import WormholeSynchronizer
from .WormholeType import WormholeType

__all__ = [
    "MISSING_TARGET_NODE",
    "SPEC_UNSET",
    "BuildState",
    "TargetMapResolver",
    "TargetResolution",
    "Wormhole",
    "WormholeBuilder",
    "WormholeCheckOutput",
    "WormholeCreateOutput",
    "WormholeLocateOutput",
    "WormholeNode",
    "WormholeReparentOutput",
    "WormholeResource",
    "WormholeRestoreOutput",
    "WormholeRestorer",
    "WormholeSynchronizer",
    "WormholeType",
    "get_relative_path",
    "points_to_same_map",
]
