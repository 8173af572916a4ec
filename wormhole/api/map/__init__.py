"""Map API domain: the node graph, documents and their persistence."""

from .ConstructionGuard import ConstructionGuard
from .MapDocument import MapDocument
from .MapEvent import MapEvent
from .MapLoadError import MapLoadError
from .MapNode import MapNode
from .MapStore import MapStore
from .NodeKind import NodeKind
from .OtherResource import OtherResource
from .Resource import Resource

__all__ = [
    "ConstructionGuard",
    "MapDocument",
    "MapEvent",
    "MapLoadError",
    "MapNode",
    "MapStore",
    "NodeKind",
    "OtherResource",
    "Resource",
]
