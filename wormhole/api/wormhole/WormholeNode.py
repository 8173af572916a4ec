"""Wormhole marker embedded in an endpoint node."""

from ..map.MapNode import DEFAULT_HEIGHT, MapNode
from ..map.NodeKind import NodeKind
from .WormholeResource import WormholeResource
from .WormholeType import WormholeType

# Markers are drawn as small badges on their host node
MARKER_SIZE = DEFAULT_HEIGHT / 2


class WormholeNode(MapNode):
    """One end of a wormhole, living inside its endpoint node."""

    def __init__(
        self,
        wormhole_type: WormholeType = WormholeType.SOURCE,
        label: str = "",
        *,
        uri: str | None = None,
        x: float = 0.0,
        y: float = 0.0,
    ):
        super().__init__(label, uri=uri, kind=NodeKind.WORMHOLE, x=x, y=y, width=MARKER_SIZE, height=MARKER_SIZE)
        self.wormhole_type = wormhole_type

    def set_wormhole_type(self, wormhole_type: WormholeType | str) -> None:
        self.wormhole_type = WormholeType(wormhole_type)
        self._changed("type")

    @property
    def wormhole_resource(self) -> WormholeResource | None:
        """The resource if it is a wormhole pointer, else None."""
        resource = self.resource
        return resource if isinstance(resource, WormholeResource) else None
