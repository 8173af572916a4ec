"""Abstract placement capability used when a target node is inserted."""

from abc import ABC, abstractmethod

from ..map.MapNode import MapNode


class Layout(ABC):
    @abstractmethod
    def spread_out(self, nodes: list[MapNode]) -> None:
        """Move nodes so that they no longer overlap."""
        pass
