"""Deterministic left-to-right spreading of overlapping nodes."""

from ..map.MapNode import MapNode
from .Layout import Layout


class SpreadLayout(Layout):
    """Shift nodes right, in list order, until none overlaps an earlier one.

    A node that overlaps earlier nodes moves to ``gap`` past the right edge
    of the furthest of them; this repeats until it is clear. Earlier nodes
    never move, and nodes already clear stay where they are.
    """

    def __init__(self, gap: float = 40.0):
        self.gap = gap

    def spread_out(self, nodes: list[MapNode]) -> None:
        placed: list[MapNode] = []
        for node in nodes:
            overlapping = [other for other in placed if node.intersects(other)]
            while overlapping:
                node.x = max(other.x + other.width for other in overlapping) + self.gap
                overlapping = [other for other in placed if node.intersects(other)]
            placed.append(node)
