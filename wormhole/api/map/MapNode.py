"""Addressable element of a map."""

from __future__ import annotations

import uuid
from collections.abc import Iterator
from typing import TypeVar

from .MapEvent import MapEvent
from .NodeKind import NodeKind
from .Resource import Resource

T = TypeVar("T", bound="MapNode")

DEFAULT_WIDTH = 100.0
DEFAULT_HEIGHT = 30.0


def new_node_uri() -> str:
    """Create a fresh durable identifier for a node or map."""
    return f"urn:uuid:{uuid.uuid4()}"


class MapNode:
    """A node in a map's graph.

    The ``uri`` is the durable identifier: it survives save/reload and is
    independent of object identity. Changes bubble up through the parents to
    the owning MapDocument, which marks itself modified and notifies its
    listeners.
    """

    def __init__(
        self,
        label: str = "",
        *,
        uri: str | None = None,
        kind: NodeKind = NodeKind.NODE,
        x: float = 0.0,
        y: float = 0.0,
        width: float = DEFAULT_WIDTH,
        height: float = DEFAULT_HEIGHT,
    ):
        self.uri = uri or new_node_uri()
        self.label = label
        self.kind = kind
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.parent: MapNode | None = None
        self.children: list[MapNode] = []
        self._resource: Resource | None = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.label!r}, uri={self.uri!r})"

    @property
    def resource(self) -> Resource | None:
        return self._resource

    @resource.setter
    def resource(self, value: Resource | None) -> None:
        self._resource = value
        self._changed("resource")

    def has_resource(self) -> bool:
        return self._resource is not None

    def set_label(self, label: str) -> None:
        self.label = label
        self._changed("label")

    def add_child(self, child: MapNode) -> None:
        """Add a child, detaching it from any previous parent first."""
        if child.parent is not None:
            child.parent.remove_child(child)
        child.parent = self
        self.children.append(child)
        self._changed("child")

    def remove_child(self, child: MapNode) -> None:
        if child not in self.children:
            return
        self.children.remove(child)
        child.parent = None
        self._changed("child")

    def parent_of_type(self, cls: type[T]) -> T | None:
        """Return the nearest ancestor that is an instance of cls."""
        node = self.parent
        while node is not None:
            if isinstance(node, cls):
                return node
            node = node.parent
        return None

    def iter_descendants(self) -> Iterator[MapNode]:
        """Depth-first, pre-order walk of every node below this one."""
        for child in self.children:
            yield child
            yield from child.iter_descendants()

    def find_child_by_uri(self, uri: str) -> MapNode | None:
        """Find a descendant by durable identifier, None if absent."""
        if not uri:
            return None
        for node in self.iter_descendants():
            if node.uri == uri:
                return node
        return None

    def all_wormhole_nodes(self) -> list[MapNode]:
        return [node for node in self.iter_descendants() if node.kind is NodeKind.WORMHOLE]

    def intersects(self, other: MapNode) -> bool:
        """True when the two bounding boxes overlap."""
        return (
            self.x < other.x + other.width
            and other.x < self.x + self.width
            and self.y < other.y + other.height
            and other.y < self.y + self.height
        )

    def _changed(self, what: str, source: MapNode | None = None) -> None:
        if self.parent is not None:
            self.parent._changed(what, source or self)

    def _event(self, what: str, source: MapNode | None) -> MapEvent:
        return MapEvent(what=what, source=source or self)
