"""Change notification fired by a map document."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .MapNode import MapNode


@dataclass(frozen=True)
class MapEvent:
    """A change to a map or one of its nodes.

    what is one of: "file", "child", "resource", "label", "type".
    """

    what: str
    source: "MapNode"
