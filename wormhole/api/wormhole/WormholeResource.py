"""Persisted cross-reference held by each side of a wormhole."""

from dataclasses import dataclass

from ..map.Resource import Resource
from ._constants import SPEC_UNSET
from .points_to_same_map import points_to_same_map


@dataclass(frozen=True)
class WormholeResource(Resource):
    """Pointer from one wormhole marker to the other side.

    ``spec`` and ``system_spec`` locate the *other* map (relative to this
    map's folder when possible), ``component_uri_string`` names the other
    endpoint. ``originating_*`` describe the side that owns this pointer.
    """

    spec: str
    component_uri_string: str
    originating_filename: str
    originating_component_uri_string: str
    system_spec: str = SPEC_UNSET
    target_filename: str = ""

    @property
    def is_spec_set(self) -> bool:
        return self.system_spec != SPEC_UNSET

    def target_spec(self) -> str:
        """Path of the other map, falling back to the last known filename."""
        if not self.is_spec_set:
            return self.target_filename
        return self.system_spec

    def points_to_same_map(self) -> bool:
        """True when the pointer leads back into the map that owns it."""
        return points_to_same_map(self.target_spec(), self.originating_filename)

    def differs_from(self, other: "WormholeResource") -> bool:
        return (
            self.component_uri_string != other.component_uri_string
            or self.originating_component_uri_string != other.originating_component_uri_string
            or self.originating_filename != other.originating_filename
            or self.spec != other.spec
        )

    def to_dict(self) -> dict[str, object]:
        return {
            "type": "wormhole",
            "spec": self.spec,
            "systemSpec": self.system_spec,
            "componentURIString": self.component_uri_string,
            "originatingComponentURIString": self.originating_component_uri_string,
            "originatingFilename": self.originating_filename,
            "targetFilename": self.target_filename,
        }
