"""Progress of a wormhole through construction or restoration."""

from enum import Enum


class BuildState(str, Enum):
    START = "start"
    COMPONENTS_AND_MAPS = "components_and_maps"
    MARKERS_CREATED = "markers_created"
    PLACED = "placed"
    POINTERS_SET = "pointers_set"
    LISTENERS_ATTACHED = "listeners_attached"
    DONE = "done"
    CANCELLED = "cancelled"
