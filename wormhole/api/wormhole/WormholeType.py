"""Role of a wormhole marker within its link."""

from enum import Enum


class WormholeType(str, Enum):
    SOURCE = "SOURCE"
    TARGET = "TARGET"
