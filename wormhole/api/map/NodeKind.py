"""Kinds of element that can live in a map."""

from enum import Enum


class NodeKind(str, Enum):
    MAP = "map"
    LAYER = "layer"
    GROUP = "group"
    NODE = "node"
    LINK = "link"
    WORMHOLE = "wormhole"
