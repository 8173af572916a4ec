"""Config API module."""

from .LogConfig import LogConfig
from .MapConfig import MapConfig
from .ResolverConfig import ResolverConfig
from .WormholeConfig import WormholeConfig
from .WormholeSectionConfig import WormholeSectionConfig

__all__ = ["LogConfig", "MapConfig", "ResolverConfig", "WormholeConfig", "WormholeSectionConfig"]
