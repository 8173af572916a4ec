"""Viewer API domain: the UI collaborator the wormhole core talks to."""

from .Layout import Layout
from .MapViewer import MapViewer
from .SpreadLayout import SpreadLayout

__all__ = ["Layout", "MapViewer", "SpreadLayout"]
