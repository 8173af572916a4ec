"""Wormhole: bidirectional links between independently edited maps."""

__version__ = "0.1.0"
