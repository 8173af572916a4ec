"""Base class for resources attached to map nodes."""

from abc import ABC, abstractmethod


class Resource(ABC):
    """A resource a node points at.

    Concrete resources form a closed set (WormholeResource, OtherResource);
    callers dispatch on type with isinstance checks.
    """

    spec: str

    @abstractmethod
    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for display."""
