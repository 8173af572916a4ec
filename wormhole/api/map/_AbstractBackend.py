"""Abstract base class for map persistence backends."""

from abc import ABC, abstractmethod
from pathlib import Path

from .MapDocument import MapDocument


class _AbstractBackend(ABC):
    """Abstract interface for reading and writing map files."""

    @abstractmethod
    def read(self, path: Path) -> MapDocument:
        """Read a map file into a new document.

        Raises:
            MapLoadError: If the file cannot be read or is not a valid map
        """
        pass

    @abstractmethod
    def write(self, document: MapDocument, path: Path) -> None:
        """Write a document to path, replacing any existing file.

        Raises:
            OSError: If the file cannot be written
        """
        pass
