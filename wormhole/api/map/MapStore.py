"""Map store public API."""

import importlib
from pathlib import Path

from ...utils.get_logger import get_logger
from ...utils.normalize_path import normalize_path
from ..config.MapConfig import _BACKEND_REGISTRY, MapConfig
from ._AbstractBackend import _AbstractBackend
from .MapDocument import MapDocument
from .MapLoadError import MapLoadError

logger = get_logger("map")


class MapStore:
    """Facade for loading and saving maps.

    Delegates file I/O to the backend named by ``map_config.type`` and keeps
    track of the documents it has opened, so loading the same path twice
    returns the same document object.
    """

    def __init__(self, map_config: MapConfig | None = None):
        self.map_config = map_config or MapConfig()
        backend_type = self.map_config.type
        if backend_type not in _BACKEND_REGISTRY:
            raise ValueError(f"Unsupported backend type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")

        # Pattern: wormhole.api.map._json._Impl
        module = importlib.import_module(f"{_BACKEND_REGISTRY[backend_type]}._Impl")
        self._backend: _AbstractBackend = module._Impl(self.map_config)
        self._open: dict[Path, MapDocument] = {}

    def load(self, path: str | Path) -> MapDocument:
        """Load a map, reusing the document if it is already open.

        Raises:
            MapLoadError: If the file is missing, unreadable or malformed
        """
        path = normalize_path(path)
        document = self._open.get(path)
        if document is not None:
            return document
        if not path.is_file():
            raise MapLoadError(f"Map file not found: {path}")

        document = self._backend.read(path)
        self._open[path] = document
        logger.debug("Loaded map %s", path)
        return document

    def save(self, document: MapDocument, path: str | Path | None = None, silent: bool = False) -> MapDocument | None:
        """Write a document to path, or to its own file when path is None.

        Returns None (nothing written) when the document has never been named
        and no path is given. OSError from the backend propagates.
        """
        target = normalize_path(path) if path is not None else document.file
        if target is None:
            if not silent:
                logger.warning("Map %r has never been saved and no path was given", document.label)
            return None

        self._backend.write(document, target)
        previous = document.file
        if previous != target:
            if previous is not None and self._open.get(previous) is document:
                del self._open[previous]
            document.set_file(target)
        self._open[target] = document
        document.modified = False
        if not silent:
            logger.info("Saved map %s", target)
        return document

    def open_documents(self) -> list[MapDocument]:
        return list(self._open.values())

    def save_modified(self) -> list[MapDocument]:
        """Save every open document with unsaved changes; return the ones written.

        OSError from the backend propagates.
        """
        saved = []
        for document in self.open_documents():
            if document.modified and document.file is not None:
                self.save(document, silent=True)
                saved.append(document)
        return saved

    def close(self, document: MapDocument) -> None:
        """Forget a document; a later load reads it from disk again."""
        for path, open_document in list(self._open.items()):
            if open_document is document:
                del self._open[path]

    def new_map(self, label: str = "") -> MapDocument:
        """Create an unnamed, empty map. It is tracked once saved."""
        return MapDocument(label)
