"""Locate the map at the far end of a wormhole.

A recorded pointer may be stale: the target map can have been moved,
renamed, or opened on another machine with different absolute paths. The
resolver tries a fixed list of strategies, from the literal recorded path to
searches around the source map's folder, and accepts the first candidate
file that loads and contains the wanted node.
"""

from __future__ import annotations

import os
import re
from collections.abc import Callable, Iterator
from pathlib import Path
from urllib.parse import quote, urljoin

from ...utils.get_logger import get_logger
from ...utils.normalize_path import normalize_path
from ...utils.path_to_uri import path_to_uri
from ...utils.uri_to_path import uri_to_path
from ..config.ResolverConfig import ResolverConfig
from ..map.MapDocument import MapDocument
from ..map.MapLoadError import MapLoadError
from ..map.MapStore import MapStore
from ._constants import (
    STRATEGY_IN_SITU,
    STRATEGY_RELATIVIZE_TO_SOURCE,
    STRATEGY_RESOLVE_AGAINST_SOURCE_PARENT,
    STRATEGY_SAME_FOLDER_BY_NAME,
    STRATEGY_SEARCH_ANCESTORS,
    STRATEGY_SEARCH_SUBFOLDERS,
)
from .get_relative_path import get_relative_path
from .TargetResolution import TargetResolution

logger = get_logger("resolver")

Strategy = Callable[[str, str, Path | None], TargetResolution | None]


def _file_name(hint: str) -> str:
    """Last component of hint, whichever slash style it uses."""
    return re.split(r"[\\/]", hint)[-1]


class TargetMapResolver:
    """Ordered fallback search for a target map."""

    def __init__(self, store: MapStore, resolver_config: ResolverConfig | None = None):
        self.store = store
        self.resolver_config = resolver_config or ResolverConfig()
        self.strategies: list[tuple[str, Strategy]] = [
            (STRATEGY_IN_SITU, self._in_situ),
            (STRATEGY_RELATIVIZE_TO_SOURCE, self._relativize_to_source),
            (STRATEGY_RESOLVE_AGAINST_SOURCE_PARENT, self._resolve_against_source_parent),
            (STRATEGY_SAME_FOLDER_BY_NAME, self._same_folder_by_name),
            (STRATEGY_SEARCH_SUBFOLDERS, self._search_subfolders),
            (STRATEGY_SEARCH_ANCESTORS, self._search_ancestors),
        ]

    def resolve(self, hint: str, node_id: str, source_path: str | Path | None) -> TargetResolution | None:
        """Run the strategies in order and return the first hit, or None.

        Args:
            hint: Recorded path of the target map (relative or absolute)
            node_id: Durable identifier of the node the target map must contain
            source_path: File of the map holding the pointer, None if unsaved
        """
        if not hint or not node_id:
            return None

        source = normalize_path(source_path) if source_path is not None else None
        for name, strategy in self.strategies:
            logger.debug("Trying %s for %r", name, hint)
            resolution = strategy(hint, node_id, source)
            if resolution is not None:
                logger.debug("Found %s via %s", resolution.path, name)
                return resolution

        logger.warning("Could not locate map %r containing node %s", hint, node_id)
        return None

    def locate(self, hint: str, node_id: str, source_path: str | Path | None) -> MapDocument | None:
        resolution = self.resolve(hint, node_id, source_path)
        return resolution.document if resolution is not None else None

    def _try(self, candidate: Path, node_id: str, strategy: str) -> TargetResolution | None:
        """Accept candidate if it is a map file containing node_id."""
        try:
            if not candidate.is_file():
                return None
        except OSError:
            return None

        try:
            document = self.store.load(candidate)
        except MapLoadError as e:
            logger.warning("Skipping unreadable map candidate %s: %s", candidate, e)
            return None

        if document.find_child_by_uri(node_id) is None:
            return None
        return TargetResolution(document=document, strategy=strategy, path=normalize_path(candidate))

    # Strategies
    def _in_situ(self, hint: str, node_id: str, source: Path | None) -> TargetResolution | None:
        return self._try(Path(hint), node_id, STRATEGY_IN_SITU)

    def _relativize_to_source(self, hint: str, node_id: str, source: Path | None) -> TargetResolution | None:
        if source is None:
            return None
        relative = get_relative_path(hint, str(source), os.sep)
        if not relative:
            return None
        # Taken relative to the working directory, as a plain path
        return self._try(Path(relative), node_id, STRATEGY_RELATIVIZE_TO_SOURCE)

    def _resolve_against_source_parent(self, hint: str, node_id: str, source: Path | None) -> TargetResolution | None:
        if source is None:
            return None
        base = path_to_uri(source.parent) + "/"
        try:
            resolved = urljoin(base, quote(hint.replace(os.sep, "/")))
        except ValueError:
            return None
        if not resolved.startswith("file:"):
            return None
        return self._try(uri_to_path(resolved), node_id, STRATEGY_RESOLVE_AGAINST_SOURCE_PARENT)

    def _same_folder_by_name(self, hint: str, node_id: str, source: Path | None) -> TargetResolution | None:
        name = _file_name(hint)
        if source is None or not name:
            return None
        return self._try(source.parent / name, node_id, STRATEGY_SAME_FOLDER_BY_NAME)

    def _search_subfolders(self, hint: str, node_id: str, source: Path | None) -> TargetResolution | None:
        name = _file_name(hint)
        if source is None or not name:
            return None
        for folder in self._iter_subfolders(source.parent, depth=1, seen=set()):
            resolution = self._try(folder / name, node_id, STRATEGY_SEARCH_SUBFOLDERS)
            if resolution is not None:
                return resolution
        return None

    def _search_ancestors(self, hint: str, node_id: str, source: Path | None) -> TargetResolution | None:
        name = _file_name(hint)
        if source is None or not name:
            return None
        for folder in list(source.parent.parents)[: self.resolver_config.max_search_depth]:
            resolution = self._try(folder / name, node_id, STRATEGY_SEARCH_ANCESTORS)
            if resolution is not None:
                return resolution
        return None

    def _iter_subfolders(self, folder: Path, depth: int, seen: set[Path]) -> Iterator[Path]:
        """Depth-first, name-ordered walk of the folders below folder."""
        if depth > self.resolver_config.max_search_depth:
            return
        try:
            entries = sorted(folder.iterdir(), key=lambda entry: entry.name)
        except OSError as e:
            logger.debug("Cannot list %s: %s", folder, e)
            return

        for entry in entries:
            try:
                if not entry.is_dir():
                    continue
                if entry.is_symlink():
                    if not self.resolver_config.follow_symlinks:
                        continue
                    real = entry.resolve()
                    if real in seen:
                        continue
                    seen.add(real)
            except OSError:
                continue
            yield entry
            yield from self._iter_subfolders(entry, depth + 1, seen)
