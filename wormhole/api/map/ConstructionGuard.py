"""Scoped marker that wormhole pointers are being written into a map."""

from collections.abc import Iterator
from contextlib import contextmanager


class ConstructionGuard:
    """Counts nested holds; listeners skip resynchronization while held."""

    def __init__(self) -> None:
        self._depth = 0

    @property
    def held(self) -> bool:
        return self._depth > 0

    @contextmanager
    def hold(self) -> Iterator["ConstructionGuard"]:
        """Hold the guard for the duration of the block, released on every exit path."""
        self._depth += 1
        try:
            yield self
        finally:
            self._depth -= 1
