"""Interface the CLI runner reports command stages through."""

from abc import ABC, abstractmethod
from typing import Any


class Display(ABC):
    """Sink for the announce, progress, result and output of a command.

    The message methods take free-form keyword options; implementations
    ignore the ones they do not understand.
    """

    @abstractmethod
    def status(self, message: str, **kwargs) -> None: ...

    @abstractmethod
    def success(self, message: str, **kwargs) -> None: ...

    @abstractmethod
    def error(self, message: str, **kwargs) -> None:
        """Report a failure; ``details`` adds a second, dimmed line."""

    @abstractmethod
    def warning(self, message: str, **kwargs) -> None: ...

    @abstractmethod
    def info(self, message: str, **kwargs) -> None: ...

    @abstractmethod
    def json_output(self, data: Any, **kwargs) -> None:
        """Emit the output document; ``format`` is "json" or "yaml"."""
