"""What a ``cmd_*`` function hands back to its caller."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass
class StageResult:
    """A command that has been set up but not yet run.

    ``announce`` is shown before anything happens. ``progress_callback`` does
    the work: it yields ``(fraction, message)`` pairs while it runs and, by
    the time it is exhausted, has set ``result`` (one-line summary),
    ``output`` (a dict matching the command's registered schema) and
    ``success``.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict[str, Any] = field(default_factory=dict)
    success: bool = False

    def finish(self, summary: str, output: dict[str, Any]) -> None:
        """Record a successful run."""
        self.result = summary
        self.output = output
        self.success = True

    def fail(self, summary: str, output: dict[str, Any], error: str | None = None) -> None:
        """Record a failed run, appending ``error`` to the output's errors."""
        if error is not None:
            output.setdefault("errors", []).append(error)
        self.result = summary
        self.output = output
        self.success = False
