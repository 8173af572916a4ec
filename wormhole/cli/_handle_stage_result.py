"""Bind an API command to the CLI display."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TypeVar

from ._run_single_execution import _run_single_execution

F = TypeVar("F", bound=Callable)


def _handle_stage_result(func: F) -> F:
    """Wrap a ``cmd_*`` function so calling it runs the command through the CLI display.

    Status and progress go to stderr, the output document to stdout in the
    format chosen with ``--display``; the process then exits with the
    command's success.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        from wormhole.cli.display.display_context import display_context

        _run_single_execution(
            func, args, kwargs, display_context.get_display(), display_context.output_format
        )

    return wrapper  # type: ignore[return-value]
