"""Drive one command from announce to exit status."""

import sys
from collections.abc import Callable
from datetime import datetime

from wormhole.api.validate_output import validate_output

from .display.Display import Display


def _run_single_execution(func: Callable, args: tuple, kwargs: dict, display: Display, display_format: str) -> None:
    """Run ``func(*args, **kwargs)``, show each stage and exit 0 or 1.

    Commands report their own failures through the output document. A
    command that finishes without a summary or output, or whose output does
    not match its schema, is a bug and raises ValueError.
    """
    stage = func(*args, **kwargs)
    display.status(stage.announce)

    for fraction, message in stage.progress_callback(stage):
        display.info(f"[dim]{datetime.now():%H:%M:%S}[/dim] {message} ({fraction:.0%})")

    if not stage.result or not stage.output:
        raise ValueError(f"{func.__name__} finished without setting result and output")
    stage.output = validate_output(func, stage.output)

    (display.success if stage.success else display.error)(stage.result)
    display.json_output(stage.output, format=display_format)
    sys.exit(0 if stage.success else 1)
