"""Integration test helpers."""

import io
import json
from contextlib import redirect_stderr, redirect_stdout


def run_cli(args: list[str]) -> tuple[int, str, str]:
    """Execute CLI command and capture stdout/stderr."""
    from wormhole.cli import main

    out_buf = io.StringIO()
    err_buf = io.StringIO()
    with redirect_stdout(out_buf), redirect_stderr(err_buf):
        rc = main(args)
    return rc, out_buf.getvalue(), err_buf.getvalue()


def run_json(args: list[str]) -> tuple[int, dict]:
    """Run a command with JSON display and parse its output document."""
    rc, out, err = run_cli(["--display", "json", *args])
    assert out, f"no output (rc={rc}): {err}"
    return rc, json.loads(out)
