"""Unit tests for wormhole.cli.display."""

import json

import pytest
import yaml

from wormhole.cli.display.CLIDisplay import CLIDisplay
from wormhole.cli.display.Display import Display
from wormhole.cli.display.DisplayContext import DisplayContext

pytestmark = pytest.mark.cli


def test_json_output(capsys):
    CLIDisplay().json_output({"found": True, "path": "B.map"}, format="json")
    assert json.loads(capsys.readouterr().out) == {"found": True, "path": "B.map"}


def test_yaml_output_keeps_key_order(capsys):
    CLIDisplay().json_output({"b": 1, "a": 2})
    out = capsys.readouterr().out
    assert yaml.safe_load(out) == {"b": 1, "a": 2}
    assert out.index("b:") < out.index("a:")


def test_messages_go_to_stderr(capsys):
    display = CLIDisplay()
    display.status("starting")
    display.success("done")
    display.error("failed", details="because")
    display.warning("careful")
    captured = capsys.readouterr()
    assert captured.out == ""
    for text in ("starting", "done", "failed", "because", "careful"):
        assert text in captured.err


def test_display_context_hands_out_fresh_display():
    context = DisplayContext()
    first = context.get_display()
    assert isinstance(first, CLIDisplay)
    assert context.get_display() is not first


def test_display_context_override():
    class Recording(Display):
        def status(self, message, **kwargs):
            pass

        def success(self, message, **kwargs):
            pass

        def error(self, message, **kwargs):
            pass

        def warning(self, message, **kwargs):
            pass

        def info(self, message, **kwargs):
            pass

        def json_output(self, data, **kwargs):
            pass

    context = DisplayContext()
    display = Recording()
    context.set_display(display)
    assert context.get_display() is display
    context.set_display(None)
    assert isinstance(context.get_display(), CLIDisplay)


def test_display_context_output_format():
    context = DisplayContext()
    assert context.output_format == "yaml"
    context.set_output_format("json")
    assert context.output_format == "json"
    with pytest.raises(ValueError, match="--display must be 'json' or 'yaml'"):
        context.set_output_format("xml")
    assert context.output_format == "json"
