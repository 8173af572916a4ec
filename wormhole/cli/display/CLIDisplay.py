"""Terminal display built on rich, with pygments highlighting for output documents."""

import json
import sys
from datetime import datetime
from typing import Any

import yaml
from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import JsonLexer, YamlLexer
from rich.console import Console

from .Display import Display


class CLIDisplay(Display):
    """Stage messages on stderr, the output document on stdout.

    The document is highlighted only when stdout is a terminal, so piped
    output stays parseable.
    """

    def __init__(self):
        self.stderr_console = Console(file=sys.stderr)

    def _line(self, marker: str, message: str) -> None:
        self.stderr_console.print(f"[dim]{datetime.now():%H:%M:%S}[/dim] {marker} {message}")

    def status(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self._line("[blue]→[/blue]", message)

    def success(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self._line("[green]✓[/green]", message)

    def error(self, message: str, **kwargs) -> None:
        self._line("[red]✗[/red]", message)
        if kwargs.get("details"):
            self.stderr_console.print(f"  [dim]{kwargs['details']}[/dim]")

    def warning(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self._line("[yellow]![/yellow]", message)

    def info(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.stderr_console.print(message)

    def json_output(self, data: Any, **kwargs) -> None:
        if kwargs.get("format", "yaml") == "json":
            text = json.dumps(data, indent=kwargs.get("indent", 2), ensure_ascii=False) + "\n"
            lexer = JsonLexer()
        else:
            text = yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
            lexer = YamlLexer()

        if sys.stdout.isatty():
            text = highlight(text, lexer, Terminal256Formatter(style="monokai"))
        sys.stdout.write(text)
