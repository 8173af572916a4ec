"""Config command group."""

import typer

from wormhole.api.config.cmd_show import cmd_show
from wormhole.cli._domain_app import _domain_app
from wormhole.cli._handle_stage_result import _handle_stage_result


def config() -> typer.Typer:
    app = _domain_app("config", "Inspect the wormhole configuration")

    @app.command(name="show")
    def show_cmd(
        section: str = typer.Argument("", help="Section to show; omit to list section names"),
    ) -> None:
        """Show configuration for a section, or list the sections."""
        _handle_stage_result(cmd_show)(section)

    return app
