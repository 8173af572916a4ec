"""Map Typer app factory."""

import typer

from wormhole.api.map.cmd_add import cmd_add
from wormhole.api.map.cmd_new import cmd_new
from wormhole.api.map.cmd_show import cmd_show
from wormhole.cli._domain_app import _domain_app
from wormhole.cli._handle_stage_result import _handle_stage_result


def map_app() -> typer.Typer:
    """Map command group."""
    app = _domain_app("map", "Create, edit and inspect map files")

    @app.command(name="new")
    def new_cmd(
        path: str = typer.Argument(..., help="Map file to create"),
        label: str = typer.Option("", "--label", "-l", help="Map label (default: file name)"),
    ) -> None:
        """Create an empty map."""
        _handle_stage_result(cmd_new)(path, label)

    @app.command(name="add")
    def add_cmd(
        path: str = typer.Argument(..., help="Map file"),
        label: str = typer.Argument(..., help="Label of the new node"),
        parent: str = typer.Option("", "--parent", "-p", help="Durable identifier of the parent node"),
    ) -> None:
        """Add a node to a map."""
        _handle_stage_result(cmd_add)(path, label, parent)

    @app.command(name="show")
    def show_cmd(
        path: str = typer.Argument(..., help="Map file"),
    ) -> None:
        """Show the nodes of a map."""
        _handle_stage_result(cmd_show)(path)

    return app
