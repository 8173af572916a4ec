"""Top-level Typer app."""

import typer

from wormhole.cli.config import config
from wormhole.cli.display.display_context import display_context
from wormhole.cli.link import link
from wormhole.cli.map import map_app

_GROUPS = {"map": map_app, "link": link, "config": config}


def _create_app() -> typer.Typer:
    """Assemble the ``wormhole`` command with its map, link and config groups."""
    app = typer.Typer(
        help="Bidirectional links (wormholes) between nodes of different maps",
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )
    for name, factory in _GROUPS.items():
        app.add_typer(factory(), name=name)

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
    ) -> None:
        try:
            display_context.set_output_format(display)
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1) from e
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app
