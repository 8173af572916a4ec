"""Typer sub-app shared setup for the map, link and config groups."""

import typer


def _domain_app(name: str, help: str) -> typer.Typer:
    """Empty command group that prints its help when run without a subcommand."""
    app = typer.Typer(
        name=name,
        help=help,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app
