"""``wormhole`` command-line entry point."""

import sys

import typer


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return its exit status instead of exiting.

    Usage errors are reported by Typer itself and exit with status 2.
    """
    from wormhole.cli._create_app import _create_app

    args = sys.argv[1:] if argv is None else argv
    if "--version" in args or "-v" in args:
        from wormhole import __version__

        print(f"wormhole {__version__}")
        return 0

    _configure_logging()
    try:
        _create_app()(args)
    except SystemExit as e:
        if e.code is None or isinstance(e.code, int):
            return e.code or 0
        return 1
    except typer.Exit as e:
        return e.exit_code
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
    return 0


def _configure_logging() -> None:
    from wormhole.api.config.WormholeConfig import WormholeConfig
    from wormhole.utils.configure_logging import configure_logging

    try:
        level = WormholeConfig.load().log.level
    except ValueError:
        # Commands report the invalid configuration themselves
        level = "INFO"
    configure_logging(level=level)
