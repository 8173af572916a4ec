"""Link (wormhole) Typer app factory."""

import typer

from wormhole.api.wormhole.cmd_check import cmd_check
from wormhole.api.wormhole.cmd_create import cmd_create
from wormhole.api.wormhole.cmd_locate import cmd_locate
from wormhole.api.wormhole.cmd_reparent import cmd_reparent
from wormhole.api.wormhole.cmd_restore import cmd_restore
from wormhole.cli._domain_app import _domain_app
from wormhole.cli._handle_stage_result import _handle_stage_result


def link() -> typer.Typer:
    """Link (wormhole) command group."""
    app = _domain_app("link", "Create, restore and check wormholes between maps")

    @app.command(name="create")
    def create_cmd(
        map_path: str = typer.Argument(..., help="Map holding the source node"),
        node_uri: str = typer.Argument(..., help="Durable identifier of the source node"),
        target_map: str = typer.Argument(..., help="Map the wormhole leads to"),
        new: bool = typer.Option(False, "--new", help="Create the target map"),
    ) -> None:
        """Create a wormhole from a node to a new node in another map."""
        _handle_stage_result(cmd_create)(map_path, node_uri, target_map, new)

    @app.command(name="restore")
    def restore_cmd(
        map_path: str = typer.Argument(..., help="Map whose wormholes to restore"),
    ) -> None:
        """Restore and resynchronize every wormhole in a map."""
        _handle_stage_result(cmd_restore)(map_path)

    @app.command(name="reparent")
    def reparent_cmd(
        map_path: str = typer.Argument(..., help="Map holding the marker"),
        marker_uri: str = typer.Argument(..., help="Durable identifier of the wormhole marker"),
        new_parent_uri: str = typer.Argument(..., help="Durable identifier of the new parent node"),
    ) -> None:
        """Move a wormhole marker to another node."""
        _handle_stage_result(cmd_reparent)(map_path, marker_uri, new_parent_uri)

    @app.command(name="locate")
    def locate_cmd(
        source_map: str = typer.Argument(..., help="Map the search starts from"),
        hint: str = typer.Argument(..., help="Recorded path of the target map"),
        node_uri: str = typer.Argument(..., help="Node the target map must contain"),
    ) -> None:
        """Report how a target map would be found."""
        _handle_stage_result(cmd_locate)(source_map, hint, node_uri)

    @app.command(name="check")
    def check_cmd(
        map_path: str = typer.Argument(..., help="Map to check"),
    ) -> None:
        """Report broken wormholes without changing anything."""
        _handle_stage_result(cmd_check)(map_path)

    return app
