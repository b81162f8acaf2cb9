"""Unit Typer app factory.

Applications mount this into their own CLI so that they can deploy
themselves as a systemd user service:

    app.add_typer(unit("myapp"), name="service")

after which `myapp service deploy` installs, enables and starts `myapp`.
"""

import typer

from ..api.unit.cmd_deploy import cmd_deploy
from ..api.unit.cmd_status import cmd_status
from ..api.unit.cmd_undeploy import cmd_undeploy
from ..api.unit.Unit import Unit
from ..api.unit.UnitError import UnitError
from ._handle_stage_result import _handle_stage_result


def unit(name: str) -> typer.Typer:
    """Create the Typer app that manages systemd user unit `name`."""
    app = typer.Typer(
        name="unit",
        help=f"Manage the '{name}' systemd user service",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Service operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="deploy")
    def deploy_cmd(
        quiet: bool = typer.Option(False, "--quiet", "-q", help="Only print the JSON output"),
    ) -> None:
        """Install, enable and (re)start the service."""
        _handle_stage_result(cmd_deploy, name, quiet=quiet)

    @app.command(name="undeploy")
    def undeploy_cmd(
        quiet: bool = typer.Option(False, "--quiet", "-q", help="Only print the JSON output"),
    ) -> None:
        """Disable and stop the service and remove its unit file."""
        _handle_stage_result(cmd_undeploy, name, quiet=quiet)

    @app.command(name="status")
    def status_cmd(
        quiet: bool = typer.Option(False, "--quiet", "-q", help="Only print the JSON output"),
    ) -> None:
        """Show whether the unit file is installed."""
        _handle_stage_result(cmd_status, name, quiet=quiet)

    @app.command(name="path")
    def path_cmd() -> None:
        """Print the unit file path."""
        try:
            unit_obj = Unit.create(name)
        except UnitError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1) from e
        typer.echo(str(unit_obj.unit_file_path()))

    return app
