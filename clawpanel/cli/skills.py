"""Skills Typer app factory."""

import typer

from ..api.skills.cmd_clawhub_install import cmd_clawhub_install
from ..api.skills.cmd_clawhub_status import cmd_clawhub_status
from ..api.skills.cmd_clawhub_uninstall import cmd_clawhub_uninstall
from ..api.skills.cmd_install import cmd_install
from ..api.skills.cmd_list import cmd_list
from ..api.skills.cmd_uninstall import cmd_uninstall
from ._handle_stage_result import _handle_stage_result


def skills() -> typer.Typer:
    """Create and configure the skills Typer app."""
    app = typer.Typer(
        name="skills",
        help="OpenClaw skills and the clawhub installer",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Skills operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="list")
    def list_cmd(ctx: typer.Context) -> None:
        """List installed skills."""
        _handle_stage_result(cmd_list, ctx)()

    @app.command(name="install")
    def install_cmd(
        ctx: typer.Context,
        name: str = typer.Argument(..., help="Skill name on clawhub"),
    ) -> None:
        """Install a skill with clawhub."""
        _handle_stage_result(cmd_install, ctx)(name)

    @app.command(name="uninstall")
    def uninstall_cmd(
        ctx: typer.Context,
        skill_id: str = typer.Argument(..., help="Skill directory name"),
    ) -> None:
        """Remove an installed skill."""
        _handle_stage_result(cmd_uninstall, ctx)(skill_id)

    @app.command(name="clawhub-status")
    def clawhub_status_cmd(ctx: typer.Context) -> None:
        """Check whether clawhub is installed."""
        _handle_stage_result(cmd_clawhub_status, ctx)()

    @app.command(name="clawhub-install")
    def clawhub_install_cmd(ctx: typer.Context) -> None:
        """Install clawhub globally via npm."""
        _handle_stage_result(cmd_clawhub_install, ctx)()

    @app.command(name="clawhub-uninstall")
    def clawhub_uninstall_cmd(ctx: typer.Context) -> None:
        """Uninstall clawhub."""
        _handle_stage_result(cmd_clawhub_uninstall, ctx)()

    return app
