"""Service Typer app factory."""

import typer

from ..api.service.cmd_kill_all import cmd_kill_all
from ..api.service.cmd_logs import cmd_logs
from ..api.service.cmd_restart import cmd_restart
from ..api.service.cmd_start import cmd_start
from ..api.service.cmd_status import cmd_status
from ..api.service.cmd_stop import cmd_stop
from ._handle_stage_result import _handle_stage_result


def service() -> typer.Typer:
    """Create and configure the service Typer app."""
    app = typer.Typer(
        name="service",
        help="OpenClaw gateway lifecycle",
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

    @app.command(name="status")
    def status_cmd(ctx: typer.Context) -> None:
        """Check whether the gateway is listening."""
        _handle_stage_result(cmd_status, ctx)()

    @app.command(name="start")
    def start_cmd(ctx: typer.Context) -> None:
        """Start the gateway and wait for its port."""
        _handle_stage_result(cmd_start, ctx)()

    @app.command(name="stop")
    def stop_cmd(ctx: typer.Context) -> None:
        """Stop the gateway, forcing if needed."""
        _handle_stage_result(cmd_stop, ctx)()

    @app.command(name="restart")
    def restart_cmd(ctx: typer.Context) -> None:
        """Restart the gateway."""
        _handle_stage_result(cmd_restart, ctx)()

    @app.command(name="logs")
    def logs_cmd(
        ctx: typer.Context,
        lines: int = typer.Option(100, "--lines", "-n", min=1, help="Number of log lines"),
    ) -> None:
        """Show recent gateway log lines."""
        _handle_stage_result(cmd_logs, ctx)(lines)

    @app.command(name="kill-all")
    def kill_all_cmd(ctx: typer.Context) -> None:
        """Kill every process listening on the gateway port."""
        _handle_stage_result(cmd_kill_all, ctx)()

    return app
