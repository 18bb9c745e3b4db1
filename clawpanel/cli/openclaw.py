"""OpenClaw Typer app factory."""

import typer

from ..api.openclaw.cmd_config import cmd_config
from ._handle_stage_result import _handle_stage_result


def openclaw() -> typer.Typer:
    """Create and configure the openclaw Typer app."""
    app = typer.Typer(
        name="openclaw",
        help="OpenClaw configuration",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="config")
    def config_cmd(ctx: typer.Context) -> None:
        """Summarize models and providers from openclaw.json (API keys masked)."""
        _handle_stage_result(cmd_config, ctx)()

    return app
