"""CLI - main entry point."""

import sys

from ..utils.configure_logging import configure_logging


def _configure_logging() -> None:
    """Set up the log file from config; a broken config file falls back to defaults."""
    from ..api.config.LogConfig import LogConfig
    from ..api.config.PanelConfig import PanelConfig

    try:
        log_config = PanelConfig.load().log
    except ValueError:
        # The command itself reports the broken config.
        log_config = LogConfig()
    configure_logging(level=log_config.level, max_bytes=log_config.max_bytes, backup_count=log_config.backup_count)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import typer

    from ._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-V" in argv:
        from ..api.config.cmd_version import cmd_version

        result = cmd_version()
        list(result.progress_callback(result))
        print(f"clawpanel {result.output.get('version', 'unknown')}")
        return 0 if result.success else 1

    _configure_logging()

    app = _create_app()
    try:
        app(argv)
        return 0
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 0 if e.code is None else 1
    except typer.Exit as e:
        return e.exit_code
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
