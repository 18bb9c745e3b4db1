"""Run an external program synchronously and capture its output."""

import subprocess
from collections.abc import Sequence
from pathlib import Path

from ...utils.hidden_window_kwargs import hidden_window_kwargs
from .CommandError import CommandError
from .CommandResult import CommandResult


def run_tool(
    program: str,
    args: Sequence[str],
    cwd: Path | None = None,
    timeout: float = 30.0,
) -> CommandResult:
    """Run ``program`` with ``args`` and capture stdout/stderr.

    A non-zero exit is a normal result with ``success=False``.

    Raises:
        CommandError: If the program cannot be executed or times out
    """
    cmd = [program, *args]
    try:
        result = subprocess.run(
            cmd,
            cwd=str(cwd) if cwd is not None else None,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
            check=False,
            **hidden_window_kwargs(),
        )
    except subprocess.TimeoutExpired as e:
        raise CommandError(f"{' '.join(cmd)} timed out after {timeout}s") from e
    except OSError as e:
        raise CommandError(f"Failed to execute {program}: {e}") from e

    return CommandResult(
        success=result.returncode == 0,
        stdout=result.stdout or "",
        stderr=result.stderr or "",
        returncode=result.returncode,
    )
