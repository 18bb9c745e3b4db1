"""Invoke the OpenClaw CLI, synchronously or as a detached process."""

import logging
import platform
import subprocess
from collections.abc import Sequence
from pathlib import Path

from ...utils.get_home_dir import get_home_dir
from .CommandError import CommandError, SpawnError
from .CommandResult import CommandResult
from .locate_executable import locate_executable
from .run_tool import run_tool

logger = logging.getLogger(__name__)


class CommandRunner:
    """Locate and run one external executable.

    Args:
        executable: Logical tool name (e.g. "openclaw")
        timeout: Seconds allowed for synchronous invocations
        log_path: File receiving stdout/stderr of detached processes.
            Defaults to ``<panel home>/logs/gateway.log``.
    """

    def __init__(self, executable: str = "openclaw", timeout: float = 30.0, log_path: Path | None = None):
        self.executable = executable
        self.timeout = timeout
        self.log_path = log_path if log_path is not None else get_home_dir("logs", "gateway.log")

    def locate(self) -> str | None:
        """Absolute path of the executable, or None if it is not installed."""
        return locate_executable(self.executable)

    def run(self, args: Sequence[str], cwd: Path | None = None) -> CommandResult:
        """Run the executable synchronously.

        Raises:
            CommandError: If the executable is missing or cannot be executed
        """
        path = self.locate()
        if path is None:
            raise CommandError(f"{self.executable} command not found")
        logger.debug("Running %s %s", self.executable, " ".join(args))
        return run_tool(path, args, cwd=cwd, timeout=self.timeout)

    @staticmethod
    def _detach_kwargs() -> dict:
        if platform.system().lower() == "windows":
            flags = getattr(subprocess, "CREATE_NEW_PROCESS_GROUP", 0x00000200)
            flags |= getattr(subprocess, "CREATE_NO_WINDOW", 0x08000000)
            return {"creationflags": flags}
        return {"start_new_session": True}

    def spawn_detached(self, args: Sequence[str]) -> int:
        """Start the executable in the background and return its pid.

        The child outlives the caller. Only acceptance of the exec request is
        guaranteed; whether the child initializes is for the caller to verify.

        Raises:
            SpawnError: If the executable is missing or the OS refused to start it
        """
        path = self.locate()
        if path is None:
            raise SpawnError(f"{self.executable} command not found")

        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        try:
            with self.log_path.open("ab") as log_fh:
                process = subprocess.Popen(
                    [path, *args],
                    stdin=subprocess.DEVNULL,
                    stdout=log_fh,
                    stderr=subprocess.STDOUT,
                    **self._detach_kwargs(),
                )
        except OSError as e:
            raise SpawnError(f"Failed to start {self.executable}: {e}") from e

        logger.info("Spawned %s %s (PID: %d)", self.executable, " ".join(args), process.pid)
        return process.pid
