"""Forcefully terminate a process by id."""

import logging
import os
import platform
import signal
import subprocess

from ...utils.hidden_window_kwargs import hidden_window_kwargs
from .KillResult import KillResult

logger = logging.getLogger(__name__)


def _kill_windows(pid: int, timeout: float) -> KillResult:
    try:
        result = subprocess.run(
            ["taskkill", "/F", "/PID", str(pid)],
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
            **hidden_window_kwargs(),
        )
    except (OSError, subprocess.SubprocessError) as exc:
        return KillResult(pid=pid, success=False, message=f"taskkill failed: {exc}")
    if result.returncode != 0:
        return KillResult(pid=pid, success=False, message=result.stderr.strip() or f"taskkill exited {result.returncode}")
    return KillResult(pid=pid, success=True)


def _kill_posix(pid: int) -> KillResult:
    try:
        os.kill(pid, signal.SIGKILL)
    except OSError as exc:
        return KillResult(pid=pid, success=False, message=str(exc))
    return KillResult(pid=pid, success=True)


def kill_process(pid: int, timeout: float = 10.0) -> KillResult:
    """Kill ``pid`` without a grace period.

    SIGKILL on POSIX, ``taskkill /F`` on Windows. Never raises for OS errors;
    the failure is reported in the returned KillResult.

    Args:
        pid: Process ID to terminate
        timeout: Seconds to wait for taskkill on Windows

    Returns:
        KillResult for this pid
    """
    if pid <= 0:
        return KillResult(pid=pid, success=False, message=f"Refusing to kill invalid pid {pid}")

    if platform.system().lower() == "windows":
        result = _kill_windows(pid, timeout)
    else:
        result = _kill_posix(pid)

    if result.success:
        logger.info("Killed PID %d", pid)
    else:
        logger.warning("Failed to kill PID %d: %s", pid, result.message)
    return result
