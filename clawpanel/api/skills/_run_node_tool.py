import platform
from collections.abc import Sequence
from pathlib import Path

from ..openclaw.CommandResult import CommandResult
from ..openclaw.locate_executable import locate_executable
from ..openclaw.run_tool import run_tool


def _run_node_tool(
    tool: str, args: Sequence[str], cwd: Path | None = None, timeout: float = 300.0
) -> CommandResult:
    """Run an npm-installed tool (npm, npx, clawhub).

    On Windows these are ``.cmd`` shims and go through ``cmd /C``.

    Raises:
        CommandError: If the tool cannot be executed or times out
    """
    if platform.system().lower() == "windows":
        return run_tool("cmd", ["/C", tool, *args], cwd=cwd, timeout=timeout)
    return run_tool(locate_executable(tool) or tool, args, cwd=cwd, timeout=timeout)
