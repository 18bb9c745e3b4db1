"""Locate a CLI executable on PATH or in package-manager install layouts."""

import logging
import os
import platform
import shutil
import subprocess
from pathlib import Path

from ...utils.hidden_window_kwargs import hidden_window_kwargs

logger = logging.getLogger(__name__)


def _npm_global_prefix() -> Path | None:
    """Return ``npm prefix -g``, or None if npm is unavailable."""
    npm = shutil.which("npm")
    if not npm:
        return None
    try:
        result = subprocess.run(
            [npm, "prefix", "-g"],
            capture_output=True,
            text=True,
            timeout=5,
            check=False,
            **hidden_window_kwargs(),
        )
    except (OSError, subprocess.SubprocessError) as exc:
        logger.debug("npm prefix -g failed: %s", exc)
        return None
    prefix = result.stdout.strip()
    if result.returncode == 0 and prefix:
        return Path(prefix)
    return None


def _candidate_paths(name: str) -> list[Path]:
    """Standard install locations for npm-installed CLIs, most common first."""
    home = Path.home()
    if platform.system().lower() == "windows":
        appdata = os.environ.get("APPDATA")
        npm_dir = Path(appdata) / "npm" if appdata else home / "AppData" / "Roaming" / "npm"
        paths = [npm_dir / f"{name}.cmd", npm_dir / f"{name}.exe"]
        prefix = _npm_global_prefix()
        if prefix:
            paths.append(prefix / f"{name}.cmd")
        return paths

    paths = [
        home / ".npm-global" / "bin" / name,
        Path("/usr/local/bin") / name,
        Path("/opt/homebrew/bin") / name,
        home / ".local" / "bin" / name,
    ]
    prefix = _npm_global_prefix()
    if prefix:
        npm_bin = prefix / "bin" / name
        if npm_bin not in paths:
            paths.insert(0, npm_bin)
    return paths


def locate_executable(name: str) -> str | None:
    """Resolve ``name`` to an absolute executable path.

    Looks on PATH first, then in npm global and Homebrew layouts that a GUI
    launched outside a login shell may not have on PATH.

    Returns:
        Absolute path, or None when the tool is not installed
    """
    found = shutil.which(name)
    if found:
        return found

    for candidate in _candidate_paths(name):
        if candidate.is_file() and os.access(candidate, os.X_OK):
            return str(candidate)

    logger.debug("Executable %s not found on PATH or standard locations", name)
    return None
