"""Subprocess keyword arguments that suppress console windows on Windows."""

import platform
import subprocess
from typing import Any


def hidden_window_kwargs() -> dict[str, Any]:
    """Return ``creationflags`` hiding the console window on Windows, empty elsewhere."""
    if platform.system().lower() == "windows":
        return {"creationflags": getattr(subprocess, "CREATE_NO_WINDOW", 0x08000000)}
    return {}
