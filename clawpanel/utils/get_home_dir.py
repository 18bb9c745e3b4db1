"""Get clawpanel home directory path or path under it."""

import os
from pathlib import Path

CLAWPANEL_HOME_EXT = ".clawpanel"


def get_home_dir(*parts: str) -> Path:
    """Get clawpanel home directory path or path under it.

    Checks CLAWPANEL_HOME environment variable first, defaults to ~/.clawpanel if not set.

    Args:
        *parts: Optional path components to join (e.g., "config.json", "logs")

    Returns:
        Absolute path to the home directory or subpath under it

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.clawpanel")
        >>> get_home_dir("logs", "gateway.log")
        Path("/Users/user/.clawpanel/logs/gateway.log")
    """
    home_env = os.environ.get("CLAWPANEL_HOME")
    if home_env:
        home = Path(home_env).expanduser().resolve()
    else:
        # Check HOME environment variable (for test isolation)
        user_home = os.environ.get("HOME")
        home = Path(user_home) / CLAWPANEL_HOME_EXT if user_home else Path.home() / CLAWPANEL_HOME_EXT

    return home / Path(*parts) if parts else home
