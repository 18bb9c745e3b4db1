"""OpenClaw module - the external CLI and its configuration file."""

from .CommandError import CommandError, SpawnError
from .CommandResult import CommandResult
from .CommandRunner import CommandRunner
from .OpenClawConfig import OpenClawConfig
from .OpenClawPathsConfig import OpenClawPathsConfig
from .locate_executable import locate_executable
from .run_tool import run_tool

__all__ = [
    "CommandError",
    "CommandResult",
    "CommandRunner",
    "OpenClawConfig",
    "OpenClawPathsConfig",
    "SpawnError",
    "locate_executable",
    "run_tool",
]
