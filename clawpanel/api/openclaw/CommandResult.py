"""Command invocation result DTO."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CommandResult:
    """Captured outcome of one synchronous CLI invocation."""

    success: bool
    """Whether the process exited with status 0."""

    stdout: str
    """Captured standard output."""

    stderr: str
    """Captured standard error."""

    returncode: int = 0
    """Raw exit status."""
