"""Kill result DTO."""

from dataclasses import dataclass


@dataclass(frozen=True)
class KillResult:
    """Outcome of one forced termination attempt."""

    pid: int
    """Process ID that was targeted."""

    success: bool
    """Whether the OS accepted the kill."""

    message: str = ""
    """Diagnostic text, empty on success."""
