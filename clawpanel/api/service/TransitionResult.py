"""Outcome of a lifecycle transition."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TransitionResult:
    """What a successful start, stop or restart observed."""

    message: str
    """Human readable outcome."""

    pid: int | None = None
    """Listener pid after start/restart, None after stop."""

    forced: bool = False
    """Whether the forced stop command had to be issued."""

    was_running: bool = False
    """Whether the service was running when the operation began."""
