"""Service status DTO."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ServiceStatus:
    """Status of the gateway as seen through its port. Derived on every query."""

    running: bool
    """Whether a process is listening on the service port."""

    port: int
    """Service TCP port."""

    pid: int | None = None
    """Process ID of the listener, or None if not running."""

    uptime_seconds: float | None = None
    """Not measured yet; always None."""

    memory_mb: float | None = None
    """Not measured yet; always None."""

    cpu_percent: float | None = None
    """Not measured yet; always None."""
