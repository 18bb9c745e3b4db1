"""Output schemas for service commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ServiceStatusOutput(BaseOutputSchema):
    """Output schema for service status command.

    All fields must always be present for consistency.
    """
    running: bool = Field(..., description="Whether a process is listening on the service port")
    pid: int = Field(..., description="Process ID of the listener, -1 if not running")
    port: int = Field(..., description="Service TCP port")
    uptime_seconds: float | None = Field(..., description="Uptime in seconds, null when unknown")
    memory_mb: float | None = Field(..., description="Resident memory in MB, null when unknown")
    cpu_percent: float | None = Field(..., description="CPU usage percentage, null when unknown")


class ServiceStartOutput(BaseOutputSchema):
    """Output schema for service start command."""
    running: bool = Field(..., description="Whether the service was observed listening after start")
    pid: int = Field(..., description="Process ID of the listener, -1 if not running")
    port: int = Field(..., description="Service TCP port")
    message: str = Field(..., description="Human readable outcome")


class ServiceStopOutput(BaseOutputSchema):
    """Output schema for service stop command."""
    stopped: bool = Field(..., description="Whether the port was observed free after stop")
    pid: int = Field(..., description="Process ID still listening on failure, -1 otherwise")
    port: int = Field(..., description="Service TCP port")
    forced: bool = Field(..., description="Whether the forced stop command was issued")
    message: str = Field(..., description="Human readable outcome")


class ServiceRestartOutput(BaseOutputSchema):
    """Output schema for service restart command."""
    restarted: bool = Field(..., description="Whether the service was observed listening after restart")
    was_running: bool = Field(..., description="Whether the service was running before the restart")
    pid: int = Field(..., description="Process ID of the new listener, -1 if not running")
    port: int = Field(..., description="Service TCP port")
    message: str = Field(..., description="Human readable outcome")


class ServiceLogsOutput(BaseOutputSchema):
    """Output schema for service logs command."""
    lines: list[str] = Field(..., description="Log lines in the order the service emitted them")
    count: int = Field(..., description="Number of lines returned")


class ServiceKillAllOutput(BaseOutputSchema):
    """Output schema for service kill-all command."""
    port: int = Field(..., description="Service TCP port")
    pids: list[int] = Field(..., description="Process IDs found listening on the port")
    killed: int = Field(..., description="Number of processes terminated")
    failed: int = Field(..., description="Number of processes that could not be terminated")
    results: list[dict[str, Any]] = Field(..., description="Per-process termination results")
    message: str = Field(..., description="Human readable outcome")


register_output_schema("service", "status", ServiceStatusOutput)
register_output_schema("service", "start", ServiceStartOutput)
register_output_schema("service", "stop", ServiceStopOutput)
register_output_schema("service", "restart", ServiceRestartOutput)
register_output_schema("service", "logs", ServiceLogsOutput)
register_output_schema("service", "kill_all", ServiceKillAllOutput)
