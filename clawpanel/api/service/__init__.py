"""Service module - lifecycle of the OpenClaw gateway."""

from .KillAllReport import KillAllReport
from .ServiceConfig import SERVICE_PORT, ServiceConfig
from .ServiceError import (
    AlreadyRunning,
    CommandFailed,
    ExecutableNotFound,
    OperationInProgress,
    RestartStopTimeout,
    ServiceError,
    SpawnFailed,
    StartTimeout,
    StopFailed,
)
from .ServiceStatus import ServiceStatus
from .ServiceSupervisor import ServiceSupervisor
from .TransitionResult import TransitionResult

__all__ = [
    "SERVICE_PORT",
    "AlreadyRunning",
    "CommandFailed",
    "ExecutableNotFound",
    "KillAllReport",
    "OperationInProgress",
    "RestartStopTimeout",
    "ServiceConfig",
    "ServiceError",
    "ServiceStatus",
    "ServiceSupervisor",
    "SpawnFailed",
    "StartTimeout",
    "StopFailed",
    "TransitionResult",
]
