"""Errors raised by ServiceSupervisor.

Every error carries a message meant to be shown to the user as-is.
"""


class ServiceError(Exception):
    """Base class for service lifecycle failures."""


class AlreadyRunning(ServiceError):
    def __init__(self, port: int, pid: int | None):
        self.port = port
        self.pid = pid
        super().__init__(f"Service is already running (PID: {pid}, port: {port})")


class ExecutableNotFound(ServiceError):
    def __init__(self, name: str, hint: str | None = None):
        self.name = name
        self.hint = hint if hint is not None else f"npm install -g {name}"
        super().__init__(f"{name} command not found, please install it via {self.hint}")


class OperationInProgress(ServiceError):
    def __init__(self, port: int, holder_pid: int | None = None):
        self.port = port
        self.holder_pid = holder_pid
        holder = f" (held by PID {holder_pid})" if holder_pid else ""
        super().__init__(f"Another service operation is in progress on port {port}{holder}")


class SpawnFailed(ServiceError):
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Failed to start service: {reason}")


class CommandFailed(ServiceError):
    def __init__(self, command: str, detail: str):
        self.command = command
        self.detail = detail
        super().__init__(f"{command} failed: {detail}")


class StartTimeout(ServiceError):
    def __init__(self, port: int, attempts: int, waited_secs: float, action: str = "start"):
        self.port = port
        self.attempts = attempts
        self.waited_secs = waited_secs
        super().__init__(
            f"Service {action} timeout ({waited_secs:g}s), port {port} still not listening; please check openclaw logs"
        )


class StopFailed(ServiceError):
    def __init__(self, port: int, pid: int | None):
        self.port = port
        self.pid = pid
        super().__init__(f"Unable to stop service, PID: {pid} still listening on port {port}")


class RestartStopTimeout(ServiceError):
    def __init__(self, port: int, pid: int | None, waited_secs: float):
        self.port = port
        self.pid = pid
        self.waited_secs = waited_secs
        super().__init__(f"Failed to stop service: port {port} still in use after {waited_secs:g}s (PID: {pid})")
