"""Lifecycle control of the OpenClaw gateway, judged by its TCP port."""

import logging
import time
from collections.abc import Callable, Sequence
from contextlib import AbstractContextManager

from ..openclaw.CommandError import CommandError, SpawnError
from ..openclaw.CommandRunner import CommandRunner
from ..port.PortInspector import PortInspector
from ..process.KillResult import KillResult
from ..process.kill_process import kill_process
from ._operation_lock import operation_lock
from .KillAllReport import KillAllReport
from .ServiceConfig import ServiceConfig
from .ServiceError import (
    AlreadyRunning,
    CommandFailed,
    ExecutableNotFound,
    RestartStopTimeout,
    SpawnFailed,
    StartTimeout,
    StopFailed,
)
from .ServiceStatus import ServiceStatus
from .TransitionResult import TransitionResult

logger = logging.getLogger(__name__)


class ServiceSupervisor:
    """Start, stop, restart and inspect the gateway.

    The supervisor keeps no state between calls: "running" means some process
    is listening on the configured port, re-derived from a fresh probe at the
    start of every operation. Start, stop, restart and kill-all run inside an
    operation lock keyed by the port.

    Args:
        service_config: Port, executable, arguments and timings
        inspector: Port inspector (defaults to the platform backend)
        runner: Runner for the OpenClaw executable
        terminator: Callable killing one pid and returning a KillResult
        sleep: Sleep function used between probes
        lock: Factory returning the operation lock context manager
    """

    def __init__(
        self,
        service_config: ServiceConfig | None = None,
        inspector: PortInspector | None = None,
        runner: CommandRunner | None = None,
        terminator: Callable[[int], KillResult] = kill_process,
        sleep: Callable[[float], None] = time.sleep,
        lock: Callable[[int], AbstractContextManager] = operation_lock,
    ):
        self.config = service_config if service_config is not None else ServiceConfig()
        self.port = self.config.port
        self.inspector = inspector if inspector is not None else PortInspector(backend=self.config.probe)
        self.runner = (
            runner
            if runner is not None
            else CommandRunner(self.config.executable, timeout=self.config.command_timeout_secs)
        )
        self._terminate = terminator
        self._sleep = sleep
        self._lock = lock

    def get_status(self) -> ServiceStatus:
        """Probe the port once. No side effects."""
        pid = self.inspector.probe_listener(self.port)
        if pid is None:
            return ServiceStatus(running=False, port=self.port)
        return ServiceStatus(running=True, port=self.port, pid=pid)

    def start(self) -> TransitionResult:
        """Spawn the gateway and wait until it listens.

        Raises:
            AlreadyRunning: A listener already holds the port
            ExecutableNotFound: The OpenClaw CLI is not installed
            SpawnFailed: The OS refused to start the process
            StartTimeout: The port never became active
            OperationInProgress: Another operation holds the lock
        """
        with self._lock(self.port):
            status = self.get_status()
            if status.running:
                raise AlreadyRunning(self.port, status.pid)
            pid = self._start_phase("start")
            return TransitionResult(message=f"Service started successfully (PID: {pid})", pid=pid)

    def stop(self) -> TransitionResult:
        """Graceful stop, then forced stop if the port is still held.

        Issuing stop while nothing listens is harmless and succeeds.

        Raises:
            StopFailed: The port is still held after the forced stop
            OperationInProgress: Another operation holds the lock
        """
        with self._lock(self.port):
            was_running = self.get_status().running
            self._issue(self.config.stop_args)
            self._sleep(self.config.settle_secs)
            if self.inspector.probe_listener(self.port) is None:
                return TransitionResult(message="Service stopped", was_running=was_running)

            logger.info("Gateway still listening on port %d, forcing stop", self.port)
            self._issue(self.config.force_stop_args)
            self._sleep(self.config.settle_secs)
            pid = self.inspector.probe_listener(self.port)
            if pid is not None:
                raise StopFailed(self.port, pid)
            return TransitionResult(message="Service force stopped", forced=True, was_running=was_running)

    def restart(self) -> TransitionResult:
        """Stop (when running), wait for the port to free, then start.

        When nothing is listening no stop command is issued.

        Raises:
            RestartStopTimeout: The port stayed held during the stop phase
            ExecutableNotFound, SpawnFailed, StartTimeout: As for start()
            OperationInProgress: Another operation holds the lock
        """
        with self._lock(self.port):
            was_running = self.get_status().running
            forced = False
            if was_running:
                self._issue(self.config.stop_args)
                self._sleep(self.config.settle_secs)
                if self.inspector.probe_listener(self.port) is not None:
                    forced = True
                    self._issue(self.config.force_stop_args)
                    self._sleep(self.config.settle_secs)
                self._wait_port_freed()
            else:
                logger.info("Gateway not running on port %d, starting directly", self.port)

            pid = self._start_phase("restart")
            return TransitionResult(
                message=f"Service restarted successfully (PID: {pid})",
                pid=pid,
                forced=forced,
                was_running=was_running,
            )

    def get_logs(self, lines: int = 100) -> list[str]:
        """Return the last ``lines`` gateway log lines, oldest first.

        Raises:
            ValueError: If lines < 1
            ExecutableNotFound: The OpenClaw CLI is not installed
            CommandFailed: The logs command failed or exited non-zero
        """
        if lines < 1:
            raise ValueError(f"lines must be >= 1, got {lines}")
        if self.runner.locate() is None:
            raise ExecutableNotFound(self.config.executable)

        command = f"{self.config.executable} logs"
        try:
            result = self.runner.run(["logs", "--lines", str(lines)])
        except CommandError as e:
            raise CommandFailed(command, str(e)) from e
        if not result.success:
            raise CommandFailed(command, result.stderr.strip() or f"exit code {result.returncode}")
        return result.stdout.splitlines()

    def kill_all_on_port(self) -> KillAllReport:
        """Kill every process listening on the port, independently of each other.

        Raises:
            OperationInProgress: Another operation holds the lock
        """
        with self._lock(self.port):
            pids = self.inspector.find_all_listeners(self.port)
            results = [self._terminate(pid) for pid in pids]
            report = KillAllReport(port=self.port, pids=pids, results=results)
            logger.info(report.message)
            return report

    def _issue(self, args: Sequence[str]) -> None:
        """Run a stop command; its outcome is judged by probing, not by exit code."""
        try:
            result = self.runner.run(args)
        except CommandError as e:
            logger.warning("%s %s failed: %s", self.config.executable, " ".join(args), e)
            return
        if not result.success:
            logger.debug("%s %s exited %d", self.config.executable, " ".join(args), result.returncode)

    def _start_phase(self, action: str) -> int:
        if self.runner.locate() is None:
            raise ExecutableNotFound(self.config.executable)
        try:
            self.runner.spawn_detached(self.config.start_args)
        except SpawnError as e:
            raise SpawnFailed(str(e)) from e
        return self._wait_listening(action)

    def _wait_listening(self, action: str) -> int:
        attempts = self.config.start_poll_attempts
        interval = self.config.start_poll_interval_secs
        for attempt in range(1, attempts + 1):
            self._sleep(interval)
            pid = self.inspector.probe_listener(self.port)
            if pid is not None:
                logger.info("Gateway listening on port %d (PID: %d)", self.port, pid)
                return pid
            if attempt % 3 == 0:
                logger.debug("Waiting for gateway on port %d (%d/%d)", self.port, attempt, attempts)
        # Spawned child is left alone; it may still come up.
        raise StartTimeout(self.port, attempts, attempts * interval, action=action)

    def _wait_port_freed(self) -> None:
        attempts = self.config.restart_stop_poll_attempts
        interval = self.config.restart_stop_poll_interval_secs
        for attempt in range(1, attempts + 1):
            pid = self.inspector.probe_listener(self.port)
            if pid is None:
                return
            if attempt == attempts:
                raise RestartStopTimeout(self.port, pid, attempts * interval)
            self._sleep(interval)
