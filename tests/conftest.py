"""Shared pytest configuration and fixtures for all tests."""

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path

import pytest

from clawpanel.api.openclaw.CommandResult import CommandResult
from clawpanel.api.process.KillResult import KillResult
from clawpanel.api.service.ServiceConfig import ServiceConfig
from clawpanel.api.service.ServiceSupervisor import ServiceSupervisor


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests with no external processes")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


class FakeInspector:
    """Scripted port inspector.

    ``probes`` are returned in order by probe_listener; the last one repeats.
    """

    def __init__(self, probes: Sequence[int | None] = (None,), listeners: Sequence[int] = ()):
        self.probes = list(probes)
        self.listeners = list(listeners)
        self.probe_calls = 0

    def probe_listener(self, port: int) -> int | None:
        self.probe_calls += 1
        if len(self.probes) > 1:
            return self.probes.pop(0)
        return self.probes[0]

    def find_all_listeners(self, port: int) -> list[int]:
        return list(self.listeners)


class FakeRunner:
    """Records invocations of the OpenClaw CLI instead of running it."""

    def __init__(
        self,
        path: str | None = "/usr/local/bin/openclaw",
        result: CommandResult | None = None,
        run_error: Exception | None = None,
        spawn_error: Exception | None = None,
        spawn_pid: int = 5000,
    ):
        self.path = path
        self.result = result if result is not None else CommandResult(success=True, stdout="", stderr="")
        self.run_error = run_error
        self.spawn_error = spawn_error
        self.spawn_pid = spawn_pid
        self.ran: list[list[str]] = []
        self.spawned: list[list[str]] = []

    def locate(self) -> str | None:
        return self.path

    def run(self, args, cwd=None) -> CommandResult:
        self.ran.append(list(args))
        if self.run_error is not None:
            raise self.run_error
        return self.result

    def spawn_detached(self, args) -> int:
        self.spawned.append(list(args))
        if self.spawn_error is not None:
            raise self.spawn_error
        return self.spawn_pid


class FakeTerminator:
    """Kill stand-in; pids in ``failing`` fail."""

    def __init__(self, failing: Sequence[int] = ()):
        self.failing = set(failing)
        self.killed: list[int] = []

    def __call__(self, pid: int) -> KillResult:
        self.killed.append(pid)
        if pid in self.failing:
            return KillResult(pid=pid, success=False, message="Operation not permitted")
        return KillResult(pid=pid, success=True)


@contextmanager
def no_lock(port: int) -> Iterator[None]:
    yield


def make_supervisor(
    inspector: FakeInspector | None = None,
    runner: FakeRunner | None = None,
    terminator: FakeTerminator | None = None,
    sleeps: list[float] | None = None,
    **config_overrides,
) -> ServiceSupervisor:
    """Supervisor wired to fakes; sleeps are recorded, never slept."""
    sleeps = sleeps if sleeps is not None else []
    return ServiceSupervisor(
        ServiceConfig(**config_overrides),
        inspector=inspector or FakeInspector(),
        runner=runner or FakeRunner(),
        terminator=terminator or FakeTerminator(),
        sleep=sleeps.append,
        lock=no_lock,
    )


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clawpanel_home(tmp_path: Path, monkeypatch) -> Path:
    """Isolate panel and OpenClaw homes under tmp_path for every test."""
    home = tmp_path / ".clawpanel"
    monkeypatch.setenv("CLAWPANEL_HOME", str(home))
    monkeypatch.setenv("HOME", str(tmp_path))
    return home


@pytest.fixture
def openclaw_home(tmp_path: Path) -> Path:
    """OpenClaw home as resolved from the isolated HOME."""
    home = tmp_path / ".openclaw"
    home.mkdir(parents=True, exist_ok=True)
    return home
