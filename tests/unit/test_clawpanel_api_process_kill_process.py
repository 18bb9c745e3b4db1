"""Unit tests for clawpanel.api.process.kill_process."""

import importlib
import signal
import subprocess

import pytest

from clawpanel.api.process.kill_process import kill_process

kill_module = importlib.import_module("clawpanel.api.process.kill_process")


@pytest.fixture
def posix(monkeypatch):
    monkeypatch.setattr(kill_module.platform, "system", lambda: "Linux")


@pytest.fixture
def windows(monkeypatch):
    monkeypatch.setattr(kill_module.platform, "system", lambda: "Windows")


def test_invalid_pid_rejected():
    result = kill_process(0)
    assert result.success is False
    assert "invalid pid" in result.message


def test_posix_sends_sigkill(posix, monkeypatch):
    sent = []
    monkeypatch.setattr(kill_module.os, "kill", lambda pid, sig: sent.append((pid, sig)))
    result = kill_process(4242)
    assert result.success is True
    assert result.pid == 4242
    assert sent == [(4242, signal.SIGKILL)]


def test_posix_failure_is_reported(posix, monkeypatch, caplog):
    def deny(pid, sig):
        raise PermissionError("Operation not permitted")

    monkeypatch.setattr(kill_module.os, "kill", deny)
    with caplog.at_level("WARNING", logger="clawpanel"):
        result = kill_process(1)
    assert result.success is False
    assert "not permitted" in result.message
    assert "Failed to kill PID 1" in caplog.text


def test_windows_uses_taskkill(windows, monkeypatch):
    calls = []

    def fake_run(args, **kwargs):
        calls.append(args)
        return subprocess.CompletedProcess(args=args, returncode=0, stdout="SUCCESS", stderr="")

    monkeypatch.setattr(kill_module.subprocess, "run", fake_run)
    assert kill_process(77).success is True
    assert calls == [["taskkill", "/F", "/PID", "77"]]


def test_windows_failure(windows, monkeypatch):
    monkeypatch.setattr(
        kill_module.subprocess,
        "run",
        lambda args, **k: subprocess.CompletedProcess(args=args, returncode=128, stdout="", stderr="ERROR: not found"),
    )
    result = kill_process(77)
    assert result.success is False
    assert result.message == "ERROR: not found"


def test_windows_taskkill_missing(windows, monkeypatch):
    def missing(args, **kwargs):
        raise FileNotFoundError("taskkill")

    monkeypatch.setattr(kill_module.subprocess, "run", missing)
    result = kill_process(77)
    assert result.success is False
    assert "taskkill failed" in result.message
