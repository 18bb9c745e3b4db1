"""Unit tests for clawpanel.api.port.PortInspector."""

import importlib
import subprocess

import pytest

from clawpanel.api.port.PortInspector import _BACKEND_REGISTRY, PortInspector
from clawpanel.api.port.PortProbeError import PortProbeError


class _StubImpl:
    def __init__(self, result=None, error=None):
        self.result = result or []
        self.error = error
        self.ports: list[int] = []

    def list_listeners(self, port):
        self.ports.append(port)
        if self.error is not None:
            raise self.error
        return list(self.result)


def _inspector(impl) -> PortInspector:
    inspector = PortInspector(backend="lsof")
    inspector._impl = impl
    return inspector


def test_registry():
    assert _BACKEND_REGISTRY == ("lsof", "netstat")


@pytest.mark.parametrize(("system", "expected"), [("Windows", "netstat"), ("Darwin", "lsof"), ("Linux", "lsof")])
def test_detect_backend(monkeypatch, system, expected):
    inspector_module = importlib.import_module("clawpanel.api.port.PortInspector")
    monkeypatch.setattr(inspector_module.platform, "system", lambda: system)
    assert PortInspector.detect_backend() == expected
    assert PortInspector().backend_type == expected


def test_unknown_backend_rejected():
    with pytest.raises(ValueError, match="Unsupported port backend"):
        PortInspector(backend="ss")


def test_probe_listener_first_pid():
    impl = _StubImpl([10, 20])
    assert _inspector(impl).probe_listener(18789) == 10
    assert impl.ports == [18789]


def test_probe_listener_none():
    assert _inspector(_StubImpl([])).probe_listener(18789) is None


def test_find_all_listeners():
    assert _inspector(_StubImpl([10, 20])).find_all_listeners(18789) == [10, 20]


@pytest.mark.parametrize(
    "error",
    [
        FileNotFoundError("lsof"),
        subprocess.TimeoutExpired("lsof", 5),
        PortProbeError("bad"),
        UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte"),
    ],
)
def test_probe_errors_mean_no_listener(error):
    inspector = _inspector(_StubImpl(error=error))
    assert inspector.probe_listener(18789) is None
    assert inspector.find_all_listeners(18789) == []


@pytest.mark.parametrize("port", [0, 70000, True, "18789"])
def test_invalid_port(port):
    with pytest.raises(ValueError):
        _inspector(_StubImpl()).probe_listener(port)
