"""Unit test fixtures.

Most helpers live in tests/conftest.py; this file holds unit-only fixtures.
"""

import json
from pathlib import Path

import pytest

from tests.conftest import FakeInspector, FakeRunner, FakeTerminator, make_supervisor, run_cmd

__all__ = [
    "FakeInspector",
    "FakeRunner",
    "FakeTerminator",
    "make_supervisor",
    "patch_supervisor",
    "run_cmd",
    "write_panel_config",
]


def write_panel_config(home: Path, data: dict) -> Path:
    """Write ``config.json`` into the panel home."""
    home.mkdir(parents=True, exist_ok=True)
    path = home / "config.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def patch_supervisor(monkeypatch, module: str, supervisor) -> None:
    """Make ``clawpanel.api.service.<module>`` build ``supervisor`` instead of a real one."""
    monkeypatch.setattr(f"clawpanel.api.service.{module}.ServiceSupervisor", lambda *_a, **_k: supervisor)


@pytest.fixture
def sleeps() -> list[float]:
    """Recorded sleep durations."""
    return []
