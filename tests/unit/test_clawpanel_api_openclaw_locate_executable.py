"""Unit tests for clawpanel.api.openclaw.locate_executable."""

import importlib

from clawpanel.api.openclaw.locate_executable import locate_executable

locate_module = importlib.import_module("clawpanel.api.openclaw.locate_executable")


def test_found_on_path(monkeypatch):
    monkeypatch.setattr(locate_module.shutil, "which", lambda name: f"/usr/bin/{name}")
    assert locate_executable("openclaw") == "/usr/bin/openclaw"


def test_found_in_npm_global_dir(monkeypatch, tmp_path):
    monkeypatch.setattr(locate_module.shutil, "which", lambda name: None)
    monkeypatch.setattr(locate_module.platform, "system", lambda: "Darwin")
    monkeypatch.setattr(locate_module, "_npm_global_prefix", lambda: None)
    bin_dir = tmp_path / ".npm-global" / "bin"
    bin_dir.mkdir(parents=True)
    exe = bin_dir / "openclaw"
    exe.write_text("#!/bin/sh\n")
    exe.chmod(0o755)

    assert locate_executable("openclaw") == str(exe)


def test_npm_prefix_checked_first(monkeypatch, tmp_path):
    monkeypatch.setattr(locate_module.platform, "system", lambda: "Linux")
    monkeypatch.setattr(locate_module, "_npm_global_prefix", lambda: tmp_path / "prefix")
    paths = locate_module._candidate_paths("openclaw")
    assert paths[0] == tmp_path / "prefix" / "bin" / "openclaw"


def test_non_executable_ignored(monkeypatch, tmp_path):
    monkeypatch.setattr(locate_module.shutil, "which", lambda name: None)
    monkeypatch.setattr(locate_module.platform, "system", lambda: "Linux")
    monkeypatch.setattr(locate_module, "_npm_global_prefix", lambda: None)
    monkeypatch.setattr(locate_module, "_candidate_paths", lambda name: [tmp_path / "openclaw"])
    (tmp_path / "openclaw").write_text("not executable")
    (tmp_path / "openclaw").chmod(0o644)
    assert locate_executable("openclaw") is None


def test_not_installed(monkeypatch):
    monkeypatch.setattr(locate_module.shutil, "which", lambda name: None)
    monkeypatch.setattr(locate_module, "_candidate_paths", lambda name: [])
    assert locate_executable("openclaw") is None
