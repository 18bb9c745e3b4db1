"""Unit tests for the lsof port backend."""

import subprocess

import pytest

from clawpanel.api.port._lsof._Impl import _Impl
from clawpanel.api.port.PortProbeError import PortProbeError


def _completed(returncode=0, stdout="", stderr=""):
    return subprocess.CompletedProcess(args=["lsof"], returncode=returncode, stdout=stdout, stderr=stderr)


def test_build_args_filters_listening_tcp():
    assert _Impl._build_args(18789) == ["lsof", "-nP", "-t", "-iTCP:18789", "-sTCP:LISTEN"]


def test_parse_pids_dedups_and_keeps_order():
    assert _Impl._parse_pids("4242\n17\n4242\n") == [4242, 17]


def test_parse_pids_skips_junk():
    assert _Impl._parse_pids("  \nlsof: WARNING\n0\n99\n") == [99]


def test_parse_empty():
    assert _Impl._parse_pids("") == []


def test_list_listeners(monkeypatch):
    calls = []

    def fake_run(args, **kwargs):
        calls.append(args)
        return _completed(stdout="321\n")

    monkeypatch.setattr(subprocess, "run", fake_run)
    assert _Impl(timeout=1.0).list_listeners(18789) == [321]
    assert calls[0][0] == "lsof"


def test_no_match_exit_is_empty(monkeypatch):
    monkeypatch.setattr(subprocess, "run", lambda *a, **k: _completed(returncode=1))
    assert _Impl().list_listeners(18789) == []


def test_error_exit_raises(monkeypatch):
    monkeypatch.setattr(subprocess, "run", lambda *a, **k: _completed(returncode=1, stderr="lsof: illegal option"))
    with pytest.raises(PortProbeError, match="illegal option"):
        _Impl().list_listeners(18789)


def _decoding_run(raw_stdout: bytes, raw_stderr: bytes, returncode: int):
    """Decode like subprocess.run would with the caller's encoding arguments."""

    def fake_run(args, **kwargs):
        encoding, errors = kwargs["encoding"], kwargs["errors"]
        return _completed(
            returncode=returncode,
            stdout=raw_stdout.decode(encoding, errors),
            stderr=raw_stderr.decode(encoding, errors),
        )

    return fake_run


def test_undecodable_output_is_parsed(monkeypatch):
    monkeypatch.setattr(subprocess, "run", _decoding_run(b"\xff\xfe\n4242\n", b"", 0))
    assert _Impl().list_listeners(18789) == [4242]


def test_undecodable_stderr_is_a_probe_error(monkeypatch):
    monkeypatch.setattr(subprocess, "run", _decoding_run(b"", b"lsof: WARNING: can't stat() \xff\xfe", 1))
    with pytest.raises(PortProbeError, match="WARNING"):
        _Impl().list_listeners(18789)
