"""Unit tests for the netstat port backend."""

import subprocess

import pytest

from clawpanel.api.port._netstat._Impl import _Impl
from clawpanel.api.port.PortProbeError import PortProbeError

NETSTAT = """
Active Connections

  Proto  Local Address          Foreign Address        State           PID
  TCP    0.0.0.0:135            0.0.0.0:0              LISTENING       1100
  TCP    127.0.0.1:18789        0.0.0.0:0              LISTENING       4242
  TCP    [::1]:18789            [::]:0                 LISTENING       4242
  TCP    127.0.0.1:18789        127.0.0.1:50123        ESTABLISHED     4242
  TCP    127.0.0.1:50123        127.0.0.1:18789        ESTABLISHED     9000
  TCP    0.0.0.0:187890         0.0.0.0:0              LISTENING       7777
  TCP    0.0.0.0:118789         0.0.0.0:0              LISTENING       8888
  TCP    0.0.0.0:18789          0.0.0.0:0              LISTENING       5151
  UDP    0.0.0.0:18789          *:*                                    6000
"""


def test_only_listening_rows_on_the_port():
    assert _Impl._parse_pids(NETSTAT, 18789) == [4242, 5151]


def test_foreign_address_match_is_ignored():
    assert 9000 not in _Impl._parse_pids(NETSTAT, 18789)


def test_port_suffix_must_match_exactly():
    pids = _Impl._parse_pids(NETSTAT, 18789)
    assert 7777 not in pids
    assert 8888 not in pids


def test_pid_zero_skipped():
    line = "  TCP    0.0.0.0:18789    0.0.0.0:0    LISTENING    0\n"
    assert _Impl._parse_pids(line, 18789) == []


def test_short_rows_skipped():
    assert _Impl._parse_pids("TCP 0.0.0.0:18789 LISTENING\n", 18789) == []


def test_list_listeners(monkeypatch):
    monkeypatch.setattr(
        subprocess,
        "run",
        lambda *a, **k: subprocess.CompletedProcess(args=a, returncode=0, stdout=NETSTAT, stderr=""),
    )
    assert _Impl().list_listeners(135) == [1100]


def test_failure_raises(monkeypatch):
    monkeypatch.setattr(
        subprocess,
        "run",
        lambda *a, **k: subprocess.CompletedProcess(args=a, returncode=1, stdout="", stderr="denied"),
    )
    with pytest.raises(PortProbeError):
        _Impl().list_listeners(18789)


def test_localized_output_is_decoded_with_replacement(monkeypatch):
    raw = "  Proto  Adresse locale  État\n".encode("cp1252") + NETSTAT.encode("ascii")

    def fake_run(args, **kwargs):
        stdout = raw.decode(kwargs["encoding"], kwargs["errors"])
        return subprocess.CompletedProcess(args=args, returncode=0, stdout=stdout, stderr="")

    monkeypatch.setattr(subprocess, "run", fake_run)
    assert _Impl().list_listeners(18789) == [4242, 5151]
