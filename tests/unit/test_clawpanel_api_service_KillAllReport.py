"""Unit tests for clawpanel.api.service.KillAllReport."""

from clawpanel.api.process.KillResult import KillResult
from clawpanel.api.service.KillAllReport import KillAllReport


def test_empty_report():
    report = KillAllReport(port=18789)
    assert report.killed == 0
    assert report.failed == 0
    assert report.message == "No processes found on port 18789"


def test_counts():
    report = KillAllReport(
        port=18789,
        pids=[1, 2, 3],
        results=[
            KillResult(pid=1, success=True),
            KillResult(pid=2, success=False, message="denied"),
            KillResult(pid=3, success=False, message="denied"),
        ],
    )
    assert report.killed == 1
    assert report.failed == 2
    assert report.message == "Killed 1, failed to kill 2 process(es) on port 18789"
