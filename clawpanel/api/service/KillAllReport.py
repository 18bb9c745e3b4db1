"""Aggregate result of killing every listener on the service port."""

from dataclasses import dataclass, field

from ..process.KillResult import KillResult


@dataclass(frozen=True)
class KillAllReport:
    """Per-pid results plus counts; one stubborn pid never hides the others."""

    port: int
    pids: list[int] = field(default_factory=list)
    results: list[KillResult] = field(default_factory=list)

    @property
    def killed(self) -> int:
        return sum(1 for r in self.results if r.success)

    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if not r.success)

    @property
    def message(self) -> str:
        if not self.pids:
            return f"No processes found on port {self.port}"
        if self.failed == 0:
            return f"Killed {self.killed} process(es) on port {self.port}"
        return f"Killed {self.killed}, failed to kill {self.failed} process(es) on port {self.port}"
