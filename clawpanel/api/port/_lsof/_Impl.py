"""lsof backend - reads listening sockets on macOS and Linux."""

import subprocess

from .._AbstractImpl import _AbstractImpl
from ..PortProbeError import PortProbeError


class _Impl(_AbstractImpl):
    """Socket table reader built on ``lsof -t``."""

    @staticmethod
    def _build_args(port: int) -> list[str]:
        """Restrict lsof to TCP listeners on the given port, printing pids only."""
        return ["lsof", "-nP", "-t", f"-iTCP:{int(port)}", "-sTCP:LISTEN"]

    @staticmethod
    def _parse_pids(stdout: str) -> list[int]:
        """Parse one pid per line, skipping junk and duplicates."""
        pids: list[int] = []
        for line in stdout.splitlines():
            token = line.strip()
            if not token.isdigit():
                continue
            pid = int(token)
            if pid > 0 and pid not in pids:
                pids.append(pid)
        return pids

    def list_listeners(self, port: int) -> list[int]:
        result = subprocess.run(
            self._build_args(port),
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=self.timeout,
            check=False,
        )
        if result.returncode != 0:
            # lsof exits 1 with no output when nothing matches
            stderr = result.stderr.strip()
            if stderr:
                raise PortProbeError(f"lsof exited {result.returncode}: {stderr}")
            return []
        return self._parse_pids(result.stdout)
