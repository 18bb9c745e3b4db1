"""netstat backend - reads listening sockets on Windows."""

import subprocess

from ....utils.hidden_window_kwargs import hidden_window_kwargs
from .._AbstractImpl import _AbstractImpl
from ..PortProbeError import PortProbeError

_LISTENING = "LISTENING"


class _Impl(_AbstractImpl):
    """Socket table reader built on ``netstat -ano``."""

    @staticmethod
    def _parse_pids(stdout: str, port: int) -> list[int]:
        """Pick pids from LISTENING rows whose local address ends in ``:port``.

        Rows look like ``TCP    0.0.0.0:18789    0.0.0.0:0    LISTENING    4242``;
        the pid is always the last column.
        """
        suffix = f":{int(port)}"
        pids: list[int] = []
        for line in stdout.splitlines():
            columns = line.split()
            if len(columns) < 5:
                continue
            local_address = columns[1]
            if not local_address.endswith(suffix) or _LISTENING not in line:
                continue
            token = columns[-1]
            if not token.isdigit():
                continue
            pid = int(token)
            if pid > 0 and pid not in pids:
                pids.append(pid)
        return pids

    def list_listeners(self, port: int) -> list[int]:
        result = subprocess.run(
            ["netstat", "-ano"],
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=self.timeout,
            check=False,
            **hidden_window_kwargs(),
        )
        if result.returncode != 0:
            raise PortProbeError(f"netstat exited {result.returncode}: {result.stderr.strip()}")
        return self._parse_pids(result.stdout, port)
