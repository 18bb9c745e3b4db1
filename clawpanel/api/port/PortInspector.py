"""Port inspector public API - who is listening on a TCP port."""

import logging
import platform
import subprocess

from ._AbstractImpl import _AbstractImpl
from .PortProbeError import PortProbeError

logger = logging.getLogger(__name__)

# Registry: add new backends here (ONLY place backend types are enumerated)
_BACKEND_REGISTRY: tuple[str, ...] = ("lsof", "netstat")


class PortInspector:
    """Find listener process ids for a port using the platform's socket table tool.

    A failed probe (tool missing, tool error, timeout) is reported as "no
    listener". Callers checking whether it is safe to start a service want
    that bias.
    """

    def __init__(self, backend: str = "auto", timeout: float = 5.0):
        backend_type = self.detect_backend() if backend == "auto" else backend
        if backend_type not in _BACKEND_REGISTRY:
            raise ValueError(f"Unsupported port backend: {backend_type!r} (supported: {list(_BACKEND_REGISTRY)})")

        # Import backend implementation class directly from backend _Impl module
        module = __import__(f"clawpanel.api.port._{backend_type}._Impl", fromlist=[""])
        self.backend_type = backend_type
        self._impl: _AbstractImpl = module._Impl(timeout=timeout)

    @staticmethod
    def detect_backend() -> str:
        """Pick the socket table tool for the current operating system.

        Returns:
            "netstat" on Windows, "lsof" everywhere else
        """
        if platform.system().lower() == "windows":
            return "netstat"
        return "lsof"

    @staticmethod
    def _check_port(port: int) -> int:
        if not isinstance(port, int) or isinstance(port, bool) or not 0 < port < 65536:
            raise ValueError(f"Invalid TCP port: {port!r}")
        return port

    def _list(self, port: int) -> list[int]:
        port = self._check_port(port)
        try:
            return self._impl.list_listeners(port)
        except (OSError, UnicodeError, subprocess.SubprocessError, PortProbeError) as exc:
            logger.debug("Port probe via %s failed for port %d: %s", self.backend_type, port, exc)
            return []

    def probe_listener(self, port: int) -> int | None:
        """Return one process id listening on ``port``, or None.

        Which id comes first is whatever the OS tool printed first.
        """
        pids = self._list(port)
        return pids[0] if pids else None

    def find_all_listeners(self, port: int) -> list[int]:
        """Return every process id listening on ``port`` (deduplicated)."""
        return self._list(port)
