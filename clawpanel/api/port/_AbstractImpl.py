"""Abstract base class for port inspection backends."""

from abc import ABC, abstractmethod


class _AbstractImpl(ABC):
    """Abstract base class for platform-specific socket table readers.

    Backends return every process id holding a listening TCP socket on the
    given port, deduplicated, in the order the OS tool printed them. They may
    raise OSError, subprocess.SubprocessError or PortProbeError; PortInspector
    turns those into an empty result.
    """

    def __init__(self, timeout: float = 5.0):
        self.timeout = timeout

    @abstractmethod
    def list_listeners(self, port: int) -> list[int]:
        """List process ids listening on ``port``.

        Args:
            port: TCP port number

        Returns:
            Deduplicated process ids, empty list if no listener
        """
        pass
