"""Port module - find which processes listen on a TCP port."""

from .PortInspector import PortInspector
from .PortProbeError import PortProbeError

__all__ = ["PortInspector", "PortProbeError"]
