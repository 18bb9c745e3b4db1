"""Process module - forceful termination of foreign processes."""

from .KillResult import KillResult
from .kill_process import kill_process

__all__ = ["KillResult", "kill_process"]
