"""Abstract base class for display implementations."""

from abc import ABC, abstractmethod
from typing import Any


class Display(ABC):
    """Where the four command stages are rendered."""

    @abstractmethod
    def status(self, message: str, **kwargs) -> None:
        """Announce that an operation is starting."""

    @abstractmethod
    def success(self, message: str, **kwargs) -> None:
        """Report a successful result."""

    @abstractmethod
    def error(self, message: str, **kwargs) -> None:
        """Report a failed result.

        Args:
            message: Error text
            kwargs: Implementation-specific options (e.g. ``details``)
        """

    @abstractmethod
    def warning(self, message: str, **kwargs) -> None:
        pass

    @abstractmethod
    def info(self, message: str, **kwargs) -> None:
        pass

    @abstractmethod
    def json_output(self, data: Any, **kwargs) -> None:
        """Emit the structured command output.

        Args:
            data: Output dict
            kwargs: ``format`` ("yaml" or "json") and ``indent``
        """
