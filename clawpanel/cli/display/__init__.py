"""Display implementations for the command line."""

from .CLIDisplay import CLIDisplay
from .Display import Display
from .display_context import DisplayContext, display_context

__all__ = ["CLIDisplay", "Display", "DisplayContext", "display_context"]
