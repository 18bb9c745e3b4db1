"""Config API module."""

from .LogConfig import LogConfig
from .PanelConfig import PanelConfig

__all__ = ["LogConfig", "PanelConfig"]
