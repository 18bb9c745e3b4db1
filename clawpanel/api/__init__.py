"""API module for clawpanel.

Functions defined here are the single source of truth for CLI commands and any
other front end (such as a desktop GUI) that drives the panel.
"""

__all__ = []
