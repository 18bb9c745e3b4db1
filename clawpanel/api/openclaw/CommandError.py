"""Errors raised when an external command cannot be executed at all."""


class CommandError(Exception):
    """The command could not be executed (missing binary, permission, timeout)."""


class SpawnError(CommandError):
    """The OS refused to start a detached process."""
