"""Wrap a cmd_* function for CLI display."""

import functools
from collections.abc import Callable
from typing import TypeVar

import typer

from ._run_single_execution import _run_single_execution

F = TypeVar("F", bound=Callable)


def _extract_display_format(ctx: typer.Context) -> str:
    """Walk the context chain of ``ctx`` for the root ``--display`` value.

    Raises:
        RuntimeError: If no context in the chain carries a display format.
        ValueError: If the stored display format is not json or yaml.
    """
    current: typer.Context | None = ctx
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and "display_format" in obj:
            value = obj["display_format"]
            if value in ("json", "yaml"):
                return value
            raise ValueError(f"Invalid display_format value: {value!r}")
        current = current.parent
    raise RuntimeError("Display format not set in the Typer context chain")


def _handle_stage_result(func: F, ctx: typer.Context) -> F:
    """Run ``func``'s StageResult through the four stages and exit 0/1.

    1. Announce (stderr)
    2. Progress (stderr)
    3. Result (stderr)
    4. Output (stdout, YAML or JSON)
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        from .display.display_context import display_context

        display = display_context.get_display("cli")
        _run_single_execution(func, args, kwargs, display, _extract_display_format(ctx))

    return wrapper  # type: ignore[return-value]
