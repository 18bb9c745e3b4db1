"""Clawhub status command - is the clawhub installer available."""

import logging
from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.skills import SkillsClawhubStatusOutput
from ..openclaw.CommandError import CommandError
from ._run_node_tool import _run_node_tool

logger = logging.getLogger(__name__)


def _detect_clawhub() -> str:
    """Return "command", "npm", or "" when clawhub is not installed.

    ``npm list`` catches a global install whose bin dir is not on PATH.
    """
    try:
        if _run_node_tool("clawhub", ["--version"], timeout=30.0).success:
            return "command"
    except CommandError as exc:
        logger.debug("clawhub --version failed: %s", exc)

    try:
        listing = _run_node_tool("npm", ["list", "-g", "clawhub", "--depth=0"], timeout=60.0)
    except CommandError as exc:
        logger.debug("npm list -g failed: %s", exc)
        return ""
    # npm list exit codes vary by version; the listing itself is authoritative.
    return "npm" if "clawhub@" in listing.stdout else ""


def cmd_clawhub_status() -> StageResult:
    """Report whether clawhub is installed."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Checking clawhub...")
        method = _detect_clawhub()
        installed = bool(method)

        yield (1.0, "Complete")
        result_obj.result = "clawhub is installed" if installed else "clawhub is not installed"
        result_obj.output = SkillsClawhubStatusOutput(
            errors=[],
            warnings=[] if installed else ["Install it with 'clawpanel skills clawhub-install'"],
            installed=installed,
            method=method,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Checking clawhub installation...",
        progress_callback=do_work,
    )
