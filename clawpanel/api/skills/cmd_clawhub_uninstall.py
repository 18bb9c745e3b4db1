"""Clawhub uninstall command - ``npm uninstall -g clawhub``."""

import logging
from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.skills import SkillsClawhubUninstallOutput
from ..openclaw.CommandError import CommandError
from ._run_node_tool import _run_node_tool

logger = logging.getLogger(__name__)


def cmd_clawhub_uninstall() -> StageResult:
    """Remove the global clawhub install."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Running npm uninstall -g clawhub...")
        try:
            result = _run_node_tool("npm", ["uninstall", "-g", "clawhub"])
            error = None if result.success else (result.stderr.strip() or f"exit code {result.returncode}")
        except CommandError as e:
            error = str(e)

        yield (1.0, "Complete")
        if error is not None:
            message = f"Failed to uninstall clawhub: {error}"
            logger.error(message)
            result_obj.result = f"Error: {message}"
            result_obj.output = SkillsClawhubUninstallOutput(
                errors=[message], warnings=[], uninstalled=False, message=message
            ).model_dump(mode="python")
            result_obj.success = False
            return

        logger.info("clawhub uninstalled")
        result_obj.result = "Clawhub uninstalled successfully"
        result_obj.output = SkillsClawhubUninstallOutput(
            errors=[], warnings=[], uninstalled=True, message=result_obj.result
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Uninstalling clawhub...",
        progress_callback=do_work,
    )
