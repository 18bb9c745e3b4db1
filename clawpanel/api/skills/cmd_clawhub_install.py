"""Clawhub install command - ``npm install -g clawhub``."""

import logging
from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.skills import SkillsClawhubInstallOutput
from ..openclaw.CommandError import CommandError
from ._run_node_tool import _run_node_tool

logger = logging.getLogger(__name__)


def cmd_clawhub_install() -> StageResult:
    """Install clawhub globally via npm."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Running npm install -g clawhub...")
        try:
            result = _run_node_tool("npm", ["install", "-g", "clawhub"])
            error = None if result.success else (result.stderr.strip() or f"exit code {result.returncode}")
        except CommandError as e:
            error = str(e)

        yield (1.0, "Complete")
        if error is not None:
            message = f"Failed to install clawhub: {error}"
            logger.error(message)
            result_obj.result = f"Error: {message}"
            result_obj.output = SkillsClawhubInstallOutput(
                errors=[message], warnings=[], installed=False, message=message
            ).model_dump(mode="python")
            result_obj.success = False
            return

        logger.info("clawhub installed")
        result_obj.result = "Clawhub installed successfully"
        result_obj.output = SkillsClawhubInstallOutput(
            errors=[], warnings=[], installed=True, message=result_obj.result
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Installing clawhub...",
        progress_callback=do_work,
    )
