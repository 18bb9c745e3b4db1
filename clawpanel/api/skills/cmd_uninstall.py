"""Skills uninstall command - removes a skill directory."""

import logging
import shutil
from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.skills import SkillsUninstallOutput
from ..config.PanelConfig import PanelConfig

logger = logging.getLogger(__name__)


def _valid_skill_id(skill_id: str) -> bool:
    return bool(skill_id) and skill_id not in (".", "..") and "/" not in skill_id and "\\" not in skill_id


def cmd_uninstall(skill_id: str) -> StageResult:
    """Delete ``skills/<skill_id>`` from the OpenClaw home directory."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        path = ""

        def fail(message: str) -> None:
            result_obj.result = f"Error: {message}"
            result_obj.output = SkillsUninstallOutput(
                errors=[message], warnings=[], skill_id=skill_id, path=path, removed=False
            ).model_dump(mode="python")
            result_obj.success = False

        if not _valid_skill_id(skill_id):
            yield (1.0, "Complete")
            fail(f"Invalid skill id: {skill_id!r}")
            return

        yield (0.2, "Loading configuration...")
        try:
            skill_dir = PanelConfig.load().openclaw.skills_dir / skill_id
        except ValueError as e:
            yield (1.0, "Complete")
            fail(str(e))
            return
        path = str(skill_dir)

        if not skill_dir.is_dir():
            yield (1.0, "Complete")
            fail(f"Skill {skill_id} is not installed ({skill_dir} not found)")
            return

        yield (0.5, f"Removing {skill_dir}...")
        try:
            shutil.rmtree(skill_dir)
        except OSError as e:
            yield (1.0, "Complete")
            fail(f"Failed to remove skill directory: {e}")
            return

        logger.info("Uninstalled skill %s", skill_id)
        yield (1.0, "Complete")
        result_obj.result = f"Skill {skill_id} uninstalled"
        result_obj.output = SkillsUninstallOutput(
            errors=[], warnings=[], skill_id=skill_id, path=path, removed=True
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Uninstalling skill {skill_id}...",
        progress_callback=do_work,
    )
