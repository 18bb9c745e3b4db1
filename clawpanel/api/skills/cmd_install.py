"""Skills install command - installs a skill through clawhub."""

import logging
from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.skills import SkillsInstallOutput
from ..config.PanelConfig import PanelConfig
from ..openclaw.CommandError import CommandError
from ._run_node_tool import _run_node_tool

logger = logging.getLogger(__name__)


def cmd_install(name: str) -> StageResult:
    """Run ``npx clawhub install <name>`` inside the OpenClaw home directory."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        def fail(message: str) -> None:
            result_obj.result = f"Error: {message}"
            result_obj.output = SkillsInstallOutput(
                errors=[message], warnings=[], name=name, installed=False, stdout=""
            ).model_dump(mode="python")
            result_obj.success = False

        if not name.strip():
            yield (1.0, "Complete")
            fail("Skill name must not be empty")
            return

        yield (0.1, "Loading configuration...")
        try:
            home = PanelConfig.load().openclaw.home_path
            home.mkdir(parents=True, exist_ok=True)
        except (ValueError, OSError) as e:
            yield (1.0, "Complete")
            fail(str(e))
            return

        yield (0.3, f"Installing {name} via clawhub...")
        try:
            result = _run_node_tool("npx", ["clawhub", "install", name], cwd=home)
        except CommandError as e:
            yield (1.0, "Complete")
            fail(f"Failed to execute clawhub install: {e}")
            return

        yield (1.0, "Complete")
        if not result.success:
            logger.error("Failed to install skill %s: %s", name, result.stderr.strip())
            fail(f"Failed to install skill: {result.stderr.strip() or f'exit code {result.returncode}'}")
            return

        logger.info("Installed skill %s", name)
        result_obj.result = f"Skill {name} installed"
        result_obj.output = SkillsInstallOutput(
            errors=[], warnings=[], name=name, installed=True, stdout=result.stdout
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Installing skill {name}...",
        progress_callback=do_work,
    )
