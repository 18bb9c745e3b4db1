"""Skills list command."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.skills import SkillsListOutput
from ..config.PanelConfig import PanelConfig
from .scan_skills import scan_skills


def cmd_list() -> StageResult:
    """List skills installed under the OpenClaw skills directory."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        try:
            skills_dir = PanelConfig.load().openclaw.skills_dir
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error: {e}"
            result_obj.output = SkillsListOutput(
                errors=[str(e)], warnings=[], skills_dir="", skills=[], count=0
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.5, f"Scanning {skills_dir}...")
        skills = scan_skills(skills_dir)
        warnings = [] if skills_dir.is_dir() else [f"Skills directory {skills_dir} does not exist"]

        yield (1.0, "Complete")
        result_obj.result = f"Found {len(skills)} skill(s)"
        result_obj.output = SkillsListOutput(
            errors=[],
            warnings=warnings,
            skills_dir=str(skills_dir),
            skills=[s.model_dump(mode="python") for s in skills],
            count=len(skills),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Listing skills...",
        progress_callback=do_work,
    )
