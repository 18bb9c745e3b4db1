"""Config show command."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.config import ConfigShowOutput
from .PanelConfig import PanelConfig


def cmd_show(section: str = "") -> StageResult:
    """Show one configuration section, or list section names when ``section`` is empty.

    Values are the effective ones, defaults included.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Loading configuration...")
        config_path = str(PanelConfig.get_config_path())
        try:
            config = PanelConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error: {e}"
            result_obj.output = ConfigShowOutput(
                errors=[str(e)], warnings=[], section=section, content={}, config_path=config_path
            ).model_dump(mode="python")
            result_obj.success = False
            return

        config_dict = config.to_dict()
        sections = list(config_dict)
        warnings = [] if config.path.exists() else [f"{config_path} does not exist, showing defaults"]
        yield (1.0, "Complete")

        if section == "":
            result_obj.result = f"Found {len(sections)} section(s)"
            content = {"sections": sections}
            errors: list[str] = []
        elif section in config_dict:
            result_obj.result = f"Retrieved configuration for '{section}'"
            content = config_dict[section]
            errors = []
        else:
            result_obj.result = f"Section '{section}' not found"
            content = {}
            errors = [f"Unknown section: {section} (available: {', '.join(sections)})"]

        result_obj.output = ConfigShowOutput(
            errors=errors, warnings=warnings, section=section, content=content, config_path=config_path
        ).model_dump(mode="python")
        result_obj.success = not errors

    announce = "Listing configuration sections..." if section == "" else f"Showing configuration for section '{section}'..."
    return StageResult(announce=announce, progress_callback=do_work)
