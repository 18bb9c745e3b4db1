"""OpenClaw config command - summarizes openclaw.json without exposing secrets."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.openclaw import OpenclawConfigOutput
from ..config.PanelConfig import PanelConfig
from .OpenClawConfig import OpenClawConfig


def cmd_config() -> StageResult:
    """Show primary model and configured providers from openclaw.json."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        config_path = None
        try:
            config = PanelConfig.load()
            config_path = config.openclaw.config_path
            yield (0.5, f"Reading {config_path}...")
            openclaw_config = OpenClawConfig.load(config_path)
            overview = openclaw_config.ai_overview()
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error reading OpenClaw configuration: {e}"
            result_obj.output = OpenclawConfigOutput(
                errors=[str(e)],
                warnings=[],
                config_path=str(config_path or ""),
                exists=bool(config_path and config_path.exists()),
                primary_model=None,
                configured_providers=[],
                available_models=[],
            ).model_dump(mode="python")
            result_obj.success = False
            return

        exists = config_path.exists()
        warnings = [] if exists else [f"{config_path} does not exist"]
        yield (1.0, "Complete")
        result_obj.result = f"Found {len(overview['configured_providers'])} configured provider(s)"
        result_obj.output = OpenclawConfigOutput(
            errors=[],
            warnings=warnings,
            config_path=str(config_path),
            exists=exists,
            **overview,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Reading OpenClaw configuration...",
        progress_callback=do_work,
    )
