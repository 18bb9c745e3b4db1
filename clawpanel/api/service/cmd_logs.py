"""Service logs command - recent gateway log lines via the OpenClaw CLI."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.service import ServiceLogsOutput
from ..config.PanelConfig import PanelConfig
from .ServiceSupervisor import ServiceSupervisor


def cmd_logs(lines: int = 100) -> StageResult:
    """Fetch the last ``lines`` gateway log lines, oldest first."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = PanelConfig.load()
            yield (0.4, f"Reading last {lines} log line(s)...")
            log_lines = ServiceSupervisor(config.service).get_logs(lines)
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error reading logs: {e}"
            result_obj.output = ServiceLogsOutput(
                errors=[str(e)], warnings=[], lines=[], count=0
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Retrieved {len(log_lines)} log line(s)"
        result_obj.output = ServiceLogsOutput(
            errors=[], warnings=[], lines=log_lines, count=len(log_lines)
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Reading service logs...",
        progress_callback=do_work,
    )
