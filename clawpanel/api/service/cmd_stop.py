"""Service stop command - graceful stop with forced fallback."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.service import ServiceStopOutput
from ..config.PanelConfig import PanelConfig
from .ServiceError import ServiceError, StopFailed
from .ServiceSupervisor import ServiceSupervisor


def cmd_stop() -> StageResult:
    """Stop the gateway; escalates to a forced stop if the port stays held."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        port = 0
        try:
            config = PanelConfig.load()
            port = config.service.port
            yield (0.3, f"Stopping gateway on port {port}...")
            outcome = ServiceSupervisor(config.service).stop()
        except StopFailed as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error: {e}"
            result_obj.output = ServiceStopOutput(
                errors=[str(e)],
                warnings=["Use 'clawpanel service kill-all' to kill every process on the port"],
                stopped=False,
                pid=e.pid if e.pid is not None else -1,
                port=e.port,
                forced=True,
                message=str(e),
            ).model_dump(mode="python")
            result_obj.success = False
            return
        except Exception as e:
            yield (1.0, "Complete")
            prefix = "Error" if isinstance(e, (ServiceError, ValueError)) else "Error stopping service"
            result_obj.result = f"{prefix}: {e}"
            result_obj.output = ServiceStopOutput(
                errors=[str(e)], warnings=[], stopped=False, pid=-1, port=port, forced=False, message=str(e)
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        warnings = [] if outcome.was_running else [f"Service was not running on port {port}"]
        result_obj.result = outcome.message
        result_obj.output = ServiceStopOutput(
            errors=[],
            warnings=warnings,
            stopped=True,
            pid=-1,
            port=port,
            forced=outcome.forced,
            message=outcome.message,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Stopping service...",
        progress_callback=do_work,
    )
