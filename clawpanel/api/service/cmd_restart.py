"""Service restart command - stop if running, then start."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.service import ServiceRestartOutput
from ..config.PanelConfig import PanelConfig
from .ServiceError import ServiceError
from .ServiceSupervisor import ServiceSupervisor


def cmd_restart() -> StageResult:
    """Restart the gateway. A stopped gateway is simply started."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        port = 0
        try:
            config = PanelConfig.load()
            port = config.service.port
            yield (0.3, f"Restarting gateway on port {port}...")
            outcome = ServiceSupervisor(config.service).restart()
        except Exception as e:
            yield (1.0, "Complete")
            prefix = "Error" if isinstance(e, (ServiceError, ValueError)) else "Error restarting service"
            result_obj.result = f"{prefix}: {e}"
            result_obj.output = ServiceRestartOutput(
                errors=[str(e)],
                warnings=[],
                restarted=False,
                was_running=False,
                pid=-1,
                port=port,
                message=str(e),
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = outcome.message
        result_obj.output = ServiceRestartOutput(
            errors=[],
            warnings=[],
            restarted=True,
            was_running=outcome.was_running,
            pid=outcome.pid if outcome.pid is not None else -1,
            port=port,
            message=outcome.message,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Restarting service...",
        progress_callback=do_work,
    )
