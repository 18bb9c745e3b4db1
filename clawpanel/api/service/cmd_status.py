"""Service status command - probes the gateway port."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.service import ServiceStatusOutput
from ..config.PanelConfig import PanelConfig
from .ServiceSupervisor import ServiceSupervisor


def cmd_status() -> StageResult:
    """Report whether the gateway is listening and which pid holds the port."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        port = None
        try:
            config = PanelConfig.load()
            port = config.service.port
            yield (0.4, f"Probing port {port}...")
            status = ServiceSupervisor(config.service).get_status()
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error checking service status: {e}"
            result_obj.output = ServiceStatusOutput(
                errors=[str(e)],
                warnings=[],
                running=False,
                pid=-1,
                port=port or 0,
                uptime_seconds=None,
                memory_mb=None,
                cpu_percent=None,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        if status.running:
            result_obj.result = f"Service is running on port {status.port} (PID: {status.pid})"
        else:
            result_obj.result = f"Service is not running on port {status.port}"
        result_obj.output = ServiceStatusOutput(
            errors=[],
            warnings=[],
            running=status.running,
            pid=status.pid if status.pid is not None else -1,
            port=status.port,
            uptime_seconds=status.uptime_seconds,
            memory_mb=status.memory_mb,
            cpu_percent=status.cpu_percent,
        ).model_dump(mode="python")
        # Querying succeeded, whatever the answer.
        result_obj.success = True

    return StageResult(
        announce="Checking service status...",
        progress_callback=do_work,
    )
