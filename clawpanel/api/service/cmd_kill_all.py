"""Service kill-all command - forcibly kills every listener on the port."""

from collections.abc import Iterator
from dataclasses import asdict

from ..StageResult import StageResult
from .._output_schemas.service import ServiceKillAllOutput
from ..config.PanelConfig import PanelConfig
from .ServiceSupervisor import ServiceSupervisor


def cmd_kill_all() -> StageResult:
    """Kill every process listening on the service port.

    Escape hatch for a gateway that ignores stop. Each pid is killed
    independently; failed kills are listed in the output without failing
    the command.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        port = 0
        try:
            config = PanelConfig.load()
            port = config.service.port
            yield (0.3, f"Killing processes on port {port}...")
            report = ServiceSupervisor(config.service).kill_all_on_port()
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error killing processes: {e}"
            result_obj.output = ServiceKillAllOutput(
                errors=[str(e)], warnings=[], port=port, pids=[], killed=0, failed=0, results=[], message=str(e)
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        errors = [f"PID {r.pid}: {r.message}" for r in report.results if not r.success]
        result_obj.result = report.message
        result_obj.output = ServiceKillAllOutput(
            errors=errors,
            warnings=[],
            port=report.port,
            pids=report.pids,
            killed=report.killed,
            failed=report.failed,
            results=[asdict(r) for r in report.results],
            message=report.message,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Killing processes on service port...",
        progress_callback=do_work,
    )
