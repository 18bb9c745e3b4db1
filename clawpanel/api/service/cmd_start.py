"""Service start command - spawns the gateway and waits for its port."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.service import ServiceStartOutput
from ..config.PanelConfig import PanelConfig
from .ServiceError import AlreadyRunning, ServiceError
from .ServiceSupervisor import ServiceSupervisor


def cmd_start() -> StageResult:
    """Start the gateway.

    Fails without spawning anything when the port is already held. After
    spawning, polls the port until it is listening or the poll ceiling is hit.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        port = 0
        try:
            config = PanelConfig.load()
            port = config.service.port
            yield (0.3, f"Starting gateway on port {port}...")
            outcome = ServiceSupervisor(config.service).start()
        except AlreadyRunning as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error: {e}"
            result_obj.output = ServiceStartOutput(
                errors=[str(e)],
                warnings=[],
                running=True,
                pid=e.pid if e.pid is not None else -1,
                port=e.port,
                message=str(e),
            ).model_dump(mode="python")
            result_obj.success = False
            return
        except Exception as e:
            yield (1.0, "Complete")
            prefix = "Error" if isinstance(e, (ServiceError, ValueError)) else "Error starting service"
            result_obj.result = f"{prefix}: {e}"
            result_obj.output = ServiceStartOutput(
                errors=[str(e)], warnings=[], running=False, pid=-1, port=port, message=str(e)
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = outcome.message
        result_obj.output = ServiceStartOutput(
            errors=[],
            warnings=[],
            running=True,
            pid=outcome.pid if outcome.pid is not None else -1,
            port=port,
            message=outcome.message,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Starting service...",
        progress_callback=do_work,
    )
