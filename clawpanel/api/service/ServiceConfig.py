"""Service configuration with Pydantic validation."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..port.PortInspector import _BACKEND_REGISTRY

SERVICE_PORT = 18789


class ServiceConfig(BaseModel):
    """How to reach, drive and wait for the OpenClaw gateway.

    Poll intervals and ceilings are tuning values: a short settle after a stop
    command, a longer bounded poll after a start command, and separate ceilings
    for the stop phase of a restart and for a fresh start.
    """

    model_config = ConfigDict(extra="forbid")

    port: int = Field(SERVICE_PORT, gt=0, lt=65536, description="TCP port the gateway listens on")
    executable: str = Field("openclaw", min_length=1, description="Name of the OpenClaw CLI executable")
    start_args: list[str] = Field(default_factory=lambda: ["gateway", "start"], description="Arguments spawned to start the gateway")
    stop_args: list[str] = Field(default_factory=lambda: ["gateway", "stop"], description="Arguments for a graceful stop")
    force_stop_args: list[str] = Field(
        default_factory=lambda: ["gateway", "stop", "--force"], description="Arguments for a forced stop"
    )
    settle_secs: float = Field(0.5, ge=0, description="Pause after a stop command before re-probing")
    start_poll_attempts: int = Field(15, gt=0, description="Probes after spawning before giving up")
    start_poll_interval_secs: float = Field(1.0, ge=0, description="Sleep before each start probe")
    restart_stop_poll_attempts: int = Field(10, gt=0, description="Probes waiting for the port to free during restart")
    restart_stop_poll_interval_secs: float = Field(0.5, ge=0, description="Sleep between restart stop probes")
    command_timeout_secs: float = Field(30.0, gt=0, description="Timeout for synchronous CLI invocations")
    probe: str = Field("auto", description="Port backend: 'auto', 'lsof' or 'netstat'")

    @field_validator("probe")
    @classmethod
    def validate_probe(cls, v: str) -> str:
        supported = ("auto", *_BACKEND_REGISTRY)
        if v not in supported:
            raise ValueError(f"service.probe must be one of {list(supported)}, got: {v!r}")
        return v

    @field_validator("start_args", "stop_args", "force_stop_args")
    @classmethod
    def validate_args(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("command arguments must not be empty")
        return v
