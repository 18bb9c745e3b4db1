"""Where OpenClaw keeps its files."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class OpenClawPathsConfig(BaseModel):
    """Location of the OpenClaw home directory and its JSON configuration."""

    model_config = ConfigDict(extra="forbid")

    home: str = Field("~/.openclaw", description="OpenClaw home directory")
    config_file: str = Field("openclaw.json", description="Config file name inside the home directory")

    @property
    def home_path(self) -> Path:
        return Path(self.home).expanduser()

    @property
    def config_path(self) -> Path:
        return self.home_path / self.config_file

    @property
    def skills_dir(self) -> Path:
        return self.home_path / "skills"
