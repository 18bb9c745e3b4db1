"""Installed skill DTO."""

from pydantic import BaseModel, ConfigDict, Field


class Skill(BaseModel):
    """A skill directory under the OpenClaw skills folder."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., description="Directory name")
    name: str = Field(..., description="Name from SKILL.md front matter")
    description: str | None = Field(None, description="Description from SKILL.md front matter")
    path: str = Field(..., description="Absolute path of the skill directory")
