"""Output schemas for skills commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class SkillsListOutput(BaseOutputSchema):
    """Output schema for skills list command."""
    skills_dir: str = Field(..., description="Directory that was scanned")
    skills: list[dict[str, Any]] = Field(..., description="Skills found (id, name, description, path)")
    count: int = Field(..., description="Number of skills found")


class SkillsInstallOutput(BaseOutputSchema):
    """Output schema for skills install command."""
    name: str = Field(..., description="Skill name passed to clawhub")
    installed: bool = Field(..., description="Whether clawhub reported success")
    stdout: str = Field(..., description="Installer output, empty string if none")


class SkillsUninstallOutput(BaseOutputSchema):
    """Output schema for skills uninstall command."""
    skill_id: str = Field(..., description="Skill directory name")
    path: str = Field(..., description="Directory that was (or would have been) removed")
    removed: bool = Field(..., description="Whether the directory was removed")


class SkillsClawhubStatusOutput(BaseOutputSchema):
    """Output schema for clawhub status command."""
    installed: bool = Field(..., description="Whether clawhub is available")
    method: str = Field(..., description="How it was detected: 'command', 'npm', or empty string")


class SkillsClawhubInstallOutput(BaseOutputSchema):
    """Output schema for clawhub install command."""
    installed: bool = Field(..., description="Whether npm reported success")
    message: str = Field(..., description="Human readable outcome")


class SkillsClawhubUninstallOutput(BaseOutputSchema):
    """Output schema for clawhub uninstall command."""
    uninstalled: bool = Field(..., description="Whether npm reported success")
    message: str = Field(..., description="Human readable outcome")


register_output_schema("skills", "list", SkillsListOutput)
register_output_schema("skills", "install", SkillsInstallOutput)
register_output_schema("skills", "uninstall", SkillsUninstallOutput)
register_output_schema("skills", "clawhub_status", SkillsClawhubStatusOutput)
register_output_schema("skills", "clawhub_install", SkillsClawhubInstallOutput)
register_output_schema("skills", "clawhub_uninstall", SkillsClawhubUninstallOutput)
