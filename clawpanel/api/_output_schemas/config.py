"""Output schemas for config commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ConfigShowOutput(BaseOutputSchema):
    """Output schema for config show command.

    With no section, ``content`` is ``{"sections": [...]}``.
    """
    section: str = Field(..., description="Section name, empty string if none provided (listing all sections)")
    content: dict[str, Any] = Field(..., description="If section is empty: dict with 'sections' key containing list of section names; if section provided: the section config dict")
    config_path: str = Field(..., description="Path to the configuration file")


class ConfigVersionOutput(BaseOutputSchema):
    """Output schema for config version command."""
    version: str = Field(..., description="Package version string")


register_output_schema("config", "show", ConfigShowOutput)
register_output_schema("config", "version", ConfigVersionOutput)
