"""Output schemas for openclaw commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class OpenclawConfigOutput(BaseOutputSchema):
    """Output schema for openclaw config command.

    API keys are never included in clear text.
    """
    config_path: str = Field(..., description="Path to openclaw.json")
    exists: bool = Field(..., description="Whether the file exists")
    primary_model: str | None = Field(..., description="Primary model as provider/model-id, null if unset")
    configured_providers: list[dict[str, Any]] = Field(..., description="Providers with masked API keys")
    available_models: list[str] = Field(..., description="Full model ids across all providers")


register_output_schema("openclaw", "config", OpenclawConfigOutput)
