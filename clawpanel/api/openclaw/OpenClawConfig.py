"""Read-only model of the OpenClaw JSON configuration (openclaw.json)."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .mask_api_key import mask_api_key


class _Section(BaseModel):
    """Base for config sections: camelCase keys accepted, unknown keys kept."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class ModelConfig(_Section):
    id: str
    name: str = ""
    api: str | None = None
    context_window: int | None = Field(None, alias="contextWindow")
    max_tokens: int | None = Field(None, alias="maxTokens")


class ProviderConfig(_Section):
    base_url: str = Field("", alias="baseUrl")
    api_key: str | None = Field(None, alias="apiKey")
    models: list[ModelConfig] = Field(default_factory=list)


class ModelsConfig(_Section):
    providers: dict[str, ProviderConfig] = Field(default_factory=dict)


class AgentModelConfig(_Section):
    primary: str | None = None


class AgentDefaults(_Section):
    model: AgentModelConfig = Field(default_factory=AgentModelConfig)
    models: dict[str, Any] = Field(default_factory=dict)


class AgentsConfig(_Section):
    defaults: AgentDefaults = Field(default_factory=AgentDefaults)


class GatewayAuthConfig(_Section):
    mode: str | None = None
    token: str | None = None


class GatewayConfig(_Section):
    mode: str | None = None
    auth: GatewayAuthConfig | None = None


class OpenClawConfig(_Section):
    """The parts of openclaw.json the panel reports on."""

    agents: AgentsConfig = Field(default_factory=AgentsConfig)
    models: ModelsConfig = Field(default_factory=ModelsConfig)
    gateway: GatewayConfig = Field(default_factory=GatewayConfig)

    @classmethod
    def load(cls, path: Path) -> "OpenClawConfig":
        """Parse ``path``; a missing file gives an empty configuration.

        Raises:
            ValueError: If the file is not valid JSON or has the wrong shape
        """
        if not path.exists():
            return cls()
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
        if not isinstance(raw, dict):
            raise ValueError(f"{path} must contain a JSON object")
        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            raise ValueError(f"Unexpected structure in {path}: {e.errors()[0].get('msg', e)}") from e

    @property
    def primary_model(self) -> str | None:
        return self.agents.defaults.model.primary

    def ai_overview(self) -> dict[str, Any]:
        """Summarize configured providers and models, with API keys masked."""
        primary = self.primary_model
        providers = []
        available: list[str] = []
        for provider_name in sorted(self.models.providers):
            provider = self.models.providers[provider_name]
            models = []
            for model in provider.models:
                full_id = f"{provider_name}/{model.id}"
                available.append(full_id)
                models.append(
                    {
                        "full_id": full_id,
                        "id": model.id,
                        "name": model.name or model.id,
                        "api_type": model.api,
                        "context_window": model.context_window,
                        "max_tokens": model.max_tokens,
                        "is_primary": full_id == primary,
                    }
                )
            providers.append(
                {
                    "name": provider_name,
                    "base_url": provider.base_url,
                    "api_key_masked": mask_api_key(provider.api_key),
                    "has_api_key": bool(provider.api_key),
                    "models": models,
                }
            )
        return {
            "primary_model": primary,
            "configured_providers": providers,
            "available_models": available,
        }
