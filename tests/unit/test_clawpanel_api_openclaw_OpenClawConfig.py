"""Unit tests for clawpanel.api.openclaw.OpenClawConfig and mask_api_key."""

import json

import pytest

from clawpanel.api.openclaw import cmd_config
from clawpanel.api.openclaw.mask_api_key import mask_api_key
from clawpanel.api.openclaw.OpenClawConfig import OpenClawConfig
from clawpanel.api.validate_output import validate_output
from tests.unit.conftest import run_cmd, write_panel_config

SAMPLE = {
    "agents": {"defaults": {"model": {"primary": "anthropic/claude-sonnet"}}},
    "models": {
        "providers": {
            "openai": {
                "baseUrl": "https://api.openai.com/v1",
                "apiKey": "sk-1234567890abcdef",
                "models": [{"id": "gpt-4o", "name": "GPT-4o", "api": "openai-completions"}],
            },
            "anthropic": {
                "baseUrl": "https://api.anthropic.com",
                "models": [
                    {"id": "claude-sonnet", "name": "Claude Sonnet", "contextWindow": 200000, "maxTokens": 8192}
                ],
            },
        }
    },
    "gateway": {"mode": "local", "auth": {"mode": "token", "token": "secret"}},
    "channels": {"telegram": {"enabled": True}},
}


@pytest.mark.parametrize(
    ("key", "expected"),
    [
        ("sk-1234567890abcdef", "sk-1...cdef"),
        ("12345678", "********"),
        ("abc", "***"),
        ("", None),
        (None, None),
    ],
)
def test_mask_api_key(key, expected):
    assert mask_api_key(key) == expected


def test_load_missing_file(tmp_path):
    config = OpenClawConfig.load(tmp_path / "openclaw.json")
    assert config.primary_model is None
    assert config.ai_overview()["configured_providers"] == []


def test_load_invalid_json(tmp_path):
    path = tmp_path / "openclaw.json"
    path.write_text("{oops", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid JSON"):
        OpenClawConfig.load(path)


def test_load_wrong_shape(tmp_path):
    path = tmp_path / "openclaw.json"
    path.write_text(json.dumps({"models": {"providers": {"x": {"models": "nope"}}}}), encoding="utf-8")
    with pytest.raises(ValueError, match="Unexpected structure"):
        OpenClawConfig.load(path)


def test_overview(tmp_path):
    path = tmp_path / "openclaw.json"
    path.write_text(json.dumps(SAMPLE), encoding="utf-8")
    overview = OpenClawConfig.load(path).ai_overview()

    assert overview["primary_model"] == "anthropic/claude-sonnet"
    assert [p["name"] for p in overview["configured_providers"]] == ["anthropic", "openai"]
    assert overview["available_models"] == ["anthropic/claude-sonnet", "openai/gpt-4o"]

    anthropic, openai = overview["configured_providers"]
    assert anthropic["has_api_key"] is False
    assert anthropic["api_key_masked"] is None
    assert anthropic["models"][0]["is_primary"] is True
    assert anthropic["models"][0]["context_window"] == 200000
    assert openai["api_key_masked"] == "sk-1...cdef"
    assert openai["models"][0]["is_primary"] is False
    assert "sk-1234567890abcdef" not in json.dumps(overview)


def test_cmd_config(openclaw_home):
    (openclaw_home / "openclaw.json").write_text(json.dumps(SAMPLE), encoding="utf-8")
    result = run_cmd(cmd_config.cmd_config)
    assert result.success is True
    assert result.output["exists"] is True
    assert result.output["primary_model"] == "anthropic/claude-sonnet"
    assert result.result == "Found 2 configured provider(s)"
    validate_output(cmd_config.cmd_config, result.output)


def test_cmd_config_missing_file_warns():
    result = run_cmd(cmd_config.cmd_config)
    assert result.success is True
    assert result.output["exists"] is False
    assert result.output["warnings"]


def test_cmd_config_custom_home(clawpanel_home, tmp_path):
    custom = tmp_path / "elsewhere"
    custom.mkdir()
    (custom / "oc.json").write_text(json.dumps(SAMPLE), encoding="utf-8")
    write_panel_config(clawpanel_home, {"openclaw": {"home": str(custom), "config_file": "oc.json"}})
    result = run_cmd(cmd_config.cmd_config)
    assert result.output["config_path"] == str(custom / "oc.json")
    assert result.output["exists"] is True


def test_cmd_config_invalid(openclaw_home):
    (openclaw_home / "openclaw.json").write_text("[]", encoding="utf-8")
    result = run_cmd(cmd_config.cmd_config)
    assert result.success is False
    assert "JSON object" in result.output["errors"][0]
    validate_output(cmd_config.cmd_config, result.output)
