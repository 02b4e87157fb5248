from pathlib import Path

import pytest
from click.testing import CliRunner

from growthos.cli import cli
from growthos.config import GrowthConfig, get_default_config
from growthos.exceptions import GrowthOSError
from growthos.manifest import CRITICAL_EVENTS


def test_defaults():
    cfg = get_default_config()
    assert cfg.github.user_agent == "GrowthOS-Audit"
    assert cfg.github.api_base == "https://api.github.com"
    assert cfg.scoring.analytics == 30
    assert cfg.scoring.event_cap == 40
    assert cfg.tracking_plan.critical_events == list(CRITICAL_EVENTS)


def test_default_config_is_a_copy():
    cfg = get_default_config()
    cfg.tracking_plan.critical_events.append("custom_event")
    assert "custom_event" not in get_default_config().tracking_plan.critical_events


def test_yaml_roundtrip(tmp_path: Path):
    cfg = get_default_config()
    cfg.posthog.api_key = "phc_test"
    cfg.scoring.vanity_penalty = 5
    path = tmp_path / "growthos.yaml"
    cfg.to_yaml(path)
    assert GrowthConfig.from_yaml(path) == cfg


def test_from_dict_ignores_unknown_keys():
    cfg = GrowthConfig.from_dict({"github": {"timeout": 3.0, "retries": 5}, "extra": {}})
    assert cfg.github.timeout == 3.0
    assert cfg.scoring.payment == 15


def test_empty_yaml(tmp_path: Path):
    path = tmp_path / "growthos.yaml"
    path.write_text("")
    assert GrowthConfig.from_yaml(path) == GrowthConfig()


def test_token_falls_back_to_environment(monkeypatch):
    monkeypatch.setenv("GITHUB_TOKEN", "ghp_env")
    cfg = get_default_config()
    assert cfg.github.resolved_token() == "ghp_env"
    cfg.github.token = "ghp_cfg"
    assert cfg.github.resolved_token() == "ghp_cfg"


@pytest.mark.parametrize("text, section", [
    ("github: 5\n", "github"),
    ("scoring: [1, 2]\n", "scoring"),
    ("- github\n", "config"),
])
def test_non_mapping_sections_are_rejected(tmp_path: Path, text, section):
    path = tmp_path / "growthos.yaml"
    path.write_text(text)
    with pytest.raises(GrowthOSError, match=f"{section} must be a mapping"):
        GrowthConfig.from_yaml(path)


def test_cli_reports_bad_config_section(tmp_path: Path):
    path = tmp_path / "growthos.yaml"
    path.write_text("github: 5\n")
    result = CliRunner().invoke(cli, ["audit", "acme/app", "--config", str(path)])
    assert result.exit_code == 1
    assert "github must be a mapping, got int" in result.output
