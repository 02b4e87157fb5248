import pytest

from growthos.config import GrowthConfig
from growthos.exceptions import ProjectExistsError
from growthos.manifest import CRITICAL_EVENTS
from growthos.project import init_project


def test_init_writes_loadable_config(tmp_path):
    path = init_project(tmp_path, key="phc_123")
    assert path == tmp_path / "growthos.yaml"
    cfg = GrowthConfig.from_yaml(path)
    assert cfg.posthog.api_key == "phc_123"
    assert cfg.tracking_plan.critical_events == list(CRITICAL_EVENTS)


def test_init_creates_missing_directory(tmp_path):
    path = init_project(tmp_path / "app", key="phc_123")
    assert path.exists()


def test_skip_setup_leaves_key_empty(tmp_path):
    path = init_project(tmp_path, skip_setup=True)
    assert GrowthConfig.from_yaml(path).posthog.api_key == ""


def test_refuses_to_overwrite(tmp_path):
    init_project(tmp_path, key="first")
    with pytest.raises(ProjectExistsError, match="--overwrite"):
        init_project(tmp_path, key="second")
    init_project(tmp_path, key="second", overwrite=True)
    assert GrowthConfig.from_yaml(tmp_path / "growthos.yaml").posthog.api_key == "second"
