"""Project initialization for ``growthos init``."""

import logging
from pathlib import Path
from typing import Optional, Union

import click

from growthos.config import CONFIG_FILENAME, GrowthConfig, get_default_config
from growthos.exceptions import ProjectExistsError

logger = logging.getLogger(__name__)


def init_project(
    path: Union[str, Path] = ".",
    key: Optional[str] = None,
    skip_setup: bool = False,
    overwrite: bool = False,
) -> Path:
    """Write a ``growthos.yaml`` with PostHog settings and the tracking plan.

    Args:
        path: Project directory to initialize
        key: PostHog API key; prompted for when omitted unless ``skip_setup``
        skip_setup: Never prompt, leave unset values empty
        overwrite: Replace an existing config file

    Returns:
        Path of the written config file

    Raises:
        ProjectExistsError: If the config exists and ``overwrite`` is False
    """
    project_dir = Path(path)
    config_path = project_dir / CONFIG_FILENAME
    if config_path.exists() and not overwrite:
        raise ProjectExistsError(f"{config_path} already exists. Use --overwrite to replace it.")

    cfg: GrowthConfig = get_default_config()
    if key is None and not skip_setup:
        key = click.prompt('PostHog API key', default='', show_default=False, hide_input=True)
    cfg.posthog.api_key = key or ''
    if not cfg.posthog.api_key:
        logger.warning("No PostHog API key set; add one to %s before sending events", config_path)

    project_dir.mkdir(parents=True, exist_ok=True)
    cfg.to_yaml(config_path)
    return config_path
