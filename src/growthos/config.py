"""Configuration management for growthos."""

import copy
import dataclasses
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Union

import yaml

from growthos.exceptions import GrowthOSError
from growthos.manifest import CRITICAL_EVENTS, VANITY_METRICS

CONFIG_FILENAME = "growthos.yaml"


@dataclass
class GitHubConfig:
    """Configuration for the GitHub API client."""
    api_base: str = "https://api.github.com"
    user_agent: str = "GrowthOS-Audit"
    token: str = ""  # falls back to $GITHUB_TOKEN
    timeout: float = 10.0

    def resolved_token(self) -> str:
        """Return the configured token, or the one from the environment."""
        return self.token or os.environ.get("GITHUB_TOKEN", "")


@dataclass
class ScoringWeights:
    """Points awarded or deducted by each growth check."""
    analytics: int = 30
    per_event_pattern: int = 10
    event_cap: int = 40
    payment: int = 15
    auth: int = 15
    vanity_penalty: int = 10


@dataclass
class PostHogConfig:
    """PostHog project settings written by ``growthos init``."""
    api_key: str = ""
    host: str = "https://app.posthog.com"


@dataclass
class TrackingPlan:
    """Events a project should instrument, and the ones it should drop."""
    critical_events: List[str] = field(default_factory=lambda: list(CRITICAL_EVENTS))
    vanity_metrics: List[str] = field(default_factory=lambda: list(VANITY_METRICS))


@dataclass
class GrowthConfig:
    """Top-level growthos configuration."""
    github: GitHubConfig = field(default_factory=GitHubConfig)
    scoring: ScoringWeights = field(default_factory=ScoringWeights)
    posthog: PostHogConfig = field(default_factory=PostHogConfig)
    tracking_plan: TrackingPlan = field(default_factory=TrackingPlan)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> 'GrowthConfig':
        """Load configuration from a YAML file."""
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: dict) -> 'GrowthConfig':
        """Create a GrowthConfig from a dictionary, ignoring unknown keys."""
        if not isinstance(data, dict):
            raise GrowthOSError(f"config must be a mapping, got {type(data).__name__}")
        def create_instance(klass, key):
            d = data.get(key)
            if d is None:
                return klass()
            if not isinstance(d, dict):
                raise GrowthOSError(f"{key} must be a mapping, got {type(d).__name__}")
            fields = {f.name for f in dataclasses.fields(klass) if f.init}
            filtered = {k: v for k, v in d.items() if k in fields}
            return klass(**filtered)

        return cls(
            github=create_instance(GitHubConfig, 'github'),
            scoring=create_instance(ScoringWeights, 'scoring'),
            posthog=create_instance(PostHogConfig, 'posthog'),
            tracking_plan=create_instance(TrackingPlan, 'tracking_plan'),
        )

    def to_dict(self) -> dict:
        """Convert the configuration to a dictionary."""
        return dataclasses.asdict(self)

    def to_yaml(self, path: Union[str, Path]) -> None:
        """Save the configuration to a YAML file."""
        with open(path, 'w') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)


# Default configuration
default_config = GrowthConfig()


def get_default_config() -> GrowthConfig:
    """Get a deep copy of the default configuration."""
    return copy.deepcopy(default_config)
