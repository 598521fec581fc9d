"""Configuration models with Pydantic validation."""

from repostats.domain.config.app import AppConfig
from repostats.domain.config.github import GitHubConfig
from repostats.domain.config.ignore import COMMON_IGNORE_RULES, DEFAULT_IGNORE_RULES, IgnoreConfig
from repostats.domain.config.retry import RetryConfig
from repostats.domain.config.stats import StatsConfig

__all__ = [
    "AppConfig",
    "GitHubConfig",
    "IgnoreConfig",
    "StatsConfig",
    "RetryConfig",
    "COMMON_IGNORE_RULES",
    "DEFAULT_IGNORE_RULES",
]
