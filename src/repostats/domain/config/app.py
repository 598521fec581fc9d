"""Main application configuration model."""

from pydantic import BaseModel, ConfigDict, Field

from repostats.domain.config.github import GitHubConfig
from repostats.domain.config.ignore import IgnoreConfig
from repostats.domain.config.retry import RetryConfig
from repostats.domain.config.stats import StatsConfig


class AppConfig(BaseModel):
    """Main application configuration.

    This is the root configuration model that aggregates all configuration sections.
    Validation is performed at load time to fail fast on configuration errors.

    Attributes:
        github: GitHub API configuration
        ignore: Path filtering configuration
        stats: Aggregation and display configuration
        retry: Retry logic configuration
    """

    github: GitHubConfig = Field(default_factory=GitHubConfig)
    ignore: IgnoreConfig = Field(default_factory=IgnoreConfig)
    stats: StatsConfig = Field(default_factory=StatsConfig)
    retry: RetryConfig = Field(default_factory=RetryConfig)

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
        json_schema_extra={
            "example": {
                "github": {
                    "api_url": "https://api.github.com",
                    "branches": ["main", "master"],
                    "timeout": 30,
                },
                "ignore": {
                    "rules": ["node_modules", "/build", ".md"],
                },
                "stats": {
                    "mode": "tree",
                    "apply_ignore_to_languages": False,
                    "sort": "bytes",
                },
                "retry": {
                    "max_attempts": 1,
                    "initial_delay": 1.0,
                    "backoff_multiplier": 2.0,
                    "jitter": 0.1,
                },
            }
        },
    )
