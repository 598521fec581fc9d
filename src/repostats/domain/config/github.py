"""GitHub configuration model."""

from typing import List

from pydantic import BaseModel, Field


class GitHubConfig(BaseModel):
    """Configuration for GitHub API access.

    Attributes:
        api_url: GitHub REST API base URL
        branches: Branch names tried in order when fetching the tree
        timeout: Request timeout in seconds
    """

    api_url: str = "https://api.github.com"
    branches: List[str] = Field(default_factory=lambda: ["main", "master"], min_length=1)
    timeout: float = Field(30.0, gt=0.0)
