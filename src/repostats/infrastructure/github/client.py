"""GitHub API client"""

import logging
import os
from typing import Dict, List, Optional, Sequence

import requests

from repostats.domain.errors import FetchFailed
from repostats.domain.models.file_entry import FileEntry
from repostats.infrastructure.http_client import RetryConfig, get_json_with_retries

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com"


class GitHubClient:
    """Client for the GitHub REST API endpoints used for statistics"""

    def __init__(
        self,
        api_url: Optional[str] = None,
        branches: Sequence[str] = ("main", "master"),
        timeout: float = 30.0,
        retry_config: Optional[RetryConfig] = None,
    ):
        """Initialize GitHub client

        Args:
            api_url: API base URL (default: from GITHUB_API_URL env or api.github.com)
            branches: Branch names tried in order when fetching the tree
            timeout: Request timeout in seconds
            retry_config: Retry configuration (default: single attempt)
        """
        self.api_url = (api_url or os.getenv("GITHUB_API_URL", DEFAULT_API_URL)).rstrip("/")
        self.branches = list(branches)
        self.timeout = timeout
        self.retry_config = retry_config or RetryConfig()

        if not self.branches:
            raise ValueError("At least one branch name is required")

        logger.debug(f"GitHub client initialized for {self.api_url}")

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/vnd.github+json",
            "User-Agent": "repostats",
        }

    def _get_json(self, path: str, params: Optional[dict] = None) -> dict:
        """GET an API path and decode its JSON object payload

        Raises:
            requests.HTTPError: On a non-success status
            RuntimeError: On any other request failure
            FetchFailed: If the body is not a JSON object
        """
        response = get_json_with_retries(
            f"{self.api_url}{path}",
            headers=self.headers,
            params=params,
            timeout=self.timeout,
            retry=self.retry_config,
        )
        try:
            data = response.json()
        except ValueError as e:
            raise FetchFailed(f"Invalid JSON in response to {path}") from e
        if not isinstance(data, dict):
            raise FetchFailed(f"Unexpected payload in response to {path}")
        return data

    def _fetch_tree(self, owner: str, repo: str, branch: str) -> List[FileEntry]:
        try:
            data = self._get_json(
                f"/repos/{owner}/{repo}/git/trees/{branch}", params={"recursive": 1}
            )
        except (requests.exceptions.HTTPError, RuntimeError) as e:
            raise FetchFailed(str(e)) from e

        if data.get("truncated"):
            logger.warning(f"Tree of {owner}/{repo}@{branch} is truncated, statistics are partial")
        try:
            return [FileEntry.from_api(item) for item in data.get("tree", [])]
        except (KeyError, TypeError, ValueError) as e:
            raise FetchFailed(f"Malformed tree entry: {e}") from e

    def get_tree(self, owner: str, repo: str) -> List[FileEntry]:
        """Fetch the recursive file tree of a repository

        Each configured branch is tried in order; the first one that
        answers with a well-formed tree wins.

        Args:
            owner: GitHub username or organization
            repo: Repository name

        Returns:
            List of FileEntry objects

        Raises:
            FetchFailed: If no branch could be fetched
        """
        for branch in self.branches:
            logger.info(f"Fetching tree of {owner}/{repo}@{branch}")
            try:
                entries = self._fetch_tree(owner, repo, branch)
            except FetchFailed as e:
                logger.debug(f"Tree fetch for branch {branch} failed: {e}")
                continue

            logger.info(f"Fetched {len(entries)} tree entries")
            return entries

        raise FetchFailed("Failed to fetch repository contents")

    def get_languages(self, owner: str, repo: str) -> Dict[str, int]:
        """Fetch the per-language byte counts of a repository

        Args:
            owner: GitHub username or organization
            repo: Repository name

        Returns:
            Mapping of language name to bytes

        Raises:
            FetchFailed: If the request fails or the payload is malformed
        """
        logger.info(f"Fetching languages of {owner}/{repo}")
        try:
            data = self._get_json(f"/repos/{owner}/{repo}/languages")
            return {language: int(size) for language, size in data.items()}
        except (requests.exceptions.HTTPError, RuntimeError, FetchFailed, TypeError, ValueError) as e:
            logger.debug(f"Languages fetch failed: {e}")
            raise FetchFailed("Failed to fetch repository languages") from e
