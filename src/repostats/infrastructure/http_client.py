"""Shared HTTP client utilities (requests + retry/backoff).

We keep HTTP logic centralized so every API call shares one retry policy.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from repostats.infrastructure.retry import create_retry_decorator, should_retry_request

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RetryConfig:
    max_attempts: int = 1
    initial_delay: float = 1.0
    backoff_multiplier: float = 2.0
    jitter: float = 0.1  # +/-10% by default


def retry_config_from_dict(config: Dict[str, Any]) -> RetryConfig:
    """Parse retry config from dict, clamping values to sane ranges."""
    defaults = RetryConfig()

    try:
        max_attempts = int(config.get("max_attempts", defaults.max_attempts))
    except (TypeError, ValueError):
        max_attempts = defaults.max_attempts

    try:
        initial_delay = float(config.get("initial_delay", defaults.initial_delay))
    except (TypeError, ValueError):
        initial_delay = defaults.initial_delay

    try:
        backoff_multiplier = float(config.get("backoff_multiplier", defaults.backoff_multiplier))
    except (TypeError, ValueError):
        backoff_multiplier = defaults.backoff_multiplier

    try:
        jitter = float(config.get("jitter", defaults.jitter))
    except (TypeError, ValueError):
        jitter = defaults.jitter

    return RetryConfig(
        max_attempts=max(max_attempts, 1),
        initial_delay=max(initial_delay, 0.0),
        backoff_multiplier=max(backoff_multiplier, 1.0),
        jitter=max(jitter, 0.0),
    )


def get_json_with_retries(
    url: str,
    *,
    headers: Dict[str, str],
    timeout: float,
    retry: RetryConfig,
    params: Optional[Dict[str, Any]] = None,
) -> requests.Response:
    """GET with retry on network errors, 429 and 5xx.

    Raises:
        requests.HTTPError: On a non-success status once retries are exhausted
        RuntimeError: On any other request failure
    """

    def _make_request() -> requests.Response:
        logger.debug(f"HTTP GET {url}")
        resp = requests.get(url, headers=headers, params=params, timeout=timeout)
        resp.raise_for_status()
        return resp

    request_with_retry = create_retry_decorator(retry, should_retry_request)(_make_request)

    try:
        return request_with_retry()
    except requests.exceptions.HTTPError:
        raise
    except Exception as e:
        raise RuntimeError(f"HTTP request failed: {e}") from e
