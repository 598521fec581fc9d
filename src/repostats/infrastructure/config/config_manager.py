"""Configuration manager for loading and validating .repostats.yml"""

import copy
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from repostats.domain.config import (
    DEFAULT_IGNORE_RULES,
    AppConfig,
    GitHubConfig,
    IgnoreConfig,
    RetryConfig,
    StatsConfig,
)

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".repostats.yml"


class ConfigurationError(Exception):
    """Configuration validation error."""

    pass


class ConfigManager:
    """Manages configuration from .repostats.yml and environment variables

    Loads configuration with validation using Pydantic models. Configuration priority:
    1. Default values (defined in Pydantic models)
    2. .repostats.yml file (searched from current directory)
    3. Environment variables (REPOSTATS_*, GITHUB_API_URL)
    4. CLI arguments (handled by CLI layer)
    """

    DEFAULT_CONFIG = {
        "github": {
            "api_url": "https://api.github.com",
            "branches": ["main", "master"],
            "timeout": 30.0,
        },
        "ignore": {
            "rules": list(DEFAULT_IGNORE_RULES),
        },
        "stats": {
            "mode": "tree",
            "apply_ignore_to_languages": False,
            "sort": "bytes",
        },
        "retry": {
            "max_attempts": 1,
            "backoff_multiplier": 2,
            "initial_delay": 1,
            "jitter": 0.1,
        },
    }

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize config manager

        Args:
            config_path: Path to .repostats.yml (searches from current dir if None)

        Raises:
            ConfigurationError: If configuration validation fails
        """
        if isinstance(config_path, str):
            config_path = Path(config_path)
        self.config_path = config_path or self._find_config_file()
        try:
            self.config: AppConfig = self._load_config()
        except ValidationError as e:
            errors = []
            for error in e.errors():
                field = ".".join(str(x) for x in error["loc"])
                msg = error["msg"]
                errors.append(f"  - {field}: {msg}")
            raise ConfigurationError(
                "Configuration validation failed:\n" + "\n".join(errors)
            ) from e

    def _find_config_file(self) -> Optional[Path]:
        """Find .repostats.yml file starting from current directory

        Returns:
            Path to config file or None if not found
        """
        current = Path.cwd()
        for parent in [current] + list(current.parents):
            config_file = parent / CONFIG_FILE_NAME
            if config_file.exists():
                logger.info(f"Found config file: {config_file}")
                return config_file
        logger.debug(f"No {CONFIG_FILE_NAME} found, using defaults")
        return None

    def _load_config(self) -> AppConfig:
        """Load configuration from file and validate with Pydantic

        Returns:
            Validated AppConfig instance

        Raises:
            ValidationError: If configuration is invalid
            ConfigurationError: If the file is not a mapping
        """
        config_dict = copy.deepcopy(self.DEFAULT_CONFIG)

        if self.config_path and self.config_path.exists():
            try:
                with open(self.config_path, "r", encoding="utf-8") as f:
                    file_config = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                logger.warning(f"Failed to load config from {self.config_path}: {e}")
                logger.info("Using default configuration")
            else:
                if not isinstance(file_config, dict):
                    raise ConfigurationError(
                        f"Configuration in {self.config_path} must be a mapping of sections"
                    )
                config_dict = self._merge_config(config_dict, file_config)
                logger.info(f"Loaded configuration from {self.config_path}")

        config_dict = self._apply_env_overrides(config_dict)

        return AppConfig(**config_dict)

    def _merge_config(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively merge configuration dictionaries

        Lists are replaced, not concatenated.
        """
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_config(result[key], value)
            else:
                result[key] = value
        return result

    def _apply_env_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides"""
        if os.getenv("REPOSTATS_MODE"):
            config["stats"]["mode"] = os.getenv("REPOSTATS_MODE")

        if os.getenv("GITHUB_API_URL"):
            config["github"]["api_url"] = os.getenv("GITHUB_API_URL")

        return config

    def get_github_config(self) -> GitHubConfig:
        return self.config.github

    def get_ignore_config(self) -> IgnoreConfig:
        return self.config.ignore

    def get_ignore_rules(self) -> list:
        """Get default ignore rules

        Returns:
            List of ignore rules
        """
        return self.config.ignore.rules

    def get_stats_config(self) -> StatsConfig:
        return self.config.stats

    def get_retry_config(self) -> RetryConfig:
        return self.config.retry
