"""Tests for configuration validation with Pydantic."""

import pytest
import yaml
from pydantic import ValidationError

from repostats.domain.config import (
    COMMON_IGNORE_RULES,
    DEFAULT_IGNORE_RULES,
    AppConfig,
    GitHubConfig,
    IgnoreConfig,
    RetryConfig,
    StatsConfig,
)
from repostats.infrastructure.config.config_manager import ConfigManager, ConfigurationError


class TestGitHubConfigValidation:
    """Tests for GitHubConfig validation."""

    def test_defaults(self):
        """Test default GitHub configuration"""
        config = GitHubConfig()
        assert config.api_url == "https://api.github.com"
        assert config.branches == ["main", "master"]
        assert config.timeout == 30.0

    def test_empty_branches_rejected(self):
        """Test at least one branch is required"""
        with pytest.raises(ValidationError, match="branches"):
            GitHubConfig(branches=[])

    def test_timeout_zero(self):
        """Test timeout must be positive"""
        with pytest.raises(ValidationError, match="timeout"):
            GitHubConfig(timeout=0)


class TestStatsConfigValidation:
    """Tests for StatsConfig validation."""

    def test_valid_stats_config(self):
        """Test valid stats configuration"""
        config = StatsConfig(mode="languages", apply_ignore_to_languages=True, sort="name")
        assert config.mode == "languages"
        assert config.apply_ignore_to_languages is True

    def test_invalid_mode(self):
        """Test invalid aggregation mode"""
        with pytest.raises(ValidationError, match="mode"):
            StatsConfig(mode="commits")

    def test_invalid_sort(self):
        """Test invalid sort order"""
        with pytest.raises(ValidationError, match="sort"):
            StatsConfig(sort="size")


class TestRetryConfigValidation:
    """Tests for RetryConfig validation."""

    def test_default_is_single_attempt(self):
        """Test no retries happen unless configured"""
        assert RetryConfig().max_attempts == 1

    def test_max_attempts_zero(self):
        """Test max_attempts must be positive"""
        with pytest.raises(ValidationError, match="max_attempts"):
            RetryConfig(max_attempts=0)

    def test_max_attempts_too_high(self):
        """Test max_attempts upper bound"""
        with pytest.raises(ValidationError, match="max_attempts"):
            RetryConfig(max_attempts=11)

    def test_backoff_multiplier_too_low(self):
        """Test backoff_multiplier lower bound"""
        with pytest.raises(ValidationError, match="backoff_multiplier"):
            RetryConfig(backoff_multiplier=0.5)

    def test_jitter_above_one(self):
        """Test jitter upper bound"""
        with pytest.raises(ValidationError, match="jitter"):
            RetryConfig(jitter=1.5)


class TestAppConfigValidation:
    """Tests for AppConfig validation."""

    def test_valid_app_config(self):
        """Test valid application configuration"""
        config = AppConfig()
        assert config.stats.mode == "tree"
        assert config.ignore.rules == DEFAULT_IGNORE_RULES

    def test_unknown_field_rejected(self):
        """Test unknown fields are rejected"""
        with pytest.raises(ValidationError, match="extra"):
            AppConfig(unknown_field="value")

    def test_nested_validation(self):
        """Test nested validation works"""
        with pytest.raises(ValidationError, match="mode"):
            AppConfig(stats={"mode": "bogus"})


class TestConfigManagerValidation:
    """Tests for ConfigManager validation."""

    @pytest.fixture(autouse=True)
    def _isolated_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("REPOSTATS_MODE", raising=False)
        monkeypatch.delenv("GITHUB_API_URL", raising=False)

    def test_load_valid_config_from_file(self, tmp_path):
        """Test loading valid configuration from file"""
        config_path = tmp_path / "custom.yml"
        config_path.write_text(
            yaml.dump({"stats": {"mode": "languages"}, "ignore": {"rules": [".md"]}}),
            encoding="utf-8",
        )

        manager = ConfigManager(config_path=config_path)
        assert manager.config.stats.mode == "languages"
        assert manager.get_ignore_rules() == [".md"]
        # Untouched sections keep their defaults
        assert manager.config.github.branches == ["main", "master"]

    def test_config_found_in_parent_directory(self, tmp_path, monkeypatch):
        """Test .repostats.yml is searched upwards from the working directory"""
        (tmp_path / ".repostats.yml").write_text(
            yaml.dump({"stats": {"sort": "name"}}), encoding="utf-8"
        )
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)

        manager = ConfigManager()
        assert manager.config_path == tmp_path / ".repostats.yml"
        assert manager.get_stats_config().sort == "name"

    def test_load_invalid_config_raises_error(self, tmp_path):
        """Test loading invalid configuration raises error"""
        config_path = tmp_path / "bad.yml"
        config_path.write_text(yaml.dump({"retry": {"max_attempts": 0}}), encoding="utf-8")

        with pytest.raises(ConfigurationError, match="max_attempts"):
            ConfigManager(config_path=config_path)

    def test_unreadable_yaml_falls_back_to_defaults(self, tmp_path):
        """Test malformed YAML is reported and defaults are used"""
        config_path = tmp_path / "broken.yml"
        config_path.write_text("stats: [unclosed", encoding="utf-8")

        manager = ConfigManager(config_path=config_path)
        assert manager.config.stats.mode == "tree"

    def test_default_config_is_valid(self):
        """Test default configuration is valid"""
        manager = ConfigManager()
        assert manager.config_path is None
        assert isinstance(manager.config, AppConfig)

    def test_get_typed_config_sections(self):
        """Test getter methods return typed models"""
        manager = ConfigManager()

        assert isinstance(manager.get_github_config(), GitHubConfig)
        assert isinstance(manager.get_ignore_config(), IgnoreConfig)
        assert isinstance(manager.get_stats_config(), StatsConfig)
        assert isinstance(manager.get_retry_config(), RetryConfig)

    def test_env_overrides_work(self, monkeypatch):
        """Test environment variable overrides"""
        monkeypatch.setenv("REPOSTATS_MODE", "languages")
        monkeypatch.setenv("GITHUB_API_URL", "https://github.example.com/api/v3")

        manager = ConfigManager()
        assert manager.config.stats.mode == "languages"
        assert manager.config.github.api_url == "https://github.example.com/api/v3"


class TestIgnoreConfig:
    """Tests for IgnoreConfig."""

    def test_default_rules(self):
        """Test default ignore rules are set"""
        config = IgnoreConfig()
        assert "node_modules" in config.rules
        assert "package-lock.json" in config.rules

    def test_default_rules_not_shared(self):
        """Test each config gets its own rule list"""
        first = IgnoreConfig()
        first.rules.append(".md")
        assert ".md" not in IgnoreConfig().rules

    def test_common_catalog_covers_defaults_except_node_modules_form(self):
        """Test the toggle catalog offers the default rules"""
        for rule in ("package-lock.json", ".git", "build", "dist"):
            assert rule in COMMON_IGNORE_RULES
        assert "/node_modules" in COMMON_IGNORE_RULES


class TestConfigFileShape:
    """Tests for config files that are not a mapping"""

    @pytest.mark.parametrize("content", ["- stats\n- ignore\n", "just a string\n"])
    def test_non_mapping_raises(self, tmp_path, content):
        config_path = tmp_path / "odd.yml"
        config_path.write_text(content, encoding="utf-8")

        with pytest.raises(ConfigurationError, match="must be a mapping"):
            ConfigManager(config_path=config_path)
