"""Tests for configuration system."""

import pytest

from jobqueue_options.config import (
    Settings,
    get_settings,
    override_settings,
    reset_settings,
    settings,
)


class TestSettings:
    """Tests for Settings class."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        settings = Settings()
        assert settings.default_schema == "jobqueue"
        assert settings.log_level == "INFO"
        assert settings.log_json is False
        assert settings.mask_sensitive is True
        assert settings.warnings_enabled is True

    def test_custom_values(self) -> None:
        """Test custom configuration values."""
        settings = Settings(default_schema="billing", log_level="debug", warnings_enabled=False)
        assert settings.default_schema == "billing"
        assert settings.log_level == "DEBUG"
        assert settings.warnings_enabled is False

    def test_invalid_default_schema(self) -> None:
        """Default schema must be a valid object name."""
        with pytest.raises(ValueError):
            Settings(default_schema="my schema")

        with pytest.raises(ValueError):
            Settings(default_schema="1jobs")

    def test_invalid_log_level(self) -> None:
        """Unknown log levels are rejected."""
        with pytest.raises(ValueError):
            Settings(log_level="LOUD")

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Settings are read from JOBQUEUE_ environment variables."""
        monkeypatch.setenv("JOBQUEUE_DEFAULT_SCHEMA", "from_env")
        monkeypatch.setenv("JOBQUEUE_WARNINGS_ENABLED", "false")
        settings = Settings()
        assert settings.default_schema == "from_env"
        assert settings.warnings_enabled is False


class TestSettingsInjection:
    """Tests for settings dependency injection."""

    def test_get_settings_returns_singleton(self) -> None:
        """Test that get_settings returns same instance."""
        reset_settings()
        s1 = get_settings()
        s2 = get_settings()
        assert s1 is s2

    def test_override_settings(self) -> None:
        """Test settings override for testing."""
        reset_settings()
        original = get_settings()

        custom = Settings(default_schema="override")
        override_settings(custom)

        current = get_settings()
        assert current.default_schema == "override"
        assert current is custom
        assert current is not original

        reset_settings()

    def test_reset_settings(self) -> None:
        """Test settings reset."""
        reset_settings()
        s1 = get_settings()

        reset_settings()
        s2 = get_settings()

        assert s1 is not s2

    def test_proxy_reads_current_settings(self, test_settings: Settings) -> None:
        """The module-level proxy reflects the active settings."""
        assert settings.default_schema == "test_schema"
