"""Configuration system for the job queue options engine."""

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from jobqueue_options.core.errors import InvalidArgumentError
from jobqueue_options.core.names import assert_object_name
from jobqueue_options.core.policy import DEFAULT_SCHEMA


class Settings(BaseSettings):
    """Job Queue Options Configuration."""

    # Storage
    default_schema: str = Field(
        default=DEFAULT_SCHEMA,
        description="Schema used when a connection config omits one",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    log_json: bool = Field(
        default=False,
        description="Emit structured JSON log lines",
    )
    mask_sensitive: bool = Field(
        default=True,
        description="Mask credentials embedded in connection strings",
    )

    # Diagnostics
    warnings_enabled: bool = Field(
        default=True,
        description="Deliver advisory warnings (clock skew, disabled cron, removed options)",
    )

    model_config = {
        "env_prefix": "JOBQUEUE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    @field_validator("default_schema")
    @classmethod
    def check_default_schema(cls, value: str) -> str:
        try:
            assert_object_name(value)
        except InvalidArgumentError as exc:
            raise ValueError(f"default_schema: {exc}") from exc
        return value

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level


# Settings singleton with dependency injection support
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the settings instance (lazy-loaded singleton).

    Returns:
        The Settings instance.

    Example:
        from jobqueue_options.config import get_settings
        settings = get_settings()
        print(settings.default_schema)
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def override_settings(new_settings: Settings) -> None:
    """Override the settings instance (for testing).

    Args:
        new_settings: The new Settings instance to use.
    """
    global _settings
    _settings = new_settings


def reset_settings() -> None:
    """Reset settings to None (forces reload on next get_settings call)."""
    global _settings
    _settings = None


class _SettingsProxy:
    """Proxy object exposing the current settings as a module attribute."""

    def __getattr__(self, name: str) -> Any:
        return getattr(get_settings(), name)

    def __repr__(self) -> str:
        return repr(get_settings())


settings = _SettingsProxy()
