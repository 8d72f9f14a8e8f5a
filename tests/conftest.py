"""Pytest fixtures for job queue options tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from typing import Any

import pytest

from jobqueue_options.config import Settings, override_settings, reset_settings
from jobqueue_options.core.notifier import WarningNotifier

# ---------------------------------------------------------------------------
# Warning fixtures
# ---------------------------------------------------------------------------


class RecordingSink:
    """Warning sink that keeps every delivered diagnostic."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str | None, str]] = []

    def __call__(self, message: str, warning_type: str | None, code: str) -> None:
        self.calls.append((message, warning_type, code))

    @property
    def codes(self) -> list[str]:
        return [code for _, _, code in self.calls]


@pytest.fixture
def sink() -> RecordingSink:
    """Provide a recording warning sink."""
    return RecordingSink()


@pytest.fixture
def notifier(sink: RecordingSink) -> WarningNotifier:
    """Provide a notifier wired to the recording sink."""
    return WarningNotifier(sink)


# ---------------------------------------------------------------------------
# Option fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def queue_defaults() -> dict[str, Any]:
    """Provide queue-level defaults as a queue manager would pass them."""
    return {
        "archive_seconds": 100,
        "expire_in": 900,
        "keep_until": "14 days",
        "retry_delay": 5,
        "retry_limit": 2,
        "retry_backoff": True,
        "polling_interval": 3000,
    }


# ---------------------------------------------------------------------------
# Settings fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def test_settings() -> Generator[Settings, None, None]:
    """Provide isolated test settings."""
    settings = Settings(default_schema="test_schema", log_level="DEBUG")
    override_settings(settings)
    yield settings
    reset_settings()


# ---------------------------------------------------------------------------
# Logging fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def restore_root_logger() -> Generator[None, None, None]:
    """Restore root logger handlers and level after configure_logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
