"""Unit tests for secure logging."""

from __future__ import annotations

import json
import logging

import pytest

from jobqueue_options.core.logging import (
    JSONFormatter,
    SecureFormatter,
    configure_logging,
    mask_secrets,
)


def make_record(message: str, **extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="jobqueue_options.test",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestMaskSecrets:
    """Tests for mask_secrets()."""

    def test_connection_string_password(self) -> None:
        masked = mask_secrets("connecting to postgres://app:s3cret@db:5432/jobs")
        assert "s3cret" not in masked
        assert "postgres://app:***MASKED***@db:5432/jobs" in masked

    def test_password_pair(self) -> None:
        masked = mask_secrets("host=db password=hunter2 user=app")
        assert "hunter2" not in masked
        assert "user=app" in masked

    def test_url_without_credentials_untouched(self) -> None:
        assert mask_secrets("postgres://db:5432/jobs") == "postgres://db:5432/jobs"


class TestFormatters:
    """Tests for SecureFormatter and JSONFormatter."""

    def test_secure_formatter_masks(self) -> None:
        formatter = SecureFormatter(fmt="%(message)s")
        output = formatter.format(make_record("url=postgres://u:pw@h/db"))
        assert output == "url=postgres://u:***MASKED***@h/db"

    def test_json_formatter_includes_warning_code(self) -> None:
        output = JSONFormatter().format(make_record("cron off", warning_code="jobqueue-w03"))
        data = json.loads(output)
        assert data["message"] == "cron off"
        assert data["level"] == "WARNING"
        assert data["warning_code"] == "jobqueue-w03"

    def test_json_formatter_without_code(self) -> None:
        data = json.loads(JSONFormatter().format(make_record("plain")))
        assert "warning_code" not in data


class TestConfigureLogging:
    """Tests for configure_logging()."""

    @pytest.mark.parametrize(
        ("json_format", "mask", "formatter_type"),
        [
            (True, True, JSONFormatter),
            (False, True, SecureFormatter),
            (False, False, logging.Formatter),
        ],
    )
    def test_installs_single_handler(
        self,
        restore_root_logger: None,
        json_format: bool,
        mask: bool,
        formatter_type: type,
    ) -> None:
        configure_logging(level="DEBUG", json_format=json_format, mask_sensitive=mask)

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert type(root.handlers[0].formatter) is formatter_type
