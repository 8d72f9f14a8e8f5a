"""Policy limits and fixed defaults (hardcoded, not configurable)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Policy:
    """Process-wide limits shared with the execution engine.

    Attributes:
        max_expiration_hours: Exclusive ceiling for expiration, maintenance
            and state monitoring intervals.
        min_polling_interval_ms: Floor for consumer polling frequency.
    """

    max_expiration_hours: int = 24
    min_polling_interval_ms: int = 500

    @property
    def max_expiration_seconds(self) -> int:
        return self.max_expiration_hours * 60 * 60

    @property
    def min_polling_interval_seconds(self) -> float:
        return self.min_polling_interval_ms / 1000


POLICY = Policy()

DEFAULT_SCHEMA = "jobqueue"
MAX_OBJECT_NAME_LENGTH = 50

ARCHIVE_DEFAULT_SECONDS = 60 * 60 * 12
CRON_MIN_ARCHIVE_SECONDS = 60  # below this, cron processing is disabled
DELETE_AFTER_DEFAULT = "7 days"
MAINTENANCE_INTERVAL_DEFAULT_SECONDS = 120
POLLING_INTERVAL_DEFAULT_MS = 2000

CLOCK_MONITOR_MAX_SECONDS = 600  # 10 minutes
CLOCK_MONITOR_MAX_MINUTES = 10
CRON_INTERVAL_MIN_SECONDS = 1
CRON_INTERVAL_MAX_SECONDS = 45
CRON_MONITOR_DEFAULT_SECONDS = 30
CRON_WORKER_DEFAULT_SECONDS = 5
