"""Unit coalescers: collapse unit-suffixed option families into canonical fields.

Every ``apply_*`` function mutates ``config`` in place. For each family:

1. Each unit field present must be a number of at least 1 in its own unit.
2. The largest unit present wins (see ``jobqueue_options.core.units``).
3. Families with a ceiling reject canonical values at or above it.
4. When ``defaults`` is given, the matching queue-level value is copied to a
   ``*_default`` field. It is carried, never merged.

Canonical fields:
    retention        -> keep_until (duration string) / keep_until_default
    expiration       -> expire_in (seconds) / expire_in_default
    deletion         -> delete_after (duration string)
    archive          -> archive_seconds, archive_interval
    archive failed   -> archive_failed_seconds, archive_failed_interval
    retry            -> retry_{delay,limit,backoff}_default
    polling          -> polling_interval (ms)
    maintenance      -> maintenance_interval_seconds
    monitoring       -> monitor_state_interval_seconds,
                        clock_monitor_interval_seconds,
                        cron_monitor_interval_seconds,
                        cron_worker_interval_seconds
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import TYPE_CHECKING, Any

import jobqueue_options.core.policy as limits
from jobqueue_options.core.errors import InvalidArgumentError
from jobqueue_options.core.notifier import CRON_DISABLED
from jobqueue_options.core.policy import POLICY, Policy
from jobqueue_options.core.units import (
    CLOCK_MONITOR_INTERVAL,
    DELETION,
    EXPIRATION,
    MAINTENANCE_INTERVAL,
    MONITOR_STATE_INTERVAL,
    RETENTION,
    Cascade,
    first_present,
    is_integer,
    is_present,
    is_number,
)

if TYPE_CHECKING:
    from jobqueue_options.core.notifier import WarningNotifier

Options = MutableMapping[str, Any]
Defaults = Mapping[str, Any] | None


def _fail(field: str, message: str) -> InvalidArgumentError:
    return InvalidArgumentError(f"configuration assert: {message}", field=field)


def _assert_at_least(config: Options, field: str, minimum: float, message: str) -> None:
    if not is_present(config, field):
        return
    value = config[field]
    if not is_number(value) or value < minimum:
        raise _fail(field, message)


def _assert_between(
    config: Options, field: str, minimum: float, maximum: float, message: str
) -> None:
    if not is_present(config, field):
        return
    value = config[field]
    if not is_number(value) or not minimum <= value <= maximum:
        raise _fail(field, message)


def _assert_units(config: Options, fields: Cascade) -> None:
    for field in fields:
        _assert_at_least(
            config, field.name, 1, f"{field.name} must be at least every {field.singular}"
        )


def _assert_below_expiration_ceiling(
    seconds: int | float, field: str, label: str, policy: Policy
) -> None:
    if seconds >= policy.max_expiration_seconds:
        raise _fail(field, f"{label} cannot exceed {policy.max_expiration_hours} hours")


def _default_of(defaults: Defaults, key: str) -> Any:
    return defaults.get(key) if defaults else None


def apply_retention_config(config: Options, defaults: Defaults = None) -> None:
    _assert_units(config, RETENTION)

    winner = first_present(config, RETENTION)
    config["keep_until"] = winner.as_duration(config[winner.name]) if winner else None
    config["keep_until_default"] = _default_of(defaults, "keep_until")


def apply_expiration_config(
    config: Options, defaults: Defaults = None, policy: Policy = POLICY
) -> None:
    _assert_units(config, EXPIRATION)

    winner = first_present(config, EXPIRATION)
    expire_in = winner.to_seconds(config[winner.name]) if winner else None

    if expire_in:
        _assert_below_expiration_ceiling(expire_in, "expire_in", "expiration", policy)

    config["expire_in"] = expire_in
    config["expire_in_default"] = _default_of(defaults, "expire_in")


def apply_delete_config(config: Options) -> None:
    _assert_units(config, DELETION)

    winner = first_present(config, DELETION)
    config["delete_after"] = (
        winner.as_duration(config[winner.name]) if winner else limits.DELETE_AFTER_DEFAULT
    )


def apply_archive_config(config: Options, notifier: WarningNotifier) -> None:
    _assert_at_least(
        config,
        "archive_completed_after_seconds",
        1,
        "archive_completed_after_seconds must be at least every second",
    )

    archive_seconds = (
        config.get("archive_completed_after_seconds") or limits.ARCHIVE_DEFAULT_SECONDS
    )
    config["archive_seconds"] = archive_seconds
    config["archive_interval"] = f"{archive_seconds} seconds"

    if archive_seconds < limits.CRON_MIN_ARCHIVE_SECONDS:
        notifier.emit(CRON_DISABLED)


def apply_archive_failed_config(config: Options, notifier: WarningNotifier) -> None:
    """Coalesce the failed-job archive interval.

    Must run after ``apply_archive_config``: it falls back to
    ``archive_seconds`` and stays quiet when the archive family has already
    reported disabled cron processing.
    """
    _assert_at_least(
        config,
        "archive_failed_after_seconds",
        1,
        "archive_failed_after_seconds must be at least every second",
    )

    archive_seconds = config.get("archive_seconds", limits.ARCHIVE_DEFAULT_SECONDS)
    failed_seconds = config.get("archive_failed_after_seconds") or archive_seconds
    config["archive_failed_seconds"] = failed_seconds
    config["archive_failed_interval"] = f"{failed_seconds} seconds"

    if (
        failed_seconds < limits.CRON_MIN_ARCHIVE_SECONDS
        and archive_seconds >= limits.CRON_MIN_ARCHIVE_SECONDS
    ):
        notifier.emit(CRON_DISABLED)


def _is_non_negative_int(value: Any) -> bool:
    return is_integer(value) and value >= 0


def apply_retry_config(config: Options, defaults: Defaults = None) -> None:
    if is_present(config, "retry_delay") and not _is_non_negative_int(config["retry_delay"]):
        raise InvalidArgumentError("retry_delay must be an integer >= 0", field="retry_delay")
    if is_present(config, "retry_limit") and not _is_non_negative_int(config["retry_limit"]):
        raise InvalidArgumentError("retry_limit must be an integer >= 0", field="retry_limit")
    if is_present(config, "retry_backoff") and not isinstance(config["retry_backoff"], bool):
        raise InvalidArgumentError(
            "retry_backoff must be either True or False", field="retry_backoff"
        )

    config["retry_delay_default"] = _default_of(defaults, "retry_delay")
    config["retry_limit_default"] = _default_of(defaults, "retry_limit")
    config["retry_backoff_default"] = _default_of(defaults, "retry_backoff")


def apply_polling_interval(
    config: Options, defaults: Defaults = None, policy: Policy = POLICY
) -> None:
    _assert_at_least(
        config,
        "polling_interval_seconds",
        policy.min_polling_interval_seconds,
        f"polling_interval_seconds must be at least every {policy.min_polling_interval_ms}ms",
    )

    if is_present(config, "polling_interval_seconds"):
        config["polling_interval"] = config["polling_interval_seconds"] * 1000
    else:
        config["polling_interval"] = (
            _default_of(defaults, "polling_interval") or limits.POLLING_INTERVAL_DEFAULT_MS
        )


def apply_maintenance_config(config: Options, policy: Policy = POLICY) -> None:
    _assert_units(config, MAINTENANCE_INTERVAL)

    winner = first_present(config, MAINTENANCE_INTERVAL)
    seconds = (
        winner.to_seconds(config[winner.name])
        if winner
        else limits.MAINTENANCE_INTERVAL_DEFAULT_SECONDS
    )
    _assert_below_expiration_ceiling(
        seconds, "maintenance_interval_seconds", "maintenance interval", policy
    )

    config["maintenance_interval_seconds"] = seconds


def apply_monitoring_config(config: Options, policy: Policy = POLICY) -> None:
    _assert_units(config, MONITOR_STATE_INTERVAL)

    winner = first_present(config, MONITOR_STATE_INTERVAL)
    state_seconds = winner.to_seconds(config[winner.name]) if winner else None
    if state_seconds:
        _assert_below_expiration_ceiling(
            state_seconds, "monitor_state_interval_seconds", "state monitoring interval", policy
        )
    config["monitor_state_interval_seconds"] = state_seconds

    _assert_between(
        config,
        "clock_monitor_interval_seconds",
        1,
        limits.CLOCK_MONITOR_MAX_SECONDS,
        "clock_monitor_interval_seconds must be between 1 second and 10 minutes",
    )
    _assert_between(
        config,
        "clock_monitor_interval_minutes",
        1,
        limits.CLOCK_MONITOR_MAX_MINUTES,
        "clock_monitor_interval_minutes must be between 1 and 10",
    )
    winner = first_present(config, CLOCK_MONITOR_INTERVAL)
    config["clock_monitor_interval_seconds"] = (
        winner.to_seconds(config[winner.name]) if winner else limits.CLOCK_MONITOR_MAX_SECONDS
    )

    for field, default in (
        ("cron_monitor_interval_seconds", limits.CRON_MONITOR_DEFAULT_SECONDS),
        ("cron_worker_interval_seconds", limits.CRON_WORKER_DEFAULT_SECONDS),
    ):
        _assert_between(
            config,
            field,
            limits.CRON_INTERVAL_MIN_SECONDS,
            limits.CRON_INTERVAL_MAX_SECONDS,
            f"{field} must be between {limits.CRON_INTERVAL_MIN_SECONDS} "
            f"and {limits.CRON_INTERVAL_MAX_SECONDS} seconds",
        )
        config[field] = config[field] if is_present(config, field) else default
