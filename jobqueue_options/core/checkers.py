"""Argument checkers for the job queue client's public entry points.

Each checker validates call shape, runs the relevant unit coalescers and
returns normalized options, or raises ``InvalidArgumentError`` at the first
violated contract. Checkers are reentrant and keep no state between calls;
the only side effect is warning delivery through the supplied notifier.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping, Sequence
from datetime import date, datetime
from typing import TYPE_CHECKING, Any

from jobqueue_options.core.coalescers import (
    apply_archive_config,
    apply_archive_failed_config,
    apply_delete_config,
    apply_expiration_config,
    apply_maintenance_config,
    apply_monitoring_config,
    apply_polling_interval,
    apply_retention_config,
    apply_retry_config,
)
from jobqueue_options.core.errors import InvalidArgumentError
from jobqueue_options.core.models import (
    MISSING_QUEUE_NAME,
    SendArgs,
    WorkArgs,
    classify_send_call,
)
from jobqueue_options.core.names import assert_object_name, assert_queue_name
from jobqueue_options.core.notifier import ON_COMPLETE_REMOVED
from jobqueue_options.core.policy import DEFAULT_SCHEMA
from jobqueue_options.core.units import (
    SINGLETON,
    first_positive,
    is_integer,
    is_number,
    is_present,
)
from jobqueue_options.core.utils import to_iso_utc

if TYPE_CHECKING:
    from jobqueue_options.core.notifier import WarningNotifier

logger = logging.getLogger(__name__)

_RUNTIME_FLAGS = ("schedule", "supervise", "migrate")


def get_config(
    value: str | Mapping[str, Any],
    notifier: WarningNotifier,
    *,
    default_schema: str = DEFAULT_SCHEMA,
) -> dict[str, Any]:
    """Normalize a connection string or config mapping into runtime config.

    Args:
        value: Connection string, or a mapping of connection and runtime options.
        notifier: Receives the cron-disabled warning for sub-minute archiving.
        default_schema: Schema used when the caller omits one.

    Returns:
        A new dict; the caller's mapping is never mutated.

    Raises:
        InvalidArgumentError: If any option violates its contract.
    """
    if not value or not isinstance(value, (str, Mapping)):
        raise InvalidArgumentError(
            "configuration assert: string or config object is required to connect to postgres"
        )

    config: dict[str, Any] = (
        {"connection_string": value} if isinstance(value, str) else dict(value)
    )

    for flag in _RUNTIME_FLAGS:
        config[flag] = config[flag] if is_present(config, flag) else True

    _apply_schema_config(config, default_schema)
    apply_maintenance_config(config)
    apply_archive_config(config, notifier)
    apply_archive_failed_config(config, notifier)
    apply_delete_config(config)
    apply_monitoring_config(config)

    apply_polling_interval(config)
    apply_expiration_config(config)
    apply_retention_config(config)

    logger.debug(
        "Normalized runtime config: schema=%s archive=%ss maintenance=%ss polling=%sms",
        config["schema"],
        config["archive_seconds"],
        config["maintenance_interval_seconds"],
        config["polling_interval"],
    )
    return config


def _apply_schema_config(config: MutableMapping[str, Any], default_schema: str) -> None:
    if config.get("schema"):
        assert_object_name(config["schema"])

    config["schema"] = config.get("schema") or default_schema


def _assert_dead_letter(options: Mapping[str, Any]) -> None:
    if is_present(options, "dead_letter") and not isinstance(options["dead_letter"], str):
        raise InvalidArgumentError("dead_letter must be a string", field="dead_letter")


def check_queue_args(name: Any, options: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Validate queue definition options.

    Returns:
        A normalized copy of ``options``.
    """
    assert_queue_name(name)

    options = dict(options or {})

    _assert_dead_letter(options)

    apply_retry_config(options)
    apply_expiration_config(options)
    apply_retention_config(options)

    return options


def check_send_args(
    args: Sequence[Any],
    defaults: Mapping[str, Any] | None,
    notifier: WarningNotifier,
) -> SendArgs:
    """Validate a send call in either positional or object form.

    Args:
        args: ``(name, data, options)`` or ``({"name", "data", "options"},)``.
        defaults: Queue-level defaults; carried as ``*_default`` fields and
            used to bound singleton throttling by ``archive_seconds``.
        notifier: Receives the removed-option warning.

    Returns:
        SendArgs with a normalized copy of the options.
    """
    call = classify_send_call(args)
    name, data, options = call.name, call.data, call.options

    if callable(data):
        raise InvalidArgumentError(
            "send() cannot accept a function as the payload. Did you intend to use work()?",
            field="data",
        )

    if not name:
        raise InvalidArgumentError(MISSING_QUEUE_NAME, field="name")

    options = options or {}
    if not isinstance(options, Mapping):
        raise InvalidArgumentError("options should be a mapping", field="options")
    options = dict(options)

    if is_present(options, "priority") and not is_integer(options["priority"]):
        raise InvalidArgumentError("priority must be an integer", field="priority")
    options["priority"] = options.get("priority") or 0

    _assert_dead_letter(options)

    apply_retry_config(options, defaults)
    apply_expiration_config(options, defaults)
    apply_retention_config(options, defaults)

    options["start_after"] = _normalize_start_after(options.get("start_after"))

    winner = first_positive(options, SINGLETON)
    singleton_seconds = winner.to_seconds(options[winner.name]) if winner else None
    options["singleton_seconds"] = singleton_seconds

    archive_seconds = defaults.get("archive_seconds") if defaults else None
    if singleton_seconds and archive_seconds is not None and singleton_seconds > archive_seconds:
        raise InvalidArgumentError(
            f"throttling interval {singleton_seconds}s cannot exceed "
            f"archive interval {archive_seconds}s",
            field="singleton_seconds",
        )

    if options.get("on_complete"):
        notifier.emit(ON_COMPLETE_REMOVED)

    return SendArgs(name=name, data=data, options=options)


def _normalize_start_after(start_after: Any) -> str | None:
    """Convert ``start_after`` to a string the database can cast, or None."""
    if isinstance(start_after, datetime):
        return to_iso_utc(start_after)
    if isinstance(start_after, date):
        return start_after.isoformat()
    if is_number(start_after) and start_after > 0:
        return str(start_after)
    if isinstance(start_after, str):
        return start_after
    return None


def _assert_fetch_options(options: Mapping[str, Any]) -> None:
    batch_size = options.get("batch_size")
    if is_present(options, "batch_size") and not (is_integer(batch_size) and batch_size >= 1):
        raise InvalidArgumentError("batch_size must be an integer > 0", field="batch_size")

    for flag in ("include_metadata", "priority"):
        if is_present(options, flag) and not isinstance(options[flag], bool):
            raise InvalidArgumentError(f"{flag} must be a boolean", field=flag)


def check_work_args(
    name: Any,
    args: Sequence[Any],
    defaults: Mapping[str, Any] | None = None,
) -> WorkArgs:
    """Validate a work call: ``(callback,)`` or ``(options, callback)``.

    ``priority`` here is a boolean toggle for priority ordering, unlike the
    integer job priority accepted by send.
    """
    if not name:
        raise InvalidArgumentError("missing job name", field="name")

    options: Any = None
    callback: Any = None

    if len(args) == 1:
        callback = args[0]
        options = {}
    elif len(args) > 1:
        options = args[0] or {}
        callback = args[1]

    if not callable(callback):
        raise InvalidArgumentError("expected callback to be a function", field="callback")
    if not isinstance(options, Mapping):
        raise InvalidArgumentError("expected config to be a mapping", field="options")

    options = dict(options)

    apply_polling_interval(options, defaults)
    _assert_fetch_options(options)

    options["batch_size"] = options.get("batch_size") or 1

    return WorkArgs(options=options, callback=callback)


def check_fetch_args(name: Any, options: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
    """Validate fetch options, mutating ``options`` in place.

    Returns:
        The same ``options`` object, for convenience.
    """
    if not name:
        raise InvalidArgumentError("missing queue name", field="name")
    if not isinstance(options, MutableMapping):
        raise InvalidArgumentError("expected fetch options to be a mapping", field="options")

    _assert_fetch_options(options)

    if is_present(options, "ignore_start_after") and not isinstance(
        options["ignore_start_after"], bool
    ):
        raise InvalidArgumentError(
            "ignore_start_after must be a boolean", field="ignore_start_after"
        )

    options["batch_size"] = options.get("batch_size") or 1

    return options
