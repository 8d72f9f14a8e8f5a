"""Argument service: the runtime-owned entry point for option validation.

A queue manager constructs one ``ArgumentService`` per instance. The service
owns the warning notifier, so "warn at most once" is scoped to that
instance rather than to the process.

Usage:
    from jobqueue_options.services.arguments import (
        ArgumentService,
        configure_from_settings,
    )

    configure_from_settings()
    arguments = ArgumentService()
    config = arguments.get_config("postgres://localhost/app")
    job = arguments.check_send_args(("emails", {"to": "a@b.c"}), config)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping, Sequence
from typing import TYPE_CHECKING, Any

from jobqueue_options.config import Settings, get_settings
from jobqueue_options.core.checkers import (
    check_fetch_args,
    check_queue_args,
    check_send_args,
    check_work_args,
    get_config,
)
from jobqueue_options.core.logging import configure_logging
from jobqueue_options.core.notifier import NullWarningSink, WarningNotifier
from jobqueue_options.core.policy import POLICY, Policy

if TYPE_CHECKING:
    from jobqueue_options.core.models import SendArgs, WorkArgs

logger = logging.getLogger(__name__)


def configure_from_settings(settings: Settings | None = None) -> None:
    """Install the log handler described by ``settings``.

    Applications call this once at startup, before constructing services.

    Args:
        settings: Settings to read. Defaults to ``get_settings()``.
    """
    settings = settings or get_settings()
    configure_logging(
        level=settings.log_level,
        json_format=settings.log_json,
        mask_sensitive=settings.mask_sensitive,
    )


class ArgumentService:
    """Validates and normalizes client calls on behalf of a queue manager."""

    def __init__(
        self,
        settings: Settings | None = None,
        notifier: WarningNotifier | None = None,
    ) -> None:
        """Initialize the argument service.

        Args:
            settings: Settings to use. Defaults to ``get_settings()``.
            notifier: Warning notifier to own. Defaults to a new notifier
                that logs, or discards when warnings are disabled.
        """
        self._settings = settings or get_settings()
        if notifier is None:
            sink = None if self._settings.warnings_enabled else NullWarningSink()
            notifier = WarningNotifier(sink)
        self._notifier = notifier

    @property
    def policy(self) -> Policy:
        """Read-only limits shared with the execution engine."""
        return POLICY

    @property
    def notifier(self) -> WarningNotifier:
        return self._notifier

    def get_config(self, value: str | Mapping[str, Any]) -> dict[str, Any]:
        config = get_config(
            value, self._notifier, default_schema=self._settings.default_schema
        )
        logger.info("Connection config validated for schema %s", config["schema"])
        return config

    def check_queue_args(
        self, name: Any, options: Mapping[str, Any] | None = None
    ) -> dict[str, Any]:
        return check_queue_args(name, options)

    def check_send_args(
        self, args: Sequence[Any], defaults: Mapping[str, Any] | None
    ) -> SendArgs:
        return check_send_args(args, defaults, self._notifier)

    def check_work_args(
        self,
        name: Any,
        args: Sequence[Any],
        defaults: Mapping[str, Any] | None = None,
    ) -> WorkArgs:
        return check_work_args(name, args, defaults)

    def check_fetch_args(
        self, name: Any, options: MutableMapping[str, Any]
    ) -> MutableMapping[str, Any]:
        return check_fetch_args(name, options)

    def warn_clock_skew(self, detail: str | None = None) -> None:
        """Report clock skew between this instance and the database server."""
        self._notifier.warn_clock_skew(detail)
