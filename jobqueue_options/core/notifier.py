"""At-most-once advisory warnings.

Each warning kind is delivered at most once per notifier unless the caller
forces it. The notifier is constructed and owned by a runtime object
(see ``ArgumentService``); there is no module-level instance, so the
dedup state lives exactly as long as its owner.

Concurrent callers may race on a kind's flag. The worst outcome is one
diagnostic lost or duplicated, so no lock is taken.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jobqueue_options.ports.diagnostics import WarningSink

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WarningKind:
    """A warning category with a fixed message and stable code."""

    message: str
    code: str


CLOCK_SKEW = WarningKind(
    message=(
        "Timekeeper detected clock skew between this instance and the database server. "
        "This will not affect scheduling operations, but this warning is shown any time "
        "the skew exceeds 60 seconds."
    ),
    code="jobqueue-w02",
)

CRON_DISABLED = WarningKind(
    message="Archive interval is set less than 60s. Cron processing is disabled.",
    code="jobqueue-w03",
)

ON_COMPLETE_REMOVED = WarningKind(
    message=(
        "'on_complete' option detected. This option has been removed. "
        "Consider dead_letter if needed."
    ),
    code="jobqueue-w04",
)

WARNING_KINDS: tuple[WarningKind, ...] = (CLOCK_SKEW, CRON_DISABLED, ON_COMPLETE_REMOVED)


class LoggingWarningSink:
    """Default sink: routes diagnostics to the standard logging module."""

    def __init__(self, target: logging.Logger | None = None) -> None:
        self._logger = target or logger

    def __call__(self, message: str, warning_type: str | None, code: str) -> None:
        self._logger.warning(
            "[%s] %s",
            code,
            message,
            extra={"warning_code": code, "warning_type": warning_type},
        )


class NullWarningSink:
    """Sink that discards every diagnostic."""

    def __call__(self, message: str, warning_type: str | None, code: str) -> None:
        return None


class WarningNotifier:
    """Registry of warning kinds and whether each has been delivered.

    Example:
        notifier = WarningNotifier()
        notifier.emit(CRON_DISABLED)   # delivered
        notifier.emit(CRON_DISABLED)   # suppressed
        notifier.warn_clock_skew("skew: 90s")  # always delivered
    """

    def __init__(self, sink: WarningSink | None = None) -> None:
        """Initialize the notifier.

        Args:
            sink: Destination for delivered diagnostics. Defaults to
                ``LoggingWarningSink``.
        """
        self._sink: WarningSink = sink if sink is not None else LoggingWarningSink()
        self._warned: dict[str, bool] = {}

    def emit(
        self,
        kind: WarningKind,
        extra: str | None = None,
        *,
        force: bool = False,
    ) -> bool:
        """Deliver ``kind`` unless it was already delivered.

        Args:
            kind: The warning to emit.
            extra: Detail appended to the fixed message.
            force: Deliver even if this kind has already warned.

        Returns:
            True if the diagnostic was delivered, False if suppressed.
        """
        if not force and self._warned.get(kind.code, False):
            return False

        self._warned[kind.code] = True
        message = f"{kind.message} {extra}" if extra else kind.message
        self._sink(message, None, kind.code)
        return True

    def has_warned(self, kind: WarningKind) -> bool:
        return self._warned.get(kind.code, False)

    def reset(self) -> None:
        """Forget all delivered warnings."""
        self._warned.clear()

    def warn_clock_skew(self, detail: str | None = None) -> None:
        """Report clock skew. Skew recurs legitimately, so this is always forced."""
        self.emit(CLOCK_SKEW, detail, force=True)
