"""Protocol interface for the diagnostic sink.

The warning notifier depends on this protocol, not on a concrete logging
or telemetry backend. Any callable with this three-argument shape works.
"""

from __future__ import annotations

from typing import Protocol


class WarningSink(Protocol):
    """Receives non-fatal diagnostics.

    Consumer: WarningNotifier.emit()
    """

    def __call__(self, message: str, warning_type: str | None, code: str) -> None:
        """Deliver a diagnostic.

        Args:
            message: Full human-readable message.
            warning_type: Optional category name (unused by built-in kinds).
            code: Stable warning code, e.g. ``"jobqueue-w03"``.
        """
        ...
