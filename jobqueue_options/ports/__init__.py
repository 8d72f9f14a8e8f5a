"""Protocol interfaces consumed by the options engine."""

from jobqueue_options.ports.diagnostics import WarningSink

__all__ = ["WarningSink"]
