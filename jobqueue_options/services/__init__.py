"""Service layer for the job queue options engine."""

from jobqueue_options.services.arguments import ArgumentService, configure_from_settings

__all__ = ["ArgumentService", "configure_from_settings"]
