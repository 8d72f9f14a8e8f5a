"""Job Queue Options - argument and configuration normalization for a job queue client."""

__version__ = "0.1.0"

# Re-export core components for convenience
from jobqueue_options.config import Settings, get_settings
from jobqueue_options.core import (
    POLICY,
    InvalidArgumentError,
    JobQueueOptionsError,
    Policy,
    SendArgs,
    WarningNotifier,
    WorkArgs,
    assert_object_name,
    assert_queue_name,
    check_fetch_args,
    check_queue_args,
    check_send_args,
    check_work_args,
    get_config,
)
from jobqueue_options.services import ArgumentService, configure_from_settings

__all__ = [
    # Version info
    "__version__",
    # Configuration
    "Settings",
    "get_settings",
    # Errors
    "JobQueueOptionsError",
    "InvalidArgumentError",
    # Policy
    "POLICY",
    "Policy",
    # Names
    "assert_object_name",
    "assert_queue_name",
    # Checkers
    "get_config",
    "check_queue_args",
    "check_send_args",
    "check_work_args",
    "check_fetch_args",
    "SendArgs",
    "WorkArgs",
    # Services
    "WarningNotifier",
    "ArgumentService",
    "configure_from_settings",
]
