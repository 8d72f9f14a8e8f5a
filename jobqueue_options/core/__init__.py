"""Core components for the job queue options engine."""

from jobqueue_options.core.checkers import (
    check_fetch_args,
    check_queue_args,
    check_send_args,
    check_work_args,
    get_config,
)
from jobqueue_options.core.errors import InvalidArgumentError, JobQueueOptionsError
from jobqueue_options.core.models import (
    ObjectSendCall,
    PositionalSendCall,
    SendArgs,
    SendCall,
    WorkArgs,
    classify_send_call,
)
from jobqueue_options.core.names import (
    assert_object_name,
    assert_queue_name,
    is_valid_object_name,
    is_valid_queue_name,
)
from jobqueue_options.core.notifier import (
    CLOCK_SKEW,
    CRON_DISABLED,
    ON_COMPLETE_REMOVED,
    LoggingWarningSink,
    NullWarningSink,
    WarningKind,
    WarningNotifier,
)
from jobqueue_options.core.policy import DEFAULT_SCHEMA, POLICY, Policy
from jobqueue_options.core.resolution import resolve_deferred, resolve_option

__all__ = [
    # Errors
    "JobQueueOptionsError",
    "InvalidArgumentError",
    # Policy
    "POLICY",
    "Policy",
    "DEFAULT_SCHEMA",
    # Names
    "assert_object_name",
    "assert_queue_name",
    "is_valid_object_name",
    "is_valid_queue_name",
    # Warnings
    "WarningKind",
    "WarningNotifier",
    "LoggingWarningSink",
    "NullWarningSink",
    "CLOCK_SKEW",
    "CRON_DISABLED",
    "ON_COMPLETE_REMOVED",
    # Models
    "PositionalSendCall",
    "ObjectSendCall",
    "SendCall",
    "SendArgs",
    "WorkArgs",
    "classify_send_call",
    # Checkers
    "get_config",
    "check_queue_args",
    "check_send_args",
    "check_work_args",
    "check_fetch_args",
    # Deferred defaults
    "resolve_deferred",
    "resolve_option",
]
