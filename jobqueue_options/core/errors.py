"""Custom exceptions for the job queue options engine."""


class JobQueueOptionsError(Exception):
    """Base exception for all job queue options errors."""

    pass


class InvalidArgumentError(JobQueueOptionsError, ValueError):
    """Raised when a caller violates an argument or configuration contract.

    This is the only error the argument checkers raise. It is fail-fast:
    the first violated assertion wins and the checker stops there.

    Attributes:
        field: Name of the offending option, when a single field is at fault.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)
