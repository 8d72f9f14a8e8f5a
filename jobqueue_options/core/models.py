"""Call-shape and result models for the argument checkers."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Union

from jobqueue_options.core.errors import InvalidArgumentError

MISSING_QUEUE_NAME = "all jobs require a queue name"


@dataclass(frozen=True)
class PositionalSendCall:
    """``send(name, data=None, options=None)``."""

    name: str
    data: Any = None
    options: Any = None


@dataclass(frozen=True)
class ObjectSendCall:
    """``send({"name": ..., "data": ..., "options": ...})``.

    ``job`` may be ``None`` when the caller passed an explicit null job.
    """

    job: Mapping[str, Any] | None

    @property
    def name(self) -> Any:
        return self.job.get("name") if self.job is not None else None

    @property
    def data(self) -> Any:
        return self.job.get("data") if self.job is not None else None

    @property
    def options(self) -> Any:
        return self.job.get("options") if self.job is not None else None


SendCall = Union[PositionalSendCall, ObjectSendCall]


def classify_send_call(args: Sequence[Any]) -> SendCall:
    """Discriminate the send call shape before any field validation.

    A string first argument selects the positional form. A mapping (or
    ``None``) selects the object form, which accepts exactly one argument.

    Raises:
        InvalidArgumentError: If the shapes are mixed or no shape matches.
    """
    if not args:
        raise InvalidArgumentError(MISSING_QUEUE_NAME, field="name")

    first = args[0]

    if isinstance(first, str):
        if len(args) > 3:
            raise InvalidArgumentError("send accepts at most 3 positional arguments")
        return PositionalSendCall(*args)

    if first is None or isinstance(first, Mapping):
        if len(args) != 1:
            raise InvalidArgumentError("send object API only accepts 1 argument")
        if first is None:
            raise InvalidArgumentError("all jobs require a name", field="name")
        return ObjectSendCall(first)

    raise InvalidArgumentError(MISSING_QUEUE_NAME, field="name")


@dataclass
class SendArgs:
    """Normalized result of ``check_send_args``."""

    name: str
    data: Any
    options: dict[str, Any] = field(default_factory=dict)


@dataclass
class WorkArgs:
    """Normalized result of ``check_work_args``."""

    options: dict[str, Any]
    callback: Callable[..., Any]
