"""Identifier validation for storage objects and queues.

Two dialects are supported:

- Object names (schemas, tables): word characters only, no leading digit,
  at most 50 characters.
- Queue names: any string containing at least one word character or hyphen.
  The check is a search rather than a full match, so it is deliberately
  permissive; ``"jobs.email"`` passes because it contains word characters.
"""

from __future__ import annotations

import re
from typing import Any

from jobqueue_options.core.errors import InvalidArgumentError
from jobqueue_options.core.policy import MAX_OBJECT_NAME_LENGTH

_NON_WORD_RE = re.compile(r"\W", re.ASCII)
_LEADING_DIGIT_RE = re.compile(r"^\d", re.ASCII)
_QUEUE_CHAR_RE = re.compile(r"[\w-]", re.ASCII)


def assert_object_name(name: Any) -> None:
    """Validate a storage object identifier, or raise InvalidArgumentError.

    Rules:
    - Must be a non-empty string of at most 50 characters
    - Alphanumeric characters and underscores only
    - Must not start with a digit
    """
    if not isinstance(name, str):
        raise InvalidArgumentError("Name must be a string")
    if not name:
        raise InvalidArgumentError("Name cannot be empty")
    if len(name) > MAX_OBJECT_NAME_LENGTH:
        raise InvalidArgumentError(f"Name cannot exceed {MAX_OBJECT_NAME_LENGTH} characters")
    if _NON_WORD_RE.search(name):
        raise InvalidArgumentError("Name can only contain alphanumeric characters or underscores")
    if _LEADING_DIGIT_RE.match(name):
        raise InvalidArgumentError("Name cannot start with a number")


def assert_queue_name(name: Any) -> None:
    """Validate a queue name, or raise InvalidArgumentError."""
    if not name:
        raise InvalidArgumentError("Name is required")
    if not isinstance(name, str):
        raise InvalidArgumentError("Name must be a string")
    if not _QUEUE_CHAR_RE.search(name):
        raise InvalidArgumentError(
            "Name can only contain alphanumeric characters, underscores, or hyphens"
        )


def is_valid_object_name(name: Any) -> bool:
    try:
        assert_object_name(name)
    except InvalidArgumentError:
        return False
    return True


def is_valid_queue_name(name: Any) -> bool:
    try:
        assert_queue_name(name)
    except InvalidArgumentError:
        return False
    return True
