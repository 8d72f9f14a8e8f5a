"""Resolution of deferred ``*_default`` fields.

The argument checkers only attach fallbacks (``expire_in_default``,
``retry_limit_default``, ...). The execution engine calls these helpers
when it needs final values.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

T = TypeVar("T")

DEFAULT_SUFFIX = "_default"


def resolve_deferred(value: T | None, fallback: T | None, default: T) -> T:
    """Return the explicit value, else the fallback, else the global default.

    Example:
        >>> resolve_deferred(None, 3, 2)
        3
        >>> resolve_deferred(0, 3, 2)
        0
    """
    if value is not None:
        return value
    if fallback is not None:
        return fallback
    return default


def resolve_option(options: Mapping[str, Any], field: str, default: Any) -> Any:
    """Resolve ``field`` against its paired ``<field>_default`` in ``options``."""
    return resolve_deferred(options.get(field), options.get(field + DEFAULT_SUFFIX), default)
