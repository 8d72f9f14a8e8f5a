"""Unit precedence cascades for unit-suffixed option families.

Each family of equivalent inputs (``retention_days``, ``retention_hours``, ...)
is described by an ordered tuple of ``UnitField`` entries, largest unit
first. The first entry found in an option mapping wins, so the "larger unit
wins" rule lives in data rather than in nested conditionals.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, NamedTuple

SECOND = 1
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE
DAY = 24 * HOUR


class UnitField(NamedTuple):
    """One unit-suffixed input field of a family.

    Attributes:
        name: Option key, e.g. ``"retention_hours"``.
        unit: Unit label used in duration strings and messages, e.g. ``"hours"``.
        multiplier: Factor converting a value in this unit to seconds.
    """

    name: str
    unit: str
    multiplier: int

    @property
    def singular(self) -> str:
        return self.unit[:-1]

    def to_seconds(self, value: int | float) -> int | float:
        return value * self.multiplier

    def as_duration(self, value: int | float) -> str:
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        return f"{value} {self.unit}"


Cascade = tuple[UnitField, ...]

_UNITS: dict[str, int] = {
    "days": DAY,
    "hours": HOUR,
    "minutes": MINUTE,
    "seconds": SECOND,
}


def cascade(prefix: str, *units: str) -> Cascade:
    """Build a cascade for ``prefix`` over ``units``, largest unit first.

    Example:
        >>> [f.name for f in cascade("expire_in", "seconds", "hours")]
        ['expire_in_hours', 'expire_in_seconds']
    """
    ordered = sorted(units, key=lambda unit: _UNITS[unit], reverse=True)
    return tuple(UnitField(f"{prefix}_{unit}", unit, _UNITS[unit]) for unit in ordered)


RETENTION = cascade("retention", "days", "hours", "minutes", "seconds")
EXPIRATION = cascade("expire_in", "hours", "minutes", "seconds")
DELETION = cascade("delete_after", "days", "hours", "minutes", "seconds")
MAINTENANCE_INTERVAL = cascade("maintenance_interval", "minutes", "seconds")
MONITOR_STATE_INTERVAL = cascade("monitor_state_interval", "minutes", "seconds")
CLOCK_MONITOR_INTERVAL = cascade("clock_monitor_interval", "minutes", "seconds")
SINGLETON = cascade("singleton", "hours", "minutes", "seconds")


def is_number(value: Any) -> bool:
    """Return True for int/float values, excluding bool."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_integer(value: Any) -> bool:
    """Return True for whole numbers, including integral floats such as ``3.0``."""
    if isinstance(value, float):
        return value.is_integer()
    return isinstance(value, int) and not isinstance(value, bool)


def is_present(config: Mapping[str, Any], key: str) -> bool:
    """Return True if ``key`` holds a value. ``None`` counts as absent."""
    return config.get(key) is not None


def first_present(config: Mapping[str, Any], fields: Cascade) -> UnitField | None:
    """Return the highest-precedence field present in ``config``."""
    for field in fields:
        if is_present(config, field.name):
            return field
    return None


def first_positive(config: Mapping[str, Any], fields: Cascade) -> UnitField | None:
    """Return the highest-precedence field holding a number greater than zero.

    Unlike ``first_present``, zero, ``None`` and non-numeric values are
    treated as absent.
    """
    for field in fields:
        value = config.get(field.name)
        if is_number(value) and value > 0:
            return field
    return None
