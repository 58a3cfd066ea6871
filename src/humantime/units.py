"""Time units and duration parsing.

Units are ordered from the largest duration to the smallest. The order
drives unit selection and validates ``max_unit``/``min_unit`` bounds.

Usage:
    from humantime.units import TimeUnit, get_unit_seconds, parse_duration

    get_unit_seconds("hour")   # 3600
    parse_duration("2 weeks")  # 1209600
    parse_duration("3d")       # 259200
"""

from __future__ import annotations

import re
from enum import Enum

from humantime.exceptions import UnknownUnitError


class TimeUnit(str, Enum):
    """Calendar unit used to express a relative time."""

    YEAR = "year"
    MONTH = "month"
    WEEK = "week"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    NOW = "now"  # zero distance, has no duration

    @property
    def seconds(self) -> int:
        """Fixed duration of the unit in seconds."""
        return get_unit_seconds(self)

    @property
    def rank(self) -> int:
        """Position in the largest-first ordering (0 = year)."""
        return _UNIT_RANKS[self]

    @classmethod
    def coerce(cls, value: "TimeUnit | str") -> "TimeUnit":
        """Convert a unit name (case-insensitive) into a TimeUnit."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise UnknownUnitError(value)


UNIT_SECONDS: dict[TimeUnit, int] = {
    TimeUnit.YEAR: 31_536_000,
    TimeUnit.MONTH: 2_592_000,
    TimeUnit.WEEK: 604_800,
    TimeUnit.DAY: 86_400,
    TimeUnit.HOUR: 3_600,
    TimeUnit.MINUTE: 60,
    TimeUnit.SECOND: 1,
}

_ORDERED_UNITS: tuple[TimeUnit, ...] = tuple(UNIT_SECONDS)
_UNIT_RANKS: dict[TimeUnit, int] = {
    unit: index for index, unit in enumerate((*_ORDERED_UNITS, TimeUnit.NOW))
}

DEFAULT_SHORT_LABELS: dict[TimeUnit, str] = {
    TimeUnit.YEAR: "y",
    TimeUnit.MONTH: "mo",
    TimeUnit.WEEK: "w",
    TimeUnit.DAY: "d",
    TimeUnit.HOUR: "h",
    TimeUnit.MINUTE: "m",
    TimeUnit.SECOND: "s",
}

# Names and abbreviations accepted by parse_duration
_UNIT_ALIASES: dict[str, TimeUnit] = {
    "y": TimeUnit.YEAR,
    "yr": TimeUnit.YEAR,
    "yrs": TimeUnit.YEAR,
    "year": TimeUnit.YEAR,
    "years": TimeUnit.YEAR,
    "mo": TimeUnit.MONTH,
    "mos": TimeUnit.MONTH,
    "mon": TimeUnit.MONTH,
    "month": TimeUnit.MONTH,
    "months": TimeUnit.MONTH,
    "w": TimeUnit.WEEK,
    "wk": TimeUnit.WEEK,
    "wks": TimeUnit.WEEK,
    "week": TimeUnit.WEEK,
    "weeks": TimeUnit.WEEK,
    "d": TimeUnit.DAY,
    "day": TimeUnit.DAY,
    "days": TimeUnit.DAY,
    "h": TimeUnit.HOUR,
    "hr": TimeUnit.HOUR,
    "hrs": TimeUnit.HOUR,
    "hour": TimeUnit.HOUR,
    "hours": TimeUnit.HOUR,
    "m": TimeUnit.MINUTE,
    "min": TimeUnit.MINUTE,
    "mins": TimeUnit.MINUTE,
    "minute": TimeUnit.MINUTE,
    "minutes": TimeUnit.MINUTE,
    "s": TimeUnit.SECOND,
    "sec": TimeUnit.SECOND,
    "secs": TimeUnit.SECOND,
    "second": TimeUnit.SECOND,
    "seconds": TimeUnit.SECOND,
}

_DURATION_PATTERN = re.compile(r"^(\d+)\s*([a-z]+)$", re.IGNORECASE)


def get_units() -> tuple[TimeUnit, ...]:
    """Return the duration units, largest first."""
    return _ORDERED_UNITS


def get_unit_seconds(unit: TimeUnit | str) -> int:
    """Return the number of seconds in a unit.

    Args:
        unit: TimeUnit or unit name ("day", "HOUR", ...)

    Returns:
        Seconds per unit

    Raises:
        UnknownUnitError: If the unit is unknown or has no duration
    """
    resolved = TimeUnit.coerce(unit)
    if resolved not in UNIT_SECONDS:
        raise UnknownUnitError(unit)
    return UNIT_SECONDS[resolved]


def units_between(max_unit: TimeUnit, min_unit: TimeUnit) -> tuple[TimeUnit, ...]:
    """Return the units from max_unit down to min_unit, inclusive."""
    return _ORDERED_UNITS[max_unit.rank : min_unit.rank + 1]


def parse_duration(text: str) -> int | None:
    """Parse a duration string into seconds.

    Accepts a positive integer followed by a unit name or abbreviation,
    optionally separated by whitespace: "5 minutes", "3d", "2W", "1 yr".

    Args:
        text: Duration string

    Returns:
        Duration in seconds, or None if the string is malformed or the
        unit is not recognized
    """
    if not isinstance(text, str):
        return None

    match = _DURATION_PATTERN.match(text.strip())
    if match is None:
        return None

    amount, token = match.groups()
    unit = _UNIT_ALIASES.get(token.lower())
    if unit is None:
        return None
    return int(amount) * UNIT_SECONDS[unit]


__all__ = [
    "TimeUnit",
    "UNIT_SECONDS",
    "DEFAULT_SHORT_LABELS",
    "get_units",
    "get_unit_seconds",
    "units_between",
    "parse_duration",
]
