"""Time difference calculation.

Turns an instant and a reference "now" into signed elapsed seconds, picks
the calendar unit to express it in and rounds the unit count.

Sign convention: positive elapsed seconds (and positive unit values) mean
the instant is in the past, negative means it is in the future.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import TYPE_CHECKING, Any

from humantime.exceptions import InvalidDateError
from humantime.protocols import NumericMode, RoundingMode
from humantime.units import TimeUnit, units_between

if TYPE_CHECKING:
    from humantime.options import FormatOptions


# ==============================================================================
# Instants
# ==============================================================================

def parse_instant(value: Any) -> datetime:
    """Convert an input value into a timezone-aware datetime.

    Accepted inputs:
    - int/float: milliseconds since the Unix epoch
    - str: ISO 8601 date or date-time ("2025-01-01", "2025-01-01T10:00:00Z")
    - datetime: returned as is (naive values are UTC)
    - date: midnight UTC

    Raises:
        InvalidDateError: If the value is not a valid point in time
    """
    if isinstance(value, bool):
        raise InvalidDateError(value)

    if isinstance(value, datetime):
        instant = value
    elif isinstance(value, date):
        instant = datetime(value.year, value.month, value.day)
    elif isinstance(value, (int, float)):
        if not math.isfinite(value):
            raise InvalidDateError(value)
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as e:
            raise InvalidDateError(value) from e
    elif isinstance(value, str):
        try:
            instant = datetime.fromisoformat(value.strip())
        except ValueError as e:
            raise InvalidDateError(value) from e
    else:
        raise InvalidDateError(value)

    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return instant


def elapsed_seconds(instant: datetime, now: datetime) -> float:
    """Seconds from instant to now; positive when instant is in the past."""
    return (now - instant).total_seconds()


# ==============================================================================
# Rounding
# ==============================================================================

def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def apply_rounding(value: float, mode: RoundingMode = RoundingMode.ROUND) -> int:
    """Round a fractional unit count.

    Args:
        value: Signed unit count
        mode: Rounding strategy. AUTO rounds below 10, rounds to the
            nearest multiple of 5 below 100 and floors from 100 up.

    Returns:
        Rounded count
    """
    if mode == RoundingMode.FLOOR:
        return math.floor(value)
    if mode == RoundingMode.CEIL:
        return math.ceil(value)
    if mode == RoundingMode.AUTO:
        magnitude = abs(value)
        if magnitude < 10:
            return _round_half_away(value)
        if magnitude < 100:
            return _round_half_away(value / 5) * 5
        return math.floor(value)
    return _round_half_away(value)


# ==============================================================================
# Unit Selection
# ==============================================================================

@dataclass(frozen=True)
class UnitSelection:
    """A unit and the rounded count of it.

    Attributes:
        unit: Selected unit
        value: Rounded signed count (positive = past)
        raw: Unrounded signed count
    """
    unit: TimeUnit
    value: int
    raw: float

    @property
    def is_past(self) -> bool:
        return self.value > 0

    @property
    def magnitude(self) -> int:
        return abs(self.value)


def select_unit(diff_seconds: float, options: "FormatOptions") -> UnitSelection | None:
    """Pick the largest permitted unit that fits at least once.

    Units are tried from ``options.max_unit`` down to ``options.min_unit``.
    The first unit whose unrounded count reaches 1 is selected and its count
    rounded with ``options.rounding``. When the rounded count amounts to
    a whole larger permitted unit (59.6 seconds rounding to 60), the
    larger unit is used instead.

    Returns:
        The selection, or None when the difference is below one
        ``min_unit``
    """
    units = units_between(options.max_unit, options.min_unit)
    for index, unit in enumerate(units):
        raw = diff_seconds / unit.seconds
        if abs(raw) < 1:
            continue

        value = apply_rounding(raw, options.rounding)
        while index > 0 and abs(value) * unit.seconds >= units[index - 1].seconds:
            index -= 1
            unit = units[index]
            raw = diff_seconds / unit.seconds
            value = apply_rounding(raw, options.rounding)
        return UnitSelection(unit=unit, value=value, raw=raw)
    return None


def day_offset(diff_seconds: float, options: "FormatOptions") -> int | None:
    """Whole-day offset for "yesterday", "today" and "tomorrow".

    Only English locales get these words, and only when numeric output is
    not forced and days are a permitted unit. 1 means yesterday, -1
    tomorrow. 0 (today) is only returned when no unit smaller than a day
    may be used.

    Returns:
        -1, 0 or 1, or None when no day word applies
    """
    if options.numeric == NumericMode.ALWAYS or not options.locale_info.is_english:
        return None
    if not options.max_unit.rank <= TimeUnit.DAY.rank <= options.min_unit.rank:
        return None

    days = math.trunc(diff_seconds / TimeUnit.DAY.seconds)
    if days in (1, -1):
        return days
    if days == 0 and options.min_unit == TimeUnit.DAY:
        return 0
    return None


__all__ = [
    "parse_instant",
    "elapsed_seconds",
    "apply_rounding",
    "UnitSelection",
    "select_unit",
    "day_offset",
]
