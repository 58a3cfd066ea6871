"""Core enums, value types and the formatting backend protocol.

The backend protocol is the seam between the relative-time logic and the
locale machinery that renders pluralized, localized text:

- format_relative: "3 hours ago", "il y a 7 mois", "yesterday"
- format_absolute: "Jan 2, 2023", "2. Jan. 2023"

Any object with these two methods can replace the default backend.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from humantime.locale import LocaleInfo
    from humantime.units import TimeUnit


# ==============================================================================
# Enums
# ==============================================================================

class FormatStyle(str, Enum):
    """Length of localized relative phrases."""
    LONG = "long"      # 3 hours ago
    SHORT = "short"    # 3 hr. ago
    NARROW = "narrow"  # 3h ago
    AUTO = "auto"      # same as LONG


class NumericMode(str, Enum):
    """Whether idiomatic words may replace numbers."""
    ALWAYS = "always"  # 1 day ago
    AUTO = "auto"      # yesterday


class RoundingMode(str, Enum):
    """How a fractional unit count becomes an integer."""
    FLOOR = "floor"
    ROUND = "round"
    CEIL = "ceil"
    AUTO = "auto"  # round below 10, nearest 5 below 100, floor above


# ==============================================================================
# Absolute Date Display
# ==============================================================================

_YEAR_VALUES = ("numeric", "2-digit")
_MONTH_VALUES = ("numeric", "2-digit", "short", "long", "narrow")
_DAY_VALUES = ("numeric", "2-digit")
_WEEKDAY_VALUES = (None, "short", "long")
_TIME_VALUES = (None, "numeric", "2-digit")


@dataclass(frozen=True)
class DateDisplayOptions:
    """Fields shown when a date is rendered as an absolute calendar date.

    Attributes:
        year: "numeric" (2023) or "2-digit" (23)
        month: "numeric", "2-digit", "short" (Jan), "long" (January)
            or "narrow" (J)
        day: "numeric" or "2-digit"
        weekday: None, "short" (Mon) or "long" (Monday)
        hour: None, "numeric" or "2-digit"; None hides the time
        minute: None, "numeric" or "2-digit"; defaults to 2-digit when
            an hour is shown
        hour12: Force 12-hour (True) or 24-hour (False) clock; None uses
            the locale default
    """
    year: str = "numeric"
    month: str = "short"
    day: str = "numeric"
    weekday: str | None = None
    hour: str | None = None
    minute: str | None = None
    hour12: bool | None = None

    def validate(self) -> None:
        """Validate field values.

        Raises:
            ValueError: If a field has an unsupported value
        """
        checks = (
            ("year", self.year, _YEAR_VALUES),
            ("month", self.month, _MONTH_VALUES),
            ("day", self.day, _DAY_VALUES),
            ("weekday", self.weekday, _WEEKDAY_VALUES),
            ("hour", self.hour, _TIME_VALUES),
            ("minute", self.minute, _TIME_VALUES),
        )
        for name, value, allowed in checks:
            if value not in allowed:
                raise ValueError(f"{name} must be one of {allowed}, got {value!r}")

    @property
    def shows_time(self) -> bool:
        return self.hour is not None

    def cache_key(self) -> str:
        """Stable serialization used in formatter cache keys."""
        return json.dumps(asdict(self), sort_keys=True, separators=(",", ":"))


# ==============================================================================
# Backend Protocol
# ==============================================================================

@runtime_checkable
class FormattingBackend(Protocol):
    """Locale-aware rendering service used by the phrase formatter."""

    def format_relative(
        self,
        value: int,
        unit: "TimeUnit",
        locale: "LocaleInfo",
        style: FormatStyle = FormatStyle.LONG,
        numeric: NumericMode = NumericMode.AUTO,
    ) -> str:
        """Render a signed unit count as a relative phrase.

        Args:
            value: Unit count; negative values are in the past
            unit: Unit of the count
            locale: Target locale
            style: Phrase length
            numeric: Whether idiomatic words may replace the number

        Returns:
            Localized phrase
        """
        ...

    def format_absolute(
        self,
        instant: datetime,
        locale: "LocaleInfo",
        display: DateDisplayOptions | None = None,
        time_zone: str | None = None,
    ) -> str:
        """Render an instant as a calendar date.

        Args:
            instant: Timezone-aware instant
            locale: Target locale
            display: Fields to show
            time_zone: IANA zone to convert to before formatting

        Returns:
            Localized date string
        """
        ...


__all__ = [
    "FormatStyle",
    "NumericMode",
    "RoundingMode",
    "DateDisplayOptions",
    "FormattingBackend",
]
