"""Locale-aware relative and absolute formatters.

This module provides the default :class:`~humantime.protocols.FormattingBackend`:

- RelativeTimeFormatter: pluralized phrases for a (locale, style, numeric)
  combination, e.g. "3 hours ago", "vor 3 Stunden", "yesterday"
- DateTimeFormatter: calendar dates for a (locale, display fields, zone)
  combination, e.g. "Jan 2, 2023", "2023年1月2日"
- LocaleBackend: builds formatters through a FormatterCache and delegates

Usage:
    from humantime.formatters import LocaleBackend
    from humantime.locale import LocaleInfo
    from humantime.units import TimeUnit

    backend = LocaleBackend()
    backend.format_relative(-3, TimeUnit.HOUR, LocaleInfo.parse("fr"))
    # -> "il y a 3 heures"
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from humantime.cache import FormatterCache, get_default_cache
from humantime.exceptions import ConfigurationError
from humantime.locale import LocaleInfo
from humantime.locale_data import (
    DateTimePatterns,
    RelativeTimeData,
    get_date_patterns,
    get_relative_time_data,
)
from humantime.plural import PluralRules, get_plural_rules
from humantime.protocols import DateDisplayOptions, FormatStyle, NumericMode
from humantime.units import TimeUnit

logger = logging.getLogger(__name__)

_DEFAULT_DISPLAY = DateDisplayOptions()

# Quoted literal or a run of one CLDR field letter
_FIELD_TOKEN = re.compile(r"'[^']*'|y+|M+|d+|E+|H+|h+|m+|a")
_DATE_FIELD_TOKEN = re.compile(r"'[^']*'|y+|M+|d+")


def load_time_zone(name: str) -> ZoneInfo:
    """Load an IANA time zone.

    Raises:
        ConfigurationError: If the zone name is unknown
    """
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ConfigurationError(f"Unknown time zone: {name!r}") from e


# ==============================================================================
# Relative Time Formatter
# ==============================================================================

class RelativeTimeFormatter:
    """Formats signed unit counts as localized relative phrases.

    Negative values are in the past, positive values in the future, zero
    uses the future form ("in 0 seconds") unless an idiom applies.

    Example:
        formatter = RelativeTimeFormatter(LocaleInfo.parse("en"))
        formatter.format(-3, TimeUnit.HOUR)   # "3 hours ago"
        formatter.format(-1, TimeUnit.DAY)    # "yesterday"
        formatter.format(2, TimeUnit.WEEK)    # "in 2 weeks"
    """

    def __init__(
        self,
        locale: LocaleInfo,
        style: FormatStyle = FormatStyle.LONG,
        numeric: NumericMode = NumericMode.AUTO,
        plural_rules: PluralRules | None = None,
    ) -> None:
        self.locale = locale
        self.style = style
        self.numeric = numeric
        self._plural_rules = plural_rules or get_plural_rules()
        style_key = FormatStyle.LONG.value if style == FormatStyle.AUTO else style.value
        self._data: RelativeTimeData = get_relative_time_data(locale, style_key)

    def format(self, value: int, unit: TimeUnit | str) -> str:
        """Format a signed count of units.

        Args:
            value: Unit count; negative is past
            unit: Time unit (NOW is treated as zero seconds)

        Returns:
            Localized phrase
        """
        unit = TimeUnit.coerce(unit)
        if unit == TimeUnit.NOW:
            unit, value = TimeUnit.SECOND, 0

        if self.numeric == NumericMode.AUTO:
            idiom = self._data.idiom(unit.value, value)
            if idiom is not None:
                return idiom

        magnitude = abs(value)
        category = self._plural_rules.get_category(magnitude, self.locale)
        pattern = self._data.unit(unit.value).pattern(value < 0, category)
        return pattern.format(magnitude)

    def __repr__(self) -> str:
        return (
            f"RelativeTimeFormatter(locale={self.locale.tag!r}, "
            f"style={self.style.value!r}, numeric={self.numeric.value!r})"
        )


# ==============================================================================
# Date Formatter
# ==============================================================================

class DateTimeFormatter:
    """Formats instants as localized calendar dates.

    The display pattern is compiled once at construction from the locale's
    patterns and the requested fields.

    Example:
        formatter = DateTimeFormatter(LocaleInfo.parse("de"))
        formatter.format(datetime(2023, 1, 2, tzinfo=timezone.utc))
        # -> "2. Jan. 2023"
    """

    def __init__(
        self,
        locale: LocaleInfo,
        display: DateDisplayOptions | None = None,
        time_zone: str | None = None,
    ) -> None:
        self.locale = locale
        self.display = display or _DEFAULT_DISPLAY
        self.display.validate()
        self.time_zone = time_zone
        self._tz = load_time_zone(time_zone) if time_zone else None
        self._patterns: DateTimePatterns = get_date_patterns(locale)
        self.pattern = self._build_pattern()
        logger.debug("Compiled date pattern %r for %s", self.pattern, locale.tag)

    def format(self, instant: datetime) -> str:
        """Format an instant.

        Naive datetimes are treated as UTC.
        """
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        if self._tz is not None:
            instant = instant.astimezone(self._tz)
        return _FIELD_TOKEN.sub(lambda m: self._render(m.group(0), instant), self.pattern)

    def _build_pattern(self) -> str:
        display = self.display
        patterns = self._patterns

        textual_month = display.month in ("short", "long", "narrow")
        base = patterns.date_text if textual_month else patterns.date_numeric

        def adjust(match: re.Match[str]) -> str:
            token = match.group(0)
            field = token[0]
            if field == "y" and display.year == "2-digit":
                return "yy"
            if field == "M":
                if textual_month and patterns.numeric_month:
                    return token
                if display.month == "short":
                    return "MMM"
                if display.month == "long":
                    return "MMMM"
                if display.month == "narrow":
                    return "MMMMM"
                if display.month == "2-digit":
                    return "MM"
            if field == "d" and display.day == "2-digit":
                return "dd"
            return token

        pattern = _DATE_FIELD_TOKEN.sub(adjust, base)

        if display.weekday is not None:
            weekday = "EEEE" if display.weekday == "long" else "EEE"
            pattern = patterns.weekday_join.format(weekday=weekday, date=pattern)

        if display.shows_time:
            use_12 = patterns.hour12 if display.hour12 is None else display.hour12
            time_pattern = patterns.time_12 if use_12 else patterns.time_24
            if display.hour == "2-digit":
                time_pattern = re.sub(r"([Hh])+", r"\1\1", time_pattern)
            if display.minute == "numeric":
                time_pattern = time_pattern.replace("mm", "m")
            pattern = patterns.datetime_join.format(date=pattern, time=time_pattern)

        return pattern

    def _render(self, token: str, value: datetime) -> str:
        patterns = self._patterns
        field = token[0]
        width = len(token)

        if field == "'":
            return token[1:-1] or "'"
        if field == "y":
            if width == 2:
                return f"{value.year % 100:02d}"
            return str(value.year).zfill(width)
        if field == "M":
            index = value.month - 1
            if width == 1:
                return str(value.month)
            if width == 2:
                return f"{value.month:02d}"
            if width == 3:
                return patterns.months_abbreviated[index]
            if width == 4:
                return patterns.months_wide[index]
            return patterns.month_narrow(index)
        if field == "d":
            return f"{value.day:02d}" if width >= 2 else str(value.day)
        if field == "E":
            dow = (value.weekday() + 1) % 7  # 0=Sunday
            if width >= 4:
                return patterns.days_wide[dow]
            return patterns.days_abbreviated[dow]
        if field == "H":
            return f"{value.hour:02d}" if width >= 2 else str(value.hour)
        if field == "h":
            hour12 = value.hour % 12 or 12
            return f"{hour12:02d}" if width >= 2 else str(hour12)
        if field == "m":
            return f"{value.minute:02d}" if width >= 2 else str(value.minute)
        if field == "a":
            return patterns.am if value.hour < 12 else patterns.pm
        return token

    def __repr__(self) -> str:
        return f"DateTimeFormatter(locale={self.locale.tag!r}, pattern={self.pattern!r})"


# ==============================================================================
# Cached Backend
# ==============================================================================

class LocaleBackend:
    """Default formatting backend.

    Formatters are constructed lazily per distinct key and kept in a
    :class:`FormatterCache`. Without an explicit cache the shared
    process-wide cache is used.
    """

    def __init__(self, cache: FormatterCache | None = None) -> None:
        self._cache = cache

    @property
    def cache(self) -> FormatterCache:
        return self._cache if self._cache is not None else get_default_cache()

    def relative_formatter(
        self,
        locale: LocaleInfo,
        style: FormatStyle = FormatStyle.LONG,
        numeric: NumericMode = NumericMode.AUTO,
    ) -> RelativeTimeFormatter:
        key = f"rel:{locale.tag}:{style.value}:{numeric.value}"
        return self.cache.get_or_create(
            key, lambda: RelativeTimeFormatter(locale, style, numeric)
        )

    def date_formatter(
        self,
        locale: LocaleInfo,
        display: DateDisplayOptions | None = None,
        time_zone: str | None = None,
    ) -> DateTimeFormatter:
        display = display or _DEFAULT_DISPLAY
        key = f"abs:{locale.tag}:{display.cache_key()}:{time_zone or ''}"
        return self.cache.get_or_create(
            key, lambda: DateTimeFormatter(locale, display, time_zone)
        )

    def format_relative(
        self,
        value: int,
        unit: TimeUnit,
        locale: LocaleInfo,
        style: FormatStyle = FormatStyle.LONG,
        numeric: NumericMode = NumericMode.AUTO,
    ) -> str:
        return self.relative_formatter(locale, style, numeric).format(value, unit)

    def format_absolute(
        self,
        instant: datetime,
        locale: LocaleInfo,
        display: DateDisplayOptions | None = None,
        time_zone: str | None = None,
    ) -> str:
        return self.date_formatter(locale, display, time_zone).format(instant)


__all__ = [
    "RelativeTimeFormatter",
    "DateTimeFormatter",
    "LocaleBackend",
    "load_time_zone",
]
