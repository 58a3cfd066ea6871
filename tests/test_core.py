"""Tests for format_relative_time.

All scenarios use the fixed reference instant 2025-01-01T00:00:00Z.
"""

import math
from datetime import date, datetime, timedelta, timezone

import pytest

from humantime import (
    INVALID_DATE,
    ConfigurationError,
    FormatOptions,
    FormatterCache,
    InvalidUnitRangeError,
    clear_cache,
    format_relative_time,
    get_default_cache,
    time_ago,
)
from humantime.protocols import FormatStyle, NumericMode
from humantime.units import TimeUnit

NOW = datetime(2025, 1, 1, tzinfo=timezone.utc)
NOW_ISO = "2025-01-01T00:00:00Z"
NOW_MS = 1_735_689_600_000


def ago(seconds: float, **options) -> str:
    """Format the instant `seconds` before NOW (negative = after)."""
    return format_relative_time(NOW - timedelta(seconds=seconds), now=NOW, **options)


class TestScenarios:
    """Reference scenarios."""

    def test_same_instant(self):
        assert ago(0) == "just now"

    def test_seconds(self):
        assert ago(10) == "10 seconds ago"

    def test_minutes(self):
        assert ago(300) == "5 minutes ago"

    def test_yesterday(self):
        assert ago(86_400) == "yesterday"

    def test_future_hour(self):
        assert ago(-3_600) == "in 1 hour"

    def test_short_mode(self):
        assert ago(7_200, short=True) == "2h ago"

    def test_two_years_is_calendar_date(self):
        result = ago(63_072_000)
        assert result == "Jan 2, 2023"
        assert not result.endswith("ago")

    @pytest.mark.parametrize(
        "rounding,expected",
        [("floor", "1 hour ago"), ("round", "2 hours ago"), ("ceil", "2 hours ago")],
    )
    def test_rounding_boundary(self, rounding, expected):
        assert ago(5_400, rounding=rounding) == expected

    def test_idempotent(self):
        value = NOW - timedelta(days=3, hours=4)
        first = format_relative_time(value, now=NOW)
        second = format_relative_time(value, now=NOW)
        assert first == second == "3 days ago"


class TestInputs:
    """Tests for accepted and rejected inputs."""

    def test_missing_input(self):
        assert format_relative_time(None, now=NOW) == ""
        assert format_relative_time("", now=NOW) == ""

    @pytest.mark.parametrize("value", ["garbage", "2025-02-30", True, math.nan, math.inf, object()])
    def test_invalid_input(self, value):
        assert format_relative_time(value, now=NOW) == INVALID_DATE == "Invalid date"

    def test_epoch_milliseconds(self):
        assert format_relative_time(NOW_MS - 300_000, now=NOW_MS) == "5 minutes ago"

    def test_iso_string(self):
        assert format_relative_time("2024-12-31T23:55:00Z", now=NOW_ISO) == "5 minutes ago"

    def test_date(self):
        assert format_relative_time(date(2024, 12, 31), now=NOW) == "yesterday"

    def test_configuration_errors_are_raised(self):
        """Test bad configuration is raised even when the input is missing."""
        with pytest.raises(InvalidUnitRangeError):
            format_relative_time(None, max_unit="second", min_unit="hour")
        with pytest.raises(ConfigurationError):
            format_relative_time("garbage", rounding="sideways")

    def test_default_now_is_current_time(self):
        assert format_relative_time(datetime.now(timezone.utc)) == "just now"
        assert format_relative_time(datetime.now(timezone.utc) - timedelta(hours=3)) == "3 hours ago"


class TestJustNow:
    """Tests for the just-now window."""

    def test_threshold_is_inclusive(self):
        assert ago(5) == "just now"
        assert ago(-5) == "just now"
        assert ago(6) == "6 seconds ago"

    def test_custom_threshold(self):
        assert ago(45, just_now_threshold=60) == "just now"

    def test_zero_threshold(self):
        assert ago(0, just_now_threshold=0) == "now"
        assert ago(1, just_now_threshold=0) == "1 second ago"

    def test_below_min_unit_falls_back(self):
        assert ago(30, min_unit="minute") == "just now"

    def test_localized(self):
        assert ago(0, locale="fr") == "maintenant"
        assert ago(0, locale="de", numeric="always") == "in 0 Sekunden"


class TestDayWords:
    """Tests for yesterday/today/tomorrow."""

    def test_tomorrow(self):
        assert ago(-86_400) == "tomorrow"

    def test_within_second_day(self):
        assert ago(100_000) == "yesterday"
        assert ago(172_800) == "2 days ago"

    def test_today(self):
        assert ago(3_600, min_unit="day") == "today"

    def test_short_mode_keeps_day_words(self):
        assert ago(86_400, short=True) == "yesterday"

    def test_numeric_always(self):
        assert ago(86_400, numeric="always") == "1 day ago"
        assert ago(-86_400, numeric="always") == "in 1 day"

    def test_other_locales_use_backend_idioms(self):
        assert ago(86_400, locale="de") == "gestern"
        assert ago(86_400, locale="ja") == "昨日"


class TestUnits:
    """Tests for unit selection through the entry point."""

    @pytest.mark.parametrize(
        "seconds,expected",
        [
            (59, "59 seconds ago"),
            (60, "1 minute ago"),
            (3_600, "1 hour ago"),
            (3 * 86_400, "3 days ago"),
            (14 * 86_400, "2 weeks ago"),
            (90 * 86_400, "3 months ago"),
            (-2 * 3_600, "in 2 hours"),
            (-5 * 86_400, "in 5 days"),
        ],
    )
    def test_long_phrases(self, seconds, expected):
        assert ago(seconds) == expected

    def test_idiomatic_week_month_year(self):
        assert ago(7 * 86_400) == "last week"
        assert ago(-30 * 86_400) == "next month"
        assert ago(7 * 86_400, numeric="always") == "1 week ago"

    def test_max_unit(self):
        assert ago(63_072_000, max_unit="day", absolute_after=False) == "730 days ago"

    def test_auto_rounding(self):
        assert ago(13 * 60, rounding="auto") == "15 minutes ago"

    @pytest.mark.parametrize(
        "seconds,rounding,expected",
        [
            (59.6, "round", "1 minute ago"),
            (59.6 * 60, "round", "1 hour ago"),
            (23.9 * 3_600, "round", "yesterday"),
            (22.5 * 3_600, "auto", "yesterday"),
            (-59.6 * 60, "round", "in 1 hour"),
        ],
    )
    def test_rounding_up_to_next_unit(self, seconds, rounding, expected):
        assert ago(seconds, rounding=rounding) == expected

    def test_rounding_up_to_next_unit_short(self):
        assert ago(59.6 * 60, short=True) == "1h ago"

    def test_styles(self):
        assert ago(10_800, style="short") == "3 hr. ago"
        assert ago(10_800, style="narrow") == "3h ago"
        assert ago(10_800, style=FormatStyle.AUTO) == "3 hours ago"


class TestCompact:
    """Tests for short mode."""

    def test_future(self):
        assert ago(-3 * 86_400, short=True) == "in 3d"

    def test_labels(self):
        assert ago(7_200, short=True, short_labels={"hour": " hrs"}) == "2 hrs ago"

    def test_suffix(self):
        assert ago(300, short=True, suffix="") == "5m"


class TestLocales:
    """Tests for localized output."""

    def test_french_months(self):
        assert ago(7 * 2_592_000, locale="fr") == "il y a 7 mois"

    def test_priority_list(self):
        assert ago(7_200, locale=["??", "de"]) == "vor 2 Stunden"

    def test_malformed_locale_uses_english(self):
        assert ago(7_200, locale="not a locale") == "2 hours ago"

    def test_unsupported_language_uses_english(self):
        assert ago(0, locale="zz") == "just now"
        assert ago(86_400, locale="zz") == "yesterday"
        assert ago(7_200, locale=["zz", "fr"]) == "il y a 2 heures"

    def test_russian_plurals(self):
        assert ago(3 * 3_600, locale="ru") == "3 часа назад"
        assert ago(5 * 3_600, locale="ru") == "5 часов назад"


class TestAbsolute:
    """Tests for the calendar date fallback."""

    def test_disabled(self):
        assert ago(63_072_000, absolute_after=False) == "2 years ago"

    def test_custom_threshold(self):
        assert ago(7_200, absolute_after=3_600) == "Dec 31, 2024"

    def test_wins_over_just_now(self):
        assert ago(0, absolute_after=0) == "Jan 1, 2025"

    def test_locale(self):
        assert ago(63_072_000, locale="de") == "2. Jan. 2023"

    def test_time_zone(self):
        value = datetime(2023, 1, 2, 3, 0, tzinfo=timezone.utc)
        assert format_relative_time(value, now=NOW, time_zone="America/New_York") == "Jan 1, 2023"

    def test_display_options(self):
        options = FormatOptions.from_dict({"absolute_format": {"month": "long", "weekday": "long"}})
        assert format_relative_time(NOW - timedelta(days=730), options, now=NOW) == "Monday, January 2, 2023"

    def test_custom_formatter(self):
        result = ago(63_072_000, absolute_formatter=lambda instant, locale: instant.strftime("%Y/%m/%d"))
        assert result == "2023/01/02"

    def test_custom_formatter_uses_time_zone(self):
        result = ago(
            63_072_000,
            time_zone="America/New_York",
            absolute_formatter=lambda instant, locale: instant.strftime("%Y/%m/%d %H:%M"),
        )
        assert result == "2023/01/01 19:00"

    @pytest.mark.parametrize(
        "locale,expected",
        [("ja", "2023年1月2日"), ("ko", "2023년 1월 2일"), ("zh", "2023年1月2日")],
    )
    def test_east_asian_locales(self, locale, expected):
        assert format_relative_time("2023-01-02T00:00:00Z", now=NOW_ISO, locale=locale) == expected


class TestTemplate:
    """Tests for templated output."""

    def test_past(self):
        result = ago(300, template="{value}|{unit}|{direction}|{abs}|{phrase}|{other}")
        assert result == "5|minute|past|5|5 minutes ago|{other}"

    def test_future(self):
        assert ago(-3_600, template="{value} {unit} {direction}") == "-1 hour future"

    def test_just_now(self):
        assert ago(0, template="[{unit}] {phrase}") == "[now] just now"

    def test_date(self):
        assert ago(300, template="{phrase} ({date})") == "5 minutes ago (Dec 31, 2024)"


class TestOptionsAndCache:
    """Tests for option sources, cache and backend injection."""

    def test_options_mapping(self):
        value = NOW - timedelta(hours=2)
        assert format_relative_time(value, {"short": True, "now": NOW_ISO}) == "2h ago"

    def test_options_object_with_overrides(self):
        options = FormatOptions(short=True)
        value = NOW - timedelta(hours=2)
        assert format_relative_time(value, options, now=NOW, short=False) == "2 hours ago"

    def test_injected_cache(self):
        cache = FormatterCache(max_size=5)
        format_relative_time(NOW - timedelta(hours=2), now=NOW, cache=cache)
        assert "rel:en:long:auto" in cache
        assert get_default_cache().size == 0

    def test_default_cache(self):
        ago(7_200)
        assert "rel:en:long:auto" in get_default_cache()
        clear_cache()
        assert get_default_cache().size == 0

    def test_cache_size_resizes_default_cache(self):
        ago(7_200, cache_size=5)
        assert get_default_cache().max_size == 5

    def test_injected_backend(self):
        class UpperBackend:
            def format_relative(self, value, unit, locale, style=FormatStyle.LONG, numeric=NumericMode.AUTO):
                return f"{value:+d} {unit.value}".upper()

            def format_absolute(self, instant, locale, display=None, time_zone=None):
                return instant.isoformat()

        backend = UpperBackend()
        assert format_relative_time(NOW - timedelta(hours=2), now=NOW, backend=backend) == "-2 HOUR"
        assert format_relative_time(NOW + timedelta(hours=2), now=NOW, backend=backend) == "+2 HOUR"

    def test_time_ago_alias(self):
        value = NOW - timedelta(minutes=5)
        assert time_ago(value, now=NOW) == format_relative_time(value, now=NOW)
        assert time_ago(value, {"short": True}, now=NOW) == "5m ago"

    def test_time_unit_enum_accepted(self):
        assert ago(63_072_000, max_unit=TimeUnit.MONTH, absolute_after=False) == "24 months ago"
