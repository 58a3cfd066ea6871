"""Tests for phrase rendering."""

from datetime import datetime, timezone

import pytest

from humantime.difference import UnitSelection
from humantime.options import resolve_options
from humantime.phrase import JUST_NOW, NOW, Phrase, PhraseFormatter
from humantime.protocols import FormatStyle, NumericMode
from humantime.units import TimeUnit

INSTANT = datetime(2023, 1, 2, tzinfo=timezone.utc)


class RecordingBackend:
    """Backend that records calls and returns predictable text."""

    def __init__(self):
        self.calls = []

    def format_relative(self, value, unit, locale, style=FormatStyle.LONG, numeric=NumericMode.AUTO):
        self.calls.append(("relative", value, unit, locale.tag, style, numeric))
        return f"relative({value} {unit.value})"

    def format_absolute(self, instant, locale, display=None, time_zone=None):
        self.calls.append(("absolute", instant, locale.tag, time_zone))
        return f"absolute({instant.date().isoformat()})"


@pytest.fixture
def backend() -> RecordingBackend:
    return RecordingBackend()


def formatter(backend, **overrides) -> PhraseFormatter:
    return PhraseFormatter(resolve_options(**overrides), backend)


class TestCompact:
    """Tests for compact output."""

    def test_past(self, backend):
        selection = UnitSelection(unit=TimeUnit.HOUR, value=2, raw=2.0)
        assert formatter(backend, short=True).relative(selection) == "2h ago"

    def test_future(self, backend):
        selection = UnitSelection(unit=TimeUnit.DAY, value=-3, raw=-3.0)
        assert formatter(backend, short=True).relative(selection) == "in 3d"

    def test_month_label(self, backend):
        selection = UnitSelection(unit=TimeUnit.MONTH, value=4, raw=4.0)
        assert formatter(backend).compact(selection) == "4mo ago"

    def test_label_overrides(self, backend):
        selection = UnitSelection(unit=TimeUnit.DAY, value=-3, raw=-3.0)
        phrases = formatter(backend, short_labels={"day": " days"})
        assert phrases.compact(selection) == "in 3 days"

    def test_prefix_and_suffix(self, backend):
        phrases = formatter(backend, prefix="+", suffix=" back")
        assert phrases.compact(UnitSelection(TimeUnit.MINUTE, 5, 5.0)) == "5m back"
        assert phrases.compact(UnitSelection(TimeUnit.MINUTE, -5, -5.0)) == "+5m"

    def test_compact_does_not_use_backend(self, backend):
        formatter(backend, short=True).relative(UnitSelection(TimeUnit.HOUR, 2, 2.0))
        assert backend.calls == []


class TestLong:
    """Tests for backend-rendered output."""

    def test_value_is_negated_for_backend(self, backend):
        phrases = formatter(backend, locale="fr", style="narrow", numeric="always")
        result = phrases.relative(UnitSelection(unit=TimeUnit.HOUR, value=3, raw=3.2))

        assert result == "relative(-3 hour)"
        assert backend.calls == [
            ("relative", -3, TimeUnit.HOUR, "fr", FormatStyle.NARROW, NumericMode.ALWAYS)
        ]

    def test_day_word_forces_auto_numeric(self, backend):
        phrases = formatter(backend)
        phrases.day(1)
        assert backend.calls == [
            ("relative", -1, TimeUnit.DAY, "en", FormatStyle.LONG, NumericMode.AUTO)
        ]


class TestJustNow:
    """Tests for the zero-distance phrase."""

    def test_english(self, backend):
        assert formatter(backend).just_now() == JUST_NOW
        assert formatter(backend, locale="en-AU").just_now() == "just now"

    def test_zero_threshold(self, backend):
        assert formatter(backend, just_now_threshold=0).just_now() == NOW

    def test_other_locales_use_backend(self, backend):
        assert formatter(backend, locale="de").just_now() == "relative(0 second)"

    def test_unsupported_language_uses_english(self, backend):
        assert formatter(backend, locale="zz").just_now() == JUST_NOW
        assert backend.calls == []


class TestAbsolute:
    """Tests for calendar date output."""

    def test_backend(self, backend):
        result = formatter(backend, time_zone="Asia/Tokyo").absolute(INSTANT)
        assert result == "absolute(2023-01-02)"
        assert backend.calls == [("absolute", INSTANT, "en", "Asia/Tokyo")]

    def test_custom_formatter(self, backend):
        phrases = formatter(
            backend,
            absolute_formatter=lambda instant, locale: f"{locale.tag}:{instant:%Y}",
        )
        assert phrases.absolute(INSTANT) == "en:2023"
        assert backend.calls == []

    def test_custom_formatter_receives_zoned_instant(self, backend):
        phrases = formatter(
            backend,
            time_zone="America/New_York",
            absolute_formatter=lambda instant, locale: f"{instant:%Y-%m-%d %H:%M}",
        )
        assert phrases.absolute(INSTANT) == "2023-01-01 19:00"


class TestTemplate:
    """Tests for template substitution."""

    def test_placeholders(self, backend):
        phrase = Phrase(text="3 hours ago", value=3, unit=TimeUnit.HOUR, past=True)
        result = formatter(backend).apply_template(
            "{value}|{abs}|{unit}|{direction}|{phrase}", phrase, INSTANT
        )
        assert result == "3|3|hour|past|3 hours ago"

    def test_future_direction(self, backend):
        phrase = Phrase(text="in 2 days", value=-2, unit=TimeUnit.DAY, past=False)
        result = formatter(backend).apply_template("{value} {abs} {direction}", phrase, INSTANT)
        assert result == "-2 2 future"

    def test_unknown_placeholders_are_untouched(self, backend):
        phrase = Phrase(text="now", value=0, unit=TimeUnit.NOW, past=True)
        result = formatter(backend).apply_template("{phrase} {missing} {}", phrase, INSTANT)
        assert result == "now {missing} {}"

    def test_date_placeholder(self, backend):
        phrase = Phrase(text="2 years ago", value=2, unit=TimeUnit.YEAR, past=True)
        result = formatter(backend).apply_template("{phrase} ({date})", phrase, INSTANT)
        assert result == "2 years ago (absolute(2023-01-02))"

    def test_date_is_only_rendered_when_used(self, backend):
        phrase = Phrase(text="2 years ago", value=2, unit=TimeUnit.YEAR, past=True)
        formatter(backend).apply_template("{phrase}", phrase, INSTANT)
        assert backend.calls == []
