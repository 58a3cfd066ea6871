"""Phrase rendering.

PhraseFormatter turns a unit selection into text in one of several modes:

- compact: "5m ago", "in 3d"
- long: localized, pluralized phrases through the formatting backend
- absolute: calendar dates ("Jan 2, 2023")
- just now: "just now" / "now", or the localized zero-distance phrase
- template: user template filled from a rendered Phrase
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime

from humantime.difference import UnitSelection
from humantime.formatters import load_time_zone
from humantime.options import FormatOptions
from humantime.protocols import FormattingBackend, NumericMode
from humantime.units import TimeUnit

JUST_NOW = "just now"
NOW = "now"

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


@dataclass(frozen=True)
class Phrase:
    """A rendered phrase and the quantities behind it.

    Attributes:
        text: Rendered text
        value: Signed count (positive = past)
        unit: Unit of the count
        past: Whether the instant lies in the past
    """
    text: str
    value: int
    unit: TimeUnit
    past: bool

    @property
    def direction(self) -> str:
        return "past" if self.past else "future"


class PhraseFormatter:
    """Renders phrases for one set of resolved options."""

    def __init__(self, options: FormatOptions, backend: FormattingBackend) -> None:
        self.options = options
        self.backend = backend
        self.locale = options.locale_info

    def relative(self, selection: UnitSelection) -> str:
        if self.options.short:
            return self.compact(selection)
        return self.long(selection)

    def compact(self, selection: UnitSelection) -> str:
        label = self.options.label_for(selection.unit)
        if selection.is_past:
            return f"{selection.magnitude}{label}{self.options.suffix}"
        return f"{self.options.prefix}{selection.magnitude}{label}"

    def long(self, selection: UnitSelection) -> str:
        # The backend uses negative values for the past
        return self.backend.format_relative(
            -selection.value,
            selection.unit,
            self.locale,
            self.options.style,
            self.options.numeric,
        )

    def day(self, offset: int) -> str:
        """Render "yesterday" (1), "today" (0) or "tomorrow" (-1)."""
        return self.backend.format_relative(
            -offset, TimeUnit.DAY, self.locale, self.options.style, NumericMode.AUTO
        )

    def absolute(self, instant: datetime) -> str:
        if self.options.absolute_formatter is not None:
            if self.options.time_zone is not None:
                instant = instant.astimezone(load_time_zone(self.options.time_zone))
            return self.options.absolute_formatter(instant, self.locale)
        return self.backend.format_absolute(
            instant, self.locale, self.options.absolute_format, self.options.time_zone
        )

    def just_now(self) -> str:
        if self.locale.is_english:
            return NOW if self.options.just_now_threshold == 0 else JUST_NOW
        return self.backend.format_relative(
            0, TimeUnit.SECOND, self.locale, self.options.style, self.options.numeric
        )

    def apply_template(self, template: str, phrase: Phrase, instant: datetime) -> str:
        """Fill ``template`` from a rendered phrase.

        Placeholders: {value} (signed, past positive), {unit},
        {direction}, {abs}, {phrase} and {date}. Anything else in braces is
        left as written.
        """
        values = {
            "value": str(phrase.value),
            "unit": phrase.unit.value,
            "direction": phrase.direction,
            "abs": str(abs(phrase.value)),
            "phrase": phrase.text,
        }
        if "{date}" in template:
            values["date"] = self.absolute(instant)

        return _PLACEHOLDER.sub(lambda m: values.get(m.group(1), m.group(0)), template)


__all__ = [
    "JUST_NOW",
    "NOW",
    "Phrase",
    "PhraseFormatter",
]
