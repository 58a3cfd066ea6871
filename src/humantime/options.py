"""Formatting options.

FormatOptions is the immutable configuration of a formatting call. Every
field has a default, so an empty configuration is always valid.
resolve_options() overlays user values onto the defaults, coerces string
values into enums and validates the result.

Example:
    >>> options = resolve_options(locale="fr", rounding="floor")
    >>> options.rounding
    <RoundingMode.FLOOR: 'floor'>
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, fields, replace
from datetime import datetime
from typing import Any, Callable, Mapping, Sequence

from humantime.cache import FormatterCache, get_default_cache
from humantime.difference import parse_instant
from humantime.exceptions import (
    ConfigurationError,
    InvalidDateError,
    InvalidUnitRangeError,
    UnknownUnitError,
)
from humantime.formatters import load_time_zone
from humantime.locale import DEFAULT_LOCALE, LocaleInfo, resolve_locale
from humantime.locale_data import supported_languages
from humantime.protocols import DateDisplayOptions, FormatStyle, NumericMode, RoundingMode
from humantime.units import DEFAULT_SHORT_LABELS, TimeUnit

DEFAULT_JUST_NOW_THRESHOLD = 5
DEFAULT_ABSOLUTE_AFTER = 31_536_000  # one year

AbsoluteFormatter = Callable[[datetime, LocaleInfo], str]


@dataclass(frozen=True)
class FormatOptions:
    """Configuration for relative time formatting.

    Attributes:
        locale: Locale tag, LocaleInfo, or priority-ordered list of tags
        short: Use compact output ("5m ago")
        style: Length of localized phrases
        numeric: Whether words like "yesterday" may replace numbers
        just_now_threshold: Seconds (inclusive) rendered as "just now"
        rounding: How fractional unit counts are rounded
        max_unit: Largest unit that may be selected
        min_unit: Smallest unit that may be selected
        short_labels: Per-unit overrides of the compact labels
        now: Reference instant; None means the current time
        absolute_after: Seconds after which a calendar date is shown
            instead of a relative phrase; False disables the fallback
        absolute_format: Fields shown in calendar dates
        absolute_formatter: Custom calendar date renderer
        time_zone: IANA zone used for calendar dates
        template: Output template with {value}, {unit}, {direction},
            {abs}, {phrase} and {date} placeholders
        prefix: Compact-mode prefix for future values
        suffix: Compact-mode suffix for past values
        cache_size: Requested formatter cache capacity
    """
    locale: str | Sequence[str] | LocaleInfo = DEFAULT_LOCALE
    short: bool = False
    style: FormatStyle = FormatStyle.LONG
    numeric: NumericMode = NumericMode.AUTO
    just_now_threshold: float = DEFAULT_JUST_NOW_THRESHOLD
    rounding: RoundingMode = RoundingMode.ROUND
    max_unit: TimeUnit = TimeUnit.YEAR
    min_unit: TimeUnit = TimeUnit.SECOND
    short_labels: Mapping[Any, str] = field(default_factory=dict)
    now: Any = None
    absolute_after: float | bool = DEFAULT_ABSOLUTE_AFTER
    absolute_format: DateDisplayOptions = field(default_factory=DateDisplayOptions)
    absolute_formatter: AbsoluteFormatter | None = None
    time_zone: str | None = None
    template: str | None = None
    prefix: str = "in "
    suffix: str = " ago"
    cache_size: int | None = None

    @property
    def locale_info(self) -> LocaleInfo:
        """The resolved locale."""
        return resolve_locale(self.locale, supported=supported_languages())

    @property
    def absolute_enabled(self) -> bool:
        return self.absolute_after is not False

    def label_for(self, unit: TimeUnit) -> str:
        """Compact label for a unit, honoring overrides."""
        label = self.short_labels.get(unit)
        if label is None:
            label = self.short_labels.get(unit.value, DEFAULT_SHORT_LABELS[unit])
        return label

    def validate(self) -> None:
        """Validate option values.

        Raises:
            InvalidUnitRangeError: If max_unit is smaller than min_unit
            ConfigurationError: If any other value is invalid
        """
        for bound in (self.max_unit, self.min_unit):
            if not isinstance(bound, TimeUnit) or bound == TimeUnit.NOW:
                raise InvalidUnitRangeError(_unit_name(self.max_unit), _unit_name(self.min_unit))
        if self.max_unit.rank > self.min_unit.rank:
            raise InvalidUnitRangeError(self.max_unit.value, self.min_unit.value)

        if not _is_number(self.just_now_threshold) or self.just_now_threshold < 0:
            raise ConfigurationError(
                f"just_now_threshold must be a non-negative number, got {self.just_now_threshold!r}"
            )

        if self.absolute_after is not False:
            if not _is_number(self.absolute_after) or self.absolute_after < 0:
                raise ConfigurationError(
                    f"absolute_after must be a non-negative number or False, got {self.absolute_after!r}"
                )

        if self.cache_size is not None:
            if isinstance(self.cache_size, bool) or not isinstance(self.cache_size, int) or self.cache_size <= 0:
                raise ConfigurationError(f"cache_size must be a positive integer, got {self.cache_size!r}")

        if self.template is not None and not isinstance(self.template, str):
            raise ConfigurationError("template must be a string")

        if self.absolute_formatter is not None and not callable(self.absolute_formatter):
            raise ConfigurationError("absolute_formatter must be callable")

        try:
            self.absolute_format.validate()
        except ValueError as e:
            raise ConfigurationError(f"Invalid absolute_format: {e}") from e

        if self.time_zone is not None:
            load_time_zone(self.time_zone)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FormatOptions":
        """Create options from plain configuration data.

        None values are treated as absent. ``absolute_format`` may be a
        mapping of DateDisplayOptions fields.

        Raises:
            ConfigurationError: If a key is not a known option
        """
        values = _drop_absent(data)
        display = values.get("absolute_format")
        if isinstance(display, Mapping):
            try:
                values["absolute_format"] = DateDisplayOptions(**display)
            except TypeError as e:
                raise ConfigurationError(f"Invalid absolute_format: {e}") from e
        return cls(**values)


# ==============================================================================
# Resolution
# ==============================================================================

_OPTION_NAMES = frozenset(f.name for f in fields(FormatOptions))


def resolve_options(
    options: FormatOptions | Mapping[str, Any] | None = None,
    *,
    cache: FormatterCache | None = None,
    **overrides: Any,
) -> FormatOptions:
    """Build fully resolved, validated options.

    Args:
        options: Base options (FormatOptions or mapping); None uses defaults
        cache: Cache resized when ``cache_size`` is requested; defaults to
            the shared formatter cache
        **overrides: Individual option values applied on top of ``options``

    Returns:
        Resolved FormatOptions with enum fields, a LocaleInfo locale,
        a datetime ``now`` (or None) and unit-keyed short labels

    Raises:
        ConfigurationError: If the options are invalid
    """
    if options is None:
        base = FormatOptions()
    elif isinstance(options, FormatOptions):
        base = options
    elif isinstance(options, Mapping):
        base = FormatOptions.from_dict(options)
    else:
        raise ConfigurationError(f"options must be FormatOptions or a mapping, got {type(options).__name__}")

    if overrides:
        base = replace(base, **_drop_absent(overrides))

    resolved = replace(
        base,
        locale=resolve_locale(base.locale, supported=supported_languages()),
        style=_coerce_enum(FormatStyle, base.style, "style"),
        numeric=_coerce_enum(NumericMode, base.numeric, "numeric"),
        rounding=_coerce_enum(RoundingMode, base.rounding, "rounding"),
        max_unit=_coerce_bound(base.max_unit, base),
        min_unit=_coerce_bound(base.min_unit, base),
        short_labels=_resolve_labels(base.short_labels),
        now=_resolve_now(base.now),
    )
    resolved.validate()

    if resolved.cache_size is not None:
        target = cache if cache is not None else get_default_cache()
        if target.max_size != resolved.cache_size:
            target.resize(resolved.cache_size)

    return resolved


def _drop_absent(data: Mapping[str, Any]) -> dict[str, Any]:
    unknown = sorted(set(data) - _OPTION_NAMES)
    if unknown:
        raise ConfigurationError(f"Unknown option(s): {', '.join(unknown)}", details={"unknown": unknown})
    return {key: value for key, value in data.items() if value is not None}


def _coerce_enum(enum_cls: type, value: Any, name: str) -> Any:
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value.strip().lower())
        except ValueError:
            pass
    allowed = ", ".join(member.value for member in enum_cls)
    raise ConfigurationError(f"Invalid {name} {value!r}; expected one of: {allowed}")


def _coerce_bound(value: Any, base: FormatOptions) -> TimeUnit:
    try:
        return TimeUnit.coerce(value)
    except UnknownUnitError as e:
        raise InvalidUnitRangeError(_unit_name(base.max_unit), _unit_name(base.min_unit)) from e


def _unit_name(value: Any) -> str:
    return value.value if isinstance(value, TimeUnit) else str(value)


def _resolve_labels(labels: Mapping[Any, str]) -> dict[TimeUnit, str]:
    resolved = dict(DEFAULT_SHORT_LABELS)
    for unit, label in labels.items():
        try:
            resolved[TimeUnit.coerce(unit)] = str(label)
        except UnknownUnitError as e:
            raise ConfigurationError(f"Unknown unit in short_labels: {unit!r}") from e
    return resolved


def _resolve_now(value: Any) -> datetime | None:
    if value is None:
        return None
    try:
        return parse_instant(value)
    except InvalidDateError as e:
        raise ConfigurationError(f"Invalid reference time now={value!r}") from e


def _is_number(value: Any) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


__all__ = [
    "DEFAULT_JUST_NOW_THRESHOLD",
    "DEFAULT_ABSOLUTE_AFTER",
    "FormatOptions",
    "resolve_options",
]
