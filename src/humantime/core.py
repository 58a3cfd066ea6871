"""Relative time formatting entry point."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Mapping

from humantime.cache import FormatterCache
from humantime.difference import day_offset, elapsed_seconds, parse_instant, select_unit
from humantime.exceptions import InvalidDateError
from humantime.formatters import LocaleBackend
from humantime.options import FormatOptions, resolve_options
from humantime.phrase import Phrase, PhraseFormatter
from humantime.protocols import FormattingBackend
from humantime.units import TimeUnit

logger = logging.getLogger(__name__)

INVALID_DATE = "Invalid date"


def format_relative_time(
    value: Any,
    options: FormatOptions | Mapping[str, Any] | None = None,
    *,
    cache: FormatterCache | None = None,
    backend: FormattingBackend | None = None,
    **overrides: Any,
) -> str:
    """Format an instant relative to now.

    Checks are applied in order: calendar date fallback, "just now",
    "yesterday"/"today"/"tomorrow", then the largest fitting unit.

    Args:
        value: Epoch milliseconds, ISO 8601 string, datetime or date
        options: FormatOptions or a mapping of option values
        cache: Formatter cache; defaults to the shared cache
        backend: Locale formatting backend; defaults to LocaleBackend
        **overrides: Individual option values

    Returns:
        The phrase, "" when value is None or empty, or "Invalid date" when
        value cannot be parsed

    Raises:
        ConfigurationError: If the options are invalid

    Example:
        >>> format_relative_time("2024-12-31T23:55:00Z", now="2025-01-01T00:00:00Z")
        '5 minutes ago'
        >>> format_relative_time(time.time() * 1000 - 7200_000, short=True)
        '2h ago'
    """
    resolved = resolve_options(options, cache=cache, **overrides)

    if value is None or (isinstance(value, str) and value == ""):
        return ""

    try:
        instant = parse_instant(value)
    except InvalidDateError as e:
        logger.debug("%s", e)
        return INVALID_DATE

    now = resolved.now if resolved.now is not None else datetime.now(timezone.utc)
    if backend is None:
        backend = LocaleBackend(cache)

    formatter = PhraseFormatter(resolved, backend)
    phrase = _describe(formatter, instant, elapsed_seconds(instant, now))

    if resolved.template is not None:
        return formatter.apply_template(resolved.template, phrase, instant)
    return phrase.text


def _describe(formatter: PhraseFormatter, instant: datetime, diff: float) -> Phrase:
    options = formatter.options
    past = diff >= 0
    selection = select_unit(diff, options)

    if options.absolute_enabled and abs(diff) >= options.absolute_after:
        if selection is None:
            return Phrase(formatter.absolute(instant), 0, TimeUnit.NOW, past)
        return Phrase(formatter.absolute(instant), selection.value, selection.unit, past)

    if abs(diff) <= options.just_now_threshold:
        return Phrase(formatter.just_now(), 0, TimeUnit.NOW, past)

    offset = day_offset(diff, options)
    if offset is not None:
        return Phrase(formatter.day(offset), offset, TimeUnit.DAY, past)

    if selection is not None:
        return Phrase(formatter.relative(selection), selection.value, selection.unit, past)

    return Phrase(formatter.just_now(), 0, TimeUnit.NOW, past)


def time_ago(
    value: Any,
    options: FormatOptions | Mapping[str, Any] | None = None,
    **kwargs: Any,
) -> str:
    """Alias of :func:`format_relative_time`."""
    return format_relative_time(value, options, **kwargs)


__all__ = [
    "INVALID_DATE",
    "format_relative_time",
    "time_ago",
]
