"""humantime - Human-readable relative time phrases ("5 minutes ago", "yesterday", "in 3 days")."""

from humantime.cache import CacheStats, FormatterCache, clear_cache, get_default_cache
from humantime.core import INVALID_DATE, format_relative_time, time_ago
from humantime.exceptions import (
    ConfigurationError,
    HumanTimeError,
    InvalidDateError,
    InvalidUnitRangeError,
    UnknownUnitError,
)
from humantime.formatters import DateTimeFormatter, LocaleBackend, RelativeTimeFormatter
from humantime.locale import LocaleInfo
from humantime.options import FormatOptions, resolve_options
from humantime.protocols import (
    DateDisplayOptions,
    FormatStyle,
    FormattingBackend,
    NumericMode,
    RoundingMode,
)
from humantime.units import TimeUnit, get_unit_seconds, get_units, parse_duration

# Version: Single source of truth from pyproject.toml
try:
    from importlib.metadata import version, PackageNotFoundError

    __version__ = version("humantime")
except PackageNotFoundError:
    # Package not installed (development mode)
    __version__ = "0.0.0.dev"

__all__ = [
    # Core API
    "format_relative_time",
    "time_ago",
    "INVALID_DATE",
    "parse_duration",
    "get_units",
    "get_unit_seconds",
    "clear_cache",
    # Configuration
    "FormatOptions",
    "resolve_options",
    "DateDisplayOptions",
    "FormatStyle",
    "NumericMode",
    "RoundingMode",
    "TimeUnit",
    "LocaleInfo",
    # Cache
    "FormatterCache",
    "CacheStats",
    "get_default_cache",
    # Backend
    "FormattingBackend",
    "LocaleBackend",
    "RelativeTimeFormatter",
    "DateTimeFormatter",
    # Errors
    "HumanTimeError",
    "ConfigurationError",
    "InvalidUnitRangeError",
    "InvalidDateError",
    "UnknownUnitError",
]
