"""Exception hierarchy for humantime.

Configuration problems are programmer errors and propagate to the caller.
Bad input values never escape :func:`humantime.format_relative_time`; they
are reported through sentinel strings instead.
"""

from __future__ import annotations

from typing import Any


class HumanTimeError(Exception):
    """Base exception for all humantime errors.

    Attributes:
        message: Error message
        details: Additional error details
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class ConfigurationError(HumanTimeError, ValueError):
    """Raised when formatting options are invalid or contradictory."""


class InvalidUnitRangeError(ConfigurationError):
    """Raised when ``max_unit`` is a smaller duration than ``min_unit``."""

    def __init__(self, max_unit: str, min_unit: str) -> None:
        super().__init__(
            f"max_unit '{max_unit}' must not be smaller than min_unit '{min_unit}'",
            details={"max_unit": max_unit, "min_unit": min_unit},
        )
        self.max_unit = max_unit
        self.min_unit = min_unit


class InvalidDateError(HumanTimeError, ValueError):
    """Raised when a value cannot be interpreted as a point in time."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Cannot parse {value!r} as a date", details={"value": repr(value)})
        self.value = value


class UnknownUnitError(HumanTimeError, KeyError):
    """Raised when a unit name is not recognized."""

    def __init__(self, unit: Any) -> None:
        super().__init__(f"Unknown time unit: {unit!r}", details={"unit": repr(unit)})
        self.unit = unit


__all__ = [
    "HumanTimeError",
    "ConfigurationError",
    "InvalidUnitRangeError",
    "InvalidDateError",
    "UnknownUnitError",
]
