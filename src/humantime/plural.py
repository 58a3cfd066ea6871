"""CLDR cardinal plural rules.

Covers the languages that ship relative-time patterns. Languages without a
registered rule use the English rule.

Usage:
    from humantime.plural import get_plural_category

    get_plural_category(1, "en")   # PluralCategory.ONE
    get_plural_category(5, "ru")   # PluralCategory.MANY
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

from humantime.locale import LocaleInfo


class PluralCategory(str, Enum):
    """CLDR plural categories.

    Based on Unicode CLDR plural rules:
    https://cldr.unicode.org/index/cldr-spec/plural-rules
    """
    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"


PluralRuleFunc = Callable[[int], PluralCategory]


def _english(n: int) -> PluralCategory:
    # One: i = 1 and v = 0
    return PluralCategory.ONE if n == 1 else PluralCategory.OTHER


def _french(n: int) -> PluralCategory:
    # One: i = 0,1
    return PluralCategory.ONE if n in (0, 1) else PluralCategory.OTHER


def _slavic(n: int) -> PluralCategory:
    # One: i % 10 = 1 and i % 100 != 11
    # Few: i % 10 = 2..4 and i % 100 != 12..14
    # Many: everything else
    i10 = n % 10
    i100 = n % 100
    if i10 == 1 and i100 != 11:
        return PluralCategory.ONE
    if 2 <= i10 <= 4 and not (12 <= i100 <= 14):
        return PluralCategory.FEW
    return PluralCategory.MANY


def _polish(n: int) -> PluralCategory:
    i10 = n % 10
    i100 = n % 100
    if n == 1:
        return PluralCategory.ONE
    if 2 <= i10 <= 4 and not (12 <= i100 <= 14):
        return PluralCategory.FEW
    return PluralCategory.MANY


def _arabic(n: int) -> PluralCategory:
    n100 = n % 100
    if n == 0:
        return PluralCategory.ZERO
    if n == 1:
        return PluralCategory.ONE
    if n == 2:
        return PluralCategory.TWO
    if 3 <= n100 <= 10:
        return PluralCategory.FEW
    if 11 <= n100 <= 99:
        return PluralCategory.MANY
    return PluralCategory.OTHER


def _no_plural(n: int) -> PluralCategory:
    return PluralCategory.OTHER


class PluralRules:
    """Cardinal plural rule registry keyed by language (or language_REGION)."""

    def __init__(self) -> None:
        self._rules: dict[str, PluralRuleFunc] = {}
        for lang in ("en", "de", "nl", "it", "es", "pt", "sv", "da", "nb", "no", "fi", "tr"):
            self._rules[lang] = _english
        self._rules["fr"] = _french
        self._rules["pt_BR"] = _french
        for lang in ("ru", "uk", "sr", "hr", "bs"):
            self._rules[lang] = _slavic
        self._rules["pl"] = _polish
        self._rules["ar"] = _arabic
        for lang in ("ja", "ko", "zh", "vi", "th"):
            self._rules[lang] = _no_plural

    def register(self, language: str, rule: PluralRuleFunc) -> None:
        """Register a custom cardinal rule for a language code."""
        self._rules[language] = rule

    def get_category(self, count: int, locale: LocaleInfo) -> PluralCategory:
        """Get the plural category for an integer count.

        Args:
            count: The number to categorize (sign is ignored)
            locale: Target locale

        Returns:
            Plural category
        """
        for key in locale.lookup_keys():
            rule = self._rules.get(key)
            if rule is not None:
                return rule(abs(count))
        return _english(abs(count))


_plural_rules = PluralRules()


def get_plural_category(count: int, locale: str | LocaleInfo) -> PluralCategory:
    """Get the plural category for a count using the shared rule registry."""
    if isinstance(locale, str):
        locale = LocaleInfo.parse(locale)
    return _plural_rules.get_category(count, locale)


def get_plural_rules() -> PluralRules:
    return _plural_rules


__all__ = [
    "PluralCategory",
    "PluralRules",
    "get_plural_category",
    "get_plural_rules",
]
