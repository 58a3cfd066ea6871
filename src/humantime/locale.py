"""Locale identifiers.

Parses BCP 47 style tags ("en", "en-US", "en_GB", "zh-Hans-CN") and checks
that a requested locale is well formed before it reaches a formatter.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Container, Sequence

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"

# language[-script][-region][-variant...]
_LOCALE_PATTERN = re.compile(
    r"^[a-zA-Z]{2,3}"
    r"(?:[-_][a-zA-Z]{4})?"
    r"(?:[-_](?:[a-zA-Z]{2}|\d{3}))?"
    r"(?:[-_](?:[a-zA-Z0-9]{5,8}|\d[a-zA-Z0-9]{3}))*$"
)


@dataclass(frozen=True)
class LocaleInfo:
    """Parsed locale identifier.

    Attributes:
        language: ISO 639 language code (e.g., "en", "ko")
        region: ISO 3166-1 region code (e.g., "US", "GB")
        script: ISO 15924 script code (e.g., "Latn", "Hans")
        variant: Locale variant
    """
    language: str
    region: str | None = None
    script: str | None = None
    variant: str | None = None

    @property
    def tag(self) -> str:
        """Get BCP 47 language tag."""
        parts = [self.language]
        if self.script:
            parts.append(self.script)
        if self.region:
            parts.append(self.region)
        if self.variant:
            parts.append(self.variant)
        return "-".join(parts)

    @property
    def is_english(self) -> bool:
        return self.language == "en"

    def lookup_keys(self) -> tuple[str, ...]:
        """Keys to try against locale data tables, most specific first."""
        if self.region:
            return (f"{self.language}_{self.region}", self.language)
        return (self.language,)

    @classmethod
    def parse(cls, tag: str) -> "LocaleInfo":
        """Parse a locale tag.

        Supports formats:
        - Simple: "en", "ko"
        - With region: "en-US", "ko-KR", "en_US", "ko_KR"
        - With script: "zh-Hans", "zh-Hant"
        - Full: "zh-Hans-CN", "sr-Latn-RS"

        Args:
            tag: Locale tag string

        Returns:
            Parsed LocaleInfo
        """
        parts = tag.strip().replace("_", "-").split("-")

        language = parts[0].lower()
        region = None
        script = None
        variant = None

        for part in parts[1:]:
            if len(part) == 4 and part.isalpha():
                script = part.capitalize()
            elif len(part) == 2 and part.isalpha():
                region = part.upper()
            elif len(part) == 3 and part.isdigit():
                # UN M.49 region code
                region = part
            else:
                variant = part.lower()

        return cls(language=language, region=region, script=script, variant=variant)

    def __str__(self) -> str:
        return self.tag


def is_well_formed_locale(tag: object) -> bool:
    """Check whether a value is a well-formed locale identifier."""
    return isinstance(tag, str) and bool(_LOCALE_PATTERN.match(tag.strip()))


def resolve_locale(
    locale: str | LocaleInfo | Sequence[str] | None,
    default: str = DEFAULT_LOCALE,
    supported: Container[str] | None = None,
) -> LocaleInfo:
    """Resolve a requested locale (or priority list of locales).

    The first well-formed entry wins. When nothing usable is requested
    the default locale is substituted; this is never an error.

    Args:
        locale: Locale tag, LocaleInfo, or priority-ordered list of tags
        default: Locale used when the request is unusable
        supported: Languages that have locale data; when given, entries
            in other languages are skipped

    Returns:
        Resolved LocaleInfo
    """
    if isinstance(locale, LocaleInfo):
        if supported is None or locale.language in supported:
            return locale
        candidates: Sequence[object] = ()
    elif locale is None:
        candidates = ()
    elif isinstance(locale, (list, tuple)):
        candidates = tuple(locale)
    else:
        candidates = (locale,)

    for candidate in candidates:
        if is_well_formed_locale(candidate):
            info = LocaleInfo.parse(candidate)  # type: ignore[arg-type]
            if supported is None or info.language in supported:
                return info

    if locale is not None:
        logger.debug("Unusable locale %r, falling back to %s", locale, default)
    return LocaleInfo.parse(default)


__all__ = [
    "DEFAULT_LOCALE",
    "LocaleInfo",
    "is_well_formed_locale",
    "resolve_locale",
]
