"""Culture identifier utilities.

Centralizes culture id normalization used throughout the codebase.
Provides canonical culture handling to ensure consistent registry keys and lookups,
plus Babel-backed display names for packs that do not declare them.

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
from typing import TYPE_CHECKING

from langpacks.constants import FALLBACK_CULTURE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "get_display_names",
    "get_system_culture",
    "normalize_culture_id",
    "to_posix",
]


def normalize_culture_id(culture_id: str) -> str:
    """Convert a culture identifier to its canonical registry key.

    Culture identifiers are case-insensitive and may arrive in BCP-47
    ("en-US"), POSIX ("en_US") or environment ("en_US.UTF-8") spelling.
    All of them map to the same lowercase, hyphenated key.

    Args:
        culture_id: Culture identifier in any common spelling

    Returns:
        Canonical key (e.g., "en-us"); empty string for blank input

    Example:
        >>> normalize_culture_id("en_US.UTF-8")
        'en-us'
        >>> normalize_culture_id(" pt-BR ")
        'pt-br'
    """
    code = culture_id.strip().split(".", 1)[0].split("@", 1)[0]
    return code.replace("_", "-").lower()


def to_posix(culture_id: str) -> str:
    """Convert a culture identifier to the POSIX form Babel parses.

    Babel expects the region in upper case ("en_US"); the canonical key is
    lowercase, so the region is restored here.

    Example:
        >>> to_posix("en-us")
        'en_US'
        >>> to_posix("zh-hans-cn")
        'zh_Hans_CN'
    """
    parts = normalize_culture_id(culture_id).split("-")
    converted = [parts[0]]
    for part in parts[1:]:
        if len(part) == 4:
            converted.append(part.title())
        elif len(part) in (2, 3) and part.isalpha():
            converted.append(part.upper())
        else:
            converted.append(part)
    return "_".join(converted)


@functools.lru_cache(maxsize=128)
def get_babel_locale(culture_id: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the culture id once and caches the result.

    Thread-safe via lru_cache internal locking.

    Args:
        culture_id: Culture identifier (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If CLDR has no data for the culture
        ValueError: If the identifier is malformed
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(to_posix(culture_id))


def clear_locale_cache() -> None:
    """Clear the get_babel_locale cache."""
    get_babel_locale.cache_clear()


def get_display_names(culture_id: str) -> tuple[str, str]:
    """Look up native and English display names for a culture.

    Args:
        culture_id: Culture identifier

    Returns:
        Tuple of (native name, English name). Cultures unknown to CLDR
        report the identifier itself for both names.

    Example:
        >>> get_display_names("de-de")
        ('Deutsch (Deutschland)', 'German (Germany)')
    """
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    try:
        locale = get_babel_locale(culture_id)
    except (UnknownLocaleError, ValueError, TypeError):
        return (culture_id, culture_id)

    native = locale.get_display_name() or culture_id
    english = locale.get_display_name("en") or culture_id
    return (native, english)


def get_system_culture() -> str:
    """Detect the host culture from the OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    Filters out "C" and "POSIX" pseudo-locales.

    Returns:
        Canonical culture id (e.g., "de-de"), or FALLBACK_CULTURE when the
        host does not declare one.

    Example:
        >>> import os
        >>> os.environ['LANG'] = 'de_DE.UTF-8'
        >>> get_system_culture()
        'de-de'
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
        if system_locale and system_locale not in ("C", "POSIX"):
            return normalize_culture_id(system_locale)
    except (ValueError, AttributeError):
        pass

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value and value not in ("C", "POSIX", "C.UTF-8"):
            return normalize_culture_id(value)

    return FALLBACK_CULTURE
