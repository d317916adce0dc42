"""In-memory language pack with typed, total lookups.

A LanguagePack is the translation table for one culture: a two-level
mapping from group key to item key to raw string, plus the culture's
identity and display names. Packs are immutable once constructed; loaders
build the table first and hand it to the constructor.

Resolution algorithm (LanguagePack.translate):
    1. Empty group key            -> fallback
    2. Empty item key             -> fallback
    3. Group key not in pack      -> fallback
    4. Item key not in group      -> fallback
    5. Requested type is any      -> raw string
    6. Conversion to type fails   -> fallback
    7. Otherwise                  -> converted value

Every miss is logged at DEBUG level and never raised. A key mapped to ""
is a hit and returns "".

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from langpacks.conversion import ConverterRegistry, convert_string, is_any_type
from langpacks.diagnostics import ConversionError, Diagnostic, ErrorTemplate
from langpacks.locale_utils import (
    get_babel_locale,
    get_display_names,
    get_system_culture,
    normalize_culture_id,
)
from langpacks.localization.types import CultureId, GroupKey, ItemKey, PackData

if TYPE_CHECKING:
    from babel import Locale

__all__ = ["LanguagePack", "create_default_pack"]

logger = logging.getLogger(__name__)


def _freeze(data: PackData) -> Mapping[GroupKey, Mapping[ItemKey, str]]:
    """Copy a two-level table into read-only mapping proxies."""
    return MappingProxyType(
        {
            str(group): MappingProxyType({str(item): value for item, value in items.items()})
            for group, items in data.items()
        }
    )


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class LanguagePack:
    """Translation table for one culture.

    Uses a frozen dataclass with slots: a pack is immutable once built.
    Equality is identity, so a registry lookup returns exactly the pack that
    was registered.

    Attributes:
        culture_id: Culture identifier as declared by the source (e.g., "en-us").
                    May be empty only for packs that are never registered.
        data: Translation table. Copied into read-only mappings at
              construction, so later changes to the argument do not leak in.
        culture_name: Native display name (default: from Babel CLDR)
        english_name: English display name (default: from Babel CLDR)
        version: Free-form version string, if declared
        converters: Converter table for typed lookups (default: built-ins)

    Example:
        >>> pack = LanguagePack("en-us", {"10": {"Header": "Hello", "Count": "42"}})
        >>> pack.translate("10", "Header")
        'Hello'
        >>> pack.translate("10", "Count", 0, int)
        42
        >>> pack.translate("10", "Missing", "x")
        'x'
    """

    culture_id: CultureId
    data: PackData = field(default_factory=dict)
    culture_name: str | None = None
    english_name: str | None = None
    version: str | None = None
    converters: ConverterRegistry | None = None
    _key: str = field(init=False)
    _item_count: int = field(init=False)

    def __post_init__(self) -> None:
        """Freeze the table and fill display names from CLDR when absent."""
        object.__setattr__(self, "data", _freeze(self.data))
        object.__setattr__(self, "_item_count", sum(len(items) for items in self.data.values()))
        object.__setattr__(
            self, "_key", normalize_culture_id(self.culture_id) if self.culture_id else ""
        )
        if self.culture_name is None or self.english_name is None:
            native, english = (
                get_display_names(self.culture_id) if self.culture_id else ("", "")
            )
            if self.culture_name is None:
                object.__setattr__(self, "culture_name", native)
            if self.english_name is None:
                object.__setattr__(self, "english_name", english)

    @classmethod
    def for_culture(cls, culture_id: CultureId) -> LanguagePack:
        """Create an empty pack whose display names come from CLDR."""
        return cls(culture_id)

    def __repr__(self) -> str:
        """Return string representation for debugging.

        Example:
            >>> repr(LanguagePack("en-us", {"10": {"Header": "Hello"}}))
            "LanguagePack(culture_id='en-us', groups=1, items=1)"
        """
        return (
            f"{type(self).__name__}(culture_id={self.culture_id!r}, "
            f"groups={len(self.data)}, items={self._item_count})"
        )

    @property
    def key(self) -> str:
        """Normalized culture id used as the registry key."""
        return self._key

    @property
    def item_count(self) -> int:
        """Total number of items across all groups."""
        return self._item_count

    @property
    def is_empty(self) -> bool:
        """True when the pack holds no items."""
        return self._item_count == 0

    def group_keys(self) -> tuple[GroupKey, ...]:
        """Group keys in source order."""
        return tuple(self.data)

    def item_keys(self, group_key: GroupKey) -> tuple[ItemKey, ...]:
        """Item keys of a group in source order; empty for unknown groups."""
        items = self.data.get(group_key)
        return tuple(items) if items is not None else ()

    def has_item(self, group_key: GroupKey, item_key: ItemKey) -> bool:
        """Check whether (group_key, item_key) is present."""
        items = self.data.get(group_key)
        return items is not None and item_key in items

    def babel_locale(self) -> Locale:
        """Get the Babel Locale for this pack's culture.

        Raises:
            babel.core.UnknownLocaleError: If CLDR has no data for the culture
            ValueError: If the culture id is malformed
        """
        return get_babel_locale(self.culture_id)

    def translate(
        self,
        group_key: GroupKey | None,
        item_key: ItemKey | None,
        fallback: Any = None,
        target_type: object = object,
    ) -> Any:
        """Resolve (group_key, item_key) to a value of target_type.

        Total: missing or non-string keys, unsupported target types and
        converter exceptions all return fallback. Misses are logged at
        DEBUG level as diagnostics.

        Args:
            group_key: Top-level key
            item_key: Key within the group
            fallback: Value returned when the lookup or conversion fails
            target_type: Requested type; object (default) or typing.Any
                return the raw string

        Returns:
            Converted value, raw string, or fallback
        """
        if not group_key:
            self._log_miss(ErrorTemplate.group_key_empty(self.english_name))
            return fallback
        if not item_key:
            self._log_miss(ErrorTemplate.item_key_empty(group_key, self.english_name))
            return fallback

        # Table keys are always str; other key types can only miss
        items = self.data.get(group_key) if isinstance(group_key, str) else None
        if items is None:
            self._log_miss(
                ErrorTemplate.group_not_found(group_key, self.english_name, self.culture_id)
            )
            return fallback

        raw = items.get(item_key) if isinstance(item_key, str) else None
        if raw is None:
            self._log_miss(
                ErrorTemplate.item_not_found(
                    group_key, item_key, self.english_name, self.culture_id
                )
            )
            return fallback

        if is_any_type(target_type):
            return raw

        try:
            return convert_string(raw, target_type, self.converters)
        except ConversionError as e:
            logger.debug(
                "Failed to translate text %r in pack %s: %s", raw, self.english_name, e
            )
            return fallback

    @staticmethod
    def _log_miss(diagnostic: Diagnostic) -> None:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("%s", diagnostic.format_error())


def create_default_pack() -> LanguagePack:
    """Create the process Default pack from the host culture.

    The Default pack holds no items; resolving against it always returns
    the caller's fallback. It carries the host culture's identity and
    display names so UIs can still show which culture is in effect.
    """
    return LanguagePack.for_culture(get_system_culture())
