"""Registry of language packs keyed by culture identity.

The registry owns every registered LanguagePack and resolves culture ids
to packs, falling back to a Default pack derived from the host culture
whenever no pack is registered.

Keys are normalized culture ids, so "en-US", "en_us" and "EN-us" address
the same pack. Registering a culture again replaces the previous pack in a
single dict store: readers see either the old pack or the new one.

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from langpacks.diagnostics import ErrorTemplate, InvalidArgumentError
from langpacks.locale_utils import normalize_culture_id
from langpacks.localization.pack import LanguagePack, create_default_pack

if TYPE_CHECKING:
    from collections.abc import Iterator

    from langpacks.localization.types import CultureId

__all__ = ["PackRegistry"]

logger = logging.getLogger(__name__)


class PackRegistry:
    """Mapping from culture identity to LanguagePack with a Default fallback.

    Example:
        >>> registry = PackRegistry()
        >>> pack = LanguagePack("en-us", {"10": {"Header": "Hello"}})
        >>> registry.register(pack)
        >>> registry.resolve("en-US") is pack
        True
        >>> registry.resolve("zz-zz") is registry.default_pack
        True
    """

    __slots__ = ("_default_pack", "_packs")

    def __init__(self, default_pack: LanguagePack | None = None) -> None:
        """Initialize registry.

        Args:
            default_pack: Pack returned for unregistered cultures
                (default: empty pack for the host culture)
        """
        self._packs: dict[str, LanguagePack] = {}
        self._default_pack = default_pack if default_pack is not None else create_default_pack()

    def __repr__(self) -> str:
        return f"PackRegistry(cultures={self.cultures!r}, default={self._default_pack.culture_id!r})"

    def __len__(self) -> int:
        return len(self._packs)

    def __iter__(self) -> Iterator[LanguagePack]:
        """Iterate registered packs in registration order."""
        return iter(tuple(self._packs.values()))

    def __contains__(self, culture_id: object) -> bool:
        if not isinstance(culture_id, str) or not culture_id:
            return False
        return normalize_culture_id(culture_id) in self._packs

    @property
    def default_pack(self) -> LanguagePack:
        """Pack returned when resolution finds no registered pack."""
        return self._default_pack

    @property
    def cultures(self) -> tuple[CultureId, ...]:
        """Culture ids of registered packs, as declared by each pack."""
        return tuple(pack.culture_id for pack in tuple(self._packs.values()))

    def register(self, pack: LanguagePack) -> None:
        """Register pack under its culture id, replacing any previous pack.

        Args:
            pack: Pack with a culture id

        Raises:
            InvalidArgumentError: If pack is None or has no culture id
        """
        if pack is None:
            raise InvalidArgumentError(
                ErrorTemplate.invalid_argument("pack", "pack must not be None")
            )
        if not pack.key:
            raise InvalidArgumentError(
                ErrorTemplate.invalid_argument("pack", "pack has no culture id")
            )

        previous = self._packs.get(pack.key)
        self._packs[pack.key] = pack
        if previous is not None and previous is not pack:
            logger.info("Replaced language pack %s (%s)", pack.culture_id, pack.english_name)
        else:
            logger.info("Registered language pack %s (%s)", pack.culture_id, pack.english_name)

    def unregister(self, culture_id: CultureId) -> LanguagePack | None:
        """Remove and return the pack registered for culture_id, if any."""
        if not culture_id:
            return None
        return self._packs.pop(normalize_culture_id(culture_id), None)

    def get(self, culture_id: CultureId | None) -> LanguagePack | None:
        """Return the pack registered for culture_id, or None."""
        if not culture_id or not isinstance(culture_id, str):
            return None
        return self._packs.get(normalize_culture_id(culture_id))

    def resolve(self, culture_id: CultureId | None) -> LanguagePack:
        """Return the pack registered for culture_id, or the Default pack.

        Never raises.
        """
        pack = self.get(culture_id)
        return pack if pack is not None else self._default_pack

    def clear(self) -> None:
        """Remove all registered packs. The Default pack is kept."""
        self._packs.clear()
