"""Active-culture session over a PackRegistry.

LocalizationSession holds the active culture and the pack bound to it,
exposes culture switching as its single mutation point, and notifies
observers when the active pack changes.

Key architectural decisions:
- Registry injected at construction (no ambient global state)
- The (culture, pack) pair is one immutable SessionState, swapped in a
  single assignment so readers never see a mismatched pair
- Transitions are computed by the pure function switch_culture() and
  serialized by a reentrant lock; observers are notified after the lock
  is released
- Lookups are total: get_string() and translate() never raise

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from langpacks.constants import DEFAULT_CULTURE, DEFAULT_SCAN_PATH
from langpacks.diagnostics import ErrorTemplate, InvalidArgumentError
from langpacks.enums import ChangeKind
from langpacks.locale_utils import get_system_culture, normalize_culture_id
from langpacks.localization.config import ScanConfig
from langpacks.localization.loading import LoadSummary, PackLoadResult, load_pack
from langpacks.localization.registry import PackRegistry
from langpacks.localization.scanning import scan_pack_files

if TYPE_CHECKING:
    from collections.abc import Callable

    from langpacks.localization.pack import LanguagePack
    from langpacks.localization.types import (
        ChangeObserver,
        CultureId,
        GroupKey,
        ItemKey,
        PackPath,
    )

__all__ = ["LocalizationSession", "SessionState", "switch_culture"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SessionState:
    """Active culture and the pack bound to it.

    Attributes:
        culture_id: Requested culture id as passed by the caller; None until
            the first switch
        pack: Pack resolved for culture_id (the Default pack when none is
            registered)
    """

    culture_id: CultureId | None
    pack: LanguagePack

    @property
    def key(self) -> str | None:
        """Normalized culture id, or None before the first switch."""
        return normalize_culture_id(self.culture_id) if self.culture_id else None


def switch_culture(
    state: SessionState, culture_id: CultureId, registry: PackRegistry
) -> tuple[SessionState, bool]:
    """Compute the state after switching to culture_id.

    Pure function: reads the registry, mutates nothing.

    Args:
        state: Current state
        culture_id: Requested culture (non-empty)
        registry: Registry resolving culture_id

    Returns:
        Tuple of (new_state, changed). When the culture is already active,
        returns (state, False). Unknown cultures bind the registry's Default
        pack and still count as a change.
    """
    if state.key == normalize_culture_id(culture_id):
        return (state, False)
    return (SessionState(culture_id, registry.resolve(culture_id)), True)


class LocalizationSession:
    """Active culture, active pack, and change notification.

    Example:
        >>> registry = PackRegistry()
        >>> registry.register(LanguagePack("en-us", {"10": {"Header": "Hello"}}))
        >>> session = LocalizationSession(registry)
        >>> session.set_culture("en-us")
        >>> session.get_string("10", "Header", "x")
        'Hello'
        >>> session.get_string("10", "Missing", "x")
        'x'

    Attributes:
        registry: Registry the session resolves cultures against
    """

    __slots__ = ("_lock", "_observers", "_registry", "_state")

    def __init__(self, registry: PackRegistry | None = None) -> None:
        """Initialize session.

        Args:
            registry: Registry to resolve cultures against
                (default: a new, empty PackRegistry)
        """
        self._registry = registry if registry is not None else PackRegistry()
        self._state = SessionState(None, self._registry.default_pack)
        self._observers: list[ChangeObserver] = []
        self._lock = threading.RLock()

    def __repr__(self) -> str:
        state = self._state
        return (
            f"LocalizationSession(culture={state.culture_id!r}, "
            f"pack={state.pack.culture_id!r}, registered={len(self._registry)})"
        )

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def registry(self) -> PackRegistry:
        """Registry the session resolves cultures against."""
        return self._registry

    @property
    def state(self) -> SessionState:
        """Snapshot of the active (culture, pack) pair."""
        return self._state

    @property
    def culture(self) -> CultureId:
        """Active culture id.

        Before the first switch, reports the host culture without storing
        it, so the first set_culture() always binds a pack.
        """
        culture_id = self._state.culture_id
        return culture_id if culture_id else get_system_culture()

    @property
    def language_pack(self) -> LanguagePack:
        """Active pack (the registry's Default pack when none is bound)."""
        return self._state.pack

    def available_packs(self) -> tuple[LanguagePack, ...]:
        """Registered packs in registration order (for language pickers)."""
        return tuple(self._registry)

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def add_observer(self, observer: ChangeObserver) -> Callable[[], None]:
        """Subscribe observer to active pack changes.

        Args:
            observer: Called with a ChangeKind after each change

        Returns:
            Callable that unsubscribes observer
        """
        with self._lock:
            self._observers.append(observer)

        def unsubscribe() -> None:
            self.remove_observer(observer)

        return unsubscribe

    def remove_observer(self, observer: ChangeObserver) -> None:
        """Unsubscribe observer. Unknown observers are ignored."""
        with self._lock:
            if observer in self._observers:
                self._observers.remove(observer)

    def _notify(self, kind: ChangeKind) -> None:
        with self._lock:
            observers = tuple(self._observers)
        for observer in observers:
            observer(kind)

    # ------------------------------------------------------------------
    # Switching
    # ------------------------------------------------------------------

    def set_culture(self, culture_id: CultureId) -> None:
        """Activate the pack registered for culture_id.

        No-op when culture_id is already active. Unknown cultures bind the
        Default pack; culture still reports culture_id afterwards.

        Args:
            culture_id: Culture to activate

        Raises:
            InvalidArgumentError: If culture_id is None or empty
        """
        if not culture_id or not isinstance(culture_id, str) or not culture_id.strip():
            raise InvalidArgumentError(
                ErrorTemplate.invalid_argument("culture_id", "culture must not be empty")
            )

        with self._lock:
            new_state, changed = switch_culture(self._state, culture_id, self._registry)
            if changed:
                self._state = new_state
        if not changed:
            return

        if new_state.pack is self._registry.default_pack and culture_id not in self._registry:
            logger.info("No language pack for %s; using default pack", culture_id)
        else:
            logger.info("Activated language pack %s", culture_id)
        self._notify(ChangeKind.CULTURE)

    def set_pack(self, pack: LanguagePack) -> None:
        """Activate pack directly, bypassing registry resolution.

        No-op when pack is already the active pack object.

        Args:
            pack: Pack to activate

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

        with self._lock:
            if self._state.pack is pack:
                return
            self._state = SessionState(pack.culture_id, pack)

        logger.info("Activated language pack %s (direct)", pack.culture_id)
        self._notify(ChangeKind.CULTURE)

    def refresh(self) -> bool:
        """Rebind the active culture after the registry changed.

        Returns:
            True if a different pack was bound (observers notified with
            ChangeKind.LANGUAGE_PACK), False otherwise
        """
        with self._lock:
            state = self._state
            if state.culture_id is None:
                return False
            pack = self._registry.resolve(state.culture_id)
            if pack is state.pack:
                return False
            self._state = SessionState(state.culture_id, pack)

        logger.info("Rebound language pack for %s", state.culture_id)
        self._notify(ChangeKind.LANGUAGE_PACK)
        return True

    # ------------------------------------------------------------------
    # Initialization
    # ------------------------------------------------------------------

    def initialize(
        self,
        scan_path: PackPath | None = DEFAULT_SCAN_PATH,
        default_culture: CultureId = DEFAULT_CULTURE,
        *,
        config: ScanConfig | None = None,
    ) -> LoadSummary:
        """Scan, load and register packs, then activate default_culture.

        Args:
            scan_path: Directory holding pack files; None skips scanning.
                Relative paths that do not exist under the working directory
                are retried under config.base_dir.
            default_culture: Culture to activate afterwards
            config: Scan configuration (default: ScanConfig())

        Returns:
            LoadSummary of every file found (empty when scanning is skipped)

        Raises:
            LocalizationConfigError: If scan_path cannot be resolved
            InvalidArgumentError: If default_culture is None or empty
        """
        scan_config = config if config is not None else ScanConfig()
        results: list[PackLoadResult] = []

        if scan_path is not None:
            for path in scan_pack_files(scan_path, scan_config):
                result = load_pack(path, scan_config.max_file_size)
                results.append(result)
                if result.is_success and result.pack is not None:
                    self._registry.register(result.pack)

        summary = LoadSummary(results=tuple(results))
        if results:
            logger.info("Scanned %s: %r", scan_path, summary)

        self.set_culture(default_culture)
        self.refresh()
        return summary

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def translate(
        self,
        group_key: GroupKey | None,
        item_key: ItemKey | None,
        fallback: Any = None,
        target_type: object = object,
    ) -> Any:
        """Typed lookup against the active pack.

        Returns fallback on any failure, including a converter that raises.
        See LanguagePack.translate() for the resolution rules.
        """
        pack = self._state.pack
        try:
            return pack.translate(group_key, item_key, fallback, target_type)
        except Exception:  # pylint: disable=broad-exception-caught
            logger.debug(
                "Error with LocalizationSession.translate(%r, %r)",
                group_key,
                item_key,
                exc_info=True,
            )
            return fallback

    def get_string(
        self,
        group_key: GroupKey | None,
        item_key: ItemKey | None,
        fallback: str = "",
    ) -> str:
        """Look up a plain string in the active pack. Never raises.

        Args:
            group_key: Top-level key (e.g., "10")
            item_key: Key within the group (e.g., "Header")
            fallback: Returned for any miss (default: "")

        Returns:
            Stored string, or fallback
        """
        result: str = self.translate(group_key, item_key, fallback, str)
        return result
