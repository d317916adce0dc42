"""Process-wide session (composition root).

Holds the one LocalizationSession shared by code that does not receive a
session explicitly, and the module-level accessors bound to it. Everything
else in langpacks takes its registry or session as an argument.

The session is created lazily on first access with a fresh PackRegistry.
Hosts that build their own session (tests, multi-tenant servers) install it
with set_current_session().

Python 3.13+.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from langpacks.constants import DEFAULT_CULTURE, DEFAULT_SCAN_PATH
from langpacks.localization.session import LocalizationSession

if TYPE_CHECKING:
    from langpacks.localization.config import ScanConfig
    from langpacks.localization.loading import LoadSummary
    from langpacks.localization.types import CultureId, GroupKey, ItemKey, PackPath

__all__ = [
    "get_current_session",
    "get_string",
    "initialize",
    "set_current_session",
]

_current: LocalizationSession | None = None
_current_lock = threading.Lock()


def get_current_session() -> LocalizationSession:
    """Return the process-wide session, creating it on first use."""
    global _current  # noqa: PLW0603
    session = _current
    if session is not None:
        return session
    with _current_lock:
        if _current is None:
            _current = LocalizationSession()
        return _current


def set_current_session(session: LocalizationSession | None) -> None:
    """Install session as the process-wide session.

    Passing None drops the current session; the next access creates a new
    one with an empty registry.
    """
    global _current  # noqa: PLW0603
    with _current_lock:
        _current = session


def initialize(
    scan_path: PackPath | None = DEFAULT_SCAN_PATH,
    default_culture: CultureId = DEFAULT_CULTURE,
    *,
    config: ScanConfig | None = None,
) -> LoadSummary:
    """Initialize the process-wide session.

    See LocalizationSession.initialize().
    """
    return get_current_session().initialize(scan_path, default_culture, config=config)


def get_string(
    group_key: GroupKey | None, item_key: ItemKey | None, fallback: str = ""
) -> str:
    """Look up a string in the process-wide session's active pack. Never raises."""
    return get_current_session().get_string(group_key, item_key, fallback)
