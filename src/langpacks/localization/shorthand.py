"""Shorthand lookups: "10,Header" -> get_string("10", "Header").

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from langpacks.constants import DEFAULT_SEPARATOR
from langpacks.localization.current import get_current_session

if TYPE_CHECKING:
    from langpacks.localization.session import LocalizationSession

__all__ = ["localize"]


def localize(
    text: str | None,
    fallback: str = "",
    separator: str = DEFAULT_SEPARATOR,
    *,
    session: LocalizationSession | None = None,
) -> str:
    """Localize a "<group><separator><item>" string.

    Empty or None text means no lookup was requested and yields "" (not
    fallback). Text without the separator is a caller error and raises
    IndexError. With more than one separator, the first two parts are used.

    Args:
        text: Group key and item key joined by separator
        fallback: Returned when the lookup misses
        separator: Separator between the keys (default: ",")
        session: Session to query (default: the process-wide session)

    Returns:
        Translated string, fallback, or ""

    Example:
        >>> localize("10,Header")
        'Hello'
        >>> localize("")
        ''
    """
    if not text:
        return ""

    parts = text.split(separator)
    target = session if session is not None else get_current_session()
    return target.get_string(parts[0], parts[1], fallback)
