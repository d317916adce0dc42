"""Enumerations for langpacks type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class LoadStatus(StrEnum):
    """Outcome of loading a single pack file.

    StrEnum provides automatic string conversion: str(LoadStatus.SUCCESS) == "success"
    """

    SUCCESS = "success"
    """File parsed into a pack with at least one item."""

    EMPTY = "empty"
    """File parsed but holds no items; the pack is never registered."""

    UNSUPPORTED = "unsupported"
    """Extension has no loader; the file was skipped without being read."""

    ERROR = "error"
    """File could not be read or did not describe a valid pack."""


class PackFormat(StrEnum):
    """On-disk format handled by a pack loader.

    StrEnum provides automatic string conversion: str(PackFormat.XML) == "xml"
    """

    XML = "xml"
    """Markup pack: groups as elements, items as child elements or attributes."""

    JSON = "json"
    """Object-of-objects-of-strings pack under a header object."""

    NULL = "null"
    """Any unrecognized format; loads nothing."""


class ChangeKind(StrEnum):
    """Property reported to session observers when the active pack changes.

    Values match the property names UI bindings listen for.
    """

    CULTURE = "Culture"
    """Active culture switched (set_culture / set_pack)."""

    LANGUAGE_PACK = "LanguagePack"
    """Active culture unchanged but the pack bound to it was replaced."""


__all__ = [
    "ChangeKind",
    "LoadStatus",
    "PackFormat",
]
