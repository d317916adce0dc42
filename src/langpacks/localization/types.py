"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the localization package
and by user code when annotating lookup call sites.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable, Mapping
from os import PathLike
from typing import TypeAlias

from langpacks.enums import ChangeKind

__all__ = [
    "ChangeObserver",
    "CultureId",
    "GroupKey",
    "ItemKey",
    "PackData",
    "PackPath",
]

CultureId: TypeAlias = str
"""Culture identifier (e.g., 'en-us', 'id-id', 'zh-Hans-CN')."""

GroupKey: TypeAlias = str
"""Top-level key of a pack: a screen or feature name (e.g., '10', 'MainWindow')."""

ItemKey: TypeAlias = str
"""Second-level key of a pack identifying one string (e.g., 'Header')."""

PackData: TypeAlias = Mapping[GroupKey, Mapping[ItemKey, str]]
"""Two-level translation table: group key -> item key -> raw string."""

PackPath: TypeAlias = str | PathLike[str]
"""Filesystem location of a pack file or scan directory."""

ChangeObserver: TypeAlias = Callable[[ChangeKind], None]
"""Callback notified when the active pack of a session changes."""
