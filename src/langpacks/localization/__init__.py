"""Language pack localization package.

Provides the full localization stack: type aliases, pack model, loaders,
registry, active-culture session, and the process-wide accessors.

Submodules:
    types        - PEP 695 type aliases (CultureId, GroupKey, ItemKey, PackData, ...)
    config       - ScanConfig (pack discovery settings)
    pack         - LanguagePack, create_default_pack
    loading      - PackLoader protocol, XmlPackLoader, JsonPackLoader, NullPackLoader,
                   loader_for_path, load_pack, PackLoadResult, LoadSummary
    scanning     - scan directory resolution and file enumeration
    registry     - PackRegistry
    session      - LocalizationSession, SessionState, switch_culture
    current      - process-wide session and module-level accessors
    shorthand    - localize("group,item")

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from langpacks.enums import ChangeKind, LoadStatus, PackFormat
from langpacks.localization.config import ScanConfig
from langpacks.localization.current import (
    get_current_session,
    get_string,
    initialize,
    set_current_session,
)
from langpacks.localization.loading import (
    JsonPackLoader,
    LoadSummary,
    NullPackLoader,
    PackLoader,
    PackLoadResult,
    XmlPackLoader,
    load_pack,
    loader_for_path,
)
from langpacks.localization.pack import LanguagePack, create_default_pack
from langpacks.localization.registry import PackRegistry
from langpacks.localization.session import LocalizationSession, SessionState, switch_culture
from langpacks.localization.shorthand import localize
from langpacks.localization.types import (
    ChangeObserver,
    CultureId,
    GroupKey,
    ItemKey,
    PackData,
    PackPath,
)

__all__ = [
    # Pack model
    "LanguagePack",
    "create_default_pack",
    # Registry and session
    "PackRegistry",
    "LocalizationSession",
    "SessionState",
    "switch_culture",
    "ChangeKind",
    # Loaders
    "PackLoader",
    "XmlPackLoader",
    "JsonPackLoader",
    "NullPackLoader",
    "loader_for_path",
    "load_pack",
    "PackFormat",
    # Load tracking
    "LoadStatus",
    "LoadSummary",
    "PackLoadResult",
    # Configuration
    "ScanConfig",
    # Process-wide accessors
    "get_current_session",
    "set_current_session",
    "initialize",
    "get_string",
    "localize",
    # Type aliases for user code type annotations
    "ChangeObserver",
    "CultureId",
    "GroupKey",
    "ItemKey",
    "PackData",
    "PackPath",
]
