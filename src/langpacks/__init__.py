"""langpacks - per-culture language packs with typed, total lookups.

Loads language packs (two-level group/item string tables) from XML and JSON
files, registers them by culture, and resolves (group, item) pairs against
the active culture with a caller-supplied fallback for every miss.

Public API:
    initialize - Scan a directory, register packs, activate a culture
    get_string - Process-wide string lookup (never raises)
    localize - "group,item" shorthand lookup
    LanguagePack - Translation table for one culture
    PackRegistry - Culture id -> pack mapping with a Default pack
    LocalizationSession - Active culture, switching, change notification
    ConverterRegistry - String-to-type converters for typed lookups

Exceptions:
    LocalizationError - Base exception class
    LocalizationConfigError - Scan directory cannot be resolved
    InvalidArgumentError - Absent culture or pack on direct activation

Submodules:
    langpacks.localization - Pack model, loaders, registry, session
    langpacks.conversion - String-to-type conversion
    langpacks.diagnostics - Diagnostic codes, templates and error types
    langpacks.locale_utils - Culture id normalization and CLDR display names
"""

# Essential Public API - Minimal exports for clean namespace
from .conversion import ConverterRegistry
from .diagnostics import (
    ConversionError,
    InvalidArgumentError,
    LocalizationConfigError,
    LocalizationError,
    PackLoadError,
)
from .enums import ChangeKind, LoadStatus
from .localization import (
    LanguagePack,
    LocalizationSession,
    PackRegistry,
    ScanConfig,
    get_current_session,
    get_string,
    initialize,
    localize,
    set_current_session,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("langpacks")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ChangeKind",
    "ConversionError",
    "ConverterRegistry",
    "InvalidArgumentError",
    "LanguagePack",
    "LoadStatus",
    "LocalizationConfigError",
    "LocalizationError",
    "LocalizationSession",
    "PackLoadError",
    "PackRegistry",
    "ScanConfig",
    "__version__",
    "get_current_session",
    "get_string",
    "initialize",
    "localize",
    "set_current_session",
]
