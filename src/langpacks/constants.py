"""Shared constants for langpacks.

Centralized defaults used by the loaders, the registry and the session.
Placing them here avoids circular imports and provides a single source of
truth for every module that needs them.

Constants are grouped by domain:
- Entry point defaults: values used when the host passes no configuration
- Input limits: size constraints applied before a pack file is parsed
- Pack file formats: extensions recognized by the loaders

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Entry point defaults
    "DEFAULT_SCAN_PATH",
    "DEFAULT_CULTURE",
    "DEFAULT_SEPARATOR",
    "FALLBACK_CULTURE",
    # Input limits
    "MAX_PACK_FILE_SIZE",
    # Pack file formats
    "XML_EXTENSION",
    "JSON_EXTENSION",
    "PACK_EXTENSIONS",
    # Pack header fields
    "FIELD_CULTURE_ID",
    "FIELD_CULTURE_NAME",
    "FIELD_ENGLISH_NAME",
    "FIELD_VERSION",
    "FIELD_DATA",
    "FIELD_ID",
]

# ============================================================================
# ENTRY POINT DEFAULTS
# ============================================================================

# Directory scanned by initialize() when the host does not pass one.
# Resolved as given first, then relative to the application directory.
DEFAULT_SCAN_PATH: str = "Assets"

# Culture activated by initialize() when the host does not pass one.
DEFAULT_CULTURE: str = "en-us"

# Separator between group key and item key in the "10,Header" shorthand.
DEFAULT_SEPARATOR: str = ","

# Culture reported when the host locale cannot be detected at all.
FALLBACK_CULTURE: str = "en-us"

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum pack file size in bytes (10 MB).
# Pack files are read whole into memory; larger files are rejected unread.
MAX_PACK_FILE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# PACK FILE FORMATS
# ============================================================================

XML_EXTENSION: str = ".xml"
JSON_EXTENSION: str = ".json"

# Extensions picked up by the directory scanner (compared case-insensitively).
PACK_EXTENSIONS: tuple[str, ...] = (XML_EXTENSION, JSON_EXTENSION)

# Header fields shared by the XML attributes and the JSON object keys.
FIELD_CULTURE_ID: str = "CultureId"
FIELD_CULTURE_NAME: str = "CultureName"
FIELD_ENGLISH_NAME: str = "EnglishName"
FIELD_VERSION: str = "Version"
FIELD_DATA: str = "Data"
FIELD_ID: str = "Id"
